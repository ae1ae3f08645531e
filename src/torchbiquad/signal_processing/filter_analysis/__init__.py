"""Frequency-domain analysis of biquad cascades."""

from ._frequency_response_sos import frequency_response_sos

__all__ = [
    "frequency_response_sos",
]
