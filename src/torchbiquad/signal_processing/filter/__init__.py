"""Time-domain filtering with biquad cascades."""

from ._lfilter import lfilter
from ._sosfilt import sosfilt

__all__ = [
    "lfilter",
    "sosfilt",
]
