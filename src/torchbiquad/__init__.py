"""torchbiquad: cascaded biquad IIR filter design for PyTorch."""

from . import (
    polynomial,
    signal_processing,
)

__all__ = [
    "polynomial",
    "signal_processing",
]

__version__ = "0.1.0"
