"""Testing utilities for torchbiquad."""

from . import strategies

__all__ = [
    "strategies",
]
