"""Biquad filter design, analysis and filtering."""

from . import filter, filter_analysis, filter_design

__all__ = [
    "filter",
    "filter_analysis",
    "filter_design",
]
