"""Hypothesis strategies for polynomial and filter testing."""

from ._conjugate_root_pairs import conjugate_root_pairs
from ._quadratic_factors import quadratic_factors
from ._real_root_pairs import real_root_pairs

__all__ = [
    "conjugate_root_pairs",
    "quadratic_factors",
    "real_root_pairs",
]
