"""Closed-form real polynomial root finding for degrees 1 through 4."""

from ._constants import (
    DEGENERACY_CUTOFF,
    MAXIMUM_DEGREE,
    NEAR_ZERO_THRESHOLD,
)
from ._cubic_roots import cubic_roots
from ._degree_error import DegreeError
from ._linear_roots import linear_roots
from ._polynomial import Polynomial, polynomial
from ._polynomial_error import PolynomialError
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_roots import polynomial_roots
from ._polynomial_trim import polynomial_trim
from ._quadratic_roots import quadratic_roots
from ._quartic_roots import quartic_roots
from ._root_set import CubicRoots, RootSet, root_set

__all__ = [
    "CubicRoots",
    "Polynomial",
    "RootSet",
    "cubic_roots",
    "linear_roots",
    "polynomial",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_roots",
    "polynomial_trim",
    "quadratic_roots",
    "quartic_roots",
    "root_set",
    # Constants
    "DEGENERACY_CUTOFF",
    "MAXIMUM_DEGREE",
    "NEAR_ZERO_THRESHOLD",
    # Exceptions
    "DegreeError",
    "PolynomialError",
]
