from typing import Iterable, Optional, Union

from ._constants import MAXIMUM_DEGREE, NEAR_ZERO_THRESHOLD
from ._cubic_roots import cubic_roots
from ._degree_error import DegreeError
from ._linear_roots import linear_roots
from ._polynomial import Polynomial, polynomial
from ._polynomial_trim import polynomial_trim
from ._quadratic_roots import quadratic_roots
from ._quartic_roots import quartic_roots
from ._root_set import RootSet


def polynomial_roots(
    p: Union[Polynomial, Iterable[float]],
    *,
    near_zero: Optional[float] = None,
) -> RootSet:
    """Find the roots of a real polynomial of degree 1 to 4 in closed form.

    Parameters
    ----------
    p : Polynomial or iterable of float
        Polynomial with descending coefficients. Its nominal degree
        (``len(coeffs) - 1``) must be between 1 and 4.
    near_zero : float, optional
        Degeneracy threshold used for degree reduction and by the
        individual solvers. Defaults to ``NEAR_ZERO_THRESHOLD``.

    Returns
    -------
    RootSet
        One root per degree of the reduced polynomial. Roots at the origin
        removed by the reduction are not reported, and a polynomial that
        reduces to a constant yields an empty RootSet.

    Raises
    ------
    DegreeError
        If the nominal degree is less than 1 or greater than 4.

    Examples
    --------
    >>> polynomial_roots([1.0, -3.0, 2.0]).real  # (x - 1)(x - 2)
    (2.0, 1.0)

    >>> # Leading zeros lower the degree
    >>> polynomial_roots([0.0, 0.0, 2.0, -4.0]).real
    (2.0,)

    Notes
    -----
    Degree 2 uses :func:`quadratic_roots`, degree 3 :func:`cubic_roots`
    and degree 4 :func:`quartic_roots` (Ferrari's method). The computation
    runs in bounded time and never raises once the degree has been
    accepted.
    """
    if not isinstance(p, Polynomial):
        p = polynomial(p)

    if p.degree < 1 or p.degree > MAXIMUM_DEGREE:
        raise DegreeError(
            f"Closed-form root finding supports degree 1 to {MAXIMUM_DEGREE}, "
            f"got degree {p.degree}"
        )

    if near_zero is None:
        near_zero = NEAR_ZERO_THRESHOLD

    reduced = polynomial_trim(p, tol=near_zero)
    coeffs = reduced.coeffs
    degree = reduced.degree

    if degree == 0:
        return RootSet()
    elif degree == 1:
        return linear_roots(coeffs[1])
    elif degree == 2:
        return quadratic_roots(coeffs[1], coeffs[2], near_zero=near_zero)
    elif degree == 3:
        return cubic_roots(
            coeffs[1], coeffs[2], coeffs[3], near_zero=near_zero
        ).roots
    else:
        return quartic_roots(
            coeffs[1], coeffs[2], coeffs[3], coeffs[4], near_zero=near_zero
        )
