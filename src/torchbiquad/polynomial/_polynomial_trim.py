from typing import Optional

from ._constants import NEAR_ZERO_THRESHOLD
from ._polynomial import Polynomial


def polynomial_trim(
    p: Polynomial,
    tol: Optional[float] = None,
    *,
    monic: bool = True,
) -> Polynomial:
    """Reduce a polynomial to its effective degree.

    Parameters
    ----------
    p : Polynomial
        Input polynomial, highest degree first.
    tol : float, optional
        Relative tolerance for treating a coefficient as zero. A coefficient
        is dropped when its magnitude is at most ``tol * max(|coeffs|)``.
        Defaults to ``NEAR_ZERO_THRESHOLD``.
    monic : bool, default True
        If True, divide through by the leading coefficient.

    Returns
    -------
    Polynomial
        Reduced polynomial. The zero polynomial reduces to ``(0.0,)``.

    Notes
    -----
    Near-zero low-order coefficients are removed first. Each one removed
    corresponds to a root at the origin, which is deflated away. Near-zero
    leading coefficients are then removed, lowering the degree and shifting
    the remaining coefficients up.
    """
    if tol is None:
        tol = NEAR_ZERO_THRESHOLD

    coeffs = list(p.coeffs)

    scale = max(abs(c) for c in coeffs)
    if scale == 0.0:
        return Polynomial(coeffs=(0.0,))

    cutoff = tol * scale

    # Roots at the origin
    while len(coeffs) > 1 and abs(coeffs[-1]) <= cutoff:
        coeffs.pop()

    # Roots at infinity
    while len(coeffs) > 1 and abs(coeffs[0]) <= cutoff:
        coeffs.pop(0)

    if monic:
        leading = coeffs[0]
        coeffs = [1.0] + [c / leading for c in coeffs[1:]]

    return Polynomial(coeffs=tuple(coeffs))
