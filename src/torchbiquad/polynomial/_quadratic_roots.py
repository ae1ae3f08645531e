import math
from typing import Optional

from ._constants import NEAR_ZERO_THRESHOLD
from ._root_set import RootSet


def quadratic_roots(
    b: float,
    c: float,
    *,
    near_zero: Optional[float] = None,
) -> RootSet:
    """Roots of the monic quadratic x^2 + b*x + c.

    Parameters
    ----------
    b, c : float
        Coefficients of the monic quadratic.
    near_zero : float, optional
        Relative threshold. A discriminant smaller in magnitude than
        ``near_zero * (b**2 + 4*|c|)`` is snapped to zero, producing a
        repeated real root. Defaults to ``NEAR_ZERO_THRESHOLD``.

    Returns
    -------
    RootSet
        Two roots. Real roots have ``imag == 0.0``; otherwise a conjugate
        pair with positive imaginary part first.

    Notes
    -----
    Real roots use the cancellation-free form

    .. math::
        q = -\\frac{1}{2}\\left(b + \\operatorname{sgn}(b)\\sqrt{g}\\right),
        \\quad x_1 = q, \\quad x_2 = c / q

    where :math:`g = b^2 - 4c`.
    """
    if near_zero is None:
        near_zero = NEAR_ZERO_THRESHOLD

    g = b * b - 4.0 * c
    if abs(g) < near_zero * (b * b + 4.0 * abs(c)):
        g = 0.0

    if g >= 0.0:
        q = -0.5 * (b + math.copysign(math.sqrt(g), b))
        if q == 0.0:
            return RootSet(real=(0.0, 0.0), imag=(0.0, 0.0))
        return RootSet(real=(q, c / q), imag=(0.0, 0.0))

    re = -0.5 * b
    im = 0.5 * math.sqrt(-g)
    return RootSet(real=(re, re), imag=(im, -im))
