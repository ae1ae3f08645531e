import math
from typing import Optional

from ._constants import DEGENERACY_CUTOFF, NEAR_ZERO_THRESHOLD
from ._root_set import CubicRoots, RootSet

_SQRT_3_OVER_2 = math.sqrt(0.75)


def cubic_roots(
    b: float,
    c: float,
    d: float,
    *,
    near_zero: Optional[float] = None,
) -> CubicRoots:
    """Roots of the monic cubic x^3 + b*x^2 + c*x + d.

    Parameters
    ----------
    b, c, d : float
        Coefficients of the monic cubic.
    near_zero : float, optional
        Threshold separating the one-real-root and three-real-root cases,
        and below which the depressed constant term is treated as zero.
        Defaults to ``NEAR_ZERO_THRESHOLD``.

    Returns
    -------
    CubicRoots
        The three roots and the largest real root.

    Notes
    -----
    With the shift :math:`x = y - s`, :math:`s = b/3`, the cubic becomes
    :math:`y^3 + p y + q = 0`. Writing :math:`h = q/2` and
    :math:`k = -p/3`, the discriminant is :math:`\\Delta = h^2 - k^3`.

    For :math:`\\Delta > 0` there is one real root, found with Cardano's
    formula. The cube root takes the sign opposite to :math:`h`, so the two
    terms :math:`u` and :math:`v = k/u` never cancel.

    Otherwise all three roots are real and are given by

    .. math::
        y_j = \\pm 2\\sqrt{k}\\cos\\left(\\theta/3 + 2\\pi j/3\\right),
        \\quad \\theta = \\arctan\\left(\\sqrt{|\\Delta|} / |h|\\right)

    The arctangent form stays well conditioned where an arccosine would
    lose accuracy. When :math:`h \\approx 0` the limiting angle
    :math:`\\theta/3 = \\pi/6` is used.

    Examples
    --------
    >>> result = cubic_roots(-3.0, 3.0, -1.0)  # (x - 1)^3
    >>> result.largest_real
    1.0
    """
    if near_zero is None:
        near_zero = NEAR_ZERO_THRESHOLD

    s = b / 3.0
    h = (2.0 * b * b * b / 27.0 - b * c / 3.0 + d) / 2.0
    k = (b * b / 3.0 - c) / 3.0
    delta = h * h - k * k * k

    if delta > near_zero:
        u = (math.sqrt(delta) + abs(h)) ** (1.0 / 3.0)
        if u != 0.0:
            u = -u if h > 0.0 else u
            v = k / u
        else:
            v = 0.0

        real_root = u + v - s
        re = -0.5 * (u + v) - s
        im = _SQRT_3_OVER_2 * (u - v)

        # Just past the three-real-root boundary the conjugate pair is a
        # split double root, which may be the largest
        largest = real_root
        if abs(im) < DEGENERACY_CUTOFF * max(1.0, abs(re)):
            largest = max(real_root, re)

        return CubicRoots(
            roots=RootSet(real=(real_root, re, re), imag=(0.0, im, -im)),
            largest_real=largest,
        )

    if abs(h) < near_zero:
        angle = math.pi / 6.0
    else:
        angle = math.atan(math.sqrt(abs(delta)) / abs(h)) / 3.0

    # k can dip just below zero when h ~ 0 and delta ~ 0
    scale = 2.0 * math.sqrt(max(k, 0.0))
    if h > 0.0:
        scale = -scale

    y0 = scale * math.cos(angle)
    y1 = -scale * _SQRT_3_OVER_2 * math.sin(angle) - 0.5 * y0
    y2 = -y1 - y0

    # For a positive scale y0 carries the largest cosine; for a negative
    # scale y1 carries the most negative one.
    largest = y0 if scale >= 0.0 else y1

    return CubicRoots(
        roots=RootSet(real=(y0 - s, y1 - s, y2 - s), imag=(0.0, 0.0, 0.0)),
        largest_real=largest - s,
    )
