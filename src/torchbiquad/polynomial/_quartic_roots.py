import math
from typing import Optional

from ._constants import NEAR_ZERO_THRESHOLD
from ._cubic_roots import cubic_roots
from ._quadratic_roots import quadratic_roots
from ._root_set import RootSet

_POLISH_STEPS = 2

# Multiple of the rounding bound on p, q and r treated as zero
_ROUNDING_SLACK = 16.0


def quartic_roots(
    b: float,
    c: float,
    d: float,
    e: float,
    *,
    near_zero: Optional[float] = None,
) -> RootSet:
    """Roots of the monic quartic x^4 + b*x^3 + c*x^2 + d*x + e.

    Parameters
    ----------
    b, c, d, e : float
        Coefficients of the monic quartic.
    near_zero : float, optional
        Degeneracy threshold, forwarded to the cubic and quadratic solvers.
        Defaults to ``NEAR_ZERO_THRESHOLD``.

    Returns
    -------
    RootSet
        Four roots. Roots ``[0:2]`` are the roots of one real quadratic
        factor and roots ``[2:4]`` of the other.

    Notes
    -----
    Ferrari's method. The substitution :math:`x = y - b/4` gives the
    depressed quartic :math:`y^4 + p y^2 + q y + r`. It factors as

    .. math::
        (y^2 + w y + \\alpha)(y^2 - w y + \\beta)

    where :math:`v = w^2` is a root of the resolvent cubic

    .. math::
        v^3 + 2p v^2 + (p^2 - 4r) v - q^2 = 0

    and :math:`\\alpha, \\beta = (p + v \\mp q/w)/2`. The largest real root
    of the resolvent is always non-negative; it is polished with at most
    two Newton steps. When :math:`q` is numerically
    zero, or that root is, the quartic is biquadratic in :math:`y` and is
    split using :math:`\\Delta = p^2 - 4r` instead.

    "Numerically zero" is judged against the magnitude of the terms that
    cancel in forming :math:`q` and :math:`\\Delta`. A quartic with a
    repeated pair of roots, such as :math:`(x^2 + kx + 1)^2`, has
    :math:`q = \\Delta = 0` exactly; leaving a few ulps of rounding in
    either would split the pair by the square root of machine epsilon.

    Examples
    --------
    >>> roots = quartic_roots(0.0, 0.0, 0.0, -1.0)  # x^4 - 1
    >>> roots.real[:2]
    (-1.0, 1.0)
    """
    if near_zero is None:
        near_zero = NEAR_ZERO_THRESHOLD

    shift = b / 4.0
    b2 = b * b
    p = c - 3.0 * b2 / 8.0
    q = d - b * c / 2.0 + b2 * b / 8.0
    r = e - b * d / 4.0 + b2 * c / 16.0 - 3.0 * b2 * b2 / 256.0

    # Rounding error in p, q and r is bounded by the terms that cancel
    p_size = abs(c) + 3.0 * b2 / 8.0
    q_size = abs(d) + abs(b * c) / 2.0 + abs(b2 * b) / 8.0
    r_size = (
        abs(e) + abs(b * d) / 4.0 + b2 * abs(c) / 16.0 + 3.0 * b2 * b2 / 256.0
    )

    # Rounding error in the resolvent root grows with the size of the
    # depressed coefficients
    scale = max(1.0, abs(p), math.sqrt(abs(r)))

    # With q = 0 the resolvent has a root at 0 that is double whenever the
    # quartic has a repeated pair, so it is not used
    q_cutoff = max(scale * math.sqrt(scale), _ROUNDING_SLACK * q_size)
    if abs(q) > near_zero * q_cutoff:
        resolvent = cubic_roots(
            2.0 * p, p * p - 4.0 * r, -q * q, near_zero=near_zero
        )
        v = _polish_resolvent_root(resolvent.largest_real, p, q, r)

        if v > near_zero * scale:
            w = math.sqrt(v)
            cross = q / w
            alpha = 0.5 * (p + v - cross)
            beta = 0.5 * (p + v + cross)
            first = quadratic_roots(w, alpha, near_zero=near_zero)
            second = quadratic_roots(-w, beta, near_zero=near_zero)
            return (first + second).shifted(-shift)

    discriminant = p * p - 4.0 * r
    discriminant_cutoff = max(
        scale * scale, _ROUNDING_SLACK * (2.0 * abs(p) * p_size + 4.0 * r_size)
    )
    if abs(discriminant) < near_zero * discriminant_cutoff:
        discriminant = 0.0

    p_cutoff = max(scale, _ROUNDING_SLACK * p_size)
    if discriminant == 0.0 and abs(p) < near_zero * p_cutoff:
        return RootSet(real=(-shift,) * 4, imag=(0.0,) * 4)

    if discriminant >= 0.0:
        root = math.sqrt(discriminant)
        first = quadratic_roots(0.0, 0.5 * (p - root), near_zero=near_zero)
        second = quadratic_roots(0.0, 0.5 * (p + root), near_zero=near_zero)
    else:
        # r > p^2/4 >= 0 here, so both square roots are real
        n = math.sqrt(r)
        w = math.sqrt(max(2.0 * n - p, 0.0))
        first = quadratic_roots(w, n, near_zero=near_zero)
        second = quadratic_roots(-w, n, near_zero=near_zero)

    return (first + second).shifted(-shift)


def _polish_resolvent_root(v: float, p: float, q: float, r: float) -> float:
    """Two Newton steps on the resolvent cubic.

    A small resolvent root fixes the split of a quartic whose two root
    pairs have nearly equal centers. Its closed-form value carries an
    absolute error near machine epsilon, which the polish makes relative.
    """
    linear = p * p - 4.0 * r

    def residual(x: float) -> float:
        return ((x + 2.0 * p) * x + linear) * x - q * q

    value = residual(v)
    for _ in range(_POLISH_STEPS):
        slope = (3.0 * v + 4.0 * p) * v + linear
        if slope == 0.0:
            break
        candidate = v - value / slope
        candidate_value = residual(candidate)
        # Near a double root the step is noise
        if abs(candidate_value) >= abs(value):
            break
        v, value = candidate, candidate_value
    return v
