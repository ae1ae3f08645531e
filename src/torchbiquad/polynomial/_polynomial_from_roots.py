from typing import Iterable, List

from ._polynomial import Polynomial


def polynomial_from_roots(
    roots: Iterable[complex],
    leading: float = 1.0,
) -> Polynomial:
    """Construct a real polynomial from its roots.

    Constructs leading * (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : iterable of complex
        Roots. Complex roots must come with their conjugates so that the
        expansion is real.
    leading : float, default 1.0
        Leading coefficient.

    Returns
    -------
    Polynomial
        Polynomial with descending coefficients. Imaginary parts left by
        rounding are discarded.

    Examples
    --------
    >>> polynomial_from_roots([1.0, 2.0]).coeffs  # x^2 - 3x + 2
    (1.0, -3.0, 2.0)
    """
    coeffs: List[complex] = [complex(leading)]

    # Multiply by (x - r) for each root
    for root in roots:
        root = complex(root)
        shifted = coeffs + [0.0]
        scaled = [0.0] + [-root * c for c in coeffs]
        coeffs = [s + t for s, t in zip(shifted, scaled)]

    return Polynomial(coeffs=tuple(c.real for c in coeffs))
