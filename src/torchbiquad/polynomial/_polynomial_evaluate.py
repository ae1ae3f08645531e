from typing import Union

from ._polynomial import Polynomial


def polynomial_evaluate(
    p: Polynomial, x: Union[float, complex]
) -> Union[float, complex]:
    """Evaluate polynomial at a point using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with descending coefficients.
    x : float or complex
        Evaluation point.

    Returns
    -------
    float or complex
        p(x).

    Examples
    --------
    >>> polynomial_evaluate(polynomial([1.0, 0.0, -1.0]), 1j)
    (-2+0j)
    """
    result = 0.0
    for c in p.coeffs:
        result = result * x + c
    return result
