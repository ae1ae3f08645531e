from dataclasses import dataclass
from typing import Iterable, Tuple

from torchbiquad.polynomial._polynomial_error import PolynomialError


@dataclass(frozen=True)
class Polynomial:
    """Real polynomial in power basis with descending coefficients.

    Represents p(x) = coeffs[0]*x^n + coeffs[1]*x^(n-1) + ... + coeffs[n].

    Attributes
    ----------
    coeffs : tuple of float
        Coefficients, highest degree first. The nominal degree is
        ``len(coeffs) - 1`` even when leading coefficients are zero.

    Examples
    --------
    x^2 - 3x + 2:
        Polynomial(coeffs=(1.0, -3.0, 2.0))

    Calling evaluates:
        p(2.0)  # polynomial_evaluate(p, 2.0)
    """

    coeffs: Tuple[float, ...]

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def __len__(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, index):
        return self.coeffs[index]

    def __iter__(self):
        return iter(self.coeffs)

    def __call__(self, x):
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Iterable[float]) -> Polynomial:
    """Create polynomial from a coefficient sequence.

    Parameters
    ----------
    coeffs : iterable of float
        Coefficients, highest degree first. Must have at least one
        coefficient. Tensors and arrays are accepted.

    Returns
    -------
    Polynomial
        Polynomial instance with float coefficients.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> p = polynomial([1.0, 0.0, 0.0, 0.0, -1.0])  # x^4 - 1
    >>> p.degree
    4
    """
    if hasattr(coeffs, "tolist"):
        coeffs = coeffs.tolist()

    values = tuple(float(c) for c in coeffs)

    if len(values) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=values)
