"""Bessel analog lowpass filter prototype."""

import math
from typing import List, Optional, Tuple

import torch
from torch import Tensor

from ._complex_dtype import complex_dtype

_NEWTON_ITERATIONS = 50
_NEWTON_TOLERANCE = 1e-14


def bessel_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog Bessel lowpass prototype, magnitude normalized.

    The poles are scaled so that the magnitude response is -3 dB at
    1 rad/s, which makes the corner frequency comparable with the other
    prototype families.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty complex tensor.
    poles : Tensor
        Complex tensor of shape (order,).
    gain : Tensor
        Scalar tensor giving unit DC gain.

    Notes
    -----
    The poles are the roots of the reverse Bessel polynomial

    .. math::
        \\theta_n(s) = \\sum_{k=0}^{n}
            \\frac{(2n - k)!}{2^{n-k} k! (n - k)!} s^k

    found as eigenvalues of its companion matrix.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    poles = _companion_roots(_reverse_bessel_coefficients(order), device)

    poles = poles / _half_power_frequency(poles.tolist())

    zeros = torch.zeros(0, dtype=complex_dtype(dtype), device=device)

    gain = torch.prod(-poles).real

    return zeros, poles.to(complex_dtype(dtype)), gain.to(dtype)


def _reverse_bessel_coefficients(n: int) -> List[float]:
    """Coefficients of theta_n, highest power first."""
    return [
        math.factorial(2 * n - k)
        / (2 ** (n - k) * math.factorial(k) * math.factorial(n - k))
        for k in range(n, -1, -1)
    ]


def _companion_roots(coeffs: List[float], device: torch.device) -> Tensor:
    n = len(coeffs) - 1

    monic = torch.tensor(coeffs, dtype=torch.float64, device=device)
    monic = monic / monic[0]

    companion = torch.zeros((n, n), dtype=torch.float64, device=device)
    companion[0, :] = -monic[1:]
    if n > 1:
        companion[1:, :-1] = torch.eye(n - 1, dtype=torch.float64, device=device)

    return torch.linalg.eigvals(companion)


def _half_power_frequency(poles: List[complex]) -> float:
    """Frequency where ``|H(jw)|^2 = 1/2`` for ``H(s) = prod(-p) / prod(s - p)``.

    Newton's method on the log of the squared magnitude, which is monotonic
    in ``w`` for an all-pole lowpass.
    """
    log_dc = sum(math.log(abs(p) ** 2) for p in poles)

    w = 1.0
    for _ in range(_NEWTON_ITERATIONS):
        value = -math.log(2.0)
        slope = 0.0
        for p in poles:
            distance = (w - p.imag) ** 2 + p.real**2
            value += math.log(distance)
            slope += 2.0 * (w - p.imag) / distance
        value = log_dc - value

        step = value / -slope
        w = max(w - step, 0.5 * w)
        if abs(step) < _NEWTON_TOLERANCE * w:
            break

    return w
