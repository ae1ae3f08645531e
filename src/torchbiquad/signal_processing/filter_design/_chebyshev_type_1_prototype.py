"""Chebyshev Type I analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._complex_dtype import complex_dtype


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog Chebyshev Type I lowpass prototype.

    The passband is equiripple between 0 and ``-passband_ripple_db`` dB up
    to 1 rad/s; the stopband is monotonic.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    passband_ripple_db : float
        Peak-to-peak passband ripple in decibels. Must be positive.
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
        Scalar tensor. Odd orders have unit DC gain; even orders have DC
        gain ``1 / sqrt(1 + eps^2)``.

    Notes
    -----
    With :math:`\\epsilon = \\sqrt{10^{R_p/10} - 1}` and
    :math:`\\mu = \\operatorname{arcsinh}(1/\\epsilon) / n` the poles lie on
    an ellipse:

    .. math::
        p_k = -\\sinh(\\mu)\\sin(\\theta_k) + j\\cosh(\\mu)\\cos(\\theta_k),
        \\quad \\theta_k = \\frac{\\pi (2k + 1)}{2n}
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise ValueError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    mu = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + 1) / (2 * order)

    poles = torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * torch.cos(theta),
    )

    zeros = torch.zeros(0, dtype=complex_dtype(dtype), device=device)

    gain = torch.prod(-poles).real
    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps**2)

    return zeros, poles.to(complex_dtype(dtype)), gain.to(dtype)
