"""Chebyshev Type II (inverse Chebyshev) analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._complex_dtype import complex_dtype


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog Chebyshev Type II lowpass prototype.

    The passband is monotonic and the stopband is equiripple, reaching
    ``-stopband_attenuation_db`` dB at 1 rad/s.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    stopband_attenuation_db : float
        Minimum stopband attenuation in decibels. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Complex tensor of purely imaginary zeros, ``2 * (order // 2)`` of
        them.
    poles : Tensor
        Complex tensor of shape (order,).
    gain : Tensor
        Scalar tensor giving unit DC gain.

    Notes
    -----
    The poles are the reciprocals of Chebyshev Type I poles designed for
    :math:`\\epsilon = 1/\\sqrt{10^{R_s/10} - 1}`. The zeros lie at
    :math:`\\pm j / \\cos\\theta_k`; for odd orders the middle angle has
    :math:`\\cos\\theta_k = 0` and contributes no finite zero.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if stopband_attenuation_db <= 0:
        raise ValueError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    mu = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + 1) / (2 * order)

    poles = 1.0 / torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * torch.cos(theta),
    )

    cos_theta = torch.cos(theta)
    if order % 2 == 1:
        middle = order // 2
        cos_theta = torch.cat([cos_theta[:middle], cos_theta[middle + 1 :]])

    zeros_imag = 1.0 / cos_theta
    zeros = torch.complex(torch.zeros_like(zeros_imag), zeros_imag)

    gain = torch.prod(-poles)
    if zeros.numel() > 0:
        gain = gain / torch.prod(-zeros)

    return (
        zeros.to(complex_dtype(dtype)),
        poles.to(complex_dtype(dtype)),
        gain.real.to(dtype),
    )
