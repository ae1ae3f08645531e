"""Butterworth analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._complex_dtype import complex_dtype


def butterworth_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog Butterworth lowpass prototype with a 1 rad/s corner.

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
        Complex tensor of shape (order,), evenly spaced on the left half of
        the unit circle.
    gain : Tensor
        Scalar tensor, equal to 1.

    Notes
    -----
    .. math::
        p_k = e^{j \\pi (2k + n + 1) / (2n)}, \\quad k = 0, \\ldots, n - 1

    Examples
    --------
    >>> zeros, poles, gain = butterworth_prototype(3, dtype=torch.float64)
    >>> poles.abs()
    tensor([1., 1., 1.], dtype=torch.float64)
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + order + 1) / (2 * order)

    poles = torch.polar(torch.ones_like(theta), theta)

    zeros = torch.zeros(0, dtype=complex_dtype(dtype), device=device)

    gain = torch.ones((), dtype=dtype, device=device)

    return zeros, poles.to(complex_dtype(dtype)), gain
