"""Elliptic (Cauer) analog lowpass filter prototype."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from ._complex_dtype import complex_dtype
from ._elliptic_functions import elliptic_zeros_poles


def elliptic_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog elliptic (Cauer) lowpass prototype.

    Both bands are equiripple: the passband stays within
    ``passband_ripple_db`` of unity up to 1 rad/s and the stopband stays at
    least ``stopband_attenuation_db`` below it.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    passband_ripple_db : float
        Passband ripple in decibels. Must be positive.
    stopband_attenuation_db : float
        Minimum stopband attenuation in decibels. Must exceed
        ``passband_ripple_db``.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Purely imaginary zeros, ``2 * (order // 2)`` of them.
    poles : Tensor
        Complex tensor of shape (order,).
    gain : Tensor
        Scalar tensor.

    Notes
    -----
    The selectivity modulus :math:`m` solves the degree equation through
    its nome series. The zeros are :math:`\\pm j / (\\sqrt{m}\\,
    \\operatorname{sn}(u_j, m))` and the poles follow from
    :math:`\\operatorname{sn}, \\operatorname{cn}, \\operatorname{dn}`
    evaluated at :math:`u_j = jK/n` and at the ripple-dependent offset
    :math:`v_0` on the complementary modulus.

    Examples
    --------
    >>> zeros, poles, gain = elliptic_prototype(4, 1.0, 40.0)
    >>> zeros.shape, poles.shape
    (torch.Size([4]), torch.Size([4]))
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise ValueError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )
    if stopband_attenuation_db <= passband_ripple_db:
        raise ValueError(
            "Stopband attenuation must exceed the passband ripple, got "
            f"{stopband_attenuation_db} <= {passband_ripple_db}"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    zeros, poles, gain = elliptic_zeros_poles(
        order, passband_ripple_db, stopband_attenuation_db
    )

    return (
        torch.tensor(zeros, dtype=complex_dtype(dtype), device=device),
        torch.tensor(poles, dtype=complex_dtype(dtype), device=device),
        torch.tensor(gain, dtype=dtype, device=device),
    )
