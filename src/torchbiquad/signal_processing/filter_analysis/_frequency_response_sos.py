"""Frequency response of a cascade of second-order sections."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from .._coerce_sos import coerce_sos
from ..filter_design import DigitalCascade, SOSNormalizationError


def frequency_response_sos(
    sos: Union[DigitalCascade, Tensor],
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    validate: bool = True,
    *,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Frequency response of a biquad cascade.

    Parameters
    ----------
    sos : DigitalCascade or Tensor
        Cascade, or second-order sections of shape (n_sections, 6) with rows
        ``[b0, b1, b2, a0, a1, a2]``.
    frequencies : Tensor or int, default 512
        Number of evenly spaced points from 0 up to (not including) Nyquist,
        or the full sampling rate when ``whole`` is True. A tensor gives the
        evaluation points directly.
    whole : bool, default False
        Cover the full unit circle instead of the upper half.
    sampling_frequency : float, optional
        Frequencies are in the units of ``sampling_frequency`` when given,
        otherwise normalized so that 1 is Nyquist.
    validate : bool, default True
        Check that every section has ``a0 == 1``.
    device : torch.device, optional
        Output device. Defaults to the device of ``sos``.

    Returns
    -------
    frequencies : Tensor
        Evaluation points, float64.
    response : Tensor
        Complex128 response :math:`H(e^{j\\omega})`.

    Raises
    ------
    SOSNormalizationError
        If ``validate`` is True and any ``a0`` differs from 1.

    Examples
    --------
    >>> from torchbiquad.signal_processing.filter_design import design_filter
    >>> cascade = design_filter("butterworth", "lowpass", 4, 1000.0, 8000.0)
    >>> frequencies, response = frequency_response_sos(
    ...     cascade, torch.tensor([1000.0]), sampling_frequency=8000.0
    ... )
    >>> round(20 * math.log10(response.abs().item()), 2)
    -3.01
    """
    sos = coerce_sos(sos, dtype=torch.float64, device=device)
    device = sos.device

    if validate and sos.numel() > 0:
        a0 = sos[:, 3]
        if not torch.allclose(a0, torch.ones_like(a0), rtol=0.0, atol=1e-10):
            raise SOSNormalizationError(
                f"SOS sections must have a0 = 1, got a0 values: {a0.tolist()}"
            )

    if isinstance(frequencies, int):
        if sampling_frequency is None:
            upper = 2.0 if whole else 1.0
        else:
            upper = sampling_frequency if whole else sampling_frequency / 2.0
        points = torch.linspace(
            0, upper, frequencies + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        points = frequencies.to(dtype=torch.float64, device=device)

    if sampling_frequency is None:
        omega = math.pi * points
    else:
        omega = 2.0 * math.pi * points / sampling_frequency

    z1 = torch.exp(-1j * omega)
    z2 = z1 * z1

    response = torch.ones_like(z1)
    for b0, b1, b2, a0, a1, a2 in sos.tolist():
        response = response * (b0 + b1 * z1 + b2 * z2) / (a0 + a1 * z1 + a2 * z2)

    return points, response
