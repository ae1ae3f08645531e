from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from .._coerce_sos import coerce_sos
from ..filter_design import DigitalCascade
from ._lfilter import lfilter


def sosfilt(
    sos: Union[DigitalCascade, Tensor],
    x: Tensor,
    dim: int = -1,
    zi: Optional[Tensor] = None,
) -> Union[Tensor, Tuple[Tensor, Tensor]]:
    """
    Filter a signal through a cascade of second-order sections.

    Parameters
    ----------
    sos : DigitalCascade or Tensor
        Cascade, or sections of shape (n_sections, 6) with rows
        ``[b0, b1, b2, a0, a1, a2]``.
    x : Tensor
        Input signal of any shape.
    dim : int, default -1
        Dimension along which to filter.
    zi : Tensor, optional
        Initial state, shape ``(n_sections, 2)`` or
        ``(n_sections, *batch, 2)``. When given, the final state is also
        returned.

    Returns
    -------
    y : Tensor
        Filtered signal, same shape as ``x``.
    zf : Tensor
        Final state, shape ``(n_sections, *batch, 2)``. Only returned when
        ``zi`` is given.

    Notes
    -----
    Each section runs :func:`lfilter` in direct form II transposed and
    feeds the next.

    Examples
    --------
    >>> from torchbiquad.signal_processing.filter_design import design_filter
    >>> cascade = design_filter("butterworth", "lowpass", 4, 1000.0, 8000.0)
    >>> y = sosfilt(cascade, torch.ones(256, dtype=torch.float64))
    >>> round(y[-1].item(), 6)
    1.0
    """
    dtype = x.dtype if x.is_floating_point() else torch.float64
    sos = coerce_sos(sos, dtype=dtype, device=x.device)

    y = x.to(dtype)
    final_states = []
    for index, section in enumerate(sos):
        if zi is None:
            y = lfilter(section[:3], section[3:], y, dim=dim)
        else:
            y, state = lfilter(section[:3], section[3:], y, dim=dim, zi=zi[index])
            final_states.append(state)

    if zi is None:
        return y
    return y, torch.stack(final_states)
