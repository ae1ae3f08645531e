from typing import Optional, Union

import torch
from torch import Tensor

from .filter_design import DigitalCascade


def coerce_sos(
    sos: Union[DigitalCascade, Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """``(n_sections, 6)`` coefficient tensor for a cascade or a tensor."""
    if isinstance(sos, DigitalCascade):
        return sos.to_sos(
            dtype=torch.float64 if dtype is None else dtype, device=device
        )
    if sos.dim() != 2 or sos.shape[-1] != 6:
        raise ValueError(
            f"sos must have shape (n_sections, 6), got {tuple(sos.shape)}"
        )
    return sos.to(dtype=dtype or sos.dtype, device=device or sos.device)
