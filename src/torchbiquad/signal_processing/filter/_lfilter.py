from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def lfilter(
    b: Tensor,
    a: Tensor,
    x: Tensor,
    dim: int = -1,
    zi: Optional[Tensor] = None,
) -> Union[Tensor, Tuple[Tensor, Tensor]]:
    """
    Filter a signal with a rational transfer function.

    Parameters
    ----------
    b : Tensor
        Numerator coefficients, shape (M,).
    a : Tensor
        Denominator coefficients, shape (N,). ``a[0]`` must be nonzero.
    x : Tensor
        Input signal of any shape.
    dim : int, default -1
        Dimension along which to filter.
    zi : Tensor, optional
        Initial delay state, shape ``(max(M, N) - 1,)`` or
        ``(*batch, max(M, N) - 1)`` where ``batch`` is the shape of ``x``
        without ``dim``. When given, the final state is also returned.

    Returns
    -------
    y : Tensor
        Filtered signal, same shape as ``x``.
    zf : Tensor
        Final delay state, shape ``(*batch, max(M, N) - 1)``. Only returned
        when ``zi`` is given.

    Notes
    -----
    Direct form II transposed:

    .. math::
        y[n] = b_0 x[n] + s_0[n-1]

        s_k[n] = b_{k+1} x[n] - a_{k+1} y[n] + s_{k+1}[n-1]

    Examples
    --------
    >>> b = torch.tensor([0.5, 0.5])
    >>> a = torch.tensor([1.0])
    >>> lfilter(b, a, torch.tensor([1.0, 0.0, 0.0]))
    tensor([0.5000, 0.5000, 0.0000])
    """
    dtype = torch.promote_types(b.dtype, torch.promote_types(a.dtype, x.dtype))
    if not dtype.is_floating_point:
        dtype = torch.float64

    b = b.to(dtype=dtype, device=x.device)
    a = a.to(dtype=dtype, device=x.device)
    x = x.to(dtype=dtype)

    b = b / a[0]
    a = a / a[0]

    n_coefficients = max(b.numel(), a.numel())
    n_delays = n_coefficients - 1
    b = torch.nn.functional.pad(b, (0, n_coefficients - b.numel()))
    a = torch.nn.functional.pad(a, (0, n_coefficients - a.numel()))

    x = x.movedim(dim, -1)
    batch_shape = x.shape[:-1]
    n_samples = x.shape[-1]
    x_flat = x.reshape(-1, n_samples)

    if zi is None:
        state = x_flat.new_zeros(x_flat.shape[0], n_delays)
    else:
        state = (
            zi.to(dtype=dtype, device=x.device)
            .expand(*batch_shape, n_delays)
            .reshape(-1, n_delays)
            .clone()
        )

    outputs = []
    for i in range(n_samples):
        x_i = x_flat[:, i]
        if n_delays == 0:
            outputs.append(b[0] * x_i)
            continue
        y_i = b[0] * x_i + state[:, 0]
        shifted = torch.nn.functional.pad(state[:, 1:], (0, 1))
        state = b[1:] * x_i[:, None] - a[1:] * y_i[:, None] + shifted
        outputs.append(y_i)

    if outputs:
        y = torch.stack(outputs, dim=-1)
    else:
        y = x_flat.clone()

    y = y.reshape(*batch_shape, n_samples).movedim(-1, dim)

    if zi is None:
        return y
    return y, state.reshape(*batch_shape, n_delays)
