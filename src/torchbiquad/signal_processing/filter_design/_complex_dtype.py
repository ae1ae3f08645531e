import torch


def complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Complex dtype matching a real floating point dtype."""
    if dtype == torch.float32:
        return torch.complex64
    if dtype == torch.float64:
        return torch.complex128
    raise ValueError(f"Unsupported dtype: {dtype}")
