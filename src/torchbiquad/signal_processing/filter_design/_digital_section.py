from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import torch
from torch import Tensor

from torchbiquad.polynomial import RootSet, polynomial_roots

from ._exceptions import AllocationError, SOSNormalizationError


@dataclass(frozen=True)
class DigitalSection:
    """Digital second-order section (biquad).

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + b_2 z^{-2}}
                     {a_0 + a_1 z^{-1} + a_2 z^{-2}}
    """

    a0: float
    a1: float
    a2: float
    b0: float
    b1: float
    b2: float

    def normalized(self) -> "DigitalSection":
        """Divide all six coefficients by ``a0``.

        Raises
        ------
        SOSNormalizationError
            If ``a0`` is zero.
        """
        if self.a0 == 0.0:
            raise SOSNormalizationError(
                "Cannot normalize a section with a0 = 0"
            )
        a0 = self.a0
        return DigitalSection(
            a0=a0 / a0,
            a1=self.a1 / a0,
            a2=self.a2 / a0,
            b0=self.b0 / a0,
            b1=self.b1 / a0,
            b2=self.b2 / a0,
        )

    def poles(self) -> RootSet:
        """Roots of ``a0 z^2 + a1 z + a2``."""
        return polynomial_roots((self.a0, self.a1, self.a2))

    def zeros(self) -> RootSet:
        """Roots of ``b0 z^2 + b1 z + b2``."""
        return polynomial_roots((self.b0, self.b1, self.b2))


@dataclass(frozen=True)
class DigitalCascade:
    """Ordered cascade of digital second-order sections."""

    sections: Tuple[DigitalSection, ...]

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[DigitalSection]:
        return iter(self.sections)

    def __getitem__(self, index: int) -> DigitalSection:
        return self.sections[index]

    def to_sos(
        self,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
        out: Optional[Tensor] = None,
    ) -> Tensor:
        """Coefficients as a second-order sections tensor.

        Parameters
        ----------
        dtype : torch.dtype, optional
            Output dtype. Defaults to ``out.dtype`` when ``out`` is given,
            otherwise torch.get_default_dtype().
        device : torch.device, optional
            Output device. Defaults to CPU.
        out : Tensor, optional
            Preallocated floating tensor of shape ``(len(self), 6)`` to fill.

        Returns
        -------
        sos : Tensor
            Shape ``(n_sections, 6)``, rows ``[b0, b1, b2, a0, a1, a2]``.

        Raises
        ------
        AllocationError
            If ``out`` has the wrong shape or is not floating point, or the
            tensor cannot be allocated.
        """
        rows = [
            [s.b0, s.b1, s.b2, s.a0, s.a1, s.a2] for s in self.sections
        ]

        if out is not None:
            if not out.is_floating_point():
                raise AllocationError(
                    f"out must be a floating point tensor, got {out.dtype}"
                )
            if tuple(out.shape) != (len(rows), 6):
                raise AllocationError(
                    f"out must have shape ({len(rows)}, 6), "
                    f"got {tuple(out.shape)}"
                )
            out.copy_(torch.tensor(rows, dtype=torch.float64))
            return out

        if dtype is None:
            dtype = torch.get_default_dtype()

        try:
            sos = torch.tensor(rows, dtype=dtype, device=device)
        except MemoryError as error:
            raise AllocationError(
                f"Cannot allocate {len(rows)} second-order sections"
            ) from error

        return sos.reshape(len(rows), 6)
