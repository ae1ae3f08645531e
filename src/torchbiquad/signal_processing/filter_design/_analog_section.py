from dataclasses import dataclass
from typing import Iterator, Tuple

from ._filter_family import FilterFamily


@dataclass(frozen=True)
class AnalogSection:
    """Analog second-order section.

    .. math::
        H(s) = \\frac{d s^2 + e s + f}{a s^2 + b s + c}

    A single-pole section has ``a == d == 0``.
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @property
    def is_single_pole(self) -> bool:
        return self.a == 0.0

    @property
    def q(self) -> float:
        """Quality factor of the pole pair, ``sqrt(a*c) / b``."""
        if self.is_single_pole:
            return 0.5
        return (self.a * self.c) ** 0.5 / self.b


@dataclass(frozen=True)
class AnalogPrototype:
    """Normalized analog lowpass prototype as a cascade of sections.

    Attributes
    ----------
    family : FilterFamily
        Prototype family.
    pole_count : int
        Number of analog poles.
    sections : tuple of AnalogSection
        ``ceil(pole_count / 2)`` sections. The single-pole section, if any,
        comes first.
    all_pole : bool
        True when the prototype has no finite zeros.
    """

    family: FilterFamily
    pole_count: int
    sections: Tuple[AnalogSection, ...]
    all_pole: bool

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[AnalogSection]:
        return iter(self.sections)

    def __getitem__(self, index: int) -> AnalogSection:
        return self.sections[index]
