from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class RootSet:
    """Roots of a real polynomial of degree at most four.

    Attributes
    ----------
    real : tuple of float
        Real parts.
    imag : tuple of float
        Imaginary parts, same length as ``real``. Real roots carry an
        imaginary part of exactly ``0.0``; complex roots appear as adjacent
        conjugate pairs.
    """

    real: Tuple[float, ...] = ()
    imag: Tuple[float, ...] = ()

    def __post_init__(self):
        if len(self.real) != len(self.imag):
            raise ValueError(
                f"real and imag must have equal length, got "
                f"{len(self.real)} and {len(self.imag)}"
            )

    @property
    def count(self) -> int:
        return len(self.real)

    def __len__(self) -> int:
        return len(self.real)

    def __iter__(self):
        return iter(self.as_complex())

    def __add__(self, other: "RootSet") -> "RootSet":
        return RootSet(
            real=self.real + other.real,
            imag=self.imag + other.imag,
        )

    def as_complex(self) -> Tuple[complex, ...]:
        return tuple(complex(r, i) for r, i in zip(self.real, self.imag))

    def shifted(self, offset: float) -> "RootSet":
        """Return the roots translated along the real axis by ``offset``."""
        return RootSet(
            real=tuple(r + offset for r in self.real),
            imag=self.imag,
        )


def root_set(roots: Iterable[complex]) -> RootSet:
    """Create a RootSet from complex (or real) values."""
    values = [complex(r) for r in roots]
    return RootSet(
        real=tuple(v.real for v in values),
        imag=tuple(v.imag for v in values),
    )


@dataclass(frozen=True)
class CubicRoots:
    """Result of the closed-form cubic solver.

    Attributes
    ----------
    roots : RootSet
        Either three real roots, or one real root followed by a conjugate
        pair.
    largest_real : float
        Algebraically largest real root. The quartic solver uses this root
        of its resolvent cubic.
    """

    roots: RootSet
    largest_real: float

    @property
    def all_real(self) -> bool:
        return all(i == 0.0 for i in self.roots.imag)
