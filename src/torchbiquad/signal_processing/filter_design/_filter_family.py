import enum
from typing import Tuple

from ._constants import (
    MAXIMUM_POLE_COUNT,
    MINIMUM_ELLIPTIC_POLE_COUNT,
    MINIMUM_POLE_COUNT,
)


class FilterFamily(enum.Enum):
    """Analog lowpass prototype families.

    ``INVERSE_CHEBYSHEV`` and ``ELLIPTIC`` place finite zeros in the
    stopband; the remaining families are all-pole.
    """

    BUTTERWORTH = "butterworth"
    CHEBYSHEV = "chebyshev"
    INVERSE_CHEBYSHEV = "inverse_chebyshev"
    BESSEL = "bessel"
    ELLIPTIC = "elliptic"

    @property
    def all_pole(self) -> bool:
        return self not in (
            FilterFamily.INVERSE_CHEBYSHEV,
            FilterFamily.ELLIPTIC,
        )

    @property
    def pole_count_range(self) -> Tuple[int, int]:
        if self is FilterFamily.ELLIPTIC:
            return MINIMUM_ELLIPTIC_POLE_COUNT, MAXIMUM_POLE_COUNT
        return MINIMUM_POLE_COUNT, MAXIMUM_POLE_COUNT
