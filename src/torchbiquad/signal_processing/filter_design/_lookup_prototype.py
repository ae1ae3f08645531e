"""Analog lowpass prototypes grouped into second-order sections."""

import warnings
from typing import Union

import torch

from ._analog_section import AnalogPrototype
from ._bessel_prototype import bessel_prototype
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._coerce_enum import coerce_enum
from ._constants import (
    DEFAULT_PASSBAND_RIPPLE_DB,
    DEFAULT_STOPBAND_ATTENUATION_DB,
    MAXIMUM_PASSBAND_RIPPLE_DB,
    MAXIMUM_STOPBAND_ATTENUATION_DB,
    MINIMUM_PASSBAND_RIPPLE_DB,
    MINIMUM_STOPBAND_ATTENUATION_DB,
)
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import PrototypeClampWarning
from ._filter_family import FilterFamily
from ._zpk_to_analog_sections import zpk_to_analog_sections


def lookup_prototype(
    family: Union[FilterFamily, str],
    pole_count: int,
    *,
    passband_ripple_db: float = DEFAULT_PASSBAND_RIPPLE_DB,
    stopband_attenuation_db: float = DEFAULT_STOPBAND_ATTENUATION_DB,
) -> AnalogPrototype:
    """
    Normalized analog lowpass prototype for a family and pole count.

    Parameters
    ----------
    family : FilterFamily or str
        Prototype family.
    pole_count : int
        Number of analog poles. Clamped to the family's supported range.
    passband_ripple_db : float, default 0.5
        Passband ripple for ``CHEBYSHEV`` and ``ELLIPTIC``. Clamped to
        ``[0.001, 3]`` dB.
    stopband_attenuation_db : float, default 60
        Stopband attenuation for ``INVERSE_CHEBYSHEV`` and ``ELLIPTIC``.
        Clamped to ``[20, 120]`` dB.

    Returns
    -------
    AnalogPrototype
        ``ceil(pole_count / 2)`` sections with a 1 rad/s corner, single-pole
        section first.

    Raises
    ------
    InvalidParameterError
        If ``family`` is not a known family.

    Warns
    -----
    PrototypeClampWarning
        When any parameter is clamped.

    Examples
    --------
    >>> prototype = lookup_prototype("butterworth", 5)
    >>> len(prototype), prototype[0].is_single_pole
    (3, True)
    """
    family = coerce_enum(FilterFamily, family, "filter family")

    minimum, maximum = family.pole_count_range
    pole_count = int(_clamp("pole_count", pole_count, minimum, maximum))

    dtype = torch.float64

    if family is FilterFamily.BUTTERWORTH:
        zeros, poles, _ = butterworth_prototype(pole_count, dtype=dtype)
    elif family is FilterFamily.BESSEL:
        zeros, poles, _ = bessel_prototype(pole_count, dtype=dtype)
    elif family is FilterFamily.CHEBYSHEV:
        zeros, poles, _ = chebyshev_type_1_prototype(
            pole_count,
            _clamp_ripple(passband_ripple_db),
            dtype=dtype,
        )
    elif family is FilterFamily.INVERSE_CHEBYSHEV:
        zeros, poles, _ = chebyshev_type_2_prototype(
            pole_count,
            _clamp_attenuation(stopband_attenuation_db),
            dtype=dtype,
        )
    else:
        zeros, poles, _ = elliptic_prototype(
            pole_count,
            _clamp_ripple(passband_ripple_db),
            _clamp_attenuation(stopband_attenuation_db),
            dtype=dtype,
        )

    return AnalogPrototype(
        family=family,
        pole_count=pole_count,
        sections=zpk_to_analog_sections(zeros, poles),
        all_pole=family.all_pole,
    )


def _clamp(name: str, value: float, minimum: float, maximum: float) -> float:
    clamped = min(max(value, minimum), maximum)
    if clamped != value:
        warnings.warn(
            f"{name}={value} is outside [{minimum}, {maximum}], "
            f"using {clamped}",
            PrototypeClampWarning,
            stacklevel=3,
        )
    return clamped


def _clamp_ripple(value: float) -> float:
    return _clamp(
        "passband_ripple_db",
        value,
        MINIMUM_PASSBAND_RIPPLE_DB,
        MAXIMUM_PASSBAND_RIPPLE_DB,
    )


def _clamp_attenuation(value: float) -> float:
    return _clamp(
        "stopband_attenuation_db",
        value,
        MINIMUM_STOPBAND_ATTENUATION_DB,
        MAXIMUM_STOPBAND_ATTENUATION_DB,
    )
