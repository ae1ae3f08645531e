"""Cascaded biquad design from analog lowpass prototypes."""

import math
from typing import Optional, Union

from torch import Tensor

from ._coerce_enum import coerce_enum
from ._constants import (
    DEFAULT_PASSBAND_RIPPLE_DB,
    DEFAULT_STOPBAND_ATTENUATION_DB,
)
from ._digital_section import DigitalCascade
from ._exceptions import AllocationError, InvalidParameterError
from ._filter_family import FilterFamily
from ._lookup_prototype import lookup_prototype
from ._pass_type import PassType
from ._realize_cascade import realize_cascade
from ._sos_sections_count import sos_sections_count
from ._warp_parameters import warp_parameters


def design_filter(
    family: Union[FilterFamily, str],
    pass_type: Union[PassType, str],
    pole_count: int,
    corner_frequency: float,
    sampling_frequency: float,
    bandwidth: Optional[float] = None,
    *,
    passband_ripple_db: float = DEFAULT_PASSBAND_RIPPLE_DB,
    stopband_attenuation_db: float = DEFAULT_STOPBAND_ATTENUATION_DB,
    out: Optional[Tensor] = None,
) -> DigitalCascade:
    """
    Design a cascade of digital biquads from an analog lowpass prototype.

    Parameters
    ----------
    family : FilterFamily or str
        Prototype family: ``"butterworth"``, ``"chebyshev"``,
        ``"inverse_chebyshev"``, ``"bessel"`` or ``"elliptic"``.
    pass_type : PassType or str
        ``"lowpass"``, ``"highpass"``, ``"bandpass"`` or ``"notch"``.
    pole_count : int
        Number of prototype poles, 2 to 10 (4 to 10 for elliptic).
    corner_frequency : float
        Corner frequency, or center frequency for bandpass and notch.
        Must satisfy ``0 < corner_frequency < sampling_frequency / 2``.
    sampling_frequency : float
        Sampling frequency, in the same units as ``corner_frequency``.
    bandwidth : float, optional
        Bandwidth for bandpass and notch designs. Required and positive for
        those pass types; ignored otherwise.
    passband_ripple_db : float, default 0.5
        Passband ripple for Chebyshev and elliptic prototypes.
    stopband_attenuation_db : float, default 60
        Stopband attenuation for inverse Chebyshev and elliptic prototypes.
    out : Tensor, optional
        Floating tensor of shape ``(sos_sections_count(pole_count, pass_type), 6)``
        that receives the coefficients as rows ``[b0, b1, b2, a0, a1, a2]``.

    Returns
    -------
    DigitalCascade
        Normalized biquads (``a0 == 1``). Lowpass and highpass designs
        have ``ceil(pole_count / 2)`` sections; bandpass and notch designs
        have ``pole_count`` sections.

    Raises
    ------
    InvalidParameterError
        If any parameter is out of range. Raised before any computation.
    AllocationError
        If ``out`` has the wrong shape or dtype, or memory runs out while
        building the cascade.

    Examples
    --------
    >>> cascade = design_filter("butterworth", "lowpass", 4, 1000.0, 8000.0)
    >>> len(cascade), cascade[0].a0
    (2, 1.0)
    >>> cascade = design_filter(
    ...     "butterworth", "bandpass", 4, 1000.0, 8000.0, bandwidth=200.0
    ... )
    >>> len(cascade)
    4
    """
    family = coerce_enum(FilterFamily, family, "filter family")
    pass_type = coerce_enum(PassType, pass_type, "pass type")

    minimum, maximum = family.pole_count_range
    if (
        isinstance(pole_count, bool)
        or not isinstance(pole_count, int)
        or not minimum <= pole_count <= maximum
    ):
        raise InvalidParameterError(
            f"pole_count for {family.value} must be an integer in "
            f"[{minimum}, {maximum}], got {pole_count!r}"
        )

    if not math.isfinite(sampling_frequency) or sampling_frequency <= 0:
        raise InvalidParameterError(
            f"sampling_frequency must be positive, got {sampling_frequency}"
        )

    nyquist = sampling_frequency / 2.0
    if not 0.0 < corner_frequency < nyquist:
        raise InvalidParameterError(
            f"corner_frequency must be in (0, {nyquist}), got {corner_frequency}"
        )

    if pass_type.doubles_order:
        if bandwidth is None:
            raise InvalidParameterError(
                f"bandwidth is required for {pass_type.value} designs"
            )
        if not math.isfinite(bandwidth) or bandwidth <= 0:
            raise InvalidParameterError(
                f"bandwidth must be positive, got {bandwidth}"
            )
    else:
        bandwidth = None

    n_sections = sos_sections_count(pole_count, pass_type)
    if out is not None:
        if not out.is_floating_point() or tuple(out.shape) != (n_sections, 6):
            raise AllocationError(
                f"out must be a floating point tensor of shape "
                f"({n_sections}, 6), got {out.dtype} {tuple(out.shape)}"
            )

    try:
        prototype = lookup_prototype(
            family,
            pole_count,
            passband_ripple_db=passband_ripple_db,
            stopband_attenuation_db=stopband_attenuation_db,
        )
        cascade = realize_cascade(
            prototype,
            pass_type,
            warp_parameters(corner_frequency, sampling_frequency, bandwidth),
        )
    except MemoryError as error:
        raise AllocationError(
            f"Cannot allocate {n_sections} second-order sections"
        ) from error

    if out is not None:
        cascade.to_sos(out=out)

    return cascade
