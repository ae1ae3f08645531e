"""Cascaded biquad design from analog lowpass prototypes."""

from ._analog_section import AnalogPrototype, AnalogSection
from ._assemble_sections import assemble_sections, signed_sqrt
from ._bessel_prototype import bessel_prototype
from ._bilinear_quartic import bilinear_quartic
from ._bilinear_section import bilinear_section
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._constants import (
    CRITICAL_FREQUENCY_TOLERANCE,
    DEFAULT_PASSBAND_RIPPLE_DB,
    DEFAULT_STOPBAND_ATTENUATION_DB,
    MAXIMUM_POLE_COUNT,
    MAXIMUM_Q_ARGUMENT,
    MINIMUM_ELLIPTIC_POLE_COUNT,
    MINIMUM_POLE_COUNT,
    Q_CORRECTION_GAIN,
)
from ._design_filter import design_filter
from ._digital_section import DigitalCascade, DigitalSection
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import (
    AllocationError,
    FilterDesignError,
    InvalidParameterError,
    PrototypeClampWarning,
    SOSNormalizationError,
)
from ._filter_family import FilterFamily
from ._lookup_prototype import lookup_prototype
from ._pass_type import PassType
from ._realize_cascade import realize_cascade
from ._sos_sections_count import sos_sections_count
from ._warp_parameters import WarpParameters, warp_parameters
from ._zpk_to_analog_sections import zpk_to_analog_sections

__all__ = [
    # Design
    "design_filter",
    "realize_cascade",
    # Prototypes
    "bessel_prototype",
    "butterworth_prototype",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_prototype",
    "elliptic_prototype",
    "lookup_prototype",
    "zpk_to_analog_sections",
    # Transforms
    "assemble_sections",
    "bilinear_quartic",
    "bilinear_section",
    "signed_sqrt",
    "warp_parameters",
    # Types
    "AnalogPrototype",
    "AnalogSection",
    "DigitalCascade",
    "DigitalSection",
    "FilterFamily",
    "PassType",
    "WarpParameters",
    # Utilities
    "sos_sections_count",
    # Constants
    "CRITICAL_FREQUENCY_TOLERANCE",
    "DEFAULT_PASSBAND_RIPPLE_DB",
    "DEFAULT_STOPBAND_ATTENUATION_DB",
    "MAXIMUM_POLE_COUNT",
    "MAXIMUM_Q_ARGUMENT",
    "MINIMUM_ELLIPTIC_POLE_COUNT",
    "MINIMUM_POLE_COUNT",
    "Q_CORRECTION_GAIN",
    # Exceptions
    "AllocationError",
    "FilterDesignError",
    "InvalidParameterError",
    "PrototypeClampWarning",
    "SOSNormalizationError",
]
