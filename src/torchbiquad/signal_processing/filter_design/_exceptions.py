"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class InvalidParameterError(FilterDesignError):
    """Raised when a design request is invalid.

    This occurs when:
    - Family or pass type is unknown
    - Pole count is outside the range supported by the family
    - Corner frequency is not strictly between 0 and Nyquist
    - Bandwidth is missing or not positive for bandpass and notch designs
    """

    pass


class AllocationError(FilterDesignError):
    """Raised when the coefficient buffer for a cascade cannot be provided.

    This occurs when:
    - A caller-supplied ``out`` tensor has the wrong shape or dtype
    - Allocating the coefficient tensor runs out of memory
    """

    pass


class SOSNormalizationError(FilterDesignError):
    """Raised when second-order sections are not normalized.

    This occurs when:
    - a0 coefficient is zero (cannot normalize)
    - a0 coefficient differs from 1 where a normalized cascade is required
    """

    pass


class PrototypeClampWarning(UserWarning):
    """Emitted when a prototype parameter is clamped to its supported range."""

    pass
