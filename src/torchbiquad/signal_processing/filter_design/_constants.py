"""Constants for filter design module."""

# Warp factors within this distance of 2 (a center frequency of Fs/4) make
# the odd-power quartic coefficients vanish analytically
CRITICAL_FREQUENCY_TOLERANCE: float = 5e-4

# Bandwidth-to-Q correction: q = Q_CORRECTION_GAIN * tan(min(1 + wc, MAXIMUM_Q_ARGUMENT) * pi / 4)
MAXIMUM_Q_ARGUMENT: float = 1.95
Q_CORRECTION_GAIN: float = 0.8

# Supported pole counts
MINIMUM_POLE_COUNT: int = 2
MINIMUM_ELLIPTIC_POLE_COUNT: int = 4
MAXIMUM_POLE_COUNT: int = 10

# Shape parameters (dB)
MINIMUM_PASSBAND_RIPPLE_DB: float = 0.001
MAXIMUM_PASSBAND_RIPPLE_DB: float = 3.0
DEFAULT_PASSBAND_RIPPLE_DB: float = 0.5

MINIMUM_STOPBAND_ATTENUATION_DB: float = 20.0
MAXIMUM_STOPBAND_ATTENUATION_DB: float = 120.0
DEFAULT_STOPBAND_ATTENUATION_DB: float = 60.0
