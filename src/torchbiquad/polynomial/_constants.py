"""Numerical thresholds for the closed-form root solvers."""

# 2^-50, four times double-precision machine epsilon. Quantities below this
# are treated as exactly zero.
NEAR_ZERO_THRESHOLD: float = 2.0**-50

# Cutoff used when checking whether a recombined factor is real.
DEGENERACY_CUTOFF: float = 1e-6

# Largest degree handled by the closed-form solvers.
MAXIMUM_DEGREE: int = 4
