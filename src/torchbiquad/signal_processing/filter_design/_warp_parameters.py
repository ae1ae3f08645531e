import math
from dataclasses import dataclass
from typing import Optional

from ._constants import MAXIMUM_Q_ARGUMENT, Q_CORRECTION_GAIN


@dataclass(frozen=True)
class WarpParameters:
    """Prewarped frequency scale ``t`` and corrected quality factor ``q``.

    ``q`` is only meaningful for bandpass and notch designs.
    """

    t: float
    q: float = 0.0


def warp_parameters(
    corner_frequency: float,
    sampling_frequency: float,
    bandwidth: Optional[float] = None,
) -> WarpParameters:
    """
    Bilinear prewarp of the corner frequency and bandwidth.

    Parameters
    ----------
    corner_frequency : float
        Corner (lowpass/highpass) or center (bandpass/notch) frequency in
        the same units as ``sampling_frequency``.
    sampling_frequency : float
        Sampling frequency.
    bandwidth : float, optional
        Bandwidth for bandpass and notch designs.

    Returns
    -------
    WarpParameters

    Notes
    -----
    With the normalized frequency :math:`\\omega_c = F_c / (F_s/2)`

    .. math::
        T = 2 \\tan(\\omega_c \\pi / 2)

    The quality factor is corrected for the compression of the bilinear
    transform near Nyquist:

    .. math::
        q' = 0.8 \\tan(\\min(1 + \\omega_c, 1.95) \\pi / 4), \\quad
        Q = \\frac{\\omega_c}{b_w q'}

    where :math:`b_w` is the bandwidth normalized the same way.

    Examples
    --------
    >>> warp_parameters(2000.0, 8000.0).t
    1.9999999999999998
    """
    nyquist = sampling_frequency / 2.0
    omega_c = corner_frequency / nyquist

    t = 2.0 * math.tan(omega_c * math.pi / 2.0)

    if bandwidth is None:
        return WarpParameters(t=t)

    correction = min(1.0 + omega_c, MAXIMUM_Q_ARGUMENT)
    correction = Q_CORRECTION_GAIN * math.tan(correction * math.pi / 4.0)

    return WarpParameters(t=t, q=omega_c / (bandwidth / nyquist) / correction)
