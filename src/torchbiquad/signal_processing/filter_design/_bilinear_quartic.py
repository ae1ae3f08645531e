"""Bilinear transform of a two-pole section under bandpass and notch maps."""

from typing import Optional, Tuple, Union

from torchbiquad.polynomial import Polynomial

from ._analog_section import AnalogSection
from ._constants import CRITICAL_FREQUENCY_TOLERANCE
from ._pass_type import PassType
from ._warp_parameters import WarpParameters


def bilinear_quartic(
    section: AnalogSection,
    pass_type: Union[PassType, str],
    warp: WarpParameters,
    *,
    critical_frequency_tolerance: Optional[float] = None,
) -> Tuple[Polynomial, Polynomial]:
    """
    Denominator and numerator quartics of a two-pole bandpass or notch map.

    Parameters
    ----------
    section : AnalogSection
        Two-pole lowpass prototype section.
    pass_type : PassType or str
        ``BANDPASS`` or ``NOTCH``.
    warp : WarpParameters
        Prewarped frequency scale and quality factor.
    critical_frequency_tolerance : float, optional
        Distance of ``warp.t`` from 2 below which the odd-power coefficients
        are set to zero. Defaults to ``CRITICAL_FREQUENCY_TOLERANCE``.

    Returns
    -------
    denominator, numerator : Polynomial
        Degree-4 polynomials in ``z``, highest power first. The denominator
        is scaled by ``f`` and the numerator by ``c``, so their ratio has
        unity gain at the center frequency.

    Notes
    -----
    With :math:`N(z) = \\alpha z^2 + \\beta z + \\alpha`,
    :math:`\\alpha = 4 + T^2`, :math:`\\beta = 2T^2 - 8` and
    :math:`M(z) = z^2 - 1`, the bandpass denominator is

    .. math::
        a Q^2 N^2 + 2 b Q T N M + 4 c T^2 M^2

    and the notch denominator is

    .. math::
        4 a T^2 M^2 + 2 b Q T N M + c Q^2 N^2

    At :math:`T = 2` (center frequency :math:`F_s/4`), :math:`\\beta = 0`
    and the :math:`z^3` and :math:`z^1` coefficients vanish.
    """
    pass_type = PassType(pass_type)
    if not pass_type.doubles_order:
        raise ValueError(
            f"bilinear_quartic requires a bandpass or notch transform, "
            f"got {pass_type.value}"
        )
    if section.is_single_pole:
        raise ValueError(
            "bilinear_quartic requires a two-pole section, use bilinear_section"
        )

    if critical_frequency_tolerance is None:
        critical_frequency_tolerance = CRITICAL_FREQUENCY_TOLERANCE

    t = warp.t
    q = warp.q
    alpha = 4.0 + t * t
    beta = 2.0 * t * t - 8.0

    if pass_type is PassType.BANDPASS:
        den = _bandpass_quartic(section.a, section.b, section.c, t, q, alpha, beta)
        num = _bandpass_quartic(section.d, section.e, section.f, t, q, alpha, beta)
    else:
        den = _notch_quartic(section.a, section.b, section.c, t, q, alpha, beta)
        num = _notch_quartic(section.d, section.e, section.f, t, q, alpha, beta)

    den = [section.f * coefficient for coefficient in den]
    num = [section.c * coefficient for coefficient in num]

    if abs(t - 2.0) < critical_frequency_tolerance:
        den[1] = den[3] = 0.0
        num[1] = num[3] = 0.0

    return Polynomial(tuple(den)), Polynomial(tuple(num))


def _bandpass_quartic(a, b, c, t, q, alpha, beta):
    aq2 = a * q * q
    bqt = 2.0 * b * q * t
    ct2 = 4.0 * c * t * t
    return [
        aq2 * alpha * alpha + bqt * alpha + ct2,
        2.0 * aq2 * alpha * beta + bqt * beta,
        aq2 * (beta * beta + 2.0 * alpha * alpha) - 2.0 * ct2,
        2.0 * aq2 * alpha * beta - bqt * beta,
        aq2 * alpha * alpha - bqt * alpha + ct2,
    ]


def _notch_quartic(a, b, c, t, q, alpha, beta):
    at2 = 4.0 * a * t * t
    bqt = 2.0 * b * q * t
    cq2 = c * q * q
    return [
        at2 + bqt * alpha + cq2 * alpha * alpha,
        bqt * beta + 2.0 * cq2 * alpha * beta,
        -2.0 * at2 + cq2 * (beta * beta + 2.0 * alpha * alpha),
        -bqt * beta + 2.0 * cq2 * alpha * beta,
        at2 - bqt * alpha + cq2 * alpha * alpha,
    ]
