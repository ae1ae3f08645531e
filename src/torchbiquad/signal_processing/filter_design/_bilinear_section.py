"""Closed-form bilinear transform of a single analog section."""

from typing import Union

from ._analog_section import AnalogSection
from ._digital_section import DigitalSection
from ._pass_type import PassType
from ._warp_parameters import WarpParameters


def bilinear_section(
    section: AnalogSection,
    pass_type: Union[PassType, str],
    warp: WarpParameters,
) -> DigitalSection:
    """
    Map an analog prototype section to one digital biquad.

    Parameters
    ----------
    section : AnalogSection
        Lowpass prototype section with a 1 rad/s corner.
    pass_type : PassType or str
        Frequency transformation. ``BANDPASS`` and ``NOTCH`` only accept
        single-pole sections; two-pole sections produce a quartic and go
        through :func:`bilinear_quartic`.
    warp : WarpParameters
        Prewarped frequency scale and quality factor.

    Returns
    -------
    DigitalSection
        Normalized so that ``a0 == 1``, with unity gain in the passband.

    Raises
    ------
    ValueError
        If a two-pole section is passed with a bandpass or notch transform.

    Notes
    -----
    The prototype variable is substituted as :math:`s \\to s/T` (lowpass),
    :math:`s \\to T/s` (highpass), :math:`s \\to Q(s^2 + T^2)/(Ts)`
    (bandpass) or :math:`s \\to Ts/(Q(s^2 + T^2))` (notch), followed by
    :math:`s = 2(z - 1)/(z + 1)`. The numerator is scaled by ``c / f`` so
    the prototype's DC gain maps to unity.
    """
    pass_type = PassType(pass_type)

    t = warp.t
    a, b, c, d, e, f = (
        section.a,
        section.b,
        section.c,
        section.d,
        section.e,
        section.f,
    )
    gain = c / f

    if pass_type is PassType.LOWPASS:
        if section.is_single_pole:
            den = (2.0 * b + c * t, c * t - 2.0 * b, 0.0)
            num = (2.0 * e + f * t, f * t - 2.0 * e, 0.0)
        else:
            t2 = t * t
            den = (
                4.0 * a + 2.0 * b * t + c * t2,
                2.0 * c * t2 - 8.0 * a,
                4.0 * a - 2.0 * b * t + c * t2,
            )
            num = (
                4.0 * d + 2.0 * e * t + f * t2,
                2.0 * f * t2 - 8.0 * d,
                4.0 * d - 2.0 * e * t + f * t2,
            )
    elif pass_type is PassType.HIGHPASS:
        if section.is_single_pole:
            den = (b * t + 2.0 * c, b * t - 2.0 * c, 0.0)
            num = (e * t + 2.0 * f, e * t - 2.0 * f, 0.0)
        else:
            t2 = t * t
            den = (
                a * t2 + 2.0 * b * t + 4.0 * c,
                2.0 * a * t2 - 8.0 * c,
                a * t2 - 2.0 * b * t + 4.0 * c,
            )
            num = (
                d * t2 + 2.0 * e * t + 4.0 * f,
                2.0 * d * t2 - 8.0 * f,
                d * t2 - 2.0 * e * t + 4.0 * f,
            )
    else:
        if not section.is_single_pole:
            raise ValueError(
                f"{pass_type.value} maps a two-pole section to a quartic, "
                "use bilinear_quartic"
            )
        q = warp.q
        alpha = 4.0 + t * t
        beta = 2.0 * t * t - 8.0
        if pass_type is PassType.BANDPASS:
            den = (
                b * q * alpha + 2.0 * c * t,
                b * q * beta,
                b * q * alpha - 2.0 * c * t,
            )
            num = (
                e * q * alpha + 2.0 * f * t,
                e * q * beta,
                e * q * alpha - 2.0 * f * t,
            )
        else:
            den = (
                2.0 * b * t + c * q * alpha,
                c * q * beta,
                c * q * alpha - 2.0 * b * t,
            )
            num = (
                2.0 * e * t + f * q * alpha,
                f * q * beta,
                f * q * alpha - 2.0 * e * t,
            )

    return DigitalSection(
        a0=den[0],
        a1=den[1],
        a2=den[2],
        b0=gain * num[0],
        b1=gain * num[1],
        b2=gain * num[2],
    ).normalized()
