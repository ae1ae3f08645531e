from typing import List, Optional, Union

from torchbiquad.polynomial import polynomial_roots

from ._analog_section import AnalogPrototype
from ._assemble_sections import assemble_sections, signed_sqrt
from ._bilinear_quartic import bilinear_quartic
from ._bilinear_section import bilinear_section
from ._digital_section import DigitalCascade, DigitalSection
from ._pass_type import PassType
from ._warp_parameters import WarpParameters


def realize_cascade(
    prototype: AnalogPrototype,
    pass_type: Union[PassType, str],
    warp: WarpParameters,
    *,
    critical_frequency_tolerance: Optional[float] = None,
) -> DigitalCascade:
    """
    Map every section of an analog prototype to digital biquads.

    Sections are processed in prototype order. Lowpass and highpass
    sections, and single-pole bandpass and notch sections, give one biquad
    each. Two-pole bandpass and notch sections give a quartic that is
    factored into two biquads.

    Parameters
    ----------
    prototype : AnalogPrototype
        Normalized lowpass prototype.
    pass_type : PassType or str
        Frequency transformation.
    warp : WarpParameters
        Prewarped frequency scale and quality factor.
    critical_frequency_tolerance : float, optional
        Forwarded to :func:`bilinear_quartic`.

    Returns
    -------
    DigitalCascade
    """
    pass_type = PassType(pass_type)

    sections: List[DigitalSection] = []
    for section in prototype:
        if not pass_type.doubles_order or section.is_single_pole:
            sections.append(bilinear_section(section, pass_type, warp))
            continue

        denominator, numerator = bilinear_quartic(
            section,
            pass_type,
            warp,
            critical_frequency_tolerance=critical_frequency_tolerance,
        )
        sections.extend(
            assemble_sections(
                polynomial_roots(denominator),
                polynomial_roots(numerator),
                signed_sqrt(denominator[0]),
                signed_sqrt(numerator[0]),
                all_pole=prototype.all_pole,
                pass_type=pass_type,
            )
        )

    return DigitalCascade(tuple(sections))
