"""Split quartic roots into two digital biquads."""

import cmath
import math
from typing import List, Optional, Tuple, Union

from torchbiquad.polynomial import DEGENERACY_CUTOFF, RootSet

from ._digital_section import DigitalSection
from ._pass_type import PassType


def signed_sqrt(value: float) -> float:
    """Square root of ``|value|`` carrying the sign of ``value``."""
    return math.copysign(math.sqrt(abs(value)), value)


def assemble_sections(
    denominator_roots: RootSet,
    numerator_roots: RootSet,
    denominator_scale: float,
    numerator_scale: float,
    *,
    all_pole: bool,
    pass_type: Union[PassType, str],
    degeneracy_cutoff: Optional[float] = None,
) -> Tuple[DigitalSection, DigitalSection]:
    """
    Build two biquads from the roots of a denominator and numerator quartic.

    Parameters
    ----------
    denominator_roots, numerator_roots : RootSet
        Up to four roots each. Missing roots are taken to be at the origin.
    denominator_scale, numerator_scale : float
        Per-section scale, usually ``signed_sqrt`` of the quartic's leading
        coefficient, so the two sections multiply back to the quartic.
    all_pole : bool
        Whether the prototype has no finite zeros.
    pass_type : PassType or str
        ``BANDPASS`` or ``NOTCH``.
    degeneracy_cutoff : float, optional
        Roots with ``|imag|`` at most this are treated as real. Defaults to
        ``DEGENERACY_CUTOFF``.

    Returns
    -------
    tuple of DigitalSection
        Two sections, each normalized so that ``a0 == 1``.

    Notes
    -----
    Conjugate pairs stay together and are ordered by the magnitude of their
    angle, so the lower-frequency pole pair is matched with the
    lower-frequency zero pair. Real roots are sorted and paired from the
    outside in. For an all-pole bandpass the numerator roots are
    :math:`\\{-1, -1, 1, 1\\}`, which pairs them as :math:`z^2 - 1`; its
    ``b1`` is then set to exactly zero.

    Each pair :math:`(r_0, r_1)` becomes
    :math:`g (1 - (r_0 + r_1) z^{-1} + r_0 r_1 z^{-2})`.
    """
    pass_type = PassType(pass_type)

    if degeneracy_cutoff is None:
        degeneracy_cutoff = DEGENERACY_CUTOFF

    poles = _pair_roots(denominator_roots, degeneracy_cutoff)
    zeros = _pair_roots(numerator_roots, degeneracy_cutoff)

    sections = []
    for pole_pair, zero_pair in zip(poles, zeros):
        a0, a1, a2 = _expand_pair(pole_pair, denominator_scale)
        b0, b1, b2 = _expand_pair(zero_pair, numerator_scale)
        if all_pole and pass_type is PassType.BANDPASS:
            b1 = 0.0
        section = DigitalSection(a0=a0, a1=a1, a2=a2, b0=b0, b1=b1, b2=b2)
        sections.append(section.normalized())

    return sections[0], sections[1]


def _pair_roots(
    roots: RootSet,
    cutoff: float,
) -> List[Tuple[complex, complex]]:
    upper = []
    real = []
    for root in roots.as_complex():
        if abs(root.imag) <= cutoff:
            real.append(root.real)
        elif root.imag > 0.0:
            upper.append(root)

    upper.sort(key=lambda root: abs(cmath.phase(root)))
    pairs = [(root, root.conjugate()) for root in upper]

    real.extend([0.0] * (4 - 2 * len(pairs) - len(real)))
    real.sort()
    while len(real) >= 2:
        pairs.append((complex(real.pop(0)), complex(real.pop())))

    return pairs


def _expand_pair(
    pair: Tuple[complex, complex],
    scale: float,
) -> Tuple[float, float, float]:
    r0, r1 = pair
    total = (r0 + r1).real
    product = (r0 * r1).real
    return scale, -scale * total, scale * product
