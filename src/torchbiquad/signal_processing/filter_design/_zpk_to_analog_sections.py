"""Group analog zeros and poles into second-order sections."""

from typing import List, Tuple

from torch import Tensor

from torchbiquad.polynomial import DEGENERACY_CUTOFF

from ._analog_section import AnalogSection


def zpk_to_analog_sections(
    zeros: Tensor,
    poles: Tensor,
) -> Tuple[AnalogSection, ...]:
    """
    Group an analog lowpass prototype into second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Complex tensor of zeros, purely imaginary and in conjugate pairs.
    poles : Tensor
        Complex tensor of left half-plane poles in conjugate pairs, with at
        most one real pole.

    Returns
    -------
    sections : tuple of AnalogSection
        ``ceil(len(poles) / 2)`` sections.

    Notes
    -----
    A conjugate pole pair :math:`p, \\bar p` gives the denominator
    :math:`s^2 - 2\\operatorname{Re}(p) s + |p|^2` and a real pole gives
    :math:`s - p`. A conjugate zero pair gives the numerator
    :math:`s^2 + |z|^2`; a section without zeros gets the constant
    numerator :math:`c`, so all-pole sections have unity DC gain.

    The single-pole section comes first and the two-pole sections follow in
    order of increasing Q. Zero pairs are matched in order of decreasing
    frequency, so the highest-Q pole pair receives the zero pair closest to
    the passband.
    """
    pole_pairs, real_poles = _split_conjugates(poles.tolist())
    zero_pairs, _ = _split_conjugates(zeros.tolist())

    denominators: List[Tuple[float, float, float]] = []
    for p in pole_pairs:
        denominators.append((1.0, -2.0 * p.real, abs(p) ** 2))

    real_poles.sort()
    while len(real_poles) >= 2:
        p0, p1 = real_poles.pop(0), real_poles.pop()
        denominators.append((1.0, -(p0 + p1), p0 * p1))

    # Increasing Q = sqrt(c) / b
    denominators.sort(key=lambda den: den[2] ** 0.5 / den[1])

    zero_pairs.sort(key=abs, reverse=True)
    offset = len(denominators) - len(zero_pairs)

    sections: List[AnalogSection] = []
    if real_poles:
        p = real_poles[0]
        sections.append(AnalogSection(0.0, 1.0, -p, 0.0, 0.0, -p))

    for index, (a, b, c) in enumerate(denominators):
        if index >= offset:
            z = zero_pairs[index - offset]
            d, e, f = 1.0, -2.0 * z.real, abs(z) ** 2
        else:
            d, e, f = 0.0, 0.0, c
        sections.append(AnalogSection(a, b, c, d, e, f))

    return tuple(sections)


def _split_conjugates(
    roots: List[complex],
) -> Tuple[List[complex], List[float]]:
    """Upper half-plane members of conjugate pairs, and the real roots."""
    pairs: List[complex] = []
    real: List[float] = []
    for root in roots:
        if abs(root.imag) <= DEGENERACY_CUTOFF * max(1.0, abs(root)):
            real.append(root.real)
        elif root.imag > 0.0:
            pairs.append(root)
    return pairs, real
