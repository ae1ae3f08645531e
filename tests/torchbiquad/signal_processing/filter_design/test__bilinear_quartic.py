"""Tests for bilinear_quartic."""

import cmath
import math

import pytest

from torchbiquad.polynomial import polynomial_evaluate
from torchbiquad.signal_processing.filter_design import (
    AnalogSection,
    WarpParameters,
    bilinear_quartic,
    warp_parameters,
)

TWO_POLE = AnalogSection(1.0, math.sqrt(2.0), 1.0, 0.0, 0.0, 1.0)
ELLIPTIC_LIKE = AnalogSection(1.0, 0.3, 1.2, 1.0, 0.0, 5.0)


def _center(warp):
    return cmath.exp(2j * math.atan(warp.t / 2.0))


class TestBilinearQuartic:
    """Tests for the bandpass and notch quartics."""

    def test_degree(self) -> None:
        """Both polynomials have degree four."""
        den, num = bilinear_quartic(
            TWO_POLE, "bandpass", warp_parameters(1000.0, 8000.0, 200.0)
        )

        assert den.degree == 4
        assert num.degree == 4

    @pytest.mark.parametrize("section", [TWO_POLE, ELLIPTIC_LIKE])
    def test_bandpass_unit_gain_at_center(self, section) -> None:
        """Bandpass quartics have unity gain at the center frequency."""
        warp = warp_parameters(1000.0, 8000.0, 200.0)
        den, num = bilinear_quartic(section, "bandpass", warp)

        z = _center(warp)
        ratio = polynomial_evaluate(num, z) / polynomial_evaluate(den, z)

        assert abs(ratio) == pytest.approx(1.0, abs=1e-9)

    def test_all_pole_bandpass_numerator(self) -> None:
        """All-pole bandpass numerators are proportional to (z^2 - 1)^2."""
        den, num = bilinear_quartic(
            TWO_POLE, "bandpass", warp_parameters(1000.0, 8000.0, 200.0)
        )

        leading = num[0]
        assert [c / leading for c in num.coeffs] == pytest.approx(
            [1.0, 0.0, -2.0, 0.0, 1.0], abs=1e-15
        )

    def test_all_pole_notch_rejects_center(self) -> None:
        """All-pole notch numerators vanish at the center frequency."""
        warp = warp_parameters(1000.0, 8000.0, 200.0)
        den, num = bilinear_quartic(TWO_POLE, "notch", warp)

        z = _center(warp)
        ratio = polynomial_evaluate(num, z) / polynomial_evaluate(den, z)

        assert abs(ratio) == pytest.approx(0.0, abs=1e-9)
        assert polynomial_evaluate(num, 1.0) / polynomial_evaluate(
            den, 1.0
        ) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("pass_type", ["bandpass", "notch"])
    def test_critical_frequency_zeroes_odd_terms(self, pass_type) -> None:
        """Near T = 2 the z^3 and z^1 coefficients are exactly zero."""
        den, num = bilinear_quartic(
            TWO_POLE, pass_type, WarpParameters(t=2.0 + 1e-4, q=4.0)
        )

        assert den[1] == 0.0 and den[3] == 0.0
        assert num[1] == 0.0 and num[3] == 0.0

    def test_critical_frequency_tolerance(self) -> None:
        """A zero tolerance keeps the odd terms near T = 2."""
        den, _ = bilinear_quartic(
            TWO_POLE,
            "bandpass",
            WarpParameters(t=2.0 + 1e-4, q=4.0),
            critical_frequency_tolerance=0.0,
        )

        assert den[1] != 0.0
        assert den[3] != 0.0

    def test_away_from_critical_frequency(self) -> None:
        """Away from T = 2 the odd terms are kept."""
        den, _ = bilinear_quartic(
            TWO_POLE, "notch", warp_parameters(500.0, 8000.0, 100.0)
        )

        assert den[1] != 0.0

    def test_single_pole_rejected(self) -> None:
        """Single-pole sections raise ValueError."""
        section = AnalogSection(0.0, 1.0, 1.0, 0.0, 0.0, 1.0)

        with pytest.raises(ValueError):
            bilinear_quartic(section, "bandpass", WarpParameters(t=1.0, q=2.0))

    @pytest.mark.parametrize("pass_type", ["lowpass", "highpass"])
    def test_lowpass_highpass_rejected(self, pass_type) -> None:
        """Lowpass and highpass transforms raise ValueError."""
        with pytest.raises(ValueError):
            bilinear_quartic(TWO_POLE, pass_type, WarpParameters(t=1.0, q=2.0))
