"""Tests for design_filter."""

import math

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchbiquad.signal_processing.filter_analysis import frequency_response_sos
from torchbiquad.signal_processing.filter_design import (
    AllocationError,
    DigitalCascade,
    FilterFamily,
    InvalidParameterError,
    PassType,
    design_filter,
    sos_sections_count,
)

SAMPLING_FREQUENCY = 8000.0


def _scipy_sos(family: str, pass_type: str, order: int, corner: float):
    btype = {"lowpass": "lowpass", "highpass": "highpass"}[pass_type]
    kwargs = dict(btype=btype, fs=SAMPLING_FREQUENCY, output="sos")
    if family == "butterworth":
        return scipy_signal.butter(order, corner, **kwargs)
    if family == "chebyshev":
        return scipy_signal.cheby1(order, 0.5, corner, **kwargs)
    if family == "inverse_chebyshev":
        return scipy_signal.cheby2(order, 60.0, corner, **kwargs)
    if family == "bessel":
        return scipy_signal.bessel(order, corner, norm="mag", **kwargs)
    return scipy_signal.ellip(order, 0.5, 60.0, corner, **kwargs)


def _magnitude(cascade, frequencies):
    _, response = frequency_response_sos(
        cascade,
        torch.tensor(frequencies, dtype=torch.float64),
        sampling_frequency=SAMPLING_FREQUENCY,
    )
    return response.abs().numpy()


class TestDesignFilterScenarios:
    """End-to-end design scenarios."""

    def test_butterworth_lowpass(self) -> None:
        """4-pole Butterworth lowpass at 1 kHz gives 2 stable sections."""
        cascade = design_filter(
            "butterworth", "lowpass", 4, 1000.0, SAMPLING_FREQUENCY
        )

        assert isinstance(cascade, DigitalCascade)
        assert len(cascade) == 2
        for section in cascade:
            assert section.a0 == 1.0
            for pole in section.poles():
                assert abs(pole) < 1.0

    def test_butterworth_bandpass(self) -> None:
        """4-pole Butterworth bandpass gives 4 sections, each a0 = 1."""
        cascade = design_filter(
            "butterworth",
            "bandpass",
            4,
            1000.0,
            SAMPLING_FREQUENCY,
            bandwidth=200.0,
        )

        assert len(cascade) == 4
        for section in cascade:
            assert section.a0 == 1.0
            for pole in section.poles():
                assert abs(pole) < 1.0

    def test_enums_and_strings_are_interchangeable(self) -> None:
        """Enum members and their string values design the same filter."""
        from_strings = design_filter(
            "chebyshev", "highpass", 5, 700.0, SAMPLING_FREQUENCY
        )
        from_enums = design_filter(
            FilterFamily.CHEBYSHEV,
            PassType.HIGHPASS,
            5,
            700.0,
            SAMPLING_FREQUENCY,
        )

        assert from_strings == from_enums


class TestDesignFilterResponse:
    """Frequency-domain properties of designed cascades."""

    @pytest.mark.parametrize(
        "family",
        ["butterworth", "chebyshev", "inverse_chebyshev", "bessel", "elliptic"],
    )
    @pytest.mark.parametrize("pass_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [4, 5])
    def test_matches_scipy_magnitude(self, family, pass_type, order) -> None:
        """Magnitude response matches scipy's design up to a constant gain."""
        corner = 1200.0
        cascade = design_filter(
            family,
            pass_type,
            order,
            corner,
            SAMPLING_FREQUENCY,
            passband_ripple_db=0.5,
            stopband_attenuation_db=60.0,
        )
        sos = _scipy_sos(family, pass_type, order, corner)

        frequencies = np.linspace(0.0, SAMPLING_FREQUENCY / 2, 257)
        _, expected = scipy_signal.sosfreqz(
            sos, worN=frequencies, fs=SAMPLING_FREQUENCY
        )
        expected = np.abs(expected)
        actual = _magnitude(cascade, frequencies)

        # Passband reference: DC for lowpass, Nyquist for highpass
        reference = 0 if pass_type == "lowpass" else -1
        np.testing.assert_allclose(
            actual / actual[reference],
            expected / expected[reference],
            rtol=1e-6,
            atol=1e-9,
        )

    def test_butterworth_lowpass_half_power_at_corner(self) -> None:
        """Butterworth lowpass is -3 dB at the corner frequency."""
        cascade = design_filter(
            "butterworth", "lowpass", 6, 1000.0, SAMPLING_FREQUENCY
        )

        magnitude = _magnitude(cascade, [1000.0])[0]

        assert 20 * math.log10(magnitude) == pytest.approx(
            -10 * math.log10(2), abs=1e-9
        )

    @pytest.mark.parametrize(
        "family",
        ["butterworth", "chebyshev", "inverse_chebyshev", "bessel", "elliptic"],
    )
    @pytest.mark.parametrize("order", [4, 5, 6])
    def test_bandpass_unit_gain_at_center(self, family, order) -> None:
        """Bandpass cascades have unit gain at the center frequency."""
        cascade = design_filter(
            family,
            "bandpass",
            order,
            1500.0,
            SAMPLING_FREQUENCY,
            bandwidth=300.0,
        )

        assert len(cascade) == order
        magnitude = _magnitude(cascade, [1500.0])[0]
        assert magnitude == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("family", ["butterworth", "chebyshev", "bessel"])
    @pytest.mark.parametrize("order", [4, 5])
    def test_all_pole_notch_rejects_center(self, family, order) -> None:
        """All-pole notch cascades have zero gain at the center frequency."""
        cascade = design_filter(
            family,
            "notch",
            order,
            1500.0,
            SAMPLING_FREQUENCY,
            bandwidth=300.0,
        )

        center, dc = _magnitude(cascade, [1500.0, 0.0])
        assert center == pytest.approx(0.0, abs=1e-6)
        assert dc == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("family", ["butterworth", "chebyshev", "bessel"])
    @pytest.mark.parametrize("center", [300.0, 1000.0, 2000.0, 3700.0])
    def test_all_pole_notch_zeros_on_unit_circle(self, family, center) -> None:
        """All-pole notch zeros lie on the unit circle with b0 equal to b2."""
        cascade = design_filter(
            family,
            "notch",
            4,
            center,
            SAMPLING_FREQUENCY,
            bandwidth=200.0,
        )

        for section in cascade:
            assert section.b0 == pytest.approx(section.b2, abs=1e-12)
            for zero in section.zeros().as_complex():
                assert abs(abs(zero) - 1.0) < 1e-12

        dc = _magnitude(cascade, [0.0])[0]
        assert dc == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("pass_type", ["bandpass", "notch"])
    def test_bandpass_and_notch_stable(self, pass_type) -> None:
        """Every bandpass and notch section has its poles inside the unit circle."""
        for center in [250.0, 1000.0, 2000.0, 3500.0]:
            cascade = design_filter(
                "elliptic",
                pass_type,
                6,
                center,
                SAMPLING_FREQUENCY,
                bandwidth=100.0,
            )
            for section in cascade:
                assert section.a0 == 1.0
                for pole in section.poles():
                    assert abs(pole) < 1.0

    def test_all_pole_bandpass_zero_b1(self) -> None:
        """All-pole bandpass sections have b1 exactly zero."""
        cascade = design_filter(
            "butterworth",
            "bandpass",
            6,
            900.0,
            SAMPLING_FREQUENCY,
            bandwidth=100.0,
        )

        assert all(section.b1 == 0.0 for section in cascade)


class TestDesignFilterOut:
    """Tests for the optional coefficient buffer."""

    def test_out_is_filled(self) -> None:
        """A correctly sized out tensor receives the coefficients."""
        out = torch.zeros(sos_sections_count(5, "bandpass"), 6)

        cascade = design_filter(
            "butterworth",
            "bandpass",
            5,
            1000.0,
            SAMPLING_FREQUENCY,
            bandwidth=200.0,
            out=out,
        )

        torch.testing.assert_close(out, cascade.to_sos(dtype=torch.float32))
        torch.testing.assert_close(out[:, 3], torch.ones(5))

    def test_out_wrong_shape(self) -> None:
        """A wrongly sized out tensor raises AllocationError."""
        out = torch.zeros(2, 6)

        with pytest.raises(AllocationError):
            design_filter(
                "butterworth",
                "bandpass",
                4,
                1000.0,
                SAMPLING_FREQUENCY,
                bandwidth=200.0,
                out=out,
            )

        assert torch.all(out == 0)

    def test_out_integer_dtype(self) -> None:
        """An integer out tensor raises AllocationError."""
        with pytest.raises(AllocationError):
            design_filter(
                "butterworth",
                "lowpass",
                4,
                1000.0,
                SAMPLING_FREQUENCY,
                out=torch.zeros(2, 6, dtype=torch.int64),
            )


class TestDesignFilterValidation:
    """Tests for parameter validation."""

    def test_unknown_family(self) -> None:
        """An unknown family is rejected."""
        with pytest.raises(InvalidParameterError):
            design_filter("gaussian", "lowpass", 4, 1000.0, SAMPLING_FREQUENCY)

    def test_unknown_pass_type(self) -> None:
        """An unknown pass type is rejected."""
        with pytest.raises(InvalidParameterError):
            design_filter("butterworth", "allpass", 4, 1000.0, SAMPLING_FREQUENCY)

    @pytest.mark.parametrize("pole_count", [0, 1, 11, 2.0, True])
    def test_pole_count_out_of_range(self, pole_count) -> None:
        """Pole counts outside 2..10 or non-integers are rejected."""
        with pytest.raises(InvalidParameterError):
            design_filter(
                "butterworth", "lowpass", pole_count, 1000.0, SAMPLING_FREQUENCY
            )

    @pytest.mark.parametrize("pole_count", [2, 3])
    def test_elliptic_minimum_pole_count(self, pole_count) -> None:
        """Elliptic designs need at least four poles."""
        with pytest.raises(InvalidParameterError):
            design_filter(
                "elliptic", "lowpass", pole_count, 1000.0, SAMPLING_FREQUENCY
            )

    @pytest.mark.parametrize("corner", [0.0, -100.0, 4000.0, 5000.0])
    def test_corner_frequency_out_of_range(self, corner) -> None:
        """The corner frequency must lie strictly between 0 and Nyquist."""
        with pytest.raises(InvalidParameterError):
            design_filter("butterworth", "lowpass", 4, corner, SAMPLING_FREQUENCY)

    def test_sampling_frequency_positive(self) -> None:
        """A non-positive sampling frequency is rejected."""
        with pytest.raises(InvalidParameterError):
            design_filter("butterworth", "lowpass", 4, 1000.0, 0.0)

    @pytest.mark.parametrize("pass_type", ["bandpass", "notch"])
    @pytest.mark.parametrize("bandwidth", [None, 0.0, -10.0])
    def test_bandwidth_required(self, pass_type, bandwidth) -> None:
        """Bandpass and notch designs need a positive bandwidth."""
        with pytest.raises(InvalidParameterError):
            design_filter(
                "butterworth",
                pass_type,
                4,
                1000.0,
                SAMPLING_FREQUENCY,
                bandwidth=bandwidth,
            )

    def test_bandwidth_ignored_for_lowpass(self) -> None:
        """A bandwidth passed to a lowpass design has no effect."""
        with_bandwidth = design_filter(
            "butterworth", "lowpass", 4, 1000.0, SAMPLING_FREQUENCY, 200.0
        )
        without = design_filter(
            "butterworth", "lowpass", 4, 1000.0, SAMPLING_FREQUENCY
        )

        assert with_bandwidth == without
