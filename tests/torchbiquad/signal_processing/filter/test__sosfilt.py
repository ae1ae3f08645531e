# tests/torchbiquad/signal_processing/filter/test__sosfilt.py
"""Tests for sosfilt (SOS filter application)."""

import math

import pytest
import torch
from scipy import signal as scipy_signal

from torchbiquad.signal_processing.filter import sosfilt
from torchbiquad.signal_processing.filter_design import design_filter


class TestSosfiltForward:
    """Test sosfilt forward correctness."""

    def test_matches_scipy(self) -> None:
        """Output should match scipy.signal.sosfilt."""
        cascade = design_filter("chebyshev", "lowpass", 5, 800.0, 8000.0)
        sos = cascade.to_sos(dtype=torch.float64)

        t = torch.arange(1000, dtype=torch.float64) / 8000.0
        x = torch.sin(2 * math.pi * 300 * t) + 0.5 * torch.sin(2 * math.pi * 2500 * t)

        y = sosfilt(cascade, x)

        y_scipy = scipy_signal.sosfilt(sos.numpy(), x.numpy())
        torch.testing.assert_close(y, torch.from_numpy(y_scipy), rtol=1e-8, atol=1e-10)

    def test_tensor_and_cascade_agree(self) -> None:
        """A cascade and its coefficient tensor filter identically."""
        cascade = design_filter(
            "butterworth", "bandpass", 4, 1000.0, 8000.0, bandwidth=200.0
        )
        x = torch.randn(300, dtype=torch.float64, generator=torch.Generator().manual_seed(0))

        torch.testing.assert_close(
            sosfilt(cascade, x), sosfilt(cascade.to_sos(dtype=torch.float64), x)
        )

    def test_notch_removes_tone(self) -> None:
        """A notch at the tone frequency suppresses it after the transient."""
        cascade = design_filter(
            "butterworth", "notch", 4, 1000.0, 8000.0, bandwidth=100.0
        )
        t = torch.arange(8000, dtype=torch.float64) / 8000.0
        x = torch.sin(2 * math.pi * 1000 * t)

        y = sosfilt(cascade, x)

        assert y[4000:].abs().max() < 0.01

    def test_lowpass_step_response(self) -> None:
        """A lowpass cascade settles to unit gain on a step input."""
        cascade = design_filter("bessel", "lowpass", 6, 500.0, 8000.0)

        y = sosfilt(cascade, torch.ones(2000, dtype=torch.float64))

        assert y[-1].item() == pytest.approx(1.0, abs=1e-9)


class TestSosfiltState:
    """Test initial and final state handling."""

    def test_zi_matches_scipy(self) -> None:
        """Initial and final state should match scipy."""
        sos = design_filter("elliptic", "highpass", 4, 1500.0, 8000.0).to_sos(
            dtype=torch.float64
        )
        zi = scipy_signal.sosfilt_zi(sos.numpy())
        x = torch.linspace(0.0, 1.0, 64, dtype=torch.float64)

        y, zf = sosfilt(sos, x, zi=torch.from_numpy(zi))

        y_scipy, zf_scipy = scipy_signal.sosfilt(sos.numpy(), x.numpy(), zi=zi)
        torch.testing.assert_close(y, torch.from_numpy(y_scipy))
        torch.testing.assert_close(zf, torch.from_numpy(zf_scipy))


class TestSosfiltBatched:
    """Test batched filtering."""

    def test_batch_matches_loop(self) -> None:
        """Batched filtering matches filtering each signal separately."""
        cascade = design_filter("butterworth", "highpass", 3, 300.0, 8000.0)
        x = torch.randn(4, 256, dtype=torch.float64, generator=torch.Generator().manual_seed(3))

        y = sosfilt(cascade, x)

        for row in range(4):
            torch.testing.assert_close(y[row], sosfilt(cascade, x[row]))

    def test_dim(self) -> None:
        """Filtering along dim 0 matches scipy's axis 0."""
        cascade = design_filter("butterworth", "lowpass", 4, 1000.0, 8000.0)
        sos = cascade.to_sos(dtype=torch.float64)
        x = torch.randn(128, 3, dtype=torch.float64, generator=torch.Generator().manual_seed(4))

        y = sosfilt(sos, x, dim=0)

        y_scipy = scipy_signal.sosfilt(sos.numpy(), x.numpy(), axis=0)
        torch.testing.assert_close(y, torch.from_numpy(y_scipy))
