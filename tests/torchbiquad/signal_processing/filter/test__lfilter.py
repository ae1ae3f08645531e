# tests/torchbiquad/signal_processing/filter/test__lfilter.py
"""Tests for lfilter (direct form II transposed)."""

import pytest
import torch
from scipy import signal as scipy_signal

from torchbiquad.signal_processing.filter import lfilter


class TestLfilterForward:
    """Test lfilter forward correctness."""

    def test_matches_scipy(self) -> None:
        """Output should match scipy.signal.lfilter."""
        b, a = scipy_signal.butter(3, 0.3)
        x = torch.randn(200, dtype=torch.float64, generator=torch.Generator().manual_seed(0))

        y = lfilter(torch.from_numpy(b), torch.from_numpy(a), x)

        y_scipy = scipy_signal.lfilter(b, a, x.numpy())
        torch.testing.assert_close(y, torch.from_numpy(y_scipy), rtol=1e-10, atol=1e-12)

    def test_fir(self) -> None:
        """A one-coefficient denominator gives a moving average."""
        y = lfilter(
            torch.tensor([0.5, 0.5], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
            torch.tensor([1.0, 0.0, 0.0, 2.0], dtype=torch.float64),
        )

        torch.testing.assert_close(
            y, torch.tensor([0.5, 0.5, 0.0, 1.0], dtype=torch.float64)
        )

    def test_unnormalized_denominator(self) -> None:
        """Coefficients are normalized by a[0]."""
        b = torch.tensor([2.0, 1.0], dtype=torch.float64)
        a = torch.tensor([2.0, -1.0], dtype=torch.float64)
        x = torch.ones(10, dtype=torch.float64)

        y = lfilter(b, a, x)

        y_scipy = scipy_signal.lfilter(b.numpy(), a.numpy(), x.numpy())
        torch.testing.assert_close(y, torch.from_numpy(y_scipy))

    def test_integer_input(self) -> None:
        """Integer inputs are filtered in float64."""
        y = lfilter(torch.tensor([1]), torch.tensor([1]), torch.tensor([1, 2, 3]))

        assert y.dtype == torch.float64


class TestLfilterState:
    """Test initial and final state handling."""

    def test_zi_matches_scipy(self) -> None:
        """Initial and final state should match scipy."""
        b, a = scipy_signal.butter(2, 0.25)
        zi = scipy_signal.lfilter_zi(b, a)
        x = torch.linspace(-1.0, 1.0, 50, dtype=torch.float64)

        y, zf = lfilter(
            torch.from_numpy(b), torch.from_numpy(a), x, zi=torch.from_numpy(zi)
        )

        y_scipy, zf_scipy = scipy_signal.lfilter(b, a, x.numpy(), zi=zi)
        torch.testing.assert_close(y, torch.from_numpy(y_scipy))
        torch.testing.assert_close(zf, torch.from_numpy(zf_scipy))

    def test_chunked_matches_whole(self) -> None:
        """Filtering in two chunks with carried state matches one pass."""
        b = torch.tensor([0.2, 0.4, 0.2], dtype=torch.float64)
        a = torch.tensor([1.0, -0.5, 0.3], dtype=torch.float64)
        x = torch.randn(100, dtype=torch.float64, generator=torch.Generator().manual_seed(1))

        whole = lfilter(b, a, x)
        first, state = lfilter(b, a, x[:40], zi=torch.zeros(2, dtype=torch.float64))
        second, _ = lfilter(b, a, x[40:], zi=state)

        torch.testing.assert_close(torch.cat([first, second]), whole)


class TestLfilterBatched:
    """Test batched filtering."""

    @pytest.mark.parametrize("dim", [0, 1, -1])
    def test_dim(self, dim) -> None:
        """Filtering along any dimension matches scipy's axis."""
        b, a = scipy_signal.butter(2, 0.4)
        x = torch.randn(6, 7, 8, dtype=torch.float64, generator=torch.Generator().manual_seed(2))

        y = lfilter(torch.from_numpy(b), torch.from_numpy(a), x, dim=dim)

        y_scipy = scipy_signal.lfilter(b, a, x.numpy(), axis=dim)
        assert y.shape == x.shape
        torch.testing.assert_close(y, torch.from_numpy(y_scipy))

    def test_batched_state_shape(self) -> None:
        """Final state has one row per batch element."""
        b = torch.tensor([1.0, 0.5, 0.25], dtype=torch.float64)
        a = torch.tensor([1.0, -0.2], dtype=torch.float64)
        x = torch.ones(3, 20, dtype=torch.float64)

        _, zf = lfilter(b, a, x, zi=torch.zeros(2, dtype=torch.float64))

        assert zf.shape == (3, 2)
