"""Tests for dominant-frequency search."""

import numpy as np
import pytest

from pitchmap.analysis import LinearTonicFinder, TonicFinder, find_tonic
from pitchmap.core import InvalidArgumentError


class TestFindTonic:
    """Tests for the linear tonic search."""

    def test_peak_bin_to_hz(self):
        magnitudes = np.zeros(513)
        magnitudes[41] = 1.0
        assert find_tonic(magnitudes, fft_size=1024, sample_rate=22050) == 41 * 22050 / 1024

    def test_plain_list(self):
        assert find_tonic([0.0, 1.0, 5.0, 3.0], fft_size=8, sample_rate=8000) == 2000.0

    def test_first_maximum_wins(self):
        assert find_tonic([1.0, 5.0, 2.0, 5.0], fft_size=8, sample_rate=8000) == 1000.0

    def test_dc_bin(self):
        assert find_tonic([3.0, 1.0, 1.0], fft_size=4, sample_rate=8000) == 0.0

    def test_complex_bins(self):
        bins = np.array([0.0, 3 + 4j, 4.0, 1j])
        assert find_tonic(bins, fft_size=8, sample_rate=800) == 100.0

    def test_nan_bins_ignored(self):
        nan = float("nan")
        assert find_tonic([1.0, nan, 5.0], fft_size=4, sample_rate=400) == 200.0
        assert find_tonic([nan, 2.0, 1.0], fft_size=4, sample_rate=400) == 100.0

    def test_all_nan_rejected(self):
        with pytest.raises(InvalidArgumentError):
            find_tonic(np.full(8, np.nan), fft_size=16, sample_rate=8000)

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            find_tonic([], fft_size=8, sample_rate=8000)
        with pytest.raises(InvalidArgumentError):
            find_tonic(None, fft_size=8, sample_rate=8000)

    def test_zero_sample_rate_rejected(self):
        with pytest.raises(InvalidArgumentError):
            find_tonic([1.0, 2.0], fft_size=8, sample_rate=0)

    def test_zero_fft_size_rejected(self):
        with pytest.raises(InvalidArgumentError):
            find_tonic([1.0, 2.0], fft_size=0, sample_rate=8000)

    def test_two_dimensional_rejected(self):
        with pytest.raises(InvalidArgumentError):
            find_tonic(np.ones((4, 4)), fft_size=8, sample_rate=8000)


class TestTonicFinderStrategy:
    """Tonic search strategies are interchangeable."""

    def test_custom_strategy(self):
        class LastBinFinder(TonicFinder):
            def peak_index(self, magnitudes):
                return len(magnitudes) - 1

        assert LastBinFinder().find_tonic([5.0, 1.0, 0.0], fft_size=4, sample_rate=400) == 200.0

    def test_linear_is_a_tonic_finder(self):
        assert isinstance(LinearTonicFinder(), TonicFinder)
        assert LinearTonicFinder().peak_index(np.array([0.0, 2.0, 2.0])) == 1
