"""Tonic extraction - Dominant frequency of a magnitude spectrum."""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..core.errors import InvalidArgumentError


class TonicFinder(ABC):
    """Abstract base class for dominant-frequency search."""

    def find_tonic(
        self,
        magnitudes: Sequence[float],
        fft_size: int,
        sample_rate: int,
    ) -> float:
        """
        Find the frequency with the highest magnitude.

        Args:
            magnitudes: Magnitude per frequency bin (complex bins are
                reduced to their absolute value)
            fft_size: Transform size the bins come from
            sample_rate: Sample rate of the transformed signal

        Returns:
            Frequency of the dominant bin in Hz

        Raises:
            InvalidArgumentError: If magnitudes are empty or all NaN, or
                fft_size or sample_rate is not positive
        """
        if magnitudes is None:
            raise InvalidArgumentError("Magnitudes are required")
        if not sample_rate or sample_rate < 0:
            raise InvalidArgumentError(f"Invalid sample rate: {sample_rate}")
        if not fft_size or fft_size < 0:
            raise InvalidArgumentError(f"Invalid FFT size: {fft_size}")

        magnitudes = np.asarray(magnitudes)
        if magnitudes.ndim != 1 or magnitudes.size == 0:
            raise InvalidArgumentError("Magnitudes must be a non-empty 1-D sequence")
        if np.iscomplexobj(magnitudes):
            magnitudes = np.abs(magnitudes)
        if np.all(np.isnan(magnitudes)):
            raise InvalidArgumentError("Magnitudes are all NaN")

        return self.peak_index(magnitudes) * sample_rate / fft_size

    @abstractmethod
    def peak_index(self, magnitudes: np.ndarray) -> int:
        """
        Index of the largest magnitude, the lowest one on ties.

        NaN bins never win.

        Args:
            magnitudes: Real 1-D array with at least one non-NaN value
        """
        pass


class LinearTonicFinder(TonicFinder):
    """Full scan over every bin."""

    def peak_index(self, magnitudes: np.ndarray) -> int:
        # nanargmax returns the first occurrence of the maximum
        return int(np.nanargmax(magnitudes))


def find_tonic(
    magnitudes: Sequence[float],
    fft_size: int,
    sample_rate: int,
) -> float:
    """Dominant frequency using a full linear scan."""
    return LinearTonicFinder().find_tonic(magnitudes, fft_size, sample_rate)
