"""Monophonic pitch detection from a single frame or spectrum."""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..core.note import Note, is_freq_valid
from ..pitch import PitchCalculator
from .spectrum import magnitude_spectrum
from .tonic import LinearTonicFinder, TonicFinder
from .windows import WindowType


@dataclass
class PitchEstimate:
    """Container for a detected pitch."""

    tonic: float  # Dominant frequency before quantization, Hz
    pitch: float  # Closest table pitch, Hz
    note: Note
    octave: Optional[int]  # None outside octaves 0..8
    name: str  # Scientific pitch name, e.g. 'A4'


class PitchDetector:
    """Quantize the dominant frequency of a spectrum to a musical pitch."""

    def __init__(
        self,
        calculator: Optional[PitchCalculator] = None,
        tonic_finder: Optional[TonicFinder] = None,
        window: WindowType = WindowType.HAMMING,
    ):
        """
        Initialize PitchDetector.

        Args:
            calculator: Pitch table owner (default: A4 = 440 Hz)
            tonic_finder: Dominant-bin search strategy (default: linear scan)
            window: Window applied by detect() before the transform
        """
        self.calculator = calculator if calculator is not None else PitchCalculator()
        self.tonic_finder = tonic_finder if tonic_finder is not None else LinearTonicFinder()
        self.window = window

    def get_pitch(
        self,
        magnitudes: Sequence[float],
        fft_size: int,
        sample_rate: int,
    ) -> Optional[float]:
        """
        Round the dominant frequency of a spectrum to the closest pitch.

        Args:
            magnitudes: Magnitude per frequency bin
            fft_size: Transform size
            sample_rate: Sample rate of the transformed signal

        Returns:
            Pitch frequency, or None when the DC bin dominates
        """
        tonic = self.tonic_finder.find_tonic(magnitudes, fft_size, sample_rate)
        if not is_freq_valid(tonic):
            return None
        return self.calculator.match_nearest(tonic)

    def estimate(
        self,
        magnitudes: Sequence[float],
        fft_size: int,
        sample_rate: int,
    ) -> Optional[PitchEstimate]:
        """Like get_pitch(), with the note, octave and name of the result."""
        tonic = self.tonic_finder.find_tonic(magnitudes, fft_size, sample_rate)
        if not is_freq_valid(tonic):
            return None

        pitch = self.calculator.match_nearest(tonic)
        if pitch is None:
            return None

        return PitchEstimate(
            tonic=tonic,
            pitch=pitch,
            note=self.calculator.pitch_to_note(pitch),
            octave=self.calculator.pitch_to_octave(pitch),
            name=self.calculator.note_name(pitch),
        )

    def detect(
        self,
        samples: np.ndarray,
        sample_rate: int,
        fft_size: Optional[int] = None,
    ) -> Optional[PitchEstimate]:
        """
        Estimate the pitch of a time-domain frame.

        Args:
            samples: Mono audio frame
            sample_rate: Sample rate of the frame
            fft_size: Transform size (default: frame length)

        Returns:
            PitchEstimate, or None for silent or DC-only input
        """
        if fft_size is None:
            fft_size = len(samples)
        magnitudes = magnitude_spectrum(samples, self.window, fft_size)
        return self.estimate(magnitudes, fft_size, sample_rate)
