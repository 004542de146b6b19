"""Tests for frame-level pitch detection."""

import numpy as np
import pytest
import librosa

from pitchmap.analysis import (
    LinearTonicFinder,
    PitchDetector,
    WindowType,
    magnitude_spectrum,
)
from pitchmap.core import InvalidArgumentError, Note
from pitchmap.pitch import PitchCalculator


def sine(freq: float, sr: int, n_samples: int) -> np.ndarray:
    """Generate a unit sine wave."""
    t = np.arange(n_samples) / sr
    return np.sin(2 * np.pi * freq * t)


class TestMagnitudeSpectrum:
    """Tests for magnitude_spectrum."""

    def test_peak_bin(self):
        magnitudes = magnitude_spectrum(sine(440.0, 8000, 8000))
        assert len(magnitudes) == 4001
        assert int(np.argmax(magnitudes)) == 440

    def test_input_not_modified(self):
        samples = np.ones(64)
        magnitude_spectrum(samples, WindowType.HANN)
        np.testing.assert_array_equal(samples, np.ones(64))

    def test_zero_padding(self):
        magnitudes = magnitude_spectrum(np.ones(100), WindowType.DEFAULT, fft_size=256)
        assert len(magnitudes) == 129
        assert magnitudes[0] == pytest.approx(100.0)

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            magnitude_spectrum(np.array([]))


class TestPitchDetector:
    """End-to-end tests from spectrum or samples to a pitch."""

    @pytest.fixture
    def detector(self):
        return PitchDetector()

    def test_get_pitch_exact_bin(self, detector):
        magnitudes = np.zeros(4001)
        magnitudes[440] = 1.0
        assert detector.get_pitch(magnitudes, fft_size=8000, sample_rate=8000) == 440.0

    def test_get_pitch_quantizes(self, detector):
        magnitudes = np.zeros(4001)
        magnitudes[263] = 1.0
        assert detector.get_pitch(magnitudes, fft_size=8000, sample_rate=8000) == 261.6256

    def test_get_pitch_dc_only(self, detector):
        assert detector.get_pitch(np.zeros(16), fft_size=32, sample_rate=8000) is None

    def test_get_pitch_invalid_input(self, detector):
        with pytest.raises(InvalidArgumentError):
            detector.get_pitch([], fft_size=32, sample_rate=8000)
        with pytest.raises(InvalidArgumentError):
            detector.get_pitch([1.0, 2.0], fft_size=32, sample_rate=0)

    def test_detect_a4(self, detector):
        estimate = detector.detect(sine(440.0, 8000, 8000), 8000)
        assert estimate.tonic == 440.0
        assert estimate.pitch == 440.0
        assert estimate.note is Note.A
        assert estimate.octave == 4
        assert estimate.name == "A4"

    @pytest.mark.parametrize("note_name,expected_note,expected_octave", [
        ("C4", Note.C, 4),
        ("E2", Note.E, 2),
        ("F#5", Note.F_SHARP, 5),
        ("B6", Note.B, 6),
    ])
    def test_detect_librosa_tones(self, detector, note_name, expected_note, expected_octave):
        """Tones synthesized with librosa are recognized."""
        sr = 22050
        freq = librosa.note_to_hz(note_name)
        tone = librosa.tone(freq, sr=sr, length=sr)
        estimate = detector.detect(tone, sr)
        assert estimate.note is expected_note
        assert estimate.octave == expected_octave
        assert estimate.name == note_name

    def test_detect_slightly_detuned(self, detector):
        estimate = detector.detect(sine(446.0, 8000, 8000), 8000)
        assert estimate.pitch == 440.0
        assert estimate.tonic == 446.0

    def test_detect_with_fft_size(self, detector):
        estimate = detector.detect(sine(440.0, 8000, 4000), 8000, fft_size=8000)
        assert estimate.name == "A4"

    def test_detect_silence(self, detector):
        assert detector.detect(np.zeros(1024), 8000) is None

    def test_custom_reference(self):
        detector = PitchDetector(calculator=PitchCalculator(reference_freq=432.0))
        estimate = detector.detect(sine(432.0, 8000, 8000), 8000)
        assert estimate.pitch == 432.0
        assert estimate.name == "A4"

    def test_components(self, detector):
        assert isinstance(detector.tonic_finder, LinearTonicFinder)
        assert detector.window is WindowType.HAMMING
