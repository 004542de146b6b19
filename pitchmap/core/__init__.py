"""Core types and constants for pitchmap."""

from .note import Note, parse_note_name, round_freq, is_freq_valid
from .errors import InvalidArgumentError
from .constants import (
    PITCH_NAMES,
    FREQ_A4,
    FREQ_PRECISION,
    REFERENCE_OCTAVE,
    SEMITONES_PER_OCTAVE,
    OCTAVE_MIN,
    OCTAVE_MAX,
)

__all__ = [
    "Note",
    "parse_note_name",
    "round_freq",
    "is_freq_valid",
    "InvalidArgumentError",
    "PITCH_NAMES",
    "FREQ_A4",
    "FREQ_PRECISION",
    "REFERENCE_OCTAVE",
    "SEMITONES_PER_OCTAVE",
    "OCTAVE_MIN",
    "OCTAVE_MAX",
]
