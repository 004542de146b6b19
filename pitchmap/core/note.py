"""Note enumeration and frequency helpers."""

import math
from enum import IntEnum
from typing import Tuple

import numpy as np

from .constants import FREQ_PRECISION, PITCH_NAMES
from .errors import InvalidArgumentError

_ACCIDENTALS = {"#": 1, "♯": 1, "b": -1, "♭": -1}


class Note(IntEnum):
    """Pitch class within an octave, ordered from C."""

    UNKNOWN = -1
    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    @property
    def symbol(self) -> str:
        """Get note name (e.g., 'C', 'F#'), '?' for UNKNOWN."""
        if self is Note.UNKNOWN:
            return "?"
        return PITCH_NAMES[self.value]

    @classmethod
    def valid(cls) -> Tuple["Note", ...]:
        """The twelve pitch classes, without the UNKNOWN sentinel."""
        return tuple(note for note in cls if note is not cls.UNKNOWN)

    @classmethod
    def from_name(cls, name: str) -> "Note":
        """
        Parse a note name such as 'C', 'F#', 'Bb' or 'E♭'.

        Flats are folded onto their enharmonic sharp; 'Cb' is B and
        'B#' is C.

        Raises:
            InvalidArgumentError: If the name is not a note
        """
        return cls(semitones_from_c(name) % 12)


def semitones_from_c(name: str) -> int:
    """
    Semitones from C of the same octave to a note name, before wrapping.

    Accidentals may step across the octave: 'Cb' gives -1, 'B#' gives 12.

    Raises:
        InvalidArgumentError: If the name is not a note
    """
    text = name.strip()
    if not text or text[0].upper() not in "ABCDEFG":
        raise InvalidArgumentError(f"Unknown note name: {name!r}")

    value = PITCH_NAMES.index(text[0].upper())
    for char in text[1:]:
        if char not in _ACCIDENTALS:
            raise InvalidArgumentError(f"Unknown note name: {name!r}")
        value += _ACCIDENTALS[char]
    return value


def parse_note_name(text: str) -> Tuple[Note, int]:
    """
    Split a scientific pitch name into note and octave.

    Args:
        text: Name like 'A4', 'C#3' or 'Eb5'

    Returns:
        Tuple of (note, octave); 'Cb4' is B3 and 'B#4' is C5

    Raises:
        InvalidArgumentError: If the text has no octave or no valid note
    """
    text = text.strip()
    name = text.rstrip("0123456789")
    digits = text[len(name):]
    if name.endswith("-"):
        name, digits = name[:-1], "-" + digits
    if not digits or digits == "-":
        raise InvalidArgumentError(f"Missing octave in note name: {text!r}")
    value = semitones_from_c(name)
    return Note(value % 12), int(digits) + value // 12


def round_freq(freq: float, precision: int = FREQ_PRECISION) -> float:
    """Round a frequency to the precision used by pitch tables."""
    return float(np.round(freq, precision))


def is_freq_valid(freq) -> bool:
    """True for finite, strictly positive frequencies."""
    try:
        value = float(freq)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and value > 0
