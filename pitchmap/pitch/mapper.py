"""Conversions between note/octave pairs, table pitches and distances."""

import math
from typing import Optional

from ..core.constants import (
    OCTAVE_MAX,
    OCTAVE_MIN,
    REFERENCE_OCTAVE,
    SEMITONES_PER_OCTAVE,
)
from ..core.errors import InvalidArgumentError
from ..core.note import Note, is_freq_valid
from .matcher import PitchMatcher
from .table import PitchTable

# Pitch class reached by going n semitones up from A, n in 0..11
NOTES_FROM_A4 = (
    Note.A,
    Note.A_SHARP,
    Note.B,
    Note.C,
    Note.C_SHARP,
    Note.D,
    Note.D_SHARP,
    Note.E,
    Note.F,
    Note.F_SHARP,
    Note.G,
    Note.G_SHARP,
)

# Semitones from A to the same octave's note, indexed by Note value
SEMITONES_FROM_A4 = (-9, -8, -7, -6, -5, -4, -3, -2, -1, 0, 1, 2)


def octaves_distance(f1: float, f2: float) -> float:
    """
    Signed distance in octaves from f2 up to f1.

    Raises:
        InvalidArgumentError: If either frequency is not positive
    """
    if not is_freq_valid(f1) or not is_freq_valid(f2):
        raise InvalidArgumentError(f"Invalid frequency: {f1}, {f2}")
    return math.log2(f1 / f2)


def semitones_distance(f1: float, f2: float) -> int:
    """
    Signed distance in whole semitones from f2 up to f1.

    Halfway cases round away from zero, so 0.5 -> 1 and -0.5 -> -1.
    """
    semitones = SEMITONES_PER_OCTAVE * octaves_distance(f1, f2)
    return int(math.copysign(math.floor(abs(semitones) + 0.5), semitones))


def _check_octave(octave) -> int:
    try:
        valid = not isinstance(octave, bool) and int(octave) == octave
    except (TypeError, ValueError, OverflowError):
        valid = False
    if not valid:
        raise InvalidArgumentError(f"Invalid octave: {octave!r}")
    if not OCTAVE_MIN <= octave <= OCTAVE_MAX:
        raise InvalidArgumentError(
            f"Invalid octave: {octave}. Expected {OCTAVE_MIN}..{OCTAVE_MAX}"
        )
    return int(octave)


def _check_note(note) -> Note:
    if isinstance(note, bool):
        raise InvalidArgumentError(f"Invalid note: {note!r}")
    try:
        note = Note(note)
    except ValueError:
        raise InvalidArgumentError(f"Invalid note: {note!r}") from None
    if note is Note.UNKNOWN:
        raise InvalidArgumentError("Invalid note: UNKNOWN")
    return note


class NoteMapper:
    """Map table pitches to notes and octaves, and back."""

    def __init__(self, table: PitchTable, matcher: Optional[PitchMatcher] = None):
        self.table = table
        self.matcher = matcher if matcher is not None else PitchMatcher(table)

    def _semitones_from_a4(self, freq: float) -> int:
        if not self.matcher.is_pitch(freq):
            raise InvalidArgumentError(
                f"Invalid frequency {freq}: a pitch is expected"
            )
        return semitones_distance(freq, self.table.reference_freq)

    def pitch_to_note(self, freq: float) -> Note:
        """
        Find the note of a pitch.

        Args:
            freq: Frequency of a table entry; use
                PitchMatcher.match_nearest first for arbitrary input

        Returns:
            Note of the pitch

        Raises:
            InvalidArgumentError: If freq is not a table entry
        """
        return NOTES_FROM_A4[self._semitones_from_a4(freq) % SEMITONES_PER_OCTAVE]

    def pitch_to_octave(self, freq: float) -> Optional[int]:
        """
        Find the octave of a pitch.

        Returns:
            Octave number, or None if the pitch lies outside the valid
            octave range

        Raises:
            InvalidArgumentError: If freq is not a table entry
        """
        octave = self._octave_of(self._semitones_from_a4(freq))
        if OCTAVE_MIN <= octave <= OCTAVE_MAX:
            return octave
        return None

    def note_to_pitch(self, note, octave: int) -> Optional[float]:
        """
        Get the frequency of a note in a given octave.

        Args:
            note: Note (or its integer value, C=0..B=11)
            octave: Octave number

        Returns:
            Pitch frequency, or None if it falls outside the table

        Raises:
            InvalidArgumentError: If note or octave is out of range
        """
        note = _check_note(note)
        octave = _check_octave(octave)

        semitones = (
            SEMITONES_FROM_A4[note]
            + (octave - REFERENCE_OCTAVE) * SEMITONES_PER_OCTAVE
        )
        idx = self.table.a4_index + semitones
        if not self.table.contains_index(idx):
            return None
        return self.table[idx]

    def note_name(self, freq: float) -> str:
        """
        Scientific pitch name of a table entry, e.g. 'A4' or 'C#-1'.

        Raises:
            InvalidArgumentError: If freq is not a table entry
        """
        semitones = self._semitones_from_a4(freq)
        note = NOTES_FROM_A4[semitones % SEMITONES_PER_OCTAVE]
        return f"{note.symbol}{self._octave_of(semitones)}"

    @staticmethod
    def _octave_of(semitones_from_a4: int) -> int:
        # C starts the octave, 9 semitones below A
        return REFERENCE_OCTAVE + (
            semitones_from_a4 - SEMITONES_FROM_A4[Note.C]
        ) // SEMITONES_PER_OCTAVE

    octaves_distance = staticmethod(octaves_distance)
    semitones_distance = staticmethod(semitones_distance)
