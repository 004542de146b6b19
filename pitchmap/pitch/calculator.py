"""PitchCalculator - One object owning a pitch table and its lookups."""

from typing import Optional

from ..core.constants import FREQ_A4
from ..core.errors import InvalidArgumentError
from ..core.note import Note
from .mapper import NoteMapper, octaves_distance, semitones_distance
from .matcher import PitchMatcher
from .table import PitchTable, PitchTableConfig


class PitchCalculator:
    """Pitch table plus matching and note conversions.

    The table is built in the constructor and never modified, so query
    methods are safe to call concurrently on the same instance.
    """

    def __init__(
        self,
        reference_freq: Optional[float] = None,
        config: Optional[PitchTableConfig] = None,
    ):
        """
        Initialize PitchCalculator.

        Args:
            reference_freq: Frequency of A4 in Hz (default: 440.0)
            config: Optional PitchTableConfig for a custom span, which
                carries its own reference_freq

        Raises:
            InvalidArgumentError: If both reference_freq and config are given
        """
        if config is not None and reference_freq is not None:
            raise InvalidArgumentError(
                "Pass reference_freq or config, not both"
            )
        if config is None:
            config = PitchTableConfig(
                reference_freq=FREQ_A4 if reference_freq is None else reference_freq
            )

        self.table = PitchTable(config)
        self.matcher = PitchMatcher(self.table)
        self.mapper = NoteMapper(self.table, self.matcher)

    def is_pitch(self, freq: float) -> bool:
        return self.matcher.is_pitch(freq)

    def match_nearest(self, freq: float) -> Optional[float]:
        """Closest table pitch to an arbitrary frequency."""
        return self.matcher.match_nearest(freq)

    def get_pitch_by_interval(self, pitch: float, semitones: int) -> Optional[float]:
        """Pitch a signed number of semitones away, None outside the table."""
        return self.matcher.by_interval(pitch, semitones)

    def pitch_to_note(self, freq: float) -> Note:
        return self.mapper.pitch_to_note(freq)

    def pitch_to_octave(self, freq: float) -> Optional[int]:
        return self.mapper.pitch_to_octave(freq)

    def note_to_pitch(self, note, octave: int) -> Optional[float]:
        return self.mapper.note_to_pitch(note, octave)

    def note_name(self, freq: float) -> str:
        return self.mapper.note_name(freq)

    def octaves_distance(self, f1: float, f2: float) -> float:
        return octaves_distance(f1, f2)

    def semitones_distance(self, f1: float, f2: float) -> int:
        return semitones_distance(f1, f2)
