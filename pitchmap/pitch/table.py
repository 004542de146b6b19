"""Equal-tempered pitch table.

The table holds one rounded frequency per semitone over a fixed span
around the reference pitch. It is built once, validated, and frozen:
every lookup in the matcher and mapper relies on the entries being
strictly increasing.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from ..core.constants import (
    FREQ_A4,
    FREQ_PRECISION,
    SEMITONES_HIGH,
    SEMITONES_LOW,
    SEMITONES_PER_OCTAVE,
)
from ..core.errors import InvalidArgumentError


@dataclass(frozen=True)
class PitchTableConfig:
    """Configuration for pitch table construction.

    Attributes:
        lo_semitones: Lowest entry, in semitones from the reference (default: -69, C-1)
        hi_semitones: Highest entry, in semitones from the reference (default: 58, G9)
        reference_freq: Frequency of the reference pitch A4 (default: 440.0)
        precision: Decimal digits kept for every frequency (default: 4)
    """

    lo_semitones: int = SEMITONES_LOW
    hi_semitones: int = SEMITONES_HIGH
    reference_freq: float = FREQ_A4
    precision: int = FREQ_PRECISION

    @property
    def size(self) -> int:
        """Number of table entries."""
        return self.hi_semitones - self.lo_semitones + 1


def build_pitch_table(
    lo_semitones: int,
    hi_semitones: int,
    reference_freq: float = FREQ_A4,
    precision: int = FREQ_PRECISION,
) -> Tuple[np.ndarray, int]:
    """
    Build the rounded equal-tempered frequencies for a semitone span.

    Args:
        lo_semitones: First semitone offset from the reference (inclusive)
        hi_semitones: Last semitone offset from the reference (inclusive)
        reference_freq: Frequency of the reference pitch
        precision: Decimal digits to round to

    Returns:
        Tuple of (read-only frequency array, index of the reference pitch)

    Raises:
        InvalidArgumentError: If the span is empty, misses the reference
            pitch, or does not produce strictly increasing entries
    """
    if hi_semitones < lo_semitones:
        raise InvalidArgumentError(
            f"Empty semitone span: {lo_semitones}..{hi_semitones}"
        )
    if not reference_freq > 0:
        raise InvalidArgumentError(f"Invalid reference frequency: {reference_freq}")

    offsets = np.arange(lo_semitones, hi_semitones + 1, dtype=np.float64)
    pitches = np.round(
        reference_freq * np.power(2.0, offsets / SEMITONES_PER_OCTAVE),
        precision,
    )

    reference = np.round(reference_freq, precision)
    matches = np.flatnonzero(pitches == reference)
    if len(matches) != 1:
        raise InvalidArgumentError(
            f"Reference pitch {reference_freq} Hz not in span "
            f"{lo_semitones}..{hi_semitones}"
        )

    if not np.all(np.diff(pitches) > 0):
        raise InvalidArgumentError(
            f"Pitch table is not strictly increasing at precision {precision}"
        )

    pitches.flags.writeable = False
    return pitches, int(matches[0])


class PitchTable:
    """Immutable ordered table of equal-tempered pitch frequencies."""

    def __init__(self, config: Optional[PitchTableConfig] = None):
        """
        Initialize PitchTable.

        Args:
            config: Optional PitchTableConfig, defaults cover MIDI 0..127
        """
        self.config = config if config is not None else PitchTableConfig()
        self._pitches, self._a4_index = build_pitch_table(
            self.config.lo_semitones,
            self.config.hi_semitones,
            self.config.reference_freq,
            self.config.precision,
        )

    @property
    def pitches(self) -> np.ndarray:
        """Read-only array of frequencies, strictly increasing."""
        return self._pitches

    @property
    def a4_index(self) -> int:
        """Index of the reference pitch."""
        return self._a4_index

    @property
    def precision(self) -> int:
        return self.config.precision

    @property
    def reference_freq(self) -> float:
        return float(self._pitches[self._a4_index])

    @property
    def lowest(self) -> float:
        return float(self._pitches[0])

    @property
    def highest(self) -> float:
        return float(self._pitches[-1])

    def contains_index(self, index: int) -> bool:
        """True if index addresses an entry of the table."""
        return 0 <= index < len(self._pitches)

    def semitones_from_a4(self, index: int) -> int:
        """Signed semitone offset of an entry from the reference pitch."""
        return index - self._a4_index

    def __len__(self) -> int:
        return len(self._pitches)

    def __getitem__(self, index: int) -> float:
        if not self.contains_index(index):
            raise IndexError(f"Pitch index out of range: {index}")
        return float(self._pitches[index])

    def __iter__(self) -> Iterator[float]:
        return (float(p) for p in self._pitches)

    def __repr__(self) -> str:
        return (
            f"PitchTable({len(self)} pitches, "
            f"{self.lowest:.4f}-{self.highest:.4f} Hz)"
        )
