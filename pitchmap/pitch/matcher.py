"""Pitch matching - Quantize arbitrary frequencies onto the pitch table."""

import math
import numbers
import warnings
from typing import Optional

import numpy as np

from ..core.errors import InvalidArgumentError
from ..core.note import round_freq
from .table import PitchTable


def _is_finite_number(value) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class PitchMatcher:
    """Exact, nearest and interval lookups against a PitchTable.

    Holds no state besides the table, so a single instance can be
    queried from several threads.
    """

    def __init__(self, table: PitchTable):
        self.table = table

    def find_exact_index(self, freq: float) -> Optional[int]:
        """
        Find the table index of a frequency.

        Args:
            freq: Frequency in Hz, rounded to the table precision first

        Returns:
            Index of the matching entry, or None if freq is not a pitch
        """
        if not _is_finite_number(freq):
            return None

        freq = round_freq(freq, self.table.precision)
        pitches = self.table.pitches
        idx = int(np.searchsorted(pitches, freq))

        if idx < len(pitches) and pitches[idx] == freq:
            return idx
        return None

    def is_pitch(self, freq: float) -> bool:
        """True if freq matches one of the table frequencies."""
        return self.find_exact_index(freq) is not None

    def match_nearest(self, freq: float) -> Optional[float]:
        """
        Round an arbitrary frequency to the closest table pitch.

        Binary search on the absolute distance to the query: at each
        midpoint, move towards a strictly closer neighbour, otherwise
        the midpoint is the closest entry. Neighbours beyond either end
        of the table count as infinitely far away.

        Args:
            freq: Frequency in Hz

        Returns:
            Closest pitch frequency, or None if the search fails to settle

        Raises:
            InvalidArgumentError: If freq is not a finite real number
        """
        if not _is_finite_number(freq):
            raise InvalidArgumentError(f"Invalid frequency: {freq}")

        idx = self.find_exact_index(freq)
        if idx is not None:
            return self.table[idx]

        freq = round_freq(freq, self.table.precision)
        pitches = self.table.pitches
        last = len(pitches) - 1
        start, end = 0, last

        while start <= end:
            mid = start + (end - start) // 2
            delta_mid = abs(pitches[mid] - freq)
            delta_left = abs(pitches[mid - 1] - freq) if mid > 0 else math.inf
            delta_right = abs(pitches[mid + 1] - freq) if mid < last else math.inf

            if delta_left < delta_mid:
                end = mid - 1
            elif delta_right < delta_mid:
                start = mid + 1
            else:
                return float(pitches[mid])

        warnings.warn(
            f"Nearest pitch search for {freq} Hz ended without a match",
            RuntimeWarning,
        )
        return None

    def by_interval(self, pitch: float, semitones: int) -> Optional[float]:
        """
        Get the pitch a number of semitones away from another pitch.

        Args:
            pitch: Starting frequency, must be a table entry
            semitones: Signed semitone offset

        Returns:
            Frequency of the resulting pitch, or None if pitch is not a
            table entry or the result falls outside the table

        Raises:
            InvalidArgumentError: If semitones is not an integer
        """
        if isinstance(semitones, bool) or not isinstance(semitones, numbers.Integral):
            raise InvalidArgumentError(f"Invalid semitone offset: {semitones!r}")

        idx = self.find_exact_index(pitch)
        if idx is None:
            return None

        target = idx + int(semitones)
        if not self.table.contains_index(target):
            return None
        return self.table[target]
