"""Pitch layer - Equal-tempered pitch table and lookups.

- Table construction (rounded, strictly increasing frequencies)
- Exact and nearest pitch matching
- Interval queries
- Note/octave conversions and distances
"""

from .table import PitchTable, PitchTableConfig, build_pitch_table
from .matcher import PitchMatcher
from .mapper import NoteMapper, octaves_distance, semitones_distance
from .calculator import PitchCalculator

__all__ = [
    "PitchTable",
    "PitchTableConfig",
    "build_pitch_table",
    "PitchMatcher",
    "NoteMapper",
    "octaves_distance",
    "semitones_distance",
    "PitchCalculator",
]
