"""pitchmap - Quantize frequencies to equal-tempered pitches and notes.

Architecture Layers:
    1. core/      - Note enumeration, constants, errors
    2. pitch/     - Pitch table, nearest/interval matching, note conversions
    3. analysis/  - Windows, magnitude spectrum, tonic search, pitch detection
"""

__version__ = "0.1.0"

# Core types
from .core import Note, InvalidArgumentError, parse_note_name

# Pitch layer
from .pitch import (
    PitchTable,
    PitchTableConfig,
    PitchMatcher,
    NoteMapper,
    PitchCalculator,
    octaves_distance,
    semitones_distance,
)

# Analysis layer
from .analysis import (
    WindowType,
    TonicFinder,
    LinearTonicFinder,
    find_tonic,
    magnitude_spectrum,
    PitchDetector,
    PitchEstimate,
)

__all__ = [
    # Core
    "Note",
    "InvalidArgumentError",
    "parse_note_name",
    # Pitch
    "PitchTable",
    "PitchTableConfig",
    "PitchMatcher",
    "NoteMapper",
    "PitchCalculator",
    "octaves_distance",
    "semitones_distance",
    # Analysis
    "WindowType",
    "TonicFinder",
    "LinearTonicFinder",
    "find_tonic",
    "magnitude_spectrum",
    "PitchDetector",
    "PitchEstimate",
]
