"""Analysis layer - From samples and spectra to pitches.

- Window functions
- Magnitude spectrum of a frame
- Dominant frequency (tonic) search
- Pitch detection
"""

from .windows import (
    WindowType,
    apply_window,
    apply_hamming,
    apply_hann,
    apply_blackman,
    apply_default,
    get_hamming,
    name_of,
)
from .spectrum import magnitude_spectrum
from .tonic import TonicFinder, LinearTonicFinder, find_tonic
from .detector import PitchDetector, PitchEstimate

__all__ = [
    "WindowType",
    "apply_window",
    "apply_hamming",
    "apply_hann",
    "apply_blackman",
    "apply_default",
    "get_hamming",
    "name_of",
    "magnitude_spectrum",
    "TonicFinder",
    "LinearTonicFinder",
    "find_tonic",
    "PitchDetector",
    "PitchEstimate",
]
