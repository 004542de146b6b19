"""Global constants for pitchmap."""

# Pitch names, ordered within an octave starting at C
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Reference pitch
FREQ_A4 = 440.0
REFERENCE_OCTAVE = 4

# Frequencies are stored and compared at this many decimal digits
FREQ_PRECISION = 4

# 12-tone equal temperament
SEMITONES_PER_OCTAVE = 12

# Valid octave range (inclusive)
OCTAVE_MIN = 0
OCTAVE_MAX = 8

# Default table span in semitones relative to A4 (MIDI 0..127)
SEMITONES_LOW = -69  # C-1
SEMITONES_HIGH = 58  # G9
