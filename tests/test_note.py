"""Tests for the Note enumeration and frequency helpers."""

import pytest

from pitchmap.core import InvalidArgumentError, Note, is_freq_valid, parse_note_name, round_freq


class TestNote:
    """Tests for Note."""

    def test_ordering_starts_at_c(self):
        assert [n.symbol for n in Note.valid()] == [
            "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
        ]

    def test_unknown_sentinel(self):
        assert Note.UNKNOWN not in Note.valid()
        assert Note.UNKNOWN.symbol == "?"

    @pytest.mark.parametrize("name,expected", [
        ("C", Note.C),
        ("c#", Note.C_SHARP),
        ("F♯", Note.F_SHARP),
        ("Bb", Note.A_SHARP),
        ("E♭", Note.D_SHARP),
        ("Cb", Note.B),
        ("B#", Note.C),
    ])
    def test_from_name(self, name, expected):
        assert Note.from_name(name) is expected

    @pytest.mark.parametrize("name", ["", "H", "C+", "do"])
    def test_from_invalid_name(self, name):
        with pytest.raises(InvalidArgumentError):
            Note.from_name(name)


class TestParseNoteName:
    """Tests for parse_note_name."""

    def test_simple(self):
        assert parse_note_name("A4") == (Note.A, 4)

    def test_accidentals(self):
        assert parse_note_name("C#3") == (Note.C_SHARP, 3)
        assert parse_note_name("Eb5") == (Note.D_SHARP, 5)

    def test_negative_octave(self):
        assert parse_note_name("C-1") == (Note.C, -1)

    def test_accidental_crossing_octave(self):
        """Accidentals that step past C or B carry into the octave."""
        assert parse_note_name("Cb4") == (Note.B, 3)
        assert parse_note_name("B#4") == (Note.C, 5)
        assert parse_note_name("C♭0") == (Note.B, -1)
        assert parse_note_name("Bb4") == (Note.A_SHARP, 4)

    def test_missing_octave(self):
        with pytest.raises(InvalidArgumentError):
            parse_note_name("A")
        with pytest.raises(InvalidArgumentError):
            parse_note_name("A-")


class TestFrequencyHelpers:
    """Tests for round_freq and is_freq_valid."""

    def test_round_freq(self):
        assert round_freq(261.6255653) == 261.6256
        assert round_freq(440.0) == 440.0
        assert round_freq(123.456789, 2) == 123.46

    def test_is_freq_valid(self):
        assert is_freq_valid(440.0)
        assert is_freq_valid(1)
        assert not is_freq_valid(0.0)
        assert not is_freq_valid(-1.0)
        assert not is_freq_valid(float("nan"))
        assert not is_freq_valid(float("inf"))
        assert not is_freq_valid(None)
        assert not is_freq_valid("abc")
