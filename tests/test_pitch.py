"""Tests for the pitch model and Note type."""

import pytest

from keyboard_theory.core import (
    Note,
    PITCH_NAMES,
    InvalidNoteName,
    TheoryError,
    note_name_to_pitch_class,
    pitch_class_to_note_name,
    note_to_midi_number,
    midi_number_to_note,
    interval_name,
    parse_note,
    to_note,
    transpose_note,
    enharmonic,
    midi_to_frequency,
    frequency_to_midi,
)


class TestNoteNames:
    """Name <-> pitch class conversion."""

    @pytest.mark.parametrize("name", PITCH_NAMES)
    def test_name_round_trip(self, name):
        assert pitch_class_to_note_name(note_name_to_pitch_class(name)) == name

    def test_known_pitch_classes(self):
        assert note_name_to_pitch_class("C") == 0
        assert note_name_to_pitch_class("D#") == 3
        assert note_name_to_pitch_class("B") == 11

    @pytest.mark.parametrize("bad", ["c", "Db", "E#", "H", "", "C##", "C4"])
    def test_invalid_names_raise(self, bad):
        with pytest.raises(InvalidNoteName) as exc_info:
            note_name_to_pitch_class(bad)
        assert exc_info.value.name == bad

    def test_invalid_name_is_value_error(self):
        """Callers catching ValueError also catch theory errors."""
        assert issubclass(InvalidNoteName, TheoryError)
        assert issubclass(TheoryError, ValueError)

    def test_pitch_class_wraps(self):
        assert pitch_class_to_note_name(12) == "C"
        assert pitch_class_to_note_name(-1) == "B"
        assert pitch_class_to_note_name(25) == "C#"


class TestMidiConversion:
    """Name/octave <-> MIDI number conversion."""

    def test_middle_c(self):
        assert note_to_midi_number("C", 4) == 60
        assert midi_number_to_note(60) == ("C", 4)

    def test_a4(self):
        assert note_to_midi_number("A", 4) == 69

    def test_default_octave_is_four(self):
        assert note_to_midi_number("C") == 60

    def test_lowest_midi_note(self):
        assert note_to_midi_number("C", -1) == 0
        assert midi_number_to_note(0) == ("C", -1)

    def test_midi_round_trip(self):
        for midi in range(0, 128):
            assert note_to_midi_number(*midi_number_to_note(midi)) == midi

    def test_negative_midi_uses_floor(self):
        assert midi_number_to_note(-1) == ("B", -2)

    def test_invalid_name_raises(self):
        with pytest.raises(InvalidNoteName):
            note_to_midi_number("Bb", 3)


class TestIntervalNames:
    """Interval naming table."""

    def test_basic_names(self):
        assert interval_name(0) == "Unison"
        assert interval_name(3) == "Minor 3rd"
        assert interval_name(4) == "Major 3rd"
        assert interval_name(6) == "Tritone"
        assert interval_name(7) == "Perfect 5th"
        assert interval_name(11) == "Major 7th"

    def test_octave_is_distinct_from_unison(self):
        assert interval_name(12) == "Octave"
        assert interval_name(0) == "Unison"

    def test_compound_intervals_reduce(self):
        assert interval_name(14) == "Major 2nd"
        assert interval_name(24) == "Unison"


class TestParsing:
    """Note identifier parsing."""

    def test_parse_with_octave(self):
        note = parse_note("C#4")
        assert note.pitch == 61
        assert note.name == "C#"
        assert note.octave == 4

    def test_parse_negative_octave(self):
        assert parse_note("A-1").pitch == 9

    def test_parse_bare_name_uses_default_octave(self):
        assert parse_note("G").pitch == 67
        assert parse_note("G", default_octave=2).pitch == 43

    @pytest.mark.parametrize("bad", ["Eb4", "c4", "X1", "4C", "", "C#x"])
    def test_parse_invalid(self, bad):
        with pytest.raises(InvalidNoteName):
            parse_note(bad)

    def test_to_note_accepts_all_forms(self):
        assert to_note("E4") == Note(pitch=64)
        assert to_note(64) == Note(pitch=64)
        assert to_note(Note(pitch=64, velocity=100)).velocity == 100

    def test_to_note_rejects_non_notes(self):
        with pytest.raises(InvalidNoteName):
            to_note(None)
        with pytest.raises(InvalidNoteName):
            to_note(True)


class TestNote:
    """Note value type."""

    def test_properties(self):
        note = Note(pitch=70)
        assert note.pitch_class == 10
        assert note.name == "A#"
        assert note.octave == 4
        assert note.pitch_name == "A#4"
        assert str(note) == "A#4"

    def test_frequency(self):
        assert Note(pitch=69).frequency == pytest.approx(440.0)
        assert Note(pitch=60).frequency == pytest.approx(261.63, abs=0.01)

    def test_freq_to_midi(self):
        assert Note.freq_to_midi(440.0) == 69
        assert Note.freq_to_midi(261.63) == 60
        assert Note.freq_to_midi(0) == 0

    def test_module_level_frequency_helpers(self):
        assert midi_to_frequency(81) == pytest.approx(880.0)
        assert frequency_to_midi(880.0) == 81


class TestTransposeAndEnharmonic:
    """Transposition and enharmonic spelling."""

    def test_transpose(self):
        assert transpose_note("C", 7) == "G"
        assert transpose_note("A", 3) == "C"
        assert transpose_note("C", -1) == "B"

    def test_enharmonic_pairs(self):
        assert enharmonic("C#") == "Db"
        assert enharmonic("Db") == "C#"
        assert enharmonic("A#") == "Bb"

    def test_enharmonic_natural_unchanged(self):
        assert enharmonic("E") == "E"

    def test_enharmonic_invalid(self):
        with pytest.raises(InvalidNoteName):
            enharmonic("Fb")
