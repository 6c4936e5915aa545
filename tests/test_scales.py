"""Tests for scale generation and membership."""

import pytest

from keyboard_theory.core import InvalidNoteName, Note
from keyboard_theory.inference import (
    SCALES,
    filter_to_scale,
    generate_scale,
    get_scale,
    is_pitch_class_in_scale,
    scale_note_names,
    scale_notes,
)


class TestScaleTable:
    """Scale definitions."""

    def test_diatonic_scales_have_seven_degrees(self):
        for key in ("major", "minor", "harmonic_minor", "melodic_minor",
                    "dorian", "phrygian", "lydian", "mixolydian", "locrian"):
            assert len(get_scale(key)) == 7

    def test_offsets_start_at_root(self):
        for scale in SCALES.values():
            assert scale.degree_offsets[0] == 0
            assert list(scale.degree_offsets) == sorted(set(scale.degree_offsets))

    def test_unknown_scale(self):
        with pytest.raises(KeyError):
            get_scale("bebop")


class TestGenerateScale:
    """Pitch-class generation."""

    def test_c_major(self):
        assert generate_scale(0, get_scale("major")) == [0, 2, 4, 5, 7, 9, 11]

    def test_include_octave(self):
        result = generate_scale(0, get_scale("major"), include_octave=True)
        assert len(result) == 8
        assert result[-1] == 0

    def test_a_natural_minor(self):
        assert generate_scale(9, get_scale("minor")) == [9, 11, 0, 2, 4, 5, 7]

    def test_blues(self):
        assert generate_scale(0, get_scale("blues")) == [0, 3, 5, 6, 7, 10]

    def test_pentatonic(self):
        assert generate_scale(7, get_scale("pentatonic")) == [7, 9, 11, 2, 4]

    def test_chromatic(self):
        assert generate_scale(5, get_scale("chromatic")) == [(5 + i) % 12 for i in range(12)]


class TestMembership:
    """Scale membership and filtering."""

    def test_membership(self):
        major = get_scale("major")
        assert is_pitch_class_in_scale(4, 0, major)
        assert not is_pitch_class_in_scale(6, 0, major)
        assert is_pitch_class_in_scale(6, 7, major)  # F# in G major

    def test_filter_to_scale(self):
        kept = filter_to_scale(["C4", "C#4", "D4"], "C", get_scale("major"))
        assert kept == [Note(pitch=60), Note(pitch=62)]

    def test_filter_accepts_midi_numbers(self):
        kept = filter_to_scale([57, 58, 59], "A", get_scale("minor"))
        assert [n.pitch for n in kept] == [57, 59]


class TestSpelling:
    """Scale spelling as names and identifiers."""

    def test_d_major_names(self):
        names = scale_note_names("D", get_scale("major"))
        assert names == ["D", "E", "F#", "G", "A", "B", "C#"]

    def test_c_major_identifiers(self):
        notes = scale_notes("C", 4, get_scale("major"))
        assert notes == ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"]

    def test_crosses_octave_boundary(self):
        notes = scale_notes("A", 3, get_scale("minor"))
        assert notes[0] == "A3"
        assert "C4" in notes
        assert notes[-1] == "A4"

    def test_without_octave(self):
        notes = scale_notes("C", 4, get_scale("pentatonic"), include_octave=False)
        assert notes == ["C4", "D4", "E4", "G4", "A4"]

    def test_invalid_root(self):
        with pytest.raises(InvalidNoteName):
            scale_note_names("Cb", get_scale("major"))
