"""Tests for harmonic function and chord tracking.

Tests cover:
- Roman numeral analysis of chord roots
- Chords built from Roman numerals
- Next-chord suggestions and common progressions
- Chord history tracking and statistics
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from keyboard_theory.core import InvalidNoteName
from keyboard_theory.inference import (
    ChordDetector,
    ChordTracker,
    DetectionSettings,
    chord_function,
    common_progressions,
    detect_chord,
    function_chord,
    suggest_next_chords,
)


C_MAJOR = ["C4", "E4", "G4"]
G_MAJOR = ["G3", "B3", "D4"]
F_MAJOR = ["F3", "A3", "C4"]


# ============================================================================
# Harmonic Function Tests
# ============================================================================

class TestChordFunction:
    """Tests for Roman numeral analysis."""

    def test_dominant(self):
        assert chord_function("G", "C") == "V"
        assert chord_function(7, "C") == "V"

    def test_from_detected_chord(self):
        chord = detect_chord(["A3", "C4", "E4"])
        assert chord_function(chord, "C") == "vi"

    def test_minor_key(self):
        assert chord_function("C", "A", "minor") == "III"
        assert chord_function("A", "A", "minor") == "i"

    def test_non_diatonic(self):
        assert chord_function("C#", "C") is None

    def test_invalid_root(self):
        with pytest.raises(InvalidNoteName):
            chord_function("H", "C")

    def test_unknown_scale(self):
        with pytest.raises(KeyError):
            chord_function("C", "C", "bebop")


class TestFunctionChord:
    """Tests for chords built on Roman numerals."""

    def test_supertonic_is_minor(self):
        chord = function_chord("ii", "C")
        assert chord.root == "D"
        assert chord.chord_type == "m"
        assert chord.name == "Dm"

    def test_leading_tone_is_diminished(self):
        assert function_chord("vii°", "C").name == "Bdim"
        assert function_chord("ii°", "A", "minor").name == "Bdim"

    def test_major_degree(self):
        assert function_chord("V", "D").name == "A"

    def test_unknown_numeral(self):
        assert function_chord("VIII", "C") is None


class TestSuggestions:
    """Tests for next-chord suggestions and progressions."""

    def test_after_dominant(self):
        suggestions = suggest_next_chords(detect_chord(G_MAJOR), "C")
        assert [s.function for s in suggestions] == ["I", "vi"]
        assert [s.name for s in suggestions] == ["C", "Am"]

    def test_no_chord(self):
        assert suggest_next_chords(None) == []

    def test_non_diatonic_chord(self):
        assert suggest_next_chords("F#", "C") == []

    def test_minor_key_has_no_table(self):
        assert suggest_next_chords("A", "A", "minor") == []

    def test_common_progressions(self):
        progressions = {p.name: p.symbols for p in common_progressions("G")}
        assert progressions["I-V-vi-IV"] == ["G", "D", "Em", "C"]
        assert progressions["ii-V-I"] == ["Am", "D", "G"]

    def test_no_progressions_in_minor(self):
        assert common_progressions("A", "minor") == []


# ============================================================================
# Chord Tracking Tests
# ============================================================================

class TestChordTracker:
    """Tests for the caller-side chord history."""

    def test_update_sets_current(self):
        tracker = ChordTracker()
        chord = tracker.update(C_MAJOR)
        assert tracker.current == chord
        assert chord.name == "C"

    def test_held_chord_recorded_once(self):
        tracker = ChordTracker()
        tracker.update(C_MAJOR)
        tracker.update(C_MAJOR)
        assert len(tracker.history) == 1

    def test_single_note_clears_current_only(self):
        tracker = ChordTracker()
        tracker.update(C_MAJOR)
        assert tracker.update(["C4"]) is None
        assert tracker.current is None
        assert len(tracker.history) == 1

    def test_history_bounded(self):
        tracker = ChordTracker(max_history=2)
        for notes in (C_MAJOR, G_MAJOR, F_MAJOR):
            tracker.update(notes)
        assert [e.chord.name for e in tracker.history] == ["G", "F"]

    def test_statistics(self):
        tracker = ChordTracker()
        for notes in (C_MAJOR, G_MAJOR, C_MAJOR):
            tracker.update(notes)
        stats = tracker.statistics()
        assert stats.total_chords == 3
        assert stats.unique_chords == 2
        assert stats.most_common == ("C", 2)
        assert stats.average_confidence == pytest.approx(1.0)

    def test_empty_statistics(self):
        stats = ChordTracker().statistics()
        assert stats.total_chords == 0
        assert stats.most_common is None

    def test_clear_history(self):
        tracker = ChordTracker()
        tracker.update(C_MAJOR)
        tracker.clear_history()
        assert tracker.history == []

    def test_custom_detector(self):
        detector = ChordDetector(DetectionSettings(min_notes=3))
        tracker = ChordTracker(detector=detector)
        assert tracker.update(["C4", "G4"]) is None
        assert tracker.history == []
