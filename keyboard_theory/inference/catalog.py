"""Chord catalog - The fixed table of recognized chord qualities.

Each definition stores its voicing as stacked semitones above the root
(a ninth is 14). Matching works on the pitch-class reduction of that
voicing, exposed as ``ChordDefinition.intervals``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core import (
    note_name_to_pitch_class,
    note_to_midi_number,
    pitch_class_to_note_name,
    midi_number_to_note,
)


class ChordCategory(Enum):
    """Chord families, in order of increasing complexity."""
    TRIAD = "triad"
    SEVENTH = "seventh"
    SUSPENDED = "suspended"
    EXTENDED = "extended"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        """Simplicity rank used when breaking ties between candidates."""
        return _CATEGORY_RANK[self]


_CATEGORY_RANK = {
    ChordCategory.TRIAD: 0,
    ChordCategory.SEVENTH: 1,
    ChordCategory.SUSPENDED: 2,
    ChordCategory.EXTENDED: 3,
    ChordCategory.UNKNOWN: 4,
}


@dataclass(frozen=True)
class ChordDefinition:
    """A chord quality defined by its intervals above the root."""
    key: str
    quality_name: str
    display_symbol: str
    category: ChordCategory
    voicing: Tuple[int, ...]

    @property
    def intervals(self) -> Tuple[int, ...]:
        """Sorted, de-duplicated pitch-class offsets from the root."""
        return tuple(sorted({i % 12 for i in self.voicing}))

    def __len__(self) -> int:
        return len(self.intervals)


def _chord(key, name, symbol, category, voicing):
    return ChordDefinition(key, name, symbol, category, tuple(voicing))


_TRIAD = ChordCategory.TRIAD
_SEVENTH = ChordCategory.SEVENTH
_SUS = ChordCategory.SUSPENDED
_EXT = ChordCategory.EXTENDED

CHORD_CATALOG: Tuple[ChordDefinition, ...] = (
    # Triads
    _chord("", "Major", "", _TRIAD, [0, 4, 7]),
    _chord("m", "Minor", "m", _TRIAD, [0, 3, 7]),
    _chord("dim", "Diminished", "°", _TRIAD, [0, 3, 6]),
    _chord("aug", "Augmented", "+", _TRIAD, [0, 4, 8]),
    # Seventh chords
    _chord("maj7", "Major 7th", "maj7", _SEVENTH, [0, 4, 7, 11]),
    _chord("m7", "Minor 7th", "m7", _SEVENTH, [0, 3, 7, 10]),
    _chord("7", "Dominant 7th", "7", _SEVENTH, [0, 4, 7, 10]),
    _chord("dim7", "Diminished 7th", "°7", _SEVENTH, [0, 3, 6, 9]),
    _chord("m7b5", "Half Diminished", "ø7", _SEVENTH, [0, 3, 6, 10]),
    _chord("mMaj7", "Minor Major 7th", "m(maj7)", _SEVENTH, [0, 3, 7, 11]),
    _chord("aug7", "Augmented 7th", "+7", _SEVENTH, [0, 4, 8, 10]),
    # Suspended
    _chord("sus2", "Suspended 2nd", "sus2", _SUS, [0, 2, 7]),
    _chord("sus4", "Suspended 4th", "sus4", _SUS, [0, 5, 7]),
    _chord("7sus2", "7th Suspended 2nd", "7sus2", _SUS, [0, 2, 7, 10]),
    _chord("7sus4", "7th Suspended 4th", "7sus4", _SUS, [0, 5, 7, 10]),
    _chord("9sus4", "9th Suspended 4th", "9sus4", _SUS, [0, 5, 7, 10, 14]),
    # Extended
    _chord("9", "Dominant 9th", "9", _EXT, [0, 4, 7, 10, 14]),
    _chord("maj9", "Major 9th", "maj9", _EXT, [0, 4, 7, 11, 14]),
    _chord("m9", "Minor 9th", "m9", _EXT, [0, 3, 7, 10, 14]),
    _chord("11", "Dominant 11th", "11", _EXT, [0, 4, 7, 10, 14, 17]),
    _chord("13", "Dominant 13th", "13", _EXT, [0, 4, 7, 10, 14, 21]),
    _chord("6", "Major 6th", "6", _EXT, [0, 4, 7, 9]),
    _chord("m6", "Minor 6th", "m6", _EXT, [0, 3, 7, 9]),
    _chord("add9", "Added 9th", "add9", _EXT, [0, 4, 7, 14]),
    _chord("madd9", "Minor Added 9th", "m(add9)", _EXT, [0, 3, 7, 14]),
)

# Placeholder definition for clusters that match nothing in the catalog
UNKNOWN_CHORD = ChordDefinition("?", "Unknown Chord", "?", ChordCategory.UNKNOWN, ())

_BY_KEY = {d.key: d for d in CHORD_CATALOG}


def all_definitions() -> Tuple[ChordDefinition, ...]:
    """Get every catalog entry in catalog order."""
    return CHORD_CATALOG


def definitions_by_category(category: ChordCategory) -> Tuple[ChordDefinition, ...]:
    return tuple(d for d in CHORD_CATALOG if d.category is category)


def get_definition(key: str) -> ChordDefinition:
    """
    Look up a definition by its catalog key (e.g. 'm7', '' for major).

    Raises:
        KeyError: If no definition has that key
    """
    return _BY_KEY[key]


def chord_notes(
    root: str,
    definition: ChordDefinition,
    octave: Optional[int] = None,
) -> List[str]:
    """
    Spell a chord from its root.

    Args:
        root: Root note name (e.g., "C#")
        definition: Chord quality to build
        octave: If given, return full identifiers (e.g. "C4", "E4", "G4")
            stacked from the root using the definition's voicing

    Returns:
        Note names in voicing order
    """
    if octave is None:
        root_pc = note_name_to_pitch_class(root)
        seen = []
        for interval in definition.voicing:
            name = pitch_class_to_note_name(root_pc + interval)
            if name not in seen:
                seen.append(name)
        return seen

    root_midi = note_to_midi_number(root, octave)
    notes = []
    for interval in definition.voicing:
        name, note_octave = midi_number_to_note(root_midi + interval)
        notes.append(f"{name}{note_octave}")
    return notes
