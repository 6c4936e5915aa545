"""Harmonic function - Place a single chord within a key.

This is a per-chord view only: the Roman numeral of a chord root in a key,
the chord built on a numeral, and common follow-up chords.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ..core import note_name_to_pitch_class, pitch_class_to_note_name
from .matcher import ChordMatch
from .scales import get_scale, scale_note_names

MAJOR_FUNCTIONS = ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
MINOR_FUNCTIONS = ["i", "ii°", "III", "iv", "v", "VI", "VII"]

# Common next steps from each function in a major key
NEXT_FUNCTIONS: Dict[str, List[str]] = {
    "I": ["ii", "iii", "IV", "V", "vi"],
    "ii": ["V", "vii°"],
    "iii": ["vi", "IV"],
    "IV": ["I", "V", "ii"],
    "V": ["I", "vi"],
    "vi": ["IV", "ii", "V"],
    "vii°": ["I"],
}


@dataclass(frozen=True)
class FunctionChord:
    """A chord identified by its function in a key."""
    root: str
    chord_type: str  # "", "m" or "dim"
    function: str

    @property
    def name(self) -> str:
        return f"{self.root}{self.chord_type}"


@dataclass(frozen=True)
class Progression:
    """A named chord progression realized in a key."""
    name: str
    chords: List[FunctionChord]

    @property
    def symbols(self) -> List[str]:
        return [c.name for c in self.chords]


def _functions_for(scale: str) -> List[str]:
    return MAJOR_FUNCTIONS if scale == "major" else MINOR_FUNCTIONS


def chord_function(
    chord: Union[ChordMatch, str, int],
    key: str,
    scale: str = "major",
) -> Optional[str]:
    """
    Get the Roman numeral of a chord's root in a key.

    Args:
        chord: ChordMatch, root note name or root pitch class
        key: Key root (e.g., "C")
        scale: Scale key of the tonality (e.g. "major", "minor")

    Returns:
        Roman numeral (e.g. "V", "vi"), or None if the root is not diatonic
    """
    if isinstance(chord, ChordMatch):
        root = chord.root_name
    elif isinstance(chord, int):
        root = pitch_class_to_note_name(chord)
    else:
        note_name_to_pitch_class(chord)
        root = chord

    scale_names = scale_note_names(key, get_scale(scale))
    if root not in scale_names:
        return None

    functions = _functions_for(scale)
    index = scale_names.index(root)
    if index >= len(functions):
        return None
    return functions[index]


def function_chord(symbol: str, key: str, scale: str = "major") -> Optional[FunctionChord]:
    """Build the chord for a Roman numeral in a key, or None if unknown."""
    functions = _functions_for(scale)
    if symbol not in functions:
        return None

    scale_names = scale_note_names(key, get_scale(scale))
    root = scale_names[functions.index(symbol)]

    if "°" in symbol:
        chord_type = "dim"
    elif symbol.lower() == symbol:
        chord_type = "m"
    else:
        chord_type = ""
    return FunctionChord(root=root, chord_type=chord_type, function=symbol)


def suggest_next_chords(
    chord: Union[ChordMatch, str, int, None],
    key: str = "C",
    scale: str = "major",
) -> List[FunctionChord]:
    """Suggest chords that commonly follow the given one in a key."""
    if chord is None:
        return []

    current = chord_function(chord, key, scale)
    if current is None or current not in NEXT_FUNCTIONS:
        return []

    suggestions = []
    for next_function in NEXT_FUNCTIONS[current]:
        suggestion = function_chord(next_function, key, scale)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions


def common_progressions(key: str, scale: str = "major") -> List[Progression]:
    """Get common progressions in a key (major keys only)."""
    if scale != "major":
        return []

    patterns = {
        "I-V-vi-IV": ["I", "V", "vi", "IV"],
        "ii-V-I": ["ii", "V", "I"],
    }
    return [
        Progression(name, [function_chord(f, key, scale) for f in functions])
        for name, functions in patterns.items()
    ]
