"""Scale generation - Scale tables and pitch-class membership."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..core import (
    Note,
    note_name_to_pitch_class,
    note_to_midi_number,
    pitch_class_to_note_name,
    to_note,
)


@dataclass(frozen=True)
class ScaleDefinition:
    """A scale as semitone offsets from its root within one octave."""
    key: str
    name: str
    degree_offsets: Tuple[int, ...]
    step_formula: str

    def __len__(self) -> int:
        return len(self.degree_offsets)


def _scale(key, name, offsets, formula):
    return ScaleDefinition(key, name, tuple(sorted(offsets)), formula)


SCALES: Dict[str, ScaleDefinition] = {
    s.key: s for s in (
        _scale("major", "Major", [0, 2, 4, 5, 7, 9, 11], "W-W-H-W-W-W-H"),
        _scale("minor", "Natural Minor", [0, 2, 3, 5, 7, 8, 10], "W-H-W-W-H-W-W"),
        _scale("harmonic_minor", "Harmonic Minor", [0, 2, 3, 5, 7, 8, 11], "W-H-W-W-H-3H-H"),
        _scale("melodic_minor", "Melodic Minor", [0, 2, 3, 5, 7, 9, 11], "W-H-W-W-W-W-H"),
        _scale("pentatonic", "Major Pentatonic", [0, 2, 4, 7, 9], "W-W-3H-W-3H"),
        _scale("minor_pentatonic", "Minor Pentatonic", [0, 3, 5, 7, 10], "3H-W-W-3H-W"),
        _scale("blues", "Blues Scale", [0, 3, 5, 6, 7, 10], "3H-W-H-H-3H-W"),
        _scale("dorian", "Dorian", [0, 2, 3, 5, 7, 9, 10], "W-H-W-W-W-H-W"),
        _scale("phrygian", "Phrygian", [0, 1, 3, 5, 7, 8, 10], "H-W-W-W-H-W-W"),
        _scale("lydian", "Lydian", [0, 2, 4, 6, 7, 9, 11], "W-W-W-H-W-W-H"),
        _scale("mixolydian", "Mixolydian", [0, 2, 4, 5, 7, 9, 10], "W-W-H-W-W-H-W"),
        _scale("locrian", "Locrian", [0, 1, 3, 5, 6, 8, 10], "H-W-W-H-W-W-W"),
        _scale("chromatic", "Chromatic", range(12), "H-H-H-H-H-H-H-H-H-H-H-H"),
    )
}


def get_scale(key: str) -> ScaleDefinition:
    """
    Look up a scale by key (e.g. 'major', 'dorian').

    Raises:
        KeyError: If the scale is not known
    """
    return SCALES[key]


def generate_scale(
    root_pc: int,
    scale: ScaleDefinition,
    include_octave: bool = False,
) -> List[int]:
    """
    Generate the pitch classes of a scale.

    Args:
        root_pc: Root pitch class (0-11)
        scale: Scale definition
        include_octave: Append the root again to render one ascending octave

    Returns:
        Pitch classes in ascending degree order
    """
    pitch_classes = [(root_pc + offset) % 12 for offset in scale.degree_offsets]
    if include_octave:
        pitch_classes.append(root_pc % 12)
    return pitch_classes


def is_pitch_class_in_scale(pc: int, root_pc: int, scale: ScaleDefinition) -> bool:
    return (pc - root_pc) % 12 in scale.degree_offsets


def scale_note_names(root: str, scale: ScaleDefinition) -> List[str]:
    """Get the note names of a scale (e.g. C major -> C D E F G A B)."""
    root_pc = note_name_to_pitch_class(root)
    return [pitch_class_to_note_name(pc) for pc in generate_scale(root_pc, scale)]


def scale_notes(
    root: str,
    octave: int,
    scale: ScaleDefinition,
    include_octave: bool = True,
) -> List[str]:
    """
    Spell a scale as ascending note identifiers starting at root+octave.

    Example: scale_notes("C", 4, major) -> ["C4", "D4", ..., "B4", "C5"]
    """
    root_midi = note_to_midi_number(root, octave)
    offsets = list(scale.degree_offsets)
    if include_octave:
        offsets.append(12)
    return [Note(pitch=root_midi + offset).pitch_name for offset in offsets]


def filter_to_scale(
    notes: Iterable,
    root: str,
    scale: ScaleDefinition,
) -> List[Note]:
    """Keep only the notes whose pitch class belongs to the scale."""
    root_pc = note_name_to_pitch_class(root)
    kept = []
    for value in notes:
        note = to_note(value)
        if is_pitch_class_in_scale(note.pitch_class, root_pc, scale):
            kept.append(note)
    return kept
