"""Pitch model - conversions between note names, pitch classes and MIDI numbers.

All functions are pure. Only the 12 sharp spellings in PITCH_NAMES are
accepted as input; flats exist solely as the output of enharmonic().
"""

import re
from typing import Tuple, Union

from .constants import PITCH_NAMES, ENHARMONICS, INTERVAL_NAMES, DEFAULT_OCTAVE
from .errors import InvalidNoteName
from .note import Note

_NOTE_PATTERN = re.compile(r"^([A-G]#?)(-?\d+)?$")

NoteLike = Union[str, int, Note]


def note_name_to_pitch_class(name: str) -> int:
    """Convert a note name (e.g. 'C#') to its pitch class (0-11)."""
    try:
        return PITCH_NAMES.index(name)
    except ValueError:
        raise InvalidNoteName(name) from None


def pitch_class_to_note_name(pc: int) -> str:
    return PITCH_NAMES[pc % 12]


def note_to_midi_number(name: str, octave: int = DEFAULT_OCTAVE) -> int:
    """Convert a note name and octave to a MIDI number (C4 = 60)."""
    return (octave + 1) * 12 + note_name_to_pitch_class(name)


def midi_number_to_note(midi: int) -> Tuple[str, int]:
    """Convert a MIDI number to a (name, octave) pair."""
    return PITCH_NAMES[midi % 12], midi // 12 - 1


def interval_name(semitones: int) -> str:
    """
    Name the interval spanning the given number of semitones.

    Exactly 12 is reported as 'Octave'; any other span is reduced
    modulo 12 first, so 0 and 24 are both 'Unison'.
    """
    if semitones == 12:
        return INTERVAL_NAMES[12]
    return INTERVAL_NAMES[semitones % 12]


def parse_note(identifier: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
    """
    Parse a note identifier such as 'C#4', 'A-1' or a bare 'G'.

    Args:
        identifier: Letter A-G, optional '#', optional octave number
        default_octave: Octave used when the identifier carries none

    Returns:
        Note at the corresponding MIDI pitch

    Raises:
        InvalidNoteName: If the identifier is not in that form
    """
    if not isinstance(identifier, str):
        raise InvalidNoteName(identifier)
    match = _NOTE_PATTERN.match(identifier.strip())
    if not match:
        raise InvalidNoteName(identifier)

    name, octave = match.groups()
    octave = int(octave) if octave is not None else default_octave
    return Note(pitch=note_to_midi_number(name, octave))


def to_note(value: NoteLike, default_octave: int = DEFAULT_OCTAVE) -> Note:
    """Coerce an identifier, MIDI number or Note into a Note."""
    if isinstance(value, Note):
        return value
    if isinstance(value, bool):
        raise InvalidNoteName(value)
    if isinstance(value, int):
        return Note(pitch=value)
    return parse_note(value, default_octave)


def transpose_note(name: str, semitones: int) -> str:
    """Transpose a note name by a number of semitones."""
    return pitch_class_to_note_name(note_name_to_pitch_class(name) + semitones)


def enharmonic(name: str) -> str:
    """Get the enharmonic spelling ('C#' <-> 'Db'); naturals are unchanged."""
    if name in ENHARMONICS:
        return ENHARMONICS[name]
    if name in PITCH_NAMES:
        return name
    raise InvalidNoteName(name)


def midi_to_frequency(midi: int) -> float:
    return Note.midi_to_freq(midi)


def frequency_to_midi(freq: float) -> int:
    return Note.freq_to_midi(freq)
