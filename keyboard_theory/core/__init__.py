"""Core types and constants for Keyboard Theory."""

from .note import Note
from .errors import TheoryError, InvalidNoteName
from .constants import (
    PITCH_NAMES,
    INTERVAL_NAMES,
    DEFAULT_OCTAVE,
)
from .pitch import (
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

__all__ = [
    "Note",
    "TheoryError",
    "InvalidNoteName",
    "PITCH_NAMES",
    "INTERVAL_NAMES",
    "DEFAULT_OCTAVE",
    "note_name_to_pitch_class",
    "pitch_class_to_note_name",
    "note_to_midi_number",
    "midi_number_to_note",
    "interval_name",
    "parse_note",
    "to_note",
    "transpose_note",
    "enharmonic",
    "midi_to_frequency",
    "frequency_to_midi",
]
