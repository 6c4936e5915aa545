"""Global constants for Keyboard Theory."""

# Pitch names (sharps only)
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Flat spellings, only used for enharmonic lookups
ENHARMONICS = {
    "C#": "Db", "Db": "C#",
    "D#": "Eb", "Eb": "D#",
    "F#": "Gb", "Gb": "F#",
    "G#": "Ab", "Ab": "G#",
    "A#": "Bb", "Bb": "A#",
}

# Interval names by semitone span (12 is kept apart from 0)
INTERVAL_NAMES = [
    "Unison",
    "Minor 2nd",
    "Major 2nd",
    "Minor 3rd",
    "Major 3rd",
    "Perfect 4th",
    "Tritone",
    "Perfect 5th",
    "Minor 6th",
    "Major 6th",
    "Minor 7th",
    "Major 7th",
    "Octave",
]

# Tuning
A4_MIDI = 69
A4_FREQUENCY = 440.0

# Musical defaults
DEFAULT_OCTAVE = 4
DEFAULT_VELOCITY = 64
