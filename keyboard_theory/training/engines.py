"""Exercise engines - Note, interval, scale and chord training.

Identification exercises are multiple choice and validated as
case-insensitive text. Performance exercises (scale practice, chord
building) are validated against the expected note identifiers.
"""

from typing import List, Sequence

from ..core import PITCH_NAMES, interval_name, note_to_midi_number, Note
from ..inference import (
    ChordCategory,
    chord_notes,
    definitions_by_category,
    get_scale,
    scale_notes,
)
from .base import Answer, Exercise, ExerciseEngine

NATURAL_NAMES = ["C", "D", "E", "F", "G", "A", "B"]
INTERVAL_POOL = [0, 1, 2, 3, 4, 5, 7, 8, 9, 10, 11, 12]
DEFAULT_CHORD_CATEGORIES = [ChordCategory.TRIAD, ChordCategory.SEVENTH]

# Chance of sharpening a generated natural (never E or B)
ACCIDENTAL_PROBABILITY = 0.4


class NoteIdentificationEngine(ExerciseEngine):
    """Identify a single played note by name."""

    exercise_type = "note-identification"

    def generate(
        self,
        octaves: Sequence[int] = (3, 4, 5),
        include_accidentals: bool = True,
        num_options: int = 4,
        question: str = "What note was played?",
    ) -> Exercise:
        name = self._choice(NATURAL_NAMES)
        octave = int(self._choice(list(octaves)))
        if (include_accidentals and name not in ("E", "B")
                and self.rng.random() < ACCIDENTAL_PROBABILITY):
            name += "#"

        return Exercise(
            exercise_type=self.exercise_type,
            prompt=question,
            correct_answer=name,
            options=self._multiple_choice(name, PITCH_NAMES, num_options),
            explanation=f"The note played was {name} (octave {octave}).",
            theory_snippet=(
                "A note's pitch is determined by its letter (A-G), accidental (#) "
                "and octave (e.g., C4 is Middle C)."
            ),
            playback={"type": "note", "name": name, "octave": octave},
        )

    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        return self._text_matches(answer, exercise)


class IntervalIdentificationEngine(ExerciseEngine):
    """Identify the interval between two played notes."""

    exercise_type = "interval-identification"

    def generate(
        self,
        semitones_pool: Sequence[int] = tuple(INTERVAL_POOL),
        root_names: Sequence[str] = tuple(NATURAL_NAMES),
        octaves: Sequence[int] = (2, 3, 4),
        num_options: int = 4,
        question: str = "What interval was played?",
    ) -> Exercise:
        semitones = int(self._choice(list(semitones_pool)))
        name = interval_name(semitones)
        root = self._choice(list(root_names))
        octave = int(self._choice(list(octaves)))
        root_full = f"{root}{octave}"
        top = Note(pitch=note_to_midi_number(root, octave) + semitones)

        names = [interval_name(s) for s in semitones_pool]
        return Exercise(
            exercise_type=self.exercise_type,
            prompt=question,
            correct_answer=name,
            options=self._multiple_choice(name, names, num_options),
            expected_notes=[root_full, top.pitch_name],
            explanation=f"The interval from {root_full} was a {name}.",
            theory_snippet=(
                "An interval is the distance between two notes. "
                f"A {name} is {semitones} semitones."
            ),
            playback={
                "type": "interval",
                "name": root,
                "octave": octave,
                "semitones": semitones,
            },
        )

    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        return self._text_matches(answer, exercise)


class ScalePracticeEngine(ExerciseEngine):
    """Play a scale one octave ascending."""

    exercise_type = "scale-practice"

    def generate(
        self,
        scale_keys: Sequence[str] = ("major", "minor", "pentatonic"),
        root_names: Sequence[str] = tuple(NATURAL_NAMES),
        octaves: Sequence[int] = (3, 4),
    ) -> Exercise:
        scale = get_scale(self._choice(list(scale_keys)))
        root = self._choice(list(root_names))
        octave = int(self._choice(list(octaves)))
        root_full = f"{root}{octave}"
        expected = scale_notes(root, octave, scale, include_octave=True)

        return Exercise(
            exercise_type=self.exercise_type,
            prompt=(
                f"Play the {root} {scale.name} scale, starting on {root_full} "
                "(1 octave ascending)."
            ),
            correct_answer=" ".join(expected),
            expected_notes=expected,
            explanation=(
                f"The {root} {scale.name} scale starting from {root_full} is: "
                f"{' - '.join(expected)}"
            ),
            theory_snippet=(
                f"The {scale.name} scale pattern of whole (W) and half (H) steps "
                f"is: {scale.step_formula}."
            ),
        )

    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        """Scales must be played in order, note for note."""
        if isinstance(answer, str):
            return False
        played = [n.strip() for n in answer]
        return played == exercise.expected_notes


class ChordIdentificationEngine(ExerciseEngine):
    """Identify the quality of a played chord."""

    exercise_type = "chord-identification"

    def generate(
        self,
        categories: Sequence[ChordCategory] = tuple(DEFAULT_CHORD_CATEGORIES),
        root_names: Sequence[str] = tuple(NATURAL_NAMES),
        octaves: Sequence[int] = (3, 4),
        num_options: int = 4,
        question: str = "What type of chord was played?",
    ) -> Exercise:
        category = self._choice(list(categories))
        definition = self._choice(definitions_by_category(category))
        root = self._choice(list(root_names))
        octave = int(self._choice(list(octaves)))
        root_full = f"{root}{octave}"

        names = [d.quality_name for c in DEFAULT_CHORD_CATEGORIES
                 for d in definitions_by_category(c)]
        interval_names = ", ".join(interval_name(i) for i in definition.voicing)

        return Exercise(
            exercise_type=self.exercise_type,
            prompt=question,
            correct_answer=definition.quality_name,
            options=self._multiple_choice(definition.quality_name, names, num_options),
            expected_notes=chord_notes(root, definition, octave),
            explanation=(
                f"The chord played (from {root_full}) was "
                f"{root}{definition.display_symbol} ({definition.quality_name})."
            ),
            theory_snippet=(
                f"A {definition.quality_name} chord consists of notes at intervals "
                f"of {interval_names} above the root."
            ),
            playback={
                "type": "chord",
                "name": root,
                "octave": octave,
                "intervals": list(definition.voicing),
            },
        )

    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        return self._text_matches(answer, exercise)


class ChordBuildingEngine(ExerciseEngine):
    """Play the notes of a named chord."""

    exercise_type = "chord-building"

    def generate(
        self,
        categories: Sequence[ChordCategory] = tuple(DEFAULT_CHORD_CATEGORIES),
        root_names: Sequence[str] = tuple(NATURAL_NAMES),
        octaves: Sequence[int] = (3, 4),
    ) -> Exercise:
        category = self._choice(list(categories))
        definition = self._choice(definitions_by_category(category))
        root = self._choice(list(root_names))
        octave = int(self._choice(list(octaves)))
        root_full = f"{root}{octave}"
        expected = chord_notes(root, definition, octave)
        label = f"{root_full}{definition.display_symbol} ({definition.quality_name})"
        interval_names = ", ".join(interval_name(i) for i in definition.voicing)

        return Exercise(
            exercise_type=self.exercise_type,
            prompt=f"Build a {label} chord.",
            correct_answer=f"{root_full}{definition.display_symbol}",
            expected_notes=expected,
            explanation=f"A {label} chord contains the notes: {' - '.join(expected)}",
            theory_snippet=(
                f"To build a {definition.quality_name} chord, stack notes "
                f"{interval_names} from the root {root_full}."
            ),
        )

    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        """Chord notes may be played in any order."""
        if isinstance(answer, str):
            return False
        played: List[str] = [n.strip() for n in answer]
        if len(played) != len(exercise.expected_notes):
            return False
        return set(played) == set(exercise.expected_notes)
