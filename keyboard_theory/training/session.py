"""Training session - Curriculum levels, attempts and progress.

Progress is held in memory only; saving and restoring it is left to the
caller.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np

from .base import Answer, Exercise, ExerciseEngine
from .engines import (
    ChordBuildingEngine,
    ChordIdentificationEngine,
    IntervalIdentificationEngine,
    NoteIdentificationEngine,
    ScalePracticeEngine,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class CurriculumLevel:
    """One step of the curriculum."""
    name: str
    exercises: Tuple[str, ...]
    required_accuracy: float
    min_exercises: int


CURRICULUM: Dict[int, CurriculumLevel] = {
    1: CurriculumLevel("Intro to Notes", ("note-identification",), 0.7, 5),
    2: CurriculumLevel("Basic Notes", ("note-identification",), 0.7, 10),
    3: CurriculumLevel("Accidentals", ("note-identification",), 0.7, 10),
    4: CurriculumLevel("Basic Intervals", ("interval-identification",), 0.7, 10),
    5: CurriculumLevel("More Intervals", ("interval-identification",), 0.75, 15),
    6: CurriculumLevel("Major Scales", ("scale-practice",), 0.8, 10),
    7: CurriculumLevel("Minor Scales", ("scale-practice",), 0.8, 10),
    8: CurriculumLevel("Major/Minor Triads (ID)", ("chord-identification",), 0.8, 15),
    9: CurriculumLevel("Major/Minor Triads (Build)", ("chord-building",), 0.8, 15),
    10: CurriculumLevel(
        "All Triads & Basic 7ths (ID)",
        ("chord-identification", "interval-identification"),
        0.85,
        20,
    ),
    11: CurriculumLevel("Building 7th Chords", ("chord-building",), 0.85, 15),
    12: CurriculumLevel(
        "Comprehensive Practice",
        (
            "note-identification",
            "interval-identification",
            "scale-practice",
            "chord-identification",
            "chord-building",
        ),
        0.9,
        25,
    ),
}


@dataclass
class SessionStats:
    """Running statistics for a training session."""
    exercises_completed: int = 0
    correct_answers: int = 0
    total_attempts: int = 0
    average_time: float = 0.0  # Seconds per completed exercise
    accuracy: float = 0.0


@dataclass
class Feedback:
    """Result of submitting an answer."""
    is_correct: bool
    message: str
    action: str  # "proceed", "retry" or "error"
    attempts_left: int = 0
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    played_notes: List[str] = field(default_factory=list)
    expected_notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class LevelUp:
    level: int
    name: str

    @property
    def message(self) -> str:
        return f"Level Up! Welcome to Level {self.level}: {self.name}!"


def default_engines(rng: np.random.Generator) -> Dict[str, ExerciseEngine]:
    """Create one engine per exercise type, sharing a random generator."""
    engines = [
        NoteIdentificationEngine(rng),
        IntervalIdentificationEngine(rng),
        ScalePracticeEngine(rng),
        ChordIdentificationEngine(rng),
        ChordBuildingEngine(rng),
    ]
    return {engine.exercise_type: engine for engine in engines}


class TrainingSession:
    """Run exercises through the curriculum.

    Features:
    - Exercise selection from the current level
    - Limited attempts per exercise with feedback
    - Accuracy and timing statistics
    - Level progression on accuracy and volume thresholds
    """

    # Exercise types whose answers are played notes
    PERFORMANCE_TYPES = ("scale-practice", "chord-building")

    def __init__(
        self,
        level: int = 1,
        seed: Optional[int] = None,
        engines: Optional[Dict[str, ExerciseEngine]] = None,
        curriculum: Optional[Dict[int, CurriculumLevel]] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        """
        Initialize TrainingSession.

        Args:
            level: Starting curriculum level
            seed: Seed for exercise generation
            engines: Exercise engines by type (default: all five engines)
            curriculum: Levels by number (default: CURRICULUM)
            max_attempts: Attempts allowed per exercise
        """
        self.rng = np.random.default_rng(seed)
        self.engines = engines if engines is not None else default_engines(self.rng)
        self.curriculum = curriculum if curriculum is not None else CURRICULUM
        if level not in self.curriculum:
            raise ValueError(f"Unknown curriculum level: {level}")

        self.level = level
        self.max_attempts = max_attempts
        self.stats = SessionStats()
        self.exercise: Optional[Exercise] = None
        self.exercise_type: Optional[str] = None
        self.attempts = 0
        self._start_time = 0.0

    @property
    def is_active(self) -> bool:
        return self.exercise is not None

    @property
    def level_data(self) -> CurriculumLevel:
        return self.curriculum[self.level]

    def available_exercises(self) -> List[str]:
        return list(self.level_data.exercises)

    def start(self, exercise_type: Optional[str] = None, **options) -> Exercise:
        """
        Start a new exercise.

        Args:
            exercise_type: Type to generate (default: random from current level)
            **options: Passed to the engine's generate()

        Returns:
            The generated Exercise

        Raises:
            ValueError: If the exercise type has no engine
        """
        if exercise_type is None:
            pool = self.level_data.exercises
            exercise_type = pool[int(self.rng.integers(len(pool)))]

        engine = self.engines.get(exercise_type)
        if engine is None:
            self.end()
            raise ValueError(f"Unknown exercise type: {exercise_type}")

        self.exercise_type = exercise_type
        self.exercise = engine.generate(**options)
        self.attempts = 0
        self._start_time = time.monotonic()
        logger.debug("Started %s exercise at level %d", exercise_type, self.level)
        return self.exercise

    def end(self) -> None:
        self.exercise = None
        self.exercise_type = None

    def submit(self, answer: Answer) -> Feedback:
        """Submit an answer to the current exercise."""
        if not self.is_active:
            return Feedback(is_correct=False, message="Exercise not active.", action="error")

        self.attempts += 1
        self.stats.total_attempts += 1

        engine = self.engines[self.exercise_type]
        if engine.validate(answer, self.exercise):
            return self._handle_correct(answer)
        return self._handle_incorrect(answer)

    def _performance_notes(self, answer: Answer) -> Dict[str, List[str]]:
        if self.exercise_type not in self.PERFORMANCE_TYPES or isinstance(answer, str):
            return {}
        return {
            "played_notes": list(answer),
            "expected_notes": list(self.exercise.expected_notes),
        }

    def _handle_correct(self, answer: Answer) -> Feedback:
        elapsed = time.monotonic() - self._start_time

        self.stats.exercises_completed += 1
        self.stats.correct_answers += 1
        completed = self.stats.exercises_completed
        self.stats.average_time = (
            self.stats.average_time * (completed - 1) + elapsed
        ) / completed
        self._update_accuracy()

        noun = "attempt" if self.attempts == 1 else "attempts"
        return Feedback(
            is_correct=True,
            message=f"Correct! ({self.attempts} {noun})",
            action="proceed",
            **self._performance_notes(answer),
        )

    def _handle_incorrect(self, answer: Answer) -> Feedback:
        self._update_accuracy()
        attempts_left = self.max_attempts - self.attempts

        if attempts_left <= 0:
            return Feedback(
                is_correct=False,
                message=(
                    f"The correct answer was: {self.exercise.correct_answer}. "
                    f"{self.exercise.explanation}"
                ),
                action="proceed",
                correct_answer=self.exercise.correct_answer,
                explanation=self.exercise.explanation,
                **self._performance_notes(answer),
            )

        return Feedback(
            is_correct=False,
            message=f"Try again. {attempts_left} attempts left.",
            action="retry",
            attempts_left=attempts_left,
            **self._performance_notes(answer),
        )

    def _update_accuracy(self) -> None:
        if self.stats.total_attempts:
            self.stats.accuracy = self.stats.correct_answers / self.stats.total_attempts

    def check_level_progression(self) -> Optional[LevelUp]:
        """Advance a level once volume and accuracy thresholds are met."""
        level = self.level_data
        next_level = self.level + 1

        if (self.stats.exercises_completed >= level.min_exercises
                and self.stats.accuracy >= level.required_accuracy
                and next_level in self.curriculum):
            self.level = next_level
            logger.info("Advanced to level %d (%s)", next_level, self.level_data.name)
            return LevelUp(level=next_level, name=self.level_data.name)
        return None

    def next_exercise(self, **options) -> Tuple[Exercise, Optional[LevelUp]]:
        """Check progression, then start the next exercise."""
        level_up = self.check_level_progression()
        return self.start(**options), level_up

    def reset(self) -> None:
        """Return to level 1 and clear statistics."""
        self.level = min(self.curriculum)
        self.stats = SessionStats()
        self.end()
