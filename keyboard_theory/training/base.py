"""Base classes for training exercises."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union
import numpy as np

Answer = Union[str, Sequence[str]]


@dataclass
class Exercise:
    """A generated exercise and everything needed to check an answer."""

    exercise_type: str
    prompt: str
    correct_answer: str
    options: List[str] = field(default_factory=list)  # Multiple-choice answers
    expected_notes: List[str] = field(default_factory=list)  # Performance exercises
    explanation: str = ""
    theory_snippet: str = ""
    playback: Dict[str, Any] = field(default_factory=dict)  # For the audio collaborator


class ExerciseEngine(ABC):
    """Abstract base class for exercise generators."""

    exercise_type: str = ""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the engine.

        Args:
            rng: Random generator to draw exercises from
            seed: Seed for a new generator when rng is not given
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @abstractmethod
    def generate(self, **options) -> Exercise:
        """
        Generate a new exercise.

        Args:
            **options: Engine-specific pools and overrides

        Returns:
            Exercise
        """
        pass

    @abstractmethod
    def validate(self, answer: Answer, exercise: Exercise) -> bool:
        """Check a user's answer against an exercise."""
        pass

    def _choice(self, pool: Sequence):
        return pool[int(self.rng.integers(len(pool)))]

    def _multiple_choice(self, correct: str, pool: Sequence[str], num_options: int) -> List[str]:
        """Build shuffled options containing the correct answer."""
        num_options = min(num_options, len(set(pool) | {correct}))
        options = [correct]
        while len(options) < num_options:
            candidate = self._choice(pool)
            if candidate not in options:
                options.append(candidate)
        return [options[i] for i in self.rng.permutation(len(options))]

    @staticmethod
    def _text_matches(answer: Answer, exercise: Exercise) -> bool:
        if not isinstance(answer, str):
            return False
        return answer.strip().lower() == exercise.correct_answer.lower()
