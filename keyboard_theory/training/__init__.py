"""Training layer - Ear and keyboard exercises.

This layer generates and checks practice exercises:
- Note identification
- Interval identification
- Scale practice (performance)
- Chord identification
- Chord building (performance)
- Curriculum levels and session statistics
"""

from .base import Exercise, ExerciseEngine
from .engines import (
    NoteIdentificationEngine,
    IntervalIdentificationEngine,
    ScalePracticeEngine,
    ChordIdentificationEngine,
    ChordBuildingEngine,
)
from .session import (
    CURRICULUM,
    CurriculumLevel,
    Feedback,
    LevelUp,
    SessionStats,
    TrainingSession,
    default_engines,
)

__all__ = [
    "Exercise",
    "ExerciseEngine",
    "NoteIdentificationEngine",
    "IntervalIdentificationEngine",
    "ScalePracticeEngine",
    "ChordIdentificationEngine",
    "ChordBuildingEngine",
    "CURRICULUM",
    "CurriculumLevel",
    "Feedback",
    "LevelUp",
    "SessionStats",
    "TrainingSession",
    "default_engines",
]
