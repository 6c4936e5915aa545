"""Keyboard Theory - Chord detection and music-theory tooling for a virtual piano.

Architecture Layers:
    1. core/       - Note model, pitch conversions, constants, errors
    2. inference/  - Chord catalog, scales, matching, detection, harmony, tracking
    3. training/   - Exercise engines and curriculum sessions
"""

__version__ = "0.1.0"

# Core types
from .core import Note, InvalidNoteName, TheoryError

# Inference layer
from .inference import (
    ChordDetector,
    ChordMatch,
    ChordTracker,
    DetectionSettings,
    detect_chord,
    generate_scale,
)

# Training layer
from .training import TrainingSession

__all__ = [
    # Core
    "Note",
    "InvalidNoteName",
    "TheoryError",
    # Inference
    "ChordDetector",
    "ChordMatch",
    "ChordTracker",
    "DetectionSettings",
    "detect_chord",
    "generate_scale",
    # Training
    "TrainingSession",
]
