"""Inference layer - Musical understanding of held notes.

This layer builds chord and scale understanding from notes:
- Chord catalog (triads, sevenths, suspended, extended)
- Scale generation and membership
- Chord pattern matching per root candidate
- Chord resolution with deterministic tie-breaking
- Harmonic function of a chord in a key
- Caller-side chord tracking and statistics

Pipeline: Notes → [Matcher × Catalog] → Resolver → ChordMatch
"""

from .catalog import (
    ChordCategory,
    ChordDefinition,
    CHORD_CATALOG,
    UNKNOWN_CHORD,
    all_definitions,
    definitions_by_category,
    get_definition,
    chord_notes,
)
from .scales import (
    ScaleDefinition,
    SCALES,
    get_scale,
    generate_scale,
    is_pitch_class_in_scale,
    scale_note_names,
    scale_notes,
    filter_to_scale,
)
from .matcher import (
    ChordMatch,
    IntervalAnalysis,
    PatternMatch,
    invert_intervals,
    match_pattern,
    match_root,
    analyze_intervals,
)
from .chords import (
    ChordDetector,
    DetectionSettings,
    detect_chord,
    rank_candidates,
)
from .harmony import (
    FunctionChord,
    Progression,
    chord_function,
    function_chord,
    suggest_next_chords,
    common_progressions,
)
from .tracker import ChordTracker, ChordStatistics, HistoryEntry

__all__ = [
    # Catalog
    "ChordCategory",
    "ChordDefinition",
    "CHORD_CATALOG",
    "UNKNOWN_CHORD",
    "all_definitions",
    "definitions_by_category",
    "get_definition",
    "chord_notes",
    # Scales
    "ScaleDefinition",
    "SCALES",
    "get_scale",
    "generate_scale",
    "is_pitch_class_in_scale",
    "scale_note_names",
    "scale_notes",
    "filter_to_scale",
    # Matching
    "ChordMatch",
    "IntervalAnalysis",
    "PatternMatch",
    "invert_intervals",
    "match_pattern",
    "match_root",
    "analyze_intervals",
    # Detection
    "ChordDetector",
    "DetectionSettings",
    "detect_chord",
    "rank_candidates",
    # Harmony
    "FunctionChord",
    "Progression",
    "chord_function",
    "function_chord",
    "suggest_next_chords",
    "common_progressions",
    # Tracking
    "ChordTracker",
    "ChordStatistics",
    "HistoryEntry",
]
