"""Chord detection - Resolve the single best chord for a set of held notes.

Every played pitch class is tried as a root. All plausible matches are
collected and ranked with a deterministic tie-break:

1. Higher confidence
2. Lower inversion (root position preferred)
3. Simpler category (triad < seventh < suspended < extended)
4. Fewer extra intervals
5. Fewer missing intervals

Clusters that match nothing resolve to an "unknown chord" summary rather
than an error. Detection is a pure function of its input.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core import Note, DEFAULT_OCTAVE, to_note
from .catalog import ChordDefinition, UNKNOWN_CHORD, all_definitions
from .matcher import (
    ChordMatch,
    UNKNOWN_CONFIDENCE,
    analyze_intervals,
    intervals_from,
    match_root,
)

logger = logging.getLogger(__name__)


@dataclass
class DetectionSettings:
    """Configuration for chord detection.

    Attributes:
        min_notes: Minimum unique pitch classes to form a chord (default: 2)
        max_notes: Maximum unique pitch classes evaluated, 0 = no limit (default: 0)
        include_inversions: Try inverted forms of each chord (default: True)
        prefer_simple_chords: Rank simpler categories first on ties (default: True)
        use_bass: Treat the lowest sounding note as the bass (default: True)
        default_octave: Octave for identifiers given without one (default: 4)
    """

    min_notes: int = 2
    max_notes: int = 0
    include_inversions: bool = True
    prefer_simple_chords: bool = True
    use_bass: bool = True
    default_octave: int = DEFAULT_OCTAVE


class ChordDetector:
    """Detect chords from sets of simultaneously held notes.

    Features:
    - Every played note tried as a root candidate
    - Exact, superset, inversion and partial matching
    - Deterministic tie-break between candidates
    - Unknown-chord fallback for unrecognized clusters
    """

    def __init__(
        self,
        settings: Optional[DetectionSettings] = None,
        catalog: Optional[Sequence[ChordDefinition]] = None,
    ):
        """
        Initialize ChordDetector.

        Args:
            settings: Detection settings (default: DetectionSettings())
            catalog: Chord definitions to match against (default: full catalog)
        """
        self.settings = settings if settings is not None else DetectionSettings()
        self.catalog = tuple(catalog) if catalog is not None else all_definitions()

    def detect(self, played_notes: Iterable) -> Optional[ChordMatch]:
        """
        Detect the best matching chord.

        Args:
            played_notes: Note identifiers ("C#4" or "C#"), MIDI numbers or Notes

        Returns:
            Best ChordMatch, or None when fewer than min_notes distinct
            pitch classes are held

        Raises:
            InvalidNoteName: If an identifier cannot be parsed
        """
        notes = self._to_notes(played_notes)
        pitch_classes = self._unique_pitch_classes(notes)
        if not self._is_evaluable(pitch_classes):
            return None

        candidates = self._collect_candidates(notes, pitch_classes)
        if not candidates:
            return self._analyze_unknown_chord(notes, pitch_classes)

        return self._rank(candidates)[0]

    def rank_candidates(self, played_notes: Iterable) -> List[ChordMatch]:
        """Get every candidate match, best first (empty if not evaluable)."""
        notes = self._to_notes(played_notes)
        pitch_classes = self._unique_pitch_classes(notes)
        if not self._is_evaluable(pitch_classes):
            return []

        candidates = self._collect_candidates(notes, pitch_classes)
        if not candidates:
            return [self._analyze_unknown_chord(notes, pitch_classes)]
        return self._rank(candidates)

    def _to_notes(self, played_notes: Iterable) -> List[Note]:
        if played_notes is None:
            return []
        return [to_note(n, self.settings.default_octave) for n in played_notes]

    @staticmethod
    def _unique_pitch_classes(notes: List[Note]) -> List[int]:
        """Pitch classes in order of first appearance."""
        seen = []
        for note in notes:
            if note.pitch_class not in seen:
                seen.append(note.pitch_class)
        return seen

    def _is_evaluable(self, pitch_classes: List[int]) -> bool:
        if len(pitch_classes) < max(2, self.settings.min_notes):
            return False
        if self.settings.max_notes and len(pitch_classes) > self.settings.max_notes:
            logger.debug(
                "Ignoring %d pitch classes (max_notes=%d)",
                len(pitch_classes), self.settings.max_notes,
            )
            return False
        return True

    def _collect_candidates(
        self,
        notes: List[Note],
        pitch_classes: List[int],
    ) -> List[ChordMatch]:
        bass = None
        if self.settings.use_bass:
            bass = min(n.pitch for n in notes) % 12

        candidates = []
        for root in pitch_classes:
            candidates.extend(match_root(
                pitch_classes,
                root,
                self.catalog,
                bass=bass,
                include_inversions=self.settings.include_inversions,
            ))

        logger.debug(
            "%d candidates for pitch classes %s", len(candidates), pitch_classes
        )
        return candidates

    def _sort_key(self, match: ChordMatch) -> Tuple:
        category_rank = match.category.rank if self.settings.prefer_simple_chords else 0
        return (
            -match.confidence,
            match.inversion,
            category_rank,
            len(match.extra_intervals),
            len(match.missing_intervals),
        )

    def _rank(self, candidates: List[ChordMatch]) -> List[ChordMatch]:
        # sorted() is stable, so exact ties keep root and catalog order
        return sorted(candidates, key=self._sort_key)

    def _analyze_unknown_chord(
        self,
        notes: List[Note],
        pitch_classes: List[int],
    ) -> ChordMatch:
        """Summarize a cluster that matched no catalog chord."""
        lowest = min(notes, key=lambda n: n.pitch).pitch_class
        intervals = intervals_from(pitch_classes, lowest)
        analysis = analyze_intervals(intervals)

        logger.debug(
            "No catalog match for %s, falling back to %s guess",
            pitch_classes, analysis.quality,
        )
        return ChordMatch(
            root=lowest,
            definition=UNKNOWN_CHORD,
            played_intervals=intervals,
            confidence=UNKNOWN_CONFIDENCE,
            inversion=0,
            bass=lowest if self.settings.use_bass else None,
            analysis=analysis,
        )


def detect_chord(
    played_notes: Iterable,
    settings: Optional[DetectionSettings] = None,
    catalog: Optional[Sequence[ChordDefinition]] = None,
) -> Optional[ChordMatch]:
    """
    Detect the chord formed by a set of held notes.

    Args:
        played_notes: Note identifiers ("C#4" or "C#"), MIDI numbers or Notes
        settings: Optional detection settings
        catalog: Optional restricted set of chord definitions

    Returns:
        Best ChordMatch, or None for fewer than two distinct pitch classes
    """
    return ChordDetector(settings, catalog).detect(played_notes)


def rank_candidates(
    played_notes: Iterable,
    settings: Optional[DetectionSettings] = None,
    catalog: Optional[Sequence[ChordDefinition]] = None,
) -> List[ChordMatch]:
    """Get all candidate chords for a set of held notes, best first."""
    return ChordDetector(settings, catalog).rank_candidates(played_notes)
