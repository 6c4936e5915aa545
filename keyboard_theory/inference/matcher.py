"""Chord pattern matching - Classify a played pitch-class set against the catalog.

For a single root candidate the matcher computes the root-relative interval
set and compares it with every catalog definition:

- Exact match (1.0)
- Superset match, extra non-chord tones allowed (0.9, or 0.8 over a known bass)
- Inversion match by rotating the definition onto the candidate (0.85 / 0.75)
- Partial match with missing notes (matched / chord size)

The matcher returns every plausible match; choosing between them is left
to the resolver in ``chords.py``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core import pitch_class_to_note_name, interval_name
from .catalog import ChordDefinition, ChordCategory, all_definitions

EXACT_CONFIDENCE = 1.0
SUPERSET_CONFIDENCE = 0.9
ROOTED_SUPERSET_CONFIDENCE = 0.8  # Superset on a known bass
INVERSION_CONFIDENCE = 0.85
INVERSION_SUPERSET_CONFIDENCE = 0.75
UNKNOWN_CONFIDENCE = 0.5

# Extra tones tolerated on top of an inverted chord
MAX_INVERSION_EXTRAS = 2


@dataclass(frozen=True)
class IntervalAnalysis:
    """Descriptive breakdown of an interval set that matched no chord."""
    has_third: bool
    has_fifth: bool
    has_seventh: bool
    has_ninth: bool
    has_eleventh: bool
    has_thirteenth: bool
    quality: str  # "major", "minor" or "suspended"
    extensions: Tuple[str, ...] = ()
    interval_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ChordMatch:
    """A detected chord: a catalog definition placed on a root."""

    root: int  # Root pitch class
    definition: ChordDefinition
    played_intervals: Tuple[int, ...]  # Relative to root
    confidence: float
    inversion: int = 0  # 0=root position, 1=first inversion, ...
    missing_intervals: Tuple[int, ...] = ()
    extra_intervals: Tuple[int, ...] = ()
    bass: Optional[int] = None  # Lowest sounding pitch class, if known
    analysis: Optional[IntervalAnalysis] = field(default=None, compare=False)

    @property
    def root_name(self) -> str:
        return pitch_class_to_note_name(self.root)

    @property
    def quality(self) -> str:
        return self.definition.quality_name

    @property
    def symbol(self) -> str:
        return self.definition.display_symbol

    @property
    def category(self) -> ChordCategory:
        return self.definition.category

    @property
    def name(self) -> str:
        """Chord symbol (e.g., 'C#m7')."""
        return f"{self.root_name}{self.symbol}"

    @property
    def full_name(self) -> str:
        """Readable name (e.g., 'C# Minor 7th')."""
        return f"{self.root_name} {self.quality}"

    @property
    def slash_name(self) -> str:
        """Chord symbol with the bass after a slash when it is not the root."""
        if self.bass is not None and self.bass != self.root:
            return f"{self.name}/{pitch_class_to_note_name(self.bass)}"
        return self.name

    @property
    def is_unknown(self) -> bool:
        return self.definition.category is ChordCategory.UNKNOWN

    @property
    def notes(self) -> List[str]:
        """Names of the played pitch classes, ascending from the root."""
        return [pitch_class_to_note_name(self.root + i) for i in self.played_intervals]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        result = {
            "root": self.root_name,
            "quality": self.quality,
            "symbol": self.symbol,
            "name": self.name,
            "full_name": self.full_name,
            "category": self.category.value,
            "confidence": self.confidence,
            "inversion": self.inversion,
            "notes": self.notes,
            "intervals": list(self.played_intervals),
            "missing_intervals": list(self.missing_intervals),
            "extra_intervals": list(self.extra_intervals),
            "bass": pitch_class_to_note_name(self.bass) if self.bass is not None else None,
        }
        if self.analysis is not None:
            result["analysis"] = {
                "quality": self.analysis.quality,
                "extensions": list(self.analysis.extensions),
                "interval_names": list(self.analysis.interval_names),
            }
        return result


@dataclass(frozen=True)
class PatternMatch:
    """How one definition relates to a root-relative interval set."""
    kind: str  # "exact", "superset", "inversion" or "partial"
    confidence: float
    inversion: int = 0
    root_offset: int = 0  # Chord root sits this many semitones below the candidate


def intervals_from(pitch_classes: Iterable[int], root: int) -> Tuple[int, ...]:
    """Sorted unique intervals of each pitch class above the root."""
    return tuple(sorted({(pc - root) % 12 for pc in pitch_classes}))


def invert_intervals(intervals: Sequence[int], inversion: int) -> Tuple[int, ...]:
    """
    Get a chord's intervals measured from the bass of an inversion.

    The lowest interval is moved up an octave ``inversion`` times and the
    result is re-expressed relative to the new lowest note, e.g. the first
    inversion of (0, 4, 7) is (0, 3, 8).
    """
    ordered = sorted(intervals)
    rotated = ordered[inversion:] + [i + 12 for i in ordered[:inversion]]
    bass = rotated[0]
    return tuple(sorted((i - bass) % 12 for i in rotated))


def match_pattern(
    played: Sequence[int],
    definition: ChordDefinition,
    include_inversions: bool = True,
) -> Optional[PatternMatch]:
    """
    Classify played intervals against one chord definition.

    Args:
        played: Sorted unique intervals relative to the root candidate
        definition: Catalog entry to test
        include_inversions: Whether to try inverted forms of the chord

    Returns:
        PatternMatch, or None if the definition is not plausible
    """
    chord = definition.intervals
    played_set = set(played)

    if tuple(played) == chord:
        return PatternMatch("exact", EXACT_CONFIDENCE)

    if played_set.issuperset(chord):
        return PatternMatch("superset", SUPERSET_CONFIDENCE)

    if include_inversions:
        for inversion in range(1, len(chord)):
            inverted = invert_intervals(chord, inversion)
            if tuple(played) == inverted:
                return PatternMatch(
                    "inversion", INVERSION_CONFIDENCE, inversion, chord[inversion]
                )
            if (played_set.issuperset(inverted)
                    and len(played) <= len(inverted) + MAX_INVERSION_EXTRAS):
                return PatternMatch(
                    "inversion", INVERSION_SUPERSET_CONFIDENCE, inversion, chord[inversion]
                )

    matched = [i for i in chord if i in played_set]
    if len(matched) >= min(2, len(chord) - 1):
        return PatternMatch("partial", len(matched) / len(chord))

    return None


def match_root(
    pitch_classes: Iterable[int],
    root_candidate: int,
    catalog: Optional[Sequence[ChordDefinition]] = None,
    bass: Optional[int] = None,
    include_inversions: bool = True,
) -> List[ChordMatch]:
    """
    Find every catalog chord plausible for one root candidate.

    Args:
        pitch_classes: Played pitch classes (at least two distinct)
        root_candidate: Pitch class tried as the root
        catalog: Definitions to test (default: full catalog)
        bass: Lowest sounding pitch class, when octaves are known
        include_inversions: Whether to try inverted forms

    Returns:
        List of ChordMatch, in catalog order
    """
    if catalog is None:
        catalog = all_definitions()

    pitch_classes = {pc % 12 for pc in pitch_classes}
    root_candidate %= 12
    played = intervals_from(pitch_classes, root_candidate)

    # Rotating a chord onto the candidate assumes the candidate is the lowest note
    try_inversions = include_inversions and (bass is None or bass == root_candidate)

    matches = []
    for definition in catalog:
        pattern = match_pattern(played, definition, try_inversions)
        if pattern is None:
            continue

        confidence = pattern.confidence
        inversion = pattern.inversion
        root = (root_candidate - pattern.root_offset) % 12

        if bass is not None and pattern.kind in ("exact", "superset"):
            if bass != root:
                # Inverted voicing, or an extra tone under the chord
                bass_interval = (bass - root) % 12
                if bass_interval in definition.intervals:
                    inversion = definition.intervals.index(bass_interval)
                if pattern.kind == "exact":
                    confidence = INVERSION_CONFIDENCE
                else:
                    confidence = INVERSION_SUPERSET_CONFIDENCE
            elif pattern.kind == "superset":
                # Stays below any inverted exact match
                confidence = ROOTED_SUPERSET_CONFIDENCE

        relative = intervals_from(pitch_classes, root)
        matches.append(ChordMatch(
            root=root,
            definition=definition,
            played_intervals=relative,
            confidence=confidence,
            inversion=inversion,
            missing_intervals=tuple(i for i in definition.intervals if i not in relative),
            extra_intervals=tuple(i for i in relative if i not in definition.intervals),
            bass=bass,
        ))

    return matches


def analyze_intervals(intervals: Sequence[int]) -> IntervalAnalysis:
    """
    Describe an interval structure that matched no known chord.

    Quality is 'major' when a major third is present, else 'minor' when a
    minor third is present, else 'suspended'.
    """
    present = set(intervals)
    has_third = 3 in present or 4 in present
    has_seventh = 10 in present or 11 in present
    has_ninth = 2 in present or 14 in present
    has_eleventh = 5 in present or 17 in present
    has_thirteenth = 9 in present or 21 in present

    if 4 in present:
        quality = "major"
    elif 3 in present:
        quality = "minor"
    else:
        quality = "suspended"

    extensions = []
    if has_seventh:
        extensions.append("7th")
    if has_ninth:
        extensions.append("9th")
    if has_eleventh:
        extensions.append("11th")
    if has_thirteenth:
        extensions.append("13th")

    return IntervalAnalysis(
        has_third=has_third,
        has_fifth=7 in present,
        has_seventh=has_seventh,
        has_ninth=has_ninth,
        has_eleventh=has_eleventh,
        has_thirteenth=has_thirteenth,
        quality=quality,
        extensions=tuple(extensions),
        interval_names=tuple(interval_name(i) for i in intervals),
    )
