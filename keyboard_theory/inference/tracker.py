"""Chord tracking - Current chord and history kept on the caller's side.

ChordDetector is stateless; ChordTracker wraps it for interfaces that
re-run detection on every note-on/note-off and want to remember what was
played.
"""

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .chords import ChordDetector
from .matcher import ChordMatch


@dataclass(frozen=True)
class HistoryEntry:
    """A chord together with the time it was first detected."""
    chord: ChordMatch
    timestamp: float


@dataclass
class ChordStatistics:
    """Summary of the chord history."""
    total_chords: int = 0
    unique_chords: int = 0
    most_common: Optional[Tuple[str, int]] = None
    average_confidence: float = 0.0


@dataclass
class ChordTracker:
    """Track the current chord and a bounded history of detected chords."""

    detector: ChordDetector = field(default_factory=ChordDetector)
    max_history: int = 10
    current: Optional[ChordMatch] = field(default=None, init=False)
    _history: List[HistoryEntry] = field(default_factory=list, init=False, repr=False)

    def update(self, played_notes: Iterable) -> Optional[ChordMatch]:
        """Run detection on the held notes and record the result."""
        chord = self.detector.detect(played_notes)
        self.current = chord
        if chord is not None:
            self._add_to_history(chord)
        return chord

    def _add_to_history(self, chord: ChordMatch) -> None:
        # Holding the same chord does not add a new entry
        if self._history and self._history[-1].chord.name == chord.name:
            return

        self._history.append(HistoryEntry(chord=chord, timestamp=time.time()))
        if len(self._history) > self.max_history:
            del self._history[: len(self._history) - self.max_history]

    @property
    def history(self) -> List[HistoryEntry]:
        return list(self._history)

    def clear_history(self) -> None:
        self._history = []

    def statistics(self) -> ChordStatistics:
        """Get counts and average confidence over the history."""
        if not self._history:
            return ChordStatistics()

        counts = Counter(entry.chord.name for entry in self._history)
        name, count = counts.most_common(1)[0]
        total_confidence = sum(entry.chord.confidence for entry in self._history)

        return ChordStatistics(
            total_chords=len(self._history),
            unique_chords=len(counts),
            most_common=(name, count),
            average_confidence=total_confidence / len(self._history),
        )
