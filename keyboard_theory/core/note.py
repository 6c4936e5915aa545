"""Note data class - a single key on the keyboard."""

from dataclasses import dataclass
import numpy as np

from .constants import PITCH_NAMES, A4_MIDI, A4_FREQUENCY, DEFAULT_VELOCITY


@dataclass(frozen=True)
class Note:
    """Represents a sounding note."""

    pitch: int  # MIDI pitch
    velocity: int = DEFAULT_VELOCITY  # MIDI velocity (0-127)

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.pitch % 12

    @property
    def name(self) -> str:
        """Note name without octave (e.g., 'A#')."""
        return PITCH_NAMES[self.pitch_class]

    @property
    def octave(self) -> int:
        return (self.pitch // 12) - 1

    @property
    def pitch_name(self) -> str:
        """Get note name (e.g., 'C4', 'A#3')."""
        return f"{self.name}{self.octave}"

    @property
    def frequency(self) -> float:
        return self.midi_to_freq(self.pitch)

    @staticmethod
    def freq_to_midi(freq: float) -> int:
        """Convert frequency (Hz) to MIDI pitch."""
        if freq <= 0:
            return 0
        return int(round(A4_MIDI + 12 * np.log2(freq / A4_FREQUENCY)))

    @staticmethod
    def midi_to_freq(midi: int) -> float:
        """Convert MIDI pitch to frequency (Hz)."""
        return A4_FREQUENCY * (2 ** ((midi - A4_MIDI) / 12.0))

    def __str__(self) -> str:
        return self.pitch_name
