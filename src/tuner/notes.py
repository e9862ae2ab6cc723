from __future__ import annotations

import math
from dataclasses import dataclass

from .dsp import cents_between, hz_to_midi, midi_to_hz, round_half_up

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True)
class NoteData:
    name: str
    octave: int
    exact_frequency: float
    cents: float

    @property
    def label(self) -> str:
        return f"{self.name}{self.octave}"


class NoteMapper:
    def __init__(self, reference_frequency: float = 440.0):
        self.reference_frequency = reference_frequency

    def map(self, frequency: float) -> NoteData:
        if not frequency > 0 or math.isinf(frequency):
            raise ValueError(f"Frequencia invalida: {frequency!r}")

        note_number = round_half_up(hz_to_midi(frequency, self.reference_frequency))
        # Python's % and // floor, so negative note numbers still land in C..B.
        name = NOTE_NAMES[note_number % 12]
        octave = note_number // 12 - 1
        exact = midi_to_hz(note_number, self.reference_frequency)
        return NoteData(
            name=name,
            octave=octave,
            exact_frequency=exact,
            cents=cents_between(frequency, exact),
        )
