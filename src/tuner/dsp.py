import math

import numpy as np

A4_MIDI = 69


def rms(frame: np.ndarray) -> float:
    if frame.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(frame.astype(np.float64) ** 2)))


def hz_to_midi(hz: float, reference: float = 440.0) -> float:
    return A4_MIDI + 12.0 * math.log2(hz / reference)


def midi_to_hz(midi: float, reference: float = 440.0) -> float:
    return reference * (2.0 ** ((midi - A4_MIDI) / 12.0))


def cents_between(hz: float, ref_hz: float) -> float:
    return 1200.0 * math.log2(hz / ref_hz)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
