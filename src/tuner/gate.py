from __future__ import annotations

import numpy as np

from .dsp import rms


class SignalGate:
    def __init__(self, min_rms: float):
        self.min_rms = min_rms

    def has_signal(self, frame: np.ndarray) -> bool:
        return rms(frame) >= self.min_rms
