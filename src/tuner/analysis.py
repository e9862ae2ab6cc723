from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import MIN_WINDOW_SIZE, TunerConfiguration
from .gate import SignalGate
from .notes import NoteData, NoteMapper
from .pitch import PitchEstimator


@dataclass(frozen=True)
class TunerReading:
    frequency: float
    note: NoteData


class TunerPipeline:
    """Gate, estimate and map one analysis window per call."""

    def __init__(self, config: TunerConfiguration):
        self.config = config
        self.gate = SignalGate(config.min_rms)
        self.estimator = PitchEstimator(config.min_offset, config.corr_threshold, config.peak_ratio)
        self.mapper = NoteMapper(config.reference_frequency)

    def analyze(self, frame: np.ndarray, sample_rate: int) -> Optional[TunerReading]:
        frame = np.asarray(frame, dtype=np.float64)
        _check_frame(frame, sample_rate)
        if not self.gate.has_signal(frame):
            return None
        hz = self.estimator.estimate(frame, sample_rate)
        if hz is None:
            return None
        return TunerReading(frequency=hz, note=self.mapper.map(hz))


def analyze_cycle(
    frame: np.ndarray,
    sample_rate: int,
    config: TunerConfiguration,
) -> Optional[TunerReading]:
    return TunerPipeline(config).analyze(frame, sample_rate)


def _check_frame(frame: np.ndarray, sample_rate: int) -> None:
    if frame.ndim != 1:
        raise ValueError(f"Buffer deve ser mono (1-D), recebido shape {frame.shape}.")
    size = frame.shape[0]
    if size < MIN_WINDOW_SIZE or size % 2 != 0:
        raise ValueError(f"Tamanho de buffer invalido: {size} (precisa ser par e >= {MIN_WINDOW_SIZE}).")
    if sample_rate <= 0:
        raise ValueError(f"Sample rate invalido: {sample_rate}")
