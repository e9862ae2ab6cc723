from __future__ import annotations

import numpy as np


class SampleWindow:
    """Most recent `size` samples of the input, oldest first."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError("Tamanho da janela deve ser positivo.")
        self.size = size
        self._data = np.zeros(size, dtype=np.float32)

    def push(self, block: np.ndarray) -> None:
        samples = np.asarray(block, dtype=np.float32).reshape(-1)
        if samples.size == 0:
            return
        if samples.size >= self.size:
            self._data[:] = samples[-self.size :]
            return
        self._data = np.roll(self._data, -samples.size)
        self._data[-samples.size :] = samples

    def snapshot(self) -> np.ndarray:
        return self._data.copy()
