from __future__ import annotations

from typing import List, Optional

import numpy as np


class PitchEstimator:
    """Brute-force time-domain autocorrelation over lags [min_offset, N/2).

    The sum always covers the first N/2 samples, so every whole multiple of
    the period scores about the same as the period itself. The estimator
    reports the first peak after the correlation has dipped that comes within
    `peak_ratio` of the best score, instead of whichever multiple happens to
    score highest. With `peak_ratio=1.0` this is exactly the best lag.

    The caller is expected to have gated the frame on energy already.
    """

    def __init__(self, min_offset: int, corr_threshold: float, peak_ratio: float = 0.9):
        self.min_offset = min_offset
        self.corr_threshold = corr_threshold
        self.peak_ratio = peak_ratio

    def estimate(self, frame: np.ndarray, sample_rate: int) -> Optional[float]:
        corrs = self.correlations(frame)

        best_idx = -1
        best_corr = 0.0
        for idx, corr in enumerate(corrs):
            # Strictly greater: ties keep the smaller lag.
            if corr > best_corr:
                best_corr = corr
                best_idx = idx
        if best_idx == -1:
            return None

        idx = _first_peak(corrs, self.peak_ratio * best_corr)
        if idx is None or idx > best_idx:
            idx = best_idx

        if corrs[idx] > self.corr_threshold:
            return sample_rate / (self.min_offset + idx)
        return None

    def correlations(self, frame: np.ndarray) -> List[float]:
        x = np.asarray(frame, dtype=np.float64)
        half = len(x) // 2
        head = x[:half]
        return [float(np.dot(head, x[offset : offset + half])) for offset in range(self.min_offset, half)]


def _first_peak(corrs: List[float], floor: float) -> Optional[int]:
    dipped = bool(corrs) and corrs[0] < floor
    last = len(corrs) - 1
    for i in range(1, len(corrs)):
        if not dipped:
            dipped = corrs[i] < floor
            continue
        if corrs[i] < floor or corrs[i] <= corrs[i - 1]:
            continue
        if i == last or corrs[i] >= corrs[i + 1]:
            return i
    return None
