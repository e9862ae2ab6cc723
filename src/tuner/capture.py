from __future__ import annotations

import queue

import numpy as np

from .config import AudioConfig
from .window import SampleWindow


class AudioCapture:
    def __init__(self, config: AudioConfig):
        import sounddevice as sd

        self.config = config
        self.queue: "queue.Queue[np.ndarray]" = queue.Queue()
        self.stream = sd.InputStream(
            channels=config.channels,
            samplerate=config.sample_rate,
            blocksize=config.block_size,
            device=config.device,
            callback=self._callback,
        )

    @property
    def sample_rate(self) -> int:
        return int(self.stream.samplerate)

    def _callback(self, indata: np.ndarray, frames: int, time_info, status) -> None:
        if status:
            return
        self.queue.put(indata[:, 0].copy())

    def drain(self, window: SampleWindow) -> int:
        moved = 0
        while True:
            try:
                block = self.queue.get_nowait()
            except queue.Empty:
                return moved
            window.push(block)
            moved += len(block)

    def __enter__(self) -> "AudioCapture":
        self.stream.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stream.stop()
        self.stream.close()


def list_devices() -> None:
    import sounddevice as sd

    print(sd.query_devices())
