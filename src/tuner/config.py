from dataclasses import dataclass
from typing import Optional, Union

MIN_WINDOW_SIZE = 16


@dataclass(frozen=True)
class TunerConfiguration:
    reference_frequency: float = 440.0
    min_rms: float = 0.01
    # Absolute correlation sum, tuned for unit-scale float samples.
    corr_threshold: float = 0.01
    min_offset: int = 8
    # 1.0 reports the highest-scoring lag even when it is a multiple of the period.
    peak_ratio: float = 0.9

    def __post_init__(self) -> None:
        if self.reference_frequency <= 0:
            raise ValueError("reference_frequency deve ser positiva.")
        if self.min_rms < 0:
            raise ValueError("min_rms nao pode ser negativo.")
        if isinstance(self.min_offset, bool) or not isinstance(self.min_offset, int):
            raise ValueError(f"min_offset deve ser inteiro, recebido {self.min_offset!r}.")
        if self.min_offset < 1:
            raise ValueError("min_offset deve ser >= 1.")
        if not 0 < self.peak_ratio <= 1:
            raise ValueError("peak_ratio deve estar em (0, 1].")


@dataclass
class AudioConfig:
    sample_rate: int = 44100
    window_size: int = 2048
    block_size: int = 512
    channels: int = 1
    device: Optional[Union[int, str]] = None

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate invalido: {self.sample_rate}")
        if self.window_size < MIN_WINDOW_SIZE or self.window_size % 2 != 0:
            raise ValueError(
                f"Tamanho de janela invalido: {self.window_size} (precisa ser par e >= {MIN_WINDOW_SIZE})."
            )
        if self.block_size <= 0:
            raise ValueError(f"Tamanho de bloco invalido: {self.block_size}")
        if self.channels < 1:
            raise ValueError(f"Numero de canais invalido: {self.channels}")


@dataclass
class DisplayConfig:
    needle_range_cents: float = 50.0
    in_tune_cents: float = 10.0
    needle_degrees_per_cent: float = 1.8
    tick_step_cents: int = 10
    major_tick_cents: int = 25
    refresh_hz: int = 60
