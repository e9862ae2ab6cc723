from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .analysis import TunerReading
from .config import DisplayConfig


@dataclass(frozen=True)
class DisplayState:
    note_text: str
    frequency_text: str
    cents_text: str
    needle_cents: float
    needle_angle: float
    in_tune: bool
    active: bool


@dataclass(frozen=True)
class TickMark:
    cents: int
    angle: float
    label: str
    major: bool


IDLE_STATE = DisplayState(
    note_text="...",
    frequency_text="- HZ",
    cents_text="- Cents",
    needle_cents=0.0,
    needle_angle=0.0,
    in_tune=False,
    active=False,
)


def build_display_state(reading: Optional[TunerReading], config: DisplayConfig) -> DisplayState:
    if reading is None:
        return IDLE_STATE

    cents = reading.note.cents
    span = config.needle_range_cents
    clamped = max(-span, min(span, cents))
    sign = "+" if cents > 0 else ""
    return DisplayState(
        note_text=reading.note.label,
        frequency_text=f"{reading.frequency:.1f} Hz",
        cents_text=f"{sign}{cents:.1f} cents",
        needle_cents=clamped,
        needle_angle=clamped * config.needle_degrees_per_cent,
        in_tune=abs(cents) <= config.in_tune_cents,
        active=True,
    )


def tick_marks(config: DisplayConfig) -> List[TickMark]:
    span = int(config.needle_range_cents)
    ticks: List[TickMark] = []
    for pos in range(-span, span + 1, config.tick_step_cents):
        ticks.append(
            TickMark(
                cents=pos,
                angle=pos * config.needle_degrees_per_cent,
                label=f"+{pos}" if pos > 0 else str(pos),
                major=pos % config.major_tick_cents == 0,
            )
        )
    return ticks


def ascii_needle(cents: float, span: float, width: int = 25) -> str:
    mid = width // 2
    chars = ["-"] * width
    chars[mid] = "|"
    pos = mid + int(round((max(-span, min(span, cents)) / span) * mid))
    chars[max(0, min(width - 1, pos))] = "^"
    return "[" + "".join(chars) + "]"


class ConsoleDisplay:
    def __init__(self, config: DisplayConfig):
        self.config = config
        self._last: Optional[str] = None

    def update(self, state: DisplayState) -> bool:
        line = self.format(state)
        if line != self._last:
            print(line, flush=True)
            self._last = line
        return True

    def format(self, state: DisplayState) -> str:
        needle = ascii_needle(state.needle_cents, self.config.needle_range_cents)
        mark = " OK" if state.in_tune else ""
        return f"{state.note_text:>4}  {state.frequency_text:>10}  {state.cents_text:>13}  {needle}{mark}"

    def close(self) -> None:
        pass
