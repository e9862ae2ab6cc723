from __future__ import annotations

import math
from typing import Tuple

import pygame

from .config import DisplayConfig
from .display import DisplayState, tick_marks

NEEDLE_COLOR = (230, 230, 230)
IN_TUNE_COLOR = (96, 220, 120)


class PygameUI:
    def __init__(self, config: DisplayConfig, fullscreen: bool = False, size: tuple[int, int] | None = None):
        pygame.init()
        flags = pygame.FULLSCREEN if fullscreen else 0
        if size is None:
            size = (0, 0) if fullscreen else (640, 480)
        self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption("Afinador")

        self.config = config
        self.ticks = tick_marks(config)
        self.clock = pygame.time.Clock()
        self.width, self.height = self.screen.get_size()
        self.font_title = pygame.font.SysFont("DejaVu Sans", 40, bold=True)
        self.font_note = pygame.font.SysFont("DejaVu Sans", 96, bold=True)
        self.font_meta = pygame.font.SysFont("DejaVu Sans", 28)
        self.font_tick = pygame.font.SysFont("DejaVu Sans", 16)

    def update(self, state: DisplayState) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                return False

        self._draw_background()
        self._draw_header()
        self._draw_reading(state)
        self._draw_dial(state)

        pygame.display.flip()
        self.clock.tick(self.config.refresh_hz)
        return True

    def _draw_background(self) -> None:
        self.screen.fill((10, 12, 18))
        top = pygame.Color(18, 30, 54)
        bottom = pygame.Color(6, 8, 14)
        for y in range(self.height):
            ratio = y / max(self.height - 1, 1)
            r = int(top.r * (1 - ratio) + bottom.r * ratio)
            g = int(top.g * (1 - ratio) + bottom.g * ratio)
            b = int(top.b * (1 - ratio) + bottom.b * ratio)
            pygame.draw.line(self.screen, (r, g, b), (0, y), (self.width, y))

    def _draw_header(self) -> None:
        text = self.font_title.render("Afinador", True, (240, 240, 240))
        self.screen.blit(text, text.get_rect(center=(self.width // 2, 40)))

    def _draw_reading(self, state: DisplayState) -> None:
        note_color = IN_TUNE_COLOR if state.in_tune else (255, 236, 156)
        note_surf = self.font_note.render(state.note_text, True, note_color)
        freq_surf = self.font_meta.render(state.frequency_text, True, (180, 220, 255))
        cents_surf = self.font_meta.render(state.cents_text, True, (190, 190, 190))

        self.screen.blit(note_surf, note_surf.get_rect(center=(self.width // 2, 130)))
        self.screen.blit(freq_surf, freq_surf.get_rect(center=(self.width // 2, 200)))
        self.screen.blit(cents_surf, cents_surf.get_rect(center=(self.width // 2, 235)))

    def _draw_dial(self, state: DisplayState) -> None:
        pivot = (self.width // 2, self.height - 30)
        radius = min(self.width // 2 - 60, self.height - 320)

        for tick in self.ticks:
            length = 18 if tick.major else 10
            outer = _polar(pivot, radius, tick.angle)
            inner = _polar(pivot, radius - length, tick.angle)
            pygame.draw.line(self.screen, (150, 150, 150), inner, outer, 3 if tick.major else 1)
            label = self.font_tick.render(tick.label, True, (150, 150, 150))
            self.screen.blit(label, label.get_rect(center=_polar(pivot, radius + 18, tick.angle)))

        pygame.draw.line(self.screen, (90, 90, 90), pivot, _polar(pivot, radius - 24, 0.0), 1)
        color = IN_TUNE_COLOR if state.in_tune else NEEDLE_COLOR
        pygame.draw.line(self.screen, color, pivot, _polar(pivot, radius - 8, state.needle_angle), 4)
        pygame.draw.circle(self.screen, color, pivot, 8)

    def close(self) -> None:
        pygame.quit()


def _polar(pivot: Tuple[int, int], length: float, angle_deg: float) -> Tuple[int, int]:
    # 0 degrees points straight up, positive angles lean right.
    rad = math.radians(angle_deg)
    return int(pivot[0] + length * math.sin(rad)), int(pivot[1] - length * math.cos(rad))
