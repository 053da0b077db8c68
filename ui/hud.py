#!/usr/bin/env python3
"""HUD panel, legend, splash screen, and pause banner (mixin)."""

from __future__ import annotations

from typing import List, Tuple

import pygame

from sim.world import SimulationState

from .helpers import format_reading

HELP_LINES: Tuple[Tuple[str, str], ...] = (
    ("ARROWS", "Manual override"),
    ("A", "Toggle autonomous"),
    ("SPACE", "Pause/Resume"),
    ("R", "Reset"),
    ("L", "Toggle lidar"),
    ("H", "Toggle legend"),
    ("F12", "Screenshot"),
)


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    def _panel(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        pygame.draw.rect(surface, self.HUD_BG_COLOR, rect, border_radius=6)
        pygame.draw.rect(surface, self.HUD_BORDER_COLOR, rect, width=1, border_radius=6)

    # ── Telemetry panel ───────────────────────────────────────────────────

    def _telemetry_lines(self, state: SimulationState, tick: int) -> List[str]:
        vehicle = state.vehicle
        return [
            f"TICK    {tick}",
            f"SPEED   {vehicle.speed:5.2f} / {self.params.max_speed:.1f}",
            f"STEER   {vehicle.steering_angle:+6.1f} deg",
            f"HEADING {vehicle.heading:8.1f} deg",
            f"LEFT  {format_reading(state.lateral.left)}  "
            f"RIGHT {format_reading(state.lateral.right)}",
            f"LIDAR HITS {state.lidar.hit_count}/{len(state.lidar)}",
        ]

    def draw_hud(
        self,
        surface: pygame.Surface,
        state: SimulationState,
        tick: int,
        autonomous: bool,
    ) -> None:
        if self.font_small is None or self.font_tiny is None:
            return

        lines = self._telemetry_lines(state, tick)
        rect = pygame.Rect(16, 0, 250, 34 + 14 * len(lines))
        rect.bottom = self.height - 16
        self._panel(surface, rect)

        mode_color = self.AUTO_COLOR if autonomous else self.MANUAL_COLOR
        label = self.font_small.render("AUTONOMOUS" if autonomous else "MANUAL", True, mode_color)
        surface.blit(label, (rect.x + 10, rect.y + 8))

        for row, line in enumerate(lines):
            text = self.font_tiny.render(line, True, (220, 220, 220))
            surface.blit(text, (rect.x + 10, rect.y + 28 + 14 * row))

        # Speed gauge, full width at max_speed with a tick at the cruise target
        gauge = pygame.Rect(rect.x + 160, rect.y + 14, 80, 6)
        pygame.draw.rect(surface, (40, 40, 40), gauge, border_radius=2)
        fill = int(gauge.w * state.vehicle.speed / self.params.max_speed)
        if fill > 0:
            pygame.draw.rect(surface, mode_color, (gauge.x, gauge.y, fill, gauge.h), border_radius=2)
        target_x = gauge.x + int(gauge.w * self.params.target_speed / self.params.max_speed)
        pygame.draw.line(surface, (230, 230, 230), (target_x, gauge.y - 2), (target_x, gauge.bottom + 1))

    # ── Splash screen ─────────────────────────────────────────────────────

    def _draw_splash(self, surface: pygame.Surface, seconds: float) -> None:
        if self.font_title is None or self.font_small is None or self.font_tiny is None:
            return
        cx, cy = self.width // 2, self.height // 2
        title = self.font_title.render("WINDING ROAD SIM", True, (240, 240, 240))
        surface.blit(title, title.get_rect(midbottom=(cx, cy - 16)))

        # Blink at 1 Hz
        if seconds % 1.0 < 0.5:
            prompt = self.font_small.render("press any key", True, (160, 160, 160))
            surface.blit(prompt, prompt.get_rect(midtop=(cx, cy)))

        top = cy + 48
        for row, (key, action) in enumerate(HELP_LINES):
            y = top + 16 * row
            key_img = self.font_tiny.render(key, True, self.AUTO_COLOR)
            action_img = self.font_tiny.render(action, True, (110, 110, 110))
            surface.blit(key_img, key_img.get_rect(topright=(cx - 8, y)))
            surface.blit(action_img, (cx + 8, y))

    # ── Legend ────────────────────────────────────────────────────────────

    def _draw_legend(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        row_h = 18
        rect = pygame.Rect(0, 16, 120, 10 + row_h * len(self.LEGEND_ITEMS))
        rect.right = self.width - 16
        self._panel(surface, rect)
        for row, (label, color) in enumerate(self.LEGEND_ITEMS):
            y = rect.y + 5 + row_h * row
            pygame.draw.circle(surface, color, (rect.x + 12, y + 7), 4)
            text = self.font_tiny.render(label, True, (200, 200, 200))
            surface.blit(text, (rect.x + 22, y))

    # ── Pause banner ──────────────────────────────────────────────────────

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        if self.font_title is None:
            return
        text = self.font_title.render("PAUSED", True, (220, 220, 220))
        band = pygame.Rect(0, 0, self.width, text.get_height() + 24)
        band.centery = self.height // 2
        shade = pygame.Surface(band.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, 140))
        surface.blit(shade, band.topleft)
        surface.blit(text, text.get_rect(center=band.center))
