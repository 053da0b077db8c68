"""
ui/helpers.py
=============
Pure utility functions shared across UI modules: alpha-surface drawing,
reading formatting, and the :class:`ViewHelpers` mixin (fonts).
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pygame


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_lines(
    target: pygame.Surface,
    color: Tuple[int, ...],
    segments: Sequence[Tuple[Tuple[float, float], Tuple[float, float]]],
    width: int = 1,
) -> None:
    """Draw semi-transparent lines (colour tuple with 4 channels) in one blit."""
    if not segments:
        return
    tmp = pygame.Surface(target.get_size(), pygame.SRCALPHA)
    for start, end in segments:
        pygame.draw.line(tmp, color, start, end, width)
    target.blit(tmp, (0, 0))


def draw_alpha_circle(
    target: pygame.Surface,
    color: Tuple[int, ...],
    centre: Tuple[int, int],
    radius: int,
) -> None:
    """Draw a semi-transparent circle."""
    if radius < 1:
        return
    size = radius * 2
    tmp = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(tmp, color, (radius, radius), radius)
    target.blit(tmp, (centre[0] - radius, centre[1] - radius))


# ── Text helper ──────────────────────────────────────────────────────────────

def format_reading(reading: Optional[float]) -> str:
    """Sensor reading for display; ``None`` shows as a dash."""
    return "  --  " if reading is None else f"{reading:6.1f}"


class ViewHelpers:
    """Mixin with font loading and small static utilities."""

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        for name in ("consolas", "menlo", "dejavusansmono"):
            path = pygame.font.match_font(name, bold=bold)
            if path:
                return pygame.font.Font(path, size)
        return pygame.font.Font(None, size + 4)

    @staticmethod
    def _to_int(point: Tuple[float, float]) -> Tuple[int, int]:
        return int(round(point[0])), int(round(point[1]))
