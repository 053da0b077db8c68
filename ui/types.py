"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class Camera:
    """Viewport mapping world coordinates to screen pixels.

    World and screen share orientation: +Y points down the window, so a
    heading of 90° drives toward the bottom edge.
    """
    screen_w: int
    screen_h: int
    world_w: float
    world_h: float

    @property
    def scale_x(self) -> float:
        return self.screen_w / self.world_w

    @property
    def scale_y(self) -> float:
        return self.screen_h / self.world_h

    def world_to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        return wx * self.scale_x, wy * self.scale_y

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        return sx / self.scale_x, sy / self.scale_y


@dataclass
class KeyState:
    """Held arrow keys sampled once per frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
