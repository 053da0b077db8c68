#!/usr/bin/env python3
"""
Pygame window for the road simulation.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ColorRGBA, Camera, KeyState
    ├── constants.py       – ViewConstants mixin (colours, sizes)
    ├── helpers.py         – ViewHelpers mixin  (fonts, alpha drawing)
    ├── draw_road.py       – RoadRenderer mixin (road, lidar, lateral sensors)
    ├── draw_vehicles.py   – VehicleRenderer mixin (vehicle sprite)
    ├── hud.py             – HudRenderer mixin  (HUD, legend, splash)
    └── pygame_view.py     – PygameRoadView (this file – event loop)

The view only reads simulation state.  Its single path back into the
simulation is the manual override sent through ``set_manual_input``.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Optional

import pygame

from sim.kinematics import ManualInput
from sim.world import SimulationState

from .constants import ViewConstants
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .helpers import ViewHelpers
from .hud import HudRenderer
from .types import Camera, KeyState

log = logging.getLogger("ui")

MIN_WINDOW = (400, 300)


def manual_input_from_keys(keys: KeyState) -> ManualInput:
    """Map held arrow keys onto the four override flags."""
    return ManualInput(
        accelerate=keys.up,
        brake=keys.down,
        steer_left=keys.left,
        steer_right=keys.right,
    )


def _held_arrows() -> KeyState:
    pressed = pygame.key.get_pressed()
    return KeyState(
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
    )


class PygameRoadView(
    ViewConstants,
    ViewHelpers,
    RoadRenderer,
    VehicleRenderer,
    HudRenderer,
):
    """Top-down view of the road, the vehicle and its sensors.

    Parameters
    ----------
    bus : SimBridge-like
        Source of snapshots; see :mod:`sim.sim_bridge` for the API.
    width, height : int
        Initial window size in pixels.  The world is stretched to fit.
    fps : int
        Frame-rate cap.  Independent of the simulation tick rate.
    """

    def __init__(self, bus: Any, width: int = 800, height: int = 600, fps: int = 60):
        self.bus = bus
        self.params = bus.params
        self.fps = fps
        self.width = width
        self.height = height
        self.camera = self._make_camera()

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.time_seconds = 0.0
        self.running = False
        self.paused = False
        self.show_splash = True
        self.show_lidar = True
        self.show_legend = True
        self._last_keys = KeyState()
        self._flash_until = 0.0

    def _make_camera(self) -> Camera:
        return Camera(self.width, self.height, self.params.world_width, self.params.world_height)

    # ── Window ────────────────────────────────────────────────────────────

    def _open_window(self) -> None:
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)

    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(MIN_WINDOW[0], new_w)
        self.height = max(MIN_WINDOW[1], new_h)
        self.camera = self._make_camera()
        self._open_window()

    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        name = datetime.now().strftime("road_%Y%m%d_%H%M%S.png")
        path = os.path.join(self.SCREENSHOT_DIR, name)
        pygame.image.save(self.screen, path)
        self._flash_until = self.time_seconds + 0.35
        log.info("Screenshot saved to %s", path)

    # ── Input ─────────────────────────────────────────────────────────────

    def _sync_manual_input(self) -> None:
        """Forward held arrows to the bridge when they change."""
        keys = _held_arrows()
        if keys != self._last_keys:
            self.bus.set_manual_input(manual_input_from_keys(keys))
            self._last_keys = keys

    def _toggle_pause(self) -> None:
        self.paused = not self.paused
        self.bus.set_paused(self.paused)

    def _reset(self) -> None:
        self._last_keys = KeyState()
        self.bus.reset()
        self.paused = False
        self.bus.set_paused(False)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self._toggle_pause()
        elif key == pygame.K_a:
            self.bus.set_autonomous(not self.bus.is_autonomous())
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_l:
            self.show_lidar = not self.show_lidar
        elif key == pygame.K_h:
            self.show_legend = not self.show_legend
        elif key == pygame.K_F12:
            self._take_screenshot()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self._handle_resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            # First key press only dismisses the splash
            if self.show_splash:
                self.show_splash = False
            else:
                self._handle_key(event.key)

    # ── Frame ─────────────────────────────────────────────────────────────

    def _render_frame(self, state: SimulationState) -> None:
        autonomous = self.bus.is_autonomous()
        self.screen.fill(self.BG_COLOR)

        self.draw_road(self.screen, self.bus.get_road())
        if self.show_lidar:
            self.draw_lidar(self.screen, state)
        self.draw_lateral(self.screen, state, self.params)
        self.draw_vehicle(self.screen, state.vehicle, autonomous)

        self.draw_hud(self.screen, state, self.bus.get_tick(), autonomous)
        if self.show_legend:
            self._draw_legend(self.screen)
        if self.paused:
            self._draw_pause_banner(self.screen)
        if self.time_seconds < self._flash_until:
            flash = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            flash.fill((255, 255, 255, 40))
            self.screen.blit(flash, (0, 0))

    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("WINDING ROAD SIM")
        self._open_window()
        self.clock = pygame.time.Clock()
        self.font_title = self._load_font(28, bold=True)
        self.font_small = self._load_font(13)
        self.font_tiny = self._load_font(11)

        self.running = True
        while self.running:
            self.time_seconds += self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                self._handle_event(event)

            if self.show_splash:
                self.screen.fill(self.BG_COLOR)
                self._draw_splash(self.screen, self.time_seconds)
            else:
                if not self.paused:
                    self._sync_manual_input()
                self._render_frame(self.bus.get_state())
            pygame.display.flip()

        pygame.quit()


def run_pygame_view(
    bus: Any, width: int = 800, height: int = 600, fps: int = 60
) -> None:
    """Open the window and block until it is closed."""
    PygameRoadView(bus=bus, width=width, height=height, fps=fps).run()
