#!/usr/bin/env python3

from .types import Camera, ColorRGB, ColorRGBA, KeyState
from .constants import ViewConstants
from .helpers import ViewHelpers
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer
from .pygame_view import PygameRoadView, manual_input_from_keys, run_pygame_view

__all__ = [
    "Camera",
    "ColorRGB",
    "ColorRGBA",
    "KeyState",
    "ViewConstants",
    "ViewHelpers",
    "RoadRenderer",
    "VehicleRenderer",
    "HudRenderer",
    "PygameRoadView",
    "manual_input_from_keys",
    "run_pygame_view",
]
