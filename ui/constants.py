#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (28, 70, 36)
    ROAD_COLOR: ColorRGB = (52, 52, 52)
    ROAD_EDGE_COLOR: ColorRGB = (90, 90, 90)
    ROAD_CENTRE_COLOR: ColorRGB = (235, 205, 80)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)
    VEHICLE_COLOR: ColorRGB = (86, 168, 255)
    LIDAR_COLOR: ColorRGB = (0, 255, 127)
    LIDAR_HIT_COLOR: ColorRGB = (255, 60, 60)
    LEFT_SENSOR_COLOR: ColorRGB = (246, 191, 90)
    RIGHT_SENSOR_COLOR: ColorRGB = (180, 120, 255)
    MANUAL_COLOR: ColorRGB = (255, 136, 0)
    AUTO_COLOR: ColorRGB = (0, 255, 127)

    LIDAR_ALPHA = 70
    ROAD_WIDTH_PX = 36
    VEHICLE_SIZE_PX: Tuple[int, int] = (26, 13)
    SENSOR_DOT_RADIUS_PX = 4

    LEGEND_ITEMS: Sequence[Tuple[str, ColorRGB]] = (
        ("LIDAR HIT", (255, 60, 60)),
        ("LEFT CAM", (246, 191, 90)),
        ("RIGHT CAM", (180, 120, 255)),
    )

    SCREENSHOT_DIR = "screenshots"
