"""
ui/draw_road.py
===============
Renders the road polyline and the sensor overlays: lidar rays that hit
and the links from each lateral mount to its reading.

All methods are *pure renderers*: they read data and draw to a surface.
Lidar rays with no hit are never drawn; there is no endpoint to draw.
"""

from __future__ import annotations

from typing import List, Tuple

import pygame

from sim.control_targets import ControlTargets
from sim.road import RoadModel
from sim.sensors import lateral_mounts
from sim.world import SimulationState

from .helpers import draw_alpha_circle, draw_alpha_lines


class RoadRenderer:
    """Mixin that draws the road surface and sensor overlays."""

    def _road_screen_points(self, road: RoadModel) -> List[Tuple[int, int]]:
        return [
            self._to_int(self.camera.world_to_screen(p.x, p.y)) for p in road
        ]

    def draw_road(self, surface: pygame.Surface, road: RoadModel) -> None:
        pts = self._road_screen_points(road)
        if len(pts) < 2:
            return
        pygame.draw.lines(surface, self.ROAD_EDGE_COLOR, False, pts, self.ROAD_WIDTH_PX + 4)
        pygame.draw.lines(surface, self.ROAD_COLOR, False, pts, self.ROAD_WIDTH_PX)
        pygame.draw.lines(surface, self.ROAD_CENTRE_COLOR, False, pts, 1)

    def draw_lidar(self, surface: pygame.Surface, state: SimulationState) -> None:
        vehicle = state.vehicle
        origin = self.camera.world_to_screen(vehicle.x, vehicle.y)
        ends = [self.camera.world_to_screen(*tip) for tip in state.lidar.endpoints(vehicle)]
        draw_alpha_lines(
            surface,
            (*self.LIDAR_COLOR, self.LIDAR_ALPHA),
            [(origin, end) for end in ends],
        )
        for end in ends:
            pygame.draw.circle(surface, self.LIDAR_HIT_COLOR, self._to_int(end), 2)

    def draw_lateral(
        self,
        surface: pygame.Surface,
        state: SimulationState,
        params: ControlTargets,
    ) -> None:
        left, right = lateral_mounts(state.vehicle, params)
        for mount, reading, color in (
            (left, state.lateral.left, self.LEFT_SENSOR_COLOR),
            (right, state.lateral.right, self.RIGHT_SENSOR_COLOR),
        ):
            centre = self._to_int(self.camera.world_to_screen(*mount))
            pygame.draw.circle(surface, color, centre, self.SENSOR_DOT_RADIUS_PX)
            if reading is not None:
                radius = int(reading * self.camera.scale_x)
                draw_alpha_circle(surface, (*color, 30), centre, radius)
