#!/usr/bin/env python3
"""
sim/sensors.py
==============
Synthetic sensors: a ray-marching lidar and a pair of lateral
proximity sensors that stand in for a stereo camera.

Both sensors report absence of detection as ``None``.  Consumers must
handle that case explicitly; there is no numeric "infinity" sentinel.

The lidar is O(rays × steps × segments) per scan.  The segment tests
for one ray are evaluated as a single numpy broadcast, and each ray
reads only the road and writes only its own slot of the scan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from sim.control_targets import ControlTargets
from sim.geometry import heading_vector, segments_intersect_many
from sim.kinematics import Vehicle
from sim.road import RoadModel

log = logging.getLogger("sensors")

Reading = Optional[float]


@dataclass(frozen=True)
class LidarScan:
    """One full sweep of range readings.

    Attributes
    ----------
    readings : tuple of (float or None)
        Distance per ray, ray *i* at relative bearing ``i · spacing_deg``.
        ``None`` means the ray hit nothing.
    spacing_deg : float
        Angular spacing between consecutive rays.
    """

    readings: Tuple[Reading, ...]
    spacing_deg: float = 10.0

    def __len__(self) -> int:
        return len(self.readings)

    def __getitem__(self, index: int) -> Reading:
        return self.readings[index]

    @property
    def hit_count(self) -> int:
        return sum(1 for r in self.readings if r is not None)

    def nearest(self) -> Reading:
        """Shortest hit distance, or ``None`` when no ray hit."""
        hits = [r for r in self.readings if r is not None]
        return min(hits) if hits else None

    def bearings(self, heading: float) -> Iterator[Tuple[float, float]]:
        """Yield ``(absolute_bearing_deg, distance)`` for rays that hit."""
        for i, reading in enumerate(self.readings):
            if reading is not None:
                yield heading + i * self.spacing_deg, reading

    def endpoints(self, vehicle: Vehicle) -> Iterator[Tuple[float, float]]:
        """Yield world-space ray tips for rays that hit; misses are skipped."""
        for bearing, reading in self.bearings(vehicle.heading):
            dx, dy = heading_vector(bearing)
            yield vehicle.x + dx * reading, vehicle.y + dy * reading


@dataclass(frozen=True)
class LateralReading:
    """Nearest road-point distance seen by the left and right mounts."""

    left: Reading = None
    right: Reading = None


# ── Lidar ─────────────────────────────────────────────────────────────────────

def cast_ray(x: float, y: float, bearing_deg: float,
             road: RoadModel, params: ControlTargets) -> Reading:
    """March one ray from *(x, y)* and return the first hit distance.

    At each step the tip is checked against the world bounds first, then
    the segment from the origin to the tip is tested against every road
    segment.  The returned distance is the accumulated march length, so
    it overshoots the true distance by less than one step.
    """
    n_steps = params.lidar_steps
    starts, ends = road.segment_arrays()
    if n_steps <= 0:
        return None

    dx, dy = heading_vector(bearing_deg)
    travelled = params.lidar_step * np.arange(1, n_steps + 1, dtype=float)
    tips_x = x + dx * travelled
    tips_y = y + dy * travelled

    outside = (
        (tips_x < 0.0) | (tips_x > params.world_width)
        | (tips_y < 0.0) | (tips_y > params.world_height)
    )
    first_outside = int(np.argmax(outside)) if outside.any() else n_steps

    if len(starts) == 0 or first_outside == 0:
        return None

    tips = np.column_stack((tips_x[:first_outside], tips_y[:first_outside]))
    hit_steps = segments_intersect_many((x, y), tips, starts, ends).any(axis=1)
    if not hit_steps.any():
        return None
    return float(travelled[int(np.argmax(hit_steps))])


def scan_lidar(vehicle: Vehicle, road: RoadModel,
               params: ControlTargets) -> LidarScan:
    """Cast ``params.ray_count`` rays around the vehicle heading."""
    readings = tuple(
        cast_ray(
            vehicle.x,
            vehicle.y,
            ray_bearing(i, vehicle.heading, params),
            road,
            params,
        )
        for i in range(params.ray_count)
    )
    scan = LidarScan(readings=readings, spacing_deg=params.ray_spacing_deg)
    log.debug("lidar hits=%d nearest=%s", scan.hit_count, scan.nearest())
    return scan


# ── Lateral proximity ─────────────────────────────────────────────────────────

def _nearest_distance(points: np.ndarray, sx: float, sy: float) -> Reading:
    if len(points) == 0:
        return None
    return float(np.min(np.hypot(points[:, 0] - sx, points[:, 1] - sy)))


def read_lateral(vehicle: Vehicle, road: RoadModel,
                 params: ControlTargets) -> LateralReading:
    """Nearest road point on each side of the vehicle.

    The mounts sit at ``x ∓ lateral_offset`` along world X and do not
    rotate with the heading.  The left mount only considers points
    strictly left of the vehicle centre; the right mount only points
    strictly to its right.
    """
    pts = road.as_array()
    xs = pts[:, 0]
    (lx, ly), (rx, ry) = lateral_mounts(vehicle, params)
    left = _nearest_distance(pts[xs < vehicle.x], lx, ly)
    right = _nearest_distance(pts[xs > vehicle.x], rx, ry)
    return LateralReading(left=left, right=right)


def lateral_mounts(vehicle: Vehicle,
                   params: ControlTargets) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """World positions of the left and right sensor mounts."""
    offset = params.lateral_offset
    return (vehicle.x - offset, vehicle.y), (vehicle.x + offset, vehicle.y)


def sensor_frame(vehicle: Vehicle, road: RoadModel,
                 params: ControlTargets) -> Tuple[LidarScan, LateralReading]:
    """Recompute both sensors for the current pose."""
    return scan_lidar(vehicle, road, params), read_lateral(vehicle, road, params)


def ray_bearing(index: int, heading: float, params: ControlTargets) -> float:
    """Absolute bearing of ray *index*, in degrees."""
    return heading + index * params.ray_spacing_deg

