#!/usr/bin/env python3
"""
sim/control_targets.py
======================
Tunable control, sensor and world parameters for the road simulation.
Every constant lives in the frozen :class:`ControlTargets` dataclass so
that experiments can swap parameter sets without touching code.

Also provides two stateless helpers:

* :func:`clamp`: bound a value to ``[low, high]``.
* :func:`clamp_steering`: bound a steering angle to the policy clamp.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ControlTargets:
    """Immutable bag of every tunable simulation parameter.

    Rates are expressed per reference tick; a ``dt`` of ``1.0`` advances
    the simulation by exactly one tick.

    Groups: longitudinal control, steering, lane keeping, lidar,
    lateral sensors, world bounds.
    """

    # ── Longitudinal control ──────────────────────────────────────────────
    target_speed: float = 3.0
    """Cruise speed the autonomous controller tracks (units per tick)."""

    max_speed: float = 5.0
    """Hard upper bound on vehicle speed."""

    accel_rate: float = 0.1
    """Speed gained per tick while accelerating."""

    brake_rate: float = 0.2
    """Speed lost per tick while braking."""

    passive_decel: float = 0.05
    """Speed lost per tick when neither accelerating nor braking."""

    # ── Steering ──────────────────────────────────────────────────────────
    steer_rate: float = 2.0
    """Degrees per tick added while a steering key is held."""

    steer_return_rate: float = 1.0
    """Degrees per tick the wheel relaxes toward centre when released."""

    max_steering_angle: float = 30.0
    """Symmetric steering clamp in degrees."""

    # ── Lane keeping ──────────────────────────────────────────────────────
    lane_gain: float = 0.1
    """Proportional gain from lateral offset to steering target."""

    missing_reading_distance: float = 1e6
    """Distance assumed for a lateral sensor that sees no road point."""

    # ── Lidar ─────────────────────────────────────────────────────────────
    lidar_max_range: float = 200.0
    """Farthest distance a ray marches before reporting no hit."""

    lidar_step: float = 5.0
    """Ray march increment; hit distances are quantised to this."""

    ray_count: int = 36
    """Rays per scan."""

    ray_spacing_deg: float = 10.0
    """Angular spacing between consecutive rays (relative bearing)."""

    # ── Lateral (camera proxy) sensors ────────────────────────────────────
    lateral_offset: float = 20.0
    """World-X offset of the left/right sensor mounts from the vehicle."""

    # ── World bounds ──────────────────────────────────────────────────────
    world_width: float = 800.0
    """Toroidal world width."""

    world_height: float = 600.0
    """Toroidal world height."""

    def __post_init__(self) -> None:
        if self.max_speed <= 0.0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")
        if self.lidar_step <= 0.0:
            raise ValueError(f"lidar_step must be positive, got {self.lidar_step}")
        if self.ray_count <= 0:
            raise ValueError(f"ray_count must be positive, got {self.ray_count}")
        if self.world_width <= 0.0 or self.world_height <= 0.0:
            raise ValueError(
                f"world bounds must be positive, got "
                f"{self.world_width}x{self.world_height}"
            )

    @property
    def lidar_steps(self) -> int:
        """Number of march increments that fit inside the lidar range."""
        return int(self.lidar_max_range // self.lidar_step)


def clamp(value: float, low: float, high: float) -> float:
    """Bound *value* to ``[low, high]``."""
    return max(low, min(high, value))


def clamp_steering(angle: float, params: ControlTargets) -> float:
    """Bound a steering angle to ``±params.max_steering_angle``."""
    return clamp(angle, -params.max_steering_angle, params.max_steering_angle)
