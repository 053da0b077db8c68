#!/usr/bin/env python3
"""
sim/kinematics.py
=================
Vehicle state and the per-tick kinematic update.

Actuation is modelled as two tagged commands, :class:`Throttle` and
:class:`Steer`, so that contradictory combinations such as
"accelerate and brake" cannot be expressed.  Raw keyboard state arrives
as a :class:`ManualInput` and is resolved into an :class:`Actuation`
with acceleration taking priority over braking.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from sim.control_targets import ControlTargets, clamp, clamp_steering
from sim.geometry import distance, heading_vector, wrap_coordinate


class Throttle(Enum):
    IDLE = "IDLE"
    ACCELERATE = "ACCELERATE"
    BRAKE = "BRAKE"


class Steer(Enum):
    CENTER = "CENTER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    HOLD = "HOLD"
    """Opposing inputs cancel; the wheel keeps its angle."""


@dataclass(frozen=True)
class Actuation:
    """Throttle/brake/steering decision applied for one tick.

    Attributes
    ----------
    throttle : Throttle
        Longitudinal command.
    steer : Steer
        Discrete steering command, used when *steering_target* is None.
    steering_target : float or None
        Absolute steering angle (degrees) set directly by the controller.
    speed_setpoint : float or None
        Speed that acceleration/braking must not cross this tick.
    """

    throttle: Throttle = Throttle.IDLE
    steer: Steer = Steer.CENTER
    steering_target: Optional[float] = None
    speed_setpoint: Optional[float] = None


IDLE = Actuation()


@dataclass(frozen=True)
class ManualInput:
    """Raw override flags from the input device."""

    accelerate: bool = False
    brake: bool = False
    steer_left: bool = False
    steer_right: bool = False

    @property
    def throttle_active(self) -> bool:
        return self.accelerate or self.brake

    @property
    def steering_active(self) -> bool:
        return self.steer_left or self.steer_right

    @property
    def active(self) -> bool:
        return self.throttle_active or self.steering_active

    def throttle(self) -> Throttle:
        if self.accelerate:
            return Throttle.ACCELERATE
        if self.brake:
            return Throttle.BRAKE
        return Throttle.IDLE

    def steer(self) -> Steer:
        if self.steer_left and self.steer_right:
            return Steer.HOLD
        if self.steer_left:
            return Steer.LEFT
        if self.steer_right:
            return Steer.RIGHT
        return Steer.CENTER

    def to_actuation(self) -> Actuation:
        return Actuation(throttle=self.throttle(), steer=self.steer())


@dataclass(frozen=True)
class Vehicle:
    """Pose and motion state of the simulated vehicle.

    Attributes
    ----------
    x, y : float
        World position.
    heading : float
        Degrees, accumulated without wrapping (0 = +X, CCW toward +Y).
    speed : float
        World units per tick, in ``[0, max_speed]``.
    steering_angle : float
        Degrees, in ``[-max_steering_angle, max_steering_angle]``.
    """

    x: float
    y: float
    heading: float = 0.0
    speed: float = 0.0
    steering_angle: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        """Flat dict for logging and the renderer."""
        return {
            "x": self.x,
            "y": self.y,
            "heading": self.heading,
            "speed": self.speed,
            "steering_angle": self.steering_angle,
        }


# ── scalar sub-updates ────────────────────────────────────────────────────────

def update_speed(speed: float, actuation: Actuation,
                 params: ControlTargets, dt: float = 1.0) -> float:
    """Apply the throttle command to *speed*, bounded to ``[0, max_speed]``."""
    setpoint = actuation.speed_setpoint
    if actuation.throttle is Throttle.ACCELERATE:
        ceiling = params.max_speed
        if setpoint is not None and setpoint >= speed:
            ceiling = min(ceiling, setpoint)
        new_speed = min(speed + params.accel_rate * dt, ceiling)
    elif actuation.throttle is Throttle.BRAKE:
        floor = 0.0
        if setpoint is not None and setpoint <= speed:
            floor = max(floor, setpoint)
        new_speed = max(speed - params.brake_rate * dt, floor)
    else:
        new_speed = max(speed - params.passive_decel * dt, 0.0)
    return clamp(new_speed, 0.0, params.max_speed)


def update_steering(angle: float, actuation: Actuation,
                    params: ControlTargets, dt: float = 1.0) -> float:
    """Apply the steering command to *angle*, bounded to the clamp."""
    if actuation.steering_target is not None:
        return clamp_steering(actuation.steering_target, params)

    limit = params.max_steering_angle
    if actuation.steer is Steer.LEFT:
        return max(angle - params.steer_rate * dt, -limit)
    if actuation.steer is Steer.RIGHT:
        return min(angle + params.steer_rate * dt, limit)
    if actuation.steer is Steer.HOLD:
        return clamp_steering(angle, params)

    # Relax toward centre without crossing it.
    step = params.steer_return_rate * dt
    if angle > 0.0:
        return max(angle - step, 0.0)
    if angle < 0.0:
        return min(angle + step, 0.0)
    return 0.0


def step_vehicle(vehicle: Vehicle, actuation: Actuation,
                 params: ControlTargets, dt: float = 1.0) -> Vehicle:
    """Integrate one tick of vehicle motion.

    Speed and steering are updated first; heading then turns by the new
    steering angle scaled by the speed fraction, and the position
    advances along the new heading before wrapping around the world.
    """
    speed = update_speed(vehicle.speed, actuation, params, dt)
    angle = update_steering(vehicle.steering_angle, actuation, params, dt)

    heading = vehicle.heading
    if speed > 0.0:
        heading += angle * (speed / params.max_speed) * dt

    x, y = vehicle.x, vehicle.y
    if speed > 0.0:
        cos_h, sin_h = heading_vector(heading)
        x += speed * dt * cos_h
        y += speed * dt * sin_h

    return replace(
        vehicle,
        x=wrap_coordinate(x, params.world_width),
        y=wrap_coordinate(y, params.world_height),
        heading=heading,
        speed=speed,
        steering_angle=angle,
    )


def distance_travelled(before: Vehicle, after: Vehicle) -> float:
    """Straight-line distance between two poses, ignoring wrap-around."""
    return distance((before.x, before.y), (after.x, after.y))
