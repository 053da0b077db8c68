#!/usr/bin/env python3
"""
sim/control.py
==============
Closed-loop autonomous controller and manual-override arbitration.

The controller is a pure function of the current speed and the latest
:class:`~sim.sensors.LateralReading`:

* speed: bang-bang toward ``target_speed`` with the target used as a
  saturation setpoint so the vehicle never overshoots it;
* lane keeping: proportional steering on ``left − right`` distance,
  clamped to the steering limit.
"""

from __future__ import annotations

import logging
from typing import Optional

from sim.control_targets import ControlTargets, clamp_steering
from sim.kinematics import Actuation, ManualInput, Steer, Throttle
from sim.sensors import LateralReading, Reading

log = logging.getLogger("control")


class ControlLoop:
    """Autonomous speed and lane-keeping controller.

    Parameters
    ----------
    params : ControlTargets or None
        Tunable constants; uses defaults when *None*.
    """

    def __init__(self, params: Optional[ControlTargets] = None) -> None:
        self.params = params or ControlTargets()

    def throttle(self, speed: float) -> Throttle:
        """Accelerate below the target, brake above it, idle exactly on it."""
        speed_error = self.params.target_speed - speed
        if speed_error > 0:
            return Throttle.ACCELERATE
        if speed_error < 0:
            return Throttle.BRAKE
        return Throttle.IDLE

    def _side(self, reading: Reading) -> float:
        if reading is None:
            return self.params.missing_reading_distance
        return reading

    def lane_offset(self, lateral: LateralReading) -> float:
        """``left − right``; a missing side counts as very far away."""
        return self._side(lateral.left) - self._side(lateral.right)

    def steering_target(self, lateral: LateralReading) -> float:
        return clamp_steering(self.lane_offset(lateral) * self.params.lane_gain, self.params)

    def command(self, speed: float, lateral: LateralReading) -> Actuation:
        """Actuation for the next kinematics update."""
        cmd = Actuation(
            throttle=self.throttle(speed),
            steer=Steer.CENTER,
            steering_target=self.steering_target(lateral),
            speed_setpoint=self.params.target_speed,
        )
        log.debug(
            "speed=%.3f throttle=%s steer_target=%.2f",
            speed, cmd.throttle.value, cmd.steering_target,
        )
        return cmd


def resolve_actuation(autonomous_cmd: Optional[Actuation],
                      manual: Optional[ManualInput],
                      autonomous: bool = True) -> Actuation:
    """Combine the controller output with manual override for one tick.

    Manual throttle keys replace the autonomous throttle (and its
    setpoint); manual steering keys replace the autonomous steering
    target.  Channels with no manual input keep the autonomous command.
    With autonomy disabled, the manual input alone drives the vehicle.
    """
    manual = manual or ManualInput()
    if not autonomous or autonomous_cmd is None:
        return manual.to_actuation()
    if not manual.active:
        return autonomous_cmd

    throttle = autonomous_cmd.throttle
    setpoint = autonomous_cmd.speed_setpoint
    if manual.throttle_active:
        throttle = manual.throttle()
        setpoint = None

    steer = autonomous_cmd.steer
    steering_target = autonomous_cmd.steering_target
    if manual.steering_active:
        steer = manual.steer()
        steering_target = None

    return Actuation(
        throttle=throttle,
        steer=steer,
        steering_target=steering_target,
        speed_setpoint=setpoint,
    )
