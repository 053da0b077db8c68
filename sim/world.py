#!/usr/bin/env python3
"""
sim/world.py
============
Single-vehicle road world.

One tick is ``control → kinematics → sensing`` executed to completion.
:func:`tick` and :func:`step` are pure: they take the current state and
return a new one.  The :class:`Simulation` class owns the road, the
parameter set, the current :class:`SimulationState` and the tick
counter, and is what the scheduler (:mod:`sim.sim_bridge`) drives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from sim.control import ControlLoop, resolve_actuation
from sim.control_targets import ControlTargets
from sim.kinematics import Actuation, ManualInput, Vehicle, distance_travelled, step_vehicle
from sim.road import RoadModel, RoadShape
from sim.sensors import LateralReading, LidarScan, sensor_frame

log = logging.getLogger("world")


@dataclass(frozen=True)
class SimulationState:
    """Everything the renderer needs after one tick.

    Attributes
    ----------
    vehicle : Vehicle
        Post-tick pose and motion.
    lidar : LidarScan
        Scan computed at the post-tick pose.
    lateral : LateralReading
        Left/right proximity at the post-tick pose.
    """

    vehicle: Vehicle
    lidar: LidarScan
    lateral: LateralReading

    def as_dict(self) -> Dict[str, Any]:
        return {
            **self.vehicle.as_dict(),
            "lidar": list(self.lidar.readings),
            "lateral_left": self.lateral.left,
            "lateral_right": self.lateral.right,
        }


def tick(
    vehicle: Vehicle,
    road: RoadModel,
    controls: Union[Actuation, ManualInput],
    dt: float = 1.0,
    params: Optional[ControlTargets] = None,
) -> Tuple[Vehicle, LidarScan, LateralReading]:
    """Apply *controls* for one tick and re-sense at the new pose.

    *controls* is either a resolved :class:`Actuation` (the controller's
    output) or raw :class:`ManualInput` flags, which are resolved here.
    """
    if isinstance(controls, ManualInput):
        controls = controls.to_actuation()
    params = params or ControlTargets()
    moved = step_vehicle(vehicle, controls, params, dt)
    lidar, lateral = sensor_frame(moved, road, params)
    return moved, lidar, lateral


def initial_state(vehicle: Vehicle, road: RoadModel,
                  params: ControlTargets) -> SimulationState:
    """Sense at *vehicle* without moving it."""
    lidar, lateral = sensor_frame(vehicle, road, params)
    return SimulationState(vehicle=vehicle, lidar=lidar, lateral=lateral)


def step(
    state: SimulationState,
    road: RoadModel,
    control_loop: ControlLoop,
    manual: Optional[ManualInput] = None,
    autonomous: bool = True,
    dt: float = 1.0,
) -> SimulationState:
    """Run ``control → kinematics → sensing`` once.

    The controller reads the speed and lateral reading carried over from
    the previous tick; manual input, when active, overrides it per
    channel (see :func:`~sim.control.resolve_actuation`).
    """
    auto_cmd = control_loop.command(state.vehicle.speed, state.lateral) if autonomous else None
    controls = resolve_actuation(auto_cmd, manual, autonomous=autonomous)
    vehicle, lidar, lateral = tick(state.vehicle, road, controls, dt, control_loop.params)
    return SimulationState(vehicle=vehicle, lidar=lidar, lateral=lateral)


class Simulation:
    """Owns the road, parameters, current state and tick counter.

    Parameters
    ----------
    params : ControlTargets or None
        Tunable constants; uses defaults when *None*.
    seed : int or None
        Jitter seed for the procedural road.
    road : RoadModel or None
        Explicit road; generated from the world size when *None*.
    start : Vehicle or None
        Initial vehicle; placed on the left of the world at mid-height
        when *None*.
    autonomous : bool
        Whether the control loop drives the vehicle.
    road_shape : RoadShape
        Procedural curve parameters, used when *road* is None.
    """

    def __init__(
        self,
        params: Optional[ControlTargets] = None,
        seed: Optional[int] = None,
        road: Optional[RoadModel] = None,
        start: Optional[Vehicle] = None,
        autonomous: bool = True,
        road_shape: RoadShape = RoadShape(),
    ) -> None:
        self.params = params or ControlTargets()
        self.seed = seed
        self.road_shape = road_shape
        self._explicit_road = road
        self._start = start
        self.autonomous = autonomous
        self.control_loop = ControlLoop(self.params)
        self.road: RoadModel = RoadModel()
        self.state: SimulationState
        self.tick_count: int = 0
        self.odometer: float = 0.0
        self._init_world()

    # ── initialisation / reset ────────────────────────────────────────────

    def _default_start(self) -> Vehicle:
        return Vehicle(
            x=self.params.world_width * 0.1,
            y=self.params.world_height * 0.5,
        )

    def _init_world(self) -> None:
        if self._explicit_road is not None:
            self.road = self._explicit_road
        else:
            self.road = RoadModel.procedural(
                self.params.world_width,
                self.params.world_height,
                seed=self.seed,
                shape=self.road_shape,
            )
        vehicle = self._start or self._default_start()
        self.state = initial_state(vehicle, self.road, self.params)
        self.tick_count = 0
        self.odometer = 0.0
        log.info("World initialised: %r, vehicle at (%.1f, %.1f)",
                 self.road, vehicle.x, vehicle.y)

    def reset(self) -> None:
        """Rebuild the road and vehicle so the run can be replayed."""
        self._init_world()

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def vehicle(self) -> Vehicle:
        return self.state.vehicle

    # ── tick ──────────────────────────────────────────────────────────────

    def advance(self, manual: Optional[ManualInput] = None,
                dt: float = 1.0) -> SimulationState:
        """Advance one tick and return the new state."""
        before = self.state.vehicle
        self.state = step(
            self.state,
            self.road,
            self.control_loop,
            manual=manual,
            autonomous=self.autonomous,
            dt=dt,
        )
        self.tick_count += 1
        after = self.state.vehicle
        # Wrap-around jumps are not counted as travel.
        if after.speed > 0.0:
            self.odometer += min(distance_travelled(before, after), after.speed * dt)

        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "=== TICK %d === pos=(%.2f, %.2f) hdg=%.2f v=%.3f steer=%.2f "
                "left=%s right=%s hits=%d auto=%s",
                self.tick_count, after.x, after.y, after.heading, after.speed,
                after.steering_angle, self.state.lateral.left,
                self.state.lateral.right, self.state.lidar.hit_count,
                self.autonomous,
            )
        return self.state
