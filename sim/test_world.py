#!/usr/bin/env python3
"""
Closed-loop tests for the tick function and the Simulation owner.
"""

from __future__ import annotations

import random
import unittest

from sim.control import ControlLoop
from sim.control_targets import ControlTargets
from sim.kinematics import Actuation, ManualInput, Vehicle
from sim.road import RoadModel
from sim.world import Simulation, SimulationState, initial_state, step, tick


def _straight_road(y: float = 300.0) -> RoadModel:
    return RoadModel([(float(x), y) for x in range(0, 810, 10)])


class TickTests(unittest.TestCase):
    def test_tick_returns_pose_and_fresh_sensors(self) -> None:
        vehicle, lidar, lateral = tick(
            Vehicle(x=405.0, y=250.0, heading=90.0),
            _straight_road(),
            Actuation(),
        )
        self.assertEqual(len(lidar), 36)
        self.assertEqual(lidar[0], 50.0)
        self.assertIsNotNone(lateral.left)
        self.assertIsNotNone(lateral.right)
        self.assertEqual(vehicle.speed, 0.0)

    def test_tick_accepts_raw_manual_input(self) -> None:
        vehicle, lidar, _ = tick(
            Vehicle(x=1.0, y=1.0), RoadModel(), ManualInput(accelerate=True, steer_left=True)
        )
        self.assertAlmostEqual(vehicle.speed, 0.1)
        self.assertEqual(vehicle.steering_angle, -2.0)
        self.assertEqual(lidar.hit_count, 0)

    def test_idle_at_rest_is_idempotent(self) -> None:
        road = _straight_road()
        v = Vehicle(x=123.0, y=210.0, heading=15.0)
        for _ in range(5):
            v, _, _ = tick(v, road, Actuation())
        self.assertEqual((v.x, v.y, v.heading, v.speed, v.steering_angle),
                         (123.0, 210.0, 15.0, 0.0, 0.0))

    def test_zero_target_speed_at_rest_does_not_move(self) -> None:
        params = ControlTargets(target_speed=0.0)
        sim = Simulation(params=params, road=_straight_road(), start=Vehicle(x=123.0, y=210.0))
        for _ in range(5):
            sim.advance()
        v = sim.vehicle
        self.assertEqual((v.x, v.y, v.heading, v.speed), (123.0, 210.0, 0.0, 0.0))


class ClosedLoopTests(unittest.TestCase):
    def test_speed_rises_monotonically_to_target_without_overshoot(self) -> None:
        params = ControlTargets(target_speed=3.0, accel_rate=0.1, max_speed=5.0)
        sim = Simulation(params=params, road=RoadModel(), start=Vehicle(x=100.0, y=300.0))
        speeds = [sim.advance().vehicle.speed for _ in range(120)]

        for s in speeds:
            self.assertLessEqual(s, 3.0)
        # Monotonic only up to the first tick at the target.  After that,
        # passive decel and re-acceleration alternate between 2.95 and 3.0.
        reached = speeds.index(3.0)
        self.assertLessEqual(reached, 30)
        rising = speeds[: reached + 1]
        for prev, cur in zip(rising, rising[1:]):
            self.assertGreaterEqual(cur, prev)
        for s in speeds[reached:]:
            self.assertGreaterEqual(s, 3.0 - params.passive_decel - 1e-9)

    def test_step_uses_previous_lateral_reading(self) -> None:
        params = ControlTargets()
        road = RoadModel([(100.0, 300.0), (200.0, 300.0)])
        loop = ControlLoop(params)
        state = initial_state(Vehicle(x=400.0, y=300.0), road, params)
        self.assertIsNone(state.lateral.right)

        nxt = step(state, road, loop)
        # Missing right reading saturates the steering target.
        self.assertEqual(nxt.vehicle.steering_angle, -30.0)
        self.assertIsInstance(nxt, SimulationState)

    def test_manual_override_in_manual_mode(self) -> None:
        sim = Simulation(road=_straight_road(), start=Vehicle(x=400.0, y=250.0),
                         autonomous=False)
        sim.advance(manual=ManualInput(accelerate=True, steer_right=True))
        self.assertAlmostEqual(sim.vehicle.speed, 0.1)
        self.assertEqual(sim.vehicle.steering_angle, 2.0)
        sim.advance()
        self.assertAlmostEqual(sim.vehicle.speed, 0.05)
        self.assertEqual(sim.vehicle.steering_angle, 1.0)

    def test_bounds_hold_over_mixed_run(self) -> None:
        params = ControlTargets(ray_count=4)
        sim = Simulation(params=params, seed=21)
        rng = random.Random(8)
        for i in range(300):
            manual = None
            if rng.random() < 0.3:
                manual = ManualInput(
                    accelerate=rng.random() < 0.5,
                    brake=rng.random() < 0.5,
                    steer_left=rng.random() < 0.5,
                    steer_right=rng.random() < 0.5,
                )
            sim.autonomous = i % 50 < 40
            state = sim.advance(manual=manual)
            v = state.vehicle
            self.assertGreaterEqual(v.speed, 0.0)
            self.assertLessEqual(v.speed, params.max_speed)
            self.assertGreaterEqual(v.steering_angle, -30.0)
            self.assertLessEqual(v.steering_angle, 30.0)
            for r in state.lidar.readings:
                self.assertTrue(r is None or 0.0 <= r <= params.lidar_max_range)


class SimulationLifecycleTests(unittest.TestCase):
    def test_reset_replays_same_world(self) -> None:
        params = ControlTargets(ray_count=4)
        sim = Simulation(params=params, seed=7)
        start = sim.vehicle
        first_road = sim.road
        for _ in range(10):
            sim.advance()
        self.assertEqual(sim.tick_count, 10)
        self.assertNotEqual(sim.vehicle, start)

        sim.reset()
        self.assertEqual(sim.tick_count, 0)
        self.assertEqual(sim.vehicle, start)
        self.assertEqual(sim.road, first_road)
        self.assertEqual(sim.road, Simulation(params=params, seed=7).road)
        self.assertEqual(sim.odometer, 0.0)

    def test_odometer_tracks_travel(self) -> None:
        sim = Simulation(params=ControlTargets(ray_count=1), road=RoadModel(),
                         start=Vehicle(x=100.0, y=300.0), autonomous=False)
        for _ in range(3):
            sim.advance(manual=ManualInput(accelerate=True))
        self.assertAlmostEqual(sim.odometer, 0.1 + 0.2 + 0.3)

    def test_state_dict_exposes_render_fields(self) -> None:
        sim = Simulation(params=ControlTargets(ray_count=2), road=_straight_road(),
                         start=Vehicle(x=400.0, y=250.0))
        d = sim.state.as_dict()
        for key in ("x", "y", "heading", "speed", "steering_angle",
                    "lidar", "lateral_left", "lateral_right"):
            self.assertIn(key, d)
        self.assertEqual(len(d["lidar"]), 2)


if __name__ == "__main__":
    unittest.main()
