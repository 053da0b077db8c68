#!/usr/bin/env python3
"""
Tests for the autonomous controller and manual-override arbitration.
"""

from __future__ import annotations

import unittest

from sim.control import ControlLoop, resolve_actuation
from sim.control_targets import ControlTargets
from sim.kinematics import Actuation, ManualInput, Steer, Throttle, Vehicle
from sim.road import RoadModel
from sim.sensors import LateralReading, read_lateral


class SpeedControlTests(unittest.TestCase):
    def setUp(self) -> None:
        self.loop = ControlLoop(ControlTargets(target_speed=3.0))

    def test_below_target_accelerates(self) -> None:
        self.assertEqual(self.loop.throttle(0.0), Throttle.ACCELERATE)

    def test_above_target_brakes(self) -> None:
        self.assertEqual(self.loop.throttle(4.0), Throttle.BRAKE)

    def test_exactly_on_target_idles(self) -> None:
        self.assertEqual(self.loop.throttle(3.0), Throttle.IDLE)

    def test_command_carries_setpoint_and_target(self) -> None:
        cmd = self.loop.command(1.0, LateralReading(left=10.0, right=10.0))
        self.assertEqual(cmd.throttle, Throttle.ACCELERATE)
        self.assertEqual(cmd.speed_setpoint, 3.0)
        self.assertEqual(cmd.steering_target, 0.0)


class LaneKeepingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.loop = ControlLoop()

    def test_symmetric_readings_steer_straight(self) -> None:
        self.assertEqual(self.loop.steering_target(LateralReading(50.0, 50.0)), 0.0)

    def test_offset_scaled_by_gain(self) -> None:
        self.assertAlmostEqual(self.loop.steering_target(LateralReading(60.0, 40.0)), 2.0)
        self.assertAlmostEqual(self.loop.steering_target(LateralReading(40.0, 60.0)), -2.0)

    def test_target_saturates(self) -> None:
        self.assertEqual(self.loop.steering_target(LateralReading(1000.0, 0.0)), 30.0)
        self.assertEqual(self.loop.steering_target(LateralReading(0.0, 1000.0)), -30.0)

    def test_missing_side_dominates(self) -> None:
        self.assertEqual(self.loop.steering_target(LateralReading(None, 50.0)), 30.0)
        self.assertEqual(self.loop.steering_target(LateralReading(50.0, None)), -30.0)

    def test_both_missing_steers_straight(self) -> None:
        self.assertEqual(self.loop.lane_offset(LateralReading(None, None)), 0.0)
        self.assertEqual(self.loop.steering_target(LateralReading(None, None)), 0.0)

    def test_centred_on_straight_road(self) -> None:
        params = ControlTargets()
        road = RoadModel([(float(x), 300.0) for x in range(0, 810, 10)])
        vehicle = Vehicle(x=405.0, y=320.0)
        lateral = read_lateral(vehicle, road, params)
        self.assertAlmostEqual(lateral.left, lateral.right, places=9)
        self.assertAlmostEqual(self.loop.steering_target(lateral), 0.0, places=9)


class ResolveActuationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.auto = Actuation(
            throttle=Throttle.BRAKE,
            steer=Steer.CENTER,
            steering_target=12.0,
            speed_setpoint=3.0,
        )

    def test_no_manual_input_keeps_autonomous(self) -> None:
        self.assertEqual(resolve_actuation(self.auto, None), self.auto)
        self.assertEqual(resolve_actuation(self.auto, ManualInput()), self.auto)

    def test_manual_throttle_overrides_only_throttle(self) -> None:
        out = resolve_actuation(self.auto, ManualInput(accelerate=True))
        self.assertEqual(out.throttle, Throttle.ACCELERATE)
        self.assertIsNone(out.speed_setpoint)
        self.assertEqual(out.steering_target, 12.0)

    def test_manual_steering_overrides_only_steering(self) -> None:
        out = resolve_actuation(self.auto, ManualInput(steer_left=True))
        self.assertEqual(out.steer, Steer.LEFT)
        self.assertIsNone(out.steering_target)
        self.assertEqual(out.throttle, Throttle.BRAKE)
        self.assertEqual(out.speed_setpoint, 3.0)

    def test_manual_mode_ignores_controller(self) -> None:
        out = resolve_actuation(self.auto, ManualInput(), autonomous=False)
        self.assertEqual(out, Actuation())
        out = resolve_actuation(None, ManualInput(brake=True, steer_right=True), autonomous=False)
        self.assertEqual(out.throttle, Throttle.BRAKE)
        self.assertEqual(out.steer, Steer.RIGHT)


if __name__ == "__main__":
    unittest.main()
