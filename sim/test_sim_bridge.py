#!/usr/bin/env python3
"""
Tests for the SimBridge scheduler API.

The background thread is never started; ``_tick`` is called directly so
the tests stay deterministic.
"""

from __future__ import annotations

import unittest

from sim.control_targets import ControlTargets
from sim.kinematics import ManualInput
from sim.sim_bridge import SimBridge

FAST = ControlTargets(ray_count=4)


class SimBridgeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bridge = SimBridge(tick_rate_hz=30.0, random_seed=3, params=FAST)

    def test_initial_snapshot(self) -> None:
        state = self.bridge.get_state()
        self.assertEqual(self.bridge.get_tick(), 0)
        self.assertEqual(state.vehicle.speed, 0.0)
        self.assertEqual(len(state.lidar), 4)
        self.assertTrue(self.bridge.is_autonomous())
        self.assertIs(self.bridge.params, FAST)
        self.assertGreater(len(self.bridge.get_road()), 0)

    def test_tick_publishes_new_state(self) -> None:
        before = self.bridge.get_state()
        self.bridge._tick()
        self.bridge._tick()
        self.assertEqual(self.bridge.get_tick(), 2)
        self.assertIsNot(self.bridge.get_state(), before)
        self.assertAlmostEqual(self.bridge.get_state().vehicle.speed, 0.2)

    def test_manual_input_applies_in_manual_mode(self) -> None:
        self.bridge.set_autonomous(False)
        self.assertFalse(self.bridge.is_autonomous())
        self.bridge.set_manual_input(ManualInput(accelerate=True, steer_left=True))
        self.bridge._tick()
        vehicle = self.bridge.get_state().vehicle
        self.assertAlmostEqual(vehicle.speed, 0.1)
        self.assertEqual(vehicle.steering_angle, -2.0)

    def test_manual_brake_overrides_autonomous_throttle(self) -> None:
        for _ in range(5):
            self.bridge._tick()
        speed = self.bridge.get_state().vehicle.speed
        self.bridge.set_manual_input(ManualInput(brake=True))
        self.bridge._tick()
        self.assertAlmostEqual(self.bridge.get_state().vehicle.speed, speed - 0.2)

    def test_reset_restores_initial_world(self) -> None:
        start = self.bridge.get_state()
        road = self.bridge.get_road()
        self.bridge.set_manual_input(ManualInput(accelerate=True))
        for _ in range(5):
            self.bridge._tick()
        self.bridge.reset()
        self.assertEqual(self.bridge.get_tick(), 0)
        self.assertEqual(self.bridge.get_state().vehicle, start.vehicle)
        self.assertEqual(self.bridge.get_road(), road)

        # Stale manual input is dropped on reset.
        self.bridge.set_autonomous(False)
        self.bridge._tick()
        self.assertEqual(self.bridge.get_state().vehicle.speed, 0.0)

    def test_non_positive_tick_rate_is_rejected(self) -> None:
        for rate in (0.0, -5.0):
            with self.assertRaises(ValueError):
                SimBridge(tick_rate_hz=rate, params=FAST)

    def test_stop_without_start_is_harmless(self) -> None:
        self.bridge.stop()
        self.assertEqual(self.bridge.get_tick(), 0)


if __name__ == "__main__":
    unittest.main()
