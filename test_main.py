#!/usr/bin/env python3
"""
Tests for the entry point's environment parsing and headless run.
"""

import os
import unittest
from unittest import mock

import main


class EnvParsingTests(unittest.TestCase):
    def test_missing_and_empty_use_default(self):
        with mock.patch.dict(os.environ, {"ROADSIM_X": ""}, clear=False):
            self.assertEqual(main._env_float("ROADSIM_X", 30.0), 30.0)
            self.assertEqual(main._env_int("ROADSIM_MISSING", 5), 5)
            self.assertFalse(main._env_flag("ROADSIM_X", False))

    def test_values_are_parsed(self):
        env = {"ROADSIM_RATE": "12.5", "ROADSIM_SEED": "42", "ROADSIM_HEADLESS": "yes"}
        with mock.patch.dict(os.environ, env, clear=False):
            self.assertEqual(main._env_float("ROADSIM_RATE", 30.0), 12.5)
            self.assertEqual(main._env_int("ROADSIM_SEED", None), 42)
            self.assertTrue(main._env_flag("ROADSIM_HEADLESS", False))

    def test_bad_numbers_fall_back(self):
        with mock.patch.dict(os.environ, {"ROADSIM_SEED": "abc"}, clear=False):
            with self.assertLogs("main", level="WARNING"):
                self.assertIsNone(main._env_int("ROADSIM_SEED", None))


class HeadlessRunTests(unittest.TestCase):
    def test_headless_run_advances_requested_ticks(self):
        sim = main.run_headless(20, seed=1)
        self.assertEqual(sim.tick_count, 20)
        self.assertGreater(sim.odometer, 0.0)
        self.assertLessEqual(sim.vehicle.speed, sim.params.target_speed)


if __name__ == "__main__":
    unittest.main()
