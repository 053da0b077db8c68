#!/usr/bin/env python3
"""
Tests for the procedural road model.
"""

from __future__ import annotations

import math
import random
import unittest

from sim.road import RoadModel, RoadPoint, RoadShape


class RoadModelTests(unittest.TestCase):
    def test_same_seed_is_bit_identical(self) -> None:
        a = RoadModel.procedural(800, 600, seed=42)
        b = RoadModel.procedural(800, 600, seed=42)
        self.assertEqual(a.points, b.points)
        self.assertEqual(a, b)

    def test_different_seed_changes_jitter(self) -> None:
        a = RoadModel.procedural(800, 600, seed=1)
        b = RoadModel.procedural(800, 600, seed=2)
        self.assertNotEqual(a.points, b.points)

    def test_injected_rng_matches_seed(self) -> None:
        a = RoadModel.procedural(800, 600, rng=random.Random(5))
        b = RoadModel.procedural(800, 600, seed=5)
        self.assertEqual(a.points, b.points)

    def test_spans_twice_the_width_at_fixed_step(self) -> None:
        road = RoadModel.procedural(800, 600, seed=0)
        self.assertEqual(len(road), 160)
        self.assertEqual(road[0].x, 0.0)
        self.assertEqual(road[-1].x, 1590.0)
        xs = [p.x for p in road]
        self.assertEqual(xs, sorted(xs))

    def test_points_stay_inside_wave_envelope(self) -> None:
        shape = RoadShape()
        road = RoadModel.procedural(800, 600, seed=3, shape=shape)
        limit = shape.amplitude + shape.jitter
        for p in road:
            self.assertLessEqual(abs(p.y - 300.0), limit)

    def test_zero_jitter_follows_sine_exactly(self) -> None:
        shape = RoadShape(jitter=0.0)
        road = RoadModel.procedural(400, 600, seed=9, shape=shape)
        for p in road:
            expected = 300.0 + shape.amplitude * math.sin(shape.frequency * p.x)
            self.assertAlmostEqual(p.y, expected, places=9)

    def test_explicit_baseline_overrides_height(self) -> None:
        shape = RoadShape(jitter=0.0, amplitude=0.0, baseline=120.0)
        road = RoadModel.procedural(100, 600, shape=shape)
        self.assertTrue(all(p.y == 120.0 for p in road))

    def test_road_is_read_only(self) -> None:
        road = RoadModel([(0, 0), (10, 5)])
        self.assertIsInstance(road.points, tuple)
        self.assertIsInstance(road[0], RoadPoint)
        arr = road.as_array()
        with self.assertRaises(ValueError):
            arr[0, 0] = 99.0
        self.assertFalse(hasattr(road, "append"))
        with self.assertRaises(AttributeError):
            road.extra = 1

    def test_segments_pair_consecutive_points(self) -> None:
        road = RoadModel([(0, 0), (10, 0), (20, 5)])
        segs = list(road.segments())
        self.assertEqual(segs, [
            (RoadPoint(0.0, 0.0), RoadPoint(10.0, 0.0)),
            (RoadPoint(10.0, 0.0), RoadPoint(20.0, 5.0)),
        ])
        starts, ends = road.segment_arrays()
        self.assertEqual(starts.shape, (2, 2))
        self.assertEqual(ends.tolist(), [[10.0, 0.0], [20.0, 5.0]])

    def test_empty_road(self) -> None:
        road = RoadModel()
        self.assertEqual(len(road), 0)
        self.assertEqual(list(road.segments()), [])
        self.assertEqual(road.as_array().shape, (0, 2))


if __name__ == "__main__":
    unittest.main()
