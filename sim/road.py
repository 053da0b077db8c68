#!/usr/bin/env python3
"""
sim/road.py
===========
Procedurally generated road polyline.

A :class:`RoadModel` is an ordered, immutable sequence of
:class:`RoadPoint` values; consecutive points form the segments the
lidar raycasts against.  The procedural generator lays points along a
sine wave and perturbs each one with uniform jitter drawn from an
injectable :class:`random.Random`.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

import numpy as np

log = logging.getLogger("road")


class RoadPoint(NamedTuple):
    """One vertex of the road polyline (world units)."""
    x: float
    y: float


@dataclass(frozen=True)
class RoadShape:
    """Parameters of the procedural base curve."""

    step: float = 10.0
    """Horizontal spacing between consecutive points."""

    amplitude: float = 100.0
    """Peak vertical excursion of the sine wave."""

    frequency: float = 0.01
    """Angular frequency ``k`` in ``sin(k·x)`` (radians per unit)."""

    jitter: float = 5.0
    """Half-width of the uniform per-point vertical jitter."""

    baseline: Optional[float] = None
    """Vertical centre of the wave; half the world height when *None*."""


class RoadModel:
    """Ordered, read-only road polyline.

    Parameters
    ----------
    points : iterable of (x, y)
        Polyline vertices in drawing order.  May be empty.
    """

    __slots__ = ("_points", "_array")

    def __init__(self, points: Iterable[Sequence[float]] = ()) -> None:
        self._points: Tuple[RoadPoint, ...] = tuple(
            RoadPoint(float(p[0]), float(p[1])) for p in points
        )
        arr = np.array(self._points, dtype=float).reshape(-1, 2)
        arr.flags.writeable = False
        self._array = arr

    @classmethod
    def procedural(
        cls,
        width: float,
        height: Optional[float] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        shape: RoadShape = RoadShape(),
    ) -> "RoadModel":
        """Generate a winding road spanning twice the visible *width*.

        ``y = baseline + amplitude·sin(frequency·x) + U(-jitter, jitter)``
        for ``x = 0, step, 2·step, …`` while ``x < 2·width``.

        Parameters
        ----------
        width : float
            Visible world width.
        height : float or None
            World height; its half is the default baseline.
        seed : int or None
            Seed for a private jitter source (ignored when *rng* is given).
        rng : random.Random or None
            Explicit jitter source.
        shape : RoadShape
            Base-curve parameters.
        """
        if rng is None:
            rng = random.Random(seed)
        if shape.baseline is not None:
            baseline = shape.baseline
        elif height is not None:
            baseline = height / 2.0
        else:
            baseline = 0.0

        count = int(math.ceil(2.0 * width / shape.step))
        points = []
        for i in range(count):
            x = i * shape.step
            y = (
                baseline
                + shape.amplitude * math.sin(shape.frequency * x)
                + rng.uniform(-shape.jitter, shape.jitter)
            )
            points.append((x, y))

        log.info("Generated road with %d points across %.0f units", count, 2.0 * width)
        return cls(points)

    # ── read-only access ──────────────────────────────────────────────────

    @property
    def points(self) -> Tuple[RoadPoint, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[RoadPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> RoadPoint:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoadModel):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"RoadModel({len(self._points)} points)"

    def segments(self) -> Iterator[Tuple[RoadPoint, RoadPoint]]:
        """Yield consecutive ``(point[i], point[i + 1])`` pairs."""
        for i in range(len(self._points) - 1):
            yield self._points[i], self._points[i + 1]

    def as_array(self) -> np.ndarray:
        """Read-only ``(N, 2)`` float array of the points."""
        return self._array

    def segment_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Start and end point arrays, each ``(N - 1, 2)``."""
        return self._array[:-1], self._array[1:]
