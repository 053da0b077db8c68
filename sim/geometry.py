#!/usr/bin/env python3
"""
sim/geometry.py
===============
Low-level geometry helpers used by :mod:`sim.sensors` and
:mod:`sim.kinematics`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.

Segment intersection uses the determinant form of the line-line
intersection.  When the determinant is exactly zero the segments are
reported as *not* intersecting, including collinear segments that
overlap.  Sensors rely on this simplification, so it must not be
replaced by an overlap test.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


def segments_intersect(p1: Sequence[float], p2: Sequence[float],
                       p3: Sequence[float], p4: Sequence[float]) -> bool:
    """True when segment *p1–p2* crosses segment *p3–p4*.

    Parameters
    ----------
    p1, p2 : (x, y)
        End points of the first segment.
    p3, p4 : (x, y)
        End points of the second segment.

    Returns
    -------
    bool
        ``True`` if both parametric coordinates ``t`` and ``u`` fall in
        ``[0, 1]``.  Parallel or collinear segments return ``False``.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if den == 0:
        return False

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    return 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0


def segments_intersect_many(p1, p2, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Vectorised :func:`segments_intersect` against many segments.

    Parameters
    ----------
    p1, p2 : (x, y) or ndarray, shape (M, 2)
        End points of the probing segment(s).  Passing arrays tests *M*
        probing segments at once.
    starts, ends : ndarray, shape (N, 2)
        Start and end points of the segments to test against.

    Returns
    -------
    ndarray of bool, shape (N,) or (M, N)
        Element ``[m, i]`` is ``segments_intersect(p1[m], p2[m],
        starts[i], ends[i])``.
    """
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    x1, y1 = p1[..., 0][..., None], p1[..., 1][..., None]
    x2, y2 = p2[..., 0][..., None], p2[..., 1][..., None]
    x3, y3 = starts[:, 0], starts[:, 1]
    x4, y4 = ends[:, 0], ends[:, 1]

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    t_num = (x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)
    u_num = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3))

    nonzero = den != 0
    safe_den = np.where(nonzero, den, 1.0)
    t = t_num / safe_den
    u = u_num / safe_den
    return nonzero & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def wrap_coordinate(value: float, limit: float) -> float:
    """Toroidal wrap of one coordinate onto ``[0, limit]``.

    Values inside the closed interval are returned unchanged; anything
    beyond either edge re-enters from the opposite edge.
    """
    if value > limit or value < 0.0:
        return value % limit
    return value


def heading_vector(heading_deg: float) -> Point:
    """Unit vector for a heading in degrees (0 = +X, CCW toward +Y)."""
    rad = math.radians(heading_deg)
    return math.cos(rad), math.sin(rad)
