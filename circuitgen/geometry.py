"""Planar primitives shared by the sampler, the path synthesizers and the renderers."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence, Tuple


class Point(NamedTuple):
    x: float
    y: float


Segment = Tuple[Point, Point]


def _vec2(a: Point, b: Point) -> Tuple[float, float]:
    return b.x - a.x, b.y - a.y


def _cross2(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def interpolate(p1: Point, p2: Point, t: float) -> Point:
    return Point(p1.x + (p2.x - p1.x) * t, p1.y + (p2.y - p1.y) * t)


def segments_intersect(s1: Segment, s2: Segment) -> bool:
    """Return ``True`` only for a proper interior crossing.

    Shared endpoints, collinear overlap and degenerate segments report
    ``False`` so that paths may meet at their nodes.
    """

    p1, p2 = s1
    p3, p4 = s2
    a = _vec2(p1, p2)
    b = (p3.x - p4.x, p3.y - p4.y)
    c = _vec2(p1, p3)

    det = _cross2(a, b)
    if det == 0:
        return False
    t1 = _cross2(c, b) / det
    t2 = _cross2(a, c) / det
    return 0 < t1 < 1 and 0 < t2 < 1


def path_intersects(path: Iterable[Segment], placed: Sequence[Segment]) -> bool:
    """Return ``True`` if any segment of ``path`` properly crosses a placed segment."""

    for segment in path:
        for other in placed:
            if segments_intersect(segment, other):
                return True
    return False


__all__ = [
    "Point",
    "Segment",
    "distance",
    "interpolate",
    "path_intersects",
    "segments_intersect",
]
