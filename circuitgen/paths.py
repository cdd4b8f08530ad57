"""Path shape families and collision-avoiding path selection."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .geometry import Point, Segment, distance, interpolate, path_intersects
from .logging_utils import apply_debug_logging
from .rng import RNG

logger = logging.getLogger(__name__)

SQUIGGLE_SIZE = 5.0
SQUIGGLE_DEPTH = 3.0


class PathKind(Enum):
    """Shape families in the order their menu entries and acceptance draws are made."""

    LINE = "line"
    MANHATTAN_HORIZONTAL = "manhattan1"
    MANHATTAN_VERTICAL = "manhattan2"
    ZIGZAG = "zigzag"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class Path:
    kind: PathKind
    segments: Tuple[Segment, ...]

    @property
    def start(self) -> Point:
        return self.segments[0][0]

    @property
    def end(self) -> Point:
        return self.segments[-1][1]

    def points(self) -> List[Point]:
        return [self.segments[0][0]] + [segment[1] for segment in self.segments]


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def manhattanize(segment: Segment, vertical: bool) -> List[Segment]:
    """Insert one right-angle corner.

    With ``vertical`` false the corner sits at ``(p2.x, p1.y)`` (horizontal leg
    first); with ``vertical`` true it sits at ``(p1.x, p2.y)``.
    """

    p1, p2 = segment
    corner = Point(p1.x, p2.y) if vertical else Point(p2.x, p1.y)
    return [(p1, corner), (corner, p2)]


def zigzagify(segment: Segment, rng: RNG) -> List[Segment]:
    """Three-leg step across the dominant axis at a random crossing offset."""

    p1, p2 = segment
    dx = abs(p2.x - p1.x)
    dy = abs(p2.y - p1.y)
    if dx >= dy:
        middle_y = rng.uniform(p1.y, p2.y)
        m1 = Point(p1.x, middle_y)
        m2 = Point(p2.x, middle_y)
    else:
        middle_x = rng.uniform(p1.x, p2.x)
        m1 = Point(middle_x, p1.y)
        m2 = Point(middle_x, p2.y)
    return [(p1, m1), (m1, m2), (m2, p2)]


def diagonalify(segment: Segment) -> List[Segment]:
    """Replace the right angle with a 45 degree bevel followed by a straight leg."""

    p1, p2 = segment
    dx = abs(p2.x - p1.x)
    dy = abs(p2.y - p1.y)
    if dx >= dy:
        middle = Point(p1.x + dy * _sign(p2.x - p1.x), p2.y)
    else:
        middle = Point(p2.x, p1.y + dx * _sign(p2.y - p1.y))
    return [(p1, middle), (middle, p2)]


def synthesize_path(kind: PathKind, segment: Segment, rng: RNG) -> Path:
    if kind is PathKind.LINE:
        segments = [segment]
    elif kind is PathKind.MANHATTAN_HORIZONTAL:
        segments = manhattanize(segment, vertical=False)
    elif kind is PathKind.MANHATTAN_VERTICAL:
        segments = manhattanize(segment, vertical=True)
    elif kind is PathKind.ZIGZAG:
        segments = zigzagify(segment, rng)
    elif kind is PathKind.DIAGONAL:
        segments = diagonalify(segment)
    else:
        raise ValueError(f"Unknown path kind: {kind!r}")
    return Path(kind, tuple(segments))


def build_path_menu(segment: Segment, rng: RNG) -> Dict[PathKind, Path]:
    """One candidate per shape family, built in ``PathKind`` order."""

    return {kind: synthesize_path(kind, segment, rng) for kind in PathKind}


def pick_path(
    segment: Segment,
    placed: Sequence[Segment],
    rng: RNG,
    weights: Mapping[PathKind, float],
) -> Optional[Path]:
    """Choose a shape for ``segment`` that crosses none of the ``placed`` segments.

    Every family listed in ``weights`` gets one independent acceptance draw
    against its probability. Accepted candidates are shuffled and the first
    non-crossing one wins. Returns ``None`` when nothing qualifies; the caller
    drops the connection.
    """

    menu = build_path_menu(segment, rng)
    candidates: List[Path] = []
    for kind, probability in weights.items():
        if rng.random() < probability:
            candidates.append(menu[kind])
    rng.shuffle(candidates)

    for path in candidates:
        if not path_intersects(path.segments, placed):
            return path
    return None


def make_squiggles(p1: Point, p2: Point) -> List[Point]:
    """Zigzag polyline from ``p1`` to ``p2`` with alternating perpendicular peaks."""

    length = distance(p1, p2)
    if length == 0:
        return [p1, p2]
    steps = math.ceil(length / SQUIGGLE_SIZE)
    dx = (p2.x - p1.x) / steps
    dy = (p2.y - p1.y) / steps
    ox = -(p2.y - p1.y) / length * SQUIGGLE_DEPTH
    oy = (p2.x - p1.x) / length * SQUIGGLE_DEPTH

    points: List[Point] = []
    x, y = p1.x, p1.y
    for _ in range(steps):
        points.append(Point(x, y))
        x += dx / 4
        y += dy / 4
        points.append(Point(x + ox, y + oy))
        x += dx / 4
        y += dy / 4
        points.append(Point(x, y))
        x += dx / 4
        y += dy / 4
        points.append(Point(x - ox, y - oy))
        x += dx / 4
        y += dy / 4
    points.append(p2)
    return points


def make_resistor(segment: Segment, rng: RNG) -> List[Point]:
    """Stroke polyline for a resistor: straight leads around a squiggled middle span."""

    p1, p2 = segment
    squiggle_start = interpolate(p1, p2, rng.uniform(0.1, 0.4))
    squiggle_end = interpolate(p1, p2, rng.uniform(0.6, 0.9))
    return [p1] + make_squiggles(squiggle_start, squiggle_end) + [p2]


apply_debug_logging(globals(), logger=logger, skip={"make_squiggles", "synthesize_path"})


__all__ = [
    "Path",
    "PathKind",
    "build_path_menu",
    "diagonalify",
    "make_resistor",
    "make_squiggles",
    "manhattanize",
    "pick_path",
    "synthesize_path",
    "zigzagify",
]
