"""Point placement and candidate connection enumeration."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .geometry import Point, Segment, distance
from .logging_utils import apply_debug_logging
from .rng import RNG

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


def poisson_disk_samples(
    rng: RNG,
    count: int,
    width: float,
    height: float,
    radius: float,
    margin: float,
) -> List[Point]:
    """Place up to ``count`` points at least ``radius`` apart inside the margin box.

    Each slot gets ``MAX_ATTEMPTS`` candidates (x drawn before y). A slot whose
    candidates all land too close to earlier points is skipped, so fewer than
    ``count`` points may come back. Points are returned in emission order.
    """

    points: List[Point] = []
    span_x = width - 2 * margin
    span_y = height - 2 * margin
    for _ in range(count):
        for _attempt in range(MAX_ATTEMPTS):
            x = margin + rng.random() * span_x
            y = margin + rng.random() * span_y
            candidate = Point(x, y)
            if all(distance(candidate, point) >= radius for point in points):
                points.append(candidate)
                break
    if len(points) < count:
        logger.debug("Sampler placed %d of %d requested point(s)", len(points), count)
    return points


def pairwise_distances(points: Sequence[Point]) -> np.ndarray:
    """Return the symmetric ``(n, n)`` Euclidean distance matrix of ``points``."""

    coords = np.asarray(points, dtype=float).reshape(-1, 2)
    deltas = coords[:, None, :] - coords[None, :, :]
    return np.hypot(deltas[..., 0], deltas[..., 1])


def candidate_pairs(points: Sequence[Point], threshold: float) -> List[Segment]:
    """Return every ``(points[i], points[j])`` with ``i < j`` closer than ``threshold``.

    Pairs come back in row-major index order; callers shuffle them afterwards.
    """

    if len(points) < 2:
        return []
    dists = pairwise_distances(points)
    rows, cols = np.triu_indices(len(points), k=1)
    mask = dists[rows, cols] < threshold
    pairs: List[Tuple[Point, Point]] = [
        (points[int(i)], points[int(j)]) for i, j in zip(rows[mask], cols[mask])
    ]
    return pairs


apply_debug_logging(globals(), logger=logger, skip={"pairwise_distances"})
