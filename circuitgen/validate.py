"""Runtime checks of generated scenes: point spacing and crossing-free segments."""

from itertools import combinations
from typing import List, Sequence, Tuple

import numpy as np

from .config import SceneOptions
from .geometry import Point, Segment, segments_intersect
from .sampler import pairwise_distances
from .scene import Scene


class ValidationError(Exception):
    pass


def find_crossings(segments: Sequence[Segment]) -> List[Tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, of segments that properly cross.

    Each later segment is tested against the earlier one, the same way a new
    path is tested against already placed segments.
    """

    return [
        (i, j)
        for (i, earlier), (j, later) in combinations(enumerate(segments), 2)
        if segments_intersect(later, earlier)
    ]


def check_points(points: Sequence[Point], options: SceneOptions) -> None:
    if not points:
        return
    coords = np.asarray(points, dtype=float)
    low = options.margin
    outside = (
        (coords[:, 0] < low)
        | (coords[:, 0] > options.width - low)
        | (coords[:, 1] < low)
        | (coords[:, 1] > options.height - low)
    )
    if outside.any():
        idx = int(np.flatnonzero(outside)[0])
        raise ValidationError(f"point {idx} {points[idx]} lies outside the margin box")

    dists = pairwise_distances(points)
    np.fill_diagonal(dists, np.inf)
    if dists.min() < options.poisson_radius:
        i, j = np.unravel_index(int(np.argmin(dists)), dists.shape)
        raise ValidationError(
            f"points {int(i)} and {int(j)} are {float(dists[i, j]):.3f} apart, "
            f"closer than radius {options.poisson_radius}"
        )


def check_scene(scene: Scene) -> None:
    check_points(scene.points, scene.options)
    crossings = find_crossings(scene.segments)
    if crossings:
        i, j = crossings[0]
        raise ValidationError(
            f"{len(crossings)} crossing segment pair(s), first: {scene.segments[i]} x {scene.segments[j]}"
        )
    for connection in scene.connections:
        path = connection.path
        if path.start not in scene.points or path.end not in scene.points:
            raise ValidationError(f"{path.kind.value} path does not end on sampled points")
