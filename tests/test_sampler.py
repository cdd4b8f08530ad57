from itertools import combinations

import numpy as np

from circuitgen.geometry import Point, distance
from circuitgen.rng import RNG
from circuitgen.sampler import MAX_ATTEMPTS, candidate_pairs, pairwise_distances, poisson_disk_samples


def test_sampler_bounds_and_separation():
    rng = RNG(123456789012)

    points = poisson_disk_samples(rng, 45, 700, 400, 50, 30)

    assert 0 < len(points) <= 45
    for point in points:
        assert 30 <= point.x <= 670
        assert 30 <= point.y <= 370
    for a, b in combinations(points, 2):
        assert distance(a, b) >= 50


def test_sampler_is_reproducible():
    first = poisson_disk_samples(RNG(123456789012), 45, 700, 400, 50, 30)
    second = poisson_disk_samples(RNG(123456789012), 45, 700, 400, 50, 30)

    assert first == second


def test_exhausted_slots_are_skipped():
    rng = RNG(2024)
    reference = RNG(2024)

    points = poisson_disk_samples(rng, 5, 100, 100, 1000, 10)

    # Only the first slot can succeed; the other four burn every attempt.
    assert len(points) == 1
    for _ in range(2 + 4 * MAX_ATTEMPTS * 2):
        reference.random()
    assert rng.state == reference.state


def test_candidate_pairs_keep_index_order_and_threshold():
    points = [Point(0, 0), Point(100, 0), Point(0, 140), Point(400, 400)]

    pairs = candidate_pairs(points, 150)

    assert pairs == [
        (points[0], points[1]),
        (points[0], points[2]),
    ]


def test_candidate_pairs_threshold_is_strict():
    points = [Point(0, 0), Point(150, 0)]

    assert candidate_pairs(points, 150) == []
    assert candidate_pairs(points[:1], 150) == []


def test_pairwise_distances_matrix():
    dists = pairwise_distances([Point(0, 0), Point(3, 4), Point(6, 8)])

    assert dists.shape == (3, 3)
    assert np.allclose(dists, dists.T)
    assert np.allclose(np.diag(dists), 0.0)
    assert dists[0, 2] == 10.0
