import math

import pytest

from circuitgen.geometry import Point, distance
from circuitgen.paths import (
    Path,
    PathKind,
    build_path_menu,
    diagonalify,
    make_resistor,
    make_squiggles,
    manhattanize,
    pick_path,
    synthesize_path,
    zigzagify,
)
from circuitgen.rng import RNG

SEGMENTS = [
    (Point(10, 20), Point(110, 60)),
    (Point(110, 60), Point(10, 20)),
    (Point(50, 50), Point(60, 150)),
    (Point(60, 150), Point(50, 50)),
    (Point(0, 0), Point(30, 30)),
    (Point(5, 5), Point(85, 5)),
]


@pytest.mark.parametrize("kind", list(PathKind))
@pytest.mark.parametrize("segment", SEGMENTS)
def test_every_shape_preserves_endpoints_and_chains(kind, segment):
    path = synthesize_path(kind, segment, RNG(99))

    assert path.kind is kind
    assert path.start == segment[0]
    assert path.end == segment[1]
    for (_, end), (start, _) in zip(path.segments, path.segments[1:]):
        assert end == start


def test_manhattan_corners():
    p1, p2 = Point(0, 0), Point(10, 5)

    assert manhattanize((p1, p2), vertical=False) == [(p1, Point(10, 0)), (Point(10, 0), p2)]
    assert manhattanize((p1, p2), vertical=True) == [(p1, Point(0, 5)), (Point(0, 5), p2)]


def test_zigzag_horizontal_dominant_steps_on_shared_y():
    p1, p2 = Point(0, 0), Point(100, 40)

    legs = zigzagify((p1, p2), RNG(7))

    assert len(legs) == 3
    m1, m2 = legs[0][1], legs[1][1]
    assert m1.x == p1.x and m2.x == p2.x
    assert m1.y == m2.y
    assert 0 <= m1.y <= 40


def test_zigzag_vertical_dominant_steps_on_shared_x():
    p1, p2 = Point(0, 0), Point(20, 90)

    legs = zigzagify((p1, p2), RNG(7))

    m1, m2 = legs[0][1], legs[1][1]
    assert m1.y == p1.y and m2.y == p2.y
    assert m1.x == m2.x
    assert 0 <= m1.x <= 20


@pytest.mark.parametrize("segment", SEGMENTS)
def test_diagonal_first_leg_is_45_degrees(segment):
    (start, middle), (_, end) = diagonalify(segment)

    assert abs(middle.x - start.x) == pytest.approx(abs(middle.y - start.y))
    assert middle.x == end.x or middle.y == end.y


def test_menu_covers_every_family_and_consumes_one_draw():
    rng = RNG(11)
    reference = RNG(11)

    menu = build_path_menu((Point(0, 0), Point(100, 30)), rng)
    reference.random()

    assert list(menu) == list(PathKind)
    assert all(isinstance(path, Path) for path in menu.values())
    assert rng.state == reference.state


def test_pick_path_with_nothing_accepted_returns_none_after_fixed_draws():
    rng = RNG(12)
    reference = RNG(12)
    weights = {kind: 0.0 for kind in PathKind}

    assert pick_path((Point(0, 0), Point(50, 10)), [], rng, weights) is None
    for _ in range(1 + len(weights)):
        reference.random()
    assert rng.state == reference.state


def test_pick_path_with_free_canvas_returns_a_path():
    weights = {kind: 1.0 for kind in PathKind}
    segment = (Point(0, 0), Point(50, 10))

    path = pick_path(segment, [], RNG(13), weights)

    assert path is not None
    assert path.start == segment[0] and path.end == segment[1]


def test_pick_path_rejects_crossing_candidates():
    segment = (Point(0, 0), Point(10, 10))
    blocker = (Point(0, 10), Point(10, 0))

    assert pick_path(segment, [blocker], RNG(14), {PathKind.LINE: 1.0}) is None

    path = pick_path(segment, [blocker], RNG(14), {PathKind.LINE: 1.0, PathKind.MANHATTAN_HORIZONTAL: 1.0})
    assert path is not None
    assert path.kind is PathKind.MANHATTAN_HORIZONTAL


def test_squiggles_alternate_around_the_segment():
    p1, p2 = Point(0, 0), Point(20, 0)

    points = make_squiggles(p1, p2)

    assert points[0] == p1
    assert points[-1] == p2
    assert len(points) == 4 * math.ceil(20 / 5) + 1
    assert points[1].y == pytest.approx(3.0)
    assert points[3].y == pytest.approx(-3.0)
    assert points[2].y == pytest.approx(0.0)


def test_squiggles_zero_length():
    p = Point(4, 4)

    assert make_squiggles(p, p) == [p, p]


def test_resistor_keeps_leads_and_consumes_two_draws():
    rng = RNG(15)
    reference = RNG(15)
    p1, p2 = Point(0, 0), Point(0, 100)

    points = make_resistor((p1, p2), rng)
    reference.random()
    reference.random()

    assert points[0] == p1
    assert points[-1] == p2
    assert 10 <= distance(p1, points[1]) <= 40
    assert rng.state == reference.state
