"""Scene assembly: one seeded pass from parameters to emitted draw calls.

The RNG is consumed in a fixed order:

1. point count, connection density, node density, weight sharpness;
2. one acceptance probability per :class:`PathKind`;
3. one weight per :class:`NodeKind`, then one per :class:`CurveKind`;
4. point sampling, then the shuffle of candidate pairs;
5. per candidate pair: density draw, path selection, curve styling;
6. per point: node draw and decoration.

Changing that order changes the artwork produced for every existing seed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .config import SceneOptions, get_scene_options
from .geometry import Point, Segment
from .paths import Path, PathKind, make_resistor, pick_path
from .rng import RNG
from .sampler import candidate_pairs, poisson_disk_samples
from .seeds import parse_seed
from .surface.base import ArcTo, DrawingSurface, LineTo, MoveTo, PathCommand, Style, polyline_commands

logger = logging.getLogger(__name__)

LABEL_ALPHABETS = ("0123456789", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
TRIANGLE_OFFSETS = (0.0, math.pi)


class NodeKind(Enum):
    DOT = "dot"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    LABEL = "label"


class CurveKind(Enum):
    LINE = "line"
    ARC = "arc"
    SQUIGGLE = "squiggle"


@dataclass(frozen=True)
class SceneParams:
    point_count: int
    density: float
    dot_density: float
    power: float
    path_weights: Dict[PathKind, float]
    node_weights: Tuple[float, ...]
    curve_weights: Tuple[float, ...]


@dataclass(frozen=True)
class Connection:
    path: Path
    curve: CurveKind
    dash_pattern: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class Node:
    point: Point
    kind: NodeKind
    size: float
    label: Optional[str] = None


@dataclass
class Scene:
    seed: int
    options: SceneOptions
    params: SceneParams
    points: List[Point] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)
    nodes: List[Node] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)


def draw_scene_params(rng: RNG, options: SceneOptions) -> SceneParams:
    low, high = options.point_count_range
    point_count = rng.integer(low, high)
    density = rng.uniform(0.5, 1.0)
    dot_density = rng.random()

    power = rng.uniform(1, 5)
    path_weights = {kind: math.pow(rng.random(), power) for kind in PathKind}
    node_weights = tuple(math.pow(rng.uniform(0.1, 1.0), power) for _ in NodeKind)
    curve_weights = tuple(rng.uniform(0.1, 1.0) for _ in CurveKind)
    return SceneParams(
        point_count=point_count,
        density=density,
        dot_density=dot_density,
        power=power,
        path_weights=path_weights,
        node_weights=node_weights,
        curve_weights=curve_weights,
    )


def _curve_commands(curve: CurveKind, segment: Segment, rng: RNG) -> List[PathCommand]:
    p1, p2 = segment
    if curve is CurveKind.LINE:
        return [MoveTo(p1), LineTo(p2)]
    if curve is CurveKind.ARC:
        radii = (abs(p2.x - p1.x), abs(p2.y - p1.y))
        return [MoveTo(p1), ArcTo(radii, p2)]
    if curve is CurveKind.SQUIGGLE:
        return polyline_commands(make_resistor(segment, rng))
    raise ValueError(f"Unknown curve kind: {curve!r}")


def _connect(
    surface: DrawingSurface,
    rng: RNG,
    pair: Segment,
    scene: Scene,
) -> Optional[Connection]:
    options = scene.options
    path = pick_path(pair, scene.segments, rng, scene.params.path_weights)
    if path is None:
        logger.debug("No crossing-free path for %s -> %s", pair[0], pair[1])
        return None

    curve = rng.choose_weighted(list(CurveKind), scene.params.curve_weights)
    dash_pattern: Optional[Tuple[float, ...]] = None
    if curve is not CurveKind.SQUIGGLE and rng.random() < options.dash_probability:
        dash_pattern = rng.choose(options.dash_patterns)

    style = Style(
        fill_color="none",
        stroke_color="black",
        stroke_width=options.stroke_width,
        line_cap="round",
        dash_pattern=dash_pattern,
    )
    for segment in path.segments:
        surface.draw_path(_curve_commands(curve, segment, rng), style)
        scene.segments.append(segment)
    return Connection(path=path, curve=curve, dash_pattern=dash_pattern)


def _draw_dot(surface: DrawingSurface, rng: RNG, point: Point, options: SceneOptions) -> Node:
    size = rng.choose(options.dot_sizes)
    if rng.random() < 0.5:
        ring = Style(fill_color="white", stroke_color="black", stroke_width=options.dot_stroke_width)
        surface.draw_ellipse(point, (size / 2, size / 2), ring)
        if rng.random() < 0.5:
            inner = size - options.dot_stroke_width * 3
            # Smaller dots have no room for the inner fill; the draw is still consumed.
            if inner > 0:
                surface.draw_ellipse(point, (inner / 2, inner / 2), Style(fill_color="black"))
    else:
        surface.draw_ellipse(point, (size / 2, size / 2), Style(fill_color="black"))
    return Node(point=point, kind=NodeKind.DOT, size=size)


def _draw_rectangle(surface: DrawingSurface, rng: RNG, point: Point, options: SceneOptions) -> Node:
    size = rng.choose(options.rect_sizes)
    rotation = 45.0 if rng.random() < 0.5 else None
    style = Style(fill_color="white", stroke_color="black", stroke_width=options.node_stroke_width)
    surface.draw_rect(Point(point.x - size / 2, point.y - size / 2), (size, size), style, rotation)
    return Node(point=point, kind=NodeKind.RECTANGLE, size=size)


def _draw_triangle(surface: DrawingSurface, rng: RNG, point: Point, options: SceneOptions) -> Node:
    size = rng.choose(options.triangle_sizes)
    offset = rng.choose(TRIANGLE_OFFSETS)
    theta = 2 * math.pi / 3
    vertices = [
        Point(point.x + math.cos(offset + k * theta) * size, point.y + math.sin(offset + k * theta) * size)
        for k in range(3)
    ]
    style = Style(fill_color="white", stroke_color="black", stroke_width=options.node_stroke_width)
    surface.draw_path(polyline_commands(vertices, closed=True), style)
    return Node(point=point, kind=NodeKind.TRIANGLE, size=size)


def _draw_label(surface: DrawingSurface, rng: RNG, point: Point, options: SceneOptions) -> Node:
    width, height = options.label_size
    style = Style(fill_color="white", stroke_color="black", stroke_width=options.node_stroke_width)
    surface.draw_rect(
        Point(point.x - width / 2, point.y - height / 2),
        (width, height),
        style,
        corner_radius=options.label_corner_radius,
    )
    text = rng.choose(rng.choose(LABEL_ALPHABETS))
    surface.draw_text(text, Point(point.x, point.y + height * 0.05), Style(font_family="sans-serif"))
    return Node(point=point, kind=NodeKind.LABEL, size=width, label=text)


def _decorate(surface: DrawingSurface, rng: RNG, point: Point, kind: NodeKind, options: SceneOptions) -> Node:
    if kind is NodeKind.DOT:
        return _draw_dot(surface, rng, point, options)
    if kind is NodeKind.RECTANGLE:
        return _draw_rectangle(surface, rng, point, options)
    if kind is NodeKind.TRIANGLE:
        return _draw_triangle(surface, rng, point, options)
    if kind is NodeKind.LABEL:
        return _draw_label(surface, rng, point, options)
    raise ValueError(f"Unknown node kind: {kind!r}")


def generate(
    seed: int,
    surface: DrawingSurface,
    options: Optional[SceneOptions] = None,
) -> Scene:
    """Run one generation pass for ``seed``, emitting draw calls onto ``surface``."""

    options = options or get_scene_options()
    options.validate()

    rng = RNG(seed)
    params = draw_scene_params(rng, options)
    logger.debug("Scene parameters for seed %s: %s", seed, params)

    surface.begin_surface(options.width, options.height)
    scene = Scene(seed=seed, options=options, params=params)
    scene.points = poisson_disk_samples(
        rng,
        params.point_count,
        options.width,
        options.height,
        options.poisson_radius,
        options.margin,
    )

    pairs = candidate_pairs(scene.points, options.proximity)
    rng.shuffle(pairs)
    for pair in pairs:
        if rng.random() < params.density:
            connection = _connect(surface, rng, pair, scene)
            if connection is not None:
                scene.connections.append(connection)

    node_kinds = list(NodeKind)
    for point in scene.points:
        if rng.random() < params.dot_density:
            kind = rng.choose_weighted(node_kinds, params.node_weights)
            scene.nodes.append(_decorate(surface, rng, point, kind, options))

    logger.info(
        "Generated scene seed=%s: %d point(s), %d candidate pair(s), %d connection(s), %d node(s)",
        seed,
        len(scene.points),
        len(pairs),
        len(scene.connections),
        len(scene.nodes),
    )
    return scene


def regenerate(
    surface: DrawingSurface,
    seed: Union[str, int, None] = None,
    options: Optional[SceneOptions] = None,
) -> Scene:
    """Clear ``surface`` and run a fresh pass, synthesising a seed when none is given."""

    surface.clear()
    return generate(parse_seed(seed), surface, options)


__all__ = [
    "Connection",
    "CurveKind",
    "Node",
    "NodeKind",
    "Scene",
    "SceneParams",
    "draw_scene_params",
    "generate",
    "regenerate",
]
