"""Constant scene knobs and named presets."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from typing import Dict, Tuple


@dataclass
class SceneOptions:
    """Non-random parameters of a generation pass."""

    width: float = 700.0
    height: float = 400.0
    point_count_range: Tuple[int, int] = (30, 60)
    poisson_radius: float = 50.0
    margin: float = 30.0
    proximity: float = 150.0

    stroke_width: float = 1.5
    dash_probability: float = 0.2
    dash_patterns: Tuple[Tuple[float, ...], ...] = ((10.0, 5.0), (5.0, 5.0))

    node_stroke_width: float = 1.5
    dot_stroke_width: float = 2.0
    dot_sizes: Tuple[float, ...] = (3.0, 5.0, 10.0)
    rect_sizes: Tuple[float, ...] = (3.0, 5.0, 10.0)
    triangle_sizes: Tuple[float, ...] = (10.0, 15.0)
    label_size: Tuple[float, float] = (25.0, 21.0)
    label_corner_radius: float = 5.0

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if self.margin < 0 or 2 * self.margin >= min(self.width, self.height):
            raise ValueError(f"Margin {self.margin} leaves no room on a {self.width}x{self.height} canvas")
        low, high = self.point_count_range
        if low < 0 or high <= low:
            raise ValueError(f"point_count_range must satisfy 0 <= low < high, got {self.point_count_range}")
        if self.poisson_radius <= 0:
            raise ValueError("poisson_radius must be positive")
        if self.proximity <= 0:
            raise ValueError("proximity must be positive")
        for name in ("dash_patterns", "dot_sizes", "rect_sizes", "triangle_sizes"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")


PRESETS: Dict[str, SceneOptions] = {
    "default": SceneOptions(),
    "large": SceneOptions(width=1080.0, height=720.0, point_count_range=(30, 100)),
}

_SCENE_OPTIONS = SceneOptions()


def get_scene_options() -> SceneOptions:
    return copy.deepcopy(_SCENE_OPTIONS)


def set_scene_options(options: SceneOptions) -> None:
    global _SCENE_OPTIONS
    options.validate()
    _SCENE_OPTIONS = copy.deepcopy(options)


def preset_options(name: str, **overrides: object) -> SceneOptions:
    try:
        base = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset {name!r}; expected one of {sorted(PRESETS)}") from None
    return replace(copy.deepcopy(base), **overrides)
