"""Drawing surfaces: the draw-call contract plus SVG and TikZ back ends."""

from .base import (
    ArcTo,
    ClosePath,
    DrawCommand,
    DrawingSurface,
    LineTo,
    MoveTo,
    PathCommand,
    RecordingSurface,
    Style,
    polyline_commands,
)
from .svg import SvgSurface, path_data
from .tikz import TikzSurface

__all__ = [
    "ArcTo",
    "ClosePath",
    "DrawCommand",
    "DrawingSurface",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "RecordingSurface",
    "Style",
    "SvgSurface",
    "TikzSurface",
    "path_data",
    "polyline_commands",
]
