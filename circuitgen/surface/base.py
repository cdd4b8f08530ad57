"""Drawing-surface contract consumed by scene assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from ..geometry import Point


@dataclass(frozen=True)
class Style:
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = 1.0
    line_cap: Optional[str] = None
    dash_pattern: Optional[Tuple[float, ...]] = None
    rotation_degrees: Optional[float] = None
    font_family: Optional[str] = None


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc with SVG semantics: no rotation, small arc, counter-clockwise sweep."""

    radii: Tuple[float, float]
    point: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]


def polyline_commands(points: Sequence[Point], *, closed: bool = False) -> List[PathCommand]:
    """``M`` to the first point, ``L`` through the rest, optionally closed."""

    commands: List[PathCommand] = []
    for idx, point in enumerate(points):
        commands.append(MoveTo(point) if idx == 0 else LineTo(point))
    if closed and commands:
        commands.append(ClosePath())
    return commands


class DrawingSurface(Protocol):
    def begin_surface(self, width: float, height: float) -> None: ...

    def draw_path(self, commands: Sequence[PathCommand], style: Style) -> None: ...

    def draw_ellipse(self, center: Point, radii: Tuple[float, float], style: Style) -> None: ...

    def draw_rect(
        self,
        top_left: Point,
        size: Tuple[float, float],
        style: Style,
        rotation: Optional[float] = None,
        corner_radius: float = 0.0,
    ) -> None: ...

    def draw_text(self, content: str, position: Point, style: Style) -> None: ...

    def clear(self) -> None: ...


@dataclass(frozen=True)
class DrawCommand:
    kind: str
    args: Tuple[Any, ...]


@dataclass
class RecordingSurface:
    """Surface that keeps the ordered log of draw calls it receives.

    The text back ends subclass it and render the log on demand.
    """

    width: float = 0.0
    height: float = 0.0
    commands: List[DrawCommand] = field(default_factory=list)

    def begin_surface(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def draw_path(self, commands: Sequence[PathCommand], style: Style) -> None:
        self.commands.append(DrawCommand("path", (tuple(commands), style)))

    def draw_ellipse(self, center: Point, radii: Tuple[float, float], style: Style) -> None:
        self.commands.append(DrawCommand("ellipse", (center, tuple(radii), style)))

    def draw_rect(
        self,
        top_left: Point,
        size: Tuple[float, float],
        style: Style,
        rotation: Optional[float] = None,
        corner_radius: float = 0.0,
    ) -> None:
        self.commands.append(
            DrawCommand("rect", (top_left, tuple(size), style, rotation, corner_radius))
        )

    def draw_text(self, content: str, position: Point, style: Style) -> None:
        self.commands.append(DrawCommand("text", (content, position, style)))

    def clear(self) -> None:
        self.commands.clear()

    def counts(self) -> Dict[str, int]:
        tally: Dict[str, int] = {}
        for command in self.commands:
            tally[command.kind] = tally.get(command.kind, 0) + 1
        return tally
