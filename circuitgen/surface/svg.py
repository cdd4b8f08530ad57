"""Standalone SVG rendering of a recorded drawing."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..geometry import Point
from .base import ArcTo, ClosePath, DrawCommand, LineTo, MoveTo, PathCommand, RecordingSurface, Style
from .utils import format_float as _f
from .utils import xml_escape


def path_data(commands: Sequence[PathCommand]) -> str:
    parts: List[str] = []
    for command in commands:
        if isinstance(command, MoveTo):
            parts.append(f"M {_f(command.point.x)} {_f(command.point.y)}")
        elif isinstance(command, LineTo):
            parts.append(f"L {_f(command.point.x)} {_f(command.point.y)}")
        elif isinstance(command, ArcTo):
            rx, ry = command.radii
            parts.append(
                f"A {_f(rx)} {_f(ry)} 0 0 0 {_f(command.point.x)} {_f(command.point.y)}"
            )
        elif isinstance(command, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path command: {command!r}")
    return " ".join(parts)


def _style_attrs(style: Style) -> str:
    attrs: List[str] = []
    if style.fill_color is not None:
        attrs.append(f'fill="{xml_escape(style.fill_color)}"')
    if style.stroke_color is not None:
        attrs.append(f'stroke="{xml_escape(style.stroke_color)}"')
        attrs.append(f'stroke-width="{_f(style.stroke_width)}"')
    if style.line_cap is not None:
        attrs.append(f'stroke-linecap="{style.line_cap}"')
    if style.dash_pattern:
        attrs.append(f'stroke-dasharray="{",".join(_f(v) for v in style.dash_pattern)}"')
    return " ".join(attrs)


def _rotation_attr(angle: Optional[float], center: Point) -> str:
    if not angle:
        return ""
    return f' transform="rotate({_f(angle)} {_f(center.x)} {_f(center.y)})"'


class SvgSurface(RecordingSurface):
    """Records draw calls and serialises them as one ``<svg>`` document."""

    def _element(self, command: DrawCommand) -> str:
        if command.kind == "path":
            commands, style = command.args
            return f'<path d="{path_data(commands)}" {_style_attrs(style)} />'
        if command.kind == "ellipse":
            center, (rx, ry), style = command.args
            return (
                f'<ellipse cx="{_f(center.x)}" cy="{_f(center.y)}" rx="{_f(rx)}" ry="{_f(ry)}" '
                f"{_style_attrs(style)} />"
            )
        if command.kind == "rect":
            top_left, (width, height), style, rotation, corner_radius = command.args
            angle = rotation if rotation is not None else style.rotation_degrees
            center = Point(top_left.x + width / 2, top_left.y + height / 2)
            corners = ""
            if corner_radius:
                corners = f' rx="{_f(corner_radius)}" ry="{_f(corner_radius)}"'
            return (
                f'<rect x="{_f(top_left.x)}" y="{_f(top_left.y)}" '
                f'width="{_f(width)}" height="{_f(height)}"{corners} '
                f"{_style_attrs(style)}{_rotation_attr(angle, center)} />"
            )
        if command.kind == "text":
            content, position, style = command.args
            font = style.font_family or "sans-serif"
            return (
                f'<text x="{_f(position.x)}" y="{_f(position.y)}" font-family="{xml_escape(font)}" '
                f'dominant-baseline="middle" text-anchor="middle"'
                f"{_rotation_attr(style.rotation_degrees, position)}>"
                f"{xml_escape(content)}</text>"
            )
        raise ValueError(f"Unknown draw command kind: {command.kind!r}")

    def to_svg(self, *, title: Optional[str] = None) -> str:
        lines: List[str] = ['<?xml version="1.0" encoding="UTF-8"?>']
        lines.append(
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'width="{_f(self.width)}" height="{_f(self.height)}" '
            f'viewBox="0 0 {_f(self.width)} {_f(self.height)}">'
        )
        if title:
            lines.append(f"  <title>{xml_escape(title)}</title>")
        for command in self.commands:
            lines.append("  " + self._element(command))
        lines.append("</svg>")
        return "\n".join(lines) + "\n"
