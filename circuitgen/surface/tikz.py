"""TikZ renderer for recorded drawings.

Canvas coordinates are emitted in points with the y axis flipped, so the
picture matches the SVG output. Paths go through the ``svg.path`` library,
which keeps elliptical arcs intact.
"""

from __future__ import annotations

from typing import List

from .base import DrawCommand, RecordingSurface, Style
from .svg import path_data
from .utils import format_float as _f
from .utils import latex_escape

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\usetikzlibrary{svg.path}
\begin{document}
%s
\end{document}
"""

_COLOR_NONE = {"none", "transparent"}


def _pt(x: float, y: float) -> str:
    return f"({_f(x)}pt,{_f(y)}pt)"


def _style_options(style: Style) -> List[str]:
    options: List[str] = []
    if style.stroke_color is not None and style.stroke_color not in _COLOR_NONE:
        options.append(f"draw={style.stroke_color}")
        options.append(f"line width={_f(style.stroke_width)}pt")
    if style.fill_color is not None and style.fill_color not in _COLOR_NONE:
        options.append(f"fill={style.fill_color}")
    if style.line_cap is not None:
        options.append(f"line cap={style.line_cap}")
    if style.dash_pattern:
        pattern = style.dash_pattern
        if len(pattern) % 2:
            pattern = pattern + pattern
        pieces = []
        for idx, length in enumerate(pattern):
            pieces.append(f"{'on' if idx % 2 == 0 else 'off'} {_f(length)}pt")
        options.append("dash pattern=" + " ".join(pieces))
    return options


def _bracket(options: List[str]) -> str:
    return f"[{', '.join(options)}]" if options else ""


class TikzSurface(RecordingSurface):
    """Records draw calls and serialises them as a ``tikzpicture``."""

    def _statement(self, command: DrawCommand) -> str:
        if command.kind == "path":
            commands, style = command.args
            return f"\\path{_bracket(_style_options(style))} svg {{{path_data(commands)}}};"
        if command.kind == "ellipse":
            center, (rx, ry), style = command.args
            return (
                f"\\path{_bracket(_style_options(style))} {_pt(center.x, center.y)} "
                f"ellipse ({_f(rx)}pt and {_f(ry)}pt);"
            )
        if command.kind == "rect":
            top_left, (width, height), style, rotation, corner_radius = command.args
            options = _style_options(style)
            angle = rotation if rotation is not None else style.rotation_degrees
            if angle:
                cx = top_left.x + width / 2
                cy = top_left.y + height / 2
                options.append(f"rotate around={{{_f(angle)}:{_pt(cx, cy)}}}")
            if corner_radius:
                options.append(f"rounded corners={_f(corner_radius)}pt")
            return (
                f"\\path{_bracket(options)} {_pt(top_left.x, top_left.y)} "
                f"rectangle {_pt(top_left.x + width, top_left.y + height)};"
            )
        if command.kind == "text":
            content, position, style = command.args
            options = ["anchor=center", "inner sep=0pt"]
            if style.font_family in (None, "sans-serif"):
                options.append(r"font=\sffamily")
            if style.rotation_degrees:
                options.append(f"rotate={_f(-style.rotation_degrees)}")
            return (
                f"\\node{_bracket(options)} at {_pt(position.x, position.y)} "
                f"{{{latex_escape(content)}}};"
            )
        raise ValueError(f"Unknown draw command kind: {command.kind!r}")

    def to_tikz(self) -> str:
        lines = [r"\begin{tikzpicture}[yscale=-1]"]
        # Fixes the bounding box to the canvas.
        lines.append(
            f"\\useasboundingbox {_pt(0.0, 0.0)} rectangle {_pt(self.width, self.height)};"
        )
        for command in self.commands:
            lines.append("  " + self._statement(command))
        lines.append(r"\end{tikzpicture}")
        return "\n".join(lines)

    def to_document(self) -> str:
        return standalone_tpl % self.to_tikz()
