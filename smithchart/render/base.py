# smithchart/render/base.py
"""
Reference implementation of the DrawingSink state machine.

PathSink keeps the graphics-state stack and builds paths in device space the
way cairo does: every user-space coordinate is mapped through the current
transform when it is added, and arcs are flattened to cubic Béziers of at most
a quarter turn. Backends subclass it and only implement the painting hooks and
text measurement.
"""
import math
from abc import abstractmethod
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

import numpy as np
from matplotlib.transforms import Affine2D

from smithchart.core.exceptions import RenderError
from smithchart.core.types import RGBA
from smithchart.render.sink import (
    DrawingSink, FontFace, Matrix, SLANT_NORMAL, TextExtents, WEIGHT_NORMAL,
)

Point = Tuple[float, float]

MOVE_TO = "M"
LINE_TO = "L"
CURVE_TO = "C"
CLOSE_PATH = "Z"

# A path segment is (code, point, ...) in device coordinates.
Segment = Tuple


@dataclass
class GraphicsState:
    matrix: Affine2D = field(default_factory=Affine2D)
    line_width: float = 2.0
    rgba: RGBA = (0.0, 0.0, 0.0, 1.0)
    font: FontFace = FontFace("sans-serif")
    font_size: float = 10.0


def _apply(transform: Affine2D, x: float, y: float) -> Point:
    px, py = transform.transform_point((x, y))
    return float(px), float(py)


def _apply_distance(transform: Affine2D, dx: float, dy: float) -> Point:
    # linear part only
    ddx, ddy = transform.get_matrix()[:2, :2] @ (dx, dy)
    return float(ddx), float(ddy)


def arc_to_beziers(xc: float, yc: float, radius: float,
                   angle1: float, angle2: float) -> List[Tuple[Point, Point, Point, Point]]:
    """
    Approximate a circular arc by cubic Bézier pieces of at most 90 degrees.

    The arc runs from angle1 to angle2 in the direction given by their sign
    difference. Returns (p0, c1, c2, p3) tuples in the arc's own coordinates.
    """
    sweep = angle2 - angle1
    pieces = max(1, int(math.ceil(abs(sweep) / (math.pi / 2.0) - 1e-9)))
    step = sweep / pieces
    k = 4.0 / 3.0 * math.tan(step / 4.0)
    beziers = []
    a = angle1
    for _ in range(pieces):
        b = a + step
        cos_a, sin_a, cos_b, sin_b = math.cos(a), math.sin(a), math.cos(b), math.sin(b)
        p0 = (xc + radius * cos_a, yc + radius * sin_a)
        p3 = (xc + radius * cos_b, yc + radius * sin_b)
        c1 = (p0[0] - k * radius * sin_a, p0[1] + k * radius * cos_a)
        c2 = (p3[0] + k * radius * sin_b, p3[1] - k * radius * cos_b)
        beziers.append((p0, c1, c2, p3))
        a = b
    return beziers


class PathSink(DrawingSink):
    """Graphics-state and path bookkeeping shared by every concrete sink."""

    def __init__(self) -> None:
        self._state = GraphicsState()
        self._stack: List[GraphicsState] = []
        self._path: List[Segment] = []
        self._current: Optional[Point] = None
        self._subpath_start: Optional[Point] = None

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    def _record(self, op: str, *args) -> None:
        """Called for every public primitive; recording sinks override it."""

    @abstractmethod
    def _paint_stroke(self, path: List[Segment], width: float, rgba: RGBA) -> None:
        pass

    @abstractmethod
    def _paint_fill(self, path: List[Segment], rgba: RGBA) -> None:
        pass

    @abstractmethod
    def _paint_erase(self, path: List[Segment]) -> None:
        pass

    @abstractmethod
    def _paint_text(self, text: str, glyph_matrix: Affine2D, font: FontFace,
                    size: float, rgba: RGBA) -> None:
        """Draw ``text`` whose y-up user-space glyphs map to device space through ``glyph_matrix``."""

    @abstractmethod
    def _measure(self, text: str, font: FontFace, size: float) -> TextExtents:
        pass

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def state(self) -> GraphicsState:
        return self._state

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def current_point(self) -> Optional[Point]:
        """Current point in user space, as cairo_get_current_point reports it."""
        if self._current is None:
            return None
        return _apply(self._state.matrix.inverted(), *self._current)

    def _device(self, x: float, y: float) -> Point:
        return _apply(self._state.matrix, x, y)

    # ------------------------------------------------------------------
    # Path construction
    # ------------------------------------------------------------------
    def new_path(self) -> None:
        self._record("new_path")
        self._clear_path()

    def _clear_path(self) -> None:
        self._path = []
        self._current = None
        self._subpath_start = None

    def _move_device(self, point: Point) -> None:
        self._path.append((MOVE_TO, point))
        self._current = point
        self._subpath_start = point

    def _resume_subpath(self) -> None:
        # show_text leaves a current point without a path
        if not self._path and self._current is not None:
            self._path.append((MOVE_TO, self._current))

    def _line_device(self, point: Point) -> None:
        if self._current is None:
            self._move_device(point)
            return
        self._resume_subpath()
        self._path.append((LINE_TO, point))
        self._current = point

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)
        self._move_device(self._device(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)
        self._line_device(self._device(x, y))

    def rel_move_to(self, dx: float, dy: float) -> None:
        self._record("rel_move_to", dx, dy)
        if self._current is None:
            raise RenderError("rel_move_to without a current point")
        ddx, ddy = _apply_distance(self._state.matrix, dx, dy)
        self._move_device((self._current[0] + ddx, self._current[1] + ddy))

    def rel_line_to(self, dx: float, dy: float) -> None:
        self._record("rel_line_to", dx, dy)
        if self._current is None:
            raise RenderError("rel_line_to without a current point")
        ddx, ddy = _apply_distance(self._state.matrix, dx, dy)
        self._line_device((self._current[0] + ddx, self._current[1] + ddy))

    def _add_arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        beziers = arc_to_beziers(xc, yc, radius, angle1, angle2)
        self._line_device(self._device(*beziers[0][0]))
        for _, c1, c2, p3 in beziers:
            self._curve_device(self._device(*c1), self._device(*c2), self._device(*p3))

    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        self._record("arc", xc, yc, radius, angle1, angle2)
        while angle2 < angle1:
            angle2 += 2.0 * math.pi
        self._add_arc(xc, yc, radius, angle1, angle2)

    def arc_negative(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        self._record("arc_negative", xc, yc, radius, angle1, angle2)
        while angle2 > angle1:
            angle2 -= 2.0 * math.pi
        self._add_arc(xc, yc, radius, angle1, angle2)

    def _curve_device(self, c1: Point, c2: Point, p3: Point) -> None:
        if self._current is None:
            self._move_device(c1)
        self._resume_subpath()
        self._path.append((CURVE_TO, c1, c2, p3))
        self._current = p3

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self._record("curve_to", x1, y1, x2, y2, x3, y3)
        self._curve_device(self._device(x1, y1), self._device(x2, y2), self._device(x3, y3))

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rectangle", x, y, width, height)
        self._move_device(self._device(x, y))
        self._line_device(self._device(x + width, y))
        self._line_device(self._device(x + width, y + height))
        self._line_device(self._device(x, y + height))
        self._close()

    def _close(self) -> None:
        if self._current is None:
            return
        self._path.append((CLOSE_PATH,))
        self._current = self._subpath_start

    def close_path(self) -> None:
        self._record("close_path")
        self._close()

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def _device_line_width(self) -> float:
        linear = self._state.matrix.get_matrix()[:2, :2]
        return self._state.line_width * math.sqrt(abs(np.linalg.det(linear)))

    def _stroke_path(self) -> None:
        if self._path:
            self._paint_stroke(list(self._path), self._device_line_width(), self._state.rgba)

    def stroke_preserve(self) -> None:
        self._record("stroke_preserve")
        self._stroke_path()

    def stroke(self) -> None:
        self._record("stroke")
        self._stroke_path()
        self._clear_path()

    def fill(self) -> None:
        self._record("fill")
        if self._path:
            self._paint_fill(list(self._path), self._state.rgba)
        self._clear_path()

    def erase(self) -> None:
        self._record("erase")
        if self._path:
            self._paint_erase(list(self._path))
        self._clear_path()

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------
    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)
        self._state.line_width = float(width)

    def set_source_rgba(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        self._record("set_source_rgba", red, green, blue, alpha)
        self._state.rgba = (float(red), float(green), float(blue), float(alpha))

    def save(self) -> None:
        self._record("save")
        self._stack.append(replace(self._state))

    def restore(self) -> None:
        self._record("restore")
        if not self._stack:
            raise RenderError("restore() without a matching save()")
        self._state = self._stack.pop()

    def translate(self, tx: float, ty: float) -> None:
        self._record("translate", tx, ty)
        self._concat(Affine2D().translate(tx, ty))

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)
        self._concat(Affine2D().rotate(angle))

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)
        self._concat(Affine2D().scale(sx, sy))

    def _concat(self, step: Affine2D) -> None:
        # user-space step first, then the current matrix, as cairo does
        self._state.matrix = (step + self._state.matrix).frozen()

    def get_matrix(self) -> Matrix:
        return tuple(float(v) for v in self._state.matrix.to_values())

    def set_matrix(self, matrix: Matrix) -> None:
        self._record("set_matrix", tuple(matrix))
        self._state.matrix = Affine2D.from_values(*matrix)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def select_font_face(self, family: str, slant: str = SLANT_NORMAL, weight: str = WEIGHT_NORMAL) -> None:
        self._record("select_font_face", family, slant, weight)
        self._state.font = FontFace(family, slant, weight)

    def set_font_size(self, size: float) -> None:
        self._record("set_font_size", size)
        self._state.font_size = float(size)

    def text_extents(self, text: str) -> TextExtents:
        return self._measure(text, self._state.font, self._state.font_size)

    def show_text(self, text: str) -> None:
        self._record("show_text", text)
        origin = self._current if self._current is not None else self._device(0.0, 0.0)
        xx, yx, xy, yy, _, _ = self._state.matrix.to_values()
        glyph_matrix = Affine2D.from_values(xx, yx, xy, yy, origin[0], origin[1])
        if text:
            self._paint_text(text, glyph_matrix, self._state.font, self._state.font_size, self._state.rgba)
        advance = self._measure(text, self._state.font, self._state.font_size).x_advance
        dx, dy = _apply_distance(self._state.matrix, advance, 0.0)
        # cairo leaves the advanced point as the current point but no path
        self._clear_path()
        self._current = (origin[0] + dx, origin[1] + dy)
        self._subpath_start = self._current
