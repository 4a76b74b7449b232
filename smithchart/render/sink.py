# smithchart/render/sink.py
"""
Drawing sink API.

The chart engine never rasterizes. It describes the chart as a sequence of
path, graphics-state and text calls on a DrawingSink, modelled on the cairo
drawing model: paths are built in user space, mapped through the current
affine transform, then stroked or filled. Any backend that can honour these
calls can render a chart.
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Tuple

Matrix = Tuple[float, float, float, float, float, float]  # xx, yx, xy, yy, x0, y0

SLANT_NORMAL = "normal"
SLANT_ITALIC = "italic"
WEIGHT_NORMAL = "normal"
WEIGHT_BOLD = "bold"


@dataclass(frozen=True)
class FontFace:
    family: str
    slant: str = SLANT_NORMAL
    weight: str = WEIGHT_NORMAL


@dataclass(frozen=True)
class TextExtents:
    """
    Ink and advance metrics of a string in user-space units, y pointing up.

    ``x_bearing``/``y_bearing`` locate the lower-left corner of the ink box
    relative to the baseline origin; ``x_advance`` is where the next string
    would start.
    """
    x_bearing: float
    y_bearing: float
    width: float
    height: float
    x_advance: float


class DrawingSink(ABC):
    """Abstract drawing surface consumed by the chart engine."""

    # ------------------------------------------------------------------
    # Path construction
    # ------------------------------------------------------------------
    @abstractmethod
    def new_path(self) -> None:
        pass

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        pass

    @abstractmethod
    def line_to(self, x: float, y: float) -> None:
        pass

    @abstractmethod
    def rel_move_to(self, dx: float, dy: float) -> None:
        pass

    @abstractmethod
    def rel_line_to(self, dx: float, dy: float) -> None:
        pass

    @abstractmethod
    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        """Add a counter-clockwise (increasing angle) arc to the path."""

    @abstractmethod
    def arc_negative(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        """Add a clockwise (decreasing angle) arc to the path."""

    @abstractmethod
    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        pass

    @abstractmethod
    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        pass

    @abstractmethod
    def close_path(self) -> None:
        pass

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    @abstractmethod
    def stroke(self) -> None:
        pass

    @abstractmethod
    def stroke_preserve(self) -> None:
        pass

    @abstractmethod
    def fill(self) -> None:
        pass

    @abstractmethod
    def erase(self) -> None:
        """Clear the area covered by the current path back to the background and consume the path."""

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------
    @abstractmethod
    def set_line_width(self, width: float) -> None:
        pass

    @abstractmethod
    def set_source_rgba(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def save(self) -> None:
        pass

    @abstractmethod
    def restore(self) -> None:
        pass

    @contextmanager
    def saved(self) -> Iterator["DrawingSink"]:
        """Isolated scope for transform, color, width and font changes."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    @abstractmethod
    def translate(self, tx: float, ty: float) -> None:
        pass

    @abstractmethod
    def rotate(self, angle: float) -> None:
        pass

    @abstractmethod
    def scale(self, sx: float, sy: float) -> None:
        pass

    @abstractmethod
    def get_matrix(self) -> Matrix:
        pass

    @abstractmethod
    def set_matrix(self, matrix: Matrix) -> None:
        pass

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    @abstractmethod
    def select_font_face(self, family: str, slant: str = SLANT_NORMAL, weight: str = WEIGHT_NORMAL) -> None:
        pass

    @abstractmethod
    def set_font_size(self, size: float) -> None:
        """Font size in user-space units; glyphs are drawn upright in a y-up user space."""

    @abstractmethod
    def text_extents(self, text: str) -> TextExtents:
        pass

    @abstractmethod
    def show_text(self, text: str) -> None:
        """Draw text with its baseline origin at the current point and advance the current point."""
