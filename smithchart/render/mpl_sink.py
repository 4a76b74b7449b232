# smithchart/render/mpl_sink.py
"""
Matplotlib backend.

The sink owns a figure whose single axes spans it edge to edge with one data
unit per pixel and y growing downward, so device space matches the usual
raster convention (and cairo's). Strokes and fills become PathPatches; text is
converted to glyph outlines with TextPath and mapped through the glyph matrix,
which gives rotated, scaled text exactly where the layout put it.
"""
from typing import List, Optional

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import PathPatch
from matplotlib.path import Path
from matplotlib.textpath import TextPath
from matplotlib.transforms import Affine2D

from smithchart.core.types import RGBA
from smithchart.render.base import CLOSE_PATH, CURVE_TO, LINE_TO, MOVE_TO, PathSink, Segment
from smithchart.render.sink import FontFace, SLANT_ITALIC, TextExtents, WEIGHT_BOLD
from smithchart.utils.logging_config import get_logger

logger = get_logger(__name__)

# Glyphs are laid out at this size and scaled, which keeps TextPath's hinting-free outlines accurate.
_LAYOUT_SIZE = 100.0
_FALLBACK_FAMILIES = ["DejaVu Sans", "sans-serif"]
# A power of two keeps width / dpi * dpi exact, so the canvas is never a pixel short.
_DPI = 64.0


def segments_to_path(segments: List[Segment]) -> Path:
    """Convert device-space path segments to a matplotlib Path."""
    vertices = []
    codes = []
    for segment in segments:
        code = segment[0]
        if code == MOVE_TO:
            vertices.append(segment[1])
            codes.append(Path.MOVETO)
        elif code == LINE_TO:
            vertices.append(segment[1])
            codes.append(Path.LINETO)
        elif code == CURVE_TO:
            vertices.extend(segment[1:4])
            codes.extend([Path.CURVE4] * 3)
        elif code == CLOSE_PATH:
            vertices.append(vertices[-1] if vertices else (0.0, 0.0))
            codes.append(Path.CLOSEPOLY)
    return Path(np.asarray(vertices, dtype=float).reshape(-1, 2), codes)


class MatplotlibSink(PathSink):
    """
    Render a chart into an Agg-backed matplotlib figure.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels.
        background: RGBA used to paint the surface and erased areas.
    """

    def __init__(self, width: int, height: int, background: RGBA = (1.0, 1.0, 1.0, 1.0)) -> None:
        super().__init__()
        self.width = int(width)
        self.height = int(height)
        self.background = background
        # no pyplot: the figure draws on its own Agg canvas
        self.figure = Figure(figsize=(self.width / _DPI, self.height / _DPI), dpi=_DPI, facecolor=background)
        self.canvas = FigureCanvasAgg(self.figure)
        self.axes = self.figure.add_axes([0.0, 0.0, 1.0, 1.0])
        self.axes.set_xlim(0, self.width)
        self.axes.set_ylim(self.height, 0)
        self.axes.set_axis_off()
        self.axes.set_facecolor(background)
        self._zorder = 0

    def _next_zorder(self) -> int:
        # later calls paint over earlier ones, as on a real canvas
        self._zorder += 1
        return self._zorder

    def _font_properties(self, font: FontFace, size: float) -> FontProperties:
        return FontProperties(
            family=[font.family] + _FALLBACK_FAMILIES,
            style="italic" if font.slant == SLANT_ITALIC else "normal",
            weight="bold" if font.weight == WEIGHT_BOLD else "normal",
            size=size,
        )

    def _paint_stroke(self, path: List[Segment], width: float, rgba: RGBA) -> None:
        self.axes.add_patch(PathPatch(segments_to_path(path), fill=False, edgecolor=rgba,
                                      linewidth=width * 72.0 / _DPI, capstyle="butt", joinstyle="miter",
                                      zorder=self._next_zorder()))

    def _paint_fill(self, path: List[Segment], rgba: RGBA) -> None:
        self.axes.add_patch(PathPatch(segments_to_path(path), facecolor=rgba, edgecolor="none",
                                      linewidth=0, zorder=self._next_zorder()))

    def _paint_erase(self, path: List[Segment]) -> None:
        self._paint_fill(path, self.background)

    def _text_path(self, text: str, font: FontFace) -> TextPath:
        return TextPath((0.0, 0.0), text, size=_LAYOUT_SIZE, prop=self._font_properties(font, _LAYOUT_SIZE))

    def _paint_text(self, text: str, glyph_matrix: Affine2D, font: FontFace,
                    size: float, rgba: RGBA) -> None:
        # TextPath cannot build a path without glyphs
        if not text.strip():
            return
        glyphs = self._text_path(text, font)
        to_device = Affine2D().scale(size / _LAYOUT_SIZE) + glyph_matrix
        self.axes.add_patch(PathPatch(to_device.transform_path(glyphs), facecolor=rgba,
                                      edgecolor="none", linewidth=0, zorder=self._next_zorder()))

    def _measure(self, text: str, font: FontFace, size: float) -> TextExtents:
        if not text:
            return TextExtents(0.0, 0.0, 0.0, 0.0, 0.0)
        factor = size / _LAYOUT_SIZE
        if text.strip():
            ink = self._text_path(text, font).get_extents()
            ink_box = (ink.x0, ink.y0, ink.width, ink.height)
        else:
            ink_box = (0.0, 0.0, 0.0, 0.0)  # whitespace has advance but no ink
        # measure the advance against a sentinel glyph so trailing spaces count
        with_sentinel = self._text_path(text + "|", font).get_extents()
        sentinel = self._text_path("|", font).get_extents()
        advance = with_sentinel.x0 + with_sentinel.width - (sentinel.x0 + sentinel.width)
        return TextExtents(*(value * factor for value in ink_box), advance * factor)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def to_rgba_array(self) -> np.ndarray:
        """Rasterize the figure; returns a (height, width, 4) uint8 array."""
        self.canvas.draw()
        return np.asarray(self.canvas.buffer_rgba()).copy()

    def close(self) -> None:
        self.figure.clear()

    def __enter__(self) -> "MatplotlibSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None
