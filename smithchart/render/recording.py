# smithchart/render/recording.py
"""
A drawing sink that renders nothing and remembers everything.

Every primitive call is logged with the graphics state active at the time, and
stroked / filled paths are kept in device space. Text metrics are a fixed-pitch
approximation so layouts are deterministic without any font machinery.
"""
from dataclasses import dataclass
from typing import List, Tuple

from matplotlib.transforms import Affine2D

from smithchart.core.types import RGBA
from smithchart.render.base import PathSink, Segment
from smithchart.render.sink import FontFace, Matrix, TextExtents

# Fixed-pitch metrics as a fraction of the font size.
ADVANCE = 0.6
ASCENT = 0.7


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: Tuple
    line_width: float
    rgba: RGBA
    matrix: Matrix


@dataclass(frozen=True)
class PaintedPath:
    kind: str  # "stroke", "fill" or "erase"
    segments: Tuple[Segment, ...]
    width: float
    rgba: RGBA


@dataclass(frozen=True)
class PaintedText:
    text: str
    matrix: Matrix
    font: FontFace
    size: float
    rgba: RGBA


class RecordingSink(PathSink):
    def __init__(self) -> None:
        super().__init__()
        self.calls: List[DrawCall] = []
        self.painted: List[PaintedPath] = []
        self.texts: List[PaintedText] = []

    def _record(self, op: str, *args) -> None:
        state = self._state
        self.calls.append(DrawCall(op, args, state.line_width, state.rgba, self.get_matrix()))

    def _paint_stroke(self, path: List[Segment], width: float, rgba: RGBA) -> None:
        self.painted.append(PaintedPath("stroke", tuple(path), width, rgba))

    def _paint_fill(self, path: List[Segment], rgba: RGBA) -> None:
        self.painted.append(PaintedPath("fill", tuple(path), 0.0, rgba))

    def _paint_erase(self, path: List[Segment]) -> None:
        self.painted.append(PaintedPath("erase", tuple(path), 0.0, (0.0, 0.0, 0.0, 0.0)))

    def _paint_text(self, text: str, glyph_matrix: Affine2D, font: FontFace,
                    size: float, rgba: RGBA) -> None:
        self.texts.append(PaintedText(text, tuple(float(v) for v in glyph_matrix.to_values()), font, size, rgba))

    def _measure(self, text: str, font: FontFace, size: float) -> TextExtents:
        width = ADVANCE * size * len(text)
        height = ASCENT * size if text else 0.0
        return TextExtents(0.0, 0.0, width, height, width)

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def calls_named(self, op: str) -> List[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def reset(self) -> None:
        self.calls.clear()
        self.painted.clear()
        self.texts.clear()
