# smithchart/core/chart.py
"""
Chart composition and the public drawing entry points.

``compose_chart`` draws the grids, labels and rings into a sink and returns a
ChartFrame: the transform that maps gamma space onto the sink. Lines, curves,
points and annotations are then drawn in gamma coordinates by handing that
frame back, so each call lands on the chart no matter what the sink's own
transform has become in the meantime.
"""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from matplotlib.transforms import Affine2D

from smithchart.core.curves import fit_bezier_segments
from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.grid import draw_immittance_grid
from smithchart.core.labels import (
    draw_gb_grid_text, draw_rx_grid_text, left_justified_clear_text, right_justified_clear_text,
)
from smithchart.core.options import DEFAULT_OPTIONS, ChartOptions
from smithchart.core.rings import draw_angle_ring, draw_wavelength_ring
from smithchart.core.types import (
    LABEL_FONT_SIZE, OUTER_BOUNDARY_WITH_RING, SMITH_RADIUS, UV, sr_pct,
)
from smithchart.render.sink import DrawingSink, Matrix
from smithchart.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChartFrame:
    """
    Placement of a composed chart on its sink.

    Attributes:
        matrix: Affine transform from gamma space to sink device space.
        center: Chart center in device space.
        radius: Device-space radius of the unit (|Γ| = 1) circle.
    """
    matrix: Matrix
    center: Tuple[float, float]
    radius: float

    def to_device(self, uv: UV) -> Tuple[float, float]:
        x, y = Affine2D.from_values(*self.matrix).transform_point((uv[0], uv[1]))
        return float(x), float(y)

    def to_gamma(self, x: float, y: float) -> UV:
        """Map a device-space position (e.g. the mouse) back into gamma space."""
        u, v = Affine2D.from_values(*self.matrix).inverted().transform_point((x, y))
        return UV(float(u), float(v))


def compose_chart(sink: DrawingSink, center_x: float, center_y: float, radius: float,
                  options: Optional[ChartOptions] = None) -> ChartFrame:
    """
    Draw a complete Smith chart.

    Args:
        sink: Drawing sink, in device coordinates with y growing downward.
        center_x: Horizontal center of the chart.
        center_y: Vertical center of the chart.
        radius: Radius of the whole chart, including the rings when they are drawn.
        options: Chart options; defaults to DEFAULT_OPTIONS.

    Returns:
        The ChartFrame to pass to the point / line / curve / annotation calls.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    if not radius > 0.0:
        raise InvalidArgumentError(f"Chart radius must be positive, got {radius}")

    # leave room for the wavelength / angle rings
    if options.draw_ring:
        radius /= OUTER_BOUNDARY_WITH_RING / SMITH_RADIUS

    logger.debug("Composing Smith chart at (%.1f, %.1f), grid radius %.2f", center_x, center_y, radius)
    with sink.saved():
        # origin at the chart center, unit circle of radius 1, y up
        sink.translate(center_x, center_y)
        sink.scale(radius, -radius)
        sink.select_font_face(options.label_font)
        sink.set_font_size(LABEL_FONT_SIZE)

        if options.show_gb:
            with sink.saved():
                sink.set_source_rgba(*options.gb_grid)
                sink.rotate(math.pi)
                draw_immittance_grid(sink, options.gb_region_set)
        if options.show_rx:
            with sink.saved():
                sink.set_source_rgba(*options.rx_grid)
                draw_immittance_grid(sink, options.rx_region_set)

        if options.show_rx:
            draw_rx_grid_text(sink, options)
        if options.show_gb:
            draw_gb_grid_text(sink, options)

        if options.draw_ring:
            sink.set_source_rgba(*options.ring)
            draw_wavelength_ring(sink, options.label_font)
            draw_angle_ring(sink)

        frame = ChartFrame(sink.get_matrix(), (center_x, center_y), radius)
    return frame


def _line_style(sink: DrawingSink, options: ChartOptions) -> None:
    sink.set_line_width(sr_pct(options.line_width))
    sink.set_source_rgba(*options.line)


def draw_line(sink: DrawingSink, frame: ChartFrame, uv_from: UV, uv_to: UV,
              options: Optional[ChartOptions] = None) -> None:
    """Straight line between two gamma-space points."""
    options = options or DEFAULT_OPTIONS
    with sink.saved():
        sink.set_matrix(frame.matrix)
        _line_style(sink, options)
        sink.new_path()
        sink.move_to(uv_from[0], uv_from[1])
        sink.line_to(uv_to[0], uv_to[1])
        sink.stroke()


def draw_polyline(sink: DrawingSink, frame: ChartFrame, points: Sequence[UV],
                  options: Optional[ChartOptions] = None) -> None:
    """
    Join gamma-space points with straight segments.

    Raises:
        InvalidArgumentError: If fewer than two points are given.
    """
    if len(points) < 2:
        raise InvalidArgumentError(f"A polyline needs at least 2 points, got {len(points)}")
    options = options or DEFAULT_OPTIONS
    with sink.saved():
        sink.set_matrix(frame.matrix)
        _line_style(sink, options)
        sink.new_path()
        sink.move_to(points[0][0], points[0][1])
        for point in points[1:]:
            sink.line_to(point[0], point[1])
        sink.stroke()


def draw_bezier_curve(sink: DrawingSink, frame: ChartFrame, points: Sequence[UV],
                      options: Optional[ChartOptions] = None) -> None:
    """
    Smooth curve through gamma-space points (see smithchart.core.curves).

    Raises:
        InvalidArgumentError: If fewer than two points are given.
    """
    segments = fit_bezier_segments(points)
    options = options or DEFAULT_OPTIONS
    with sink.saved():
        sink.set_matrix(frame.matrix)
        _line_style(sink, options)
        sink.new_path()
        sink.move_to(segments[0].start.U, segments[0].start.V)
        for segment in segments:
            sink.curve_to(segment.c1.U, segment.c1.V, segment.c2.U, segment.c2.V,
                          segment.end.U, segment.end.V)
        sink.stroke()


def draw_point(sink: DrawingSink, frame: ChartFrame, uv: UV,
               options: Optional[ChartOptions] = None) -> None:
    """Filled dot of ``options.point_width`` percent of the grid radius."""
    options = options or DEFAULT_OPTIONS
    with sink.saved():
        sink.set_matrix(frame.matrix)
        sink.set_line_width(0.0)
        sink.set_source_rgba(*options.line)
        sink.new_path()
        sink.arc(uv[0], uv[1], sr_pct(options.point_width), 0.0, 2.0 * math.pi)
        sink.fill()


def annotation_font_size(options: ChartOptions) -> float:
    if options.annotation_font_size:
        return options.annotation_font_size / 100.0 * SMITH_RADIUS
    return 2.0 * LABEL_FONT_SIZE


def annotate_point(sink: DrawingSink, frame: ChartFrame, text: str, uv: UV, left: bool = True,
                   options: Optional[ChartOptions] = None) -> None:
    """
    Write ``text`` beside a gamma-space point.

    Args:
        left: Left-justify the text to the right of the point (True) or
            right-justify it to the left of the point (False).
    """
    options = options or DEFAULT_OPTIONS
    with sink.saved():
        sink.set_matrix(frame.matrix)
        sink.set_line_width(0.0)
        sink.set_source_rgba(*options.annotation)
        sink.select_font_face(options.annotation_font or options.label_font)
        font_size = annotation_font_size(options)
        sink.set_font_size(font_size)

        if left:
            left_justified_clear_text(sink, text, uv[0] + font_size * 0.5, uv[1] - font_size * 0.3)
        else:
            right_justified_clear_text(sink, text, uv[0] - font_size * 0.5, uv[1] - font_size * 0.3)
