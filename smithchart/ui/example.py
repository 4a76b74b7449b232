# smithchart/ui/example.py
from typing import Optional

from smithchart.core.chart import (
    ChartFrame, annotate_point, draw_bezier_curve, draw_line, draw_point, draw_polyline,
)
from smithchart.core.options import ChartOptions
from smithchart.core.transform import rx_to_uv
from smithchart.core.types import RX, UV
from smithchart.render.sink import DrawingSink

# ---------- Example data ----------
EXAMPLE_LINE = (UV(0.25, -0.25), UV(0.45, -0.30))
EXAMPLE_CURVE = [
    UV(-0.3000, 0.4000), UV(-0.2273, 0.4479), UV(-0.1545, 0.4826), UV(-0.0818, 0.5041),
    UV(-0.0091, 0.5124), UV(0.0636, 0.5074), UV(0.1364, 0.4893), UV(0.2091, 0.4579),
    UV(0.2818, 0.4132), UV(0.3545, 0.3554), UV(0.4273, 0.2843), UV(0.5000, 0.2000),
]
EXAMPLE_POINT, EXAMPLE_LABEL = RX(0.9, 1.1), "70.25 MHz"


def draw_example_overlay(sink: DrawingSink, frame: ChartFrame, options: Optional[ChartOptions] = None,
                         smooth: bool = True) -> None:
    """
    Plot the example data on a composed chart.

    Draws a straight line in the capacitive half, the example curve (smoothly
    interpolated, or joined point to point when ``smooth`` is off) and a
    marked, labelled point.
    """
    draw_line(sink, frame, *EXAMPLE_LINE, options)
    if smooth:
        draw_bezier_curve(sink, frame, EXAMPLE_CURVE, options)
    else:
        draw_polyline(sink, frame, EXAMPLE_CURVE, options)
    point = rx_to_uv(EXAMPLE_POINT)
    draw_point(sink, frame, point, options)
    annotate_point(sink, frame, EXAMPLE_LABEL, point, True, options)
