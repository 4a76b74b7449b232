# smithchart/core/labels.py
"""
Label layout.

Grid values are placed around the rim, along the real axis and along the
R = 1 / X = +-1 lines. Every label erases its own background first so it stays
readable over the grid lines beneath it. Descriptive titles follow the chart's
curvature, one character at a time.
"""
import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from smithchart.core.options import ChartOptions
from smithchart.core.regions import LABELS
from smithchart.core.transform import angle_of_reactance_arc, angle_of_resistance_arc, rx_to_uv
from smithchart.core.types import LABEL_FONT_SIZE, RX, SMITH_RADIUS, sr_pct

LEFT = "left"
RIGHT = "right"


def left_justified_clear_text(sink, text: str, x: float, y: float) -> None:
    """Draw text starting at (x, y) over an erased box the size of its ink."""
    extents = sink.text_extents(text)
    with sink.saved():
        sink.new_path()
        sink.rectangle(x, y, extents.width + extents.x_bearing, extents.height + extents.y_bearing)
        sink.erase()
    sink.move_to(x, y)
    sink.show_text(text)


def right_justified_clear_text(sink, text: str, x: float, y: float) -> None:
    """Draw text ending at (x, y) over an erased box the size of its ink."""
    extents = sink.text_extents(text)
    with sink.saved():
        sink.new_path()
        sink.rectangle(x - (extents.width + extents.x_bearing), y,
                       extents.width + extents.x_bearing, extents.height + extents.y_bearing)
        sink.erase()
    sink.move_to(x - extents.x_advance, y)
    sink.show_text(text)


def centre_justified_text(sink, text: str, x: float, y: float) -> None:
    sink.move_to(x - sink.text_extents(text).x_advance / 2.0, y)
    sink.show_text(text)


def justified_clear_text(sink, text: str, x: float, y: float, justify: str) -> None:
    if justify == LEFT:
        left_justified_clear_text(sink, text, x, y)
    else:
        right_justified_clear_text(sink, text, x, y)


def circle_text(sink, text: str, radius: float, angle: float,
                center_x: float = 0.0, center_y: float = 0.0) -> None:
    """
    Draw text along a circle, centered on ``angle`` and reading clockwise.

    The string's advance is converted into the angle it subtends at ``radius``;
    that sweep is centered on the target angle and the band it covers is erased.
    Each character is then drawn tangent to the circle: the frame is turned by
    half the character's angular width, the character drawn centered, and the
    frame turned by the other half.
    """
    extents = sink.text_extents(text)
    sweep_angle = extents.x_advance / radius

    with sink.saved():
        sink.new_path()
        sink.set_line_width(0.0)
        sink.translate(center_x, center_y)
        # turn so the end of the text arc lies on the x-axis
        sink.rotate(angle - sweep_angle / 2.0)
        sink.arc_negative(0.0, 0.0, radius + extents.y_bearing, sweep_angle, 0.0)
        sink.rel_line_to(extents.height, 0.0)
        sink.arc(0.0, 0.0, radius + extents.height, 0.0, sweep_angle)
        sink.close_path()
        sink.erase()

        # the start of the text is now at the top of the frame
        sink.rotate(sweep_angle - math.pi / 2.0)
        for char in text:
            half_width = sink.text_extents(char).x_advance / 2.0
            sink.rotate(-half_width / radius)
            sink.move_to(-half_width, radius)
            sink.show_text(char)
            sink.rotate(-half_width / radius)


@dataclass(frozen=True)
class LabelPlacement:
    """
    Where a grid value label goes.

    The sink is translated to ``origin`` and rotated by ``rotation``; the text
    is then justified against (x, y) in that frame.
    """
    text: str
    origin: Tuple[float, float]
    rotation: float
    x: float
    y: float
    justify: str


def iter_value_labels(font_size: float = LABEL_FONT_SIZE) -> Iterator[LabelPlacement]:
    """Yield the placement of every numeric grid label."""
    margin = font_size / 4.0
    for label in LABELS[1:]:
        # +X along the rim
        uv = rx_to_uv(RX(0.0, label.value))
        yield LabelPlacement(label.text, (0.0, 0.0), math.atan2(uv.V, uv.U),
                             SMITH_RADIUS - margin, margin, RIGHT)
        # -X along the rim, turned a half circle so it reads outward-in
        uv = rx_to_uv(RX(0.0, -label.value))
        yield LabelPlacement(label.text, (0.0, 0.0), math.atan2(uv.V, uv.U) + math.pi,
                             -SMITH_RADIUS + margin, margin, LEFT)
        # R along the U axis
        uv = rx_to_uv(RX(label.value, 0.0))
        yield LabelPlacement(label.text, (0.0, 0.0), math.pi / 2.0, margin, -uv.U + margin, LEFT)

    for label in LABELS[2:11:2]:
        # R labels on the X = 1 arc (upper, inductive)
        rx = RX(label.value, 1.0)
        uv = rx_to_uv(rx)
        yield LabelPlacement(label.text, (uv.U * SMITH_RADIUS, uv.V * SMITH_RADIUS),
                             angle_of_reactance_arc(rx) + math.pi, margin, margin, LEFT)
        # R labels on the X = -1 arc (lower, capacitive)
        rx = RX(label.value, -1.0)
        uv = rx_to_uv(rx)
        yield LabelPlacement(label.text, (uv.U * SMITH_RADIUS, uv.V * SMITH_RADIUS),
                             angle_of_reactance_arc(rx), -margin, margin, RIGHT)
        # X labels on the R = 1 circle (upper)
        rx = RX(1.0, label.value)
        uv = rx_to_uv(rx)
        yield LabelPlacement(label.text, (uv.U * SMITH_RADIUS, uv.V * SMITH_RADIUS),
                             angle_of_resistance_arc(rx), -margin, margin, RIGHT)
        # -X labels on the R = 1 circle (lower)
        rx = RX(1.0, -label.value)
        uv = rx_to_uv(rx)
        yield LabelPlacement(label.text, (uv.U * SMITH_RADIUS, uv.V * SMITH_RADIUS),
                             angle_of_resistance_arc(rx) + math.pi, margin, margin, LEFT)


def draw_labels(sink, font_family: str) -> None:
    sink.select_font_face(font_family)
    sink.set_font_size(LABEL_FONT_SIZE)
    for placement in iter_value_labels():
        with sink.saved():
            if placement.origin != (0.0, 0.0):
                sink.translate(*placement.origin)
            sink.rotate(placement.rotation)
            justified_clear_text(sink, placement.text, placement.x, placement.y, placement.justify)


def draw_rx_grid_text(sink, options: ChartOptions) -> None:
    """Labels and titles for the impedance grid."""
    with sink.saved():
        sink.set_source_rgba(*options.rx_text)
        sink.set_line_width(0.0)
        if options.show_labels:
            draw_labels(sink, options.label_font)

        if options.show_strings:
            resistance_text_vpos = -(LABEL_FONT_SIZE + sr_pct(0.8))
            if options.show_gb:
                resistance_text_vpos -= LABEL_FONT_SIZE + sr_pct(0.4)

            circle_text(sink, "INDUCTIVE REACTANCE COMPONENT (+jX/Zo)", sr_pct(94), math.radians(141.7))
            circle_text(sink, "CAPACITIVE REACTANCE COMPONENT (-jX/Zo)", sr_pct(94), math.radians(-141.7))
            left_justified_clear_text(sink, "RESISTANCE COMPONENT (R/Zo)", sr_pct(-32.5), resistance_text_vpos)


def draw_gb_grid_text(sink, options: ChartOptions) -> None:
    """Labels and titles for the admittance grid (labels in the half-turned frame)."""
    with sink.saved():
        sink.rotate(math.pi)
        sink.set_source_rgba(*options.gb_text)
        sink.set_line_width(0.0)
        if options.show_labels:
            draw_labels(sink, options.label_font)

        if options.show_strings:
            reactance_text_angle = 141.7
            conductance_text_vpos = sr_pct(0.8)
            sink.rotate(-math.pi)
            # make room for the impedance titles
            if options.show_rx:
                reactance_text_angle -= 27.0
                conductance_text_vpos += LABEL_FONT_SIZE + sr_pct(0.4)

            circle_text(sink, "CAPACITIVE SUSCEPTANCE COMPONENT (+jX/Yo)", sr_pct(94),
                        math.radians(reactance_text_angle))
            circle_text(sink, "INDUCTIVE SUSCEPTANCE COMPONENT (-jB/Yo)", sr_pct(94),
                        math.radians(-reactance_text_angle))
            left_justified_clear_text(sink, "CONDUCTANCE COMPONENT (G/Yo)", sr_pct(-32.5),
                                      conductance_text_vpos + sr_pct(0.8))
