# smithchart/core/rings.py
"""
Outer annuli: the wavelength ring and the angle-of-coefficient ring.

The wavelength ring is evenly divided (half a wavelength per turn). The angle
ring carries two scales: the angle of the reflection coefficient on the ring
itself, and the angle of the transmission coefficient, which is laid out along
the left radius and needs a per-degree solve (see ``find_radial_distance``).
"""
import math
from dataclasses import dataclass
from typing import List, Optional

from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.labels import centre_justified_text, circle_text
from smithchart.core.types import (
    ANGLE_RING_RADIUS, LABEL_FONT_SIZE, OUTER_BOUNDARY_WITH_RING, SMITH_RADIUS,
    STROKE_WIDTH_MINOR, WAVE_RING_RADIUS, sr_pct,
)

WAVELENGTH_TICKS = 250
WAVELENGTH_STEP = math.pi / 125


def wavelength_label(tick: int) -> Optional[str]:
    """Label for a wavelength tick, or None when the tick is unlabelled."""
    if tick % 5 != 0 or tick <= 16:
        return None
    return "%.2f" % (tick / 500.0 if tick != WAVELENGTH_TICKS else 0.0)


def draw_curved_arrow(sink, radius: float, start_angle: float, stop_angle: float) -> None:
    """Arc from start_angle to stop_angle with an arrow head at the stop end."""
    clockwise = start_angle > stop_angle
    with sink.saved():
        sink.new_path()
        sink.set_line_width(sr_pct(0.2))
        if clockwise:
            sink.arc_negative(0.0, 0.0, radius, start_angle, stop_angle)
        else:
            sink.arc(0.0, 0.0, radius, start_angle, stop_angle)
        sink.stroke()

        sink.rotate(stop_angle)
        sink.set_line_width(0.0)
        sink.new_path()
        sink.move_to(radius, 0.0)
        sink.rel_line_to(sr_pct(0.7), sr_pct(2.0 if clockwise else -2.0))
        sink.rel_line_to(sr_pct(-0.7), sr_pct(-0.8 if clockwise else 0.8))
        sink.rel_line_to(sr_pct(-0.7), sr_pct(0.8 if clockwise else -0.8))
        sink.close_path()
        sink.fill()


def draw_wavelength_ring(sink, font_family: str) -> None:
    """Wavelengths toward generator (outside) and toward load (inside)."""
    with sink.saved():
        sink.set_line_width(STROKE_WIDTH_MINOR)
        sink.select_font_face(font_family)
        sink.set_font_size(LABEL_FONT_SIZE)

        sink.new_path()
        sink.arc(0.0, 0.0, WAVE_RING_RADIUS, 0.0, 2.0 * math.pi)
        sink.stroke()

        for tick in range(1, WAVELENGTH_TICKS + 1):
            with sink.saved():
                sink.rotate(tick * WAVELENGTH_STEP)
                sink.move_to(-(WAVE_RING_RADIUS + sr_pct(0.8)), 0.0)
                sink.rel_line_to(sr_pct(1.6), 0.0)
                sink.stroke()

            text = wavelength_label(tick)
            if text is None:
                continue
            with sink.saved():
                sink.rotate(tick * WAVELENGTH_STEP)
                sink.translate(-(WAVE_RING_RADIUS - sr_pct(1.25) - LABEL_FONT_SIZE), 0.0)
                sink.rotate(math.pi / 2.0)
                centre_justified_text(sink, text, 0.0, 0.0)
            with sink.saved():
                sink.rotate(-tick * WAVELENGTH_STEP)
                sink.translate(-(WAVE_RING_RADIUS + sr_pct(1.5)), 0.0)
                sink.rotate(math.pi / 2.0)
                centre_justified_text(sink, text, 0.0, 0.0)

        circle_text(sink, "WAVELENGTHS TOWARD GENERATOR", WAVE_RING_RADIUS + sr_pct(1.25), math.radians(165.6))
        circle_text(sink, "WAVELENGTHS TOWARD LOAD", WAVE_RING_RADIUS - sr_pct(3.0), math.radians(-165.5))

        draw_curved_arrow(sink, WAVE_RING_RADIUS + sr_pct(2.0), math.radians(178.2), math.radians(174.9))
        draw_curved_arrow(sink, WAVE_RING_RADIUS + sr_pct(2.0), math.radians(156.3), math.radians(153.0))
        draw_curved_arrow(sink, WAVE_RING_RADIUS - sr_pct(2.1), math.radians(-176.8), math.radians(-173.6))
        draw_curved_arrow(sink, WAVE_RING_RADIUS - sr_pct(2.1), math.radians(-157.5), math.radians(-154.2))

        sink.new_path()
        sink.set_line_width(STROKE_WIDTH_MINOR)
        sink.arc(0.0, 0.0, OUTER_BOUNDARY_WITH_RING, 0.0, 2.0 * math.pi)
        sink.stroke()


def print_normal_to_radial(sink, radial_angle: float, radial_distance: float, text: str) -> None:
    """Centre ``text`` across a radial line (the top of a T) at the given distance."""
    with sink.saved():
        sink.rotate(radial_angle)
        sink.translate(radial_distance, 0.0)
        sink.rotate(-math.pi / 2.0)
        centre_justified_text(sink, text, 0.0, 0.0)


def find_radial_distance(angle_degrees: float, unit_radius: float = SMITH_RADIUS,
                         ring_radius: float = ANGLE_RING_RADIUS) -> float:
    """
    Distance from (-unit_radius, 0) to the angle ring along a line at ``angle_degrees``.

    The transmission-coefficient scale is read from the left pole of the chart:
    a line leaving (-unit_radius, 0) at angle theta meets the ring (radius
    ring_radius, centered on the origin) at the returned distance. By the sine
    rule in the triangle (origin, pole, meeting point):
    distance = sin(pi - theta - asin(sin(theta) * unit / ring)) * ring / sin(theta).

    Args:
        angle_degrees: Angle of the line in degrees, strictly between 0 and 180.
        unit_radius: Radius of the Smith grid.
        ring_radius: Radius of the angle ring (must exceed unit_radius).

    Raises:
        InvalidArgumentError: For angles outside (0, 180) or a ring inside the grid.
    """
    if not 0.0 < angle_degrees < 180.0:
        raise InvalidArgumentError(f"Angle {angle_degrees} outside (0, 180) degrees")
    if ring_radius < unit_radius:
        raise InvalidArgumentError("The angle ring must lie outside the unit circle")
    theta = math.radians(angle_degrees)
    inner = math.asin(math.sin(theta) * unit_radius / ring_radius)
    return math.sin(math.pi - theta - inner) * ring_radius / math.sin(theta)


@dataclass(frozen=True)
class AngleScaleTick:
    degrees: int
    radial: float
    length: float
    label: Optional[str]
    negative_label: Optional[str]


def angle_scale_ticks(unit_radius: float = SMITH_RADIUS,
                      ring_radius: float = ANGLE_RING_RADIUS) -> List[AngleScaleTick]:
    """Ticks of the transmission-coefficient scale, from 90 degrees down to 1."""
    ticks = []
    for deg in range(90, 0, -1):
        labelled = deg >= 10 and deg % 5 == 0
        ticks.append(AngleScaleTick(
            degrees=deg,
            radial=find_radial_distance(deg, unit_radius, ring_radius),
            length=sr_pct(1.5 if deg <= 55 else 2.0),
            label="%d" % deg if labelled else None,
            negative_label="%d" % -deg if labelled else None,
        ))
    return ticks


def draw_angle_ring(sink) -> None:
    """Angle of reflection (on the ring) and of transmission (from the left pole) coefficients."""
    with sink.saved():
        sink.set_line_width(STROKE_WIDTH_MINOR)
        sink.new_path()
        sink.arc(0.0, 0.0, ANGLE_RING_RADIUS, 0.0, 2.0 * math.pi)
        sink.stroke()
        sink.arc(0.0, 0.0, ANGLE_RING_RADIUS + sr_pct(3.5), 0.0, 2.0 * math.pi)
        sink.stroke()

        with sink.saved():
            for _ in range(0, 179, 2):
                sink.move_to(-ANGLE_RING_RADIUS, 0.0)
                sink.rel_line_to(sr_pct(-1.5), 0.0)
                sink.stroke()
                sink.move_to(ANGLE_RING_RADIUS, 0.0)
                sink.rel_line_to(sr_pct(1.5), 0.0)
                sink.stroke()
                sink.rotate(math.radians(2.0))

        for deg in range(20, 171, 10):
            print_normal_to_radial(sink, math.radians(deg), ANGLE_RING_RADIUS + sr_pct(1.0), "%d" % deg)
            print_normal_to_radial(sink, math.radians(-deg), ANGLE_RING_RADIUS + sr_pct(1.0), "%d" % -deg)
        print_normal_to_radial(sink, math.radians(180.0), ANGLE_RING_RADIUS + sr_pct(1.0), "±180")

        with sink.saved():
            sink.translate(-SMITH_RADIUS, 0.0)
            for tick in angle_scale_ticks():
                deg = tick.degrees
                with sink.saved():
                    sink.rotate(math.radians(deg))
                    sink.move_to(tick.radial, 0.0)
                    sink.rel_line_to(-tick.length, 0.0)
                    sink.stroke()
                    if tick.label:
                        sink.move_to(tick.radial - sr_pct(0.85), 0.0)
                        sink.rel_move_to(
                            -sink.text_extents(tick.label).x_advance - LABEL_FONT_SIZE * deg / 90.0,
                            -LABEL_FONT_SIZE * (0.33 if deg <= 45 else deg / 90.0))
                        sink.show_text(tick.label)
                with sink.saved():
                    sink.rotate(math.pi - math.radians(deg))
                    sink.move_to(-tick.radial, 0.0)
                    sink.rel_line_to(tick.length, 0.0)
                    sink.stroke()
                    if tick.negative_label:
                        sink.move_to(-tick.radial + LABEL_FONT_SIZE / (3.0 if deg < 45 else 2.0),
                                     -LABEL_FONT_SIZE * (0.5 if deg <= 45 else deg / 90.0))
                        sink.show_text(tick.negative_label)

    circle_text(sink, "ANGLE OF REFLECTION COEFFICIENT IN DEGREES", ANGLE_RING_RADIUS + sr_pct(1.0), 0.0)
    circle_text(sink, "ANGLE OF TRANSMISSION COEFFICIENT IN DEGREES", ANGLE_RING_RADIUS - sr_pct(2.7), 0.0)
