# smithchart/core/arcs.py
"""
Resistance and reactance arc geometry.

Every grid line of the chart is a piece of a circle: constant-R circles are
centered on the real axis at r/(r+1), constant-X circles on the U = 1 line at
1/x. An arc is bounded by where it meets two lines of the orthogonal family;
those meeting points are transformed to gamma space and their angles about the
circle's center give the start and end of the arc.
"""
from dataclasses import dataclass

from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.transform import angle_of_reactance_arc, angle_of_resistance_arc
from smithchart.core.types import RX, SMITH_RADIUS, UV


@dataclass(frozen=True)
class ArcSpec:
    """A positive-direction arc in gamma space (angles in radians)."""
    center: UV
    radius: float
    start: float
    end: float


def resistance_arc(r_arc: float, x_from: float, x_to: float) -> ArcSpec:
    """
    Arc of the R = r_arc circle between the X = x_from and X = x_to arcs.

    Raises:
        InvalidArgumentError: If r_arc is -1 (the circle degenerates to a line).
    """
    if r_arc == -1.0:
        raise InvalidArgumentError("Cannot draw the R = -1 circle")
    center = UV(r_arc / (r_arc + 1.0), 0.0)
    radius = 1.0 / (r_arc + 1.0)
    theta1 = angle_of_resistance_arc(RX(r_arc, x_from))
    theta2 = angle_of_resistance_arc(RX(r_arc, x_to))
    return ArcSpec(center, radius, theta1, theta2)


def reactance_arc(x_arc: float, r_from: float, r_to: float) -> ArcSpec:
    """
    Arc of the X = x_arc circle between the R = r_from and R = r_to circles.

    Raises:
        InvalidArgumentError: If x_arc is 0 (the real axis is a line, not an arc).
    """
    if x_arc == 0.0:
        raise InvalidArgumentError("Cannot draw the X = 0 arc")
    # The centers of the X curves are all on the U = 1 line
    center = UV(1.0, 1.0 / x_arc)
    radius = abs(center.V)
    theta1 = angle_of_reactance_arc(RX(r_from, x_arc))
    theta2 = angle_of_reactance_arc(RX(r_to, x_arc))
    return ArcSpec(center, radius, theta1, theta2)


def draw_arc(sink, spec: ArcSpec) -> None:
    """Emit one arc, scaled to the unit radius, and stroke it with the sink's current state."""
    sink.arc(spec.center.U * SMITH_RADIUS, spec.center.V * SMITH_RADIUS,
             spec.radius * SMITH_RADIUS, spec.start, spec.end)
    sink.stroke()
