# smithchart/core/curves.py
"""
Smooth interpolation of a point series with cubic Bézier segments.

Each segment P1 -> P2 takes its tangents from the neighbouring segments
(P0 -> P1 before it, P2 -> P3 after it). Control points sit on those tangents
at CURVE_F times the segment length from the endpoints. The series is open:
the first and last segments get a control point on their outer endpoint so the
curve does not overshoot.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.types import Line, UV

# Curviness: how far control points sit from their endpoints, as a fraction of the segment length.
CURVE_F = 0.25


@dataclass(frozen=True)
class BezierSegment:
    start: UV
    c1: UV
    c2: UV
    end: UV


def _angle(line: Line) -> float:
    return math.atan2(line.B.V - line.A.V, line.B.U - line.A.U)


def bezier_control_points(g: Line, l: Line) -> Tuple[UV, UV]:
    """
    Control points for the segment h joining g.B to l.A.

    Args:
        g: The line before h (P0 -> P1).
        l: The line after h (P2 -> P3).

    Returns:
        The first and second control points of h.
    """
    # length of h (P1 -> P2)
    lgt = math.hypot(g.B.U - l.A.U, g.B.V - l.A.V)

    # tangent at P1: from a point lgt back along g, through P2
    tangent = Line(UV(g.B.U - lgt * math.cos(_angle(g)), g.B.V - lgt * math.sin(_angle(g))), l.A)
    a = _angle(tangent)
    p1 = UV(g.B.U + lgt * math.cos(a) * CURVE_F, g.B.V + lgt * math.sin(a) * CURVE_F)

    # tangent at P2: from P1, through a point lgt forward along l
    tangent = Line(g.B, UV(l.A.U + lgt * math.cos(_angle(l)), l.A.V + lgt * math.sin(_angle(l))))
    a = _angle(tangent)
    p2 = UV(l.A.U - lgt * math.cos(a) * CURVE_F, l.A.V - lgt * math.sin(a) * CURVE_F)
    return p1, p2


def fit_bezier_segments(points: Sequence[UV]) -> List[BezierSegment]:
    """
    Fit an open, smooth cubic curve through ``points``.

    Args:
        points: Two or more gamma-space points, in order.

    Returns:
        len(points) - 1 segments; segment i runs exactly from points[i] to points[i + 1].

    Raises:
        InvalidArgumentError: If fewer than two points are given.
    """
    pts = [UV(*p) for p in points]
    length = len(pts)
    if length < 2:
        raise InvalidArgumentError(f"A curve needs at least 2 points, got {length}")

    segments = []
    for i in range(1, length):
        # neighbour indices wrap, but the wrapped neighbours never reach the output:
        # the first c1 and the last c2 are replaced below
        g = Line(pts[(i + length - 2) % length], pts[i - 1])
        l = Line(pts[i], pts[(i + 1) % length])
        c1, c2 = bezier_control_points(g, l)
        if i == 1:
            c1 = g.B
        if i == length - 1:
            c2 = l.A
        segments.append(BezierSegment(pts[i - 1], c1, c2, pts[i]))
    return segments
