# smithchart/core/types.py
"""
Value types and chart-wide constants.

All geometry is computed on a chart whose unit (|Γ| = 1) circle has radius
SMITH_RADIUS. The composer scales that space onto the drawing surface, so
points, lines and annotations can be given directly in gamma coordinates.
"""
from typing import NamedTuple, Tuple

RGBA = Tuple[float, float, float, float]


class RX(NamedTuple):
    """Normalized impedance (R + jX) or admittance (G + jB)."""
    R: float
    X: float


class UV(NamedTuple):
    """Cartesian point in gamma (reflection coefficient) space."""
    U: float
    V: float


class Line(NamedTuple):
    """Directed segment from A to B, used when deriving curve control points."""
    A: UV
    B: UV


SMITH_RADIUS = 1.0
LABEL_FONT = "Nimbus Sans"
LABEL_FONT_SIZE = SMITH_RADIUS / 55.0

STROKE_WIDTH_THIN = SMITH_RADIUS / 2000
STROKE_WIDTH_MINOR = SMITH_RADIUS / 1500
STROKE_WIDTH_MAJOR = SMITH_RADIUS / 500

WAVE_RING_RADIUS = 1.115 * SMITH_RADIUS
ANGLE_RING_RADIUS = 1.038 * SMITH_RADIUS
OUTER_BOUNDARY_WITH_RING = WAVE_RING_RADIUS + (WAVE_RING_RADIUS - ANGLE_RING_RADIUS) / 2.0


def sr_pct(x: float) -> float:
    """Percentage of the Smith grid radius."""
    return SMITH_RADIUS / 100.0 * x
