# smithchart/core/grid.py
"""
Immittance grid generation.

The grid is produced in two steps: ``iter_grid_arcs`` walks a RegionSet and
yields every arc as pure geometry, ``draw_immittance_grid`` strokes them on a
drawing sink together with the center line, the outer circle and the origin
dot. The admittance (GB) grid is the same drawing under a half-turn rotation.
"""
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

from smithchart.core.arcs import ArcSpec, draw_arc, reactance_arc, resistance_arc
from smithchart.core.regions import RegionSet
from smithchart.core.types import (
    RX, SMITH_RADIUS, STROKE_WIDTH_MAJOR, STROKE_WIDTH_MINOR, STROKE_WIDTH_THIN,
)
from smithchart.utils.logging_config import get_logger

logger = get_logger(__name__)

RESISTANCE = "R"
REACTANCE = "X"

# Far enough out along X (or R) that the R = 50 / X = 50 arcs close onto the rim.
_RIM = 10000.0

# Band of the standard table starting at 20: its centerline block uses a bold
# line every 3rd minor line instead of the table's 5. Matches the printed chart.
_CENTERLINE_OVERRIDE_INDEX = 7
_CENTERLINE_OVERRIDE_MINOR_PER_MAJOR = 3


@dataclass(frozen=True)
class GridArc:
    """
    One stroked grid line.

    Attributes:
        kind: RESISTANCE for a constant-R circle, REACTANCE for a constant-X arc.
        value: The R (or X) value of the line.
        spec: Arc geometry in gamma space.
        width: Stroke width in unit-radius space.
        band: Index of the region that produced the line, or None for the fixed boundary arcs.
        tick: 1-based position of the line within its block (0 for hand-placed arcs).
    """
    kind: str
    value: float
    spec: ArcSpec
    width: float
    band: Optional[int] = None
    tick: int = 0

    @property
    def is_major(self) -> bool:
        return self.width == STROKE_WIDTH_MAJOR


def _r_arc(r: float, x_from: float, x_to: float, width: float, band=None, tick=0) -> GridArc:
    return GridArc(RESISTANCE, r, resistance_arc(r, x_from, x_to), width, band, tick)


def _x_arc(x: float, r_from: float, r_to: float, width: float, band=None, tick=0) -> GridArc:
    return GridArc(REACTANCE, x, reactance_arc(x, r_from, r_to), width, band, tick)


def _tick_count(start: float, end: float, minor_inc: float) -> int:
    # number of minor steps from start (exclusive) to end (inclusive) allowing for float drift
    return int(math.floor((end - start) / minor_inc + 0.5))


def iter_block_arcs(rx_start: RX, rx_end: RX, minor_inc: float, minor_per_major: int,
                    band: Optional[int] = None) -> Iterator[GridArc]:
    """
    Yield the arcs of two grid blocks mirrored about the X = 0 line.

    From rx_start.R to rx_end.R in minor_inc steps, resistance arcs run between
    rx_end.X and rx_start.X (and their mirror in -X). From rx_start.X to
    rx_end.X, reactance arcs run between rx_start.R and rx_end.R (and the
    mirrored negative reactance). Every minor_per_major-th line is bold.
    """
    for tick in range(1, _tick_count(rx_start.R, rx_end.R, minor_inc) + 1):
        r = rx_start.R + tick * minor_inc
        width = STROKE_WIDTH_MAJOR if tick % minor_per_major == 0 else STROKE_WIDTH_MINOR
        yield _r_arc(r, rx_end.X, rx_start.X, width, band, tick)
        yield _r_arc(r, -rx_start.X, -rx_end.X, width, band, tick)

    for tick in range(1, _tick_count(rx_start.X, rx_end.X, minor_inc) + 1):
        x = rx_start.X + tick * minor_inc
        width = STROKE_WIDTH_MAJOR if tick % minor_per_major == 0 else STROKE_WIDTH_MINOR
        yield _x_arc(x, rx_start.R, rx_end.R, width, band, tick)
        yield _x_arc(-x, rx_end.R, rx_start.R, width, band, tick)


def _special_case_arcs(band: int) -> List[GridArc]:
    # Hand-placed lines near the G = 20 circle of Form ZY-01-N; not derivable from the table.
    return [
        _r_arc(20.0, 50.0, 20.0, STROKE_WIDTH_MAJOR, band),
        _r_arc(20.0, -20.0, -50.0, STROKE_WIDTH_MAJOR, band),
        _x_arc(20.0, 20.0, 50.0, STROKE_WIDTH_MAJOR, band),
        _x_arc(-20.0, 50.0, 20.0, STROKE_WIDTH_MAJOR, band),
    ]


def boundary_arcs(region_set: RegionSet) -> List[GridArc]:
    """Fixed arcs drawn after the band sweep to close the R = 50 / X = 50 contours onto the rim."""
    arcs = [
        _r_arc(50.0, _RIM, 0.0, STROKE_WIDTH_MAJOR),
        _r_arc(50.0, 0.0, -_RIM, STROKE_WIDTH_MAJOR),
        _x_arc(50.0, 0.0, _RIM, STROKE_WIDTH_MAJOR),
        _x_arc(-50.0, _RIM, 0.0, STROKE_WIDTH_MAJOR),
    ]
    if region_set is RegionSet.SPARSE:
        # The sparse table leaves the R = 10 and X = 4 lines open toward the rim.
        arcs += [
            _r_arc(10.0, 10.0, 0.0, STROKE_WIDTH_MAJOR),
            _r_arc(10.0, 0.0, -10.0, STROKE_WIDTH_MAJOR),
            _x_arc(4.0, 4.0, 10.0, STROKE_WIDTH_MAJOR),
            _x_arc(-4.0, 10.0, 4.0, STROKE_WIDTH_MAJOR),
        ]
    return arcs


def iter_grid_arcs(region_set: RegionSet) -> Iterator[GridArc]:
    """
    Yield every arc of an immittance grid in drawing order.

    Args:
        region_set: Which density table to walk.
    """
    for index, region, next_region in region_set.bands():
        if region.is_special_case:
            yield from _special_case_arcs(index)
            continue

        minor_inc = region.minor_div
        minor_per_major = region.minor_per_major

        # block between the region's reactance boundaries, out to the next region
        yield from iter_block_arcs(RX(0.0, region.boundary),
                                   RX(next_region.boundary, next_region.boundary),
                                   minor_inc, minor_per_major, index)

        # block around the centerline between this region and the next
        if index == _CENTERLINE_OVERRIDE_INDEX:
            minor_per_major = _CENTERLINE_OVERRIDE_MINOR_PER_MAJOR
        yield from iter_block_arcs(RX(region.boundary, 0.0),
                                   RX(next_region.boundary, region.boundary),
                                   minor_inc, minor_per_major, index)

    yield from boundary_arcs(region_set)


def draw_origin_dot(sink) -> None:
    """Mark the chart center: a cleared disc with two thin concentric circles."""
    sink.new_path()
    sink.arc(0.0, 0.0, SMITH_RADIUS / 150, 0.0, 2.0 * math.pi)
    sink.erase()

    sink.set_line_width(STROKE_WIDTH_THIN)
    sink.arc(0.0, 0.0, SMITH_RADIUS / 150, 0.0, 2.0 * math.pi)
    sink.stroke()
    sink.arc(0.0, 0.0, SMITH_RADIUS / 800, 0.0, 2.0 * math.pi)
    sink.stroke()


def draw_immittance_grid(sink, region_set: RegionSet) -> int:
    """
    Stroke a complete immittance grid in the sink's current color.

    Args:
        sink: Drawing sink already scaled so the unit circle has radius SMITH_RADIUS.
        region_set: Density table to use.

    Returns:
        The number of arcs drawn by the band sweep and boundary patches.
    """
    arcs = list(iter_grid_arcs(region_set))
    boundary = boundary_arcs(region_set)
    swept = arcs[:len(arcs) - len(boundary)]

    width = None
    for grid_arc in swept:
        if grid_arc.width != width:
            width = grid_arc.width
            sink.set_line_width(width)
        draw_arc(sink, grid_arc.spec)

    sink.set_line_width(STROKE_WIDTH_MAJOR)
    # center resistance / conductance line (X = 0)
    sink.move_to(-SMITH_RADIUS, 0.0)
    sink.line_to(SMITH_RADIUS, 0.0)
    sink.stroke()
    # outer circle
    sink.arc(0.0, 0.0, SMITH_RADIUS, 0.0, 2.0 * math.pi)
    sink.stroke()

    for grid_arc in boundary:
        draw_arc(sink, grid_arc.spec)

    draw_origin_dot(sink)
    logger.debug("Drew %s grid: %d arcs", region_set.value, len(arcs))
    return len(arcs)
