# smithchart/core/options.py
from dataclasses import dataclass
from typing import Optional

from smithchart.core.regions import RegionSet
from smithchart.core.types import LABEL_FONT, RGBA


@dataclass
class ChartOptions:
    """
    Per-chart configuration.

    Widths are percentages of the grid radius; colors are RGBA in 0..1.
    ``annotation_font_size`` is also a percentage of the radius, with 0 meaning
    twice the grid label size. The defaults reproduce the classic impedance
    chart: red RX grid with rings, no GB grid.
    """
    show_rx: bool = True
    show_gb: bool = False
    show_labels: bool = True
    show_strings: bool = True
    draw_ring: bool = True
    # use when both RX and GB are shown together (like Form ZY-01-N)
    sparse_gb: bool = True

    line_width: float = 0.25
    point_width: float = 0.6

    rx_grid: RGBA = (0.7, 0.0, 0.0, 1.0)
    gb_grid: RGBA = (0.0, 0.5, 0.5, 1.0)
    rx_text: RGBA = (0.5, 0.0, 0.0, 1.0)
    gb_text: RGBA = (0.0, 0.5, 0.5, 1.0)
    ring: RGBA = (0.0, 0.0, 0.0, 1.0)
    line: RGBA = (0.0, 0.0, 0.5, 1.0)
    annotation: RGBA = (0.0, 0.5, 0.0, 1.0)

    label_font: str = LABEL_FONT
    annotation_font: Optional[str] = None
    annotation_font_size: float = 0.4

    @property
    def gb_region_set(self) -> RegionSet:
        return RegionSet.SPARSE if self.sparse_gb else RegionSet.STANDARD

    @property
    def rx_region_set(self) -> RegionSet:
        return RegionSet.STANDARD


DEFAULT_OPTIONS = ChartOptions()
