# smithchart/core/regions.py
"""
Grid density tables.

A Smith grid drawn at one uniform spacing is unreadable near the rim, so the
chart is split into bands. Each band keeps its own minor spacing and draws a
bold line every ``minor_per_major`` minor lines. The tables reproduce the
classic Kay Electric 82-BSPR chart (standard) and Form ZY-01-N (sparse).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

END = -1
SPECIAL_CASE = 0


@dataclass(frozen=True)
class Region:
    """One band: ``boundary`` is where the band starts, the next entry's boundary where it ends."""
    boundary: float
    minor_div: float
    minor_per_major: int

    @property
    def is_end(self) -> bool:
        return self.minor_per_major == END

    @property
    def is_special_case(self) -> bool:
        return self.minor_per_major == SPECIAL_CASE


@dataclass(frozen=True)
class Label:
    value: float
    text: str


LABELS: Tuple[Label, ...] = (
    Label(0.0, "0"), Label(0.1, "0.1"), Label(0.2, "0.2"), Label(0.3, "0.3"), Label(0.4, "0.4"),
    Label(0.5, "0.5"), Label(0.6, "0.6"), Label(0.7, "0.7"), Label(0.8, "0.8"), Label(0.9, "0.9"),
    Label(1.0, "1.0"), Label(1.2, "1.2"), Label(1.4, "1.4"), Label(1.6, "1.6"), Label(1.8, "1.8"),
    Label(2.0, "2.0"), Label(3.0, "3.0"), Label(4.0, "4.0"), Label(5.0, "5.0"),
    Label(10.0, "10"), Label(20.0, "20"), Label(50.0, "50"),
)

STANDARD_REGIONS: Tuple[Region, ...] = (
    Region(0.0, 0.01, 5), Region(0.2, 0.02, 5), Region(0.5, 0.05, 2), Region(1.0, 0.10, 2),
    Region(2.0, 0.20, 5), Region(5.0, 1.00, 5), Region(10.0, 2.00, 5), Region(20.0, 10.00, 5),
    Region(50.0, 0.00, END),
)

SPARSE_REGIONS: Tuple[Region, ...] = (
    Region(0.0, 0.1, 5), Region(1.0, 0.2, 5), Region(2.0, 0.5, 2),
    Region(4.0, 1.0, 6), Region(10.0, 5.0, 2), Region(20.0, 30.0, SPECIAL_CASE),
    Region(50.0, 0.0, END),
)


class RegionSet(Enum):
    """Named grid densities; the renderer is always told explicitly which one to draw."""
    STANDARD = "standard"
    SPARSE = "sparse"

    @property
    def regions(self) -> Tuple[Region, ...]:
        return SPARSE_REGIONS if self is RegionSet.SPARSE else STANDARD_REGIONS

    def bands(self):
        """Yield ``(index, region, next_region)`` for every band before the END marker."""
        regions = self.regions
        for index, region in enumerate(regions):
            if region.is_end:
                return
            yield index, region, regions[index + 1]
