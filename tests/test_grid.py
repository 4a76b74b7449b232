import math
from collections import defaultdict
import pytest
from smithchart.core.grid import (
    REACTANCE, RESISTANCE, boundary_arcs, draw_immittance_grid, iter_block_arcs, iter_grid_arcs,
)
from smithchart.core.regions import RegionSet
from smithchart.core.types import RX, STROKE_WIDTH_MAJOR, STROKE_WIDTH_MINOR

def _finite(spec):
    return all(math.isfinite(v) for v in (spec.center.U, spec.center.V, spec.radius, spec.start, spec.end))

@pytest.mark.parametrize("region_set", list(RegionSet))
def test_every_arc_is_finite_and_inside_the_chart(region_set):
    for grid_arc in iter_grid_arcs(region_set):
        assert _finite(grid_arc.spec)
        assert grid_arc.width in (STROKE_WIDTH_MAJOR, STROKE_WIDTH_MINOR)
        # every grid circle sits inside the unit circle
        center = math.hypot(grid_arc.spec.center.U, grid_arc.spec.center.V)
        assert center - grid_arc.spec.radius >= -1.0 - 1e-9

def test_block_ticks_and_majors():
    arcs = list(iter_block_arcs(RX(0.0, 0.5), RX(1.0, 1.0), 0.1, 2))
    r_arcs = [a for a in arcs if a.kind == RESISTANCE]
    x_arcs = [a for a in arcs if a.kind == REACTANCE]
    # 10 resistance values, each with a mirrored twin
    assert len(r_arcs) == 20
    assert sorted({round(a.value, 9) for a in r_arcs}) == [round(0.1 * k, 9) for k in range(1, 11)]
    # reactance from 0.5 (exclusive) to 1.0 in 0.1 steps, positive and negative
    assert sorted(round(a.value, 9) for a in x_arcs) == sorted(
        [round(0.5 + 0.1 * k, 9) for k in range(1, 6)] + [round(-0.5 - 0.1 * k, 9) for k in range(1, 6)])
    for a in arcs:
        assert a.is_major == (a.tick % 2 == 0)

def test_tick_count_survives_float_drift():
    # 0.2 / 0.02 is 9.999... in binary floating point
    arcs = [a for a in iter_block_arcs(RX(0.0, 0.0), RX(0.2, 0.0), 0.02, 5) if a.kind == RESISTANCE]
    assert max(a.tick for a in arcs) == 10

@pytest.mark.parametrize("region_set", list(RegionSet))
def test_major_lines_at_multiples_of_ticks_per_major(region_set):
    regions = region_set.regions
    by_band = defaultdict(list)
    for grid_arc in iter_grid_arcs(region_set):
        if grid_arc.band is not None and grid_arc.tick:
            by_band[grid_arc.band].append(grid_arc)
    assert by_band
    for band, arcs in by_band.items():
        per_major = regions[band].minor_per_major
        ticks = {a.tick for a in arcs}
        for tick in ticks:
            if tick % per_major == 0:
                assert any(a.is_major for a in arcs if a.tick == tick), (band, tick)

def test_band_from_20_uses_bold_every_third_line_near_the_centerline():
    band = [a for a in iter_grid_arcs(RegionSet.STANDARD) if a.band == 7]
    r50 = [a for a in band if a.kind == RESISTANCE and a.value == pytest.approx(50.0) and a.tick == 3]
    r30 = [a for a in band if a.kind == RESISTANCE and a.value == pytest.approx(30.0)]
    assert r50 and all(a.is_major for a in r50)
    assert r30 and not any(a.is_major for a in r30)

def test_sparse_special_case_arcs():
    special = [a for a in iter_grid_arcs(RegionSet.SPARSE) if a.band == 5]
    assert len(special) == 4
    assert all(a.is_major and a.tick == 0 for a in special)
    assert sorted(a.value for a in special) == [-20.0, 20.0, 20.0, 20.0]

def test_boundary_arcs():
    standard = boundary_arcs(RegionSet.STANDARD)
    sparse = boundary_arcs(RegionSet.SPARSE)
    assert len(standard) == 4
    assert len(sparse) == 8
    assert sparse[:4] == standard
    assert {(a.kind, abs(a.value)) for a in sparse[4:]} == {(RESISTANCE, 10.0), (REACTANCE, 4.0)}
    assert all(a.is_major and a.band is None for a in sparse)

def test_sparse_grid_is_lighter():
    assert len(list(iter_grid_arcs(RegionSet.SPARSE))) < len(list(iter_grid_arcs(RegionSet.STANDARD)))

def test_draw_grid_strokes_each_arc_once(sink):
    count = draw_immittance_grid(sink, RegionSet.STANDARD)
    assert count == len(list(iter_grid_arcs(RegionSet.STANDARD)))
    # swept and boundary arcs, the outer circle, and the origin dot's three circles
    assert len(sink.calls_named("arc")) == count + 1 + 3
    outer = [c for c in sink.calls_named("arc") if c.args == (0.0, 0.0, 1.0, 0.0, 2.0 * math.pi)]
    assert len(outer) == 1
    assert outer[0].line_width == STROKE_WIDTH_MAJOR

def test_draw_grid_centerline_and_dot(sink):
    draw_immittance_grid(sink, RegionSet.SPARSE)
    assert [c.args for c in sink.calls_named("line_to")] == [(1.0, 0.0)]
    erased = [p for p in sink.painted if p.kind == "erase"]
    assert len(erased) == 1
    # the origin dot is painted last
    assert [p.kind for p in sink.painted[-3:]] == ["erase", "stroke", "stroke"]

def test_draw_grid_logs(sink, dummy_logger):
    draw_immittance_grid(sink, RegionSet.SPARSE)
    assert "Drew sparse grid" in dummy_logger.text
