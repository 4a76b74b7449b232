import dataclasses
import math
import pytest
from smithchart.core.labels import (
    LEFT, RIGHT, centre_justified_text, circle_text, draw_gb_grid_text, draw_labels, draw_rx_grid_text,
    iter_value_labels, left_justified_clear_text, right_justified_clear_text,
)
from smithchart.core.options import ChartOptions
from smithchart.core.regions import LABELS
from smithchart.core.types import LABEL_FONT_SIZE, sr_pct
from smithchart.render.recording import ADVANCE, ASCENT, RecordingSink

def test_value_label_count():
    placements = list(iter_value_labels())
    # three per value along the rim and axis, four per value on the unit arcs
    assert len(placements) == 3 * (len(LABELS) - 1) + 4 * 5

def test_rim_and_axis_placements():
    placements = list(iter_value_labels())
    margin = LABEL_FONT_SIZE / 4.0
    upper, lower, axis = placements[:3]
    assert upper.text == lower.text == axis.text == "0.1"
    assert upper.justify == RIGHT and upper.x == pytest.approx(1.0 - margin)
    assert lower.justify == LEFT and lower.x == pytest.approx(-1.0 + margin)
    # the rim label for +X points at the rim, the -X one is turned a half circle
    assert upper.rotation == pytest.approx(math.atan2(0.2, -0.99))
    assert lower.rotation == pytest.approx(math.atan2(-0.2, -0.99) + math.pi)
    assert axis.rotation == pytest.approx(math.pi / 2.0)
    assert all(p.origin == (0.0, 0.0) for p in placements[:3 * (len(LABELS) - 1)])

def test_unit_arc_placements_are_anchored_on_the_grid():
    arc_placements = list(iter_value_labels())[3 * (len(LABELS) - 1):]
    for placement in arc_placements:
        assert math.hypot(*placement.origin) < 1.0
    # R = 1 and X = 1 cross at (0.2, 0.4)
    assert arc_placements[-4].text == "1.0"
    assert arc_placements[-4].origin == pytest.approx((0.2, 0.4))

def test_left_justified_text_erases_its_box_first(sink):
    sink.set_font_size(0.1)
    left_justified_clear_text(sink, "0.5", 0.2, 0.3)
    ops = [call.op for call in sink.calls]
    assert ops.index("erase") < ops.index("show_text")
    rect = sink.calls_named("rectangle")[0]
    assert rect.args == pytest.approx((0.2, 0.3, ADVANCE * 0.1 * 3, ASCENT * 0.1))
    assert sink.texts[0].matrix[4:] == pytest.approx((0.2, 0.3))

def test_right_justified_text_ends_at_anchor(sink):
    sink.set_font_size(0.1)
    right_justified_clear_text(sink, "20", 1.0, 0.0)
    advance = ADVANCE * 0.1 * 2
    assert sink.texts[0].matrix[4:] == pytest.approx((1.0 - advance, 0.0))
    assert sink.current_point == pytest.approx((1.0, 0.0))
    assert sink.calls_named("rectangle")[0].args[0] == pytest.approx(1.0 - advance)

def test_centre_justified_text(sink):
    sink.set_font_size(0.1)
    centre_justified_text(sink, "0.25", 0.0, 0.0)
    assert sink.texts[0].matrix[4] == pytest.approx(-ADVANCE * 0.1 * 2)
    assert not sink.calls_named("erase")

def _char_center_angle(painted, size):
    # glyph origin is the character's left baseline; its center is half an advance along x
    xx, yx, _, _, x0, y0 = painted.matrix
    half = ADVANCE * size / 2.0
    return math.atan2(y0 + yx * half, x0 + xx * half)

def test_circle_text_is_centered_on_target_angle(sink):
    size, radius, angle = 0.1, 1.0, 0.5
    sink.set_font_size(size)
    circle_text(sink, "ABC", radius, angle)
    assert [t.text for t in sink.texts] == ["A", "B", "C"]
    first = _char_center_angle(sink.texts[0], size)
    last = _char_center_angle(sink.texts[-1], size)
    assert (first + last) / 2.0 == pytest.approx(angle)
    # reads clockwise
    assert first > _char_center_angle(sink.texts[1], size) > last
    assert sink.depth == 0

def test_circle_text_erases_a_band_under_the_text(sink):
    sink.set_font_size(0.1)
    circle_text(sink, "WAVELENGTHS", 1.1, 2.0, 0.5, -0.5)
    erases = [p for p in sink.painted if p.kind == "erase"]
    assert len(erases) == 1
    ops = [call.op for call in sink.calls]
    assert ops.index("erase") < ops.index("show_text")

def test_draw_labels_paints_every_value(sink):
    draw_labels(sink, "Nimbus Sans")
    assert len(sink.texts) == len(list(iter_value_labels()))
    assert len([p for p in sink.painted if p.kind == "erase"]) == len(sink.texts)
    assert sink.texts[0].font.family == "Nimbus Sans"
    assert sink.texts[0].size == LABEL_FONT_SIZE

def _resistance_title_y(options):
    sink = RecordingSink()
    sink.set_font_size(LABEL_FONT_SIZE)
    draw_rx_grid_text(sink, options)
    title = [t for t in sink.texts if t.text == "RESISTANCE COMPONENT (R/Zo)"]
    assert len(title) == 1
    return title[0].matrix[5]

def test_resistance_title_moves_down_when_both_grids_are_shown():
    alone = _resistance_title_y(ChartOptions(show_gb=False))
    both = _resistance_title_y(ChartOptions(show_gb=True))
    assert alone == pytest.approx(-(LABEL_FONT_SIZE + sr_pct(0.8)))
    assert both == pytest.approx(alone - LABEL_FONT_SIZE - sr_pct(0.4))

def test_rx_text_respects_toggles(sink):
    draw_rx_grid_text(sink, ChartOptions(show_labels=False, show_strings=False))
    assert not sink.texts
    draw_rx_grid_text(sink, dataclasses.replace(ChartOptions(), show_strings=False))
    assert all(t.rgba == ChartOptions().rx_text for t in sink.texts)

CAPACITIVE_TITLE = "CAPACITIVE SUSCEPTANCE COMPONENT (+jX/Yo)"
INDUCTIVE_TITLE = "INDUCTIVE SUSCEPTANCE COMPONENT (-jB/Yo)"

def _admittance_titles(options):
    sink = RecordingSink()
    sink.set_font_size(LABEL_FONT_SIZE)
    draw_gb_grid_text(sink, dataclasses.replace(options, show_labels=False))
    first = len(CAPACITIVE_TITLE)
    second = first + len(INDUCTIVE_TITLE)
    assert "".join(t.text for t in sink.texts[:first]) == CAPACITIVE_TITLE
    assert "".join(t.text for t in sink.texts[first:second]) == INDUCTIVE_TITLE
    assert [t.text for t in sink.texts[second:]] == ["CONDUCTANCE COMPONENT (G/Yo)"]
    return sink.texts[:first], sink.texts[first:second], sink.texts[second]

def _title_center(chars):
    return (_char_center_angle(chars[0], LABEL_FONT_SIZE) + _char_center_angle(chars[-1], LABEL_FONT_SIZE)) / 2.0

@pytest.mark.parametrize("show_rx, degrees", [(False, 141.7), (True, 114.7)])
def test_susceptance_titles_make_room_for_impedance_titles(show_rx, degrees):
    capacitive, inductive, _ = _admittance_titles(ChartOptions(show_rx=show_rx, show_gb=True))
    assert _title_center(capacitive) == pytest.approx(math.radians(degrees))
    assert _title_center(inductive) == pytest.approx(-math.radians(degrees))

def test_conductance_title_moves_up_when_both_grids_are_shown():
    *_, alone = _admittance_titles(ChartOptions(show_rx=False, show_gb=True))
    *_, both = _admittance_titles(ChartOptions(show_rx=True, show_gb=True))
    assert alone.matrix[4:] == pytest.approx((sr_pct(-32.5), sr_pct(1.6)))
    assert both.matrix[4] == pytest.approx(sr_pct(-32.5))
    assert both.matrix[5] == pytest.approx(alone.matrix[5] + LABEL_FONT_SIZE + sr_pct(0.4))
    # the titles read upright even though the labels are drawn half-turned
    assert both.matrix[:4] == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=1e-12)

def test_admittance_labels_are_impedance_labels_turned_a_half_circle():
    options = ChartOptions(show_gb=True, show_strings=False)
    impedance, admittance = RecordingSink(), RecordingSink()
    draw_rx_grid_text(impedance, options)
    draw_gb_grid_text(admittance, options)
    assert [t.text for t in admittance.texts] == [t.text for t in impedance.texts]
    for rx, gb in zip(impedance.texts, admittance.texts):
        assert gb.matrix == pytest.approx(tuple(-v for v in rx.matrix), abs=1e-12)
    assert all(t.rgba == options.gb_text for t in admittance.texts)
    assert admittance.depth == 0
