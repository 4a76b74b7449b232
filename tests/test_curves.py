import math
import pytest
from smithchart.core.curves import CURVE_F, bezier_control_points, fit_bezier_segments
from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.types import Line, UV

def test_two_points_give_a_straight_segment():
    a, b = UV(-0.3, 0.4), UV(0.5, 0.2)
    segments = fit_bezier_segments([a, b])
    assert len(segments) == 1
    seg = segments[0]
    assert (seg.start, seg.c1, seg.c2, seg.end) == (a, a, b, b)

def test_segments_hit_every_point_exactly():
    points = [UV(-0.3, 0.4), UV(-0.1, 0.5), UV(0.2, 0.45), UV(0.5, 0.2), UV(0.6, -0.1)]
    segments = fit_bezier_segments(points)
    assert len(segments) == len(points) - 1
    for i, seg in enumerate(segments):
        assert seg.start == points[i]
        assert seg.end == points[i + 1]
    # open curve: outer control points sit on the outer endpoints
    assert segments[0].c1 == points[0]
    assert segments[-1].c2 == points[-1]

def test_collinear_points_keep_controls_on_the_line():
    points = [UV(float(i), 0.0) for i in range(4)]
    middle = fit_bezier_segments(points)[1]
    assert middle.c1.U == pytest.approx(1.0 + CURVE_F)
    assert middle.c2.U == pytest.approx(2.0 - CURVE_F)
    assert middle.c1.V == pytest.approx(0.0, abs=1e-12)
    assert middle.c2.V == pytest.approx(0.0, abs=1e-12)

def test_control_points_follow_neighbour_tangents():
    # points on a circle: the tangent at P1 is parallel to P0 -> P2
    pts = [UV(math.cos(a), math.sin(a)) for a in (0.0, 0.5, 1.0, 1.5)]
    p1, p2 = bezier_control_points(Line(pts[0], pts[1]), Line(pts[2], pts[3]))
    chord = math.hypot(pts[2].U - pts[1].U, pts[2].V - pts[1].V)
    assert math.hypot(p1.U - pts[1].U, p1.V - pts[1].V) == pytest.approx(chord * CURVE_F)
    assert math.hypot(p2.U - pts[2].U, p2.V - pts[2].V) == pytest.approx(chord * CURVE_F)
    # control points bulge outward, away from the chord
    assert math.hypot(*p1) > math.hypot((pts[1].U + pts[2].U) / 2.0, (pts[1].V + pts[2].V) / 2.0)

def test_accepts_plain_tuples():
    segments = fit_bezier_segments([(0.0, 0.0), (0.1, 0.1), (0.2, 0.0)])
    assert isinstance(segments[0].start, UV)

def test_repeated_points_stay_finite():
    segments = fit_bezier_segments([UV(0.1, 0.1), UV(0.1, 0.1), UV(0.3, 0.2)])
    for seg in segments:
        for point in (seg.c1, seg.c2):
            assert all(math.isfinite(c) for c in point)

@pytest.mark.parametrize("points", [[], [UV(0.0, 0.0)]])
def test_too_few_points(points):
    with pytest.raises(InvalidArgumentError):
        fit_bezier_segments(points)
