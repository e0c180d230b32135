import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import assume, given, strategies as st  # type: ignore

from clipping.cohen_sutherland import clip_line
from clipping.outcode import Outcode, compute_outcode
from geometry import LineSegment, Point, Window

coord = st.floats(-100.0, 100.0, allow_nan=False, allow_infinity=False)


@st.composite
def windows(draw):
    x0, x1 = sorted((draw(coord), draw(coord)))
    y0, y1 = sorted((draw(coord), draw(coord)))
    # -0.0 を 0.0 に揃える（st.floats の下限/上限に使うため）
    return Window(x0 + 0.0, x1 + 0.0, y0 + 0.0, y1 + 0.0)


@st.composite
def segments(draw):
    return LineSegment(Point(draw(coord), draw(coord)), Point(draw(coord), draw(coord)))


@given(segment=segments(), window=windows())
def test_result_lies_inside_window(segment, window):
    out = clip_line(segment, window)
    if out is not None:
        assert compute_outcode(out.p1, window) == Outcode.INSIDE
        assert compute_outcode(out.p2, window) == Outcode.INSIDE


@given(segment=segments(), window=windows())
def test_clipping_is_idempotent(segment, window):
    out = clip_line(segment, window)
    if out is not None:
        assert clip_line(out, window) == out


@given(segment=segments(), window=windows())
def test_result_is_collinear_with_input(segment, window):
    out = clip_line(segment, window)
    assume(out is not None)
    dx = segment.p2.x - segment.p1.x
    dy = segment.p2.y - segment.p1.y
    length = math.hypot(dx, dy)
    assume(length > 1e-3)
    for q in (out.p1, out.p2):
        cross = dx * (q.y - segment.p1.y) - dy * (q.x - segment.p1.x)
        # 直線からの距離
        assert abs(cross) / length <= 1e-7


@st.composite
def contained(draw):
    window = draw(windows())
    xs = st.floats(window.x_min, window.x_max, allow_nan=False)
    ys = st.floats(window.y_min, window.y_max, allow_nan=False)
    segment = LineSegment(Point(draw(xs), draw(ys)), Point(draw(xs), draw(ys)))
    return segment, window


@given(case=contained())
def test_fully_contained_segment_is_identity(case):
    segment, window = case
    assert clip_line(segment, window) is segment


@given(window=windows(), data=st.data())
def test_both_left_of_window_is_rejected(window, data):
    left = st.floats(min_value=-1000.0, max_value=window.x_min, exclude_max=True)
    segment = LineSegment(
        Point(data.draw(left), data.draw(coord)), Point(data.draw(left), data.draw(coord))
    )
    assert clip_line(segment, window) is None
