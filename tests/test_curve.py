import math

from chartkit.drawing.curve import (
    subdivide_cubic,
    subdivide_quad,
    trace_arc,
    trace_cubic,
    trace_quad,
)


class MockLine:
    def __init__(self):
        self.inner = []

    def line_to(self, x, y):
        self.inner.append((x, y))


def test_trace_quad_emits_lines():
    quad = [10, 20, 20, 20, 20, 10]
    liner = MockLine()
    trace_quad(liner, quad, 0.5)
    assert len(liner.inner) != 0
    assert liner.inner[-1] == (20, 10)


def test_trace_quad_zero_distance_emits_nothing():
    liner = MockLine()
    trace_quad(liner, [0, 0, 1, 1, 2, 2], 0.5)
    assert liner.inner == []


def test_subdivide_quad_shares_midpoint():
    c1, c2 = subdivide_quad([0, 0, 1, 1, 2, 0])
    assert c1[:2] == [0, 0]
    assert c2[4:] == [2, 0]
    assert c1[4:] == c2[:2]
    assert c1[4:] == [1.0, 0.5]


def test_subdivide_cubic_shares_midpoint():
    c = [0, 0, 0, 2, 2, 2, 2, 0]
    c1, c2 = subdivide_cubic(c)
    assert c1[:2] == [0, 0]
    assert c2[6:] == [2, 0]
    assert c1[6:] == c2[:2]
    assert c1[6:] == [1.0, 1.5]


def test_trace_cubic_ends_at_endpoint_and_moves_forward():
    liner = MockLine()
    trace_cubic(liner, [0, 0, 0, 20, 20, 20, 20, 0], 0.5)
    assert len(liner.inner) > 1
    assert liner.inner[-1] == (20, 0)
    xs = [x for x, _ in liner.inner]
    assert xs == sorted(xs)


def test_trace_cubic_straight_line_is_one_segment():
    liner = MockLine()
    trace_cubic(liner, [0, 0, 1, 0, 2, 0, 3, 0], 0.5)
    assert liner.inner == [(3, 0)]


def test_trace_arc_points_lie_on_circle():
    liner = MockLine()
    end = trace_arc(liner, 0, 0, 10, 10, 0, math.pi / 2, 1.0)
    assert math.isclose(end[0], 0.0, abs_tol=1e-9)
    assert math.isclose(end[1], 10.0)
    assert liner.inner
    for x, y in liner.inner:
        assert math.isclose(math.hypot(x, y), 10.0)


def test_trace_arc_counter_clockwise():
    liner = MockLine()
    end = trace_arc(liner, 0, 0, 5, 5, 0, -math.pi, 1.0)
    assert math.isclose(end[0], -5.0)
    assert all(y <= 1e-9 for _, y in liner.inner)