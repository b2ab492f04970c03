import math

import pytest

from chartkit.drawing.matrix import Matrix


def test_identity_is_identity():
    assert Matrix.identity().is_identity()
    assert Matrix.identity().is_translation()


def test_translation_is_translation_not_identity():
    m = Matrix.translating(3.0, 4.0)
    assert m.is_translation()
    assert not m.is_identity()
    assert m.offset() == (3.0, 4.0)


def test_transform_point_translation():
    assert Matrix.translating(3.0, 4.0).transform_point(1.0, 2.0) == (4.0, 6.0)


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        Matrix([1, 0, 0, 1, 0])


def test_index_access():
    m = Matrix([1, 2, 3, 4, 5, 6])
    assert [m[i] for i in range(6)] == [1, 2, 3, 4, 5, 6]
    assert list(m) == [1, 2, 3, 4, 5, 6]


def test_transform_inverse_round_trip():
    m = Matrix.rotating(0.7)
    m.scale(2.0, 3.0)
    m.translate(5.0, -1.0)
    points = [1.0, 2.0, -3.0, 4.5, 0.0, 0.0]
    back = m.inverse_transform(m.transform(points))
    assert back == pytest.approx(points)


def test_inverse_point_round_trip():
    m = Matrix([2, 1, -1, 3, 4, 5])
    x, y = m.transform_point(7.0, -2.0)
    assert m.inverse_transform_point(x, y) == pytest.approx((7.0, -2.0))


def test_transform_keeps_trailing_odd_value():
    result = Matrix.translating(1.0, 1.0).transform([2.0, 3.0, 9.0])
    assert result[2] == 9.0
    assert result[:2] == list(Matrix.translating(1.0, 1.0).transform_point(2.0, 3.0))


def test_vector_transform_ignores_translation():
    assert Matrix.translating(5.0, 7.0).vector_transform([1.0, 2.0]) == [1.0, 2.0]


def test_transform_rectangle_identity():
    assert Matrix.identity().transform_rectangle(1.0, 2.0, 3.0, 4.0) == (1.0, 2.0, 3.0, 4.0)


def test_transform_rectangle_contains_corners():
    m = Matrix.rotating(0.3)
    x0, y0, x2, y2 = m.transform_rectangle(0.0, 0.0, 2.0, 1.0)
    for cx, cy in [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (0.0, 1.0)]:
        px, py = m.transform_point(cx, cy)
        assert x0 - 1e-9 <= px <= x2 + 1e-9
        assert y0 - 1e-9 <= py <= y2 + 1e-9


def test_inverse_in_place_composes_to_identity():
    m = Matrix([2, 0.5, -1, 3, 4, 5])
    inv = m.copy()
    inv.inverse()
    m.compose(inv)
    assert m.is_identity()


def test_inverse_of_singular_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix([1, 2, 2, 4, 0, 0]).inverse()


def test_copy_is_independent():
    m = Matrix.identity()
    c = m.copy()
    c.translate(1.0, 1.0)
    assert m.is_identity()
    assert not c.is_identity()


def test_compose_with_translation():
    m = Matrix.identity()
    m.compose(Matrix.translating(3.0, 4.0))
    assert m == Matrix.translating(3.0, 4.0)


def test_in_place_operations_match_constructors():
    t = Matrix.identity()
    t.translate(3.0, 4.0)
    assert t == Matrix.translating(3.0, 4.0)

    s = Matrix.identity()
    s.scale(2.0, 3.0)
    assert s == Matrix.scaling_by(2.0, 3.0)
    assert s.scale_factors() == (2.0, 3.0)

    r = Matrix.identity()
    r.rotate(1.1)
    assert r.is_close(Matrix.rotating(1.1))


def test_full_rotation_returns_to_start():
    m = Matrix([2, 1, 0.5, 3, 7, 8])
    original = m.copy()
    m.rotate(2 * math.pi)
    assert m.is_close(original)


def test_rotation_preserves_determinant():
    m = Matrix.scaling_by(2.0, 3.0)
    before = m.determinant()
    m.rotate(0.4)
    assert m.determinant() == pytest.approx(before)


def test_from_rects_maps_corners():
    r1 = (0.0, 0.0, 10.0, 20.0)
    r2 = (5.0, 5.0, 25.0, 15.0)
    m = Matrix.from_rects(r1, r2)
    assert m.transform_point(r1[0], r1[1]) == pytest.approx((r2[0], r2[1]))
    assert m.transform_point(r1[2], r1[3]) == pytest.approx((r2[2], r2[3]))


def test_is_close_tolerance():
    assert Matrix([1 + 1e-7, 0, 0, 1, 0, 0]).is_close(Matrix.identity())
    assert not Matrix([1 + 1e-3, 0, 0, 1, 0, 0]).is_close(Matrix.identity())


def test_scale_estimate_invariant_under_rotation():
    m = Matrix.identity()
    base = m.scale_estimate()
    m.rotate(0.9)
    assert m.scale_estimate() == pytest.approx(base)