import math

import pytest

from strokemesh.geometry.vec import Vec, as_vecs, wrap_index
from strokemesh.utils.errors import ZeroLengthSegmentError


def test_arithmetic():
    a, b = Vec(1.0, 2.0), Vec(3.0, -1.0)
    assert a + b == Vec(4.0, 1.0)
    assert a - b == Vec(-2.0, 3.0)
    assert a * 2 == Vec(2.0, 4.0)
    assert 2 * a == Vec(2.0, 4.0)
    assert b / 2 == Vec(1.5, -0.5)
    assert -a == Vec(-1.0, -2.0)


def test_divide_by_zero_is_rejected():
    with pytest.raises(ZeroDivisionError):
        Vec(1.0, 1.0) / 0


def test_rot_is_left_perpendicular():
    v = Vec(3.0, 4.0)
    assert v.rot() == Vec(-4.0, 3.0)
    assert v.dot(v.rot()) == 0
    assert v.cross(v.rot()) > 0


def test_dot_length_normalized():
    v = Vec(3.0, 4.0)
    assert v.dot(Vec(1.0, 1.0)) == 7.0
    assert v.length() == 5.0
    n = v.normalized()
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)
    assert n.length() == pytest.approx(1.0)


def test_normalizing_zero_vector_raises():
    with pytest.raises(ZeroLengthSegmentError):
        Vec(0.0, 0.0).normalized()


def test_is_finite():
    assert Vec(1.0, 2.0).is_finite()
    assert not Vec(math.nan, 0.0).is_finite()
    assert not Vec(0.0, math.inf).is_finite()


def test_as_vecs_accepts_tuples_lists_and_vecs():
    pts = as_vecs([(1, 2), [3.5, 4], Vec(5.0, 6.0)])
    assert pts == [Vec(1.0, 2.0), Vec(3.5, 4.0), Vec(5.0, 6.0)]
    assert tuple(pts[0]) == (1.0, 2.0)


@pytest.mark.parametrize("i,expected", [(-1, 4), (0, 0), (4, 4), (5, 0), (6, 1)])
def test_wrap_index_boundaries(i, expected):
    assert wrap_index(i, 5) == expected


def test_wrap_index_empty_sequence():
    with pytest.raises(ValueError):
        wrap_index(0, 0)
