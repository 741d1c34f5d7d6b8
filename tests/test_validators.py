import pytest

from strokemesh.geometry.vec import Vec
from strokemesh.validators.degeneracy import orientation, signed_area, validate_polyline
from strokemesh.validators.intersections import has_self_intersections
from strokemesh.utils.errors import DegenerateJoinError, StrokeValidationError


def test_signed_area_and_orientation(square, square_cw):
    assert signed_area(square) == pytest.approx(100.0)
    assert signed_area(square_cw) == pytest.approx(-100.0)
    assert orientation(square) == 1
    assert orientation(square_cw) == -1


def test_validate_returns_vecs(square):
    pts = validate_polyline(square, 1.0)
    assert pts[2] == Vec(10.0, 10.0)


def test_near_reversal_within_tolerance_is_rejected():
    pts = [(0.0, 0.0), (10.0, 0.0), (0.0, 1e-12), (-5.0, -5.0)]
    with pytest.raises(DegenerateJoinError):
        validate_polyline(pts, 1.0)
    # only exact reversals get through with a zero tolerance
    validate_polyline(pts, 1.0, tol=0.0)


def test_validation_errors_share_a_base():
    with pytest.raises(StrokeValidationError):
        validate_polyline([(0, 0), (0, 0), (1, 1)], 1.0)


def test_self_intersections(square):
    assert not has_self_intersections(square)
    assert has_self_intersections([(0, 0), (10, 10), (10, 0), (0, 10)])
