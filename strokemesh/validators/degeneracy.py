"""
Pre-flight checks for the stroke pipeline.

Everything that would turn into NaN/inf coordinates inside the miter solve is
rejected here, before any output is produced.
"""
from __future__ import annotations
from typing import List, Sequence
import math

from ..geometry.vec import PointLike, Vec, as_vecs, wrap_index
from ..utils.errors import (
    DegenerateJoinError,
    InvalidHalfWidthError,
    NonFiniteCoordinateError,
    TooFewPointsError,
    ZeroLengthSegmentError,
)

DEFAULT_PARALLEL_TOL = 1e-9


def signed_area(points: Sequence[PointLike]) -> float:
    """Shoelace area; positive for counter-clockwise (y-up) polygons."""
    pts = as_vecs(points)
    n = len(pts)
    acc = 0.0
    for i in range(n):
        acc += pts[i].cross(pts[wrap_index(i + 1, n)])
    return acc / 2.0


def orientation(points: Sequence[PointLike]) -> int:
    """+1 for counter-clockwise, -1 for clockwise (and for zero area)."""
    return 1 if signed_area(points) > 0 else -1


def validate_polyline(points: Sequence[PointLike], half_width: float,
                      tol: float = DEFAULT_PARALLEL_TOL) -> List[Vec]:
    """Check the closed polyline and half-width; returns the points as Vecs."""
    pts = as_vecs(points)
    n = len(pts)
    if n < 3:
        raise TooFewPointsError(f"closed polyline needs at least 3 points, got {n}")
    for i, p in enumerate(pts):
        if not p.is_finite():
            raise NonFiniteCoordinateError(f"point {i} is not finite: {p.as_tuple()}", index=i)
    try:
        w = float(half_width)
    except (TypeError, ValueError):
        w = math.nan
    if not (math.isfinite(w) and w > 0):
        raise InvalidHalfWidthError(f"half-width must be a positive number, got {half_width!r}")

    dirs: List[Vec] = []
    for i in range(n):
        nxt = wrap_index(i + 1, n)
        edge = pts[nxt] - pts[i]
        if edge.length() == 0:
            raise ZeroLengthSegmentError(
                f"points {i} and {nxt} coincide at {pts[i].as_tuple()}", index=i)
        dirs.append(edge.normalized())

    for i in range(n):
        dir0 = dirs[wrap_index(i - 1, n)]
        dir1 = dirs[i]
        if abs(dir0.cross(dir1)) <= tol and dir0.dot(dir1) < 0:
            raise DegenerateJoinError(
                f"path reverses direction at point {i} {pts[i].as_tuple()}", index=i)
    return pts
