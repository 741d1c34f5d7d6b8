"""
Miter offset solver.

For every corner of a closed polyline, find the two points (left and right of
the direction of travel, at distance w from both adjacent edges) where the
widened incoming and outgoing edges meet. No miter limit: sharp corners give
long spikes.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..geometry.vec import PointLike, Vec, as_vecs, wrap_index
from ..utils.errors import DegenerateJoinError, ParallelLinesError
from ..validators.degeneracy import DEFAULT_PARALLEL_TOL

LEFT = 1
RIGHT = -1


@dataclass(frozen=True)
class CornerFrame:
    index: int
    prev: Vec
    cur: Vec
    next: Vec
    dir0: Vec   # incoming edge direction
    dir1: Vec   # outgoing edge direction
    r0: Vec
    r1: Vec
    cross: float


def intersect_lines(p0: Vec, d0: Vec, p1: Vec, d1: Vec,
                    tol: float = DEFAULT_PARALLEL_TOL) -> Vec:
    """Intersection of the line through p0 along d0 with the line through p1 along d1."""
    cross = d0.cross(d1)
    if abs(cross) <= tol:
        raise ParallelLinesError(f"lines are parallel (cross={cross!r})")
    t = ((p1.x - p0.x) * d1.y - (p1.y - p0.y) * d1.x) / cross
    return p0 + d0 * t


def corner_frame(points: Sequence[Vec], i: int) -> CornerFrame:
    n = len(points)
    prev = points[wrap_index(i - 1, n)]
    cur = points[i]
    nxt = points[wrap_index(i + 1, n)]
    dir0 = (cur - prev).normalized()
    dir1 = (nxt - cur).normalized()
    return CornerFrame(
        index=i, prev=prev, cur=cur, next=nxt,
        dir0=dir0, dir1=dir1, r0=dir0.rot(), r1=dir1.rot(),
        cross=dir0.cross(dir1),
    )


def offset_point(frame: CornerFrame, side: int, w: float,
                 tol: float = DEFAULT_PARALLEL_TOL) -> Vec:
    """Miter point on `side` (LEFT=+1, RIGHT=-1) at half-width w."""
    p0 = frame.cur + frame.r0 * (side * w)
    p1 = frame.cur + frame.r1 * (side * w)
    try:
        return intersect_lines(p0, frame.dir0, p1, frame.dir1, tol)
    except ParallelLinesError:
        if frame.dir0.dot(frame.dir1) > 0:
            # straight through: both normals coincide
            return p0
        raise DegenerateJoinError(
            f"path reverses direction at point {frame.index} {frame.cur.as_tuple()}",
            index=frame.index,
        ) from None


def miter_offsets(points: Sequence[PointLike], w: float,
                  tol: float = DEFAULT_PARALLEL_TOL) -> Tuple[List[Vec], List[Vec]]:
    """Return (left, right) offset points, one of each per input vertex."""
    pts = as_vecs(points)
    left: List[Vec] = []
    right: List[Vec] = []
    for i in range(len(pts)):
        frame = corner_frame(pts, i)
        left.append(offset_point(frame, LEFT, w, tol))
        right.append(offset_point(frame, RIGHT, w, tol))
    return left, right
