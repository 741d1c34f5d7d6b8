"""
Stroke mesh assembly: closed polyline + half-width -> indexed triangle list.

Per edge i the mesh holds four vertices at offset 4i (outer@i, inner@i,
outer@next, inner@next) and two triangles {4i, 4i+1, 4i+2} and
{4i+1, 4i+3, 4i+2}.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..geometry.vec import PointLike, Vec
from ..utils.errors import StrokeError
from ..utils.log import get_logger
from ..validators.degeneracy import DEFAULT_PARALLEL_TOL, orientation, validate_polyline
from .arclength import OffsetVertex, parameterize
from .miter import miter_offsets

log = get_logger(__name__)

__all__ = ["OffsetVertex", "Mesh", "StrokeResult", "quad_indices", "assemble_mesh",
           "build_stroke", "try_build_stroke"]


@dataclass(frozen=True)
class Mesh:
    vertices: Tuple[OffsetVertex, ...]
    indices: Tuple[int, ...]
    winding: str = "ccw"   # orientation of every emitted triangle

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> Iterator[Tuple[int, int, int]]:
        idx = self.indices
        for k in range(0, len(idx), 3):
            yield idx[k], idx[k + 1], idx[k + 2]

    def vertex_tuples(self) -> List[Tuple[float, float, float]]:
        return [v.as_tuple() for v in self.vertices]

    def outer_contour(self) -> List[Vec]:
        return [v.position for v in self.vertices[0::4]]

    def inner_contour(self) -> List[Vec]:
        return [v.position for v in self.vertices[1::4]]


@dataclass(frozen=True)
class StrokeResult:
    mesh: Optional[Mesh] = None
    error: Optional[StrokeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def quad_indices(i: int) -> Tuple[int, int, int, int, int, int]:
    t = 4 * i
    return (t, t + 1, t + 2, t + 1, t + 3, t + 2)


def assemble_mesh(vertices: Sequence[OffsetVertex], n: int, winding: str = "ccw") -> Mesh:
    """Index the 4n parameterized vertices as n quads. Performs no validation."""
    indices: List[int] = []
    for i in range(n):
        indices.extend(quad_indices(i))
    return Mesh(vertices=tuple(vertices), indices=tuple(indices), winding=winding)


def build_stroke(points: Sequence[PointLike], half_width: float,
                 tol: float = DEFAULT_PARALLEL_TOL) -> Mesh:
    """
    Build the mitered stroke mesh of a closed polyline.

    Raises a StrokeValidationError subclass (ZeroLengthSegmentError,
    DegenerateJoinError, ...) before producing anything if the input is
    degenerate.

    "Outer" is the side away from the polygon interior: the left-hand side
    of travel for clockwise input, the right-hand side otherwise. The
    triangle winding follows from that choice and is reported on the mesh.
    """
    pts = validate_polyline(points, half_width, tol)
    left, right = miter_offsets(pts, half_width, tol)
    if orientation(pts) < 0:
        outer, inner, winding = left, right, "ccw"
    else:
        outer, inner, winding = right, left, "cw"
    vertices = parameterize(pts, outer, inner)
    mesh = assemble_mesh(vertices, len(pts), winding)
    log.debug("stroke: %d points -> %d vertices, %d triangles",
              len(pts), mesh.vertex_count, mesh.triangle_count)
    return mesh


def try_build_stroke(points: Sequence[PointLike], half_width: float,
                     tol: float = DEFAULT_PARALLEL_TOL) -> StrokeResult:
    try:
        return StrokeResult(mesh=build_stroke(points, half_width, tol))
    except StrokeError as e:
        log.debug("stroke rejected: %s", e)
        return StrokeResult(error=e)
