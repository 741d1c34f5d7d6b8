from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..geometry.vec import Vec, wrap_index


@dataclass(frozen=True)
class OffsetVertex:
    position: Vec
    arc_length: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.position.x, self.position.y, self.arc_length)


def edge_frame(points: Sequence[Vec], i: int) -> Tuple[Vec, Vec, float]:
    """(start, unit direction, length) of edge i -> i+1, wrapping at the end."""
    start = points[i]
    end = points[wrap_index(i + 1, len(points))]
    length = (end - start).length()
    return start, (end - start) / length, length


def project_arc_length(p: Vec, start: Vec, direction: Vec, running: float) -> float:
    return running + (p - start).dot(direction)


def perimeter(points: Sequence[Vec]) -> float:
    return sum(edge_frame(points, i)[2] for i in range(len(points)))


def parameterize(points: Sequence[Vec], outer: Sequence[Vec], inner: Sequence[Vec]):
    """
    Attach a cumulative path length to every emitted vertex.

    Per edge i the four vertices are outer@i, inner@i, outer@next, inner@next;
    each is projected onto the edge so join vertices may land slightly before
    or after the nominal corner distance.
    """
    n = len(points)
    out: List[OffsetVertex] = []
    running = 0.0
    for i in range(n):
        ni = wrap_index(i + 1, n)
        start, direction, length = edge_frame(points, i)
        for p in (outer[i], inner[i], outer[ni], inner[ni]):
            out.append(OffsetVertex(p, project_arc_length(p, start, direction, running)))
        running += length
    return out
