from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union
import math

from ..utils.errors import ZeroLengthSegmentError

PointLike = Union["Vec", Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Vec:
    """2D point / direction. Value semantics only."""
    x: float
    y: float

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, t: float) -> Vec:
        return Vec(self.x * t, self.y * t)

    __rmul__ = __mul__

    def __truediv__(self, t: float) -> Vec:
        if t == 0:
            raise ZeroDivisionError("Vec division by zero")
        return Vec(self.x / t, self.y / t)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def rot(self) -> Vec:
        """Left-hand perpendicular: (x, y) -> (-y, x)."""
        return Vec(-self.y, self.x)

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec) -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec:
        l = self.length()
        if l == 0:
            raise ZeroLengthSegmentError("cannot normalize a zero-length vector")
        return Vec(self.x / l, self.y / l)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def as_vec(p: PointLike) -> Vec:
    if isinstance(p, Vec):
        return p
    x, y = p
    return Vec(float(x), float(y))


def as_vecs(points: Iterable[PointLike]) -> List[Vec]:
    return [as_vec(p) for p in points]


def wrap_index(i: int, n: int) -> int:
    """Cyclic neighbour index; wrap_index(-1, n) == n-1, wrap_index(n, n) == 0."""
    if n <= 0:
        raise ValueError("wrap_index needs a non-empty sequence")
    return i % n
