from __future__ import annotations
from typing import List, Sequence, Tuple

import pyclipper
from shapely.geometry import LinearRing

SCALE = 1000.0  # scale to integer for Clipper


def _scale_path(path: Sequence[Sequence[float]]):
    return [(int(round(x*SCALE)), int(round(y*SCALE))) for x, y in path]


def _unscale_path(path: List[Tuple[int, int]]):
    return [(x/SCALE, y/SCALE) for x, y in path]


def reference_outer_contour(points: Sequence[Sequence[float]], half_width: float,
                            miter_limit: float = 1e6) -> List[Tuple[float, float]]:
    """Clipper's mitered outward offset of a closed polygon (open ring, no repeated point).

    The miter limit is large enough that Clipper never squares off a corner,
    which matches the unclamped miter joins of the stroke mesh.
    """
    subj = [_scale_path([tuple(p) for p in points])]
    co = pyclipper.PyclipperOffset(miter_limit=miter_limit)
    co.AddPaths(subj, pyclipper.JT_MITER, pyclipper.ET_CLOSEDPOLYGON)
    solution = co.Execute(half_width * SCALE)
    if not solution:
        return []
    # choose largest polygon
    largest = max(solution, key=lambda p: abs(pyclipper.Area(p)))
    return _unscale_path(largest)


def max_contour_deviation(contour: Sequence[Sequence[float]],
                          reference: Sequence[Sequence[float]]) -> float:
    """Symmetric Hausdorff distance between two closed contours."""
    a = LinearRing([tuple(p) for p in contour])
    b = LinearRing([tuple(p) for p in reference])
    return a.hausdorff_distance(b)
