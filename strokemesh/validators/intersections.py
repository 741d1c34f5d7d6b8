from shapely.geometry import LinearRing


def has_self_intersections(coords):
    # Only detects; the stroke of a self-intersecting path overlaps itself.
    ring = LinearRing([tuple(p) for p in coords])
    return not ring.is_simple
