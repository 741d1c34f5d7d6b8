"""JSON payload written by `strokemesh mesh` and read by the exporters."""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

from ..geometry.vec import Vec
from ..transforms.arclength import OffsetVertex
from ..transforms.stroke import Mesh


def stroke_to_json(name: str, points: Sequence[Sequence[float]], half_width: float,
                   mesh: Mesh) -> Dict[str, Any]:
    return {
        "name": name,
        "half_width": half_width,
        "points": [[float(x), float(y)] for x, y in points],
        "vertices": [list(v) for v in mesh.vertex_tuples()],
        "indices": list(mesh.indices),
        "winding": mesh.winding,
    }


def failure_to_json(name: str, error: Exception) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"name": name, "error": type(error).__name__, "message": str(error)}
    index = getattr(error, "index", None)
    if index is not None:
        entry["index"] = index
    return entry


def mesh_from_json(entry: Dict[str, Any]) -> Mesh:
    vertices = tuple(OffsetVertex(Vec(float(x), float(y)), float(l)) for x, y, l in entry["vertices"])
    return Mesh(vertices=vertices, indices=tuple(int(i) for i in entry["indices"]),
                winding=entry.get("winding", "ccw"))


def meshed_strokes(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Stroke entries that carry a mesh (failed strokes are skipped)."""
    return [s for s in data.get("strokes", []) if "vertices" in s]
