from typing import Any, Dict, Tuple
import svgwrite

from ..packaging.payload import meshed_strokes

def _bounds(data: Dict[str, Any]) -> Tuple[float, float, float, float]:
    xs, ys = [], []
    for s in meshed_strokes(data):
        for x, y, _ in s["vertices"]:
            xs.append(x); ys.append(y)
    if not xs:
        return 0.0, 0.0, 1.0, 1.0
    return min(xs), min(ys), max(xs), max(ys)

def meshes_to_svg(data: Dict[str, Any], filename: str, margin=20, wireframe=True):
    """Preview: filled stroke triangles with the source polyline on top."""
    x0, y0, x1, y1 = _bounds(data)
    w = (x1 - x0) + 2 * margin
    h = (y1 - y0) + 2 * margin
    dwg = svgwrite.Drawing(filename, size=(w, h))
    dwg.viewbox(x0 - margin, y0 - margin, w, h)
    for stroke in meshed_strokes(data):
        verts = stroke["vertices"]
        idx = stroke["indices"]
        g = dwg.g()
        for k in range(0, len(idx), 3):
            tri = [(verts[i][0], verts[i][1]) for i in idx[k:k + 3]]
            g.add(dwg.polygon(tri, fill="#4a90d9", fill_opacity=0.6,
                              stroke="#1f3b5c" if wireframe else "none", stroke_width=0.1))
        g.add(dwg.polygon([tuple(p) for p in stroke["points"]], fill="none", stroke="black", stroke_width=0.2))
        # label
        px, py = stroke["points"][0]
        g.add(dwg.text(stroke["name"], insert=(px, py - 5), font_size="12px"))
        dwg.add(g)
    dwg.save()
    return filename
