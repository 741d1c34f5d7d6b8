"""
DXF exporter (AC1018) for stroke meshes.

- Units: sets $INSUNITS=4 (mm) when units=mm.
- Layers: PATH (source polyline, closed LWPOLYLINE), STROKE (one 3DFACE per
  triangle), TEXT (stroke names).

Requires: ezdxf
"""
from __future__ import annotations
from typing import Dict, Any, Optional

import ezdxf

from .payload import meshed_strokes

DEFAULT_LAYERS = {
    "PATH": {"color": 7},
    "STROKE": {"color": 5},
    "TEXT": {"color": 8},
}


def export_dxf(
    data: Dict[str, Any],
    out_path: str,
    units: str = "mm",
    layer_map: Optional[Dict[str,str]] = None,
):
    doc = ezdxf.new(dxfversion="AC1018")
    msp = doc.modelspace()

    # Units
    if units.lower() == "mm":
        doc.header["$INSUNITS"] = 4  # 4 = millimeters
    elif units.lower() == "in":
        doc.header["$INSUNITS"] = 1  # inches
    else:
        doc.header["$INSUNITS"] = 0  # unitless

    layers = dict(DEFAULT_LAYERS)
    if layer_map:
        # remap names; colors remain default
        layers = {layer_map.get(k, k): v for k, v in layers.items()}
    names = {k: (layer_map or {}).get(k, k) for k in DEFAULT_LAYERS}
    for lname, opts in layers.items():
        if lname not in doc.layers:
            doc.layers.add(lname, color=opts.get("color", 7))

    for stroke in meshed_strokes(data):
        verts = stroke["vertices"]
        idx = stroke["indices"]
        msp.add_lwpolyline([tuple(p) for p in stroke["points"]], format="xy", close=True,
                           dxfattribs={"layer": names["PATH"]})
        for k in range(0, len(idx), 3):
            a, b, c = (verts[i] for i in idx[k:k + 3])
            # 3DFACE with three corners repeats the last one
            msp.add_3dface([(a[0], a[1], 0.0), (b[0], b[1], 0.0), (c[0], c[1], 0.0), (c[0], c[1], 0.0)],
                           dxfattribs={"layer": names["STROKE"]})
        x, y = stroke["points"][0]
        msp.add_text(stroke["name"], dxfattribs={"height": 5, "layer": names["TEXT"]}).set_placement((x, y - 10))

    doc.saveas(out_path)
    return out_path
