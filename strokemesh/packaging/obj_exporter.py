"""Wavefront OBJ writer. Arc length goes into the texture u coordinate."""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

from .payload import meshed_strokes


def export_obj(data: Dict[str, Any], out_path: str) -> str:
    lines = ["# strokemesh"]
    base = 1  # OBJ indices are 1-based and global across objects
    for stroke in meshed_strokes(data):
        lines.append(f"o {stroke['name']}")
        for x, y, _ in stroke["vertices"]:
            lines.append(f"v {x:.6f} {y:.6f} 0.0")
        for _, _, l in stroke["vertices"]:
            lines.append(f"vt {l:.6f} 0.0")
        idx = stroke["indices"]
        for k in range(0, len(idx), 3):
            a, b, c = (base + i for i in idx[k:k + 3])
            lines.append(f"f {a}/{a} {b}/{b} {c}/{c}")
        base += len(stroke["vertices"])
    Path(out_path).write_text("\n".join(lines) + "\n")
    return out_path
