"""
GPU-ready buffers for a stroke mesh.

The only contract towards the shader stage is the attribute layout: three
consecutive float32 per vertex (x, y, arc length), tightly packed, drawn as
an indexed triangle list with uint32 indices.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np

from ..transforms.stroke import Mesh

VERTEX_DTYPE = np.dtype("<f4")
INDEX_DTYPE = np.dtype("<u4")
LAYOUT = "3f"
STRIDE = 3 * VERTEX_DTYPE.itemsize


@dataclass(frozen=True)
class GpuBuffers:
    vertices: np.ndarray   # (4n, 3) float32
    indices: np.ndarray    # (6n,) uint32
    winding: str
    layout: str = LAYOUT
    stride: int = STRIDE

    @property
    def draw_count(self) -> int:
        return int(self.indices.shape[0])

    def vertex_bytes(self) -> bytes:
        return self.vertices.tobytes()

    def index_bytes(self) -> bytes:
        return self.indices.tobytes()


def to_gpu_buffers(mesh: Mesh) -> GpuBuffers:
    verts = np.array(mesh.vertex_tuples(), dtype=VERTEX_DTYPE).reshape(-1, 3)
    idx = np.array(mesh.indices, dtype=INDEX_DTYPE)
    verts.setflags(write=False)
    idx.setflags(write=False)
    return GpuBuffers(vertices=verts, indices=idx, winding=mesh.winding)


def write_buffers(mesh: Mesh, out_dir: Path) -> Tuple[Path, Path]:
    """Write vertices.bin / indices.bin (little-endian, no header)."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    buffers = to_gpu_buffers(mesh)
    vpath = out_dir / "vertices.bin"
    ipath = out_dir / "indices.bin"
    vpath.write_bytes(buffers.vertex_bytes())
    ipath.write_bytes(buffers.index_bytes())
    return vpath, ipath
