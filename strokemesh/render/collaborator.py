"""
Interfaces for the host side that draws a stroke mesh.

The window/context, shader programs and render loop live outside this
package. A host implements these and feeds them the buffers produced by
`strokemesh.packaging.buffers.to_gpu_buffers`.
"""
from __future__ import annotations
from typing import Protocol, runtime_checkable

from ..packaging.buffers import GpuBuffers


@runtime_checkable
class MeshRenderer(Protocol):
    def upload(self, buffers: GpuBuffers) -> None:
        """Copy vertex/index data into GPU buffers (layout "3f", stride 12)."""

    def draw(self) -> None:
        """Issue one indexed triangle-list draw of buffers.draw_count indices."""

    def release(self) -> None:
        ...


@runtime_checkable
class SurfaceEvents(Protocol):
    """Host-controlled event source (resize, close requests). Never touches mesh data."""

    def on_resize(self, width: int, height: int) -> None:
        ...

    def should_close(self) -> bool:
        ...
