import json
from pathlib import Path
from typing import Optional, List, Dict, Any, Tuple

import typer

# Engine imports
from ..config import StrokeOptions, load_options
from ..dsl.dsl_parser import parse_dsl                      # stroke DSL
from ..dsl.to_svg import meshes_to_svg                      # SVG preview
from ..geometry.flatten import path_to_polyline
from ..packaging.payload import failure_to_json, mesh_from_json, meshed_strokes, stroke_to_json
from ..transforms.stroke import build_stroke, try_build_stroke
from ..utils.errors import StrokeError
from ..utils.log import get_logger, setup_logging
from ..validators.intersections import has_self_intersections

app = typer.Typer(help="strokemesh CLI: mitered stroke meshes for closed polylines")
log = get_logger("strokemesh.cli")

# Pentagon drawn by the original OpenGL demo
DEMO_POINTS = [(100.0, 100.0), (400.0, 150.0), (400.0, 350.0), (300.0, 200.0), (120.0, 150.0)]
DEMO_HALF_WIDTH = 3.0


# ---------------------------
# Helpers
# ---------------------------

def _fail(err: Exception, code: int = 2):
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=code)


def _options(ctx: typer.Context, path: Optional[Path], **overrides) -> StrokeOptions:
    """Options file, then CLI flags on top; sets the log level."""
    try:
        opts = load_options(path).override(**overrides)
    except StrokeError as e:
        _fail(e)
    setup_logging((ctx.obj or {}).get("log_level") or opts.log_level)
    return opts


def _read_strokes(inp: Path, opts: StrokeOptions) -> List[Tuple[str, List[Tuple[float, float]], float]]:
    """(name, points, half_width) per stroke from a .json point file or the stroke DSL."""
    text = inp.read_text()
    out = []
    if inp.suffix.lower() == ".json":
        data = json.loads(text)
        for k, s in enumerate(data.get("strokes", [])):
            name = s.get("name", f"stroke_{k}")
            pts = [(float(x), float(y)) for x, y in s["points"]]
            out.append((name, pts, float(s.get("half_width", opts.half_width))))
        return out
    for stroke in parse_dsl(text):
        pts = path_to_polyline(stroke, tol=opts.flatten_tol)
        hw = stroke.half_width if stroke.half_width is not None else opts.half_width
        out.append((stroke.name, pts, hw))
    return out


def _load_payload(inp: Path) -> Dict[str, Any]:
    data = json.loads(inp.read_text())
    if not meshed_strokes(data):
        _fail(f"{inp} holds no meshed strokes")
    return data


# ---------------------------
# Commands
# ---------------------------

@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, help="DEBUG|INFO|WARNING|ERROR (default from options file)"),
):
    ctx.obj = {"log_level": log_level}


@app.command()
def demo(
    ctx: typer.Context,
    out: Path = typer.Option(..., help="Output mesh JSON"),
    half_width: float = typer.Option(DEMO_HALF_WIDTH, help="Half-width of the stroke"),
):
    """
    Mesh the demo pentagon (sanity check for the pipeline).
    """
    opts = _options(ctx, None)
    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mesh = build_stroke(DEMO_POINTS, half_width, opts.parallel_tolerance)
    except StrokeError as e:
        _fail(e)
    payload = {"units": opts.units, "strokes": [stroke_to_json("demo", DEMO_POINTS, half_width, mesh)]}
    out.write_text(json.dumps(payload, indent=2))
    typer.echo(f"Wrote demo mesh ({mesh.vertex_count} vertices, {len(mesh.indices)} indices) to {out}")


@app.command()
def mesh(
    ctx: typer.Context,
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Stroke DSL file or points JSON"),
    out: Path = typer.Option(..., help="Output mesh JSON"),
    options: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Options YAML"),
    half_width: Optional[float] = typer.Option(None, help="Default half-width (strokes with WIDTH keep theirs)"),
    tolerance: Optional[float] = typer.Option(None, help="Parallel-edge tolerance on the turn cross product"),
):
    """
    Build stroke meshes for every stroke in the input.

    Strokes that fail validation are written as error entries; the command
    then exits with status 1.
    """
    opts = _options(ctx, options, half_width=half_width, parallel_tolerance=tolerance)
    try:
        strokes = _read_strokes(inp, opts)
    except (StrokeError, ValueError, KeyError) as e:
        _fail(e)

    entries: List[Dict[str, Any]] = []
    failed = 0
    for name, pts, hw in strokes:
        if len(pts) >= 3 and has_self_intersections(pts):
            log.warning("stroke %r self-intersects; its mesh will overlap itself", name)
        result = try_build_stroke(pts, hw, opts.parallel_tolerance)
        if result.ok:
            log.info("stroke %r: %d vertices, %d triangles", name,
                     result.mesh.vertex_count, result.mesh.triangle_count)
            entries.append(stroke_to_json(name, pts, hw, result.mesh))
        else:
            failed += 1
            typer.echo(f"stroke {name!r} rejected: {result.error}", err=True)
            entries.append(failure_to_json(name, result.error))

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps({"units": opts.units, "strokes": entries}, indent=2))
    typer.echo(f"Wrote {len(entries) - failed} stroke mesh(es) to {out}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def check(
    ctx: typer.Context,
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Stroke DSL file or points JSON"),
    options: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Options YAML"),
    half_width: Optional[float] = typer.Option(None, help="Default half-width"),
    max_deviation: float = typer.Option(5e-3, help="Allowed distance from the Clipper offset"),
):
    """
    Compare each stroke's outer contour with Clipper's mitered offset.
    """
    from ..transforms.reference_offset import max_contour_deviation, reference_outer_contour

    opts = _options(ctx, options, half_width=half_width)
    try:
        strokes = _read_strokes(inp, opts)
    except (StrokeError, ValueError, KeyError) as e:
        _fail(e)

    bad = 0
    for name, pts, hw in strokes:
        result = try_build_stroke(pts, hw, opts.parallel_tolerance)
        if not result.ok:
            bad += 1
            typer.echo(f"{name}: rejected ({result.error})")
            continue
        if has_self_intersections(pts):
            typer.echo(f"{name}: skipped (self-intersecting)")
            continue
        ref = reference_outer_contour(pts, hw)
        dev = max_contour_deviation([tuple(p) for p in result.mesh.outer_contour()], ref)
        status = "ok" if dev <= max_deviation else "MISMATCH"
        if dev > max_deviation:
            bad += 1
        typer.echo(f"{name}: {status} (deviation {dev:.6g})")
    if bad:
        raise typer.Exit(code=1)


@app.command()
def preview(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Mesh JSON"),
    out: Path = typer.Option(..., help="Output directory for SVG preview"),
    wireframe: bool = typer.Option(True, help="Outline every triangle"),
):
    """
    Write one SVG with all meshed strokes for quick visual checks.
    """
    out.mkdir(parents=True, exist_ok=True)
    data = _load_payload(inp)
    svg_path = out / "strokes.svg"
    meshes_to_svg(data, str(svg_path), wireframe=wireframe)
    typer.echo(f"Wrote {svg_path}")


@app.command("export-dxf")
def export_dxf_cmd(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Mesh JSON"),
    out: Path = typer.Option(..., help="Output DXF path"),
    units: Optional[str] = typer.Option(None, help="Units for $INSUNITS (mm|in|unitless); default from mesh JSON"),
):
    """
    Export meshes to DXF (AC1018) with layers PATH / STROKE / TEXT.
    """
    from ..packaging.dxf_exporter import export_dxf  # import here to keep CLI import light

    data = _load_payload(inp)
    out.parent.mkdir(parents=True, exist_ok=True)
    path = export_dxf(data, str(out), units=units or data.get("units", "mm"))
    typer.echo(f"Wrote DXF: {path}")


@app.command("export-obj")
def export_obj_cmd(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Mesh JSON"),
    out: Path = typer.Option(..., help="Output OBJ path"),
):
    """
    Export meshes to Wavefront OBJ (arc length as texture u).
    """
    from ..packaging.obj_exporter import export_obj

    data = _load_payload(inp)
    out.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Wrote OBJ: {export_obj(data, str(out))}")


@app.command()
def buffers(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Mesh JSON"),
    out: Path = typer.Option(..., help="Output directory; one sub-directory per stroke"),
):
    """
    Dump raw GPU buffers: vertices.bin (3 x float32 per vertex) and indices.bin (uint32).
    """
    from ..packaging.buffers import write_buffers

    data = _load_payload(inp)
    for entry in meshed_strokes(data):
        vpath, ipath = write_buffers(mesh_from_json(entry), out / entry["name"])
        typer.echo(f"{entry['name']}: {vpath} {ipath} ({len(entry['indices'])} indices, {entry['winding']})")


if __name__ == "__main__":
    app()
