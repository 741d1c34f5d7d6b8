import json

from typer.testing import CliRunner

from strokemesh.cli.main import app

runner = CliRunner()

STROKES = """STROKE square
MOVE 0,0
LINE 10,0
LINE 10,10
LINE 0,10
CLOSE
WIDTH 1
END
STROKE spike
MOVE 0,0
LINE 10,0
LINE 10,10
LINE 10,5
CLOSE
END
"""


def _run(*args):
    return runner.invoke(app, ["--log-level", "ERROR", *args])


def test_demo(tmp_path):
    out = tmp_path / "demo.json"
    result = _run("demo", "--out", str(out))
    assert result.exit_code == 0, result.output
    stroke = json.loads(out.read_text())["strokes"][0]
    assert len(stroke["vertices"]) == 20
    assert len(stroke["indices"]) == 30
    assert stroke["half_width"] == 3.0


def test_mesh_reports_rejected_strokes(tmp_path):
    inp = tmp_path / "strokes.dsl"
    inp.write_text(STROKES)
    out = tmp_path / "mesh.json"
    result = _run("mesh", "--inp", str(inp), "--out", str(out))
    assert result.exit_code == 1
    strokes = json.loads(out.read_text())["strokes"]
    assert strokes[0]["name"] == "square"
    assert len(strokes[0]["vertices"]) == 16
    assert strokes[1] == {
        "name": "spike",
        "error": "DegenerateJoinError",
        "message": strokes[1]["message"],
        "index": 2,
    }


def test_mesh_uses_options_file(tmp_path):
    inp = tmp_path / "points.json"
    inp.write_text(json.dumps({"strokes": [{"name": "tri", "points": [[0, 0], [10, 0], [0, 10]]}]}))
    opts = tmp_path / "options.yml"
    opts.write_text("half_width: 0.5\nunits: in\n")
    out = tmp_path / "mesh.json"
    result = _run("mesh", "--inp", str(inp), "--out", str(out), "--options", str(opts))
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert data["units"] == "in"
    assert data["strokes"][0]["half_width"] == 0.5

    result = _run("mesh", "--inp", str(inp), "--out", str(out), "--options", str(opts), "--half-width", "2")
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text())["strokes"][0]["half_width"] == 2.0


def test_bad_options_file_exits_cleanly(tmp_path):
    inp = tmp_path / "strokes.dsl"
    inp.write_text(STROKES)
    opts = tmp_path / "options.yml"
    opts.write_text("miter_limit: 4\n")
    result = _run("mesh", "--inp", str(inp), "--out", str(tmp_path / "m.json"), "--options", str(opts))
    assert result.exit_code == 2


def test_open_path_exits_cleanly(tmp_path):
    inp = tmp_path / "open.dsl"
    inp.write_text("STROKE a\nMOVE 0,0\nLINE 1,0\nLINE 0,1\nEND\n")
    result = _run("mesh", "--inp", str(inp), "--out", str(tmp_path / "m.json"))
    assert result.exit_code == 2


def test_check(tmp_path):
    inp = tmp_path / "strokes.dsl"
    inp.write_text(STROKES.split("STROKE spike")[0])
    result = _run("check", "--inp", str(inp))
    assert result.exit_code == 0, result.output
    assert "square: ok" in result.output


def test_exports_from_demo(tmp_path):
    mesh_json = tmp_path / "demo.json"
    assert _run("demo", "--out", str(mesh_json)).exit_code == 0

    result = _run("preview", "--inp", str(mesh_json), "--out", str(tmp_path / "svg"))
    assert result.exit_code == 0, result.output
    assert (tmp_path / "svg" / "strokes.svg").exists()

    result = _run("export-obj", "--inp", str(mesh_json), "--out", str(tmp_path / "demo.obj"))
    assert result.exit_code == 0, result.output

    result = _run("export-dxf", "--inp", str(mesh_json), "--out", str(tmp_path / "demo.dxf"))
    assert result.exit_code == 0, result.output
    assert (tmp_path / "demo.dxf").exists()

    result = _run("buffers", "--inp", str(mesh_json), "--out", str(tmp_path / "bin"))
    assert result.exit_code == 0, result.output
    assert (tmp_path / "bin" / "demo" / "vertices.bin").stat().st_size == 20 * 12


def test_exports_need_meshes(tmp_path):
    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"units": "mm", "strokes": [{"name": "x", "error": "TooFewPointsError"}]}))
    result = _run("export-obj", "--inp", str(empty), "--out", str(tmp_path / "x.obj"))
    assert result.exit_code == 2
