import ezdxf
import pytest

from strokemesh.dsl.to_svg import meshes_to_svg
from strokemesh.packaging.dxf_exporter import export_dxf
from strokemesh.packaging.obj_exporter import export_obj
from strokemesh.packaging.payload import failure_to_json, stroke_to_json
from strokemesh.transforms.stroke import build_stroke, try_build_stroke


@pytest.fixture
def payload(square, pentagon):
    bad = try_build_stroke([(0, 0), (1, 0), (1, 0)], 1.0).error
    return {
        "units": "mm",
        "strokes": [
            stroke_to_json("square", square, 1.0, build_stroke(square, 1.0)),
            failure_to_json("bad", bad),
            stroke_to_json("pentagon", pentagon, 3.0, build_stroke(pentagon, 3.0)),
        ],
    }


def test_obj(tmp_path, payload):
    out = export_obj(payload, str(tmp_path / "strokes.obj"))
    lines = open(out).read().splitlines()
    assert sum(1 for l in lines if l.startswith("v ")) == 16 + 20
    assert sum(1 for l in lines if l.startswith("vt ")) == 16 + 20
    faces = [l for l in lines if l.startswith("f ")]
    assert len(faces) == 8 + 10
    assert faces[0] == "f 1/1 2/2 3/3"
    # second object continues the global numbering
    assert faces[8] == "f 17/17 18/18 19/19"
    assert "vt -1.000000 0.0" in lines


def test_dxf(tmp_path, payload):
    out = export_dxf(payload, str(tmp_path / "strokes.dxf"))
    doc = ezdxf.readfile(out)
    msp = doc.modelspace()
    faces = msp.query('3DFACE[layer=="STROKE"]')
    assert len(faces) == 8 + 10
    polys = list(msp.query('LWPOLYLINE[layer=="PATH"]'))
    assert len(polys) == 2
    assert all(p.closed for p in polys)
    assert doc.header["$INSUNITS"] == 4


def test_svg(tmp_path, payload):
    out = meshes_to_svg(payload, str(tmp_path / "strokes.svg"))
    text = open(out).read()
    # one polygon per triangle plus the source outline per stroke
    assert text.count("<polygon") == (8 + 1) + (10 + 1)
    assert "pentagon" in text
