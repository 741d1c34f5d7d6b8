"""
Very small stroke DSL -> internal representation.

STROKE <name>
MOVE x,y
LINE x,y
CURVE x1,y1 -> x2,y2 -> x3,y3
CLOSE
WIDTH <half-width>
END
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.errors import DslError

@dataclass
class PathCmd:
    type: str
    data: dict

@dataclass
class StrokeSpec:
    name: str
    paths: List[PathCmd] = field(default_factory=list)
    half_width: Optional[float] = None

def _xy(text: str, line_no: int) -> List[float]:
    try:
        x, y = map(float, text.split(","))
    except ValueError:
        raise DslError(f"expected x,y but got {text.strip()!r}", line_no) from None
    return [x, y]

def parse_dsl(text: str) -> List[StrokeSpec]:
    strokes: List[StrokeSpec] = []
    current: Optional[StrokeSpec] = None
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        if line.startswith("STROKE "):
            if current is not None:
                raise DslError(f"STROKE inside unterminated stroke {current.name!r}", line_no)
            name = line.split(" ", 1)[1].strip()
            current = StrokeSpec(name=name)
            strokes.append(current)
            continue
        if line == "END":
            if current is None:
                raise DslError("END without STROKE", line_no)
            current = None
            continue
        if current is None:
            raise DslError("Command outside of STROKE/END block", line_no)
        if line.startswith("MOVE "):
            current.paths.append(PathCmd("MOVE", {"to": _xy(line.split(" ",1)[1], line_no)}))
        elif line.startswith("LINE "):
            current.paths.append(PathCmd("LINE", {"to": _xy(line.split(" ",1)[1], line_no)}))
        elif line.startswith("CURVE "):
            # CURVE x1,y1 -> x2,y2 -> x3,y3
            parts = [seg.strip() for seg in line.split(" ",1)[1].split("->")]
            if len(parts) != 3:
                raise DslError("CURVE needs three points", line_no)
            cp1, cp2, to = (_xy(p, line_no) for p in parts)
            current.paths.append(PathCmd("CURVE", {"cp1": cp1, "cp2": cp2, "to": to}))
        elif line == "CLOSE":
            current.paths.append(PathCmd("CLOSE", {}))
        elif line.startswith("WIDTH "):
            try:
                current.half_width = float(line.split(" ",1)[1])
            except ValueError:
                raise DslError(f"bad WIDTH value: {line}", line_no) from None
        else:
            raise DslError(f"Unknown line: {line}", line_no)
    if current is not None:
        raise DslError(f"stroke {current.name!r} missing END")
    return strokes
