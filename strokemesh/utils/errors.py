"""Typed errors raised by the stroke pipeline."""
from __future__ import annotations
from typing import Optional


class StrokeError(Exception):
    """Base error for the project."""


class StrokeValidationError(StrokeError):
    """Input polyline or width cannot be stroked."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class TooFewPointsError(StrokeValidationError):
    pass


class NonFiniteCoordinateError(StrokeValidationError):
    pass


class InvalidHalfWidthError(StrokeValidationError):
    pass


class ZeroLengthSegmentError(StrokeValidationError):
    """Two cyclically-adjacent points coincide."""


class DegenerateJoinError(StrokeValidationError):
    """Incoming and outgoing edges are anti-parallel; the miter is undefined."""


class ParallelLinesError(StrokeError):
    """Offset lines do not intersect (cross product ~ 0)."""


class DslError(StrokeError):
    def __init__(self, message: str, line_no: Optional[int] = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class OpenPathError(DslError):
    """Stroke path has no CLOSE; only closed polylines are supported."""


class ConfigError(StrokeError):
    pass
