from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .utils.errors import ConfigError
from .validators.degeneracy import DEFAULT_PARALLEL_TOL


@dataclass(frozen=True)
class StrokeOptions:
    half_width: float = 1.0
    parallel_tolerance: float = DEFAULT_PARALLEL_TOL
    flatten_tol: float = 0.2
    units: str = "mm"
    log_level: str = "INFO"

    def override(self, **values: Any) -> "StrokeOptions":
        """Copy with the given values, ignoring the ones left as None (unset CLI flags)."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def options_from_dict(data: Dict[str, Any]) -> StrokeOptions:
    known = {f.name for f in fields(StrokeOptions)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
    try:
        opts = StrokeOptions(**{
            k: (str(v) if k in ("units", "log_level") else float(v))
            for k, v in data.items()
        })
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad option value: {e}") from None
    if opts.half_width <= 0:
        raise ConfigError("half_width must be positive")
    if opts.parallel_tolerance < 0 or opts.flatten_tol <= 0:
        raise ConfigError("tolerances must be positive")
    return opts


def load_options(path: Optional[Path]) -> StrokeOptions:
    """Read an options YAML file; no path means defaults."""
    if path is None:
        return StrokeOptions()
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from None
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return options_from_dict(data)
