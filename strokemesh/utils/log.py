from __future__ import annotations

import logging
from typing import Union

_LOGGER_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Console logging for the CLI. Calling it twice only updates the level."""
    global _LOGGER_CONFIGURED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("strokemesh")
    logger.setLevel(level)
    if _LOGGER_CONFIGURED:
        return

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
