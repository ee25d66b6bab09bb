"""Loguru helpers for consistent console and file logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}

_DEBUG_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <level>{message}</level>"


def _log_dir() -> Path:
    return Path.home() / ".odoosearch" / "logs"


def ensure_rotating_log_file(name: str, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_path = _log_dir() / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path


def _reset_sinks() -> None:
    """Remove every handler; file sinks registered here are gone too."""
    logger.remove()
    _SINK_IDS.clear()


def configure_logging(command: str, *, logs: bool, debug: bool, level: str = "INFO", to_file: bool = False) -> None:
    """Enable odoosearch logs for ``--logs``/``--debug``; keep them silent otherwise."""
    if debug:
        _reset_sinks()
        logger.add(sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
        logger.enable("odoosearch")
        ensure_rotating_log_file(command, level="DEBUG")
    elif logs:
        _reset_sinks()
        logger.add(sys.stderr, level=level)
        logger.enable("odoosearch")
        ensure_rotating_log_file(command, level=level)
    elif to_file:
        _reset_sinks()
        logger.enable("odoosearch")
        ensure_rotating_log_file(command, level=level)
    else:
        logger.disable("odoosearch")
