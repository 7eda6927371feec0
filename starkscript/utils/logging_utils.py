"""Loguru helpers for consistent file logging in scripts."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".starkscript" / "logs"


def ensure_rotating_log_file(name: str, level: str = "INFO", log_dir: Path | None = None) -> Path:
    """Ensure a rotating log sink for the given script name."""
    directory = log_dir or get_log_dir()
    log_path = directory / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    directory.mkdir(parents=True, exist_ok=True)
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


def remove_log_file_sink(name: str) -> bool:
    """Detach a sink added by ensure_rotating_log_file; return True if one was attached."""
    sink_id = _SINK_IDS.pop(name, None)
    if sink_id is None:
        return False
    logger.remove(sink_id)
    return True
