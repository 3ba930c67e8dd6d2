# utils/logger.py
"""Single-source Loguru setup: one console sink, optional file sink."""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger


# ---------- options ----------
@dataclass(slots=True)
class _LogOptions:
    level: str = os.environ.get("AXISROT_LOG_LEVEL", "INFO")
    file: str | None = os.environ.get("AXISROT_LOG_FILE")


_OPTIONS = _LogOptions()
_CONFIGURED = False
_LOGGER: LoguruLogger | None = None
_LOG_FILE: Path | None = None
_LOG_FH: TextIO | None = None


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, file: str | None = None) -> None:
    global _CONFIGURED, _LOGGER, _LOG_FILE, _LOG_FH

    # drop every handler, including loguru's default stderr one
    _root_logger.remove()
    if _LOG_FH is not None:
        _LOG_FH.close()
        _LOG_FH = None

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))
        return record

    logger = _root_logger.patch(_inject_extras)
    resolved_level = (level or _OPTIONS.level).upper()
    logger.add(_console_sink, level=resolved_level, catch=True)

    target = file or _OPTIONS.file
    if target:
        file_path = Path(target).expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        _LOG_FH = file_path.open("a", encoding="utf-8")
        logger.add(_make_file_sink(_LOG_FH), level=resolved_level, catch=True)
        _LOG_FILE = file_path
    else:
        _LOG_FILE = None

    _LOGGER = logger
    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    # resolve the caller's module name automatically
    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    assert _LOGGER is not None
    bound = _LOGGER.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        if args:
            text = text.format(*args)
        getattr(bound, level, bound.info)(text)

    setattr(bound, "tag", _tag)
    return bound


def configure(level: str | None = None, file: str | None = None) -> None:
    _configure_logger(level=level, file=file)


def current_log_file() -> Path | None:
    return _LOG_FILE


__all__ = ["get_logger", "configure", "current_log_file"]
