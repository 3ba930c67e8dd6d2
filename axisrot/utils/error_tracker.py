# utils/error_tracker.py
"""Centralised error tracking for the command-line runners."""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from axisrot.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect exceptions and contextual information during execution."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    # ────────────── collection API ──────────────
    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error(f"{key}: {message}")
        self.errors.setdefault(key, []).append(message)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return dict(self.errors)


# ────────────── context manager API ──────────────


@contextmanager
def error_scope(
    name: str = "scope", tracker: ErrorTracker | None = None, *, reraise: bool = True
) -> Iterator[None]:
    """Wrap a block to log (and optionally record) exceptions raised inside it."""
    logger = get_logger("ErrorScope")
    try:
        yield
    except Exception as exc:
        logger.error(f"[{name}] Traceback:\n{traceback.format_exc()}")
        if tracker is not None:
            tracker.record(name, f"{type(exc).__name__}: {exc}")
        if reraise:
            raise


__all__ = ["ErrorTracker", "error_scope"]
