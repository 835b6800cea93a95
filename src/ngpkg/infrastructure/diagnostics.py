"""Logging-backed diagnostics sink."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ngpkg.domain.model.entry_point import EntryPoint

logger = logging.getLogger("ngpkg.discovery")


class LoggingDiagnostics:
    """Forwards discovery messages to a standard library logger.

    Found entry points log at DEBUG, skipped candidates at WARNING.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def primary_found(self, entry_point: EntryPoint) -> None:
        self._log.debug("Found primary entry point: %s", entry_point.module_id)

    def secondaries_found(self, entry_points: Sequence[EntryPoint]) -> None:
        self._log.debug(
            "Found secondary entry points: %s",
            ", ".join(e.module_id for e in entry_points),
        )

    def secondary_skipped(self, path: Path, error: Exception) -> None:
        self._log.warning("Cannot read secondary entry point at %s. Skipping. (%s)", path, error)
