"""Diagnostics sink port.

Purely observational: implementations must not affect control flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ngpkg.domain.model.entry_point import EntryPoint


class DiagnosticsProtocol(Protocol):
    """Receives discovery progress messages."""

    def primary_found(self, entry_point: EntryPoint) -> None:
        """Primary entry point was built."""
        ...

    def secondaries_found(self, entry_points: Sequence[EntryPoint]) -> None:
        """Secondary entry points were built (called only when non-empty)."""
        ...

    def secondary_skipped(self, path: Path, error: Exception) -> None:
        """Candidate directory could not be read as a secondary entry point."""
        ...
