"""JSON reporter: DiscoveryReport -> JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ngpkg.domain.model.candidate import SkippedCandidate

if TYPE_CHECKING:
    from ngpkg.domain.model.candidate import DiscoveryReport
    from ngpkg.domain.model.entry_point import EntryPoint


class JSONReporter:
    """JSON reporter: outputs machine-readable JSON.

    Paths are rendered as strings, configuration as its defaulted mapping.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: DiscoveryReport) -> str:
        """Format discovery report as JSON string."""
        graph = result.graph
        data = {
            "root_path": str(graph.root_path),
            "dest": str(graph.dest),
            "primary": self._entry_point_to_dict(graph.primary),
            "secondaries": [self._entry_point_to_dict(e) for e in graph.secondaries],
            "skipped": [self._skipped_to_dict(s) for s in result.skipped],
            "summary": {
                "entry_points": len(graph.entry_points),
                "skipped": len(result.skipped),
            },
        }
        return json.dumps(data, indent=self._indent, default=_to_jsonable)

    def _entry_point_to_dict(self, entry: EntryPoint) -> dict[str, object]:
        return {
            "module_id": entry.module_id,
            "source_path": str(entry.source_path),
            "destination_path": str(entry.destination_path),
            "entry_file": entry.entry_file,
            "flat_module_file": entry.flat_module_file,
            "umd_id": entry.umd_id,
            "config": entry.config.values,
        }

    def _skipped_to_dict(self, skipped: SkippedCandidate) -> dict[str, object]:
        return {
            "path": str(skipped.path),
            "error": type(skipped.error).__name__,
            "message": str(skipped.error),
        }


def _to_jsonable(value: object) -> object:
    """json.dumps fallback for read-only mappings and tuples."""
    if hasattr(value, "items"):
        return dict(value.items())  # type: ignore[attr-defined]
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
