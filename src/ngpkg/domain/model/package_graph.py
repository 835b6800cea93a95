"""Package graph aggregate root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ngpkg.domain.exceptions import SecondaryIsPrimaryError
from ngpkg.domain.model.entry_point import EntryPoint

WORKING_DIR_NAME = ".ng_pkg_build"


@dataclass(frozen=True, slots=True)
class PackageGraph:
    """One discovered library: primary plus secondary entry points.

    Constructed once per discovery run, read-only afterwards.

    Attributes:
        root_path: Directory of the primary entry point
        primary: Primary entry point
        secondaries: Secondary entry points, ordered by source path
    """

    root_path: Path
    primary: EntryPoint
    secondaries: tuple[EntryPoint, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root_path.is_absolute():
            raise ValueError(f"root_path must be absolute, got {self.root_path}")

        for secondary in self.secondaries:
            if secondary.source_path == self.primary.source_path:
                raise SecondaryIsPrimaryError(path=secondary.source_path)

    @property
    def dest(self) -> Path:
        """Output root of the package (primary destination)."""
        return self.primary.destination_path

    @property
    def working_directory(self) -> Path:
        """Intermediate build directory."""
        return self.root_path / WORKING_DIR_NAME

    @property
    def entry_points(self) -> Sequence[EntryPoint]:
        """Primary first, then secondaries."""
        return (self.primary, *self.secondaries)

    def entry_point(self, module_id: str) -> EntryPoint:
        """Get entry point by module id.

        Raises:
            KeyError: If no entry point has that module id
        """
        for entry in self.entry_points:
            if entry.module_id == module_id:
                return entry
        raise KeyError(module_id)

    @property
    def whitelisted_non_peer_dependencies(self) -> tuple[str, ...]:
        return self.primary.config.whitelisted_non_peer_dependencies

    @property
    def keep_lifecycle_scripts(self) -> bool:
        return self.primary.config.keep_lifecycle_scripts

    @property
    def delete_dest_path(self) -> bool:
        return self.primary.config.delete_dest_path
