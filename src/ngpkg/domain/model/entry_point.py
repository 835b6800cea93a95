"""Entry point entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ngpkg.domain.model.configuration import NgPackageConfig
from ngpkg.domain.model.frozen import freeze_mapping


@dataclass(frozen=True, slots=True)
class EntryPoint:
    """Independently buildable unit of a library package.

    Primary: module_id is the package name.
    Secondary: module_id is the primary's plus the relative source path.

    Attributes:
        module_id: Import path consumers use (slash-separated)
        destination_path: Absolute output directory
        source_path: Absolute directory holding the package descriptor
        package_json: Parsed package manifest
        ng_package_json: Raw entry-point configuration
        config: Validated entry-point configuration
    """

    module_id: str
    destination_path: Path
    source_path: Path
    package_json: Mapping[str, object]
    ng_package_json: Mapping[str, object]
    config: NgPackageConfig

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module_id:
            raise ValueError("module_id must not be empty")
        if "\\" in self.module_id:
            raise ValueError(f"module_id must use '/' separators, got {self.module_id!r}")
        if not self.destination_path.is_absolute():
            raise ValueError(f"destination_path must be absolute, got {self.destination_path}")
        if not self.source_path.is_absolute():
            raise ValueError(f"source_path must be absolute, got {self.source_path}")

        object.__setattr__(self, "package_json", freeze_mapping(self.package_json))
        object.__setattr__(self, "ng_package_json", freeze_mapping(self.ng_package_json))

    def get(self, key: str) -> object:
        """Look up a configuration value by dotted key."""
        return self.config.get(key)

    @property
    def entry_file(self) -> str:
        """Entry file, relative to source_path."""
        return self.config.lib.entry_file

    @property
    def entry_file_path(self) -> Path:
        """Absolute path of the entry file."""
        return self.source_path / self.entry_file

    @property
    def css_url(self) -> str:
        return self.config.lib.css_url

    @property
    def comments(self) -> str:
        return self.config.lib.comments

    @property
    def license_path(self) -> str | None:
        return self.config.lib.license_path

    @property
    def umd_module_ids(self) -> Mapping[str, str]:
        return self.config.lib.umd_module_ids

    @property
    def embedded(self) -> tuple[str, ...]:
        return self.config.lib.embedded

    @property
    def language_level(self) -> tuple[str, ...]:
        return self.config.lib.language_level

    @property
    def flat_module_file(self) -> str:
        """Flat module file name: configured, or module id joined with '-'."""
        return self.config.lib.flat_module_file or self._flatten_module_id("-")

    @property
    def umd_id(self) -> str:
        """UMD global id: module id joined with '.'.

        Example:
            "@my/lib/testing" -> "my.lib.testing"
        """
        return self._flatten_module_id(".")

    def _flatten_module_id(self, separator: str) -> str:
        module_id = self.module_id.removeprefix("@")
        return separator.join(module_id.split("/"))
