"""Discovery options: file naming and exclusion policy."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EXCLUDED_DIRS = frozenset(
    {
        "node_modules",
        "dist",
        ".ng_build",
        ".ng_pkg_build",
    },
)


@dataclass(frozen=True, slots=True)
class DiscoveryOptions:
    """Naming policy used to locate package descriptors.

    All fields have defaults matching the Angular package format.
    Immutable (frozen dataclass).

    Attributes:
        manifest_name: Package manifest file name.
        config_json_name: Structured entry-point configuration file name.
        config_script_name: Script entry-point configuration file name.
        embedded_key: Manifest field holding inline entry-point configuration.
        manifest_pattern: fnmatch pattern of files marking a secondary candidate.
        excluded_dirs: Directory names pruned at any depth while scanning.
    """

    manifest_name: str = "package.json"
    config_json_name: str = "ng-package.json"
    config_script_name: str = "ng-package.js"
    embedded_key: str = "ngPackage"
    manifest_pattern: str = "*package.json"
    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("manifest_name", "config_json_name", "config_script_name", "embedded_key"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")
        if not self.manifest_pattern:
            raise ValueError("manifest_pattern must not be empty")
        if "/" in self.manifest_name or "\\" in self.manifest_name:
            raise ValueError(f"manifest_name must be a bare file name, got {self.manifest_name!r}")
