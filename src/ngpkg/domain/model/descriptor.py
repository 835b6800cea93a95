"""Raw package descriptor value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ngpkg.domain.model.frozen import freeze_mapping


@dataclass(frozen=True, slots=True)
class RawPackageDescriptor:
    """Unvalidated package descriptor as read from disk.

    Attributes:
        package_json: Parsed package manifest.
        ng_package_json: Entry-point configuration (possibly empty).
        base_path: Absolute directory holding the manifest.
    """

    package_json: Mapping[str, object]
    base_path: Path
    ng_package_json: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants and freeze mappings. FAIL-FIRST."""
        if not self.base_path.is_absolute():
            raise ValueError(f"base_path must be absolute, got {self.base_path}")

        # Frozen dataclass: bypass __setattr__ to store read-only copies, nested values included
        object.__setattr__(self, "package_json", freeze_mapping(self.package_json))
        object.__setattr__(self, "ng_package_json", freeze_mapping(self.ng_package_json))
