"""Test factories for package trees and domain objects.

Centralized factory functions to avoid duplication across test modules.
Tree factories write real files under a tmp_path; object factories return
fully constructed domain objects.
"""

import json
from collections.abc import Mapping
from pathlib import Path

from ngpkg.domain.model.configuration import validate_config
from ngpkg.domain.model.descriptor import RawPackageDescriptor
from ngpkg.domain.model.entry_point import EntryPoint

# Default project root for in-memory objects - consistent across all tests
DEFAULT_ROOT = Path("/proj")


def write_json(path: Path, data: object) -> Path:
    """Write data as JSON, creating parent directories.

    Args:
        path: Target file
        data: JSON-serializable value

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def write_package(
    directory: Path,
    name: str,
    *,
    ng_package: Mapping[str, object] | None = None,
    embedded: Mapping[str, object] | None = None,
) -> Path:
    """Write a package directory with package.json and optional ng-package.json.

    Args:
        directory: Package directory (created if missing)
        name: Package name written to package.json
        ng_package: Content of ng-package.json. None = file not written.
        embedded: Value of the `ngPackage` field. None = field absent.

    Returns:
        The package directory
    """
    manifest: dict[str, object] = {"name": name}
    if embedded is not None:
        manifest["ngPackage"] = dict(embedded)
    write_json(directory / "package.json", manifest)

    if ng_package is not None:
        write_json(directory / "ng-package.json", dict(ng_package))

    return directory


def make_descriptor(
    base_path: Path = DEFAULT_ROOT,
    name: str = "mylib",
    ng_package: Mapping[str, object] | None = None,
) -> RawPackageDescriptor:
    """Create a RawPackageDescriptor without touching disk."""
    return RawPackageDescriptor(
        package_json={"name": name},
        ng_package_json=dict(ng_package or {}),
        base_path=base_path,
    )


def make_entry_point(
    module_id: str = "mylib",
    source_path: Path = DEFAULT_ROOT,
    destination_path: Path | None = None,
    ng_package: Mapping[str, object] | None = None,
) -> EntryPoint:
    """Create an EntryPoint without touching disk.

    Args:
        module_id: Module id
        source_path: Source directory (default /proj)
        destination_path: Output directory (default source_path / "dist")
        ng_package: Raw entry-point configuration

    Returns:
        EntryPoint instance
    """
    raw = dict(ng_package or {})
    return EntryPoint(
        module_id=module_id,
        destination_path=destination_path or source_path / "dist",
        source_path=source_path,
        package_json={"name": module_id},
        ng_package_json=raw,
        config=validate_config(raw),
    )
