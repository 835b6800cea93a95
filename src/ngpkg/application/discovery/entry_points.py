"""Entry point construction from resolved descriptors."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from ngpkg.domain.exceptions import ConfigInvalidError, SecondaryIsPrimaryError
from ngpkg.domain.model.configuration import validate_config
from ngpkg.domain.model.entry_point import EntryPoint

if TYPE_CHECKING:
    from ngpkg.domain.model.descriptor import RawPackageDescriptor
    from ngpkg.domain.ports.config_loader import ValidatorFn


def primary_entry_point(
    descriptor: RawPackageDescriptor,
    *,
    validate: ValidatorFn = validate_config,
) -> EntryPoint:
    """Build the primary entry point.

    module_id is the package name; destination_path is `dest`
    resolved against the package directory.

    Raises:
        ConfigInvalidError: If the manifest has no usable `name`
        ConfigSchemaError: If the entry-point configuration is invalid
    """
    name = descriptor.package_json.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigInvalidError(
            path=descriptor.base_path,
            reason="package manifest must declare a non-empty 'name'",
        )

    config = validate(descriptor.ng_package_json)

    return EntryPoint(
        module_id=name,
        destination_path=_normalize(descriptor.base_path / config.dest),
        source_path=descriptor.base_path,
        package_json=descriptor.package_json,
        ng_package_json=descriptor.ng_package_json,
        config=config,
    )


def secondary_entry_point(
    primary_directory_path: Path,
    primary: EntryPoint,
    descriptor: RawPackageDescriptor,
    *,
    validate: ValidatorFn = validate_config,
) -> EntryPoint:
    """Build a secondary entry point relative to the primary.

    Args:
        primary_directory_path: Directory of the primary entry point
        primary: The primary entry point
        descriptor: Descriptor of the secondary

    Returns:
        Entry point whose module_id and destination_path are the primary's
        extended by the relative source path.

    Raises:
        SecondaryIsPrimaryError: If descriptor is the primary's directory
        ConfigSchemaError: If the entry-point configuration is invalid

    Example:
        primary "mylib" at /proj, secondary at /proj/testing
        -> module_id "mylib/testing", destination <primary dest>/testing
    """
    if descriptor.base_path == primary_directory_path:
        raise SecondaryIsPrimaryError(path=descriptor.base_path)

    relative_path = os.path.relpath(descriptor.base_path, primary_directory_path)
    # module ids are slash-separated on every platform
    relative_source_path = PurePath(relative_path).as_posix().replace("\\", "/")

    config = validate(descriptor.ng_package_json)

    return EntryPoint(
        module_id=f"{primary.module_id}/{relative_source_path}",
        destination_path=_normalize(primary.destination_path / relative_path),
        source_path=descriptor.base_path,
        package_json=descriptor.package_json,
        ng_package_json=descriptor.ng_package_json,
        config=config,
    )


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))
