"""Package configuration resolution.

Finds the package manifest and the entry-point configuration for a
directory or file path. Entry-point configuration precedence:

1. Embedded manifest field (`ngPackage`), presence of the key decides
   (a null value counts as absent)
2. Structured config file (`ng-package.json`)
3. Script config file (`ng-package.js`), via the registered loader
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ngpkg.domain.exceptions import ConfigInvalidError, ConfigNotFoundError
from ngpkg.domain.model.descriptor import RawPackageDescriptor
from ngpkg.domain.model.options import DiscoveryOptions
from ngpkg.infrastructure.filesystem import file_exists, read_json_object
from ngpkg.infrastructure.loaders import default_loaders

if TYPE_CHECKING:
    from ngpkg.infrastructure.loaders import LoaderRegistry

MANIFEST_WITHOUT_CONFIG = "manifest has no entry-point configuration field"
UNSUPPORTED_EXTENSION = "unsupported file extension for entry-point configuration"


async def resolve_package_conf(
    path: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
    loaders: LoaderRegistry | None = None,
) -> RawPackageDescriptor:
    """Resolve the package descriptor for a directory or file.

    Args:
        path: Directory, or file inside the package directory. Relative
            paths resolve against the working directory.
        options: Naming policy. None = defaults.
        loaders: Loaders for config files. None = default_loaders().

    Returns:
        Descriptor; entry-point configuration is empty when a directory
        has no configuration source.

    Raises:
        ConfigNotFoundError: Path or manifest does not exist
        ConfigInvalidError: Manifest unreadable, embedded field not an object,
            config file unloadable, or a file path without any config source
    """
    return await asyncio.to_thread(
        resolve_package_conf_sync,
        path,
        options=options,
        loaders=loaders,
    )


def resolve_package_conf_sync(
    path: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
    loaders: LoaderRegistry | None = None,
) -> RawPackageDescriptor:
    """Blocking variant of resolve_package_conf()."""
    options = options or DiscoveryOptions()
    loaders = loaders or default_loaders()

    full_path = Path(os.path.abspath(path))
    if not full_path.exists():
        raise ConfigNotFoundError(path=full_path)

    is_directory = full_path.is_dir()
    base_path = full_path if is_directory else full_path.parent

    package_json = read_json_object(base_path / options.manifest_name)
    ng_package_json = _find_entry_point_config(base_path, package_json, options, loaders)

    if ng_package_json is not None:
        return RawPackageDescriptor(
            package_json=package_json,
            ng_package_json=ng_package_json,
            base_path=base_path,
        )

    # Directories fall back to defaults
    if is_directory:
        return RawPackageDescriptor(package_json=package_json, base_path=base_path)

    # A specific file was given but no configuration backs it
    if full_path.name == options.manifest_name:
        raise ConfigInvalidError(path=full_path, reason=MANIFEST_WITHOUT_CONFIG)
    raise ConfigInvalidError(path=full_path, reason=UNSUPPORTED_EXTENSION)


def _find_entry_point_config(
    base_path: Path,
    package_json: Mapping[str, object],
    options: DiscoveryOptions,
    loaders: LoaderRegistry,
) -> Mapping[str, object] | None:
    """Apply precedence. None = no configuration source found."""
    # null is treated as absent; any other present value must be an object
    embedded = package_json.get(options.embedded_key)
    if embedded is not None:
        if not isinstance(embedded, Mapping):
            raise ConfigInvalidError(
                path=base_path / options.manifest_name,
                reason=f"'{options.embedded_key}' must be an object, got {type(embedded).__name__}",
            )
        return dict(embedded)

    for name in (options.config_json_name, options.config_script_name):
        config_path = base_path / name
        if file_exists(config_path):
            return loaders.load(config_path)

    return None
