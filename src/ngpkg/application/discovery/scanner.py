"""Secondary entry point candidate scanning.

Similar to `find <root> -name '*package.json' -exec dirname {} \;`
with build output and dependency directories pruned.
"""

from __future__ import annotations

import asyncio
import fnmatch
import os
from pathlib import Path

from ngpkg.domain.exceptions import ScanError
from ngpkg.domain.model.options import DiscoveryOptions


async def find_secondary_package_paths(
    directory_path: str | os.PathLike[str],
    exclude_folder: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
) -> frozenset[Path]:
    """Find directories that may hold secondary entry points.

    Args:
        directory_path: Primary entry point directory to scan
        exclude_folder: Sub-folder of directory_path excluded from results,
            usually the primary's `dest`. Absolute paths are used as is.
        options: Naming policy. None = defaults.

    Returns:
        Deduplicated absolute directory paths

    Raises:
        ScanError: If any directory cannot be listed
    """
    return await asyncio.to_thread(
        find_secondary_package_paths_sync,
        directory_path,
        exclude_folder,
        options=options,
    )


def find_secondary_package_paths_sync(
    directory_path: str | os.PathLike[str],
    exclude_folder: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
) -> frozenset[Path]:
    """Blocking variant of find_secondary_package_paths()."""
    options = options or DiscoveryOptions()

    root = Path(os.path.abspath(directory_path))
    excluded_root = Path(os.path.normpath(root / exclude_folder))
    primary_files = frozenset({root / options.manifest_name, root / options.config_json_name})

    found: set[Path] = set()

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_scan_error):
        current = Path(dirpath)

        if current.is_relative_to(excluded_root):
            dirnames.clear()
            continue

        # Prune in place so os.walk never descends into excluded trees
        dirnames[:] = [name for name in dirnames if not _is_excluded_dir(name, options)]

        for name in filenames:
            if name.startswith(".") or not fnmatch.fnmatchcase(name, options.manifest_pattern):
                continue
            if current / name in primary_files:
                continue
            found.add(current)

    return frozenset(found)


def _is_excluded_dir(name: str, options: DiscoveryOptions) -> bool:
    """Excluded names and dot directories (glob semantics) are never scanned."""
    return name in options.excluded_dirs or name.startswith(".")


def _raise_scan_error(error: OSError) -> None:
    path = Path(error.filename) if error.filename else Path()
    raise ScanError(path=path, reason=error.strerror or str(error)) from error
