"""Discovery of primary and secondary entry points.

- resolver: package manifest and entry-point configuration lookup
- scanner: secondary candidate directories
- entry_points: entry point construction
- orchestrator: full package graph
"""

from ngpkg.application.discovery.entry_points import primary_entry_point, secondary_entry_point
from ngpkg.application.discovery.orchestrator import (
    DiscoveryOrchestrator,
    discover_packages,
    discover_packages_sync,
)
from ngpkg.application.discovery.resolver import resolve_package_conf, resolve_package_conf_sync
from ngpkg.application.discovery.scanner import (
    find_secondary_package_paths,
    find_secondary_package_paths_sync,
)

__all__ = [
    "DiscoveryOrchestrator",
    "discover_packages",
    "discover_packages_sync",
    "find_secondary_package_paths",
    "find_secondary_package_paths_sync",
    "primary_entry_point",
    "resolve_package_conf",
    "resolve_package_conf_sync",
    "secondary_entry_point",
]
