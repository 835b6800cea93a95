"""Application layer for package discovery.

- discovery: configuration resolution, candidate scanning, graph assembly
- reporters: output formatting (rich console, JSON)
"""

from ngpkg.application.discovery import (
    DiscoveryOrchestrator,
    discover_packages,
    discover_packages_sync,
    find_secondary_package_paths,
    primary_entry_point,
    resolve_package_conf,
    secondary_entry_point,
)
from ngpkg.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    ReporterProtocol,
)

__all__ = [
    # Discovery
    "DiscoveryOrchestrator",
    "discover_packages",
    "discover_packages_sync",
    "find_secondary_package_paths",
    "primary_entry_point",
    "resolve_package_conf",
    "secondary_entry_point",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "ReporterProtocol",
]
