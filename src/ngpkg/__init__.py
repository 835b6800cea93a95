"""ngpkg - entry point discovery for Angular-format library packages."""

__version__ = "0.1.0"

from ngpkg.application.discovery import (  # noqa: E402
    DiscoveryOrchestrator,
    discover_packages,
    discover_packages_sync,
)
from ngpkg.domain.exceptions import (  # noqa: E402
    ConfigInvalidError,
    ConfigNotFoundError,
    ConfigSchemaError,
    NgPkgError,
    ScanError,
    SecondaryIsPrimaryError,
)
from ngpkg.domain.model import EntryPoint, PackageGraph  # noqa: E402

__all__ = [
    "ConfigInvalidError",
    "ConfigNotFoundError",
    "ConfigSchemaError",
    "DiscoveryOrchestrator",
    "EntryPoint",
    "NgPkgError",
    "PackageGraph",
    "ScanError",
    "SecondaryIsPrimaryError",
    "__version__",
    "discover_packages",
    "discover_packages_sync",
]
