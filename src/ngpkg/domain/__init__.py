"""ngpkg domain layer.

Pure domain logic with no I/O.
Only imports: typing, dataclasses, pathlib, types, collections.abc
"""

from ngpkg.domain.exceptions import (
    ConfigInvalidError,
    ConfigNotFoundError,
    ConfigSchemaError,
    NgPkgError,
    ScanError,
    SecondaryIsPrimaryError,
)
from ngpkg.domain.model import (
    DiscoveryOptions,
    DiscoveryReport,
    EntryPoint,
    NgPackageConfig,
    PackageGraph,
    RawPackageDescriptor,
    ResolvedCandidate,
    SkippedCandidate,
    validate_config,
)
from ngpkg.domain.ports import ConfigLoaderProtocol, DiagnosticsProtocol, ValidatorFn

__all__ = [
    # Exceptions
    "NgPkgError",
    "ConfigNotFoundError",
    "ConfigInvalidError",
    "ConfigSchemaError",
    "SecondaryIsPrimaryError",
    "ScanError",
    # Model
    "DiscoveryOptions",
    "RawPackageDescriptor",
    "NgPackageConfig",
    "validate_config",
    "EntryPoint",
    "PackageGraph",
    "DiscoveryReport",
    "ResolvedCandidate",
    "SkippedCandidate",
    # Ports
    "ConfigLoaderProtocol",
    "DiagnosticsProtocol",
    "ValidatorFn",
]
