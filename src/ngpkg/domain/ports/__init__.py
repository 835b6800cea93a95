"""Domain ports (interfaces implemented by infrastructure)."""

from ngpkg.domain.ports.config_loader import ConfigLoaderProtocol, ValidatorFn
from ngpkg.domain.ports.diagnostics import DiagnosticsProtocol

__all__ = [
    "ConfigLoaderProtocol",
    "DiagnosticsProtocol",
    "ValidatorFn",
]
