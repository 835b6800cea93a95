"""Infrastructure layer: filesystem access, config loaders, diagnostics."""

from ngpkg.infrastructure.diagnostics import LoggingDiagnostics
from ngpkg.infrastructure.filesystem import file_exists, read_json_object
from ngpkg.infrastructure.loaders import (
    JSONConfigLoader,
    LoaderRegistry,
    NodeScriptConfigLoader,
    default_loaders,
)

__all__ = [
    "JSONConfigLoader",
    "LoaderRegistry",
    "LoggingDiagnostics",
    "NodeScriptConfigLoader",
    "default_loaders",
    "file_exists",
    "read_json_object",
]
