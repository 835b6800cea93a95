"""Configuration loaders, selected by file extension."""

from ngpkg.infrastructure.loaders.json_loader import JSONConfigLoader
from ngpkg.infrastructure.loaders.node_loader import NodeScriptConfigLoader
from ngpkg.infrastructure.loaders.registry import LoaderRegistry, default_loaders

__all__ = [
    "JSONConfigLoader",
    "LoaderRegistry",
    "NodeScriptConfigLoader",
    "default_loaders",
]
