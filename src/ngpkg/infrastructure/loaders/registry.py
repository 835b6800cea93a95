"""Loader registry: file extension -> configuration loader."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from ngpkg.domain.exceptions import ConfigInvalidError
from ngpkg.infrastructure.loaders.json_loader import JSONConfigLoader
from ngpkg.infrastructure.loaders.node_loader import NodeScriptConfigLoader

if TYPE_CHECKING:
    from pathlib import Path

    from ngpkg.domain.ports.config_loader import ConfigLoaderProtocol


class LoaderRegistry:
    """Immutable mapping of file suffix to loader.

    Suffixes are matched case-sensitively and include the dot (".json").
    """

    def __init__(self, loaders: Mapping[str, ConfigLoaderProtocol]) -> None:
        """Initialize registry.

        Raises:
            ValueError: If a suffix does not start with "."
        """
        for suffix in loaders:
            if not suffix.startswith("."):
                raise ValueError(f"suffix must start with '.', got {suffix!r}")
        self._loaders: Mapping[str, ConfigLoaderProtocol] = MappingProxyType(dict(loaders))

    @property
    def suffixes(self) -> frozenset[str]:
        return frozenset(self._loaders)

    def supports(self, path: Path) -> bool:
        return path.suffix in self._loaders

    def load(self, path: Path) -> Mapping[str, object]:
        """Load path with the loader registered for its suffix.

        Raises:
            ConfigInvalidError: If no loader handles the suffix
        """
        loader = self._loaders.get(path.suffix)
        if loader is None:
            raise ConfigInvalidError(
                path=path,
                reason=f"no configuration loader registered for '{path.suffix}'",
            )
        return loader.load(path)

    def with_loader(self, suffix: str, loader: ConfigLoaderProtocol) -> LoaderRegistry:
        """Return a copy with suffix mapped to loader."""
        return LoaderRegistry({**self._loaders, suffix: loader})

    def without(self, suffix: str) -> LoaderRegistry:
        """Return a copy with suffix unsupported."""
        return LoaderRegistry({k: v for k, v in self._loaders.items() if k != suffix})


def default_loaders() -> LoaderRegistry:
    """JSON loader plus the Node.js script loader."""
    return LoaderRegistry(
        {
            ".json": JSONConfigLoader(),
            ".js": NodeScriptConfigLoader(),
        },
    )
