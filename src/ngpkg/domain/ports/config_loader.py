"""Configuration loader port."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

    from ngpkg.domain.model.configuration import NgPackageConfig

ValidatorFn: TypeAlias = "Callable[[Mapping[str, object]], NgPackageConfig]"


class ConfigLoaderProtocol(Protocol):
    """Loads an entry-point configuration file into a mapping.

    Loaders are selected by file extension. A target that cannot evaluate
    a file type registers no loader for it and discovery fails closed.
    """

    def load(self, path: Path) -> Mapping[str, object]:
        """Load configuration from path.

        Args:
            path: Regular file holding the configuration

        Returns:
            Configuration object

        Raises:
            ConfigInvalidError: If the file cannot be turned into an object
        """
        ...
