"""JSON configuration loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngpkg.infrastructure.filesystem import read_json_object

if TYPE_CHECKING:
    from pathlib import Path


class JSONConfigLoader:
    """Loads `ng-package.json`-style files. Content must be a JSON object."""

    def load(self, path: Path) -> dict[str, object]:
        return read_json_object(path)
