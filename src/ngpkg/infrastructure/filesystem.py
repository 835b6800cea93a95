"""Filesystem primitives used by discovery.

Blocking functions. Async callers run them via asyncio.to_thread.
"""

from __future__ import annotations

import json
import stat
from typing import TYPE_CHECKING

from ngpkg.domain.exceptions import ConfigInvalidError, ConfigNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def file_exists(path: Path) -> bool:
    """Check path exists AND is a regular file.

    Symlinks are not followed: a directory named like a config file,
    or a link pointing at one, never counts.
    """
    try:
        mode = path.lstat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False

    return stat.S_ISREG(mode)


def read_json_object(path: Path) -> dict[str, object]:
    """Read a JSON file that must contain an object.

    Args:
        path: JSON file to read

    Returns:
        Parsed object

    Symlinks are followed, so a linked manifest reads like a plain one.

    Raises:
        ConfigNotFoundError: If path does not resolve to a regular file
        ConfigInvalidError: If content is not valid JSON or not an object
    """
    if not path.is_file():
        raise ConfigNotFoundError(path=path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigInvalidError(path=path, reason=f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigInvalidError(path=path, reason=f"not UTF-8 text: {e}") from e

    if not isinstance(data, dict):
        raise ConfigInvalidError(
            path=path,
            reason=f"expected a JSON object, got {type(data).__name__}",
        )
    return data
