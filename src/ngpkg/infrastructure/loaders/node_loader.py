"""Script configuration loader: evaluates a CommonJS module with Node.js.

The module's export (or its `default` export) must be JSON-serializable.
Without a `node` executable the loader fails closed.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from typing import TYPE_CHECKING

from ngpkg.domain.exceptions import ConfigInvalidError

if TYPE_CHECKING:
    from pathlib import Path

# Reads the module path from argv so no path quoting is needed
_EVAL_SCRIPT = (
    "const m = require(process.argv[1]);"
    "const c = (m && m.__esModule && m.default !== undefined) ? m.default : m;"
    "process.stdout.write(JSON.stringify(c === undefined ? null : c));"
)


class NodeScriptConfigLoader:
    """Loads `ng-package.js` by running it in a Node.js subprocess."""

    def __init__(self, node_executable: str | None = None) -> None:
        """Initialize loader.

        Args:
            node_executable: Explicit node binary. None = look up "node" on PATH.
        """
        self._node_executable = node_executable

    def load(self, path: Path) -> dict[str, object]:
        """Evaluate path and return its exported configuration.

        Raises:
            ConfigInvalidError: No node executable, evaluation failed,
                or the export is not an object
        """
        node = self._node_executable or shutil.which("node")
        if node is None:
            raise ConfigInvalidError(path=path, reason="cannot evaluate script config: node not found")

        result = subprocess.run(  # noqa: S603
            [node, "-e", _EVAL_SCRIPT, str(path)],
            cwd=str(path.parent),
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            stderr = result.stderr.strip().splitlines()
            detail = stderr[-1] if stderr else f"exit code {result.returncode}"
            raise ConfigInvalidError(path=path, reason=f"script config failed: {detail}")

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ConfigInvalidError(path=path, reason=f"script config is not serializable: {e}") from e

        if not isinstance(data, dict):
            raise ConfigInvalidError(
                path=path,
                reason=f"script config must export an object, got {type(data).__name__}",
            )
        return data
