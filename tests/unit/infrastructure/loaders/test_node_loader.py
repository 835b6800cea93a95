"""Tests for infrastructure/loaders/node_loader.py (require Node.js)."""

import shutil
from pathlib import Path

import pytest

from ngpkg.domain.exceptions import ConfigInvalidError
from ngpkg.infrastructure.loaders.node_loader import NodeScriptConfigLoader

pytestmark = pytest.mark.skipif(shutil.which("node") is None, reason="node not installed")


class TestNodeScriptConfigLoader:
    def test_module_exports(self, tmp_path: Path) -> None:
        path = tmp_path / "ng-package.js"
        path.write_text("module.exports = { dest: 'out', lib: { entryFile: 'index.ts' } };")

        assert NodeScriptConfigLoader().load(path) == {"dest": "out", "lib": {"entryFile": "index.ts"}}

    def test_es_module_default(self, tmp_path: Path) -> None:
        path = tmp_path / "ng-package.js"
        path.write_text(
            "Object.defineProperty(exports, '__esModule', { value: true });"
            "exports.default = { dest: 'esm' };",
        )

        assert NodeScriptConfigLoader().load(path) == {"dest": "esm"}

    def test_throwing_script_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "ng-package.js"
        path.write_text("throw new Error('boom');")

        with pytest.raises(ConfigInvalidError, match="script config failed"):
            NodeScriptConfigLoader().load(path)

    def test_non_object_export_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "ng-package.js"
        path.write_text("module.exports = 42;")

        with pytest.raises(ConfigInvalidError, match="must export an object"):
            NodeScriptConfigLoader().load(path)
