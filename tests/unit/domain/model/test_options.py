"""Tests for domain/model/options.py."""

import pytest

from ngpkg.domain.model.options import DiscoveryOptions


class TestDiscoveryOptions:
    def test_defaults(self) -> None:
        options = DiscoveryOptions()

        assert options.manifest_name == "package.json"
        assert options.config_json_name == "ng-package.json"
        assert options.config_script_name == "ng-package.js"
        assert options.embedded_key == "ngPackage"
        assert "node_modules" in options.excluded_dirs
        assert ".ng_pkg_build" in options.excluded_dirs

    @pytest.mark.parametrize(
        "field",
        ["manifest_name", "config_json_name", "config_script_name", "embedded_key", "manifest_pattern"],
    )
    def test_empty_name_raises(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            DiscoveryOptions(**{field: ""})

    def test_manifest_name_with_separator_raises(self) -> None:
        with pytest.raises(ValueError, match="bare file name"):
            DiscoveryOptions(manifest_name="sub/package.json")
