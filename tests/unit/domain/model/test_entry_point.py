"""Tests for domain/model/entry_point.py."""

from pathlib import Path

import pytest

from ngpkg.domain.model.configuration import validate_config
from ngpkg.domain.model.entry_point import EntryPoint
from tests.factories import make_entry_point


class TestEntryPointInvariants:
    def test_empty_module_id_raises(self) -> None:
        with pytest.raises(ValueError, match="module_id"):
            make_entry_point(module_id="")

    def test_backslash_module_id_raises(self) -> None:
        with pytest.raises(ValueError, match="'/' separators"):
            make_entry_point(module_id="mylib\\testing")

    def test_relative_paths_raise(self) -> None:
        with pytest.raises(ValueError, match="destination_path"):
            make_entry_point(destination_path=Path("dist"))
        with pytest.raises(ValueError, match="source_path"):
            EntryPoint(
                module_id="mylib",
                destination_path=Path("/proj/dist"),
                source_path=Path("proj"),
                package_json={},
                ng_package_json={},
                config=validate_config({}),
            )


class TestEntryPointDerived:
    def test_entry_file_path(self) -> None:
        entry = make_entry_point(ng_package={"lib": {"entryFile": "index.ts"}})

        assert entry.entry_file == "index.ts"
        assert entry.entry_file_path == Path("/proj/index.ts")

    def test_umd_id_strips_scope(self) -> None:
        assert make_entry_point(module_id="@my/lib/testing").umd_id == "my.lib.testing"

    def test_flat_module_file_derived(self) -> None:
        assert make_entry_point(module_id="@my/lib/testing").flat_module_file == "my-lib-testing"

    def test_flat_module_file_configured(self) -> None:
        entry = make_entry_point(ng_package={"lib": {"flatModuleFile": "custom"}})

        assert entry.flat_module_file == "custom"

    def test_get_delegates_to_config(self) -> None:
        entry = make_entry_point(ng_package={"dest": "out"})

        assert entry.get("dest") == "out"
        assert entry.css_url == "inline"
        assert entry.comments == "none"
        assert entry.license_path is None
        assert entry.embedded == ()
        assert entry.language_level == ()
        assert dict(entry.umd_module_ids) == {}
