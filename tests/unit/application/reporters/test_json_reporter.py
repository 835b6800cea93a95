"""Tests for JSONReporter."""

import json
from pathlib import Path

from ngpkg.application.reporters.json_reporter import JSONReporter
from ngpkg.domain.model.candidate import DiscoveryReport, SkippedCandidate
from ngpkg.domain.model.package_graph import PackageGraph
from tests.factories import make_entry_point


def _report() -> DiscoveryReport:
    primary = make_entry_point(ng_package={"lib": {"umdModuleIds": {"lodash": "_"}}})
    testing = make_entry_point(
        module_id="mylib/testing",
        source_path=Path("/proj/testing"),
        destination_path=Path("/proj/dist/testing"),
    )
    graph = PackageGraph(root_path=Path("/proj"), primary=primary, secondaries=(testing,))
    skipped = SkippedCandidate(path=Path("/proj/bad"), error=ValueError("broken"))
    return DiscoveryReport(graph=graph, results=(skipped,))


class TestJSONReporter:
    def test_valid_json(self) -> None:
        data = json.loads(JSONReporter().report(_report()))

        assert data["root_path"] == "/proj"
        assert data["dest"] == "/proj/dist"

    def test_entry_points(self) -> None:
        data = json.loads(JSONReporter().report(_report()))

        assert data["primary"]["module_id"] == "mylib"
        assert data["primary"]["umd_id"] == "mylib"
        assert data["primary"]["config"]["lib"]["umdModuleIds"] == {"lodash": "_"}
        assert [e["module_id"] for e in data["secondaries"]] == ["mylib/testing"]
        assert data["secondaries"][0]["destination_path"] == "/proj/dist/testing"

    def test_skipped(self) -> None:
        data = json.loads(JSONReporter().report(_report()))

        assert data["skipped"] == [{"path": "/proj/bad", "error": "ValueError", "message": "broken"}]
        assert data["summary"] == {"entry_points": 2, "skipped": 1}

    def test_compact(self) -> None:
        output = JSONReporter(indent=None).report(_report())

        assert "\n" not in output
