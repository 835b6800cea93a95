"""Tests for domain/model/candidate.py."""

from pathlib import Path

import pytest

from ngpkg.domain.exceptions import ConfigNotFoundError
from ngpkg.domain.model.candidate import DiscoveryReport, ResolvedCandidate, SkippedCandidate
from ngpkg.domain.model.package_graph import PackageGraph
from tests.factories import make_entry_point


class TestSkippedCandidate:
    def test_reason_includes_type(self) -> None:
        skipped = SkippedCandidate(
            path=Path("/proj/a"),
            error=ConfigNotFoundError(path=Path("/proj/a/package.json")),
        )

        assert skipped.reason.startswith("ConfigNotFoundError: ")

    def test_none_error_raises(self) -> None:
        with pytest.raises(TypeError, match="error"):
            SkippedCandidate(path=Path("/proj/a"), error=None)  # type: ignore[arg-type]


class TestDiscoveryReport:
    def test_partitions_results(self) -> None:
        secondary = make_entry_point(module_id="mylib/a", source_path=Path("/proj/a"))
        resolved = ResolvedCandidate(path=Path("/proj/a"), entry_point=secondary)
        skipped = SkippedCandidate(path=Path("/proj/b"), error=ValueError("bad"))
        graph = PackageGraph(
            root_path=Path("/proj"),
            primary=make_entry_point(),
            secondaries=(secondary,),
        )

        report = DiscoveryReport(graph=graph, results=(resolved, skipped))

        assert report.resolved == (resolved,)
        assert report.skipped == (skipped,)
