"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- Header and entry point table content
- Skipped section rendering
"""

from pathlib import Path

import pytest

from ngpkg.application.reporters.console import ConsoleConfig, ConsoleReporter
from ngpkg.domain.exceptions import ConfigNotFoundError
from ngpkg.domain.model.candidate import DiscoveryReport, ResolvedCandidate, SkippedCandidate
from ngpkg.domain.model.package_graph import PackageGraph
from tests.factories import make_entry_point


@pytest.fixture
def report() -> DiscoveryReport:
    primary = make_entry_point()
    testing = make_entry_point(
        module_id="mylib/testing",
        source_path=Path("/proj/testing"),
        destination_path=Path("/proj/dist/testing"),
    )
    graph = PackageGraph(root_path=Path("/proj"), primary=primary, secondaries=(testing,))
    skipped = SkippedCandidate(
        path=Path("/proj/broken"),
        error=ConfigNotFoundError(path=Path("/proj/broken/package.json")),
    )
    return DiscoveryReport(
        graph=graph,
        results=(ResolvedCandidate(path=Path("/proj/testing"), entry_point=testing), skipped),
    )


class TestConsoleConfig:
    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.show_skipped is True
        assert config.relative_paths is True
        assert config.width == 120

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=10)


class TestConsoleReporter:
    def test_header(self, report: DiscoveryReport) -> None:
        output = ConsoleReporter().report(report)

        assert "PACKAGE mylib" in output
        assert "/proj/dist" in output

    def test_lists_entry_points(self, report: DiscoveryReport) -> None:
        output = ConsoleReporter().report(report)

        assert "mylib/testing" in output
        assert "primary" in output
        assert "secondary" in output

    def test_relative_paths(self, report: DiscoveryReport) -> None:
        output = ConsoleReporter(ConsoleConfig(width=200)).report(report)

        assert "dist/testing" in output

    def test_skipped_section(self, report: DiscoveryReport) -> None:
        output = ConsoleReporter().report(report)

        assert "SKIPPED" in output
        assert "ConfigNotFoundError" in output

    def test_skipped_section_hidden(self, report: DiscoveryReport) -> None:
        output = ConsoleReporter(ConsoleConfig(show_skipped=False)).report(report)

        assert "SKIPPED" not in output
