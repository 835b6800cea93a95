"""pytest plugin for ngpkg.

Provides fixtures:
    ngpkg_project: Project path to discover
    ngpkg_graph: Discovered PackageGraph of that project

Configuration (pytest.ini or pyproject.toml):
    ngpkg_project: Project directory, relative to rootdir (default: ".")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngpkg.presentation.pytest_plugin.fixtures import ngpkg_graph, ngpkg_project

if TYPE_CHECKING:
    import pytest

__all__ = [
    "ngpkg_graph",
    "ngpkg_project",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("ngpkg_project", "Project directory for ngpkg fixtures", default=".")


def pytest_configure(config: pytest.Config) -> None:
    """Register markers."""
    config.addinivalue_line(
        "markers",
        "ngpkg: mark test as package layout test",
    )
