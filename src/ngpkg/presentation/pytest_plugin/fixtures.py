"""pytest fixtures for package layout tests.

User overrides ngpkg_project in their conftest.py to point elsewhere.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from ngpkg.application.discovery import discover_packages_sync

if TYPE_CHECKING:
    from ngpkg.domain.model.package_graph import PackageGraph


@pytest.fixture(scope="session")
def ngpkg_project(request: pytest.FixtureRequest) -> Path:
    """Project directory from the `ngpkg_project` ini option.

    Raises:
        FileNotFoundError: If the configured path does not exist
    """
    root_dir = Path(str(request.config.rootpath))
    project = root_dir / str(request.config.getini("ngpkg_project") or ".")

    if not project.exists():
        raise FileNotFoundError(
            f"ngpkg project not found: {project}. Set 'ngpkg_project' in pytest.ini",
        )
    return project


@pytest.fixture(scope="session")
def ngpkg_graph(ngpkg_project: Path) -> PackageGraph:
    """Package graph of the configured project. Discovered once per session."""
    return discover_packages_sync(ngpkg_project)
