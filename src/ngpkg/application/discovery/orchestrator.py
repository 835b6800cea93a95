"""Package discovery orchestration.

Resolves the primary entry point (failures are fatal), scans for
secondary candidates and resolves each independently (failures are
skipped and reported to the diagnostics sink).
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

from ngpkg.application.discovery.entry_points import primary_entry_point, secondary_entry_point
from ngpkg.application.discovery.resolver import resolve_package_conf
from ngpkg.application.discovery.scanner import find_secondary_package_paths
from ngpkg.domain.model.candidate import (
    CandidateResult,
    DiscoveryReport,
    ResolvedCandidate,
    SkippedCandidate,
)
from ngpkg.domain.model.configuration import validate_config
from ngpkg.domain.model.options import DiscoveryOptions
from ngpkg.domain.model.package_graph import PackageGraph
from ngpkg.infrastructure.diagnostics import LoggingDiagnostics
from ngpkg.infrastructure.loaders import default_loaders

if TYPE_CHECKING:
    from ngpkg.domain.model.entry_point import EntryPoint
    from ngpkg.domain.ports.config_loader import ValidatorFn
    from ngpkg.domain.ports.diagnostics import DiagnosticsProtocol
    from ngpkg.infrastructure.loaders import LoaderRegistry


class DiscoveryOrchestrator:
    """Builds a PackageGraph from a project path.

    Stateless between runs: one instance may serve many discover() calls.
    """

    def __init__(
        self,
        *,
        options: DiscoveryOptions | None = None,
        loaders: LoaderRegistry | None = None,
        diagnostics: DiagnosticsProtocol | None = None,
        validate: ValidatorFn = validate_config,
    ) -> None:
        """Initialize orchestrator.

        Args:
            options: Naming policy. None = defaults.
            loaders: Config file loaders. None = default_loaders().
            diagnostics: Progress sink. None = LoggingDiagnostics().
            validate: Entry-point configuration validator.
        """
        self._options = options or DiscoveryOptions()
        self._loaders = loaders or default_loaders()
        self._diagnostics = diagnostics or LoggingDiagnostics()
        self._validate = validate

    async def discover(self, project: str | os.PathLike[str]) -> PackageGraph:
        """Discover the package graph of project.

        Args:
            project: Project directory or manifest file, absolute or
                relative to the working directory

        Returns:
            PackageGraph; secondaries that failed to resolve are omitted

        Raises:
            NgPkgError: If the primary entry point cannot be resolved
        """
        report = await self.discover_with_report(project)
        return report.graph

    async def discover_with_report(self, project: str | os.PathLike[str]) -> DiscoveryReport:
        """Like discover(), also returning the outcome of every candidate."""
        project_path = Path(os.path.abspath(project))

        primary_package = await resolve_package_conf(
            project_path,
            options=self._options,
            loaders=self._loaders,
        )
        primary = primary_entry_point(primary_package, validate=self._validate)
        self._diagnostics.primary_found(primary)

        candidates = await find_secondary_package_paths(
            primary_package.base_path,
            str(primary.get("dest")),
            options=self._options,
        )

        # Sorted before fan-out: gather keeps argument order
        results: list[CandidateResult] = await asyncio.gather(
            *(
                self._resolve_candidate(primary_package.base_path, primary, path)
                for path in sorted(candidates)
            ),
        )

        secondaries: list[EntryPoint] = []
        for result in results:
            match result:
                case ResolvedCandidate():
                    secondaries.append(result.entry_point)
                case SkippedCandidate():
                    self._diagnostics.secondary_skipped(result.path, result.error)

        if secondaries:
            self._diagnostics.secondaries_found(secondaries)

        graph = PackageGraph(
            root_path=primary_package.base_path,
            primary=primary,
            secondaries=tuple(secondaries),
        )
        return DiscoveryReport(graph=graph, results=tuple(results))

    async def _resolve_candidate(
        self,
        primary_directory_path: Path,
        primary: EntryPoint,
        path: Path,
    ) -> CandidateResult:
        """Resolve one candidate. Never raises; failures become SkippedCandidate."""
        try:
            descriptor = await resolve_package_conf(
                path,
                options=self._options,
                loaders=self._loaders,
            )
            entry_point = secondary_entry_point(
                primary_directory_path,
                primary,
                descriptor,
                validate=self._validate,
            )
        # BLE001: one candidate must not abort discovery, whatever an injected
        # validator or loader raises
        except Exception as exc:  # noqa: BLE001
            return SkippedCandidate(path=path, error=exc)

        return ResolvedCandidate(path=path, entry_point=entry_point)


async def discover_packages(
    project: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
    loaders: LoaderRegistry | None = None,
    diagnostics: DiagnosticsProtocol | None = None,
    validate: ValidatorFn = validate_config,
) -> PackageGraph:
    """Discover the package graph of project.

    Example:
        >>> graph = await discover_packages("projects/mylib")
        >>> [e.module_id for e in graph.entry_points]
        ['mylib', 'mylib/testing']
    """
    orchestrator = DiscoveryOrchestrator(
        options=options,
        loaders=loaders,
        diagnostics=diagnostics,
        validate=validate,
    )
    return await orchestrator.discover(project)


def discover_packages_sync(
    project: str | os.PathLike[str],
    *,
    options: DiscoveryOptions | None = None,
    loaders: LoaderRegistry | None = None,
    diagnostics: DiagnosticsProtocol | None = None,
    validate: ValidatorFn = validate_config,
) -> PackageGraph:
    """Run discover_packages() in a fresh event loop."""
    return asyncio.run(
        discover_packages(
            project,
            options=options,
            loaders=loaders,
            diagnostics=diagnostics,
            validate=validate,
        ),
    )
