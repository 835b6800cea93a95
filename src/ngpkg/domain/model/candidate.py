"""Per-candidate discovery outcome.

Each secondary candidate yields exactly one result: resolved or skipped.
Failures are data, not suppressed exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from ngpkg.domain.model.entry_point import EntryPoint
from ngpkg.domain.model.package_graph import PackageGraph


@dataclass(frozen=True, slots=True)
class ResolvedCandidate:
    """Candidate directory that became a secondary entry point."""

    path: Path
    entry_point: EntryPoint


@dataclass(frozen=True, slots=True)
class SkippedCandidate:
    """Candidate directory that could not be read as an entry point.

    Attributes:
        path: Candidate directory
        error: Why it was skipped
    """

    path: Path
    error: Exception

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.error is None:
            raise TypeError("error must not be None")

    @property
    def reason(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


CandidateResult: TypeAlias = ResolvedCandidate | SkippedCandidate


@dataclass(frozen=True, slots=True)
class DiscoveryReport:
    """Package graph plus the outcome for every secondary candidate.

    Attributes:
        graph: Assembled package graph
        results: One result per candidate, ordered by path
    """

    graph: PackageGraph
    results: tuple[CandidateResult, ...] = ()

    @property
    def skipped(self) -> tuple[SkippedCandidate, ...]:
        return tuple(r for r in self.results if isinstance(r, SkippedCandidate))

    @property
    def resolved(self) -> tuple[ResolvedCandidate, ...]:
        return tuple(r for r in self.results if isinstance(r, ResolvedCandidate))
