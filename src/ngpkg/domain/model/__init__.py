"""Domain model: descriptors, configuration, entry points, package graph."""

from ngpkg.domain.model.candidate import (
    CandidateResult,
    DiscoveryReport,
    ResolvedCandidate,
    SkippedCandidate,
)
from ngpkg.domain.model.configuration import LibOptions, NgPackageConfig, validate_config
from ngpkg.domain.model.descriptor import RawPackageDescriptor
from ngpkg.domain.model.entry_point import EntryPoint
from ngpkg.domain.model.options import DEFAULT_EXCLUDED_DIRS, DiscoveryOptions
from ngpkg.domain.model.package_graph import PackageGraph

__all__ = [
    # Options
    "DEFAULT_EXCLUDED_DIRS",
    "DiscoveryOptions",
    # Configuration
    "LibOptions",
    "NgPackageConfig",
    "validate_config",
    # Entities
    "RawPackageDescriptor",
    "EntryPoint",
    "PackageGraph",
    # Discovery outcome
    "CandidateResult",
    "DiscoveryReport",
    "ResolvedCandidate",
    "SkippedCandidate",
]
