#!/usr/bin/env python3
"""Benchmark script for ngpkg discovery performance.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import tempfile
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of ngpkg package."""
    start = time.perf_counter()
    import ngpkg  # noqa: F401

    return time.perf_counter() - start


def build_tree(root: Path, secondaries: int, dependencies: int) -> None:
    """Write a library with N secondaries and M installed dependencies."""

    def write(directory: Path, name: str) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "package.json").write_text(json.dumps({"name": name}))

    write(root, "benchlib")
    (root / "ng-package.json").write_text(json.dumps({"dest": "dist"}))
    for i in range(secondaries):
        write(root / "features" / f"feature{i}", f"benchlib/features/feature{i}")
    for i in range(dependencies):
        write(root / "node_modules" / f"dep{i}" / "sub", f"dep{i}")


def benchmark_discovery(secondaries: int, dependencies: int) -> float:
    """Measure one discovery run over a generated tree."""
    from ngpkg import discover_packages_sync

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp) / "lib"
        build_tree(root, secondaries, dependencies)

        start = time.perf_counter()
        graph = discover_packages_sync(root)
        elapsed = time.perf_counter() - start

    if len(graph.secondaries) != secondaries:
        raise RuntimeError(f"expected {secondaries} secondaries, got {len(graph.secondaries)}")
    return elapsed


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run ngpkg benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Discovery with pruned node_modules
    discovery_time = benchmark_discovery(secondaries=200, dependencies=2000)
    results.append(
        {
            "name": "Discovery (200 secondaries, 2k deps)",
            "unit": "seconds",
            "value": discovery_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
