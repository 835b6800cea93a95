"""Reporters for discovery results.

Output is str; the caller decides where it goes.
"""

from ngpkg.application.reporters.console import ConsoleConfig, ConsoleReporter
from ngpkg.application.reporters.json_reporter import JSONReporter
from ngpkg.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "ReporterProtocol",
]
