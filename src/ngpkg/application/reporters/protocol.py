"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ngpkg.domain.model.candidate import DiscoveryReport


class ReporterProtocol(Protocol):
    """Protocol for discovery report formatters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: DiscoveryReport) -> str:
        """Format discovery report as string.

        Args:
            result: Discovery report to format.

        Returns:
            Formatted string representation.
        """
        ...
