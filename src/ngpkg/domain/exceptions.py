"""Domain exceptions: all public errors of ngpkg.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class NgPkgError(Exception):
    """Base for all ngpkg error exceptions.

    Allows: except NgPkgError to catch all library errors.
    """


class ConfigNotFoundError(NgPkgError, FileNotFoundError):
    """Package manifest absent at the resolved base path.

    Always fatal for the primary entry point.

    Attributes:
        path: Path that was expected to hold the manifest.
    """

    def __init__(self, *, path: Path) -> None:
        """Initialize with the missing path."""
        self.path = path
        super().__init__(f"Cannot discover package sources at {path}")


class ConfigInvalidError(NgPkgError, ValueError):
    """Configuration source missing, unsupported or unreadable.

    Attributes:
        path: File or directory the configuration was read from.
        reason: Why the configuration is invalid.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with path and reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ConfigSchemaError(NgPkgError, ValueError):
    """Entry-point configuration value has the wrong type or value.

    Attributes:
        key: Dotted key of the offending value (e.g. "lib.entryFile").
        reason: Why the value is rejected.
    """

    def __init__(self, *, key: str, reason: str) -> None:
        """Initialize with key and reason."""
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")


class SecondaryIsPrimaryError(NgPkgError, ValueError):
    """Secondary entry point resolves to the primary's directory.

    Attributes:
        path: Directory shared by primary and secondary.
    """

    def __init__(self, *, path: Path) -> None:
        """Initialize with the shared directory."""
        self.path = path
        super().__init__(f"Secondary entry point is already a primary. path={path}")


class ScanError(NgPkgError, OSError):
    """Directory scan for secondary entry points failed.

    Scans have no redundant path: always fatal.

    Attributes:
        path: Directory being scanned.
        reason: Underlying OS error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with path and reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to scan {path}: {reason}")
