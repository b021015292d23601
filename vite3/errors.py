"""Error taxonomy for the vite3 scaffolder.

Every error the tool raises on purpose derives from ``ScaffoldError`` so the
CLI has a single boundary to catch.  Only ``CancellationError`` is a benign
outcome; everything else ends the run with a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vite3.models import CommandResult


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ConfigValidationError(ScaffoldError, ValueError):
    """Raised when a prompt answer fails validation.

    Also a ``ValueError`` so pydantic validators can raise it directly.
    """


class CancellationError(ScaffoldError):
    """Raised when the user declines, interrupts, or closes the input stream."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class FileSystemError(ScaffoldError):
    """Raised when a directory or file operation fails."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class CommandError(ScaffoldError):
    """Raised when an install command exits non-zero or cannot be started."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        super().__init__(
            f"Command failed with exit code {result.returncode}: {result.command}"
        )
