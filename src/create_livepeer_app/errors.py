"""Exception types raised while creating a new Livepeer app."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "CloneError",
    "DestinationExistsError",
    "InstallError",
    "ManifestError",
    "ScaffoldError",
]


class ScaffoldError(RuntimeError):
    """Base class for failures of the project creation pipeline."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CloneError(ScaffoldError):
    """Raised when the boilerplate repository cannot be cloned."""

    def __init__(self, message: str, *, exit_code: int, stderr: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class DestinationExistsError(CloneError):
    """Raised when the clone destination is already present on disk."""

    def __init__(self, destination: Path, *, exit_code: int, stderr: str = "") -> None:
        super().__init__(
            f"destination path '{destination}' already exists",
            exit_code=exit_code,
            stderr=stderr,
        )
        self.destination = destination


class ManifestError(ScaffoldError):
    """Raised when ``package.json`` cannot be read or rewritten."""


class InstallError(ScaffoldError):
    """Raised when the package manager fails to install dependencies."""

    def __init__(self, command: Sequence[str], exit_code: int) -> None:
        super().__init__(f"'{' '.join(command)}' exited with status {exit_code}")
        self.command = tuple(command)
        self.exit_code = exit_code
