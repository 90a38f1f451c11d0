"""Exceptions raised by the recorder."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.schemas import MismatchReport


class RecorderError(Exception):
    """Base exception for recorder errors."""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.recoverable = recoverable


class ConfigError(RecorderError):
    """Invalid or missing recording directory, filename or test identity."""


class PathNotFoundError(RecorderError):
    """Upward search did not find the requested path."""

    def __init__(self, fragment: str | Path, searched_paths: list[Path]) -> None:
        searched = "\n".join(str(p) for p in searched_paths)
        super().__init__(f"Could not find {fragment}, searched:\n{searched}")
        self.fragment = Path(fragment)
        self.searched_paths = searched_paths


class FatalIOError(RecorderError):
    """A required file or directory could not be read, written or created."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class MismatchError(RecorderError, AssertionError):
    """Produced data does not match the recording."""

    def __init__(self, report: MismatchReport) -> None:
        super().__init__(str(report), recoverable=True)
        self.report = report
