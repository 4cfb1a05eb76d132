"""Exceptions raised by the sorter."""

from pathlib import Path
from typing import Optional


class SorterError(Exception):
    """Base error for magic-sorter."""


class EnumerationError(SorterError):
    """The source root could not be read."""

    def __init__(self, root: Path, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot read directory {root}: {reason}")


class MoveError(SorterError):
    """A single file could not be moved."""

    def __init__(
        self, source: Path, destination: Path, reason: Optional[str] = None
    ) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason or "unknown error"
        super().__init__(f"Cannot move {source} -> {destination}: {self.reason}")


class DirectoryCreateError(SorterError):
    """A parent or category folder could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot create directory {path}: {reason}")


class SorterBusyError(SorterError):
    """A sort or undo operation is already in flight."""
