"""
Filesystem helpers shared by the scanner, planner and sorter.
"""

import logging
from pathlib import Path
from typing import Iterable

from ..core.errors import DirectoryCreateError

logger = logging.getLogger(__name__)

# Desktop index files written by the OS, never sorted
SYSTEM_FILES = frozenset({".DS_Store", "Thumbs.db", "desktop.ini"})


def is_hidden(path: Path) -> bool:
    """Check if a file or directory name starts with a dot."""
    return path.name.startswith(".")


def is_system_file(path: Path) -> bool:
    """Check if a file is an OS index file such as .DS_Store."""
    return path.name in SYSTEM_FILES


def is_within(path: Path, ancestor: Path) -> bool:
    """
    Check if path equals ancestor or lies below it.

    Compares path components, so "/data/Sorted2/a.jpg" is not within
    "/data/Sorted".
    """
    try:
        path.relative_to(ancestor)
    except ValueError:
        return False
    return True


def is_within_any(path: Path, ancestors: Iterable[Path]) -> bool:
    """Check if path lies within any of the given directories."""
    return any(is_within(path, ancestor) for ancestor in ancestors)


def ensure_directory(path: Path) -> Path:
    """
    Create a directory and its parents if missing.

    Args:
        path: Directory to create

    Returns:
        The directory path

    Raises:
        DirectoryCreateError: If the directory could not be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path, str(e)) from e
    return path


def ensure_directory_best_effort(path: Path) -> bool:
    """
    Create a directory, logging instead of raising on failure.

    Returns:
        True if the directory exists afterwards
    """
    try:
        ensure_directory(path)
    except DirectoryCreateError as e:
        logger.warning(str(e))
        return False
    return True
