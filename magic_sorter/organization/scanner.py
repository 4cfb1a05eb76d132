"""
File enumeration for a sort run.

Lists candidate files under a source root, flat or recursive, leaving out
hidden files, OS index files and anything already inside the destination
tree.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ..core.errors import EnumerationError
from ..shared.path_utils import is_hidden, is_system_file, is_within_any

logger = logging.getLogger(__name__)

# Directories the OS presents as single opaque files; their contents are not sorted
PACKAGE_SUFFIXES = frozenset(
    {
        ".app",
        ".bundle",
        ".framework",
        ".kext",
        ".photoslibrary",
        ".pkg",
        ".plugin",
        ".rtfd",
        ".xcodeproj",
        ".xcworkspace",
    }
)


def is_package_directory(path: Path) -> bool:
    """Check if a directory is a bundle-like package."""
    return path.suffix.lower() in PACKAGE_SUFFIXES


def _list_flat(root: Path) -> List[Path]:
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        raise EnumerationError(root, str(e)) from e
    return [entry for entry in entries if entry.is_file()]


def _list_recursive(root: Path) -> List[Path]:
    # os.walk swallows the error for the root itself, so probe it first
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise EnumerationError(root, str(e)) from e

    def on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error}")

    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current = Path(dirpath)
        # Prune in place so os.walk does not descend
        dirnames[:] = sorted(
            name
            for name in dirnames
            if not name.startswith(".")
            and not is_package_directory(current / name)
        )
        for name in sorted(filenames):
            if name.startswith("."):
                continue
            files.append(current / name)
    return files


def enumerate_files(
    root: Union[Path, str],
    recursive: bool = False,
    excluded_dirs: Optional[Iterable[Path]] = None,
) -> List[Path]:
    """
    List candidate files under a source root.

    Args:
        root: Directory to scan
        recursive: If True, walk the whole subtree
        excluded_dirs: Directories whose contents are never returned,
            typically the destination tree of the run

    Returns:
        Files in enumeration order

    Raises:
        EnumerationError: If root does not exist, is not a directory, or
            cannot be listed
    """
    root = Path(root)
    if not root.exists():
        raise EnumerationError(root, "directory does not exist")
    if not root.is_dir():
        raise EnumerationError(root, "not a directory")

    candidates = _list_recursive(root) if recursive else _list_flat(root)

    excluded: Sequence[Path] = [Path(p) for p in excluded_dirs or ()]
    files = [
        path
        for path in candidates
        if not is_hidden(path)
        and not is_system_file(path)
        and not is_within_any(path, excluded)
    ]

    logger.debug(
        f"Found {len(files)} files in {root} "
        f"({'recursive' if recursive else 'flat'})"
    )
    return files
