"""
Magic Sorter - sort a folder into category subfolders by file extension.

Provides a reversible batch sorter with dry-run support, collision-safe
renaming and an in-memory undo ledger.
"""

from .version import __version__

__all__ = ["__version__"]
