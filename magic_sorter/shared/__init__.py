"""
Shared utilities for magic-sorter.
"""

from .logging_utils import setup_logging
from .path_utils import (
    SYSTEM_FILES,
    ensure_directory,
    ensure_directory_best_effort,
    is_hidden,
    is_system_file,
    is_within,
    is_within_any,
)

__all__ = [
    "SYSTEM_FILES",
    "ensure_directory",
    "ensure_directory_best_effort",
    "is_hidden",
    "is_system_file",
    "is_within",
    "is_within_any",
    "setup_logging",
]
