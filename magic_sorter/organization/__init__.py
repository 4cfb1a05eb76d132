"""
Organization module for sorting folders by file category.

This module handles enumerating a source folder, planning collision-free
destinations, moving files into category folders, and undoing the most
recent batch.
"""

from .events import DEFAULT_CAPACITY, EventLog
from .ledger import UndoLedger
from .planner import (
    DestinationPlanner,
    resolve_destination_root,
    resolve_parent_folder_name,
)
from .scanner import PACKAGE_SUFFIXES, enumerate_files, is_package_directory
from .sorter import Sorter, move_file

__all__ = [
    "DEFAULT_CAPACITY",
    "EventLog",
    "UndoLedger",
    "DestinationPlanner",
    "resolve_destination_root",
    "resolve_parent_folder_name",
    "PACKAGE_SUFFIXES",
    "enumerate_files",
    "is_package_directory",
    "Sorter",
    "move_file",
]
