"""
Core types, classification and errors for the sorter.
"""

from .categories import (
    CATEGORY_EXTENSIONS,
    CATEGORY_LABELS,
    category_label,
    classify,
    classify_path,
    extensions_for,
)
from .errors import (
    DirectoryCreateError,
    EnumerationError,
    MoveError,
    SorterBusyError,
    SorterError,
)
from .messages import default_parent_folder_name, message
from .types import (
    Batch,
    BatchResult,
    Category,
    Locale,
    LogEvent,
    LogKind,
    MovedFileRecord,
    PlannedMove,
    SortOptions,
    UndoResult,
)

__all__ = [
    "CATEGORY_EXTENSIONS",
    "CATEGORY_LABELS",
    "category_label",
    "classify",
    "classify_path",
    "extensions_for",
    "DirectoryCreateError",
    "EnumerationError",
    "MoveError",
    "SorterBusyError",
    "SorterError",
    "default_parent_folder_name",
    "message",
    "Batch",
    "BatchResult",
    "Category",
    "Locale",
    "LogEvent",
    "LogKind",
    "MovedFileRecord",
    "PlannedMove",
    "SortOptions",
    "UndoResult",
]
