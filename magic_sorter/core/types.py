"""
Type definitions for the sorter.
"""

import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Classification bucket driving the destination folder."""

    IMAGES = "images"
    VIDEOS = "videos"
    MUSIC = "music"
    DOCUMENTS = "documents"
    ARCHIVES = "archives"
    APPS = "apps"
    CODE = "code"
    OTHER = "other"


class Locale(str, Enum):
    """Display language for folder labels and log messages."""

    ENGLISH = "en"
    FRENCH = "fr"


class LogKind(str, Enum):
    """Kind of a log event, used by shells for icons and colors."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DRY_RUN = "dry_run"


class LogEvent(BaseModel):
    """A single entry of the log event stream."""

    message: str = Field(description="Human-readable message")
    kind: LogKind = Field(default=LogKind.INFO, description="Event kind")
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the event was emitted",
    )

    model_config = ConfigDict(frozen=True)


class SortOptions(BaseModel):
    """Immutable configuration snapshot for one run."""

    recursive: bool = Field(default=False, description="Scan subfolders")
    dry_run: bool = Field(default=False, description="Log moves without moving")
    create_parent_folder: bool = Field(
        default=True,
        description="Sort into a parent folder instead of the source root",
    )
    parent_folder_name: str = Field(
        default="",
        description="Parent folder name; empty means the localized default",
    )
    disabled_categories: FrozenSet[Category] = Field(
        default_factory=frozenset,
        description="Categories whose files are left untouched",
    )
    locale: Locale = Field(default=Locale.ENGLISH, description="Display language")

    model_config = ConfigDict(frozen=True)

    def is_disabled(self, category: Category) -> bool:
        return category in self.disabled_categories


class PlannedMove(BaseModel):
    """Where a single file would go."""

    source_path: Path
    destination_path: Path
    category: Category

    model_config = ConfigDict(frozen=True)

    @property
    def is_in_place(self) -> bool:
        """True if the file already sits at its destination."""
        return self.source_path == self.destination_path


class MovedFileRecord(BaseModel):
    """A move that succeeded, kept for undo."""

    original_path: Path
    destination_path: Path

    model_config = ConfigDict(frozen=True)


class Batch(BaseModel):
    """Successful moves of one live run, in the order they were performed."""

    batch_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=datetime.now)
    records: Tuple[MovedFileRecord, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.records)


class BatchResult(BaseModel):
    """Outcome of a sort run."""

    moved_count: int = 0
    planned_count: int = 0
    failed_count: int = 0
    had_undoable_batch: bool = False
    dry_run: bool = False


class UndoResult(BaseModel):
    """Outcome of an undo request."""

    restored_count: int = 0
    failed_count: int = 0
    skipped_count: int = 0
