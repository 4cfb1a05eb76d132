"""
Undo ledger for sort runs.

Keeps completed batches in memory, most recent last. Nothing is persisted;
the ledger is lost when the process exits.
"""

import logging
import threading
from typing import Iterable, List, Optional

from ..core.types import Batch, MovedFileRecord

logger = logging.getLogger(__name__)


class UndoLedger:
    """Last-in-first-out stack of batches."""

    def __init__(self) -> None:
        self._batches: List[Batch] = []
        self._lock = threading.Lock()

    def push(self, batch: Batch) -> bool:
        """
        Push a batch if it holds at least one record.

        Args:
            batch: Batch to push

        Returns:
            True if the batch was pushed
        """
        if not batch.records:
            return False
        with self._lock:
            self._batches.append(batch)
        logger.debug(f"Recorded batch {batch.batch_id} ({len(batch)} moves)")
        return True

    def push_records(self, records: Iterable[MovedFileRecord]) -> Optional[Batch]:
        """Build a batch from records and push it; None if records is empty."""
        batch = Batch(records=tuple(records))
        return batch if self.push(batch) else None

    def pop(self) -> Optional[Batch]:
        """Remove and return the most recent batch, or None if empty."""
        with self._lock:
            if not self._batches:
                return None
            return self._batches.pop()

    def peek(self) -> Optional[Batch]:
        """Return the most recent batch without removing it."""
        with self._lock:
            return self._batches[-1] if self._batches else None

    def clear(self) -> None:
        with self._lock:
            self._batches.clear()

    @property
    def can_undo(self) -> bool:
        return len(self) > 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._batches)
