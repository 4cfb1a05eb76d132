"""
Batch sorter.

Runs the scan, plan and move pipeline for a source folder in dry-run or live
mode, and reverses the most recent live batch on request. Per-file failures
are logged and never abort a batch.
"""

import logging
import os
import shutil
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..core.categories import category_label, classify_path
from ..core.errors import EnumerationError, MoveError, SorterBusyError
from ..core.messages import message
from ..core.types import (
    BatchResult,
    Locale,
    LogKind,
    MovedFileRecord,
    PlannedMove,
    SortOptions,
    UndoResult,
)
from ..shared.path_utils import ensure_directory_best_effort
from .events import EventLog
from .ledger import UndoLedger
from .planner import DestinationPlanner
from .scanner import enumerate_files

logger = logging.getLogger(__name__)


def move_file(source: Path, destination: Path) -> None:
    """
    Move a file without overwriting an existing destination.

    Raises:
        MoveError: If the destination is occupied or the move fails
    """
    try:
        # lexists never raises; names too long to stat fail in the move below
        if os.path.lexists(destination):
            raise MoveError(source, destination, "destination already exists")
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise MoveError(source, destination, e.strerror or str(e)) from e


class Sorter:
    """Sort folders into category subfolders and undo the last batch."""

    def __init__(
        self,
        ledger: Optional[UndoLedger] = None,
        events: Optional[EventLog] = None,
    ) -> None:
        """
        Initialize the sorter.

        Args:
            ledger: Undo ledger shared between runs
            events: Event stream that receives log events
        """
        self.ledger = ledger if ledger is not None else UndoLedger()
        self.events = events if events is not None else EventLog()
        self._busy = threading.Lock()
        # Locale of the last run, used for undo messages
        self._locale = Locale.ENGLISH

    @property
    def is_busy(self) -> bool:
        return self._busy.locked()

    @property
    def can_undo(self) -> bool:
        return self.ledger.can_undo

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self._busy.acquire(blocking=False):
            raise SorterBusyError("A sort or undo operation is already running")
        try:
            yield
        finally:
            self._busy.release()

    def run_batch(self, root: Union[Path, str], options: SortOptions) -> BatchResult:
        """
        Sort the files of a folder into category subfolders.

        Args:
            root: Source directory
            options: Snapshot of the run options

        Returns:
            Batch result with statistics

        Raises:
            SorterBusyError: If another operation is in flight
        """
        with self._exclusive():
            return self._run_batch(Path(root), options)

    def _run_batch(self, root: Path, options: SortOptions) -> BatchResult:
        locale = options.locale
        self._locale = locale
        dry_run = options.dry_run
        result = BatchResult(dry_run=dry_run)

        if dry_run:
            self.events.emit(message("simulation_started", locale), LogKind.DRY_RUN)
        else:
            self.events.emit(message("sort_started", locale), LogKind.INFO)

        planner = DestinationPlanner(root, options)
        try:
            files = enumerate_files(
                root,
                recursive=options.recursive,
                excluded_dirs=planner.destination_tree(),
            )
        except EnumerationError as e:
            logger.error(str(e))
            self.events.emit(message("read_error", locale), LogKind.WARNING)
            files = []

        if not files:
            self.events.emit(message("no_files", locale), LogKind.WARNING)
            return result

        logger.info(
            f"{'[DRY RUN] ' if dry_run else ''}Sorting {len(files)} files "
            f"from {root} into {planner.destination_root}"
        )

        if options.create_parent_folder and not dry_run:
            ensure_directory_best_effort(planner.destination_root)

        records: List[MovedFileRecord] = []
        try:
            for source in files:
                category = classify_path(source)
                if options.is_disabled(category):
                    continue
                # Enumeration already excludes these; recursive runs double check
                if planner.is_in_destination(source):
                    continue

                planned = planner.plan(source, category)
                if planned.is_in_place:
                    logger.debug(f"Skipping {source}: already in place")
                    continue

                label = category_label(category, locale)
                if dry_run:
                    self.events.emit(
                        message("would_move", locale, name=source.name, label=label),
                        LogKind.DRY_RUN,
                    )
                    result.planned_count += 1
                    continue

                record = self._apply(planned, locale)
                if record is None:
                    result.failed_count += 1
                else:
                    records.append(record)
        finally:
            # Moves already made stay undoable even if the loop is interrupted
            result.moved_count = len(records)
            if not dry_run:
                batch = self.ledger.push_records(records)
                result.had_undoable_batch = batch is not None

        self.events.emit(
            message("finished", locale),
            LogKind.DRY_RUN if dry_run else LogKind.SUCCESS,
        )
        return result

    def _apply(self, planned: PlannedMove, locale: Locale) -> Optional[MovedFileRecord]:
        """Move one planned file; returns the record or None on failure."""
        source = planned.source_path
        destination = planned.destination_path
        ensure_directory_best_effort(destination.parent)
        try:
            move_file(source, destination)
        except MoveError as e:
            logger.debug(str(e))
            self.events.emit(
                message("move_error", locale, name=source.name, reason=e.reason),
                LogKind.WARNING,
            )
            return None

        self.events.emit(message("moved", locale, name=source.name), LogKind.SUCCESS)
        return MovedFileRecord(original_path=source, destination_path=destination)

    def undo_last(self, locale: Optional[Locale] = None) -> UndoResult:
        """
        Move the files of the most recent batch back where they came from.

        The batch is removed from the ledger before any file is touched and is
        consumed even if some files cannot be restored.

        Args:
            locale: Language for log messages; defaults to the last run's

        Returns:
            Undo result; restored_count is 0 if the ledger was empty

        Raises:
            SorterBusyError: If another operation is in flight
        """
        with self._exclusive():
            return self._undo_last(Locale(locale) if locale else self._locale)

    def _undo_last(self, locale: Locale) -> UndoResult:
        result = UndoResult()
        batch = self.ledger.pop()
        if batch is None:
            logger.debug("Nothing to undo")
            return result

        self.events.emit(message("undo_started", locale), LogKind.INFO)
        logger.info(f"Undoing batch {batch.batch_id} ({len(batch)} moves)")

        for record in reversed(batch.records):
            current = record.destination_path
            original = record.original_path

            if not os.path.lexists(current):
                logger.debug(f"Cannot restore {original}: {current} is gone")
                result.skipped_count += 1
                continue

            ensure_directory_best_effort(original.parent)
            try:
                move_file(current, original)
            except MoveError as e:
                logger.debug(str(e))
                self.events.emit(
                    message(
                        "restore_error", locale, name=original.name, reason=e.reason
                    ),
                    LogKind.WARNING,
                )
                result.failed_count += 1
                continue

            result.restored_count += 1

        self.events.emit(
            message("undo_complete", locale, count=result.restored_count),
            LogKind.SUCCESS,
        )
        return result
