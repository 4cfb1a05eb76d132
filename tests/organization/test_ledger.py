"""Tests for the undo ledger."""

import threading
from pathlib import Path

from magic_sorter.core.types import Batch, MovedFileRecord
from magic_sorter.organization.ledger import UndoLedger


def make_batch(count: int, tag: str = "x") -> Batch:
    return Batch(
        records=tuple(
            MovedFileRecord(
                original_path=Path(f"/src/{tag}{i}.txt"),
                destination_path=Path(f"/src/Sorted/Documents/{tag}{i}.txt"),
            )
            for i in range(count)
        )
    )


class TestUndoLedger:
    """Test UndoLedger."""

    def test_starts_empty(self) -> None:
        ledger = UndoLedger()

        assert len(ledger) == 0
        assert not ledger.can_undo
        assert ledger.pop() is None
        assert ledger.peek() is None

    def test_last_in_first_out(self) -> None:
        ledger = UndoLedger()
        first, second = make_batch(1, "a"), make_batch(2, "b")
        ledger.push(first)
        ledger.push(second)

        assert ledger.peek() is second
        assert ledger.pop() is second
        assert ledger.pop() is first
        assert ledger.pop() is None

    def test_empty_batch_not_pushed(self) -> None:
        ledger = UndoLedger()

        assert ledger.push(Batch()) is False
        assert ledger.push_records([]) is None
        assert len(ledger) == 0

    def test_push_records(self) -> None:
        ledger = UndoLedger()
        batch = ledger.push_records(make_batch(2).records)

        assert batch is not None
        assert len(batch) == 2
        assert ledger.can_undo

    def test_clear(self) -> None:
        ledger = UndoLedger()
        ledger.push(make_batch(1))
        ledger.clear()
        assert not ledger.can_undo

    def test_concurrent_pops_never_share_a_batch(self) -> None:
        """Test each batch is handed out exactly once."""
        ledger = UndoLedger()
        for i in range(50):
            ledger.push(make_batch(1, str(i)))

        popped = []
        lock = threading.Lock()

        def worker() -> None:
            while True:
                batch = ledger.pop()
                if batch is None:
                    return
                with lock:
                    popped.append(batch.batch_id)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(popped) == 50
        assert len(set(popped)) == 50
