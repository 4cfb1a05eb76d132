"""
Pytest configuration and fixtures for magic_sorter tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Callable, Generator, Iterable, List

import pytest

from magic_sorter.core.types import LogEvent
from magic_sorter.organization import EventLog, Sorter, UndoLedger


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_files(temp_dir: Path) -> Callable[..., List[Path]]:
    """Create files (relative to temp_dir) whose content is their name."""

    def _make(names: Iterable[str], base: Path = None) -> List[Path]:
        base = base or temp_dir
        created = []
        for name in names:
            path = base / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(name)
            created.append(path)
        return created

    return _make


@pytest.fixture
def events() -> EventLog:
    return EventLog()


@pytest.fixture
def sorter(events: EventLog) -> Sorter:
    return Sorter(ledger=UndoLedger(), events=events)


@pytest.fixture
def received(events: EventLog) -> List[LogEvent]:
    """Events streamed to a subscriber."""
    collected: List[LogEvent] = []
    events.subscribe(collected.append)
    return collected


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
    """Keep MAGIC_SORTER_* variables and .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("MAGIC_SORTER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)

