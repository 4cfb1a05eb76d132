"""Tests for core models and messages."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from magic_sorter.core.messages import default_parent_folder_name, message
from magic_sorter.core.types import (
    Batch,
    Category,
    Locale,
    LogEvent,
    LogKind,
    MovedFileRecord,
    PlannedMove,
    SortOptions,
)


class TestSortOptions:
    """Test the options snapshot."""

    def test_defaults(self) -> None:
        options = SortOptions()

        assert options.recursive is False
        assert options.dry_run is False
        assert options.create_parent_folder is True
        assert options.parent_folder_name == ""
        assert options.disabled_categories == frozenset()
        assert options.locale == Locale.ENGLISH

    def test_is_frozen(self) -> None:
        """Test options cannot change after creation."""
        options = SortOptions()
        with pytest.raises(ValidationError):
            options.dry_run = True

    def test_disabled_categories_from_strings(self) -> None:
        """Test category tags are validated into enum members."""
        options = SortOptions(disabled_categories={"images", "code"})

        assert options.disabled_categories == {Category.IMAGES, Category.CODE}
        assert options.is_disabled(Category.CODE)
        assert not options.is_disabled(Category.OTHER)

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SortOptions(disabled_categories={"cod"})

    def test_membership_is_exact(self) -> None:
        """Test a disabled tag never matches by substring."""
        options = SortOptions(disabled_categories={Category.DOCUMENTS})
        assert not options.is_disabled(Category.CODE)


class TestRecords:
    """Test move records and batches."""

    def test_planned_move_in_place(self) -> None:
        same = PlannedMove(
            source_path=Path("/a/x.jpg"),
            destination_path=Path("/a/x.jpg"),
            category=Category.IMAGES,
        )
        moved = PlannedMove(
            source_path=Path("/a/x.jpg"),
            destination_path=Path("/a/Images/x.jpg"),
            category=Category.IMAGES,
        )

        assert same.is_in_place
        assert not moved.is_in_place

    def test_record_is_immutable(self) -> None:
        record = MovedFileRecord(
            original_path=Path("/a/x.jpg"), destination_path=Path("/a/Images/x.jpg")
        )
        with pytest.raises(ValidationError):
            record.original_path = Path("/b")

    def test_batch_keeps_order(self) -> None:
        records = [
            MovedFileRecord(
                original_path=Path(f"/a/{i}.txt"),
                destination_path=Path(f"/a/Documents/{i}.txt"),
            )
            for i in range(3)
        ]
        batch = Batch(records=tuple(records))

        assert len(batch) == 3
        assert list(batch.records) == records
        assert batch.batch_id

    def test_batch_ids_are_unique(self) -> None:
        assert Batch().batch_id != Batch().batch_id


class TestLogEvent:
    def test_default_kind_is_info(self) -> None:
        event = LogEvent(message="hello")
        assert event.kind == LogKind.INFO
        assert event.timestamp is not None


class TestMessages:
    """Test localized messages."""

    def test_format(self) -> None:
        assert message("moved", Locale.ENGLISH, name="a.jpg") == "Moved: a.jpg"
        assert (
            message("would_move", Locale.ENGLISH, name="a.jpg", label="Images")
            == "Would move: a.jpg -> Images"
        )

    def test_every_key_translated(self) -> None:
        from magic_sorter.core.messages import MESSAGES

        assert set(MESSAGES[Locale.ENGLISH]) == set(MESSAGES[Locale.FRENCH])

    def test_default_parent_folder(self) -> None:
        assert default_parent_folder_name(Locale.ENGLISH) == "Sorted"
        assert default_parent_folder_name(Locale.FRENCH) == "Trié"
