"""Unit tests for photos/timestamps.py — filename dates and fallback chains."""

from datetime import UTC, datetime

from photo_feed.graph.models import DriveItem
from photo_feed.photos.timestamps import filename_date, group_timestamp, sort_timestamp

TAKEN = datetime(2024, 5, 1, 10, tzinfo=UTC)
CREATED = datetime(2024, 5, 2, 10, tzinfo=UTC)
MODIFIED = datetime(2024, 5, 3, 10, tzinfo=UTC)


class TestFilenameDate:
    def test_prefix_becomes_noon_utc(self) -> None:
        assert filename_date("20240501_101500.jpg") == datetime(2024, 5, 1, 12, tzinfo=UTC)

    def test_prefix_must_start_the_name(self) -> None:
        assert filename_date("IMG_20240501.jpg") is None

    def test_short_prefix_is_ignored(self) -> None:
        assert filename_date("2024051.jpg") is None

    def test_impossible_dates_are_ignored(self) -> None:
        assert filename_date("20241399.jpg") is None
        assert filename_date("20230229.jpg") is None


class TestSortTimestamp:
    def test_filename_beats_metadata(self) -> None:
        item = DriveItem(id="a", name="20200101.jpg", taken_at=TAKEN, created_at=CREATED)
        assert sort_timestamp(item) == datetime(2020, 1, 1, 12, tzinfo=UTC)

    def test_capture_beats_creation(self) -> None:
        item = DriveItem(id="a", name="a.jpg", taken_at=TAKEN, created_at=CREATED)
        assert sort_timestamp(item) == TAKEN

    def test_creation_used_without_capture(self) -> None:
        item = DriveItem(id="a", name="a.jpg", created_at=CREATED, modified_at=MODIFIED)
        assert sort_timestamp(item) == CREATED

    def test_modification_is_not_consulted(self) -> None:
        item = DriveItem(id="a", name="a.jpg", modified_at=MODIFIED)
        assert sort_timestamp(item) is None


class TestGroupTimestamp:
    def test_same_chain_as_sorting_when_available(self) -> None:
        item = DriveItem(id="a", name="a.jpg", taken_at=TAKEN, modified_at=MODIFIED)
        assert group_timestamp(item) == TAKEN

    def test_falls_back_to_modification(self) -> None:
        item = DriveItem(id="a", name="a.jpg", modified_at=MODIFIED)
        assert group_timestamp(item) == MODIFIED

    def test_none_without_any_timestamp(self) -> None:
        assert group_timestamp(DriveItem(id="a", name="a.jpg")) is None
