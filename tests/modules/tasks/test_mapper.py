"""Tests for task document mapping."""

from datetime import datetime, timedelta, timezone

from modules.tasks.mapper import normalize_timestamps, to_iso_string, with_document_id


class TestToIsoString:
    def test_utc_with_milliseconds(self):
        value = datetime(2024, 3, 5, 8, 30, 15, 123456, tzinfo=timezone.utc)
        assert to_iso_string(value) == "2024-03-05T08:30:15.123Z"

    def test_converts_other_offsets_to_utc(self):
        helsinki = timezone(timedelta(hours=2))
        value = datetime(2024, 3, 5, 10, 0, 0, tzinfo=helsinki)
        assert to_iso_string(value) == "2024-03-05T08:00:00.000Z"

    def test_naive_is_treated_as_utc(self):
        assert to_iso_string(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"


class TestNormalizeTimestamps:
    def test_converts_timestamp_fields(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        data = {"created_at": created, "updated_at": created, "question": "2+2?"}

        result = normalize_timestamps(data)

        assert result == {
            "created_at": "2024-01-01T00:00:00.000Z",
            "updated_at": "2024-01-01T00:00:00.000Z",
            "question": "2+2?",
        }

    def test_does_not_mutate_input(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        data = {"created_at": created}

        normalize_timestamps(data)

        assert data["created_at"] is created

    def test_leaves_other_values_alone(self):
        data = {"created_at": "2024-01-01T00:00:00.000Z", "updated_at": None}
        assert normalize_timestamps(data) == data

    def test_other_datetime_fields_untouched(self):
        published = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert normalize_timestamps({"published_at": published})["published_at"] is published


def test_with_document_id():
    assert with_document_id("doc-1", {"task_id": "t1"}) == {"id": "doc-1", "task_id": "t1"}
