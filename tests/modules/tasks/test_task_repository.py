"""Tests for the Firestore task repository."""

from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import ServiceUnavailable

from modules.tasks.repository import TASKS_COLLECTION, TaskRepository
from shared.exceptions import ExternalServiceError


def _doc(doc_id, data):
    doc = MagicMock(id=doc_id)
    doc.to_dict.return_value = data
    return doc


@pytest.fixture
def db():
    return MagicMock()


class TestListByModule:
    def test_filters_on_module(self, db):
        query = db.collection.return_value.where.return_value
        query.stream.return_value = iter([_doc("a", {"module": "algebra"})])

        result = TaskRepository(db).list_by_module("algebra")

        assert result == [("a", {"module": "algebra"})]
        db.collection.assert_called_once_with(TASKS_COLLECTION)
        field_filter = db.collection.return_value.where.call_args.kwargs["filter"]
        assert field_filter.field_path == "module"
        assert field_filter.value == "algebra"
        query.where.assert_not_called()

    def test_adds_section_filter(self, db):
        query = db.collection.return_value.where.return_value.where.return_value
        query.stream.return_value = iter([])

        assert TaskRepository(db).list_by_module("algebra", "2") == []
        field_filter = db.collection.return_value.where.return_value.where.call_args.kwargs["filter"]
        assert field_filter.field_path == "section"
        assert field_filter.value == "2"

    def test_store_failure(self, db):
        db.collection.return_value.where.return_value.stream.side_effect = ServiceUnavailable("down")

        with pytest.raises(ExternalServiceError, match="Failed to fetch tasks"):
            TaskRepository(db).list_by_module("algebra")


class TestGetByTaskId:
    def test_found(self, db):
        query = db.collection.return_value.where.return_value.limit.return_value
        query.stream.return_value = iter([_doc("doc-1", {"task_id": "t-1"})])

        assert TaskRepository(db).get_by_task_id("t-1") == ("doc-1", {"task_id": "t-1"})
        db.collection.return_value.where.return_value.limit.assert_called_once_with(1)

    def test_not_found(self, db):
        query = db.collection.return_value.where.return_value.limit.return_value
        query.stream.return_value = iter([])

        assert TaskRepository(db).get_by_task_id("t-1") is None


class TestGetByDocumentId:
    def test_found(self, db):
        snapshot = db.collection.return_value.document.return_value.get.return_value
        snapshot.exists = True
        snapshot.to_dict.return_value = {"question": "1 + 1"}

        assert TaskRepository(db).get_by_document_id("doc-1") == {"question": "1 + 1"}
        db.collection.return_value.document.assert_called_once_with("doc-1")

    def test_missing(self, db):
        db.collection.return_value.document.return_value.get.return_value.exists = False

        assert TaskRepository(db).get_by_document_id("doc-1") is None


class TestListPublished:
    def test_section_listing_is_ordered(self, db):
        filtered = db.collection.return_value.where.return_value.where.return_value.where.return_value
        filtered.order_by.return_value.stream.return_value = iter([_doc("a", {"task_id": "t-1"})])

        result = TaskRepository(db).list_published("algebra", "1")

        assert result == [("a", {"task_id": "t-1"})]
        status_filter = db.collection.return_value.where.return_value.where.return_value.where.call_args.kwargs["filter"]
        assert status_filter.field_path == "status"
        assert status_filter.value == "published"
        filtered.order_by.assert_called_once_with("task_id")
        filtered.order_by.return_value.limit.assert_not_called()

    def test_whole_catalog_is_limited(self, db):
        ordered = db.collection.return_value.where.return_value.order_by.return_value
        ordered.limit.return_value.stream.return_value = iter([])

        assert TaskRepository(db).list_published(limit=100) == []
        ordered.limit.assert_called_once_with(100)


class TestCountPublished:
    def test_uses_count_aggregation(self, db):
        aggregation = db.collection.return_value.where.return_value.count.return_value
        aggregation.get.return_value = [[MagicMock(value=42)]]

        assert TaskRepository(db).count_published() == 42
        db.collection.return_value.where.return_value.count.assert_called_once_with(alias="total")

    def test_store_failure(self, db):
        aggregation = db.collection.return_value.where.return_value.count.return_value
        aggregation.get.side_effect = ServiceUnavailable("down")

        with pytest.raises(ExternalServiceError, match="Failed to count tasks"):
            TaskRepository(db).count_published()
