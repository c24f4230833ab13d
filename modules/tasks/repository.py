"""
Task repository for Firestore access.

Encapsulates queries against the shared `tasks` collection.
"""

from typing import Any, Optional

from google.cloud.firestore_v1.base_query import FieldFilter

from shared.repository import BaseRepository

from .interfaces import ITaskRepository

TASKS_COLLECTION = "tasks"
PUBLISHED_STATUS = "published"


class TaskRepository(BaseRepository[dict], ITaskRepository):
    """
    Repository for the global task catalog.

    Documents are returned as raw field dictionaries; the service layer
    decides how they are shaped for the response.
    """

    def list_by_module(
        self,
        module: str,
        section: Optional[str] = None,
    ) -> list[tuple[str, dict[str, Any]]]:
        query = self._db.collection(TASKS_COLLECTION).where(
            filter=FieldFilter("module", "==", module)
        )
        if section:
            query = query.where(filter=FieldFilter("section", "==", section))

        with self._store_call("Failed to fetch tasks"):
            docs = list(query.stream())

        return [(doc.id, doc.to_dict() or {}) for doc in docs]

    def get_by_task_id(self, task_id: str) -> Optional[tuple[str, dict[str, Any]]]:
        query = (
            self._db.collection(TASKS_COLLECTION)
            .where(filter=FieldFilter("task_id", "==", task_id))
            .limit(1)
        )

        with self._store_call("Failed to fetch task"):
            docs = list(query.stream())

        if not docs:
            return None
        return docs[0].id, docs[0].to_dict() or {}

    def get_by_document_id(self, doc_id: str) -> Optional[dict[str, Any]]:
        with self._store_call("Failed to fetch task"):
            snapshot = self._db.collection(TASKS_COLLECTION).document(doc_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def list_published(
        self,
        module: Optional[str] = None,
        section: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[tuple[str, dict[str, Any]]]:
        # module + section + status with order_by needs a composite index
        query = self._db.collection(TASKS_COLLECTION)
        if module is not None:
            query = query.where(filter=FieldFilter("module", "==", module))
        if section is not None:
            query = query.where(filter=FieldFilter("section", "==", section))
        query = query.where(filter=FieldFilter("status", "==", PUBLISHED_STATUS)).order_by("task_id")
        if limit:
            query = query.limit(limit)

        with self._store_call("Failed to fetch tasks"):
            docs = list(query.stream())

        return [(doc.id, doc.to_dict() or {}) for doc in docs]

    def count_published(self) -> int:
        query = self._db.collection(TASKS_COLLECTION).where(
            filter=FieldFilter("status", "==", PUBLISHED_STATUS)
        )
        with self._store_call("Failed to count tasks"):
            results = query.count(alias="total").get()
        return int(results[0][0].value) if results else 0
