"""
Per-user task repository for Firestore access.

Documents live at users/{uid}/tasks/{task_id}. Path scoping is the only
access control: a caller can only ever name their own uid.
"""

from typing import Any, Optional

from google.cloud.firestore import CollectionReference

from shared.repository import BaseRepository
from modules.users.repository import USERS_COLLECTION

from .interfaces import IUserTaskRepository

TASKS_SUBCOLLECTION = "tasks"


class UserTaskRepository(BaseRepository[dict], IUserTaskRepository):
    """Repository for tasks owned by a single user."""

    def get(self, uid: str, task_id: str) -> Optional[dict[str, Any]]:
        with self._store_call("Failed to load task"):
            snapshot = self._tasks(uid).document(task_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def delete(self, uid: str, task_id: str) -> None:
        with self._store_call("Failed to delete task"):
            self._tasks(uid).document(task_id).delete()

    def list_for_user(self, uid: str) -> list[tuple[str, dict[str, Any]]]:
        with self._store_call("Failed to load user tasks"):
            docs = list(self._tasks(uid).stream())
        return [(doc.id, doc.to_dict() or {}) for doc in docs]

    def list_task_ids(self, uid: str) -> list[str]:
        with self._store_call("Failed to load user tasks"):
            docs = list(self._tasks(uid).select(["task_id"]).stream())
        return [(doc.to_dict() or {}).get("task_id") or doc.id for doc in docs]

    def create(self, uid: str, task_id: str, data: dict[str, Any]) -> None:
        with self._store_call("Failed to create user task"):
            self._tasks(uid).document(task_id).set(data)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _tasks(self, uid: str) -> CollectionReference:
        """Get the tasks subcollection of a user."""
        return self._db.collection(USERS_COLLECTION).document(uid).collection(TASKS_SUBCOLLECTION)
