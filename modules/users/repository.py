"""
Profile repository for Firestore access.

Profiles live at users/{uid}. Field names keep the camelCase spelling the
web client reads (stripeCustomerId, subscriptionTier, updatedAt, ...).
"""

from typing import Any, Optional
import time

from google.cloud.firestore import ArrayRemove, ArrayUnion
from google.cloud.firestore_v1.base_query import FieldFilter

from shared.repository import BaseRepository

from .interfaces import IProfileRepository

USERS_COLLECTION = "users"


class ProfileRepository(BaseRepository[dict], IProfileRepository):
    """Repository for users/{uid} profile documents."""

    def get(self, uid: str) -> Optional[dict[str, Any]]:
        with self._store_call("Failed to load user profile"):
            snapshot = self._db.collection(USERS_COLLECTION).document(uid).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def merge(self, uid: str, data: dict[str, Any]) -> None:
        with self._store_call("Failed to update user profile"):
            self._db.collection(USERS_COLLECTION).document(uid).set(data, merge=True)

    def find_uid_by_customer(self, customer_id: str) -> Optional[str]:
        query = (
            self._db.collection(USERS_COLLECTION)
            .where(filter=FieldFilter("stripeCustomerId", "==", customer_id))
            .limit(1)
        )
        with self._store_call("Failed to look up user by customer"):
            docs = list(query.stream())
        if not docs:
            return None
        return docs[0].id

    def set_task_completed(self, uid: str, task_id: str, completed: bool) -> None:
        change = ArrayUnion([task_id]) if completed else ArrayRemove([task_id])
        with self._store_call("Failed to update progress"):
            self._db.collection(USERS_COLLECTION).document(uid).set(
                {"completedTasks": change, "updatedAt": int(time.time() * 1000)},
                merge=True,
            )
