"""
Vote repository for Firestore access.
"""

from datetime import datetime
from typing import Any, Optional

from google.cloud.firestore import Increment

from shared.repository import BaseRepository

from .interfaces import IVoteRepository

TASK_VOTES_COLLECTION = "task_votes"
DOWNVOTED_TASKS_COLLECTION = "downvoted_tasks"


class VoteRepository(BaseRepository[dict], IVoteRepository):
    """Repository for individual votes and per-task downvote summaries."""

    def add_vote(self, data: dict[str, Any]) -> str:
        with self._store_call("Failed to record vote"):
            _, ref = self._db.collection(TASK_VOTES_COLLECTION).add(data)
        return ref.id

    def get_downvoted(self, task_id: str) -> Optional[dict[str, Any]]:
        with self._store_call("Failed to load downvoted task"):
            snapshot = self._db.collection(DOWNVOTED_TASKS_COLLECTION).document(task_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def create_downvoted(self, task_id: str, data: dict[str, Any]) -> None:
        with self._store_call("Failed to record downvoted task"):
            self._db.collection(DOWNVOTED_TASKS_COLLECTION).document(task_id).set(data)

    def increment_downvoted(self, task_id: str, voted_at: datetime) -> None:
        # Increment is applied server-side, so concurrent votes all count
        with self._store_call("Failed to record downvoted task"):
            self._db.collection(DOWNVOTED_TASKS_COLLECTION).document(task_id).update({
                "vote_count": Increment(1),
                "last_vote_at": voted_at,
            })
