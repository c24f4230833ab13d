"""
Task voting service.
"""

from datetime import datetime, timezone
from typing import Any, Optional
import logging

from modules.tasks.exceptions import TaskNotFoundError
from modules.tasks.interfaces import ITaskRepository

from .interfaces import IVoteRepository, IVoteService
from .models import VoteRequest, VoteStats, VoteStatsResponse
from .exceptions import MissingVoteFieldsError, MissingVoteTaskIdError

logger = logging.getLogger(__name__)


class VoteService(IVoteService):
    """Records task votes and reads vote totals."""

    def __init__(self, votes: IVoteRepository, tasks: ITaskRepository):
        self._votes = votes
        self._tasks = tasks

    async def record_vote(self, request: VoteRequest) -> str:
        if not request.taskId or not request.reason:
            raise MissingVoteFieldsError()

        now = datetime.now(timezone.utc)
        message = request.message or ""
        vote_id = self._votes.add_vote({
            "taskId": request.taskId,
            "voteType": request.voteType,
            "reason": request.reason,
            "message": message,
            "timestamp": request.timestamp or now,
            "createdAt": now,
        })

        if self._votes.get_downvoted(request.taskId) is None:
            self._votes.create_downvoted(
                request.taskId,
                self._downvoted_summary(request.taskId, request.reason, message, now),
            )
        else:
            self._votes.increment_downvoted(request.taskId, now)

        logger.info("Vote recorded for task %s: %s", request.taskId, request.reason)
        return vote_id

    async def get_vote_stats(self, task_id: Optional[str]) -> VoteStatsResponse:
        if not task_id:
            raise MissingVoteTaskIdError()

        task = self._tasks.get_by_document_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        votes = task.get("votes") or {}
        return VoteStatsResponse(
            taskId=task_id,
            votes=VoteStats(
                downvotes=votes.get("downvotes") or 0,
                reasons=votes.get("reasons") or {},
                lastVoteAt=votes.get("lastVoteAt"),
            ),
        )

    def _downvoted_summary(
        self,
        task_id: str,
        reason: str,
        message: str,
        now: datetime,
    ) -> dict[str, Any]:
        """First-vote snapshot of the task; votes on unknown ids are still kept."""
        task = self._tasks.get_by_document_id(task_id)
        if task is None:
            task = {"question": "Task not found"}
        return {
            "taskId": task_id,
            "question": task.get("question") or "",
            "section": task.get("section") or "",
            "module": task.get("module") or "",
            "created_at": task.get("created_at") or now,
            "downvoted_at": now,
            "first_reason": reason,
            "first_message": message,
            "vote_count": 1,
        }
