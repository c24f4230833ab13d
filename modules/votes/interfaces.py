"""
Task voting module interfaces.
"""

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

from .models import VoteRequest, VoteStatsResponse


@runtime_checkable
class IVoteRepository(Protocol):
    """Storage access for task_votes and downvoted_tasks."""

    def add_vote(self, data: dict[str, Any]) -> str:
        """Store a vote under a generated id and return the id."""
        ...

    def get_downvoted(self, task_id: str) -> Optional[dict[str, Any]]:
        """Get a task's downvote summary, or None if it was never flagged."""
        ...

    def create_downvoted(self, task_id: str, data: dict[str, Any]) -> None:
        """Write the first downvote summary for a task."""
        ...

    def increment_downvoted(self, task_id: str, voted_at: datetime) -> None:
        """Bump a task's vote_count and record when the latest vote arrived."""
        ...


@runtime_checkable
class IVoteService(Protocol):
    """Voting operations exposed to the API layer."""

    async def record_vote(self, request: VoteRequest) -> str:
        """
        Store a vote and update the task's downvote summary.

        Returns:
            The new vote's id

        Raises:
            MissingVoteFieldsError: If the task id or reason is missing
        """
        ...

    async def get_vote_stats(self, task_id: Optional[str]) -> VoteStatsResponse:
        """
        Read the vote totals kept on a task document.

        Raises:
            MissingVoteTaskIdError: If no task id is given
            TaskNotFoundError: If the task does not exist
        """
        ...
