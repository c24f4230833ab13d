"""
Task voting module.

Readers flag catalog tasks they find broken or unclear. Each vote is kept
in `task_votes`, and the flagged task is summarised once in
`downvoted_tasks` with a running vote count.

Public API:
- IVoteService / IVoteRepository: Interfaces
- VoteRepository: Firestore implementation
- MissingVoteFieldsError: Exception
"""

from .interfaces import IVoteService, IVoteRepository
from .repository import VoteRepository, TASK_VOTES_COLLECTION, DOWNVOTED_TASKS_COLLECTION
from .exceptions import MissingVoteFieldsError, MissingVoteTaskIdError

__all__ = [
    "IVoteService",
    "IVoteRepository",
    "VoteRepository",
    "TASK_VOTES_COLLECTION",
    "DOWNVOTED_TASKS_COLLECTION",
    "MissingVoteFieldsError",
    "MissingVoteTaskIdError",
]
