"""
Task voting data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field


class VoteRequest(BaseModel):
    """A reader's vote on a catalog task."""

    taskId: Optional[str] = Field(default=None, description="Document id of the task")
    voteType: str = "downvote"
    reason: Optional[str] = None
    message: Optional[str] = ""
    timestamp: Optional[datetime] = Field(default=None, description="When the vote was cast")


class VoteResponse(BaseModel):
    success: bool = True
    message: str = "Vote recorded successfully"
    voteId: str


class VoteStats(BaseModel):
    downvotes: int = 0
    reasons: dict[str, Any] = Field(default_factory=dict)
    lastVoteAt: Optional[Any] = None


class VoteStatsResponse(BaseModel):
    """Vote totals stored on the task document."""

    taskId: str
    votes: VoteStats
