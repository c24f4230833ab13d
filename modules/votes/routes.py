"""
Task voting API endpoints.

Public: votes are accepted without a session.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_vote_service

from .interfaces import IVoteService
from .models import VoteRequest, VoteResponse, VoteStatsResponse

router = APIRouter()


@router.post("", response_model=VoteResponse)
async def record_vote(
    request: VoteRequest,
    service: IVoteService = Depends(get_vote_service),
) -> VoteResponse:
    """
    Record a vote against a task (currently always a downvote).
    """
    vote_id = await service.record_vote(request)
    return VoteResponse(voteId=vote_id)


@router.get("", response_model=VoteStatsResponse)
async def get_vote_stats(
    taskId: Optional[str] = Query(default=None, description="Document id of the task"),
    service: IVoteService = Depends(get_vote_service),
) -> VoteStatsResponse:
    """
    Get the vote totals stored on a task.
    """
    return await service.get_vote_stats(taskId)
