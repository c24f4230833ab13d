"""
Progress tracking API endpoints.

All endpoints require a session.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_progress_service
from api.middleware.auth import get_current_user
from shared.models import CurrentUser

from .interfaces import IProgressService
from .models import (
    Direction,
    NextTaskResponse,
    ProgressSummary,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
    TaskProgress,
)

router = APIRouter()


@router.get("", response_model=Union[ProgressSummary, TaskProgress])
async def get_progress(
    summary: bool = Query(default=False, description="Return the overall summary"),
    taskId: Optional[str] = Query(default=None, description="Task to report on"),
    user: CurrentUser = Depends(get_current_user),
    service: IProgressService = Depends(get_progress_service),
) -> Union[ProgressSummary, TaskProgress]:
    """
    Get the overall summary (`summary=true`) or progress on one task.
    """
    if summary:
        return await service.get_summary(user)
    return await service.get_task_progress(user, taskId)


@router.post("", response_model=ProgressUpdateResponse)
async def update_progress(
    request: ProgressUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    service: IProgressService = Depends(get_progress_service),
) -> ProgressUpdateResponse:
    """
    Mark a task completed or not started.
    """
    progress = await service.update_progress(user, request.taskId, request.status)
    return ProgressUpdateResponse(progress=progress)


@router.get("/next-task", response_model=NextTaskResponse)
async def get_next_task(
    currentTaskId: Optional[str] = Query(default=None, description="Task to step from"),
    direction: Direction = Query(default="next", description="next or prev"),
    user: CurrentUser = Depends(get_current_user),
    service: IProgressService = Depends(get_progress_service),
) -> NextTaskResponse:
    """
    Get the next or previous published task in the current task's section.
    """
    return await service.get_adjacent_task(user, currentTaskId, direction)
