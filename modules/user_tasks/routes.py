"""
Per-user task API endpoints.

All endpoints require a session; documents are addressed under the
caller's own uid.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_task_service
from api.middleware.auth import get_current_user
from modules.auth.models import SuccessResponse
from shared.models import CurrentUser

from .interfaces import IUserTaskService
from .models import CreateUserTaskRequest, UserTaskListResponse

router = APIRouter()


@router.get("", response_model=UserTaskListResponse)
async def list_user_tasks(
    course_id: Optional[str] = Query(default=None, description="Filter by course"),
    subject_id: Optional[str] = Query(default=None, description="Filter by subject"),
    user: CurrentUser = Depends(get_current_user),
    service: IUserTaskService = Depends(get_user_task_service),
) -> UserTaskListResponse:
    """
    List the current user's tasks, newest first.
    """
    tasks = await service.list_tasks(user.uid, course_id, subject_id)
    return UserTaskListResponse(tasks=tasks)


@router.post("", status_code=201)
async def create_user_task(
    request: CreateUserTaskRequest,
    user: CurrentUser = Depends(get_current_user),
    service: IUserTaskService = Depends(get_user_task_service),
) -> dict[str, Any]:
    """
    Save a task the user wrote, including its solution steps.

    The task gets the next sequential id (user_001, user_002, ...).
    """
    task = await service.create_task(user.uid, request)
    return {"task": task}


@router.get("/{task_id}")
async def get_user_task(
    task_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: IUserTaskService = Depends(get_user_task_service),
) -> dict[str, Any]:
    """
    Get one of the current user's tasks with all stored fields.
    """
    return await service.get_task(user.uid, task_id)


@router.delete("/{task_id}", response_model=SuccessResponse)
async def delete_user_task(
    task_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: IUserTaskService = Depends(get_user_task_service),
) -> SuccessResponse:
    """
    Delete one of the current user's tasks.
    """
    await service.delete_task(user.uid, task_id)
    return SuccessResponse()
