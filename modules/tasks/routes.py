"""
Task catalog API endpoints.

Public, read-only access to the shared task collection.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_task_service

from .interfaces import ITaskService

router = APIRouter()


@router.get("")
async def list_tasks(
    module: Optional[str] = Query(default=None, description="Module to list (required)"),
    section: Optional[str] = Query(default=None, description="Optional section filter"),
    service: ITaskService = Depends(get_task_service),
) -> list[dict[str, Any]]:
    """
    List tasks in a module, optionally narrowed to a section.

    Documents are returned as stored, each with its document `id`.
    No pagination or ordering beyond the store's natural order.
    """
    return await service.list_tasks(module or "", section)


@router.get("/{task_id}")
async def get_task(
    task_id: str,
    service: ITaskService = Depends(get_task_service),
) -> dict[str, Any]:
    """
    Get a task by its external `task_id` field.

    `created_at` and `updated_at` are returned as ISO strings.
    """
    return await service.get_task(task_id)
