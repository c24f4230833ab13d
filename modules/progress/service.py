"""
Progress tracking service.

Completion lives in the profile's completedTasks list; the catalog is
read through the task repository.
"""

from typing import Any, Optional
import logging

from shared.models import CurrentUser
from modules.tasks.exceptions import MissingTaskIdError
from modules.tasks.interfaces import ITaskRepository
from modules.users.interfaces import IProfileRepository

from .interfaces import IProgressService
from .models import (
    Direction,
    NavigationProgress,
    NavigationTask,
    NextTaskResponse,
    ProgressStatus,
    ProgressSummary,
    TaskProgress,
)
from .exceptions import MissingProgressFieldsError, NoTasksAvailableError

logger = logging.getLogger(__name__)

# Upper bound on the catalog walked when no current task is given
NAVIGATION_LIMIT = 100


def _status_for(completed: bool) -> ProgressStatus:
    return ProgressStatus.COMPLETED if completed else ProgressStatus.NOT_STARTED


def pick_adjacent(tasks: list[dict[str, Any]], current_task_id: Optional[str], direction: Direction) -> dict[str, Any]:
    """
    Pick the neighbour of current_task_id in an ordered task list.

    Wraps around at both ends. When the current task is not in the list,
    "next" starts at the first task and "prev" at the last.
    """
    index = next(
        (i for i, task in enumerate(tasks) if current_task_id and task.get("task_id") == current_task_id),
        -1,
    )
    if direction == "prev":
        return tasks[index - 1] if index > 0 else tasks[-1]
    return tasks[index + 1] if 0 <= index < len(tasks) - 1 else tasks[0]


class ProgressService(IProgressService):
    """Task completion tracking and section navigation."""

    def __init__(self, profiles: IProfileRepository, tasks: ITaskRepository):
        self._profiles = profiles
        self._tasks = tasks

    async def get_summary(self, user: CurrentUser) -> ProgressSummary:
        total = self._tasks.count_published()
        completed = len(user.completed_tasks)
        return ProgressSummary(
            totalTasks=total,
            completedTasks=completed,
            notStartedTasks=max(0, total - completed),
        )

    async def get_task_progress(self, user: CurrentUser, task_id: Optional[str]) -> TaskProgress:
        if not task_id:
            raise MissingTaskIdError()
        return TaskProgress(taskId=task_id, status=_status_for(task_id in user.completed_tasks))

    async def update_progress(
        self,
        user: CurrentUser,
        task_id: Optional[str],
        status: Optional[str],
    ) -> TaskProgress:
        if not task_id or not status:
            raise MissingProgressFieldsError()

        if status == ProgressStatus.COMPLETED.value:
            self._profiles.set_task_completed(user.uid, task_id, True)
            completed = True
        elif status == ProgressStatus.NOT_STARTED.value:
            self._profiles.set_task_completed(user.uid, task_id, False)
            completed = False
        else:
            logger.debug("Ignoring progress status %r for task %s", status, task_id)
            completed = task_id in user.completed_tasks

        return TaskProgress(taskId=task_id, status=_status_for(completed))

    async def get_adjacent_task(
        self,
        user: CurrentUser,
        current_task_id: Optional[str] = None,
        direction: Direction = "next",
    ) -> NextTaskResponse:
        if current_task_id:
            current = self._tasks.get_by_task_id(current_task_id)
            if current is None:
                docs = []
            else:
                _, data = current
                docs = self._tasks.list_published(data.get("module"), data.get("section"))
        else:
            docs = self._tasks.list_published(limit=NAVIGATION_LIMIT)

        if not docs:
            raise NoTasksAvailableError()

        task = pick_adjacent([data for _, data in docs], current_task_id, direction)
        return NextTaskResponse(
            task=NavigationTask.model_validate(task),
            progress=NavigationProgress(
                status=_status_for(task.get("task_id") in user.completed_tasks)
            ),
        )
