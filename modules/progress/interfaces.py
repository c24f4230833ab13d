"""
Progress tracking module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import CurrentUser

from .models import Direction, NextTaskResponse, ProgressSummary, TaskProgress


@runtime_checkable
class IProgressService(Protocol):
    """Progress operations exposed to the API layer."""

    async def get_summary(self, user: CurrentUser) -> ProgressSummary:
        """Count completed and remaining tasks across the published catalog."""
        ...

    async def get_task_progress(self, user: CurrentUser, task_id: Optional[str]) -> TaskProgress:
        """
        Get the user's progress on one task.

        Raises:
            MissingTaskIdError: If no task id is given
        """
        ...

    async def update_progress(
        self,
        user: CurrentUser,
        task_id: Optional[str],
        status: Optional[str],
    ) -> TaskProgress:
        """
        Mark a task completed or not started.

        Any other status is accepted and leaves the stored progress as is.

        Raises:
            MissingProgressFieldsError: If the task id or status is missing
        """
        ...

    async def get_adjacent_task(
        self,
        user: CurrentUser,
        current_task_id: Optional[str] = None,
        direction: Direction = "next",
    ) -> NextTaskResponse:
        """
        Step to the next or previous published task in the current task's
        module section, wrapping around at either end.

        Raises:
            NoTasksAvailableError: If there is nothing to step to
        """
        ...
