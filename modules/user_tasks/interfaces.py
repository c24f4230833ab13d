"""
Per-user task module interfaces.

Every operation is scoped to users/{uid}/tasks; the uid always comes from
the authenticated session, never from the request.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import CreateUserTaskRequest, UserTaskListItem


@runtime_checkable
class IUserTaskRepository(Protocol):
    """Storage access for users/{uid}/tasks/{task_id}."""

    def get(self, uid: str, task_id: str) -> Optional[dict[str, Any]]:
        """Get a task's fields, or None if it does not exist."""
        ...

    def delete(self, uid: str, task_id: str) -> None:
        """Delete a task document."""
        ...

    def list_for_user(self, uid: str) -> list[tuple[str, dict[str, Any]]]:
        """List (document id, fields) pairs for all of a user's tasks."""
        ...

    def list_task_ids(self, uid: str) -> list[str]:
        """List the `task_id` (or document id) of each of a user's tasks."""
        ...

    def create(self, uid: str, task_id: str, data: dict[str, Any]) -> None:
        """Write a new task document under the given id."""
        ...


@runtime_checkable
class IUserTaskService(Protocol):
    """Per-user task operations exposed to the API layer."""

    async def get_task(self, uid: str, task_id: str) -> dict[str, Any]:
        """
        Get one of the user's tasks.

        Raises:
            UserTaskNotFoundError: If the task does not exist
        """
        ...

    async def delete_task(self, uid: str, task_id: str) -> None:
        """
        Delete one of the user's tasks.

        Raises:
            UserTaskNotFoundError: If the task does not exist
        """
        ...

    async def list_tasks(
        self,
        uid: str,
        course_id: Optional[str] = None,
        subject_id: Optional[str] = None,
    ) -> list[UserTaskListItem]:
        """List the user's tasks, newest first, optionally filtered."""
        ...

    async def create_task(self, uid: str, request: CreateUserTaskRequest) -> dict[str, Any]:
        """
        Save a new task with the next sequential id.

        Raises:
            ValidationError: If required fields are missing
        """
        ...
