"""
Task catalog module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ITaskRepository(Protocol):
    """Read access to the shared task catalog."""

    def list_by_module(
        self,
        module: str,
        section: Optional[str] = None,
    ) -> list[tuple[str, dict[str, Any]]]:
        """
        List tasks in a module, optionally narrowed to a section.

        Returns:
            (document id, fields) pairs in the store's natural order
        """
        ...

    def get_by_task_id(self, task_id: str) -> Optional[tuple[str, dict[str, Any]]]:
        """
        Find a task by its external `task_id` field.

        Returns:
            (document id, fields) of the first match, or None
        """
        ...

    def get_by_document_id(self, doc_id: str) -> Optional[dict[str, Any]]:
        """Get a task's fields by its document id, or None."""
        ...

    def list_published(
        self,
        module: Optional[str] = None,
        section: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[tuple[str, dict[str, Any]]]:
        """
        List published tasks ordered by `task_id`.

        module and section narrow the listing when given.
        """
        ...

    def count_published(self) -> int:
        """Count all published tasks."""
        ...


@runtime_checkable
class ITaskService(Protocol):
    """Task catalog operations exposed to the API layer."""

    async def list_tasks(self, module: str, section: Optional[str] = None) -> list[dict[str, Any]]:
        """
        List tasks for a module/section, each annotated with its `id`.

        Raises:
            MissingModuleError: If module is empty
        """
        ...

    async def get_task(self, task_id: str) -> dict[str, Any]:
        """
        Get a task by external id with timestamps rendered as strings.

        Raises:
            TaskNotFoundError: If no task has that task_id
        """
        ...
