"""
Task catalog service.
"""

from typing import Any, Optional
import logging

from .interfaces import ITaskRepository, ITaskService
from .exceptions import MissingModuleError, MissingTaskIdError, TaskNotFoundError
from .mapper import normalize_timestamps, with_document_id

logger = logging.getLogger(__name__)


class TaskService(ITaskService):
    """Read-only access to the shared task catalog."""

    def __init__(self, repository: ITaskRepository):
        self._repository = repository

    async def list_tasks(self, module: str, section: Optional[str] = None) -> list[dict[str, Any]]:
        """List catalog tasks; fields pass through verbatim."""
        if not module:
            raise MissingModuleError()

        logger.debug("Fetching tasks for module=%s section=%s", module, section)
        docs = self._repository.list_by_module(module, section or None)
        return [with_document_id(doc_id, data) for doc_id, data in docs]

    async def get_task(self, task_id: str) -> dict[str, Any]:
        """Fetch one task by its external task_id."""
        if not task_id or not task_id.strip():
            raise MissingTaskIdError()

        found = self._repository.get_by_task_id(task_id)
        if found is None:
            raise TaskNotFoundError(task_id)

        doc_id, data = found
        return with_document_id(doc_id, normalize_timestamps(data))
