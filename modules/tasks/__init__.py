"""
Task catalog module.

Read-only access to the shared `tasks` collection.

Public API:
- ITaskService / ITaskRepository: Interfaces
- TaskNotFoundError, MissingModuleError: Exceptions
- normalize_timestamps: Timestamp-to-string response mapping
"""

from .interfaces import ITaskService, ITaskRepository
from .exceptions import TaskNotFoundError, MissingModuleError, MissingTaskIdError
from .mapper import normalize_timestamps

__all__ = [
    "ITaskService",
    "ITaskRepository",
    "TaskNotFoundError",
    "MissingModuleError",
    "MissingTaskIdError",
    "normalize_timestamps",
]
