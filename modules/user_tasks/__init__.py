"""
Per-user task module.

Tasks a user keeps under users/{uid}/tasks.

Public API:
- IUserTaskService / IUserTaskRepository: Interfaces
- UserTaskListItem, CreateUserTaskRequest: Models
- UserTaskNotFoundError, InvalidUserTaskError: Exceptions
"""

from .interfaces import IUserTaskService, IUserTaskRepository
from .models import UserTaskListItem, UserTaskListResponse, CreateUserTaskRequest
from .exceptions import UserTaskNotFoundError, InvalidUserTaskError

__all__ = [
    "IUserTaskService",
    "IUserTaskRepository",
    "UserTaskListItem",
    "UserTaskListResponse",
    "CreateUserTaskRequest",
    "UserTaskNotFoundError",
    "InvalidUserTaskError",
]
