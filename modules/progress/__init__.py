"""
Progress tracking module.

Which catalog tasks a user has completed, and stepping through a
module section task by task.

Public API:
- IProgressService: Interface
- ProgressStatus: Completion states
- MissingProgressFieldsError, NoTasksAvailableError: Exceptions
"""

from .interfaces import IProgressService
from .models import ProgressStatus
from .exceptions import MissingProgressFieldsError, NoTasksAvailableError

__all__ = [
    "IProgressService",
    "ProgressStatus",
    "MissingProgressFieldsError",
    "NoTasksAvailableError",
]
