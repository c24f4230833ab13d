"""
Task catalog module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class TaskNotFoundError(NotFoundError):
    """Raised when no catalog task has the requested task_id."""

    def __init__(self, task_id: str):
        super().__init__(
            "Task not found",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class MissingModuleError(ValidationError):
    """Raised when a task listing is requested without a module."""

    def __init__(self):
        super().__init__("Module parameter is required", code="MISSING_MODULE")


class MissingTaskIdError(ValidationError):
    """Raised when a task lookup is requested with a blank id."""

    def __init__(self):
        super().__init__("Task ID is required", code="MISSING_TASK_ID")
