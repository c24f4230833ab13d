"""
Per-user task module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserTaskNotFoundError(NotFoundError):
    """Raised when the user has no task with the requested id."""

    def __init__(self, task_id: str):
        super().__init__(
            "Not found",
            code="USER_TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class InvalidUserTaskError(ValidationError):
    """Raised when a new user task is missing required fields."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_USER_TASK")
