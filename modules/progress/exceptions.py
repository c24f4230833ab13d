"""
Progress tracking module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class MissingProgressFieldsError(ValidationError):
    """Raised when a progress update lacks the task id or status."""

    def __init__(self):
        super().__init__("Task ID and status are required", code="MISSING_PROGRESS_FIELDS")


class NoTasksAvailableError(NotFoundError):
    """Raised when there is no published task to navigate to."""

    def __init__(self):
        super().__init__("No tasks available", code="NO_TASKS_AVAILABLE")
