"""
Task voting module exceptions.
"""

from shared.exceptions import ValidationError


class MissingVoteFieldsError(ValidationError):
    """Raised when a vote lacks the task id or reason."""

    def __init__(self):
        super().__init__("Missing required fields", code="MISSING_VOTE_FIELDS")


class MissingVoteTaskIdError(ValidationError):
    """Raised when vote totals are requested without a task id."""

    def __init__(self):
        super().__init__("Task ID required", code="MISSING_TASK_ID")
