"""
Per-user task data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_DIFFICULTY = "keskitaso"


class UserTaskListItem(BaseModel):
    """Summary of a user's own task as returned by the list endpoint."""

    task_id: str = Field(..., description="Sequential task ID (user_NNN) or document ID")
    user_id: str = Field(..., description="Owner's uid")
    course_id: Optional[str] = None
    subject_id: Optional[str] = None
    question: Optional[str] = None
    solution_steps: list[str] = Field(default_factory=list)
    final_answer: Optional[str] = None
    difficulty: Optional[str] = None
    createdAt: int = Field(default=0, description="Creation time (epoch ms)")


class UserTaskListResponse(BaseModel):
    """List endpoint response."""

    tasks: list[UserTaskListItem]


class CreateUserTaskRequest(BaseModel):
    """Request to save a task the user has written themselves."""

    question: str = ""
    course_id: str = ""
    subject_id: str = ""
    solution_steps: Optional[list[str]] = None
    final_answer: Optional[str] = None
    difficulty: Optional[str] = None
