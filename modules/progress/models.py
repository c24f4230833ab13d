"""
Progress tracking data models.

Only completion is stored (users/{uid}.completedTasks); attempts, time
spent and timestamps are always reported as zero or null.
"""

from enum import Enum
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field


class ProgressStatus(str, Enum):
    """Completion states a task can be reported in."""

    COMPLETED = "completed"
    NOT_STARTED = "not_started"


Direction = Literal["next", "prev"]


class ProgressSummary(BaseModel):
    """Overall progress across the published catalog."""

    totalTasks: int
    completedTasks: int
    inProgressTasks: int = 0
    notStartedTasks: int
    totalTimeSpent: int = 0
    lastCompleted: Optional[str] = None


class TaskProgress(BaseModel):
    """A user's progress on one task."""

    taskId: str
    status: ProgressStatus
    completedAt: Optional[str] = None
    attempts: int = 0
    lastAttempted: Optional[str] = None
    timeSpent: int = 0


class ProgressUpdateRequest(BaseModel):
    """Mark a task completed or not started."""

    taskId: Optional[str] = None
    status: Optional[str] = Field(
        default=None,
        description="completed or not_started; other values leave progress unchanged",
    )


class ProgressUpdateResponse(BaseModel):
    success: bool = True
    progress: TaskProgress


class NavigationTask(BaseModel):
    task_id: Optional[str] = None
    module: Optional[str] = None
    section: Optional[str] = None
    question: Optional[str] = None
    difficulty: Optional[str] = None
    points: Optional[Union[int, float]] = None


class NavigationProgress(BaseModel):
    status: ProgressStatus
    attempts: int = 0
    timeSpent: int = 0


class NextTaskResponse(BaseModel):
    """The neighbouring task and the user's progress on it."""

    task: NavigationTask
    progress: NavigationProgress
