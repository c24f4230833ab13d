"""
Per-user task service.

Reads, lists, saves and deletes the tasks a user keeps under their own
profile. The uid passed in always comes from the verified session.
"""

from datetime import datetime, timezone
from typing import Any, Optional
import re

from .interfaces import IUserTaskRepository, IUserTaskService
from .models import DEFAULT_DIFFICULTY, CreateUserTaskRequest, UserTaskListItem
from .exceptions import InvalidUserTaskError, UserTaskNotFoundError

USER_TASK_ID_PATTERN = re.compile(r"^user_(\d+)$")


def _to_millis(value: Any) -> int:
    """Epoch milliseconds of a stored timestamp, 0 if it has none."""
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    return 0


def next_user_task_id(existing_ids: list[str]) -> str:
    """
    Next sequential id: user_001, user_002, ...

    Ids not of the user_NNN form are ignored.
    """
    highest = 0
    for task_id in existing_ids:
        match = USER_TASK_ID_PATTERN.match(task_id or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return f"user_{highest + 1:03d}"


class UserTaskService(IUserTaskService):
    """Operations on users/{uid}/tasks."""

    def __init__(self, repository: IUserTaskRepository):
        self._repository = repository

    async def get_task(self, uid: str, task_id: str) -> dict[str, Any]:
        data = self._repository.get(uid, task_id)
        if data is None:
            raise UserTaskNotFoundError(task_id)
        return data

    async def delete_task(self, uid: str, task_id: str) -> None:
        # Existence check first so a missing task is reported as 404
        if self._repository.get(uid, task_id) is None:
            raise UserTaskNotFoundError(task_id)
        self._repository.delete(uid, task_id)

    async def list_tasks(
        self,
        uid: str,
        course_id: Optional[str] = None,
        subject_id: Optional[str] = None,
    ) -> list[UserTaskListItem]:
        tasks = [
            UserTaskListItem(
                task_id=data.get("task_id") or doc_id,
                user_id=uid,
                course_id=data.get("course_id"),
                subject_id=data.get("subject_id"),
                question=data.get("question"),
                solution_steps=data.get("solution_steps") or [],
                final_answer=data.get("final_answer"),
                difficulty=data.get("difficulty"),
                createdAt=_to_millis(data.get("created_at")),
            )
            for doc_id, data in self._repository.list_for_user(uid)
        ]

        if course_id:
            tasks = [t for t in tasks if t.course_id == course_id]
        if subject_id:
            tasks = [t for t in tasks if t.subject_id == subject_id]

        tasks.sort(key=lambda t: t.createdAt, reverse=True)
        return tasks

    async def create_task(self, uid: str, request: CreateUserTaskRequest) -> dict[str, Any]:
        question = request.question.strip()
        course_id = request.course_id.strip()
        subject_id = request.subject_id.strip()

        if not question:
            raise InvalidUserTaskError("Missing question")
        if not course_id or not subject_id:
            raise InvalidUserTaskError("Missing course_id/subject_id")
        if request.solution_steps is None:
            raise InvalidUserTaskError("Missing solution_steps")

        task_id = next_user_task_id(self._repository.list_task_ids(uid))
        now = datetime.now(timezone.utc)
        task = {
            "task_id": task_id,
            "question": question,
            "solution_steps": [str(step) for step in request.solution_steps],
            "final_answer": request.final_answer or "",
            "difficulty": request.difficulty or DEFAULT_DIFFICULTY,
            "course_id": course_id,
            "subject_id": subject_id,
            "scope": "user",
            "created_at": now,
            "updated_at": now,
        }
        self._repository.create(uid, task_id, task)
        return task
