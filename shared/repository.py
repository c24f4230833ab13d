"""
Base repository class for Firestore access.

Provides a common abstraction layer for all repositories, encapsulating
Firestore client access and translating client failures into
ExternalServiceError.
"""

from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic
import logging

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import Client

from .exceptions import ExternalServiceError


T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Firestore client access via self._db
    - Generic type parameter for model type hints
    - _store_call() to wrap client calls

    Subclasses should implement domain-specific data access methods.

    Example:
        class TaskRepository(BaseRepository[dict]):
            def get_by_task_id(self, task_id: str) -> Optional[dict]:
                with self._store_call("Failed to fetch task"):
                    docs = list(self._db.collection("tasks").limit(1).stream())
                ...
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Firestore client.

        Args:
            db: Firestore client instance for database operations.
        """
        self._db = db

    @contextmanager
    def _store_call(self, message: str) -> Iterator[None]:
        """Translate Firestore client failures into ExternalServiceError."""
        try:
            yield
        except GoogleAPIError as e:
            logger.exception(message)
            raise ExternalServiceError(
                message,
                service="firestore",
                code="STORE_ERROR",
                details={"reason": str(e)},
            ) from e
