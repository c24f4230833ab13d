"""
Profile repository interface.

The auth and billing modules depend on IProfileRepository so that tests
can swap in an in-memory store.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IProfileRepository(Protocol):
    """Contract for reading and merge-writing user profile documents."""

    def get(self, uid: str) -> Optional[dict[str, Any]]:
        """
        Get the stored profile fields for a user.

        Returns:
            The document's fields, or None if no profile exists
        """
        ...

    def merge(self, uid: str, data: dict[str, Any]) -> None:
        """
        Write fields into a profile, leaving unspecified fields untouched.

        Creates the document if it does not exist.
        """
        ...

    def find_uid_by_customer(self, customer_id: str) -> Optional[str]:
        """
        Find the user linked to a Stripe customer.

        Returns:
            The uid of the first matching profile, or None
        """
        ...

    def set_task_completed(self, uid: str, task_id: str, completed: bool) -> None:
        """
        Add a task id to, or remove it from, the profile's completedTasks.

        The list is updated atomically in the store, so concurrent updates
        for different tasks do not overwrite each other.
        """
        ...
