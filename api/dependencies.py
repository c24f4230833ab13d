"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container holds the process-wide clients (Firebase,
Firestore, Stripe) and the repositories built on them; services are
assembled per request from those leaves so tests can override any leaf
through app.dependency_overrides.
"""

from fastapi import Depends
from google.cloud.firestore import Client as FirestoreClient

from shared.config import Settings, get_settings
from modules.auth.interfaces import IAuthService
from modules.auth.session import SessionResolver
from modules.billing.interfaces import IBillingService, IPaymentGateway
from modules.progress.interfaces import IProgressService
from modules.tasks.interfaces import ITaskRepository, ITaskService
from modules.user_tasks.interfaces import IUserTaskRepository, IUserTaskService
from modules.users.interfaces import IProfileRepository
from modules.votes.interfaces import IVoteRepository, IVoteService


class ServiceContainer:
    """
    Container for all process-wide client and repository instances.

    Instances are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._firestore: FirestoreClient | None = None
        self._auth_service: IAuthService | None = None
        self._profile_repository: IProfileRepository | None = None
        self._task_repository: ITaskRepository | None = None
        self._user_task_repository: IUserTaskRepository | None = None
        self._vote_repository: IVoteRepository | None = None
        self._payment_gateway: IPaymentGateway | None = None

    @property
    def firestore(self) -> FirestoreClient:
        """Get the Firestore client."""
        if self._firestore is None:
            from shared.firebase import get_firestore_client
            self._firestore = get_firestore_client()
        return self._firestore

    @property
    def auth(self) -> IAuthService:
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import FirebaseAuthService
            self._auth_service = FirebaseAuthService()
        return self._auth_service

    @property
    def profiles(self) -> IProfileRepository:
        """Get the profile repository instance."""
        if self._profile_repository is None:
            from modules.users.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.firestore)
        return self._profile_repository

    @property
    def task_repository(self) -> ITaskRepository:
        """Get the task catalog repository instance."""
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            self._task_repository = TaskRepository(self.firestore)
        return self._task_repository

    @property
    def user_task_repository(self) -> IUserTaskRepository:
        """Get the per-user task repository instance."""
        if self._user_task_repository is None:
            from modules.user_tasks.repository import UserTaskRepository
            self._user_task_repository = UserTaskRepository(self.firestore)
        return self._user_task_repository

    @property
    def vote_repository(self) -> IVoteRepository:
        """Get the task vote repository instance."""
        if self._vote_repository is None:
            from modules.votes.repository import VoteRepository
            self._vote_repository = VoteRepository(self.firestore)
        return self._vote_repository

    @property
    def payments(self) -> IPaymentGateway:
        """Get the payment gateway instance."""
        if self._payment_gateway is None:
            from modules.billing.gateway import StripeGateway
            from shared.payments import get_stripe_client
            self._payment_gateway = StripeGateway(get_stripe_client())
        return self._payment_gateway

    def reset(self) -> None:
        """
        Reset all cached instances.

        This is primarily for testing - allows tests to get fresh
        instances with different mock dependencies.
        """
        self._firestore = None
        self._auth_service = None
        self._profile_repository = None
        self._task_repository = None
        self._user_task_repository = None
        self._vote_repository = None
        self._payment_gateway = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for settings."""
    return get_settings()


def get_auth_service() -> IAuthService:
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_profile_repository() -> IProfileRepository:
    """FastAPI dependency for profile repository."""
    return get_container().profiles


def get_task_repository() -> ITaskRepository:
    """FastAPI dependency for task catalog repository."""
    return get_container().task_repository


def get_user_task_repository() -> IUserTaskRepository:
    """FastAPI dependency for per-user task repository."""
    return get_container().user_task_repository


def get_vote_repository() -> IVoteRepository:
    """FastAPI dependency for task vote repository."""
    return get_container().vote_repository


def get_payment_gateway() -> IPaymentGateway:
    """FastAPI dependency for payment gateway."""
    return get_container().payments


def get_session_resolver(
    auth: IAuthService = Depends(get_auth_service),
    profiles: IProfileRepository = Depends(get_profile_repository),
) -> SessionResolver:
    """FastAPI dependency for the session resolver."""
    return SessionResolver(auth, profiles)


def get_task_service(
    repository: ITaskRepository = Depends(get_task_repository),
) -> ITaskService:
    """FastAPI dependency for task catalog service."""
    from modules.tasks.service import TaskService
    return TaskService(repository)


def get_user_task_service(
    repository: IUserTaskRepository = Depends(get_user_task_repository),
) -> IUserTaskService:
    """FastAPI dependency for per-user task service."""
    from modules.user_tasks.service import UserTaskService
    return UserTaskService(repository)


def get_billing_service(
    gateway: IPaymentGateway = Depends(get_payment_gateway),
    profiles: IProfileRepository = Depends(get_profile_repository),
    settings: Settings = Depends(get_app_settings),
) -> IBillingService:
    """FastAPI dependency for billing service."""
    from modules.billing.service import BillingService
    return BillingService(
        gateway,
        profiles,
        app_url=settings.app_url,
        webhook_secret=settings.stripe_webhook_secret,
    )


def get_progress_service(
    profiles: IProfileRepository = Depends(get_profile_repository),
    tasks: ITaskRepository = Depends(get_task_repository),
) -> IProgressService:
    """FastAPI dependency for progress tracking service."""
    from modules.progress.service import ProgressService
    return ProgressService(profiles, tasks)


def get_vote_service(
    votes: IVoteRepository = Depends(get_vote_repository),
    tasks: ITaskRepository = Depends(get_task_repository),
) -> IVoteService:
    """FastAPI dependency for task voting service."""
    from modules.votes.service import VoteService
    return VoteService(votes, tasks)
