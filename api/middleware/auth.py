"""
Session-cookie authentication dependencies.

Resolves the Firebase session cookie into the current user and rejects
protected requests that carry no valid session.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyCookie

from modules.auth.exceptions import MissingSessionError
from modules.auth.session import SessionResolver
from shared.models import CurrentUser

from ..dependencies import get_session_resolver

SESSION_COOKIE_NAME = "session"

# Session cookie extractor
session_cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


async def get_optional_user(
    session_cookie: Optional[str] = Depends(session_cookie_scheme),
    resolver: SessionResolver = Depends(get_session_resolver),
) -> Optional[CurrentUser]:
    """
    Dependency that optionally resolves the user if a session exists.

    Use this for endpoints that work with or without authentication.
    """
    return await resolver.resolve(session_cookie)


async def get_current_user(
    user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. Raises before the
    route touches any resource or external service.

    Usage:
        @router.get("/protected")
        async def protected_route(user: CurrentUser = Depends(get_current_user)):
            return {"uid": user.uid}
    """
    if user is None:
        raise MissingSessionError()
    return user

