"""
Session API endpoints.

Exchanges Firebase ID tokens for session cookies and clears them on
sign-out.
"""

from datetime import timedelta
from typing import Optional
import logging
import time

from fastapi import APIRouter, Body, Depends, Response

from api.dependencies import get_app_settings, get_auth_service, get_profile_repository
from api.middleware.auth import SESSION_COOKIE_NAME
from modules.users.interfaces import IProfileRepository
from shared.config import Settings
from shared.exceptions import AuthenticationError, ExternalServiceError

from .interfaces import IAuthService
from .models import SessionCreateRequest, SuccessResponse
from .exceptions import MissingIdTokenError, SessionCreationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/session", response_model=SuccessResponse)
async def create_session(
    response: Response,
    request: Optional[SessionCreateRequest] = Body(default=None),
    auth: IAuthService = Depends(get_auth_service),
    profiles: IProfileRepository = Depends(get_profile_repository),
    settings: Settings = Depends(get_app_settings),
) -> SuccessResponse:
    """
    Exchange a Firebase ID token for a session cookie.

    Also upserts a minimal profile document for the user. The cookie is
    only set once every step has succeeded.
    """
    if request is None or not request.id_token:
        raise MissingIdTokenError()

    try:
        session_cookie = await auth.create_session_cookie(
            request.id_token,
            expires_in=timedelta(days=settings.session_expires_days),
        )
        claims = await auth.verify_id_token(request.id_token)

        # Ensure user doc exists
        profiles.merge(claims.uid, {
            "email": claims.email,
            "updatedAt": int(time.time() * 1000),
        })
    except (AuthenticationError, ExternalServiceError) as e:
        logger.info("Session creation failed: %s", e.message)
        raise SessionCreationError()

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session_cookie,
        max_age=settings.session_max_age,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
    return SuccessResponse()


@router.delete("/session", response_model=SuccessResponse)
async def delete_session(response: Response) -> SuccessResponse:
    """
    Clear the session cookie.

    Always succeeds, whether or not a session existed. The session is not
    revoked with Firebase.
    """
    response.set_cookie(key=SESSION_COOKIE_NAME, value="", max_age=0, path="/")
    return SuccessResponse()
