"""
Authentication service implementation.

Delegates token and session-cookie verification to Firebase Auth.
"""

from datetime import timedelta
from typing import Optional

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from shared.firebase import get_firebase_app

from .interfaces import IAuthService
from .models import ProviderUser, TokenClaims
from .exceptions import ExpiredTokenError, InvalidTokenError


class FirebaseAuthService(IAuthService):
    """
    Implementation of the authentication service on Firebase Auth.

    The Admin SDK is synchronous; calls are short and made inline.
    """

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self._app = app or get_firebase_app()

    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        try:
            return auth.create_session_cookie(id_token, expires_in=expires_in, app=self._app)
        except (FirebaseError, ValueError) as e:
            raise InvalidTokenError(str(e))

    async def verify_id_token(self, id_token: str) -> TokenClaims:
        try:
            decoded = auth.verify_id_token(id_token, app=self._app)
        except auth.ExpiredIdTokenError:
            raise ExpiredTokenError()
        except (FirebaseError, ValueError) as e:
            raise InvalidTokenError(str(e))
        return TokenClaims(**decoded)

    async def verify_session_cookie(self, session_cookie: str) -> TokenClaims:
        try:
            decoded = auth.verify_session_cookie(
                session_cookie,
                check_revoked=True,
                app=self._app,
            )
        except auth.ExpiredSessionCookieError:
            raise ExpiredTokenError("Session has expired")
        except auth.RevokedSessionCookieError:
            raise InvalidTokenError("Session has been revoked")
        except (FirebaseError, ValueError) as e:
            raise InvalidTokenError(str(e))
        return TokenClaims(**decoded)

    async def get_user(self, uid: str) -> ProviderUser:
        try:
            record = auth.get_user(uid, app=self._app)
        except (FirebaseError, ValueError) as e:
            raise InvalidTokenError(f"Unknown user: {e}")
        return ProviderUser(uid=record.uid, email=record.email, photo_url=record.photo_url)
