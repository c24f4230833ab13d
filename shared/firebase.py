"""
Firebase client factory.

Initializes the Firebase Admin app once per process from the service
account settings and hands out the Firestore client bound to it.
"""

from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore import Client

from .config import get_settings

# Module-level client cache
_app: Optional[firebase_admin.App] = None
_firestore_client: Optional[Client] = None


def get_firebase_app() -> firebase_admin.App:
    """
    Get the Firebase Admin app, initializing it on first use.

    Returns:
        The default Firebase Admin app

    Raises:
        RuntimeError: If the service account settings are missing
    """
    global _app

    if _app is None:
        try:
            _app = firebase_admin.get_app()
        except ValueError:
            settings = get_settings()
            if (
                not settings.firebase_project_id
                or not settings.firebase_client_email
                or not settings.firebase_private_key
            ):
                raise RuntimeError(
                    "Firebase configuration missing. "
                    "Set FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and "
                    "FIREBASE_PRIVATE_KEY environment variables."
                )

            # Private keys from env often have escaped newlines
            private_key = settings.firebase_private_key.replace("\\n", "\n")
            cert = credentials.Certificate({
                "type": "service_account",
                "project_id": settings.firebase_project_id,
                "client_email": settings.firebase_client_email,
                "private_key": private_key,
                "token_uri": "https://oauth2.googleapis.com/token",
            })
            _app = firebase_admin.initialize_app(cert)

    return _app


def get_firestore_client() -> Client:
    """
    Get the Firestore client bound to the Firebase Admin app.

    Returns:
        Cached Firestore client
    """
    global _firestore_client

    if _firestore_client is None:
        _firestore_client = firestore.client(get_firebase_app())

    return _firestore_client


def reset_client_cache() -> None:
    """
    Reset the cached clients.

    Useful for testing or when configuration changes. The Firebase app
    itself stays registered with firebase_admin.
    """
    global _app, _firestore_client
    _app = None
    _firestore_client = None
