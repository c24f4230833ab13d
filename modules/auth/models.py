"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """
    Claims asserted by Firebase Auth after verifying an ID token or a
    session cookie.
    """

    model_config = ConfigDict(extra="ignore")  # Ignore provider-specific claims

    uid: str = Field(..., description="Firebase user ID")
    email: Optional[str] = Field(None, description="User's email")


class ProviderUser(BaseModel):
    """User record as held by Firebase Auth."""

    uid: str = Field(..., description="Firebase user ID")
    email: Optional[str] = Field(None, description="User's email")
    photo_url: Optional[str] = Field(None, description="Profile photo URL")


class SessionCreateRequest(BaseModel):
    """Request to exchange a Firebase ID token for a session cookie."""

    model_config = ConfigDict(populate_by_name=True)

    id_token: Optional[str] = Field(
        None,
        alias="idToken",
        description="Short-lived Firebase ID token from the client SDK",
    )


class SuccessResponse(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
