"""
User-related endpoints.

Provides the signed-in user's identity and subscription state.
"""

from fastapi import APIRouter, Depends

from shared.models import CurrentUser
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=CurrentUser)
async def get_current_user_profile(
    user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return user
