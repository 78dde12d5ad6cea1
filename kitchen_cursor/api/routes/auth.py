"""
FastAPI Routes: authentication.
"""

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from kitchen_cursor.api.dependencies import get_auth_service
from kitchen_cursor.api.schemas.auth_schemas import TokenResponse
from kitchen_cursor.application.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service)
):
    """OAuth2 password flow; ``username`` is the email."""
    token = await service.authenticate(form_data.username, form_data.password)
    return TokenResponse(access_token=token)
