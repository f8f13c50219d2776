# api/auth.py
"""
Authentication API.
Endpoints: login, me, logout.
"""
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user, get_preview_registry
from schemas.user import Token, MeOut
from services.auth_service import authenticate_user, issue_access_token, landing_page_for
from enums.roles import ROLE_DISPLAY_NAMES, stored_role
from models.user import User

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/token",
    response_model=Token,
    summary="Login (OAuth2)",
    description=(
        "Authenticate with the OAuth2 password flow.\n\n"
        "**Format:** `application/x-www-form-urlencoded`\n\n"
        "**Fields:**\n"
        "- `username`: account email\n"
        "- `password`: password\n\n"
        "**Response:**\n"
        "- `access_token`: JWT for the `Authorization: Bearer <token>` header"
    )
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    user = authenticate_user(db, form_data.username, form_data.password)
    token = issue_access_token(user)
    return {"access_token": token, "token_type": "bearer"}


@router.get("/me", response_model=MeOut, summary="Current user")
def me(current_user: User = Depends(get_current_user)):
    role = stored_role(current_user.role)
    return MeOut(
        id=current_user.id,
        email=current_user.email,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
        role=role,
        status=current_user.status,
        role_label=ROLE_DISPLAY_NAMES[role] if role else None,
        branches=current_user.branch_slugs,
        landing_page=landing_page_for(current_user),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="End session")
def logout(
    current_user: User = Depends(get_current_user),
    registry=Depends(get_preview_registry),
):
    """Drops the session's preview state; the client discards its token."""
    registry.end_session(current_user.id)
