from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.security import oauth2_scheme, decode_access_token
from models.user import User
from enums.roles import UserStatus


def _user_from_token(db: Session, token: Optional[str]) -> Optional[User]:
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or "sub" not in payload:
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    user = db.get(User, user_id)
    if not user or user.status in (UserStatus.inactive.value, UserStatus.rejected.value):
        return None
    return user


def get_current_user_optional(
        db: Session = Depends(get_db),
        token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[User]:
    """Signed-in user, or None for anonymous/expired/disabled sessions."""
    return _user_from_token(db, token)


def get_current_user(db: Session = Depends(get_db), token: Optional[str] = Depends(oauth2_scheme)) -> User:
    user = _user_from_token(db, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_preview_registry(request: Request):
    return request.app.state.preview_registry


def get_preview_store(
        user: User = Depends(get_current_user),
        registry=Depends(get_preview_registry),
):
    return registry.store_for(user.id)
