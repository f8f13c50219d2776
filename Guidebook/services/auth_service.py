# services/auth_service.py
"""
Authentication service.
Handles login and JWT issuing only; authorization lives in utils.permissions.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from utils.security import verify_password, create_access_token
from utils.datetime_utils import now_local
from enums.roles import Role, UserStatus, ROLE_LANDING_PAGES, stored_role
from models.user import User

logger = logging.getLogger(__name__)


def authenticate_user(db: Session, email: str, password: str) -> User:
    """
    Authenticate a user by email and password.

    Pending users may sign in (they are routed to /pending); inactive and
    rejected accounts may not.

    Raises:
        HTTPException 401: invalid credentials or disabled account
    """
    user = db.query(User).filter(User.email == email.strip().lower()).first()

    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login for %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    if user.status in (UserStatus.inactive.value, UserStatus.rejected.value):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account is not active"
        )

    user.last_login = now_local()
    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def issue_access_token(user: User) -> str:
    return create_access_token(subject=user.id, role=user.role)


def landing_page_for(user: User) -> str:
    """Where the front-end sends the user after sign in."""
    role = stored_role(user.role)
    if user.status != UserStatus.active.value or role is None:
        return "/pending"
    if role == Role.branch_staff and user.branch_slugs:
        return f"/branch/{user.branch_slugs[0]}"
    return ROLE_LANDING_PAGES[role]
