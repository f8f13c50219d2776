"""
Role-based authorization.

Architecture:
- Real role: assigned to the user account, delivered by the session (JWT).
- Effective role: the preview override if active, else the real role.
  Only used to decide what the UI *shows* (role_can_view).
- Every protection decision (can_access, role_can_edit, branch access)
  reads the REAL role. Toggling preview mode never changes an outcome.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from fastapi import Depends, HTTPException, status

from config.settings import settings
from enums.roles import (
    ALL_BRANCH_ROLES,
    ROLE_CAPABILITIES,
    ROLE_EDIT_CAPABILITIES,
    Capability,
    EditCapability,
    Role,
    UserStatus,
    stored_role,
)
from models.user import User
from utils.dependencies import get_current_user_optional

logger = logging.getLogger(__name__)


# ============================================================================
# Decisions
# ============================================================================

class DenialReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INSUFFICIENT_ROLE = "insufficient_role"


@dataclass(frozen=True)
class Granted:
    granted: bool = True


@dataclass(frozen=True)
class Denied:
    reason: DenialReason
    granted: bool = False


AccessDecision = Granted | Denied


def real_role_of(user: Optional[User]) -> Optional[Role]:
    """Role that counts for authorization: None unless the account is active."""
    if user is None or user.status != UserStatus.active.value:
        return None
    return stored_role(user.role)


def can_access(real_role: Optional[Role], preview_state, required_capability: Capability) -> AccessDecision:
    """
    Decide whether protected content may be shown.

    ``preview_state`` is part of the signature so callers hand over what they
    have, but it does not take part in the decision: preview mode changes
    what is rendered, never what is authorized.
    """
    if real_role is None:
        return Denied(DenialReason.UNAUTHENTICATED)
    if required_capability in ROLE_CAPABILITIES[real_role]:
        return Granted()
    return Denied(DenialReason.INSUFFICIENT_ROLE)


def role_can_view(effective_role: Optional[Role], capability: Capability) -> bool:
    """Whether a section is rendered for ``effective_role`` (preview aware)."""
    if effective_role is None:
        return False
    return capability in ROLE_CAPABILITIES[effective_role]


def visible_capabilities(effective_role: Optional[Role]) -> list[Capability]:
    return [c for c in Capability if role_can_view(effective_role, c)]


def role_can_edit(real_role: Optional[Role], capability: EditCapability) -> bool:
    if real_role is None:
        return False
    return capability in ROLE_EDIT_CAPABILITIES[real_role]


def user_has_branch_access(
        real_role: Optional[Role],
        branch_slug: str,
        assigned_branches: Iterable[str] = (),
) -> bool:
    """
    - admin / operations_lead / dispatcher: every branch
    - central_kitchen: the central kitchen only
    - branch_manager / branch_staff: assigned branches
    """
    if real_role is None:
        return False
    if real_role in ALL_BRANCH_ROLES:
        return True
    if real_role == Role.central_kitchen:
        return branch_slug == settings.CENTRAL_KITCHEN_SLUG
    return branch_slug in set(assigned_branches)


# ============================================================================
# FastAPI guards
# ============================================================================

def raise_for_decision(decision: AccessDecision, user: Optional[User]) -> None:
    """Translate a Denied decision into the HTTP error the client expects."""
    if decision.granted:
        return
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=DenialReason.UNAUTHENTICATED.value,
            headers={"WWW-Authenticate": "Bearer"},
        )
    detail = decision.reason.value
    if decision.reason == DenialReason.UNAUTHENTICATED:
        # signed in, but pending approval or without a role yet
        detail = "account_not_active"
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def require_capability(capability: Capability):
    """
    Dependency factory guarding a route by capability.

    Usage:
        @router.get("/admin/stats", dependencies=[Depends(require_capability(Capability.analytics))])
    """
    def _guard(user: Optional[User] = Depends(get_current_user_optional)) -> User:
        decision = can_access(real_role_of(user), None, capability)
        if not decision.granted:
            logger.info(
                "Denied %s to user %s: %s",
                capability.value,
                user.id if user else None,
                decision.reason.value,
            )
        raise_for_decision(decision, user)
        return user

    return _guard


def ensure_branch_access(user: User, branch_slug: str) -> None:
    if not user_has_branch_access(real_role_of(user), branch_slug, user.branch_slugs):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="branch_access_required",
        )
