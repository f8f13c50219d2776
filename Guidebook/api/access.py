# api/access.py
"""
Access decisions for the front-end.

- /access/check: may the signed-in user use a capability (real role)
- /access/visible: which sections to render (effective role, preview aware)
- /access/route: may a page be opened, or where to redirect
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from enums.roles import Capability, UserStatus
from models.user import User
from schemas.access import AccessDecisionOut, RouteDecisionOut, VisibleCapabilitiesOut
from services.role_preview_service import RolePreviewStore, sync_with_real_role
from services.route_guard_service import resolve_route
from utils.dependencies import get_current_user, get_current_user_optional, get_preview_registry, get_preview_store
from utils.permissions import can_access, real_role_of, visible_capabilities

router = APIRouter(prefix="/access", tags=["Access"])


@router.get("/check", response_model=AccessDecisionOut, summary="Check a capability")
def check_capability(
    capability: Capability = Query(..., description="Capability to check"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    registry=Depends(get_preview_registry),
):
    preview_state = registry.store_for(current_user.id).state if current_user else None
    decision = can_access(real_role_of(current_user), preview_state, capability)
    return AccessDecisionOut(
        capability=capability,
        granted=decision.granted,
        reason=None if decision.granted else decision.reason.value,
    )


@router.get("/visible", response_model=VisibleCapabilitiesOut, summary="Sections to render")
def get_visible(
    current_user: User = Depends(get_current_user),
    store: RolePreviewStore = Depends(get_preview_store),
):
    real_role = real_role_of(current_user)
    state = sync_with_real_role(store, real_role)
    effective_role = store.effective_role(real_role)
    return VisibleCapabilitiesOut(
        effective_role=effective_role,
        is_preview_mode=state.is_preview_mode,
        capabilities=visible_capabilities(effective_role),
    )


@router.get("/route", response_model=RouteDecisionOut, summary="Check page navigation")
def check_route(
    path: str = Query(..., min_length=1, description="Front-end path, e.g. /admin/users"),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    user_status = UserStatus(current_user.status) if current_user else None
    decision = resolve_route(
        path,
        user_status,
        real_role_of(current_user),
        current_user.branch_slugs if current_user else (),
    )
    return RouteDecisionOut(path=path, allowed=decision.allowed, redirect_to=decision.redirect_to)
