# api/preview.py
"""
Role preview API.

Lets an admin see the application as another role would. Preview only
changes rendering; every guard keeps using the real role.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from enums.roles import Capability
from models.user import User
from schemas.preview import PreviewBannerOut, PreviewEnterIn, PreviewStatusOut
from services.role_preview_service import (
    RolePreviewStore,
    build_preview_banner,
    preview_status,
    start_preview,
    stop_preview,
    sync_with_real_role,
)
from utils.dependencies import get_current_user, get_preview_store
from utils.permissions import real_role_of, require_capability

router = APIRouter(prefix="/preview", tags=["Role preview"])


@router.get("", response_model=PreviewStatusOut, summary="Preview status")
def get_preview(
    current_user: User = Depends(get_current_user),
    store: RolePreviewStore = Depends(get_preview_store),
):
    return preview_status(store, real_role_of(current_user))


@router.post(
    "/enter",
    response_model=PreviewStatusOut,
    summary="Preview as role",
    description=(
        "Switch the UI to another role's view.\n\n"
        "**Requires:** real role with `role_preview` (admin).\n\n"
        "Calling again with another role replaces the current preview."
    )
)
def enter_preview(
    payload: PreviewEnterIn,
    current_user: User = Depends(require_capability(Capability.role_preview)),
    store: RolePreviewStore = Depends(get_preview_store),
):
    start_preview(store, current_user.id, payload.role)
    return preview_status(store, real_role_of(current_user))


@router.post("/exit", response_model=PreviewStatusOut, summary="Exit preview")
def exit_preview(
    current_user: User = Depends(get_current_user),
    store: RolePreviewStore = Depends(get_preview_store),
):
    stop_preview(store, current_user.id)
    return preview_status(store, real_role_of(current_user))


@router.get("/banner", response_model=Optional[PreviewBannerOut], summary="Preview banner")
def get_banner(
    current_user: User = Depends(get_current_user),
    store: RolePreviewStore = Depends(get_preview_store),
):
    sync_with_real_role(store, real_role_of(current_user))
    return build_preview_banner(store)
