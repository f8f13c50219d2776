# services/role_preview_service.py
"""
Role preview state.

A preview store holds an optional role override used only to decide what
the UI renders. It never feeds authorization: guards read the real role
(see utils.permissions.can_access).

States:
- Inactive           no override, effective role == real role
- Previewing(role)   override set, effective role == role

One store exists per authenticated session, kept in a PreviewSessionRegistry
owned by the application and handed to consumers through dependencies.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from enums.roles import Role, Capability, ROLE_CAPABILITIES, ROLE_DISPLAY_NAMES, parse_role
from schemas.preview import PreviewBannerOut, PreviewStatusOut

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewState:
    is_preview_mode: bool = False
    effective_role: Optional[Role] = None

    def __post_init__(self):
        if self.is_preview_mode != (self.effective_role is not None):
            raise ValueError("is_preview_mode must be True iff effective_role is set")


INACTIVE = PreviewState()


class RolePreviewStore:
    """Holds the preview override for one client session."""

    def __init__(self):
        self._lock = threading.Lock()
        self._state = INACTIVE

    @property
    def state(self) -> PreviewState:
        with self._lock:
            return self._state

    def is_preview_mode(self) -> bool:
        return self.state.is_preview_mode

    def effective_role(self, real_role: Optional[Role]) -> Optional[Role]:
        """Override role while previewing, otherwise ``real_role``."""
        state = self.state
        return state.effective_role if state.is_preview_mode else real_role

    def enter_preview_mode(self, role) -> PreviewState:
        """
        Start (or switch) previewing as ``role``. Last call wins.

        Raises:
            InvalidRoleError: ``role`` is not a Role; state is left unchanged.
        """
        new_role = parse_role(role)
        with self._lock:
            self._state = PreviewState(is_preview_mode=True, effective_role=new_role)
            return self._state

    def exit_preview_mode(self) -> PreviewState:
        with self._lock:
            self._state = INACTIVE
            return self._state


class PreviewSessionRegistry:
    """Preview stores keyed by user id, in memory for the process lifetime."""

    def __init__(self):
        self._lock = threading.Lock()
        self._stores: dict[int, RolePreviewStore] = {}

    def store_for(self, user_id: int) -> RolePreviewStore:
        with self._lock:
            store = self._stores.get(user_id)
            if store is None:
                store = RolePreviewStore()
                self._stores[user_id] = store
            return store

    def end_session(self, user_id: int) -> None:
        with self._lock:
            self._stores.pop(user_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)


# ============================================================================
# Session-level operations (used by api/preview.py)
# ============================================================================

def can_preview(real_role: Optional[Role]) -> bool:
    """Only roles granted role_preview (admins) may switch the UI role."""
    return real_role is not None and Capability.role_preview in ROLE_CAPABILITIES[real_role]


def sync_with_real_role(store: RolePreviewStore, real_role: Optional[Role]) -> PreviewState:
    """Drop a stale override once the real role may no longer preview."""
    if store.is_preview_mode() and not can_preview(real_role):
        logger.info("Clearing preview override: role %s may not preview", real_role)
        return store.exit_preview_mode()
    return store.state


def start_preview(store: RolePreviewStore, user_id: int, role) -> PreviewState:
    state = store.enter_preview_mode(role)
    logger.info("User %s previewing as %s", user_id, state.effective_role.value)
    return state


def stop_preview(store: RolePreviewStore, user_id: int) -> PreviewState:
    was_previewing = store.is_preview_mode()
    state = store.exit_preview_mode()
    if was_previewing:
        logger.info("User %s left preview mode", user_id)
    return state


def preview_status(store: RolePreviewStore, real_role: Optional[Role]) -> PreviewStatusOut:
    state = sync_with_real_role(store, real_role)
    return PreviewStatusOut(
        real_role=real_role,
        is_preview_mode=state.is_preview_mode,
        preview_role=state.effective_role,
        effective_role=store.effective_role(real_role),
        can_preview=can_preview(real_role),
    )


def build_preview_banner(store: RolePreviewStore) -> Optional[PreviewBannerOut]:
    """Banner shown while previewing; None when there is nothing to show."""
    state = store.state
    if not state.is_preview_mode:
        return None
    label = ROLE_DISPLAY_NAMES[state.effective_role]
    return PreviewBannerOut(
        role=state.effective_role,
        role_label=label,
        message=f"You are previewing as: {label}",
    )
