# services/route_guard_service.py
"""
Page-level navigation rules for the web front-end.

The front-end asks before rendering a page; the answer is either "allow" or
a path to redirect to. Decisions use the real role, like every other guard.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from config.settings import settings
from enums.roles import Role, UserStatus, ROLE_LANDING_PAGES

PUBLIC_ROUTES = ("/login", "/signup", "/api/auth")

# Checked in order, first matching prefix wins
ROLE_RESTRICTED_ROUTES: dict[str, frozenset[Role]] = {
    "/admin": frozenset({Role.admin}),
    "/operations": frozenset({Role.admin, Role.operations_lead}),
    "/dispatch": frozenset({Role.admin, Role.operations_lead, Role.dispatcher}),
    "/kitchen": frozenset({Role.admin, Role.operations_lead, Role.central_kitchen}),
    "/dashboard": frozenset({Role.admin, Role.operations_lead, Role.branch_manager}),
}


@dataclass(frozen=True)
class RouteDecision:
    allowed: bool
    redirect_to: Optional[str] = None


ALLOW = RouteDecision(allowed=True)


def _redirect(path: str) -> RouteDecision:
    return RouteDecision(allowed=False, redirect_to=path)


def _branch_slug(path: str) -> Optional[str]:
    parts = path.split("/")
    if len(parts) > 2 and parts[1] == "branch" and parts[2]:
        return parts[2]
    return None


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def landing_page(real_role: Role, branches: list[str]) -> str:
    if real_role == Role.branch_staff and branches:
        return f"/branch/{branches[0]}"
    return ROLE_LANDING_PAGES[real_role]


def resolve_route(
        path: str,
        user_status: Optional[UserStatus],
        real_role: Optional[Role],
        branches: Iterable[str] = (),
) -> RouteDecision:
    """
    Decide whether ``path`` may be rendered for the caller.

    ``user_status`` is None for anonymous callers.
    """
    branches = list(branches)

    if any(path.startswith(route) for route in PUBLIC_ROUTES):
        return ALLOW

    if user_status is None or user_status == UserStatus.inactive:
        return _redirect("/login")

    if user_status in (UserStatus.pending, UserStatus.rejected) or real_role is None:
        return ALLOW if path == "/pending" else _redirect("/pending")

    if path == "/pending":
        return _redirect(landing_page(real_role, branches))

    if real_role == Role.branch_staff:
        if path == "/profile":
            return ALLOW
        if _branch_slug(path) in branches:
            return ALLOW
        if branches:
            return _redirect(f"/branch/{branches[0]}")
        return _redirect("/pending")

    if real_role == Role.central_kitchen:
        if path in ("/kitchen", "/profile") or _branch_slug(path) == settings.CENTRAL_KITCHEN_SLUG:
            return ALLOW
        return _redirect("/kitchen")

    if real_role == Role.branch_manager:
        if path in ("/dashboard", "/profile"):
            return ALLOW
        if _branch_slug(path) is not None and _branch_slug(path) in branches:
            return ALLOW
        return _redirect("/dashboard")

    for prefix, allowed_roles in ROLE_RESTRICTED_ROUTES.items():
        if _matches(path, prefix):
            if real_role not in allowed_roles:
                return _redirect(landing_page(real_role, branches))
            break

    return ALLOW
