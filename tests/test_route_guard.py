import pytest

from enums.roles import Role, UserStatus
from services.route_guard_service import resolve_route

ACTIVE = UserStatus.active


def decide(path, role, status=ACTIVE, branches=()):
    d = resolve_route(path, status, role, branches)
    return "allow" if d.allowed else d.redirect_to


@pytest.mark.parametrize("path", ["/login", "/signup", "/api/auth/session"])
def test_public_routes_always_allowed(path):
    assert decide(path, None, status=None) == "allow"


def test_anonymous_goes_to_login():
    assert decide("/admin", None, status=None) == "/login"


def test_inactive_goes_to_login():
    assert decide("/dashboard", Role.branch_manager, status=UserStatus.inactive) == "/login"


@pytest.mark.parametrize("status", [UserStatus.pending, UserStatus.rejected])
def test_unapproved_users_wait_on_pending(status):
    assert decide("/admin", None, status=status) == "/pending"
    assert decide("/pending", None, status=status) == "allow"


def test_active_user_leaves_pending_for_landing_page():
    assert decide("/pending", Role.dispatcher) == "/dispatch"
    assert decide("/pending", Role.branch_staff, branches=["marina"]) == "/branch/marina"


def test_branch_staff_confined_to_branch():
    assert decide("/branch/marina/recipes", Role.branch_staff, branches=["marina"]) == "allow"
    assert decide("/profile", Role.branch_staff, branches=["marina"]) == "allow"
    assert decide("/branch/downtown", Role.branch_staff, branches=["marina"]) == "/branch/marina"
    assert decide("/admin", Role.branch_staff, branches=["marina"]) == "/branch/marina"
    assert decide("/admin", Role.branch_staff) == "/pending"


def test_central_kitchen_confined_to_kitchen():
    assert decide("/kitchen", Role.central_kitchen) == "allow"
    assert decide("/branch/central-kitchen/recipes", Role.central_kitchen) == "allow"
    assert decide("/branch/downtown", Role.central_kitchen) == "/kitchen"
    assert decide("/dispatch", Role.central_kitchen) == "/kitchen"


def test_branch_manager_dashboard_and_branches():
    assert decide("/dashboard", Role.branch_manager) == "allow"
    assert decide("/branch/downtown", Role.branch_manager, branches=["downtown"]) == "allow"
    assert decide("/branch/marina", Role.branch_manager, branches=["downtown"]) == "/dashboard"
    assert decide("/admin", Role.branch_manager) == "/dashboard"


def test_restricted_prefixes():
    assert decide("/admin/users", Role.admin) == "allow"
    assert decide("/admin/users", Role.operations_lead) == "/operations"
    assert decide("/operations", Role.dispatcher) == "/dispatch"
    assert decide("/kitchen", Role.dispatcher) == "/dispatch"
    assert decide("/dispatch", Role.operations_lead) == "allow"
    assert decide("/branch/any", Role.dispatcher) == "allow"
