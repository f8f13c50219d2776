import logging
from enum import Enum
from typing import Optional

from utils.errors import InvalidRoleError

logger = logging.getLogger(__name__)


# =====================================================
# 🔐 ROLES / USERS
# =====================================================
class Role(str, Enum):
    admin = "admin"                        # Full system access, user management
    operations_lead = "operations_lead"    # Recipes, prep instructions, schedules
    dispatcher = "dispatcher"              # Dispatch management, all branches
    central_kitchen = "central_kitchen"    # CK dashboard
    branch_manager = "branch_manager"      # Assigned branches dashboard
    branch_staff = "branch_staff"          # Single branch only


class UserStatus(str, Enum):
    pending = "pending"
    active = "active"
    inactive = "inactive"
    rejected = "rejected"


# =====================================================
# 🧭 CAPABILITIES
# =====================================================
class Capability(str, Enum):
    admin_dashboard = "admin_dashboard"
    user_management = "user_management"
    recipes = "recipes"
    prep_instructions = "prep_instructions"
    production_schedules = "production_schedules"
    dispatch = "dispatch"
    analytics = "analytics"
    all_branches = "all_branches"
    kitchen = "kitchen"
    dashboard = "dashboard"
    operations = "operations"
    quality_control = "quality_control"
    role_preview = "role_preview"


class EditCapability(str, Enum):
    recipes = "recipes"
    prep_instructions = "prep_instructions"
    production_schedules = "production_schedules"
    dispatch = "dispatch"
    users = "users"
    branches = "branches"
    orders = "orders"


# =====================================================
# 📋 MAPPING TABLES (one entry per Role)
# =====================================================
ROLE_DISPLAY_NAMES: dict[Role, str] = {
    Role.admin: "Admin",
    Role.operations_lead: "Operations Lead",
    Role.dispatcher: "Dispatcher",
    Role.central_kitchen: "Central Kitchen",
    Role.branch_manager: "Branch Manager",
    Role.branch_staff: "Branch Staff",
}

ROLE_DESCRIPTIONS: dict[Role, str] = {
    Role.admin: "Full system access, user management, and all settings",
    Role.operations_lead: "Recipe management, prep instructions, production schedules, and order approval",
    Role.dispatcher: "Dispatch management and view all branches",
    Role.central_kitchen: "CK dashboard and recipe viewing",
    Role.branch_manager: "Branch dashboard for assigned branches",
    Role.branch_staff: "Single branch access only",
}

ROLE_LANDING_PAGES: dict[Role, str] = {
    Role.admin: "/admin",
    Role.operations_lead: "/operations",
    Role.dispatcher: "/dispatch",
    Role.central_kitchen: "/kitchen",
    Role.branch_manager: "/dashboard",
    Role.branch_staff: "/branch",  # resolved to /branch/{first assigned slug}
}

ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.admin: frozenset(Capability),
    Role.operations_lead: frozenset({
        Capability.recipes,
        Capability.prep_instructions,
        Capability.production_schedules,
        Capability.dispatch,
        Capability.analytics,
        Capability.all_branches,
        Capability.kitchen,
        Capability.dashboard,
        Capability.operations,
        Capability.quality_control,
    }),
    Role.dispatcher: frozenset({
        Capability.dispatch,
        Capability.all_branches,
    }),
    Role.central_kitchen: frozenset({
        Capability.dispatch,
        Capability.kitchen,
        Capability.quality_control,
    }),
    Role.branch_manager: frozenset({
        Capability.dashboard,
        Capability.quality_control,
    }),
    Role.branch_staff: frozenset({
        Capability.quality_control,
    }),
}

ROLE_EDIT_CAPABILITIES: dict[Role, frozenset[EditCapability]] = {
    Role.admin: frozenset(EditCapability),
    Role.operations_lead: frozenset({
        EditCapability.recipes,
        EditCapability.prep_instructions,
        EditCapability.production_schedules,
        EditCapability.dispatch,
        EditCapability.branches,
        EditCapability.orders,
    }),
    Role.dispatcher: frozenset({EditCapability.dispatch}),
    Role.central_kitchen: frozenset({EditCapability.dispatch}),
    Role.branch_manager: frozenset({EditCapability.orders}),
    Role.branch_staff: frozenset(),
}

# Roles that see every branch without explicit assignment
ALL_BRANCH_ROLES = frozenset({Role.admin, Role.operations_lead, Role.dispatcher})


def _check_exhaustive(*tables: dict) -> None:
    for table in tables:
        missing = set(Role) - set(table)
        if missing:
            raise RuntimeError(f"role table missing entries: {sorted(r.value for r in missing)}")


_check_exhaustive(
    ROLE_DISPLAY_NAMES,
    ROLE_DESCRIPTIONS,
    ROLE_LANDING_PAGES,
    ROLE_CAPABILITIES,
    ROLE_EDIT_CAPABILITIES,
)


def parse_role(value) -> Role:
    """Coerce a raw value into a Role or raise InvalidRoleError."""
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        try:
            return Role(value)
        except ValueError:
            pass
    raise InvalidRoleError(f"Unknown role: {value!r}")


def stored_role(value: Optional[str]) -> Optional[Role]:
    """Role column value as a Role; empty or unknown values count as no role."""
    if not value:
        return None
    try:
        return parse_role(value)
    except InvalidRoleError:
        logger.warning("Ignoring unknown stored role %r", value)
        return None
