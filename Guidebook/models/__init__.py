# models/__init__.py
from utils.db import Base  # re-export
from .user import User, UserBranchAccess
from .checklist import ChecklistState
