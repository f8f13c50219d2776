from typing import List, Optional

from pydantic import BaseModel

from enums.roles import Capability, Role


class AccessDecisionOut(BaseModel):
    capability: Capability
    granted: bool
    reason: Optional[str] = None


class VisibleCapabilitiesOut(BaseModel):
    effective_role: Optional[Role] = None
    is_preview_mode: bool
    capabilities: List[Capability]


class RouteDecisionOut(BaseModel):
    path: str
    allowed: bool
    redirect_to: Optional[str] = None
