from typing import Literal, Optional

from pydantic import BaseModel, Field

from enums.roles import Role


class PreviewEnterIn(BaseModel):
    # plain str so unknown roles surface as invalid_role rather than a schema error
    role: str = Field(..., min_length=1, description="Role to preview as")


class PreviewStatusOut(BaseModel):
    real_role: Optional[Role] = None
    is_preview_mode: bool
    preview_role: Optional[Role] = None
    effective_role: Optional[Role] = None
    can_preview: bool


class PreviewBannerOut(BaseModel):
    role: Role
    role_label: str
    message: str
    action: Literal["exit_preview"] = "exit_preview"
    exit_path: str = "/preview/exit"
