from typing import List, Optional

from pydantic import BaseModel

from enums.roles import Role, UserStatus


class UserOut(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: Optional[Role] = None
    status: UserStatus

    class Config:
        from_attributes = True


class MeOut(UserOut):
    role_label: Optional[str] = None
    branches: List[str] = []
    landing_page: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
