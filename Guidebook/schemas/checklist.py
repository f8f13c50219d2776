from typing import List, Optional

from pydantic import BaseModel, Field


class ChecklistItemIn(BaseModel):
    checked: bool


class ChecklistOut(BaseModel):
    storage_key: str
    branch_slug: str
    role_id: str
    date: str
    is_today: bool
    items: List[str] = Field(default_factory=list, description="Ids of ticked items")
    completed_count: int
    total_count: Optional[int] = None
    progress_pct: Optional[int] = None
