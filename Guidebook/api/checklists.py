# api/checklists.py
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from models.user import User
from schemas.checklist import ChecklistItemIn, ChecklistOut
from services.checklist_service import get_checklist, reset_checklist, set_item
from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_branch_access

router = APIRouter(prefix="/checklists", tags=["Checklists"])


@router.get("/{branch_slug}/{role_id}", response_model=ChecklistOut, summary="Checklist state")
def read_checklist(
    branch_slug: str = Path(..., min_length=1),
    role_id: str = Path(..., min_length=1),
    date: Optional[str] = Query(None, description="Day as YYYY-MM-DD (default: today)"),
    total: Optional[int] = Query(None, ge=0, description="Number of items in the checklist, for progress"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_branch_access(current_user, branch_slug)
    return get_checklist(db, branch_slug, role_id, date, total)


@router.put(
    "/{branch_slug}/{role_id}/items/{item_id}",
    response_model=ChecklistOut,
    summary="Tick or untick an item",
)
def update_item(
    payload: ChecklistItemIn,
    branch_slug: str = Path(..., min_length=1),
    role_id: str = Path(..., min_length=1),
    item_id: str = Path(..., min_length=1),
    date: Optional[str] = Query(None, description="Day as YYYY-MM-DD (default: today)"),
    total: Optional[int] = Query(None, ge=0, description="Number of items in the checklist, for progress"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_branch_access(current_user, branch_slug)
    return set_item(db, branch_slug, role_id, item_id, payload.checked, current_user.id, date, total)


@router.delete("/{branch_slug}/{role_id}", response_model=ChecklistOut, summary="Reset checklist")
def delete_checklist(
    branch_slug: str = Path(..., min_length=1),
    role_id: str = Path(..., min_length=1),
    date: Optional[str] = Query(None, description="Day as YYYY-MM-DD (default: today)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_branch_access(current_user, branch_slug)
    return reset_checklist(db, branch_slug, role_id, date)
