# services/checklist_service.py
"""
Daily checklist state per branch and role.

Rows are addressed by checklist_storage_key, so "today" is simply a new key
and yesterday's ticks stay readable under their own date.
"""
import logging
import math
from typing import Optional

from sqlalchemy.orm import Session

from models.checklist import ChecklistState
from schemas.checklist import ChecklistOut
from utils.date_keys import checklist_storage_key, daily_key, is_today, validate_daily_key

logger = logging.getLogger(__name__)


def progress_pct(completed: int, total: int) -> int:
    """Whole percent, halves rounded up (12.5 -> 13)."""
    if total <= 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)


def _resolve_day(date: Optional[str]) -> str:
    return validate_daily_key(date) if date else daily_key()


def _get_row(db: Session, key: str) -> Optional[ChecklistState]:
    return db.query(ChecklistState).filter(ChecklistState.storage_key == key).first()


def _to_out(
        branch_slug: str,
        role_id: str,
        day: str,
        items: list[str],
        total: Optional[int],
) -> ChecklistOut:
    return ChecklistOut(
        storage_key=checklist_storage_key(branch_slug, role_id, day),
        branch_slug=branch_slug,
        role_id=role_id,
        date=day,
        is_today=is_today(day),
        items=items,
        completed_count=len(items),
        total_count=total,
        progress_pct=progress_pct(len(items), total) if total is not None else None,
    )


def get_checklist(
        db: Session,
        branch_slug: str,
        role_id: str,
        date: Optional[str] = None,
        total: Optional[int] = None,
) -> ChecklistOut:
    day = _resolve_day(date)
    row = _get_row(db, checklist_storage_key(branch_slug, role_id, day))
    items = list(row.items) if row else []
    return _to_out(branch_slug, role_id, day, items, total)


def set_item(
        db: Session,
        branch_slug: str,
        role_id: str,
        item_id: str,
        checked: bool,
        user_id: Optional[int] = None,
        date: Optional[str] = None,
        total: Optional[int] = None,
) -> ChecklistOut:
    """Tick or untick one item. Idempotent for repeated calls."""
    day = _resolve_day(date)
    key = checklist_storage_key(branch_slug, role_id, day)
    row = _get_row(db, key)
    if row is None:
        row = ChecklistState(
            storage_key=key,
            branch_slug=branch_slug,
            role_id=role_id,
            day=day,
            items=[],
        )
        db.add(row)

    items = list(row.items or [])
    if checked and item_id not in items:
        items.append(item_id)
    elif not checked and item_id in items:
        items.remove(item_id)

    # reassign so the JSON column is flagged dirty
    row.items = items
    row.updated_by = user_id
    db.commit()
    db.refresh(row)
    return _to_out(branch_slug, role_id, day, list(row.items), total)


def reset_checklist(
        db: Session,
        branch_slug: str,
        role_id: str,
        date: Optional[str] = None,
) -> ChecklistOut:
    day = _resolve_day(date)
    key = checklist_storage_key(branch_slug, role_id, day)
    row = _get_row(db, key)
    if row is not None:
        db.delete(row)
        db.commit()
        logger.info("Checklist %s reset", key)
    return _to_out(branch_slug, role_id, day, [], None)
