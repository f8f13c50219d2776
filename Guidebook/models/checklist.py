# models/checklist.py
from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base
from utils.datetime_utils import now_local


class ChecklistState(Base):
    """
    Ticked items of one branch/role checklist for one day.

    storage_key follows utils.date_keys.checklist_storage_key, so a new day
    starts from an empty checklist without any cleanup job.
    """
    __tablename__ = "checklist_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    storage_key: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    branch_slug: Mapped[str] = mapped_column(String(80), nullable=False)
    role_id: Mapped[str] = mapped_column(String(60), nullable=False)
    day: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    items: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    updated_by: Mapped[int | None] = mapped_column(Integer)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local,
                                                 nullable=False)
