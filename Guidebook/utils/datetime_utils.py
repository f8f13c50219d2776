"""
Centralised helpers for timestamps.
Every operation uses settings.APP_TIMEZONE as the business time zone.

System convention:
- A **naive** datetime is interpreted as **local business time**.
- An **aware** datetime is converted to local business time and persisted
  naive (without tzinfo).
"""
from datetime import datetime, date
from zoneinfo import ZoneInfo

from config.settings import settings

LOCAL_TZ = ZoneInfo(settings.APP_TIMEZONE)


def now_local() -> datetime:
    """
    Current datetime in the business time zone (naive, for DATETIME columns).
    """
    return datetime.now(LOCAL_TZ).replace(tzinfo=None, microsecond=0)


def now_local_aware() -> datetime:
    """
    Current datetime in the business time zone (with tzinfo).
    """
    return datetime.now(LOCAL_TZ)


def today_local() -> date:
    return datetime.now(LOCAL_TZ).date()


def to_local_naive(dt: datetime) -> datetime:
    """
    Normalise a datetime to local business time WITHOUT tzinfo.

    - NAIVE input is already local: returned as is (microseconds cleared).
    - AWARE input is converted to local time and stripped of tzinfo.
    """
    if dt.tzinfo is None:
        return dt.replace(microsecond=0)
    return dt.astimezone(LOCAL_TZ).replace(tzinfo=None, microsecond=0)
