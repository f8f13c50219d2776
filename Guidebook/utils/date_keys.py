"""
Date keys and display formatting for day-scoped checklist state.

Every function is pure apart from reading the clock, and every one that
reads the clock accepts ``now`` so callers (and tests) can pin the day.

Display patterns use the same tokens as the web front-end (date-fns):

    PPP      March 1st, 2024
    PP       Mar 1, 2024
    P        03/01/2024
    p        2:05 PM
    yyyy MM dd HH mm ss

Other characters are copied literally. A pattern containing ``%`` is
handed to ``strftime`` unchanged.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

from utils.datetime_utils import now_local, to_local_naive
from utils.errors import InvalidInputError

DateInput = Union[datetime, date, str]

DAILY_KEY_FORMAT = "%Y-%m-%d"
DEFAULT_DISPLAY_PATTERN = "PPP"
PRINT_PATTERN = "PPP p"

_TOKEN_RE = re.compile(r"PPP|PP|P|p|yyyy|MM|dd|HH|mm|ss")


# ============================================================================
# Clock / parsing
# ============================================================================

def _local_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return now_local()
    return to_local_naive(now)


def _coerce(value: DateInput) -> datetime:
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidInputError("Empty date string")
        if text.endswith(("Z", "z")):
            # fromisoformat accepts "Z" only from 3.11
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidInputError(f"Unparseable date: {value!r}") from None
        return to_local_naive(parsed)
    raise InvalidInputError(f"Unsupported date value: {value!r}")


# ============================================================================
# Keys
# ============================================================================

def daily_key(now: Optional[datetime] = None) -> str:
    """Local calendar day as YYYY-MM-DD."""
    return _local_now(now).strftime(DAILY_KEY_FORMAT)


def validate_daily_key(value: str) -> str:
    """Return ``value`` if it is a real YYYY-MM-DD day, else raise."""
    try:
        datetime.strptime(value, DAILY_KEY_FORMAT)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Expected YYYY-MM-DD, got {value!r}") from None
    if len(value) != 10:
        raise InvalidInputError(f"Expected YYYY-MM-DD, got {value!r}")
    return value


def checklist_storage_key(
        branch_slug: str,
        role_id: str,
        date: Optional[str] = None,
        now: Optional[datetime] = None,
) -> str:
    """
    Key for one branch/role checklist on one day:
    ``checklist_{branch_slug}_{role_id}_{date}``.

    ``date`` defaults to today's daily key. Identifiers are not escaped, so
    callers must not pass slugs whose underscores make two keys collide.
    """
    if not branch_slug:
        raise InvalidInputError("branch_slug is required")
    if not role_id:
        raise InvalidInputError("role_id is required")
    date_key = date or daily_key(now)
    return f"checklist_{branch_slug}_{role_id}_{date_key}"


def is_today(date_string: str, now: Optional[datetime] = None) -> bool:
    return date_string == daily_key(now)


# ============================================================================
# Display
# ============================================================================

def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _twelve_hour(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {meridiem}"


def _render_token(token: str, dt: datetime) -> str:
    if token == "PPP":
        return f"{dt.strftime('%B')} {_ordinal(dt.day)}, {dt.year}"
    if token == "PP":
        return f"{dt.strftime('%b')} {dt.day}, {dt.year}"
    if token == "P":
        return dt.strftime("%m/%d/%Y")
    if token == "p":
        return _twelve_hour(dt)
    if token == "yyyy":
        return f"{dt.year:04d}"
    if token == "MM":
        return f"{dt.month:02d}"
    if token == "dd":
        return f"{dt.day:02d}"
    if token == "HH":
        return f"{dt.hour:02d}"
    if token == "mm":
        return f"{dt.minute:02d}"
    return f"{dt.second:02d}"


def format_date(value: DateInput, pattern: str = DEFAULT_DISPLAY_PATTERN) -> str:
    """
    Format a date for display.

    Raises:
        InvalidInputError: if ``value`` is a string that is not ISO-8601.
    """
    dt = _coerce(value)
    if "%" in pattern:
        return dt.strftime(pattern)
    return _TOKEN_RE.sub(lambda m: _render_token(m.group(0), dt), pattern)


def format_time(value: DateInput) -> str:
    return format_date(value, "HH:mm")


def print_datetime(now: Optional[datetime] = None) -> str:
    """Timestamp line for printed reports."""
    return format_date(_local_now(now), PRINT_PATTERN)
