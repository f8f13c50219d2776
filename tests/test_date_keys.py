from datetime import date, datetime, timezone

import pytest

from utils.date_keys import (
    checklist_storage_key,
    daily_key,
    format_date,
    format_time,
    is_today,
    print_datetime,
    validate_daily_key,
)
from utils.errors import InvalidInputError

MARCH_1 = datetime(2024, 3, 1, 14, 5)


def test_daily_key_uses_local_day():
    assert daily_key(MARCH_1) == "2024-03-01"


def test_daily_key_converts_aware_times_to_business_zone():
    # 22:00 UTC is already the next day in Dubai (UTC+4)
    late_utc = datetime(2024, 3, 1, 22, 0, tzinfo=timezone.utc)
    assert daily_key(late_utc) == "2024-03-02"


def test_daily_key_stable_within_a_day():
    morning = datetime(2024, 3, 1, 0, 0, 1)
    night = datetime(2024, 3, 1, 23, 59, 59)
    assert daily_key(morning) == daily_key(night)


def test_daily_key_reads_clock_when_not_given():
    assert validate_daily_key(daily_key()) == daily_key()


def test_checklist_storage_key_with_explicit_date():
    key = checklist_storage_key("downtown", "manager", "2024-03-01")
    assert key == "checklist_downtown_manager_2024-03-01"


def test_checklist_storage_key_defaults_to_today():
    assert checklist_storage_key("downtown", "manager", now=MARCH_1) == "checklist_downtown_manager_2024-03-01"


def test_checklist_storage_key_is_deterministic():
    first = checklist_storage_key("marina", "staff", "2024-12-31")
    second = checklist_storage_key("marina", "staff", "2024-12-31")
    assert first == second


def test_checklist_storage_key_separates_branches_and_roles():
    keys = {
        checklist_storage_key("downtown", "manager", "2024-03-01"),
        checklist_storage_key("marina", "manager", "2024-03-01"),
        checklist_storage_key("downtown", "staff", "2024-03-01"),
    }
    assert len(keys) == 3


@pytest.mark.parametrize("branch, role", [("", "manager"), ("downtown", "")])
def test_checklist_storage_key_requires_identifiers(branch, role):
    with pytest.raises(InvalidInputError):
        checklist_storage_key(branch, role, "2024-03-01")


def test_is_today_is_string_equality_with_daily_key():
    assert is_today("2024-03-01", now=MARCH_1)
    assert not is_today("2024-03-02", now=MARCH_1)
    assert not is_today("2024-3-1", now=MARCH_1)


@pytest.mark.parametrize(
    "value, pattern, expected",
    [
        ("2024-03-01", "PPP", "March 1st, 2024"),
        (date(2024, 3, 2), "PPP", "March 2nd, 2024"),
        (date(2024, 3, 3), "PPP", "March 3rd, 2024"),
        (date(2024, 3, 11), "PPP", "March 11th, 2024"),
        (date(2024, 3, 22), "PPP", "March 22nd, 2024"),
        (date(2024, 3, 22), "PP", "Mar 22, 2024"),
        (date(2024, 3, 22), "P", "03/22/2024"),
        (MARCH_1, "PPP p", "March 1st, 2024 2:05 PM"),
        (datetime(2024, 3, 1, 0, 30), "p", "12:30 AM"),
        (MARCH_1, "yyyy-MM-dd", "2024-03-01"),
        (MARCH_1, "dd/MM/yyyy HH:mm", "01/03/2024 14:05"),
        (MARCH_1, "%Y%m%d", "20240301"),
    ],
)
def test_format_date_patterns(value, pattern, expected):
    assert format_date(value, pattern) == expected


def test_format_date_default_pattern():
    assert format_date(MARCH_1) == "March 1st, 2024"


@pytest.mark.parametrize("bad", ["not a date", "", "2024-13-45"])
def test_format_date_rejects_unparseable_strings(bad):
    with pytest.raises(InvalidInputError):
        format_date(bad)


def test_format_time_is_24_hour():
    assert format_time("2024-03-01T21:07:00") == "21:07"
    assert format_time(datetime(2024, 3, 1, 9, 7)) == "09:07"


def test_format_time_converts_aware_values():
    assert format_time("2024-03-01T10:00:00+00:00") == "14:00"


def test_format_accepts_utc_z_suffix():
    assert format_time("2024-03-01T10:00:00.000Z") == "14:00"
    assert format_date("2024-02-29T22:30:00Z", "yyyy-MM-dd") == "2024-03-01"


def test_print_datetime():
    assert print_datetime(MARCH_1) == "March 1st, 2024 2:05 PM"


@pytest.mark.parametrize("bad", ["2024-3-1", "yesterday", "2024-02-30"])
def test_validate_daily_key_rejects_malformed(bad):
    with pytest.raises(InvalidInputError):
        validate_daily_key(bad)
