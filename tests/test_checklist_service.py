import pytest

from services.checklist_service import get_checklist, progress_pct, set_item


@pytest.mark.parametrize(
    "completed, total, expected",
    [
        (0, 4, 0),
        (2, 4, 50),
        (1, 8, 13),
        (5, 8, 63),
        (1, 3, 33),
        (2, 3, 67),
        (8, 8, 100),
        (3, 0, 0),
    ],
)
def test_progress_rounds_halves_up(completed, total, expected):
    assert progress_pct(completed, total) == expected


def test_progress_reported_for_eight_item_list(db):
    set_item(db, "marina", "staff", "mop-floor", True, date="2024-03-01")
    out = get_checklist(db, "marina", "staff", "2024-03-01", total=8)
    assert out.completed_count == 1
    assert out.progress_pct == 13


def test_progress_omitted_without_total(db):
    out = get_checklist(db, "marina", "staff", "2024-03-01")
    assert out.progress_pct is None
