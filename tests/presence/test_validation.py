from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.teamin.teamin.core.exceptions import DateOutOfRange
from src.teamin.teamin.presence.validation import allowed_window, require_date_in_window

TODAY = date(2026, 3, 2)


def test_window_is_today_plus_fourteen_days():
    assert allowed_window(TODAY) == (TODAY, date(2026, 3, 16))


@pytest.mark.parametrize("offset", [0, 1, 13, 14])
def test_dates_inside_window_pass(offset):
    d = TODAY + timedelta(days=offset)
    assert require_date_in_window(d, today=TODAY) == d


@pytest.mark.parametrize("offset", [15, 30, -1])
def test_dates_outside_window_fail(offset):
    with pytest.raises(DateOutOfRange):
        require_date_in_window(TODAY + timedelta(days=offset), today=TODAY)


def test_today_defaults_to_call_time(monkeypatch):
    from src.teamin.teamin.presence import validation

    monkeypatch.setattr(validation, "today_local", lambda: TODAY)
    require_date_in_window(TODAY + timedelta(days=14))
    with pytest.raises(DateOutOfRange):
        require_date_in_window(TODAY + timedelta(days=15))
