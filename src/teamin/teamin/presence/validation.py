from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import PRESENCE_HORIZON_DAYS
from ..core.exceptions import DateOutOfRange


def allowed_window(today: Optional[date] = None) -> tuple[date, date]:
    """Inclusive [first, last] dates a presence entry may be written for."""
    today = today or today_local()
    return today, today + timedelta(days=PRESENCE_HORIZON_DAYS)


def require_date_in_window(work_date: date, *, today: Optional[date] = None) -> date:
    first, last = allowed_window(today)
    if work_date > last:
        raise DateOutOfRange(
            f"Cannot record presence more than {PRESENCE_HORIZON_DAYS} days ahead (latest {last.isoformat()})"
        )
    if work_date < first:
        raise DateOutOfRange(f"Cannot record presence for a past date (earliest {first.isoformat()})")
    return work_date
