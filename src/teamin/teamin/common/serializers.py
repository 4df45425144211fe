from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..dashboard.model import DashboardData
from ..presence.model import PresenceEntry
from ..users.model import User


def _ts(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def user_to_dict(user: User) -> dict:
    return {
        "id": user.user_id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
        "created_at": _ts(user.created_at),
        "updated_at": _ts(user.updated_at),
    }


def entry_to_dict(entry: PresenceEntry) -> dict:
    return {
        "id": entry.entry_id,
        "user_id": entry.user_id,
        "status": entry.status.value,
        "date": entry.work_date.isoformat(),
        "created_by": entry.created_by,
        "created_at": _ts(entry.created_at),
        "updated_at": _ts(entry.updated_at),
    }


def dashboard_to_dict(data: DashboardData) -> dict:
    return {
        "users": [user_to_dict(u) for u in data.users],
        "presence_entries": [entry_to_dict(e) for e in data.entries],
        "week_start": data.week_start.isoformat(),
        "week_end": data.week_end.isoformat(),
    }
