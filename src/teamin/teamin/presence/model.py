from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PresenceStatus


@dataclass(frozen=True)
class PresenceEntry:
    """Domain entity: one user's work location for one calendar day."""

    entry_id: int
    user_id: int
    status: PresenceStatus
    work_date: date
    created_by: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PresencePatch:
    """Partial update; fields left as None are not touched."""

    status: Optional[PresenceStatus] = None
    work_date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.work_date is None
