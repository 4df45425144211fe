from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..presence.model import PresenceEntry
from ..users.model import User


@dataclass(frozen=True)
class DashboardData:
    """Read-model for the week grid: visible users and their entries."""

    users: Sequence[User]
    entries: Sequence[PresenceEntry]
    week_start: date
    week_end: date
