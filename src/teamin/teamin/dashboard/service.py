from __future__ import annotations

from datetime import date, timedelta

from ..core.constants import WEEK_LENGTH_DAYS
from ..presence.repository import PresenceRepository
from ..users.repository import UserRepository
from ..users.service import load_actor
from .model import DashboardData


def week_end_for(week_start: date) -> date:
    return week_start + timedelta(days=WEEK_LENGTH_DAYS - 1)


class DashboardService:
    def __init__(self, presence: PresenceRepository, users: UserRepository):
        self._presence = presence
        self._users = users

    def get_dashboard(self, *, actor_id: int, week_start: date) -> DashboardData:
        actor = load_actor(self._users, actor_id)
        week_end = week_end_for(week_start)

        if actor.is_manager:
            users = list(self._users.list_all())
            user_ids = None
        else:
            users = [actor]
            user_ids = [actor.user_id]

        entries = self._presence.list_range(start=week_start, end=week_end, user_ids=user_ids)
        return DashboardData(users=users, entries=list(entries), week_start=week_start, week_end=week_end)
