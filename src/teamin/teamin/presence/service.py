from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..access.policy import ensure_can_create, ensure_can_modify, scope_for_read
from ..core.enums import PresenceStatus
from ..core.exceptions import DuplicateEntry, EntryNotFound, UserNotFound
from ..users.repository import UserRepository
from ..users.service import load_actor
from .model import PresenceEntry, PresencePatch
from .repository import PresenceRepository
from .validation import require_date_in_window

logger = logging.getLogger(__name__)


class PresenceService:
    """Use cases: record, change, remove and list presence entries.

    Every method takes the acting user's id explicitly. ``today`` defaults to
    the local date at call time; tests pass it to pin the window.
    """

    def __init__(self, presence: PresenceRepository, users: UserRepository):
        self._presence = presence
        self._users = users

    def _get_entry(self, entry_id: int) -> PresenceEntry:
        entry = self._presence.get_by_id(int(entry_id))
        if not entry:
            raise EntryNotFound()
        return entry

    def create_entry(
        self,
        *,
        actor_id: int,
        user_id: int,
        status: PresenceStatus,
        work_date: date,
        today: Optional[date] = None,
    ) -> PresenceEntry:
        actor = load_actor(self._users, actor_id)
        if not self._users.get_by_id(int(user_id)):
            raise UserNotFound("Target user not found")

        ensure_can_create(actor, user_id)
        require_date_in_window(work_date, today=today)

        if self._presence.get_for_user_and_date(user_id=int(user_id), work_date=work_date):
            raise DuplicateEntry()

        # The store's UNIQUE(user_id, date) still rejects a concurrent insert.
        entry_id = self._presence.create(
            user_id=int(user_id),
            status=PresenceStatus(status),
            work_date=work_date,
            created_by=actor.user_id,
        )
        logger.info(
            "Presence %s created for user %s on %s by %s", entry_id, user_id, work_date.isoformat(), actor.user_id
        )
        return self._get_entry(entry_id)

    def update_entry(
        self,
        *,
        actor_id: int,
        entry_id: int,
        patch: PresencePatch,
        today: Optional[date] = None,
    ) -> PresenceEntry:
        actor = load_actor(self._users, actor_id)
        entry = self._get_entry(entry_id)
        ensure_can_modify(actor, entry)

        if patch.work_date is not None:
            require_date_in_window(patch.work_date, today=today)

        if patch.is_empty:
            return entry

        # No duplicate pre-check here: moving onto an occupied day is left to
        # the store constraint, which raises DuplicateEntry.
        self._presence.update(entry_id=entry.entry_id, patch=patch)
        logger.info("Presence %s updated by %s", entry.entry_id, actor.user_id)
        return self._get_entry(entry.entry_id)

    def delete_entry(self, *, actor_id: int, entry_id: int) -> bool:
        actor = load_actor(self._users, actor_id)
        entry = self._get_entry(entry_id)
        ensure_can_modify(actor, entry)

        if not self._presence.delete(entry_id=entry.entry_id):
            raise EntryNotFound()
        logger.info("Presence %s deleted by %s", entry.entry_id, actor.user_id)
        return True

    def list_entries(
        self,
        *,
        actor_id: int,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[PresenceEntry]:
        actor = load_actor(self._users, actor_id)
        scope = scope_for_read(actor, user_id)

        return self._presence.list_range(
            start=start_date,
            end=end_date,
            user_ids=None if scope is None else [scope],
        )
