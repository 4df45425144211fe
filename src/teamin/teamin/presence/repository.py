from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import PresenceStatus
from .model import PresenceEntry, PresencePatch


class PresenceRepository(Protocol):
    """Storage contract for presence entries.

    Implementations must hold UNIQUE(user_id, work_date) and raise
    DuplicateEntry when a write would break it.
    """

    def get_by_id(self, entry_id: int) -> Optional[PresenceEntry]:
        raise NotImplementedError

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[PresenceEntry]:
        raise NotImplementedError

    def create(self, *, user_id: int, status: PresenceStatus, work_date: date, created_by: int) -> int:
        raise NotImplementedError

    def update(self, *, entry_id: int, patch: PresencePatch) -> bool:
        raise NotImplementedError

    def delete(self, *, entry_id: int) -> bool:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: date,
        end: date,
        user_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[PresenceEntry]:
        """Entries with start <= work_date <= end, optionally for given users only."""

        raise NotImplementedError
