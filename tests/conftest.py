from __future__ import annotations

import dataclasses
import os
from datetime import date, datetime
from typing import Iterable, Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.teamin.teamin.container import build_services
from src.teamin.teamin.core.enums import PresenceStatus, Role
from src.teamin.teamin.core.exceptions import DuplicateEntry, EmailTaken
from src.teamin.teamin.presence.model import PresenceEntry, PresencePatch
from src.teamin.teamin.users.model import User

FIXED_NOW = datetime(2026, 3, 2, 9, 0, 0)


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, email: str, name: str, password_hash: str, role: Role) -> int:
        if self.get_by_email(email):
            raise EmailTaken()
        uid = self._next_id
        self._next_id += 1
        self._by_id[uid] = User(
            user_id=uid,
            email=email,
            name=name,
            password_hash=password_hash,
            role=role,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        return uid

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda u: (u.name, u.user_id))


class InMemoryPresence:
    """Mirrors the UNIQUE(user_id, date) constraint of the real table."""

    def __init__(self):
        self._by_id: dict[int, PresenceEntry] = {}
        self._next_id = 1

    def _slot_taken(self, user_id: int, work_date: date, *, ignore_id: Optional[int] = None) -> bool:
        return any(
            e.user_id == user_id and e.work_date == work_date and e.entry_id != ignore_id
            for e in self._by_id.values()
        )

    def get_by_id(self, entry_id: int) -> Optional[PresenceEntry]:
        return self._by_id.get(int(entry_id))

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[PresenceEntry]:
        return next(
            (e for e in self._by_id.values() if e.user_id == user_id and e.work_date == work_date),
            None,
        )

    def create(self, *, user_id: int, status: PresenceStatus, work_date: date, created_by: int) -> int:
        if self._slot_taken(user_id, work_date):
            raise DuplicateEntry()
        eid = self._next_id
        self._next_id += 1
        self._by_id[eid] = PresenceEntry(
            entry_id=eid,
            user_id=user_id,
            status=status,
            work_date=work_date,
            created_by=created_by,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        return eid

    def update(self, *, entry_id: int, patch: PresencePatch) -> bool:
        entry = self._by_id.get(int(entry_id))
        if not entry:
            return False
        changes = {}
        if patch.status is not None:
            changes["status"] = patch.status
        if patch.work_date is not None:
            if self._slot_taken(entry.user_id, patch.work_date, ignore_id=entry.entry_id):
                raise DuplicateEntry()
            changes["work_date"] = patch.work_date
        self._by_id[entry.entry_id] = dataclasses.replace(entry, **changes)
        return True

    def delete(self, *, entry_id: int) -> bool:
        return self._by_id.pop(int(entry_id), None) is not None

    def list_range(self, *, start: date, end: date, user_ids: Optional[Iterable[int]] = None):
        ids = None if user_ids is None else {int(u) for u in user_ids}
        items = [
            e
            for e in self._by_id.values()
            if start <= e.work_date <= end and (ids is None or e.user_id in ids)
        ]
        return sorted(items, key=lambda e: (e.work_date, e.user_id))


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def presence_repo() -> InMemoryPresence:
    return InMemoryPresence()


@pytest.fixture
def container(users_repo, presence_repo):
    return build_services(users_repo=users_repo, presence_repo=presence_repo)


@pytest.fixture
def add_user(users_repo):
    def _add(name: str, role: Role, *, email: Optional[str] = None) -> User:
        uid = users_repo.create_user(
            email=email or f"{name.lower()}@example.com",
            name=name,
            password_hash="not-a-real-hash",
            role=role,
        )
        return users_repo.get_by_id(uid)

    return _add


@pytest.fixture
def manager(add_user) -> User:
    return add_user("Maria", Role.MANAGER)


@pytest.fixture
def member(add_user) -> User:
    return add_user("Tom", Role.TEAM_MEMBER)


@pytest.fixture
def other_member(add_user) -> User:
    return add_user("Anna", Role.TEAM_MEMBER)
