from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.teamin.teamin.core.enums import PresenceStatus
from src.teamin.teamin.core.exceptions import (
    ActorNotFound,
    DateOutOfRange,
    DuplicateEntry,
    EntryNotFound,
    PermissionDenied,
    UserNotFound,
)
from src.teamin.teamin.presence.model import PresencePatch
from src.teamin.teamin.presence.service import PresenceService

TODAY = date(2026, 3, 2)


@pytest.fixture
def svc(presence_repo, users_repo) -> PresenceService:
    return PresenceService(presence_repo, users_repo)


def _create(svc, actor, target, *, offset=0, status=PresenceStatus.IN_OFFICE):
    return svc.create_entry(
        actor_id=actor.user_id,
        user_id=target.user_id,
        status=status,
        work_date=TODAY + timedelta(days=offset),
        today=TODAY,
    )


# -------- create --------
def test_member_creates_own_entry(svc, member):
    entry = _create(svc, member, member, status=PresenceStatus.WORKING_FROM_HOME)

    assert entry.user_id == member.user_id
    assert entry.created_by == member.user_id
    assert entry.status == PresenceStatus.WORKING_FROM_HOME
    assert entry.work_date == TODAY


def test_manager_creates_entry_for_member(svc, manager, member):
    entry = _create(svc, manager, member)
    assert entry.user_id == member.user_id
    assert entry.created_by == manager.user_id


def test_member_cannot_create_for_other(svc, member, other_member):
    with pytest.raises(PermissionDenied):
        _create(svc, member, other_member)


def test_create_boundary_is_inclusive(svc, member):
    assert _create(svc, member, member, offset=14).work_date == TODAY + timedelta(days=14)
    with pytest.raises(DateOutOfRange):
        _create(svc, member, member, offset=15)


def test_create_rejects_past_date(svc, member):
    with pytest.raises(DateOutOfRange):
        _create(svc, member, member, offset=-1)


def test_create_rejects_duplicate_slot(svc, manager, member):
    _create(svc, member, member, offset=3)
    with pytest.raises(DuplicateEntry):
        _create(svc, manager, member, offset=3, status=PresenceStatus.ON_VACATION)


def test_storage_constraint_catches_duplicate_without_precheck(svc, presence_repo, member, monkeypatch):
    _create(svc, member, member, offset=2)
    # Simulate a concurrent request that passed the pre-check.
    monkeypatch.setattr(presence_repo, "get_for_user_and_date", lambda **kwargs: None)
    with pytest.raises(DuplicateEntry):
        _create(svc, member, member, offset=2)


def test_create_unknown_target(svc, manager):
    with pytest.raises(UserNotFound):
        svc.create_entry(
            actor_id=manager.user_id,
            user_id=999,
            status=PresenceStatus.IN_OFFICE,
            work_date=TODAY,
            today=TODAY,
        )


def test_create_unknown_actor(svc, member):
    with pytest.raises(ActorNotFound):
        svc.create_entry(
            actor_id=999,
            user_id=member.user_id,
            status=PresenceStatus.IN_OFFICE,
            work_date=TODAY,
            today=TODAY,
        )


# -------- update --------
def test_update_status_only_keeps_date(svc, member):
    entry = _create(svc, member, member, offset=1)
    updated = svc.update_entry(
        actor_id=member.user_id,
        entry_id=entry.entry_id,
        patch=PresencePatch(status=PresenceStatus.ON_VACATION),
        today=TODAY,
    )
    assert updated.status == PresenceStatus.ON_VACATION
    assert updated.work_date == entry.work_date


def test_update_date_only_keeps_status(svc, member):
    entry = _create(svc, member, member, offset=1, status=PresenceStatus.WORKING_FROM_HOME)
    updated = svc.update_entry(
        actor_id=member.user_id,
        entry_id=entry.entry_id,
        patch=PresencePatch(work_date=TODAY + timedelta(days=14)),
        today=TODAY,
    )
    assert updated.work_date == TODAY + timedelta(days=14)
    assert updated.status == PresenceStatus.WORKING_FROM_HOME


def test_update_date_out_of_range(svc, member):
    entry = _create(svc, member, member)
    with pytest.raises(DateOutOfRange):
        svc.update_entry(
            actor_id=member.user_id,
            entry_id=entry.entry_id,
            patch=PresencePatch(work_date=TODAY + timedelta(days=15)),
            today=TODAY,
        )


def test_empty_patch_returns_entry_unchanged(svc, member):
    entry = _create(svc, member, member)
    assert svc.update_entry(actor_id=member.user_id, entry_id=entry.entry_id, patch=PresencePatch(), today=TODAY) == entry


def test_member_cannot_update_foreign_entry(svc, manager, member, other_member):
    entry = _create(svc, manager, other_member)
    with pytest.raises(PermissionDenied):
        svc.update_entry(
            actor_id=member.user_id,
            entry_id=entry.entry_id,
            patch=PresencePatch(status=PresenceStatus.ON_VACATION),
            today=TODAY,
        )


def test_manager_updates_any_entry(svc, manager, member):
    entry = _create(svc, member, member)
    updated = svc.update_entry(
        actor_id=manager.user_id,
        entry_id=entry.entry_id,
        patch=PresencePatch(status=PresenceStatus.ON_VACATION),
        today=TODAY,
    )
    assert updated.status == PresenceStatus.ON_VACATION
    assert updated.created_by == member.user_id


def test_update_unknown_entry(svc, member):
    with pytest.raises(EntryNotFound):
        svc.update_entry(
            actor_id=member.user_id,
            entry_id=42,
            patch=PresencePatch(status=PresenceStatus.IN_OFFICE),
            today=TODAY,
        )


def test_update_may_move_onto_day_used_by_another_user(svc, member, other_member):
    _create(svc, other_member, other_member, offset=5)
    entry = _create(svc, member, member, offset=1)
    moved = svc.update_entry(
        actor_id=member.user_id,
        entry_id=entry.entry_id,
        patch=PresencePatch(work_date=TODAY + timedelta(days=5)),
        today=TODAY,
    )
    assert moved.work_date == TODAY + timedelta(days=5)


def test_update_onto_own_occupied_day_is_rejected_by_store(svc, member):
    _create(svc, member, member, offset=5)
    entry = _create(svc, member, member, offset=1)
    with pytest.raises(DuplicateEntry):
        svc.update_entry(
            actor_id=member.user_id,
            entry_id=entry.entry_id,
            patch=PresencePatch(work_date=TODAY + timedelta(days=5)),
            today=TODAY,
        )


# -------- delete --------
def test_owner_deletes_entry_created_by_manager_then_it_is_gone(svc, manager, member):
    entry = _create(svc, manager, member)
    assert entry.created_by == manager.user_id

    assert svc.delete_entry(actor_id=member.user_id, entry_id=entry.entry_id) is True
    with pytest.raises(EntryNotFound):
        svc.delete_entry(actor_id=member.user_id, entry_id=entry.entry_id)


def test_creator_can_delete_entry_it_made_for_someone_else(svc, presence_repo, member, other_member):
    entry_id = presence_repo.create(
        user_id=other_member.user_id,
        status=PresenceStatus.IN_OFFICE,
        work_date=TODAY,
        created_by=member.user_id,
    )
    assert svc.delete_entry(actor_id=member.user_id, entry_id=entry_id) is True


def test_member_cannot_delete_foreign_entry(svc, manager, member, other_member):
    entry = _create(svc, manager, other_member)
    with pytest.raises(PermissionDenied):
        svc.delete_entry(actor_id=member.user_id, entry_id=entry.entry_id)


def test_manager_deletes_any_entry(svc, manager, member):
    entry = _create(svc, member, member)
    assert svc.delete_entry(actor_id=manager.user_id, entry_id=entry.entry_id) is True


def test_delete_unknown_actor(svc, member):
    entry = _create(svc, member, member)
    with pytest.raises(ActorNotFound):
        svc.delete_entry(actor_id=999, entry_id=entry.entry_id)


# -------- list --------
def test_manager_lists_everyone_or_one_user(svc, manager, member, other_member):
    _create(svc, member, member, offset=0)
    _create(svc, other_member, other_member, offset=1)

    everyone = svc.list_entries(actor_id=manager.user_id, start_date=TODAY, end_date=TODAY + timedelta(days=6))
    assert {e.user_id for e in everyone} == {member.user_id, other_member.user_id}

    only_member = svc.list_entries(
        actor_id=manager.user_id,
        start_date=TODAY,
        end_date=TODAY + timedelta(days=6),
        user_id=member.user_id,
    )
    assert [e.user_id for e in only_member] == [member.user_id]


def test_member_listing_is_narrowed_to_self(svc, member, other_member):
    _create(svc, member, member)
    _create(svc, other_member, other_member)

    entries = svc.list_entries(actor_id=member.user_id, start_date=TODAY, end_date=TODAY)
    assert [e.user_id for e in entries] == [member.user_id]


def test_member_cannot_list_other_member(svc, member, other_member):
    with pytest.raises(PermissionDenied):
        svc.list_entries(actor_id=member.user_id, start_date=TODAY, end_date=TODAY, user_id=other_member.user_id)


def test_list_range_includes_both_ends(svc, member):
    for offset in (0, 3, 6, 7):
        _create(svc, member, member, offset=offset)

    entries = svc.list_entries(actor_id=member.user_id, start_date=TODAY, end_date=TODAY + timedelta(days=6))
    assert [e.work_date for e in entries] == [TODAY, TODAY + timedelta(days=3), TODAY + timedelta(days=6)]


def test_list_unknown_actor(svc):
    with pytest.raises(ActorNotFound):
        svc.list_entries(actor_id=999, start_date=TODAY, end_date=TODAY)
