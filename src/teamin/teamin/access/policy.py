"""Who may read or write whose presence data.

Pure predicates over already-fetched records. ``ensure_*`` variants raise
PermissionDenied; list reads narrow instead of failing when no target is named.
"""

from __future__ import annotations

from typing import Optional

from ..core.exceptions import PermissionDenied
from ..presence.model import PresenceEntry
from ..users.model import User


def can_write_for(actor: User, target_user_id: int) -> bool:
    return actor.user_id == int(target_user_id) or actor.is_manager


def can_modify(actor: User, entry: PresenceEntry) -> bool:
    return actor.user_id in (entry.user_id, entry.created_by) or actor.is_manager


def can_list_users(actor: User) -> bool:
    return actor.is_manager


def ensure_can_create(actor: User, target_user_id: int) -> None:
    if not can_write_for(actor, target_user_id):
        raise PermissionDenied("Only managers can create presence entries for other users")


def ensure_can_modify(actor: User, entry: PresenceEntry) -> None:
    if not can_modify(actor, entry):
        raise PermissionDenied("Insufficient permissions for this presence entry")


def ensure_can_list_users(actor: User) -> None:
    if not can_list_users(actor):
        raise PermissionDenied("Manager role required")


def scope_for_read(actor: User, requested_user_id: Optional[int]) -> Optional[int]:
    """Return the user id a listing must be restricted to, or None for everyone.

    Managers get what they ask for. Team members asking for nobody in
    particular are narrowed to themselves; asking for someone else is denied.
    """

    if actor.is_manager:
        return None if requested_user_id is None else int(requested_user_id)
    if requested_user_id is None or int(requested_user_id) == actor.user_id:
        return actor.user_id
    raise PermissionDenied("Team members can only view their own presence entries")
