from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no DB access. ``password_hash`` never leaves the
    service layer; serializers drop it.
    """

    user_id: int
    email: str
    name: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER
