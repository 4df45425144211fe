from __future__ import annotations

import logging
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..access.policy import ensure_can_list_users
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ActorNotFound, EmailTaken, InvalidCredentials, UserNotFound
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def load_actor(users: UserRepository, actor_id: int) -> User:
    """Resolve the acting user; every protected operation starts here."""
    actor = users.get_by_id(int(actor_id))
    if not actor:
        raise ActorNotFound()
    return actor


class AuthService:
    """Use cases: register and login."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, email: str, name: str, password: str, role: Role) -> User:
        email = require_email(email)
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise EmailTaken()

        # Role is self-declared; there is no invitation or approval step.
        user_id = self._users.create_user(
            email=email,
            name=name,
            password_hash=generate_password_hash(password),
            role=Role(role),
        )
        user = self._users.get_by_id(user_id)
        if not user:
            raise UserNotFound()
        logger.info("Registered user %s as %s", user.user_id, user.role.value)
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            raise InvalidCredentials()

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise InvalidCredentials()
        return user


class UserService:
    """Use cases: current user and team listing."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_current_user(self, *, actor_id: int) -> User:
        return load_actor(self._users, actor_id)

    def list_users(self, *, actor_id: int) -> Sequence[User]:
        actor = load_actor(self._users, actor_id)
        ensure_can_list_users(actor)
        return list(self._users.list_all())
