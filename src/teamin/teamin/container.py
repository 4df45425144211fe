from __future__ import annotations

from dataclasses import dataclass

from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .presence.mysql_presence_repository import MySQLPresenceRepository
from .presence.repository import PresenceRepository
from .presence.service import PresenceService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    presence_repo: PresenceRepository

    auth_service: AuthService
    user_service: UserService
    presence_service: PresenceService
    dashboard_service: DashboardService


def build_services(*, users_repo: UserRepository, presence_repo: PresenceRepository) -> Container:
    return Container(
        users_repo=users_repo,
        presence_repo=presence_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        presence_service=PresenceService(presence_repo, users_repo),
        dashboard_service=DashboardService(presence_repo, users_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        presence_repo=MySQLPresenceRepository(conn),
    )
