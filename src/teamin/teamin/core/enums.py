from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    MANAGER = "Manager"
    TEAM_MEMBER = "Team Member"


class PresenceStatus(str, Enum):
    """Where a user works on a given day."""

    IN_OFFICE = "In office"
    WORKING_FROM_HOME = "Working from home"
    ON_VACATION = "On vacation"
