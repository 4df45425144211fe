"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PRESENCE_HORIZON_DAYS = 14
WEEK_LENGTH_DAYS = 7
MIN_PASSWORD_LENGTH = 6
DEFAULT_SESSION_DAYS = 7
