"""Shared constants: role names and session marker keys."""

from enum import Enum


class RoleName(str, Enum):
    """Roles seeded by the initial migration (roles.name)."""

    MENTOR = "mentor"
    MENTEE = "mentee"


DEFAULT_ROLE = RoleName.MENTEE

# Cache key prefix for session markers: user_uuid:<uid>
SESSION_KEY_PREFIX = "user_uuid:"
