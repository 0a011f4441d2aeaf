"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Account roles. ADMIN may mutate shared reference data."""

    ADMIN = "ADMIN"
    USER = "USER"

    def is_admin(self) -> bool:
        """Check if this role grants admin capabilities."""
        return self == Role.ADMIN
