"""
User role value object.
"""

from enum import Enum


class Role(str, Enum):
    """User role enumeration."""

    USER = "User"
    ADMIN = "Admin"
    MODERATOR = "Moderator"

    @property
    def can_manage_users(self) -> bool:
        """Check if the role may modify other users."""
        return self == Role.ADMIN
