"""
User, login and notification API schemas.
"""

from typing import Optional

from pydantic import Field

from jobdesk.domain.value_objects.role import Role

from .common import CamelModel, TimestampMixin


class UserCreateRequest(CamelModel):
    """User registration request schema."""

    username: str = Field(..., min_length=1, max_length=150)
    # bcrypt only reads the first 72 bytes
    password: str = Field(..., min_length=1, max_length=72)
    role: Role = Role.USER


class UserUpdateRequest(CamelModel):
    """User update request schema."""

    username: Optional[str] = Field(None, min_length=1, max_length=150)
    password: Optional[str] = Field(None, min_length=1, max_length=72)
    role: Optional[Role] = None


class UserResponse(TimestampMixin):
    """User response schema. The password hash is never included."""

    id: int
    uid: str
    username: str
    role: Role


class LoginRequest(CamelModel):
    """Login request schema."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    """Login response schema."""

    message: str
    user: UserResponse
    token: str


class NotificationRequest(CamelModel):
    """Notification creation request schema."""

    text: str = Field(..., min_length=1)
    link: Optional[str] = Field(None, max_length=2048)


class NotificationResponse(TimestampMixin):
    """Notification response schema."""

    id: int
    text: str
    link: Optional[str] = None
    active: bool
