"""
User and notification SQLAlchemy models.
"""

from uuid import uuid4

from sqlalchemy import Boolean, Column, Enum, String, Text

from jobdesk.domain.value_objects.role import Role

from . import BaseModel


class UserModel(BaseModel):
    """User database model."""

    __tablename__ = "users"

    uid = Column(String(36), nullable=False, unique=True, default=lambda: str(uuid4()))
    username = Column(String(150), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(
        Enum(Role, name="role_enum", values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        default=Role.USER,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"


class NotificationModel(BaseModel):
    """Notification database model. Dismissal clears the active flag."""

    __tablename__ = "notifications"

    text = Column(Text, nullable=False)
    link = Column(String(2048))
    active = Column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, active={self.active})>"
