"""
User and notification repository implementations.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.domain.exceptions.store_error import RecordNotFoundError
from jobdesk.infrastructure.database.models.user import NotificationModel, UserModel

USER_FIELDS = ("username", "password", "role")


class UserRepository:
    """User repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[UserModel]:
        """Get all users."""
        result = await self.session.execute(select(UserModel).order_by(UserModel.id))
        return list(result.scalars().all())

    async def get_by_id(self, user_id: int) -> Optional[UserModel]:
        """Get user by ID."""
        return await self.session.get(UserModel, user_id)

    async def get_by_username(self, username: str) -> Optional[UserModel]:
        """Get user by username."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        return result.scalar_one_or_none()

    async def create(self, user: UserModel) -> UserModel:
        """Create a new user."""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user_id: int, values: dict) -> UserModel:
        """Update an existing user. A password value must already be hashed."""
        user = await self.get_by_id(user_id)
        if not user:
            raise RecordNotFoundError("User", user_id)

        for field in USER_FIELDS:
            if field in values:
                setattr(user, field, values[field])

        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: int) -> None:
        """Delete a user."""
        result = await self.session.execute(
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError("User", user_id)


class NotificationRepository:
    """Notification repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active(self) -> List[NotificationModel]:
        """Get notifications that have not been dismissed."""
        result = await self.session.execute(
            select(NotificationModel)
            .where(NotificationModel.active.is_(True))
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, notification: NotificationModel) -> NotificationModel:
        """Create a new notification."""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def dismiss(self, notification_id: int) -> NotificationModel:
        """Soft-delete a notification by clearing its active flag."""
        notification = await self.session.get(NotificationModel, notification_id)
        if not notification:
            raise RecordNotFoundError("Notification", notification_id)

        notification.active = False
        await self.session.flush()
        await self.session.refresh(notification)
        return notification
