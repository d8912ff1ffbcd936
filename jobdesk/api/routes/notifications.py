"""Notification API endpoints."""

from typing import List

from fastapi import APIRouter, status

from jobdesk.api.dependencies import (
    NotificationRepositoryDep,
    RecordIdPath,
    StaffUserDep,
    TransactionServiceDep,
)
from jobdesk.api.schemas.user import NotificationRequest, NotificationResponse
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.infrastructure.database.models.user import NotificationModel

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(notification_repository: NotificationRepositoryDep):
    """List notifications that have not been dismissed."""
    with normalized_store_errors("notification", "Failed to fetch notifications"):
        return await notification_repository.get_active()


@router.post(
    "", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED
)
async def create_notification(
    notification_data: NotificationRequest,
    current_user: StaffUserDep,
    notification_repository: NotificationRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Publish a notification. Admins and moderators only."""
    notification = NotificationModel(
        text=notification_data.text, link=notification_data.link, active=True
    )
    with normalized_store_errors("notification", "Failed to create notification"):
        return await transaction_service.execute_in_transaction(
            lambda: notification_repository.create(notification)
        )


@router.patch("/{notification_id}/dismiss", response_model=NotificationResponse)
async def dismiss_notification(
    notification_id: RecordIdPath,
    notification_repository: NotificationRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Dismiss a notification. The row is kept with active set to false."""
    with normalized_store_errors("notification", "Failed to dismiss notification"):
        return await transaction_service.execute_in_transaction(
            lambda: notification_repository.dismiss(notification_id)
        )
