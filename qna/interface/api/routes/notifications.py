"""Notification routes. All of them act on the signed-in user's own inbox."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
)
from qna.domain.value import NotificationFilter
from qna.interface.api.dependencies import require_user

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    filter: NotificationFilter = NotificationFilter.ALL,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List notifications, newest first, with the unread count."""
    user = await require_user(get_current_user_use_case, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user.user_id, filter=filter, page=page, limit=limit
        )
    )


@router.post("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MarkAllNotificationsReadResponse:
    user = await require_user(get_current_user_use_case, authorization)
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=user.user_id)
    )


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> NotificationItem:
    user = await require_user(get_current_user_use_case, authorization)
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(
            notification_id=str(notification_id), user_id=user.user_id
        )
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteNotificationResponse:
    """Delete a notification. Only its recipient can delete it."""
    user = await require_user(get_current_user_use_case, authorization)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            notification_id=str(notification_id), user_id=user.user_id
        )
    )
