"""Endpoints and websocket handler for in-app notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session

from ajoconnect.domain.entities import Notification
from ajoconnect.infrastructure.database import SessionLocal, get_db
from ajoconnect.infrastructure.notifications import notification_manager, serialize_notification
from ajoconnect.infrastructure.repositories import NotificationRepository
from ajoconnect.interfaces.api.dependencies import get_current_user_id, resolve_user_id
from ajoconnect.interfaces.api.schemas import NotificationMarkReadRequest, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or "",
        user_id=notification.user_id,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        data=notification.data or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = NotificationRepository(db).list_for_user(user_id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.post("/mark-read")
def mark_notifications_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> dict[str, int]:
    updated = NotificationRepository(db).mark_as_read(payload.unique_ids(), user_id=user_id)
    return {"updated": updated}


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream notifications to the user identified by the ``token`` query param."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    try:
        user_id = resolve_user_id(token)
    except HTTPException:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        pending = NotificationRepository(session).list_unread_for_user(user_id)
    finally:
        session.close()

    await notification_manager.connect(user_id, websocket)
    try:
        if pending:
            await websocket.send_json(
                {"type": "init", "data": [serialize_notification(n) for n in pending]}
            )
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "ack":
                ids = message.get("ids")
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        NotificationRepository(ack_session).mark_as_read(
                            [str(item) for item in ids], user_id=user_id
                        )
                    finally:
                        ack_session.close()
    except WebSocketDisconnect:
        pass
    finally:
        notification_manager.disconnect(user_id, websocket)
