"""Server-side functions called by the web client and other services."""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ajoconnect.application.use_cases import deliver_notification, is_two_factor_enabled
from ajoconnect.infrastructure.database import get_db
from ajoconnect.interfaces.api.dependencies import require_service_key
from ajoconnect.interfaces.api.schemas import SendNotificationRequest, TwoFactorStatusRequest

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class CorsErrorRoute(APIRoute):
    """Route that keeps the CORS headers on validation and auth errors."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except RequestValidationError as exc:
                return JSONResponse(
                    content={"detail": jsonable_encoder(exc.errors())},
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    headers=CORS_HEADERS,
                )
            except HTTPException as exc:
                return JSONResponse(
                    content={"detail": exc.detail},
                    status_code=exc.status_code,
                    headers={**(exc.headers or {}), **CORS_HEADERS},
                )

        return route_handler


router = APIRouter(prefix="/functions", tags=["functions"], route_class=CorsErrorRoute)


def _json(content: dict, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


@router.options("/check-2fa-status")
@router.options("/send-notification")
def preflight() -> Response:
    """Answer cross-origin pre-flight requests with an empty body."""

    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("/check-2fa-status")
def check_two_factor_status(
    payload: TwoFactorStatusRequest | None = Body(default=None),
    db: Session = Depends(get_db),
) -> JSONResponse:
    """Tell a signing-in client whether a TOTP code will be required."""

    user_id = payload.user_id if payload else None
    if not user_id:
        return _json(
            {"success": False, "error": "User ID is required"},
            status.HTTP_400_BAD_REQUEST,
        )

    try:
        is_enabled = is_two_factor_enabled(db, user_id)
    except SQLAlchemyError:
        logger.exception("2FA status check error for user %s", user_id)
        return _json(
            {"success": False, "error": "Failed to check 2FA status"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return _json({"success": True, "data": {"isEnabled": is_enabled}})


@router.post("/send-notification", dependencies=[Depends(require_service_key)])
def send_notification_function(
    payload: SendNotificationRequest,
    db: Session = Depends(get_db),
) -> JSONResponse:
    """Store an in-app notification and deliver it by email and push."""

    try:
        report = deliver_notification(db, payload.to_entity())
    except SQLAlchemyError:
        logger.exception("Error in send-notification for user %s", payload.user_id)
        return _json(
            {"error": "Failed to store notification"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return _json(report.to_dict())
