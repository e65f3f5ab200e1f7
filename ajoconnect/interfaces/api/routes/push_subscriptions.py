"""Endpoints registering the browser push subscription of the caller."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from ajoconnect.application.use_cases.preferences import (
    clear_push_subscription,
    renew_push_subscription,
    save_push_subscription,
)
from ajoconnect.domain.entities import InvalidPushSubscriptionError, PushSubscription
from ajoconnect.infrastructure.database import get_db
from ajoconnect.interfaces.api.dependencies import get_current_user_id, get_optional_user_id
from ajoconnect.interfaces.api.schemas import PushSubscriptionSaved

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["push"])

OLD_ENDPOINT_FIELD = "oldEndpoint"


@router.post("/update-push-subscription", response_model=PushSubscriptionSaved)
def update_push_subscription(
    subscription: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: str | None = Depends(get_optional_user_id),
) -> PushSubscriptionSaved:
    """Store the subscription JSON posted by the browser or the push worker.

    Callers without a bearer token must send ``oldEndpoint``, the endpoint
    being replaced; the new subscription goes to the user subscribed there.
    """

    old_endpoint = subscription.pop(OLD_ENDPOINT_FIELD, None)
    try:
        if user_id is not None:
            saved = save_push_subscription(db, user_id, subscription)
        else:
            if not isinstance(old_endpoint, str) or not old_endpoint:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Not authenticated",
                    headers={"WWW-Authenticate": "Bearer"},
                )
            user_id = renew_push_subscription(db, old_endpoint, subscription)
            if user_id is None:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Unknown push subscription",
                )
            saved = PushSubscription.from_mapping(subscription)
    except InvalidPushSubscriptionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("Stored push subscription for user %s", user_id)
    return PushSubscriptionSaved(endpoint=saved.endpoint)


@router.delete("/update-push-subscription", status_code=status.HTTP_204_NO_CONTENT)
def delete_push_subscription(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Response:
    clear_push_subscription(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
