# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: sign-up, admin listing/lookup/delete, stats.
Thin HTTP layer. Delegates all logic to SubscriptionService and maps
outcomes onto ``{success, ...}`` envelopes.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from newsletter.core import messages
from newsletter.core.dependencies import get_subscription_service
from newsletter.core.errors import StoreError
from newsletter.core.logging import get_logger
from newsletter.models.domain import SubscriptionInput
from newsletter.schemas import (
    DeleteResponse, ErrorResponse, StatsData, StatsResponse, SubscribeResponse,
    SubscriberDetailResponse, SubscriberListResponse, error_body,
)
from newsletter.services.subscription_service import SubscriptionService

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Subscribers"])

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

_FAILURE_STATUS = {"invalid": 400, "duplicate": 400, "store": 500}


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=error_body(messages.SERVER_ERROR))


@router.post("/subscribe", response_model=SubscribeResponse, responses=_ERRORS)
def subscribe(payload: Optional[SubscriptionInput] = None,
              service: SubscriptionService = Depends(get_subscription_service)):
    """Register a newsletter sign-up. A missing body is validated like ``{}``."""
    if payload is None:
        payload = SubscriptionInput()
    result = service.create_subscription(payload)
    status_code = 200 if result.success else _FAILURE_STATUS.get(result.reason, 400)
    return JSONResponse(status_code=status_code, content=result.to_response())


@router.get("/subscribers", response_model=SubscriberListResponse, responses=_ERRORS)
def list_subscribers(service: SubscriptionService = Depends(get_subscription_service)):
    """All subscribers, newest first."""
    try:
        return SubscriberListResponse(data=service.list_subscribers())
    except StoreError:
        logger.exception("Listing subscribers failed")
        return _server_error()


@router.get("/subscribers/{subscriber_id}", response_model=SubscriberDetailResponse,
            responses={404: {"model": ErrorResponse}, **_ERRORS})
def get_subscriber(subscriber_id: str,
                   service: SubscriptionService = Depends(get_subscription_service)):
    try:
        subscriber = service.get_subscriber(subscriber_id)
    except StoreError:
        logger.exception("Subscriber lookup failed id=%s", subscriber_id)
        return _server_error()
    if subscriber is None:
        return JSONResponse(status_code=404, content=error_body(messages.SUBSCRIBER_NOT_FOUND))
    return SubscriberDetailResponse(data=subscriber)


@router.delete("/subscribers/{subscriber_id}", response_model=DeleteResponse, responses=_ERRORS)
def delete_subscriber(subscriber_id: str,
                      service: SubscriptionService = Depends(get_subscription_service)):
    """Hard delete. An unknown id is reported with ``success: false``, still 200."""
    try:
        return DeleteResponse(**service.delete_subscriber(subscriber_id))
    except StoreError:
        logger.exception("Subscriber delete failed id=%s", subscriber_id)
        return _server_error()


@router.get("/stats", response_model=StatsResponse, responses=_ERRORS)
def get_stats(service: SubscriptionService = Depends(get_subscription_service)):
    try:
        total = service.count_subscribers()
    except StoreError:
        logger.exception("Counting subscribers failed")
        return _server_error()
    return StatsResponse(data=StatsData(total_subscribers=total))
