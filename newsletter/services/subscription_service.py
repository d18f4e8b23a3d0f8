# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: newsletter sign-up workflow and admin pass-throughs.

Invalid input and duplicate emails come back as ``SubscriptionResult`` values.
Only unexpected store failures are exceptions, and ``create_subscription``
swallows even those into a generic error after logging the cause.
"""
from typing import Any, Dict, List, Optional

from newsletter.core import messages
from newsletter.core.errors import StoreError, SubscriberValidationError
from newsletter.core.logging import get_logger
from newsletter.metrics.prometheus import (
    SUBSCRIBERS, SUBSCRIBERS_DELETED, SUBSCRIPTIONS_CREATED, SUBSCRIPTIONS_REJECTED,
)
from newsletter.models.domain import Subscriber, SubscriberSummary, SubscriptionResult
from newsletter.repositories.subscriber_repository import SubscriberRepository
from newsletter.services.validation import (
    RawSubscription, sanitize_subscription, validate_subscription,
)

logger = get_logger(__name__)


class SubscriptionService:
    def __init__(self, repo: SubscriberRepository):
        self._repo = repo

    def seed_gauges(self) -> None:
        SUBSCRIBERS.set(self._repo.count())
        logger.info("Prometheus gauges loaded from DB")

    # ── Commands ──

    def create_subscription(self, raw: RawSubscription) -> SubscriptionResult:
        clean = sanitize_subscription(raw)

        validation = validate_subscription(clean)
        if not validation.is_valid:
            return self._reject("invalid", validation.errors)

        try:
            if self._repo.get_by_email(clean.email) is not None:
                logger.info("Duplicate sign-up rejected")
                return self._reject("duplicate", [messages.EMAIL_ALREADY_SUBSCRIBED])

            subscriber = self._repo.insert(clean.email, clean.first_name, clean.last_name)
        except SubscriberValidationError as exc:
            logger.warning("Store rejected subscriber: %s", exc)
            reason = "duplicate" if "email" in exc.field_errors else "invalid"
            return self._reject(reason, exc.messages)
        except StoreError:
            logger.exception("Subscription could not be stored")
            return self._reject("store", [messages.SUBSCRIPTION_FAILED])

        SUBSCRIPTIONS_CREATED.inc()
        SUBSCRIBERS.inc()
        logger.info("Subscriber created id=%s", subscriber.id)
        return SubscriptionResult(
            success=True,
            errors=[],
            message=messages.WELCOME.format(
                first_name=subscriber.first_name, last_name=subscriber.last_name,
            ),
            subscriber=SubscriberSummary.from_subscriber(subscriber),
        )

    def delete_subscriber(self, subscriber_id: str) -> Dict[str, Any]:
        if not self._repo.delete(subscriber_id):
            return {"success": False, "message": messages.SUBSCRIBER_NOT_FOUND}
        SUBSCRIBERS_DELETED.inc()
        SUBSCRIBERS.dec()
        logger.info("Subscriber deleted id=%s", subscriber_id)
        return {"success": True, "message": messages.SUBSCRIBER_DELETED}

    # ── Queries ──

    def list_subscribers(self) -> List[Subscriber]:
        return self._repo.list_all()

    def get_subscriber(self, subscriber_id: str) -> Optional[Subscriber]:
        return self._repo.get_by_id(subscriber_id)

    def count_subscribers(self) -> int:
        return self._repo.count()

    # ── Private ──

    @staticmethod
    def _reject(reason: str, errors: List[str]) -> SubscriptionResult:
        SUBSCRIPTIONS_REJECTED.labels(reason=reason).inc()
        return SubscriptionResult(success=False, errors=errors, reason=reason)
