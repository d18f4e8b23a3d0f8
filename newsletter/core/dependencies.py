# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from newsletter.core.database import engine
from newsletter.repositories.subscriber_repository import SubscriberRepository
from newsletter.services.subscription_service import SubscriptionService

_repo = SubscriberRepository(engine)
_service = SubscriptionService(_repo)


def get_subscriber_repo() -> SubscriberRepository:
    return _repo


def get_subscription_service() -> SubscriptionService:
    return _service
