# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports SubscriberRepository."""
from newsletter.repositories.subscriber_repository import SubscriberRepository

__all__ = ["SubscriberRepository"]
