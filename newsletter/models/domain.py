# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
Attributes are snake_case; the JSON wire names are camelCase.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_FIELD_LENGTH = 255


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubscriptionInput(CamelModel):
    """Sign-up form payload. Every field is optional until validated."""

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class Subscriber(CamelModel):
    """A persisted newsletter sign-up."""

    id: str
    email: str
    first_name: str
    last_name: str
    subscription_date: datetime
    is_active: bool = True

    @field_validator("subscription_date")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class SubscriberSummary(CamelModel):
    """Projection returned right after a successful sign-up."""

    id: str
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_subscriber(cls, subscriber: Subscriber) -> "SubscriberSummary":
        return cls(
            id=subscriber.id,
            email=subscriber.email,
            first_name=subscriber.first_name,
            last_name=subscriber.last_name,
        )


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class SubscriptionResult(BaseModel):
    """Outcome of a sign-up attempt.

    ``reason`` is one of ``invalid``, ``duplicate`` or ``store`` on failure and
    stays internal: it picks the HTTP status and the rejection metric label.
    """

    success: bool
    errors: List[str] = Field(default_factory=list)
    message: Optional[str] = None
    subscriber: Optional[SubscriberSummary] = None
    reason: Optional[str] = None

    def to_response(self) -> dict:
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"reason"}
        )
