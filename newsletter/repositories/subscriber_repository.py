# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: subscriber data access.
Pure CRUD over the ``subscribers`` table, no business rules here.
Every SQLAlchemy failure leaves this module as a StoreError.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from sqlalchemy import (
    Boolean, Column, DateTime, MetaData, String, Table,
    delete, func, insert, select, text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from newsletter.core import messages
from newsletter.core.errors import StoreError, SubscriberValidationError
from newsletter.core.logging import get_logger
from newsletter.models.domain import MAX_FIELD_LENGTH, Subscriber

logger = get_logger(__name__)

metadata = MetaData()

subscribers_table = Table(
    "subscribers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(MAX_FIELD_LENGTH), nullable=False, unique=True),
    Column("first_name", String(MAX_FIELD_LENGTH), nullable=False),
    Column("last_name", String(MAX_FIELD_LENGTH), nullable=False),
    Column("subscription_date", DateTime(timezone=True), nullable=False, index=True),
    Column("is_active", Boolean, nullable=False, default=True),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_subscriber(row) -> Subscriber:
    return Subscriber(
        id=row["id"],
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        subscription_date=row["subscription_date"],
        is_active=bool(row["is_active"]),
    )


class SubscriberRepository:
    def __init__(self, engine: Engine, clock: Callable[[], datetime] = _utcnow):
        self._engine = engine
        self._clock = clock

    # ── Schema ─────────────────────────────────────────────────────────

    def create_schema(self) -> None:
        try:
            metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not create subscribers schema: {exc}") from exc

    # ── Write ──────────────────────────────────────────────────────────

    def insert(self, email: str, first_name: str, last_name: str) -> Subscriber:
        record: dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "subscription_date": self._clock(),
            "is_active": True,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(subscribers_table), record)
        except IntegrityError as exc:
            # Unique index on email is the real duplicate guard.
            if "email" in str(exc.orig).lower():
                raise SubscriberValidationError(
                    {"email": messages.EMAIL_ALREADY_SUBSCRIBED}
                ) from exc
            raise StoreError(f"Subscriber insert rejected: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"Subscriber insert failed: {exc}") from exc
        return Subscriber(**record)

    def delete(self, subscriber_id: str) -> bool:
        try:
            with self._engine.begin() as conn:
                deleted = conn.execute(
                    delete(subscribers_table).where(subscribers_table.c.id == subscriber_id)
                ).rowcount
        except SQLAlchemyError as exc:
            raise StoreError(f"Subscriber delete failed: {exc}") from exc
        return deleted > 0

    # ── Read ───────────────────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[Subscriber]:
        return self._fetch_one(subscribers_table.c.email == email)

    def get_by_id(self, subscriber_id: str) -> Optional[Subscriber]:
        return self._fetch_one(subscribers_table.c.id == subscriber_id)

    def list_all(self) -> List[Subscriber]:
        query = select(subscribers_table).order_by(
            subscribers_table.c.subscription_date.desc()
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Subscriber listing failed: {exc}") from exc
        return [_row_to_subscriber(r) for r in rows]

    def count(self) -> int:
        try:
            with self._engine.connect() as conn:
                return conn.execute(
                    select(func.count()).select_from(subscribers_table)
                ).scalar() or 0
        except SQLAlchemyError as exc:
            raise StoreError(f"Subscriber count failed: {exc}") from exc

    def verify_connection(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self._engine.dispose()

    # ── Private ────────────────────────────────────────────────────────

    def _fetch_one(self, condition) -> Optional[Subscriber]:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    select(subscribers_table).where(condition)
                ).mappings().first()
        except SQLAlchemyError as exc:
            raise StoreError(f"Subscriber lookup failed: {exc}") from exc
        return _row_to_subscriber(row) if row else None
