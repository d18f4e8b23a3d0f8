# type: ignore
"""Shared fixtures: an in-memory SQLite store wired into the FastAPI app."""
import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from newsletter.core.database import build_engine
from newsletter.core.dependencies import get_subscriber_repo, get_subscription_service
from newsletter.repositories.subscriber_repository import SubscriberRepository
from newsletter.services.subscription_service import SubscriptionService

T0 = datetime(2026, 2, 10, 12, 0, 0, tzinfo=timezone.utc)


def _ticking_clock(start=T0, step=timedelta(seconds=1)):
    """Each call is one step later, so insertion order is subscription order."""
    ticks = itertools.count()
    return lambda: start + step * next(ticks)


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine):
    r = SubscriberRepository(engine, clock=_ticking_clock())
    r.create_schema()
    return r


@pytest.fixture
def service(repo):
    return SubscriptionService(repo)


@pytest.fixture
def client(repo, service):
    app.dependency_overrides[get_subscriber_repo] = lambda: repo
    app.dependency_overrides[get_subscription_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
