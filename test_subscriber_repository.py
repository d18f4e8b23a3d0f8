# type: ignore
"""
SubscriberRepository against in-memory SQLite.
Run:  pytest test_subscriber_repository.py -v
"""
from datetime import timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from newsletter.core import messages
from newsletter.core.errors import StoreError, SubscriberValidationError
from newsletter.repositories.subscriber_repository import SubscriberRepository


def _broken_repo():
    engine = MagicMock()
    boom = OperationalError("SELECT 1", {}, Exception("connection refused"))
    engine.connect.side_effect = boom
    engine.begin.side_effect = boom
    return SubscriberRepository(engine)


class TestInsert:
    def test_assigns_id_and_date(self, repo):
        sub = repo.insert("jean@example.com", "Jean", "Dupont")
        assert len(sub.id) == 36
        assert sub.subscription_date.tzinfo is not None
        assert sub.is_active is True

    def test_ids_are_unique(self, repo):
        a = repo.insert("a@example.com", "Ann", "Lee")
        b = repo.insert("b@example.com", "Bob", "Ray")
        assert a.id != b.id

    def test_unique_email_violation_is_field_error(self, repo):
        repo.insert("dup@example.com", "Ann", "Lee")
        with pytest.raises(SubscriberValidationError) as exc_info:
            repo.insert("dup@example.com", "Other", "Person")
        assert exc_info.value.field_errors == {"email": messages.EMAIL_ALREADY_SUBSCRIBED}
        assert exc_info.value.messages == [messages.EMAIL_ALREADY_SUBSCRIBED]
        assert repo.count() == 1


class TestRead:
    def test_round_trip_by_id_and_email(self, repo):
        created = repo.insert("jean@example.com", "Jean", "Dupont")
        by_id = repo.get_by_id(created.id)
        by_email = repo.get_by_email("jean@example.com")
        assert by_id == created
        assert by_email == created
        assert by_id.subscription_date.tzinfo == timezone.utc

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id("nope") is None
        assert repo.get_by_email("ghost@example.com") is None

    def test_list_newest_first(self, repo):
        first = repo.insert("one@example.com", "One", "First")
        second = repo.insert("two@example.com", "Two", "Second")
        third = repo.insert("three@example.com", "Three", "Third")
        assert [s.id for s in repo.list_all()] == [third.id, second.id, first.id]

    def test_list_empty(self, repo):
        assert repo.list_all() == []

    def test_count(self, repo):
        assert repo.count() == 0
        repo.insert("a@example.com", "Ann", "Lee")
        assert repo.count() == 1


class TestDelete:
    def test_delete_existing(self, repo):
        sub = repo.insert("a@example.com", "Ann", "Lee")
        assert repo.delete(sub.id) is True
        assert repo.get_by_id(sub.id) is None

    def test_delete_missing(self, repo):
        assert repo.delete("missing-id") is False


class TestSchema:
    def test_create_schema_is_repeatable(self, repo):
        repo.create_schema()
        assert repo.count() == 0

    def test_verify_connection(self, repo):
        repo.verify_connection()


class TestStoreFailures:
    @pytest.mark.parametrize("call", [
        lambda r: r.insert("a@example.com", "Ann", "Lee"),
        lambda r: r.delete("x"),
        lambda r: r.get_by_id("x"),
        lambda r: r.get_by_email("a@example.com"),
        lambda r: r.list_all(),
        lambda r: r.count(),
    ])
    def test_sqlalchemy_errors_become_store_errors(self, call):
        with pytest.raises(StoreError) as exc_info:
            call(_broken_repo())
        assert not isinstance(exc_info.value, SubscriberValidationError)
        assert isinstance(exc_info.value.__cause__, OperationalError)
