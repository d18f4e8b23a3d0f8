# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Exceptions raised by the persistence layer."""

from typing import Dict, List


class StoreError(Exception):
    """The subscriber store failed (connectivity, timeout, bad SQL...)."""


class SubscriberValidationError(StoreError):
    """The store rejected a record, with one message per offending field."""

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        super().__init__(
            "Subscriber rejected: "
            + ", ".join(f"{field}={msg}" for field, msg in self.field_errors.items())
        )

    @property
    def messages(self) -> List[str]:
        return list(self.field_errors.values())
