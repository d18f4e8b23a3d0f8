# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic response envelopes. Every body carries a ``success`` flag."""
from typing import List, Optional

from pydantic import BaseModel

from newsletter.models.domain import CamelModel, Subscriber, SubscriberSummary


class ErrorResponse(BaseModel):
    success: bool = False
    errors: List[str]


class SubscribeResponse(BaseModel):
    success: bool
    errors: List[str] = []
    message: Optional[str] = None
    subscriber: Optional[SubscriberSummary] = None


class SubscriberListResponse(BaseModel):
    success: bool = True
    data: List[Subscriber]


class SubscriberDetailResponse(BaseModel):
    success: bool = True
    data: Subscriber


class DeleteResponse(BaseModel):
    success: bool
    message: str


class StatsData(CamelModel):
    total_subscribers: int


class StatsResponse(BaseModel):
    success: bool = True
    data: StatsData


def error_body(*messages: str) -> dict:
    return ErrorResponse(errors=list(messages)).model_dump()
