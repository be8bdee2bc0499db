"""
Shared schemas: pipeline vocabulary, pagination envelope, small payloads.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Stage(str, Enum):
    """Canonical hiring pipeline stages, used everywhere stages appear."""

    APPLIED = "applied"
    SCREEN = "screen"
    TEST = "test"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"


STAGES: tuple[str, ...] = tuple(stage.value for stage in Stage)

JOB_STATUSES: tuple[str, ...] = ("active", "draft", "paused", "archived", "closed")


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class Page(BaseModel, Generic[T]):
    """List envelope: one page of records plus pagination details."""

    data: List[T]
    pagination: Pagination


class SuccessResponse(BaseModel):
    success: bool = True


class StageHistoryEntry(BaseModel):
    stage: str
    date: datetime
    notes: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class StageUpdate(BaseModel):
    """Body of the dedicated stage-update operations."""

    stage: Stage
    notes: Optional[str] = Field(default=None, max_length=5000)
