"""
Pydantic schemas for Application.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from talentflow.schemas.base import RecordBase, RecordRead
from talentflow.schemas.common import StageHistoryEntry


class ApplicationCreate(RecordBase):
    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    stage: str = "applied"
    applied_at: Optional[datetime] = None
    notes: Optional[str] = None


class ApplicationUpdate(RecordBase):
    """Generic partial update. Changing ``stage`` here does not touch history."""

    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    stage: Optional[str] = None
    applied_at: Optional[datetime] = None
    notes: Optional[str] = None


class ApplicationRead(RecordRead):
    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    stage: Optional[str] = None
    applied_at: Optional[datetime] = None
    notes: Optional[str] = None
    stage_history: List[StageHistoryEntry] = Field(default_factory=list)
