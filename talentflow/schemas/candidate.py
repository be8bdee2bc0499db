"""
Pydantic schemas for Candidate.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from talentflow.schemas.base import RecordBase, RecordRead
from talentflow.schemas.common import StageHistoryEntry


class CandidateNote(BaseModel):
    id: int
    candidate_id: int
    content: str
    author: str
    created_at: datetime


class CandidateNoteCreate(BaseModel):
    content: str = Field(..., min_length=1)
    author: Optional[str] = None


class CandidateCreate(RecordBase):
    """Stage history and the note log are written by their own operations; either sent here is dropped."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    stage: str = "applied"
    location: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    notes: Optional[str] = None


class CandidateUpdate(RecordBase):
    """Generic partial update. Changing ``stage`` here does not touch history."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    stage: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    notes: Optional[str] = None


class CandidateBulkItem(CandidateUpdate):
    id: int


class CandidateBulkUpdate(BaseModel):
    updates: List[CandidateBulkItem]


class CandidateBulkResponse(BaseModel):
    success: bool = True
    updated: int = 0


class CandidateRead(RecordRead):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    stage: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    notes: Optional[str] = None
    stage_history: List[StageHistoryEntry] = Field(default_factory=list)
    notes_log: List[CandidateNote] = Field(default_factory=list)


class TimelineEvent(BaseModel):
    type: str
    title: str
    description: str
    timestamp: datetime
    stage: Optional[str] = None
    job_id: Optional[int] = None
    application_id: Optional[int] = None
