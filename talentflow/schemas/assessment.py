"""
Pydantic schemas for Assessment and AssessmentResponse.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from talentflow.schemas.base import RecordBase, RecordRead


class Question(BaseModel):
    """One question. Type-specific settings (options, limits, ...) ride along as extras."""

    id: Any = None
    type: Optional[str] = None
    question: Optional[str] = None
    required: bool = False

    model_config = ConfigDict(extra="allow")


class AssessmentCreate(RecordBase):
    job_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    questions: List[Question] = Field(default_factory=list)


class AssessmentUpdate(RecordBase):
    job_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    questions: Optional[List[Question]] = None


class AssessmentRead(RecordRead):
    job_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    questions: Optional[List[Question]] = Field(default_factory=list)


class AssessmentSubmission(RecordBase):
    """Answers submitted against a job's assessment."""

    assessment_id: Optional[int] = None
    candidate_id: Optional[int] = None
    responses: dict[str, Any] = Field(default_factory=dict)
    score: Optional[float] = None


class AssessmentResponseCreate(RecordBase):
    assessment_id: Optional[int] = None
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    responses: dict[str, Any] = Field(default_factory=dict)
    score: Optional[float] = None
    status: Optional[str] = None


class AssessmentResponseUpdate(RecordBase):
    assessment_id: Optional[int] = None
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    responses: Optional[dict[str, Any]] = None
    score: Optional[float] = None
    status: Optional[str] = None
    completed_at: Optional[datetime] = None


class AssessmentResponseRead(RecordRead):
    assessment_id: Optional[int] = None
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    responses: Optional[dict[str, Any]] = Field(default_factory=dict)
    score: Optional[float] = None
    completed_at: Optional[datetime] = None
    status: Optional[str] = None
