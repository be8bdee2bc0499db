"""
Pydantic schemas for aggregate statistics.

Counts for values outside the canonical vocabularies come through as extras.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class JobStats(BaseModel):
    total: int = 0
    active: int = 0
    draft: int = 0
    paused: int = 0
    archived: int = 0
    closed: int = 0
    recent: int = 0

    model_config = ConfigDict(extra="allow")


class StageStats(BaseModel):
    total: int = 0
    applied: int = 0
    screen: int = 0
    test: int = 0
    offer: int = 0
    hired: int = 0
    rejected: int = 0

    model_config = ConfigDict(extra="allow")


class AssessmentStats(BaseModel):
    total_assessments: int = 0
    total_responses: int = 0
    average_score: Optional[float] = None


class DashboardStats(BaseModel):
    active_jobs: int
    total_jobs: int
    total_candidates: int
    total_applications: int
    total_assessments: int
    hire_rate: float
