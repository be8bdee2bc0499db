"""
Schemas package.

Import all schemas here for easy access.
"""

from talentflow.schemas.common import Page, Pagination, Stage, StageUpdate, SuccessResponse
from talentflow.schemas.job import JobCreate, JobUpdate, JobRead
from talentflow.schemas.candidate import CandidateCreate, CandidateUpdate, CandidateRead
from talentflow.schemas.application import ApplicationCreate, ApplicationUpdate, ApplicationRead
from talentflow.schemas.assessment import (
    AssessmentCreate,
    AssessmentUpdate,
    AssessmentRead,
    AssessmentResponseCreate,
    AssessmentResponseUpdate,
    AssessmentResponseRead,
)
from talentflow.schemas.stats import AssessmentStats, DashboardStats, JobStats, StageStats
