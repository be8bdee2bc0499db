"""
Database models.

Import all models here so Base.metadata knows about every table.
"""

from talentflow.models.application import ApplicationRecord
from talentflow.models.assessment import AssessmentRecord
from talentflow.models.assessment_response import AssessmentResponseRecord
from talentflow.models.base_model import DocumentModel
from talentflow.models.candidate import CandidateRecord
from talentflow.models.id_sequence import IdSequence
from talentflow.models.job import JobRecord

__all__ = [
    "ApplicationRecord",
    "AssessmentRecord",
    "AssessmentResponseRecord",
    "CandidateRecord",
    "DocumentModel",
    "IdSequence",
    "JobRecord",
]
