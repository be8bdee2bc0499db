"""
Assessment model.

An ordered list of questions, optionally attached to a job.
"""

from typing import Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.models.base_model import DocumentModel


class AssessmentRecord(DocumentModel):
    """Assessment table - job_id is null for job-agnostic assessments."""

    __tablename__ = "assessments"
    __index_fields__ = ("job_id",)

    job_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )
