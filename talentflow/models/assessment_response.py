"""
AssessmentResponse model.

One row per submission; a candidate may submit the same assessment twice.
"""

from typing import Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.models.base_model import DocumentModel


class AssessmentResponseRecord(DocumentModel):
    """Assessment response table."""

    __tablename__ = "assessment_responses"
    __index_fields__ = ("assessment_id", "candidate_id")

    assessment_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )

    candidate_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )
