"""
Application model.

Links a candidate to a job. The references are plain integers; nothing
enforces that the job or candidate exists.
"""

from typing import Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.models.base_model import DocumentModel


class ApplicationRecord(DocumentModel):
    """Application table - one row per candidate applying to a job."""

    __tablename__ = "applications"
    __index_fields__ = ("job_id", "candidate_id")

    job_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )

    candidate_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )
