"""
Job model.

Represents an open (or drafted, paused, archived, closed) position.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.models.base_model import DocumentModel


class JobRecord(DocumentModel):
    """Job table - the slug is the human-readable secondary key."""

    __tablename__ = "jobs"
    __index_fields__ = ("slug",)

    slug: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )
