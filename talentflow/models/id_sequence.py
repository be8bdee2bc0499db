"""
IdSequence model.

Holds the last identifier handed out for each collection. Identifiers are
allocated by bumping ``last_id`` inside the writing transaction, so they are
monotonic per collection and never reused after a delete.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class IdSequence(Base):
    """One row per collection."""

    __tablename__ = "id_sequences"

    collection: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )

    last_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
