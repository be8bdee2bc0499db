"""
Base model with common fields.

Every collection table inherits from this to get:
- id (integer primary key handed out by the id sequence table)
- document (the record body, stored as JSON)
- created_at (when the record was created)
- updated_at (when the record was last modified)
"""

from datetime import datetime
from typing import Any, ClassVar, Tuple

from sqlalchemy import JSON, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class DocumentModel(Base):
    """
    Abstract base class for all collection tables.

    This is not a real table - it's a template that other models inherit from.
    Field names listed in ``__index_fields__`` are copied out of the document
    into real columns on every write so they can be queried directly.
    """

    __abstract__ = True  # This means: don't create a table for this class

    __index_fields__: ClassVar[Tuple[str, ...]] = ()

    # Assigned by the store's allocator, never by the database
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    document: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
