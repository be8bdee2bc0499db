"""
Base Pydantic schemas with common fields.

These are templates that other schemas inherit from. Request bodies allow
unknown fields: they are persisted as-is alongside the typed ones.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RecordBase(BaseModel):
    """
    Base schema for data sent by callers (create, replace, patch).

    Extra fields are kept so the store receives the caller's payload as-is.
    """

    model_config = ConfigDict(extra="allow")


class RecordRead(BaseModel):
    """
    Base schema for reading stored records.

    Includes the fields the store assigns: id and timestamps.
    """

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(extra="allow")
