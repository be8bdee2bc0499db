"""
Pydantic schemas for Job.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from talentflow.schemas.base import RecordBase, RecordRead


class JobCreate(RecordBase):
    title: str
    department: Optional[str] = None
    status: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    tags: List[str] = Field(default_factory=list)
    order: Optional[int] = None


class JobUpdate(RecordBase):
    """Partial update; only the fields sent are written."""

    title: Optional[str] = None
    department: Optional[str] = None
    status: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    order: Optional[int] = None


class JobRead(RecordRead):
    title: Optional[str] = None
    department: Optional[str] = None
    status: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    order: Optional[int] = None


class JobReorderRequest(BaseModel):
    """Move one job from one manual rank to another."""

    from_order: Optional[int] = Field(default=None, alias="fromOrder")
    to_order: int = Field(alias="toOrder")

    model_config = ConfigDict(populate_by_name=True)


class JobReorderResponse(BaseModel):
    success: bool = True
    from_order: Optional[int] = Field(default=None, serialization_alias="fromOrder")
    to_order: int = Field(serialization_alias="toOrder")


class JobOrderItem(RecordBase):
    id: int


class JobBulkReorderRequest(BaseModel):
    """Full ordering: each job's rank becomes its position in the list."""

    jobs: List[JobOrderItem]
