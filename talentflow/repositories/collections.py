"""
Collection registry.

Each of the five collections is described once here. The entity store uses
the descriptor to find its table; the query engine and identifier resolver
use it to know which fields are searchable, filterable, sortable and which
field (if any) acts as the secondary lookup key.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Tuple, Type

from talentflow.models import (
    ApplicationRecord,
    AssessmentRecord,
    AssessmentResponseRecord,
    CandidateRecord,
    DocumentModel,
    JobRecord,
)


class Collection(str, Enum):
    JOBS = "jobs"
    CANDIDATES = "candidates"
    APPLICATIONS = "applications"
    ASSESSMENTS = "assessments"
    ASSESSMENT_RESPONSES = "assessment_responses"


@dataclass(frozen=True)
class FieldFilter:
    """Maps a query parameter onto a record field, with a value coercion."""

    field: str
    cast: Callable[[Any], Any] = str


@dataclass(frozen=True)
class CollectionDescriptor:
    """Per-collection configuration for the generic query pipeline."""

    collection: Collection
    model: Type[DocumentModel]
    entity_label: str
    filters: Mapping[str, FieldFilter] = field(default_factory=dict)
    # None means every field of the record takes part
    searchable_fields: Optional[Tuple[str, ...]] = None
    sortable_fields: Optional[Tuple[str, ...]] = None
    slug_field: Optional[str] = None
    default_limit: int = 10
    default_sort: Optional[Tuple[str, str]] = None

    def can_sort_by(self, field_name: str) -> bool:
        return self.sortable_fields is None or field_name in self.sortable_fields


def _id_filter(field_name: str) -> FieldFilter:
    return FieldFilter(field_name, int)


DESCRIPTORS: dict[Collection, CollectionDescriptor] = {
    Collection.JOBS: CollectionDescriptor(
        collection=Collection.JOBS,
        model=JobRecord,
        entity_label="Job",
        filters={
            "department": FieldFilter("department"),
            "status": FieldFilter("status"),
        },
        slug_field="slug",
        default_limit=10,
    ),
    Collection.CANDIDATES: CollectionDescriptor(
        collection=Collection.CANDIDATES,
        model=CandidateRecord,
        entity_label="Candidate",
        filters={
            "position": FieldFilter("position"),
            "stage": FieldFilter("stage"),
            "location": FieldFilter("location"),
            "experience": FieldFilter("experience"),
        },
        default_limit=50,
    ),
    Collection.APPLICATIONS: CollectionDescriptor(
        collection=Collection.APPLICATIONS,
        model=ApplicationRecord,
        entity_label="Application",
        filters={
            "job_id": _id_filter("job_id"),
            "candidate_id": _id_filter("candidate_id"),
            "stage": FieldFilter("stage"),
        },
        default_limit=20,
        default_sort=("applied_at", "desc"),
    ),
    Collection.ASSESSMENTS: CollectionDescriptor(
        collection=Collection.ASSESSMENTS,
        model=AssessmentRecord,
        entity_label="Assessment",
        filters={
            "job_id": _id_filter("job_id"),
        },
        default_limit=10,
    ),
    Collection.ASSESSMENT_RESPONSES: CollectionDescriptor(
        collection=Collection.ASSESSMENT_RESPONSES,
        model=AssessmentResponseRecord,
        entity_label="Assessment response",
        filters={
            "assessment_id": _id_filter("assessment_id"),
            "candidate_id": _id_filter("candidate_id"),
            "job_id": _id_filter("job_id"),
        },
        default_limit=20,
    ),
}


def get_descriptor(collection: Collection | str) -> CollectionDescriptor:
    """Look up the descriptor for a collection (enum member or name)."""
    return DESCRIPTORS[Collection(collection)]
