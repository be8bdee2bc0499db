"""
Assessments router - API endpoints for assessments.

Two addressing schemes share the prefix: /by-id/{assessment_id} works on a
single assessment, /{job_id} works on the assessment attached to a job.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.assessment import (
    AssessmentCreate,
    AssessmentRead,
    AssessmentResponseRead,
    AssessmentSubmission,
    AssessmentUpdate,
)
from talentflow.schemas.common import Page, SuccessResponse
from talentflow.schemas.stats import AssessmentStats
from talentflow.services.assessment_service import AssessmentService
from talentflow.services.network import NetworkSimulator
from talentflow.services.query_engine import QueryParams

router = APIRouter(prefix="/assessments", tags=["assessments"])


@router.get("", response_model=Page[AssessmentRead])
async def list_assessments(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    search: Optional[str] = None,
    job_id: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    service = AssessmentService(store, network)
    params = QueryParams(
        search=search,
        filters={"job_id": job_id},
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return await service.list(params)


@router.post("", response_model=AssessmentRead, status_code=status.HTTP_201_CREATED)
async def create_assessment(
    data: AssessmentCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await AssessmentService(store, network).create(data.model_dump())


@router.get("/stats", response_model=AssessmentStats)
async def assessment_stats(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Assessment and response counts with the average response score."""
    return await AssessmentService(store, network).stats()


@router.get("/by-id/{assessment_id}", response_model=AssessmentRead)
async def get_assessment(
    assessment_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await AssessmentService(store, network).get(assessment_id)


@router.patch("/by-id/{assessment_id}", response_model=AssessmentRead)
async def update_assessment(
    assessment_id: str,
    data: AssessmentUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await AssessmentService(store, network).update(assessment_id, data.model_dump(exclude_unset=True))


@router.delete("/by-id/{assessment_id}", response_model=SuccessResponse)
async def delete_assessment(
    assessment_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    await AssessmentService(store, network).delete(assessment_id)
    return SuccessResponse()


@router.post(
    "/by-id/{assessment_id}/duplicate",
    response_model=AssessmentRead,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_assessment(
    assessment_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Copy an assessment under a new id; the title gets a " (Copy)" suffix."""
    return await AssessmentService(store, network).duplicate(assessment_id)


@router.get("/{job_id}", response_model=List[AssessmentRead])
async def get_job_assessments(
    job_id: int,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """All assessments attached to a job (an empty list when there are none)."""
    return await AssessmentService(store, network).for_job(job_id)


@router.put("/{job_id}", response_model=AssessmentRead)
async def upsert_job_assessment(
    job_id: int,
    data: AssessmentUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Update the job's assessment, creating it when the job has none."""
    body = data.model_dump(exclude_unset=True)
    return await AssessmentService(store, network).upsert_for_job(job_id, body)


@router.post(
    "/{job_id}/submit",
    response_model=AssessmentResponseRead,
    status_code=status.HTTP_201_CREATED,
)
async def submit_job_assessment(
    job_id: int,
    submission: AssessmentSubmission,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Store a candidate's answers for the job's assessment."""
    return await AssessmentService(store, network).submit(job_id, submission.model_dump(exclude_unset=True))
