"""
Assessment responses router - stored answers to assessments.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.assessment import (
    AssessmentResponseCreate,
    AssessmentResponseRead,
    AssessmentResponseUpdate,
)
from talentflow.schemas.common import Page, SuccessResponse
from talentflow.services.assessment_service import AssessmentResponseService
from talentflow.services.network import NetworkSimulator
from talentflow.services.query_engine import QueryParams

router = APIRouter(prefix="/assessment-responses", tags=["assessment-responses"])


@router.get("", response_model=Page[AssessmentResponseRead])
async def list_assessment_responses(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    assessment_id: Optional[str] = None,
    candidate_id: Optional[str] = None,
    job_id: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    service = AssessmentResponseService(store, network)
    params = QueryParams(
        filters={"assessment_id": assessment_id, "candidate_id": candidate_id, "job_id": job_id},
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return await service.list(params)


@router.post("", response_model=AssessmentResponseRead, status_code=status.HTTP_201_CREATED)
async def create_assessment_response(
    data: AssessmentResponseCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Store a response; completed_at is set to now."""
    return await AssessmentResponseService(store, network).create(data.model_dump())


@router.get("/{response_id}", response_model=AssessmentResponseRead)
async def get_assessment_response(
    response_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await AssessmentResponseService(store, network).get(response_id)


@router.put("/{response_id}", response_model=AssessmentResponseRead)
async def update_assessment_response(
    response_id: str,
    data: AssessmentResponseUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Merge the sent fields into a stored response."""
    body = data.model_dump(exclude_unset=True)
    return await AssessmentResponseService(store, network).update(response_id, body)


@router.delete("/{response_id}", response_model=SuccessResponse)
async def delete_assessment_response(
    response_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    await AssessmentResponseService(store, network).delete(response_id)
    return SuccessResponse()
