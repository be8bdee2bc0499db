"""
Applications router - API endpoints for job applications.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.application import ApplicationCreate, ApplicationRead, ApplicationUpdate
from talentflow.schemas.common import Page, StageUpdate, SuccessResponse
from talentflow.schemas.stats import StageStats
from talentflow.services.application_service import ApplicationService
from talentflow.services.network import NetworkSimulator
from talentflow.services.query_engine import QueryParams

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=Page[ApplicationRead])
async def list_applications(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    search: Optional[str] = None,
    job_id: Optional[str] = None,
    candidate_id: Optional[str] = None,
    stage: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """
    List applications, newest first unless another sort is requested.

    Filters: job_id, candidate_id, stage.
    """
    service = ApplicationService(store, network)
    params = QueryParams(
        search=search,
        filters={"job_id": job_id, "candidate_id": candidate_id, "stage": stage},
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return await service.list(params)


@router.get("/stats", response_model=StageStats)
async def application_stats(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await ApplicationService(store, network).stats()


@router.post("", response_model=ApplicationRead, status_code=status.HTTP_201_CREATED)
async def create_application(
    data: ApplicationCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Create an application; applied_at is set to now."""
    return await ApplicationService(store, network).create(data.model_dump())


@router.get("/{application_id}", response_model=ApplicationRead)
async def get_application(
    application_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await ApplicationService(store, network).get(application_id)


@router.put("/{application_id}", response_model=ApplicationRead)
async def replace_application(
    application_id: str,
    data: ApplicationCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await ApplicationService(store, network).replace(application_id, data.model_dump(exclude_unset=True))


@router.patch("/{application_id}", response_model=ApplicationRead)
async def update_application(
    application_id: str,
    data: ApplicationUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await ApplicationService(store, network).update(application_id, data.model_dump(exclude_unset=True))


@router.delete("/{application_id}", response_model=SuccessResponse)
async def delete_application(
    application_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    await ApplicationService(store, network).delete(application_id)
    return SuccessResponse()


@router.put("/{application_id}/stage", response_model=ApplicationRead)
async def update_application_stage(
    application_id: str,
    request: StageUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Move an application to a new stage and append the move to its history."""
    return await ApplicationService(store, network).update_stage(application_id, request.stage, request.notes)
