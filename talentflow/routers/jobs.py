"""
Jobs router - API endpoints for jobs.

Single-job endpoints accept either the numeric id or the job's slug.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.common import Page, SuccessResponse
from talentflow.schemas.job import (
    JobBulkReorderRequest,
    JobCreate,
    JobRead,
    JobReorderRequest,
    JobReorderResponse,
    JobUpdate,
)
from talentflow.schemas.stats import JobStats
from talentflow.services.job_service import JobService
from talentflow.services.network import NetworkSimulator
from talentflow.services.query_engine import QueryParams

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=Page[JobRead])
async def list_jobs(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    search: Optional[str] = None,
    department: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    sort_by: Optional[str] = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """
    List jobs with pagination, search and filters.

    Filters: department, status ("all" means no filter).
    Without sort_by, jobs with a manual order come first, then newest first.
    """
    service = JobService(store, network)
    params = QueryParams(
        search=search,
        filters={"department": department, "status": status_filter},
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return await service.list(params)


@router.get("/stats", response_model=JobStats)
async def job_stats(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Job counts per status, plus jobs created in the last 7 days."""
    return await JobService(store, network).stats()


@router.get("/departments", response_model=List[str])
async def list_departments(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await JobService(store, network).departments()


@router.post("/reorder", response_model=SuccessResponse)
async def bulk_reorder_jobs(
    request: JobBulkReorderRequest,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Set every listed job's order to its position in the list."""
    await JobService(store, network).bulk_reorder([job.id for job in request.jobs])
    return SuccessResponse()


@router.get("/{id_or_slug}", response_model=JobRead)
async def get_job(
    id_or_slug: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Get a job by id or slug."""
    return await JobService(store, network).get(id_or_slug)


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Create a new job. The slug is derived from the title and the new id."""
    return await JobService(store, network).create(data.model_dump())


@router.put("/{id_or_slug}", response_model=JobRead)
async def replace_job(
    id_or_slug: str,
    data: JobCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Replace a job's fields. The slug is kept unless a new one is sent."""
    return await JobService(store, network).replace(id_or_slug, data.model_dump(exclude_unset=True))


@router.patch("/{id_or_slug}", response_model=JobRead)
async def update_job(
    id_or_slug: str,
    data: JobUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Merge the sent fields into a job."""
    return await JobService(store, network).update(id_or_slug, data.model_dump(exclude_unset=True))


@router.delete("/{id_or_slug}", response_model=SuccessResponse)
async def delete_job(
    id_or_slug: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Delete a job. Its applications and assessments are left in place."""
    await JobService(store, network).delete(id_or_slug)
    return SuccessResponse()


@router.patch("/{id_or_slug}/reorder", response_model=JobReorderResponse)
async def reorder_job(
    id_or_slug: str,
    request: JobReorderRequest,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """
    Move a job to a new manual rank.

    Fails more often than other endpoints so callers exercise their rollback.
    """
    return await JobService(store, network).reorder(id_or_slug, request.from_order, request.to_order)
