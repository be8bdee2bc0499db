"""
Candidates router - API endpoints for candidates.

Candidates are addressed by numeric id only.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.candidate import (
    CandidateBulkResponse,
    CandidateBulkUpdate,
    CandidateCreate,
    CandidateNote,
    CandidateNoteCreate,
    CandidateRead,
    CandidateUpdate,
    TimelineEvent,
)
from talentflow.schemas.common import Page, StageUpdate, SuccessResponse
from talentflow.schemas.stats import StageStats
from talentflow.services.candidate_service import CandidateService
from talentflow.services.network import NetworkSimulator
from talentflow.services.query_engine import QueryParams

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=Page[CandidateRead])
async def list_candidates(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    search: Optional[str] = None,
    position: Optional[str] = None,
    stage: Optional[str] = None,
    location: Optional[str] = None,
    experience: Optional[str] = None,
    job_id: Optional[int] = Query(None, alias="jobId"),
    sort_by: Optional[str] = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """
    List candidates with pagination, search and filters.

    With jobId only candidates who applied to that job are considered.
    """
    service = CandidateService(store, network)
    params = QueryParams(
        search=search,
        filters={"position": position, "stage": stage, "location": location, "experience": experience},
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return await service.list(params, job_id=job_id)


@router.get("/stats", response_model=StageStats)
async def candidate_stats(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await CandidateService(store, network).stats()


@router.get("/positions", response_model=List[str])
async def list_positions(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await CandidateService(store, network).positions()


@router.get("/locations", response_model=List[str])
async def list_locations(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await CandidateService(store, network).locations()


@router.get("/by-stage", response_model=Dict[str, List[CandidateRead]])
async def candidates_by_stage(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Candidates grouped under every canonical stage (empty lists included)."""
    return await CandidateService(store, network).by_stage()


@router.put("/bulk", response_model=CandidateBulkResponse)
async def bulk_update_candidates(
    request: CandidateBulkUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Apply partial updates to several candidates. Unknown ids are skipped."""
    updates = [item.model_dump(exclude_unset=True) for item in request.updates]
    updated = await CandidateService(store, network).bulk_update(updates)
    return CandidateBulkResponse(updated=updated)


@router.post("", response_model=CandidateRead, status_code=status.HTTP_201_CREATED)
async def create_candidate(
    data: CandidateCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Create a candidate. History starts with a single entry for the initial stage."""
    return await CandidateService(store, network).create(data.model_dump())


@router.get("/{candidate_id}", response_model=CandidateRead)
async def get_candidate(
    candidate_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await CandidateService(store, network).get(candidate_id)


@router.put("/{candidate_id}", response_model=CandidateRead)
async def replace_candidate(
    candidate_id: str,
    data: CandidateCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Replace a candidate's fields. Stage history and notes are kept."""
    return await CandidateService(store, network).replace(candidate_id, data.model_dump(exclude_unset=True))


@router.patch("/{candidate_id}", response_model=CandidateRead)
async def update_candidate(
    candidate_id: str,
    data: CandidateUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Merge the sent fields into a candidate. A stage sent here is not recorded in history."""
    return await CandidateService(store, network).update(candidate_id, data.model_dump(exclude_unset=True))


@router.delete("/{candidate_id}", response_model=SuccessResponse)
async def delete_candidate(
    candidate_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    await CandidateService(store, network).delete(candidate_id)
    return SuccessResponse()


@router.put("/{candidate_id}/stage", response_model=CandidateRead)
async def update_candidate_stage(
    candidate_id: str,
    request: StageUpdate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Move a candidate to a new stage and append the move to its history."""
    return await CandidateService(store, network).update_stage(candidate_id, request.stage, request.notes)


@router.get("/{candidate_id}/notes", response_model=List[CandidateNote])
async def list_candidate_notes(
    candidate_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Notes newest first."""
    return await CandidateService(store, network).list_notes(candidate_id)


@router.post("/{candidate_id}/notes", response_model=CandidateNote, status_code=status.HTTP_201_CREATED)
async def add_candidate_note(
    candidate_id: str,
    request: CandidateNoteCreate,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    return await CandidateService(store, network).add_note(candidate_id, request.content, request.author)


@router.get("/{candidate_id}/timeline", response_model=List[TimelineEvent])
async def candidate_timeline(
    candidate_id: str,
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Stage changes and submitted applications, oldest first."""
    return await CandidateService(store, network).timeline(candidate_id)
