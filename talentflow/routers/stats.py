"""
Dashboard stats router.
"""

from fastapi import APIRouter, Depends

from talentflow.core.dependencies import get_network, get_store
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.stats import DashboardStats
from talentflow.services.dashboard_service import DashboardService
from talentflow.services.network import NetworkSimulator

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    store: EntityStore = Depends(get_store),
    network: NetworkSimulator = Depends(get_network),
):
    """Headline numbers across jobs, candidates, applications and assessments."""
    return await DashboardService(store, network).summary()
