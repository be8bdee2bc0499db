"""Dashboard summary across all collections."""

from typing import Any

from talentflow.repositories.entity_store import EntityStore
from talentflow.services.network import NetworkSimulator, simulated
from talentflow.services.relations import RelationalHelper


class DashboardService:
    resource = "stats"

    def __init__(self, store: EntityStore, network: NetworkSimulator):
        self.store = store
        self.network = network

    @simulated("dashboard")
    async def summary(self) -> dict[str, Any]:
        return await RelationalHelper(self.store).dashboard_stats()
