"""
Application business logic service.
"""

from typing import Any, Optional

from talentflow.repositories.collections import Collection
from talentflow.schemas.common import Stage
from talentflow.services.network import simulated
from talentflow.services.record_service import Record, RecordService
from talentflow.services.relations import RelationalHelper
from talentflow.services.stage_history import StageHistoryRecorder, initial_history
from talentflow.utils.time import utc_now


class ApplicationService(RecordService):
    """Service for application business logic."""

    collection = Collection.APPLICATIONS
    resource = "applications"
    protected_fields = ("stage_history",)

    def prepare_create(self, data: Record) -> Record:
        data["stage"] = data.get("stage") or Stage.APPLIED.value
        data["applied_at"] = utc_now()
        data["stage_history"] = initial_history(data, notes="Application submitted")
        return data

    @simulated("stats")
    async def stats(self) -> dict[str, int]:
        return await RelationalHelper(self.store).stage_stats(self.collection)

    @simulated("update_stage")
    async def update_stage(self, token: Any, stage: Stage | str, notes: Optional[str] = None) -> Record:
        """Move an application to ``stage`` and append the transition to its history."""
        application = await self.resolver.resolve(self.collection, token)
        return await StageHistoryRecorder(self.store).record(self.collection, application["id"], stage, notes)
