"""
Job business logic service.
"""

import logging
from typing import Any, List, Optional, Sequence

from talentflow.repositories.collections import Collection
from talentflow.services.network import simulated
from talentflow.services.record_service import Record, RecordService
from talentflow.services.relations import RelationalHelper
from talentflow.utils.slug import job_slug

logger = logging.getLogger(__name__)


class JobService(RecordService):
    """Service for job business logic."""

    collection = Collection.JOBS
    resource = "jobs"
    replace_keeps = ("slug",)

    def finalize_create(self, record_id: int, body: Record) -> Record:
        return {**body, "slug": job_slug(body.get("title", ""), record_id)}

    @simulated("stats")
    async def stats(self) -> dict[str, int]:
        return await RelationalHelper(self.store).job_stats()

    @simulated("departments")
    async def departments(self) -> List[str]:
        return await RelationalHelper(self.store).distinct_values(Collection.JOBS, "department")

    @simulated("reorder")
    async def reorder(self, token: Any, from_order: Optional[int], to_order: int) -> dict[str, Any]:
        """Give one job a new manual rank. Runs at the higher reorder failure rate."""
        job = await self.resolver.resolve(self.collection, token)
        await self.store.update(self.collection, job["id"], {"order": to_order})
        logger.info("Job %s reordered %s -> %s", job["id"], from_order, to_order)
        return {"success": True, "from_order": from_order, "to_order": to_order}

    @simulated("bulk_reorder")
    async def bulk_reorder(self, job_ids: Sequence[int]) -> int:
        """Rank jobs by their position in ``job_ids``. Unknown ids are skipped."""
        updated = 0
        for index, job_id in enumerate(job_ids):
            if await self.store.update(self.collection, job_id, {"order": index}) is not None:
                updated += 1
        return updated
