"""
Assessment and assessment response business logic.
"""

from typing import Any, List

from talentflow.repositories.collections import Collection
from talentflow.services.network import simulated
from talentflow.services.record_service import Record, RecordService
from talentflow.services.relations import RelationalHelper
from talentflow.utils.time import utc_now


class AssessmentService(RecordService):
    """Service for assessments, including the job-scoped operations."""

    collection = Collection.ASSESSMENTS
    resource = "assessments"

    @property
    def relations(self) -> RelationalHelper:
        return RelationalHelper(self.store)

    @simulated("stats")
    async def stats(self) -> dict[str, Any]:
        return await self.relations.assessment_stats()

    @simulated("duplicate")
    async def duplicate(self, token: Any) -> Record:
        assessment = await self.resolver.resolve(self.collection, token)
        return await self.relations.duplicate_assessment(assessment["id"])

    @simulated("for_job")
    async def for_job(self, job_id: int) -> List[Record]:
        return await self.relations.assessments_for_job(job_id)

    @simulated("upsert_for_job")
    async def upsert_for_job(self, job_id: int, data: Record) -> Record:
        return await self.relations.upsert_assessment_for_job(job_id, data)

    @simulated("submit")
    async def submit(self, job_id: int, submission: Record) -> Record:
        return await self.relations.submit_for_job(job_id, submission)


class AssessmentResponseService(RecordService):
    """Service for stored assessment responses."""

    collection = Collection.ASSESSMENT_RESPONSES
    resource = "assessment_responses"

    def prepare_create(self, data: Record) -> Record:
        data["completed_at"] = utc_now()
        return data
