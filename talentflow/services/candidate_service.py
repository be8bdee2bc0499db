"""
Candidate business logic service.
"""

import logging
from typing import Any, Iterable, List, Optional

from talentflow.repositories.collections import Collection
from talentflow.schemas.common import Stage
from talentflow.services.network import simulated
from talentflow.services.record_service import Record, RecordService
from talentflow.services.relations import RelationalHelper
from talentflow.services.stage_history import StageHistoryRecorder, initial_history
from talentflow.utils.time import utc_now_iso

logger = logging.getLogger(__name__)

DEFAULT_NOTE_AUTHOR = "Current User"


class CandidateService(RecordService):
    """Service for candidate business logic."""

    collection = Collection.CANDIDATES
    resource = "candidates"
    protected_fields = ("stage_history", "notes_log")

    @property
    def relations(self) -> RelationalHelper:
        return RelationalHelper(self.store)

    def prepare_create(self, data: Record) -> Record:
        data["stage"] = data.get("stage") or Stage.APPLIED.value
        data["stage_history"] = initial_history(data)
        return data

    async def source_records(self, job_id: Optional[int] = None, **scope: Any) -> Iterable[Record]:
        if job_id is not None:
            return await self.relations.candidates_for_job(job_id)
        return await self.store.all(self.collection)

    @simulated("stats")
    async def stats(self) -> dict[str, int]:
        return await self.relations.stage_stats(self.collection)

    @simulated("positions")
    async def positions(self) -> List[str]:
        return await self.relations.distinct_values(self.collection, "position")

    @simulated("locations")
    async def locations(self) -> List[str]:
        return await self.relations.distinct_values(self.collection, "location")

    @simulated("by_stage")
    async def by_stage(self) -> dict[str, List[Record]]:
        return await self.relations.candidates_by_stage()

    @simulated("update_stage")
    async def update_stage(self, token: Any, stage: Stage | str, notes: Optional[str] = None) -> Record:
        """Move a candidate to ``stage`` and append the transition to its history."""
        candidate = await self.resolver.resolve(self.collection, token)
        return await StageHistoryRecorder(self.store).record(self.collection, candidate["id"], stage, notes)

    @simulated("bulk_update")
    async def bulk_update(self, updates: Iterable[Record]) -> int:
        """Apply generic patches keyed by ``id``. Missing candidates are skipped."""
        updated = 0
        for update in updates:
            patch = self.writable({key: value for key, value in update.items() if key != "id"})
            if await self.store.update(self.collection, update["id"], patch) is not None:
                updated += 1
        logger.info("Bulk updated %d candidates", updated)
        return updated

    @simulated("notes")
    async def list_notes(self, token: Any) -> List[Record]:
        candidate = await self.resolver.resolve(self.collection, token)
        return list(candidate.get("notes_log") or [])

    @simulated("add_note")
    async def add_note(self, token: Any, content: str, author: Optional[str] = None) -> Record:
        """Prepend a note to the candidate's note log."""
        candidate = await self.resolver.resolve(self.collection, token)
        notes = list(candidate.get("notes_log") or [])
        note = {
            "id": max((existing.get("id", 0) for existing in notes), default=0) + 1,
            "candidate_id": candidate["id"],
            "content": content,
            "author": author or DEFAULT_NOTE_AUTHOR,
            "created_at": utc_now_iso(),
        }
        updated = await self.store.update(self.collection, candidate["id"], {"notes_log": [note, *notes]})
        if updated is None:
            raise self.not_found(token)
        return note

    @simulated("timeline")
    async def timeline(self, token: Any) -> List[Record]:
        candidate = await self.resolver.resolve(self.collection, token)
        return await self.relations.candidate_timeline(candidate)
