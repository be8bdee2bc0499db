"""
Cross-collection helpers: joins, tallies, duplication and upsert-by-parent.

Relationships between collections are plain integer fields. Nothing here
checks that a referenced job, candidate or assessment exists, and deleting a
parent leaves its children in place.
"""

import logging
from datetime import timedelta
from typing import Any, Iterable, List, Optional

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import SYSTEM_FIELDS, EntityStore
from talentflow.schemas.common import JOB_STATUSES, STAGES
from talentflow.utils.time import parse_datetime, utc_now

logger = logging.getLogger(__name__)

Record = dict[str, Any]

COPY_SUFFIX = " (Copy)"
RECENT_WINDOW = timedelta(days=7)


def tally(records: Iterable[Record], field_name: str, keys: Iterable[str] = ()) -> dict[str, int]:
    """
    Count records per value of ``field_name`` in one pass.

    ``keys`` are always present (possibly zero); other observed values are
    added as they appear. ``total`` counts every record scanned.
    """
    counts = {key: 0 for key in keys}
    total = 0
    for record in records:
        total += 1
        value = record.get(field_name)
        if value is None:
            continue
        counts[str(value)] = counts.get(str(value), 0) + 1
    return {"total": total, **counts}


def _ids(values: Iterable[Any]) -> set[int]:
    ids = set()
    for value in values:
        try:
            ids.add(int(value))
        except (TypeError, ValueError):
            continue
    return ids


class RelationalHelper:
    """Joins and aggregates over the entity store."""

    def __init__(self, store: EntityStore):
        self.store = store

    # Scoped listing

    async def candidate_ids_for_job(self, job_id: int) -> set[int]:
        applications = await self.store.filter_by(Collection.APPLICATIONS, "job_id", job_id)
        return _ids(application.get("candidate_id") for application in applications)

    async def candidates_for_job(self, job_id: int) -> List[Record]:
        """Candidates that have at least one application for ``job_id``."""
        candidate_ids = await self.candidate_ids_for_job(job_id)
        candidates = await self.store.all(Collection.CANDIDATES)
        return [candidate for candidate in candidates if candidate["id"] in candidate_ids]

    # Aggregates

    async def job_stats(self) -> dict[str, int]:
        jobs = await self.store.all(Collection.JOBS)
        stats = tally(jobs, "status", JOB_STATUSES)
        cutoff = utc_now() - RECENT_WINDOW
        stats["recent"] = sum(1 for job in jobs if (parse_datetime(job.get("created_at")) or cutoff) > cutoff)
        return stats

    async def stage_stats(self, collection: Collection) -> dict[str, int]:
        """Stage counts for candidates or applications."""
        return tally(await self.store.all(collection), "stage", STAGES)

    async def candidates_by_stage(self) -> dict[str, List[Record]]:
        """Candidates grouped per stage, for the pipeline board."""
        grouped: dict[str, List[Record]] = {stage: [] for stage in STAGES}
        for candidate in await self.store.all(Collection.CANDIDATES):
            stage = candidate.get("stage")
            if stage is None:
                continue
            grouped.setdefault(str(stage), []).append(candidate)
        return grouped

    async def distinct_values(self, collection: Collection, field_name: str) -> List[str]:
        """Sorted distinct non-empty values of a field (filter dropdowns)."""
        values = {record.get(field_name) for record in await self.store.all(collection)}
        return sorted(str(value) for value in values if value not in (None, ""))

    async def assessment_stats(self) -> dict[str, Any]:
        total_assessments = await self.store.count(Collection.ASSESSMENTS)
        responses = await self.store.all(Collection.ASSESSMENT_RESPONSES)
        scores = [
            response["score"]
            for response in responses
            if isinstance(response.get("score"), (int, float)) and not isinstance(response.get("score"), bool)
        ]
        return {
            "total_assessments": total_assessments,
            "total_responses": len(responses),
            "average_score": round(sum(scores) / len(scores), 2) if scores else None,
        }

    async def dashboard_stats(self) -> dict[str, Any]:
        jobs = await self.store.all(Collection.JOBS)
        candidates = await self.store.all(Collection.CANDIDATES)
        hired = sum(1 for candidate in candidates if candidate.get("stage") == "hired")
        return {
            "active_jobs": sum(1 for job in jobs if job.get("status") == "active"),
            "total_jobs": len(jobs),
            "total_candidates": len(candidates),
            "total_applications": await self.store.count(Collection.APPLICATIONS),
            "total_assessments": await self.store.count(Collection.ASSESSMENTS),
            "hire_rate": round(hired / len(candidates) * 100, 1) if candidates else 0.0,
        }

    async def candidate_timeline(self, candidate: Record) -> List[Record]:
        """Stage transitions and applications of one candidate, oldest first."""
        events: List[Record] = []
        for entry in candidate.get("stage_history") or []:
            when = parse_datetime(entry.get("date"))
            if when is None:
                continue
            events.append({
                "type": "stage_change",
                "title": f"Moved to {entry.get('stage')}",
                "description": entry.get("notes") or "",
                "timestamp": when,
                "stage": entry.get("stage"),
            })

        applications = await self.store.filter_by(Collection.APPLICATIONS, "candidate_id", candidate["id"])
        for application in applications:
            when = parse_datetime(application.get("applied_at")) or application["created_at"]
            job = None
            if application.get("job_id") is not None:
                job = await self.store.get(Collection.JOBS, application["job_id"])
            job_title = (job or {}).get("title") or f"job {application.get('job_id')}"
            events.append({
                "type": "application_submitted",
                "title": "Application Submitted",
                "description": f"Applied to {job_title}",
                "timestamp": when,
                "stage": application.get("stage"),
                "job_id": application.get("job_id"),
                "application_id": application["id"],
            })

        events.sort(key=lambda event: event["timestamp"])
        return events

    # Assessments

    async def duplicate_assessment(self, assessment_id: int) -> Record:
        """Copy an assessment under a new id with " (Copy)" appended to its title."""
        original = await self.store.get(Collection.ASSESSMENTS, assessment_id)
        if original is None:
            raise NotFoundError("Assessment", assessment_id)
        duplicate = {key: value for key, value in original.items() if key not in SYSTEM_FIELDS}
        duplicate["title"] = f"{original.get('title') or ''}{COPY_SUFFIX}"
        created = await self.store.create(Collection.ASSESSMENTS, duplicate)
        logger.info("Duplicated assessment %s as %s", assessment_id, created["id"])
        return created

    async def assessments_for_job(self, job_id: int) -> List[Record]:
        return await self.store.filter_by(Collection.ASSESSMENTS, "job_id", job_id)

    async def upsert_assessment_for_job(self, job_id: int, data: Record) -> Record:
        """
        Merge into the job's assessment, or create one if it has none.

        Only this path keeps one assessment per job; a plain create can still
        add a second one.
        """
        body = {**data, "job_id": job_id}
        existing = await self.store.find_first(Collection.ASSESSMENTS, "job_id", job_id)
        if existing is not None:
            updated = await self.store.update(Collection.ASSESSMENTS, existing["id"], body)
            if updated is not None:
                return updated
        return await self.store.create(Collection.ASSESSMENTS, body)

    async def submit_for_job(self, job_id: int, submission: Record) -> Record:
        """Store a submission; without an assessment_id the job's assessment is used."""
        assessment_id: Optional[int] = submission.get("assessment_id")
        if assessment_id is None:
            assessment = await self.store.find_first(Collection.ASSESSMENTS, "job_id", job_id)
            assessment_id = assessment["id"] if assessment else None
        response = {
            **submission,
            "job_id": job_id,
            "assessment_id": assessment_id,
            "score": submission.get("score"),
            "completed_at": utc_now(),
            "status": "submitted",
        }
        return await self.store.create(Collection.ASSESSMENT_RESPONSES, response)
