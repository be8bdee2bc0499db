"""Cross-collection helpers and the services built on them."""

import pytest

from talentflow.repositories.collections import Collection
from talentflow.services.assessment_service import AssessmentService
from talentflow.services.candidate_service import CandidateService
from talentflow.services.query_engine import QueryParams
from talentflow.services.relations import RelationalHelper, tally

pytestmark = pytest.mark.db


def test_tally_counts_known_and_unknown_values():
    records = [{"stage": "applied"}, {"stage": "hired"}, {"stage": "interview"}, {}]

    counts = tally(records, "stage", ["applied", "screen", "hired"])

    assert counts == {"total": 4, "applied": 1, "screen": 0, "hired": 1, "interview": 1}


@pytest.mark.asyncio
async def test_duplicate_assessment(store, network):
    service = AssessmentService(store, network)
    original = await service.create({
        "job_id": 1,
        "title": "Frontend Technical Assessment",
        "questions": [{"id": 1, "type": "text", "question": "Why React?"}],
    })

    copy = await service.duplicate(original["id"])

    assert copy["id"] != original["id"]
    assert copy["title"] == "Frontend Technical Assessment (Copy)"
    assert copy["questions"] == original["questions"]
    assert copy["job_id"] == 1
    assert (await store.get(Collection.ASSESSMENTS, original["id"]))["title"] == "Frontend Technical Assessment"


@pytest.mark.asyncio
async def test_upsert_for_job_creates_then_updates(store, network):
    service = AssessmentService(store, network)

    created = await service.upsert_for_job(4, {"title": "Ops Assessment", "job_id": 99})
    updated = await service.upsert_for_job(4, {"description": "Updated"})

    assert created["job_id"] == 4
    assert updated["id"] == created["id"]
    assert updated["title"] == "Ops Assessment"
    assert updated["description"] == "Updated"
    assert [a["id"] for a in await service.for_job(4)] == [created["id"]]


@pytest.mark.asyncio
async def test_submit_uses_the_jobs_assessment(store, network):
    service = AssessmentService(store, network)
    assessment = await service.create({"job_id": 6, "title": "PM Assessment"})

    response = await service.submit(6, {"candidate_id": 12, "responses": {"1": "RICE"}, "score": 80})

    assert response["assessment_id"] == assessment["id"]
    assert response["job_id"] == 6
    assert response["status"] == "submitted"
    assert response["completed_at"]

    stats = await service.stats()
    assert stats == {"total_assessments": 1, "total_responses": 1, "average_score": 80}


@pytest.mark.asyncio
async def test_candidates_scoped_to_a_job(store, network):
    for name in ("A", "B", "C"):
        await store.create(Collection.CANDIDATES, {"name": name})
    await store.create(Collection.APPLICATIONS, {"job_id": 1, "candidate_id": 1})
    await store.create(Collection.APPLICATIONS, {"job_id": 1, "candidate_id": 3})
    await store.create(Collection.APPLICATIONS, {"job_id": 2, "candidate_id": 2})

    result = await CandidateService(store, network).list(QueryParams(sort_by="name"), job_id=1)

    assert [candidate["name"] for candidate in result["data"]] == ["A", "C"]
    assert result["pagination"]["total"] == 2


@pytest.mark.asyncio
async def test_dashboard_stats(store):
    await store.create(Collection.JOBS, {"title": "A", "status": "active"})
    await store.create(Collection.JOBS, {"title": "B", "status": "draft"})
    for stage in ("hired", "applied", "applied", "screen"):
        await store.create(Collection.CANDIDATES, {"stage": stage})

    stats = await RelationalHelper(store).dashboard_stats()

    assert stats == {
        "active_jobs": 1,
        "total_jobs": 2,
        "total_candidates": 4,
        "total_applications": 0,
        "total_assessments": 0,
        "hire_rate": 25.0,
    }


@pytest.mark.asyncio
async def test_candidate_timeline_merges_history_and_applications(store, network):
    service = CandidateService(store, network)
    job = await store.create(Collection.JOBS, {"title": "QA Engineer"})
    candidate = await service.create({"name": "Ethan Davis"})
    await store.create(Collection.APPLICATIONS, {
        "job_id": job["id"],
        "candidate_id": candidate["id"],
        "applied_at": "2020-01-01T00:00:00+00:00",
    })
    await service.update_stage(candidate["id"], "screen")

    events = await service.timeline(candidate["id"])

    assert [event["type"] for event in events] == ["application_submitted", "stage_change", "stage_change"]
    assert events[0]["description"] == "Applied to QA Engineer"
    assert events[-1]["stage"] == "screen"
