"""Entity store tests against a temporary SQLite database."""

from datetime import datetime, timezone

import pytest

from talentflow.repositories.collections import Collection
from talentflow.utils.slug import job_slug

pytestmark = pytest.mark.db


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(store):
    created = await store.create(Collection.JOBS, {"title": "Backend Engineer", "tags": ["Python"]})

    assert created["id"] == 1
    assert created["title"] == "Backend Engineer"
    assert created["tags"] == ["Python"]
    assert created["created_at"].tzinfo is not None
    assert created["updated_at"] == created["created_at"]


@pytest.mark.asyncio
async def test_get_round_trips_unknown_fields(store):
    created = await store.create(
        Collection.CANDIDATES,
        {"name": "Sarah Chen", "portfolio": {"github": "schen", "stars": 12}},
    )

    fetched = await store.get(Collection.CANDIDATES, created["id"])

    assert fetched["name"] == "Sarah Chen"
    assert fetched["portfolio"] == {"github": "schen", "stars": 12}


@pytest.mark.asyncio
async def test_caller_supplied_system_fields_are_ignored(store):
    created = await store.create(Collection.JOBS, {"id": 99, "title": "QA Engineer", "created_at": "1999-01-01"})

    assert created["id"] == 1
    assert created["created_at"].year != 1999


@pytest.mark.asyncio
async def test_ids_are_never_reused_after_delete(store):
    first = await store.create(Collection.JOBS, {"title": "A"})
    second = await store.create(Collection.JOBS, {"title": "B"})

    assert await store.delete(Collection.JOBS, second["id"]) is True
    third = await store.create(Collection.JOBS, {"title": "C"})

    assert (first["id"], second["id"], third["id"]) == (1, 2, 3)
    assert await store.get(Collection.JOBS, 2) is None


@pytest.mark.asyncio
async def test_collections_have_independent_sequences(store):
    await store.create(Collection.JOBS, {"title": "A"})
    await store.create(Collection.JOBS, {"title": "B"})

    candidate = await store.create(Collection.CANDIDATES, {"name": "Zoe Wang"})

    assert candidate["id"] == 1


@pytest.mark.asyncio
async def test_bulk_create_is_sequential_and_keeps_timestamps(store):
    seeded_at = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    records = [{"title": f"Job {i}", "created_at": seeded_at} for i in range(5)]

    created = await store.bulk_create(
        Collection.JOBS,
        records,
        finalize=lambda job_id, body: {**body, "slug": job_slug(body["title"], job_id)},
    )

    assert [record["id"] for record in created] == [1, 2, 3, 4, 5]
    assert created[2]["slug"] == "job-2-3"
    fetched = await store.get(Collection.JOBS, 4)
    assert fetched["created_at"] == seeded_at
    assert fetched["updated_at"] == seeded_at


@pytest.mark.asyncio
async def test_update_merges_shallowly(store):
    created = await store.create(Collection.JOBS, {"title": "A", "status": "draft", "tags": ["x"]})

    updated = await store.update(Collection.JOBS, created["id"], {"status": "active", "tags": ["y"]})

    assert updated["title"] == "A"
    assert updated["status"] == "active"
    assert updated["tags"] == ["y"]
    assert updated["updated_at"] >= created["updated_at"]
    assert updated["created_at"] == created["created_at"]


@pytest.mark.asyncio
async def test_update_and_delete_missing_record(store):
    assert await store.update(Collection.JOBS, 42, {"title": "nope"}) is None
    assert await store.delete(Collection.JOBS, 42) is False


@pytest.mark.asyncio
async def test_replace_drops_omitted_fields_except_kept_ones(store):
    created = await store.create(Collection.JOBS, {"title": "A", "slug": "a-1", "department": "HR"})

    replaced = await store.replace(Collection.JOBS, created["id"], {"title": "B"}, keep=("slug",))

    assert replaced["title"] == "B"
    assert replaced["slug"] == "a-1"
    assert "department" not in replaced


@pytest.mark.asyncio
async def test_returned_records_are_copies(store):
    created = await store.create(Collection.JOBS, {"title": "A", "tags": ["x"]})

    created["tags"].append("mutated")
    fetched = await store.get(Collection.JOBS, created["id"])
    fetched["title"] = "changed"

    again = await store.get(Collection.JOBS, created["id"])
    assert again["tags"] == ["x"]
    assert again["title"] == "A"


@pytest.mark.asyncio
async def test_filter_by_indexed_and_plain_fields(store):
    await store.create(Collection.APPLICATIONS, {"job_id": 1, "candidate_id": 10, "stage": "applied"})
    await store.create(Collection.APPLICATIONS, {"job_id": 2, "candidate_id": 10, "stage": "screen"})
    await store.create(Collection.APPLICATIONS, {"job_id": 1, "candidate_id": 11, "stage": "screen"})

    by_job = await store.filter_by(Collection.APPLICATIONS, "job_id", 1)
    by_stage = await store.filter_by(Collection.APPLICATIONS, "stage", "screen")

    assert [record["id"] for record in by_job] == [1, 3]
    assert [record["id"] for record in by_stage] == [2, 3]
    assert await store.filter_by(Collection.APPLICATIONS, "job_id", "not-a-number") == []


@pytest.mark.asyncio
async def test_all_and_count(store):
    for name in ("A", "B", "C"):
        await store.create(Collection.CANDIDATES, {"name": name})

    assert await store.count(Collection.CANDIDATES) == 3
    assert [record["name"] for record in await store.all(Collection.CANDIDATES)] == ["A", "B", "C"]
    assert await store.count(Collection.JOBS) == 0


@pytest.mark.asyncio
async def test_out_of_range_ids_match_nothing(store):
    await store.create(Collection.APPLICATIONS, {"job_id": 1})
    huge = 2**70

    assert await store.get(Collection.APPLICATIONS, huge) is None
    assert await store.update(Collection.APPLICATIONS, huge, {"stage": "hired"}) is None
    assert await store.replace(Collection.APPLICATIONS, huge, {"stage": "hired"}) is None
    assert await store.delete(Collection.APPLICATIONS, huge) is False
    assert await store.filter_by(Collection.APPLICATIONS, "job_id", huge) == []
