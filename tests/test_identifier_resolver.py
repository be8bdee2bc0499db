"""Identifier resolution: numeric ids everywhere, slugs for jobs only."""

import pytest

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection
from talentflow.services.identifier_resolver import IdentifierResolver, is_numeric_token
from talentflow.services.job_service import JobService

pytestmark = pytest.mark.db


def test_is_numeric_token():
    assert is_numeric_token(7)
    assert is_numeric_token("12")
    assert not is_numeric_token("12a")
    assert not is_numeric_token("senior-frontend-developer-1")
    assert not is_numeric_token(True)


@pytest.mark.asyncio
async def test_job_resolves_by_id_and_slug(store, network):
    job = await JobService(store, network).create({"title": "Senior Frontend Developer"})
    resolver = IdentifierResolver(store)

    assert job["slug"] == "senior-frontend-developer-1"
    assert (await resolver.resolve(Collection.JOBS, "1"))["id"] == job["id"]
    assert (await resolver.resolve(Collection.JOBS, "senior-frontend-developer-1"))["id"] == job["id"]


@pytest.mark.asyncio
async def test_candidate_tokens_must_be_numeric(store):
    await store.create(Collection.CANDIDATES, {"name": "Priya Patel"})
    resolver = IdentifierResolver(store)

    assert (await resolver.find(Collection.CANDIDATES, "1"))["name"] == "Priya Patel"
    assert await resolver.find(Collection.CANDIDATES, "priya-patel") is None


@pytest.mark.asyncio
async def test_unknown_token_raises_not_found(store):
    resolver = IdentifierResolver(store)

    with pytest.raises(NotFoundError) as excinfo:
        await resolver.resolve(Collection.JOBS, "no-such-job")

    assert excinfo.value.status_code == 404
    assert excinfo.value.payload == {"error": "Job not found"}


@pytest.mark.asyncio
async def test_token_beyond_storage_range_is_not_found(store):
    await store.create(Collection.JOBS, {"title": "A"})
    resolver = IdentifierResolver(store)

    assert await resolver.find(Collection.JOBS, "99999999999999999999999") is None
    with pytest.raises(NotFoundError):
        await resolver.resolve(Collection.JOBS, str(2**63))
