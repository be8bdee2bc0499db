"""Simulated latency and failure injection."""

import random

import pytest

from talentflow.core.config import Settings
from talentflow.errors import SimulatedFailure
from talentflow.repositories.collections import Collection
from talentflow.services.job_service import JobService
from talentflow.services.network import (
    REORDER_OPERATION,
    NetworkSimulator,
    NoFaultPolicy,
    RandomFaultPolicy,
    build_fault_policy,
)
from tests.conftest import AlwaysFailPolicy, RecordingPolicy


def test_random_policy_latency_stays_in_range():
    policy = RandomFaultPolicy(rng=random.Random(7))

    delays = [policy.latency_ms("jobs.list") for _ in range(500)]

    assert all(200 <= delay <= 1200 for delay in delays)


def test_reorder_uses_its_own_failure_rate():
    policy = RandomFaultPolicy.from_settings(Settings(), rng=random.Random(1))

    assert policy.failure_rate_for(REORDER_OPERATION) == pytest.approx(0.10)
    assert policy.failure_rate_for("jobs.list") == pytest.approx(0.075)


def test_reorder_failure_frequency_over_many_calls():
    policy = RandomFaultPolicy(
        min_latency_ms=0,
        max_latency_ms=0,
        failure_overrides={REORDER_OPERATION: 0.10},
        rng=random.Random(20240601),
    )

    failures = sum(policy.should_fail(REORDER_OPERATION) for _ in range(1000))

    assert 65 <= failures <= 135


def test_disabled_injection_builds_no_fault_policy():
    assert isinstance(build_fault_policy(Settings(FAULT_INJECTION_ENABLED=False)), NoFaultPolicy)
    assert isinstance(build_fault_policy(Settings(FAULT_INJECTION_ENABLED=True)), RandomFaultPolicy)


@pytest.mark.asyncio
async def test_run_returns_the_operation_result():
    simulator = NetworkSimulator(NoFaultPolicy())

    async def operation(value):
        return value * 2

    assert await simulator.run("jobs.get", operation, 21) == 42


@pytest.mark.asyncio
async def test_failed_operation_is_never_started():
    simulator = NetworkSimulator(AlwaysFailPolicy())
    calls = []

    async def operation():
        calls.append("ran")

    with pytest.raises(SimulatedFailure) as excinfo:
        await simulator.run("jobs.create", operation)

    assert calls == []
    assert excinfo.value.payload == {
        "error": "Network simulation error",
        "message": "Simulated network failure",
    }


@pytest.mark.db
@pytest.mark.asyncio
async def test_failed_create_leaves_no_record(store):
    service = JobService(store, NetworkSimulator(AlwaysFailPolicy()))

    with pytest.raises(SimulatedFailure):
        await service.create({"title": "Ghost Job"})

    assert await store.count(Collection.JOBS) == 0


@pytest.mark.db
@pytest.mark.asyncio
async def test_failed_reorder_leaves_order_untouched(store):
    job = await store.create(Collection.JOBS, {"title": "A", "order": 3})
    service = JobService(store, NetworkSimulator(AlwaysFailPolicy()))

    with pytest.raises(SimulatedFailure):
        await service.reorder(job["id"], 3, 0)

    assert (await store.get(Collection.JOBS, job["id"]))["order"] == 3


@pytest.mark.db
@pytest.mark.asyncio
async def test_operation_names_combine_resource_and_action(store):
    policy = RecordingPolicy()
    service = JobService(store, NetworkSimulator(policy))
    job = await service.create({"title": "A"})

    await service.reorder(job["id"], None, 2)
    await service.stats()

    assert policy.operations == ["jobs.create", "jobs.reorder", "jobs.stats"]
