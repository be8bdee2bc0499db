"""
Simulated network conditions.

Every service operation runs behind a ``NetworkSimulator``: it first waits a
random latency, then flips a coin. On failure the operation is never started,
so a failed call has no effect at all. The randomness lives in a
``FaultPolicy`` which tests replace with ``NoFaultPolicy``.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Protocol, TypeVar

from talentflow.core.config import Settings
from talentflow.errors import SimulatedFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

REORDER_OPERATION = "jobs.reorder"


class FaultPolicy(Protocol):
    """Decides how long an operation waits and whether it fails."""

    def latency_ms(self, operation: str) -> float:
        ...

    def should_fail(self, operation: str) -> bool:
        ...


@dataclass
class RandomFaultPolicy:
    """Uniform latency and a per-operation failure probability."""

    min_latency_ms: float = 200
    max_latency_ms: float = 1200
    failure_rate: float = 0.075
    failure_overrides: Mapping[str, float] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def from_settings(cls, settings: Settings, rng: random.Random | None = None) -> "RandomFaultPolicy":
        return cls(
            min_latency_ms=settings.FAULT_MIN_LATENCY_MS,
            max_latency_ms=settings.FAULT_MAX_LATENCY_MS,
            failure_rate=settings.FAULT_FAILURE_RATE,
            failure_overrides={REORDER_OPERATION: settings.REORDER_FAILURE_RATE},
            rng=rng or random.Random(),
        )

    def failure_rate_for(self, operation: str) -> float:
        return self.failure_overrides.get(operation, self.failure_rate)

    def latency_ms(self, operation: str) -> float:
        return self.rng.uniform(self.min_latency_ms, self.max_latency_ms)

    def should_fail(self, operation: str) -> bool:
        return self.rng.random() < self.failure_rate_for(operation)


class NoFaultPolicy:
    """Zero latency, never fails."""

    def latency_ms(self, operation: str) -> float:
        return 0.0

    def should_fail(self, operation: str) -> bool:
        return False


def build_fault_policy(settings: Settings) -> FaultPolicy:
    if not settings.FAULT_INJECTION_ENABLED:
        return NoFaultPolicy()
    return RandomFaultPolicy.from_settings(settings)


class NetworkSimulator:
    """Wraps operations with simulated latency and all-or-nothing failure."""

    def __init__(self, policy: FaultPolicy):
        self.policy = policy

    async def run(
        self,
        operation: str,
        func: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        delay_ms = self.policy.latency_ms(operation)
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

        if self.policy.should_fail(operation):
            logger.warning("Simulated network failure in %s after %.0fms", operation, delay_ms)
            raise SimulatedFailure(operation)

        return await func(*args, **kwargs)


def simulated(action: str):
    """
    Run a service method through ``self.network``.

    The operation name is ``"<self.resource>.<action>"``, e.g. ``jobs.reorder``.
    The decorated method's owner must expose ``network`` and ``resource``.
    """

    def decorator(method: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(method)
        async def wrapper(self, *args: Any, **kwargs: Any) -> T:
            operation = f"{self.resource}.{action}"
            return await self.network.run(operation, method, self, *args, **kwargs)

        return wrapper

    return decorator
