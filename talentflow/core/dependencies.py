"""
FastAPI dependencies for the application.

The store and the network simulator are built once in the application
lifespan and kept on ``app.state``; endpoints receive them from here.
"""

from fastapi import Request

from talentflow.repositories.entity_store import EntityStore
from talentflow.services.network import NetworkSimulator


def get_store(request: Request) -> EntityStore:
    """Dependency to get the shared entity store."""
    return request.app.state.store


def get_network(request: Request) -> NetworkSimulator:
    """Dependency to get the shared network simulator."""
    return request.app.state.network
