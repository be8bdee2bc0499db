"""Health check router."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from talentflow.core.dependencies import get_store
from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(store: EntityStore = Depends(get_store)):
    """Lightweight health endpoint with a store check. Not subject to simulated faults."""

    store_ok = False
    jobs = None
    try:
        jobs = await store.count(Collection.JOBS)
        store_ok = True
    except SQLAlchemyError:
        logger.warning("Health check could not reach the store", exc_info=True)

    return {
        "api_ok": True,
        "store_ok": store_ok,
        "jobs": jobs,
    }
