"""
Main FastAPI application.

This is the entry point for the API server:

    uvicorn talentflow.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from talentflow.core.config import Settings, settings as default_settings
from talentflow.db.seed import seed_database
from talentflow.db.session import build_engine, build_session_maker, init_db
from talentflow.errors import AppError, app_error_handler, unhandled_error_handler
from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import EntityStore
from talentflow.routers import (
    applications,
    assessment_responses,
    assessments,
    candidates,
    health,
    jobs,
    stats,
)
from talentflow.services.network import FaultPolicy, NetworkSimulator, build_fault_policy

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, fault_policy: Optional[FaultPolicy] = None) -> FastAPI:
    """
    Build the application.

    ``fault_policy`` overrides the policy derived from settings; tests pass a
    policy without latency or failures.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup: create tables, build the store and network simulator, seed.
        Shutdown: dispose of the engine.
        """
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        logger.info("Starting %s...", settings.APP_NAME)

        engine = build_engine(settings)
        await init_db(engine, [collection.value for collection in Collection])

        app.state.store = EntityStore(build_session_maker(engine))
        app.state.network = NetworkSimulator(fault_policy or build_fault_policy(settings))

        if settings.SEED_ON_STARTUP:
            await seed_database(app.state.store, seed=settings.SEED_RANDOM_SEED)

        yield

        logger.info("Shutting down %s...", settings.APP_NAME)
        await engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Simulated backend for a hiring pipeline: jobs, candidates, applications and assessments",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers (API endpoints)
    app.include_router(health.router, tags=["Health"])
    app.include_router(stats.router)
    app.include_router(jobs.router)
    app.include_router(candidates.router)
    app.include_router(applications.router)
    app.include_router(assessments.router)
    app.include_router(assessment_responses.router)

    @app.get("/")
    async def root():
        """Root endpoint - basic API info."""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
