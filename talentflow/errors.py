"""Structured error helpers for API responses."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def build_error_payload(error: str, message: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": error}
    if message is not None:
        payload["message"] = message
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(self, status_code: int, error: str, message: Optional[str] = None):
        super().__init__(message or error)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.payload = build_error_payload(error, message)


class NotFoundError(AppError):
    """Raised when an identifier or slug resolves to no record."""

    def __init__(self, entity: str, token: Any = None):
        super().__init__(404, f"{entity} not found")
        self.entity = entity
        self.token = token


class SimulatedFailure(AppError):
    """Injected transient failure; the wrapped operation never ran."""

    def __init__(self, operation: str):
        super().__init__(500, "Network simulation error", "Simulated network failure")
        self.operation = operation


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=build_error_payload("Internal server error"))
