"""Liveness endpoints for external monitoring."""

import time
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from core.config import APP_TITLE, APP_VERSION
from schemas import HealthCheckResponse

router = APIRouter(tags=["health"])


@router.get("/health-check", response_model=HealthCheckResponse)
def health_check():
    """Report that the API process is up, with its version and current time."""
    return HealthCheckResponse(
        status="UP",
        message=f"{APP_TITLE} is running",
        version=APP_VERSION,
        timestamp=int(time.time() * 1000),
    )


@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"
