"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from llm_validation.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Service health with the backends the resolver can answer for."""
    backends = request.app.state.validator.resolver.names()

    return HealthResponse(
        status="healthy" if backends else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        backends=backends,
    )
