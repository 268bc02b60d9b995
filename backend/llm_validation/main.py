"""LLM Validation service.

FastAPI application with lifespan management, structured logging, and error
handlers that map pipeline errors to HTTP responses.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from llm_validation.api.router import api_router
from llm_validation.builder import build_validator_from_settings
from llm_validation.config import get_settings
from llm_validation.core.errors import BackendResolutionError, InvalidRequestError, MalformedResponseError
from llm_validation.core.validator import LLMValidator


def configure_logging(debug: bool = False, level: str = "info") -> None:
    """Configure structlog once for the process."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
    )


configure_logging(get_settings().DEBUG, get_settings().LOG_LEVEL)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    if getattr(app.state, "validator", None) is None:
        app.state.validator = build_validator_from_settings(settings)

    logger.info("app_started", backends=app.state.validator.resolver.names())

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


def create_app(validator: Optional[LLMValidator] = None) -> FastAPI:
    """Create the application. A prebuilt validator skips settings-based wiring."""
    app = FastAPI(
        title="LLM Validation",
        description=(
            "Validate text against natural-language rules. "
            "A chat model answers each rule with a structured pass/fail verdict."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.validator = validator

    # ── Exception Handlers ──

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all error handler for unhandled exceptions (backend transport failures included)."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle invalid input, including empty validation prompts."""
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "message": str(exc)},
        )

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_request", "field": exc.field, "message": str(exc)},
        )

    @app.exception_handler(BackendResolutionError)
    async def resolution_error_handler(request: Request, exc: BackendResolutionError):
        return JSONResponse(
            status_code=404,
            content={"error": "backend_not_found", "model_name": exc.model_name, "message": str(exc)},
        )

    @app.exception_handler(MalformedResponseError)
    async def malformed_response_handler(request: Request, exc: MalformedResponseError):
        logger.warning("malformed_backend_response", path=request.url.path, detail=exc.detail)
        return JSONResponse(
            status_code=502,
            content={"error": "malformed_response", "message": str(exc)},
        )

    # ── Routes ──

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "LLM Validation",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
