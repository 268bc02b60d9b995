"""Main API router combining all endpoint routers."""

from fastapi import APIRouter

from llm_validation.api.health import router as health_router
from llm_validation.api.validation import router as validation_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validation
api_router.include_router(validation_router, tags=["Validation"])
