"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal

from llm_validation.core.models import ValidationVerdict


class ValidationResponse(BaseModel):
    """Verdict for one validation request."""

    is_valid: bool
    message: Optional[str] = None
    raw_response: Optional[str] = None
    model_name: str

    @classmethod
    def from_verdict(cls, verdict: ValidationVerdict, model_name: str) -> "ValidationResponse":
        return cls(
            is_valid=verdict.is_valid,
            message=verdict.message,
            raw_response=verdict.raw_response,
            model_name=model_name,
        )


class PromptFamilyResponse(BaseModel):
    """A built-in prompt family."""

    tag: str
    description: str
    argument: Optional[str] = None
    arity: int
    variants: list[str]


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    backends: list[str]
