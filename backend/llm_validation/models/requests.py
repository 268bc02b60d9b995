"""API request models."""

from datetime import timedelta
from pydantic import BaseModel, Field
from typing import Any, Optional

from llm_validation.core.options import CallOptions
from llm_validation.prompts import PromptVariant


class ValidateRequest(BaseModel):
    """Validate a value against a custom validation prompt."""

    value: str = Field(..., max_length=20000, description="Text to validate")
    validation_prompt: str = Field(
        ...,
        description="What the text must satisfy",
        examples=["Must be about dogs"],
    )
    model_name: str = Field(default="", description="Backend name; empty uses the default backend")
    system_prompt: Optional[str] = None
    error_message: Optional[str] = Field(default=None, description="Message returned instead of the model's reason")
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timeout_seconds: Optional[float] = Field(default=None, ge=0.0, description="0 or empty uses the backend default")
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_call_options(self) -> CallOptions:
        return CallOptions(
            validation_prompt=self.validation_prompt,
            model_name=self.model_name,
            system_prompt=self.system_prompt,
            error_message=self.error_message,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            min_confidence=self.min_confidence,
            timeout=timedelta(seconds=self.timeout_seconds) if self.timeout_seconds is not None else None,
            metadata=self.metadata,
        )


class TemplateValidateRequest(BaseModel):
    """Validate a value with a built-in prompt family."""

    value: str = Field(..., max_length=20000)
    variant: PromptVariant = PromptVariant.BALANCED
    argument: Optional[str] = Field(default=None, description="Required by single-argument families such as 'topic'")
    model_name: str = ""
    error_message: Optional[str] = None
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timeout_seconds: Optional[float] = Field(default=None, ge=0.0)
