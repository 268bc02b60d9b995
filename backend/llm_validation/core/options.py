"""Call options, per-backend defaults, and the merge that resolves them.

Merging is pure: neither input is modified and the resolved options own their
own copy of the metadata map.
"""

import copy
from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from llm_validation.core.errors import InvalidRequestError

# Registry key for the backend used when a call does not name one.
DEFAULT_CLIENT_NAME = "default"

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant that validates text against the provided validation prompt. "
    "Answer only the question that was asked so you can respond fast; this runs in high load "
    "scenarios. Stop analysing once you have enough evidence. Keep the reason short. "
    "The verdict field must always be present and tell whether the text matches the condition. "
    "The reason field is only needed when the text does not match."
)


class BackendDefaults(BaseModel):
    """Baseline configuration registered for one backend name."""

    model_config = ConfigDict(frozen=True)

    model_name: str = DEFAULT_CLIENT_NAME
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    max_tokens: int = Field(default=150, gt=0)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timeout: timedelta = timedelta(seconds=30)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, value: timedelta) -> timedelta:
        # Zero means "unset" on CallOptions, so a baseline must be a real deadline
        if value <= timedelta(0):
            raise ValueError("default timeout must be greater than zero")
        return value


class CallOptions(BaseModel):
    """Per-call configuration supplied by the caller. Unset fields fall back to backend defaults."""

    model_config = ConfigDict(frozen=True)

    validation_prompt: str
    model_name: str = ""
    system_prompt: Optional[str] = None
    error_message: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timeout: Optional[timedelta] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def with_defaults(self, defaults: BackendDefaults) -> "ResolvedOptions":
        return merge_options(self, defaults)


class ResolvedOptions(BaseModel):
    """Fully merged configuration actually used for one request."""

    model_config = ConfigDict(frozen=True)

    validation_prompt: str
    model_name: str
    system_prompt: Optional[str]
    default_system_prompt: Optional[str]
    error_message: Optional[str]
    max_tokens: int
    temperature: float
    min_confidence: Optional[float]
    timeout: timedelta
    metadata: dict[str, Any]

    @property
    def timeout_seconds(self) -> float:
        return self.timeout.total_seconds()


def normalize_model_name(model_name: Optional[str]) -> str:
    """Map the empty/unspecified backend name to the default registry key."""
    if model_name is None or not model_name.strip():
        return DEFAULT_CLIENT_NAME
    return model_name


def merge_options(call: CallOptions, defaults: BackendDefaults) -> ResolvedOptions:
    """Combine caller options with backend defaults.

    Caller values win for every field that is set. A zero or negative timeout
    counts as unset. Metadata is the union of both maps with caller keys taking
    precedence.
    """
    if not call.validation_prompt or not call.validation_prompt.strip():
        raise InvalidRequestError("validation_prompt")
    model_name = normalize_model_name(call.model_name)

    metadata = copy.deepcopy(call.metadata)
    for key, value in defaults.metadata.items():
        if key not in metadata:
            metadata[key] = copy.deepcopy(value)

    timeout = call.timeout if call.timeout is not None and call.timeout > timedelta(0) else defaults.timeout

    return ResolvedOptions(
        validation_prompt=call.validation_prompt,
        model_name=model_name,
        system_prompt=call.system_prompt if call.system_prompt is not None else defaults.system_prompt,
        default_system_prompt=defaults.system_prompt,
        error_message=call.error_message,
        max_tokens=call.max_tokens if call.max_tokens is not None else defaults.max_tokens,
        temperature=call.temperature if call.temperature is not None else defaults.temperature,
        min_confidence=call.min_confidence if call.min_confidence is not None else defaults.min_confidence,
        timeout=timeout,
        metadata=metadata,
    )
