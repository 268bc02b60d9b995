"""LLM Validation: ask a chat model whether text satisfies a rule, get a structured verdict.

Usage:
    from llm_validation import CallOptions, LLMValidatorBuilder

    validator = LLMValidatorBuilder().add_default_client(backend).build()
    verdict = await validator.validate(text, CallOptions(validation_prompt="Must be about dogs"))
"""

from llm_validation.builder import LLMValidatorBuilder, build_validator_from_settings
from llm_validation.core import (
    BackendDefaults,
    BackendResolutionError,
    CallOptions,
    ChatClientResolver,
    DefaultChatClientResolver,
    DefaultOptionRegistry,
    InvalidRequestError,
    LLMValidationError,
    LLMValidator,
    MalformedResponseError,
    ValidationVerdict,
)
from llm_validation.prompts import PromptVariant, select_prompt

__all__ = [
    "BackendDefaults",
    "BackendResolutionError",
    "CallOptions",
    "ChatClientResolver",
    "DefaultChatClientResolver",
    "DefaultOptionRegistry",
    "InvalidRequestError",
    "LLMValidationError",
    "LLMValidator",
    "LLMValidatorBuilder",
    "MalformedResponseError",
    "PromptVariant",
    "ValidationVerdict",
    "build_validator_from_settings",
    "select_prompt",
]
