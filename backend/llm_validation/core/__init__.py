"""Validation request pipeline: options, registry, resolution, execution, parsing."""

from llm_validation.core.errors import (
    BackendResolutionError,
    InvalidRequestError,
    LLMValidationError,
    MalformedResponseError,
    ValidationCancelledError,
    ValidationInterruptedError,
    ValidationTimeoutError,
)
from llm_validation.core.executor import RequestExecutor
from llm_validation.core.models import StructuredReply, ValidationVerdict
from llm_validation.core.options import (
    DEFAULT_CLIENT_NAME,
    BackendDefaults,
    CallOptions,
    ResolvedOptions,
    merge_options,
)
from llm_validation.core.parser import evaluate_reply, parse_reply
from llm_validation.core.registry import DefaultOptionRegistry
from llm_validation.core.resolvers import (
    ChatClientResolver,
    DefaultChatClientResolver,
    EnvironmentChatClientResolver,
    TieredChatClientResolver,
)
from llm_validation.core.validator import LLMValidator

__all__ = [
    "DEFAULT_CLIENT_NAME",
    "BackendDefaults",
    "BackendResolutionError",
    "CallOptions",
    "ChatClientResolver",
    "DefaultChatClientResolver",
    "DefaultOptionRegistry",
    "EnvironmentChatClientResolver",
    "InvalidRequestError",
    "LLMValidationError",
    "LLMValidator",
    "MalformedResponseError",
    "RequestExecutor",
    "ResolvedOptions",
    "StructuredReply",
    "TieredChatClientResolver",
    "ValidationCancelledError",
    "ValidationInterruptedError",
    "ValidationTimeoutError",
    "ValidationVerdict",
    "evaluate_reply",
    "merge_options",
    "parse_reply",
]
