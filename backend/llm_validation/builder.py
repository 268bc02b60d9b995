"""Wiring helpers: assemble registry, resolver and validator at startup."""

from datetime import timedelta
from typing import Optional

import structlog

from llm_validation.backends.base import ChatBackend
from llm_validation.backends.openai_backend import create_openai_backend
from llm_validation.config import Settings, get_settings
from llm_validation.core.options import DEFAULT_CLIENT_NAME, BackendDefaults
from llm_validation.core.registry import DefaultOptionRegistry
from llm_validation.core.resolvers import ChatClientResolver, DefaultChatClientResolver
from llm_validation.core.validator import LLMValidator

logger = structlog.get_logger()


class LLMValidatorBuilder:
    """Fluent builder for an LLMValidator.

    Usage:
        validator = (
            LLMValidatorBuilder()
            .add_default_client(backend)
            .add_client("gpt-4o", accurate_backend)
            .add_model_option("gpt-4o", max_tokens=300)
            .build()
        )
    """

    def __init__(self, base_defaults: Optional[BackendDefaults] = None):
        self._base_defaults = base_defaults or BackendDefaults()
        self.registry = DefaultOptionRegistry(self._base_defaults)
        self._clients = DefaultChatClientResolver()
        self._resolver: Optional[ChatClientResolver] = None
        self._raise_on_malformed = True

    def add_model_option(self, model_name: Optional[str] = None, **overrides) -> "LLMValidatorBuilder":
        """Register default options for ``model_name`` (the fallback entry if None)."""
        self.registry.register(model_name, self._base_defaults, **overrides)
        return self

    def add_client(self, model_name: str, backend: ChatBackend) -> "LLMValidatorBuilder":
        self._clients.register(model_name, backend)
        return self

    def add_default_client(self, backend: ChatBackend) -> "LLMValidatorBuilder":
        self._clients.set_default(backend)
        return self

    def use_resolver(self, resolver: ChatClientResolver) -> "LLMValidatorBuilder":
        """Replace the map-backed resolver with a custom strategy."""
        self._resolver = resolver
        return self

    def raise_on_malformed(self, enabled: bool = True) -> "LLMValidatorBuilder":
        self._raise_on_malformed = enabled
        return self

    @property
    def clients(self) -> DefaultChatClientResolver:
        return self._clients

    def build(self) -> LLMValidator:
        return LLMValidator(
            registry=self.registry,
            resolver=self._resolver or self._clients,
            raise_on_malformed=self._raise_on_malformed,
        )


def defaults_from_settings(settings: Settings) -> BackendDefaults:
    values = {
        "model_name": DEFAULT_CLIENT_NAME,
        "max_tokens": settings.DEFAULT_MAX_TOKENS,
        "temperature": settings.DEFAULT_TEMPERATURE,
        "timeout": timedelta(seconds=settings.DEFAULT_TIMEOUT_SECONDS),
        "min_confidence": settings.DEFAULT_MIN_CONFIDENCE,
    }
    if settings.DEFAULT_SYSTEM_PROMPT:
        values["system_prompt"] = settings.DEFAULT_SYSTEM_PROMPT
    return BackendDefaults(**values)


def _openai_backend(settings: Settings, model_name: str) -> ChatBackend:
    return create_openai_backend(
        model_name,
        api_key=settings.OPENAI_API_KEY or None,
        base_url=settings.OPENAI_BASE_URL or None,
    )


def build_validator_from_settings(settings: Optional[Settings] = None) -> LLMValidator:
    """Create the service validator.

    OpenAI-compatible backends are registered only when an API key or base URL
    is configured; otherwise the validator starts with no backends and every
    request fails resolution.
    """
    settings = settings or get_settings()
    builder = LLMValidatorBuilder(defaults_from_settings(settings))
    builder.raise_on_malformed(settings.RAISE_ON_MALFORMED)

    if settings.OPENAI_API_KEY or settings.OPENAI_BASE_URL:
        default_backend = _openai_backend(settings, settings.DEFAULT_MODEL)
        builder.add_default_client(default_backend)
        builder.add_client(settings.DEFAULT_MODEL, default_backend)
        builder.add_model_option(settings.DEFAULT_MODEL)
        for model_name in settings.extra_models:
            builder.add_client(model_name, _openai_backend(settings, model_name))
            builder.add_model_option(model_name)
        logger.info("backends_registered", models=builder.clients.names())
    else:
        logger.warning("no_backend_configured", hint="set OPENAI_API_KEY or OPENAI_BASE_URL")

    return builder.build()
