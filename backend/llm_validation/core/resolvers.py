"""Backend resolvers: abstract strategy for mapping a model name to a chat backend.

New resolution strategies are added by subclassing ChatClientResolver; the
validator only ever calls ``resolve``.
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional

import structlog

from llm_validation.backends.base import ChatBackend
from llm_validation.core.errors import BackendResolutionError
from llm_validation.core.options import DEFAULT_CLIENT_NAME

logger = structlog.get_logger()


class ChatClientResolver(ABC):
    """Abstract base for backend resolution strategies.

    Contract:
        - resolve() is synchronous and does no I/O
        - resolve() returns a ChatBackend or raises BackendResolutionError
        - an empty or None name means "the default backend"
    """

    @abstractmethod
    def resolve(self, model_name: Optional[str]) -> ChatBackend:
        ...

    def names(self) -> list[str]:
        """Names this resolver can answer for, for diagnostics."""
        return []

    @staticmethod
    def _is_default(model_name: Optional[str]) -> bool:
        return not model_name or not model_name.strip() or model_name == DEFAULT_CLIENT_NAME


class DefaultChatClientResolver(ChatClientResolver):
    """Resolves backends from an explicit name → handle map plus one unnamed default."""

    def __init__(
        self,
        clients: Optional[Mapping[str, ChatBackend]] = None,
        default: Optional[ChatBackend] = None,
    ):
        self._clients: dict[str, ChatBackend] = dict(clients or {})
        self._default = default

    def register(self, model_name: str, backend: ChatBackend) -> None:
        if self._is_default(model_name):
            self._default = backend
        else:
            self._clients[model_name] = backend

    def set_default(self, backend: ChatBackend) -> None:
        self._default = backend

    def resolve(self, model_name: Optional[str]) -> ChatBackend:
        if self._is_default(model_name):
            if self._default is None:
                logger.warning("backend_resolution_failed", model=DEFAULT_CLIENT_NAME)
                raise BackendResolutionError(DEFAULT_CLIENT_NAME)
            return self._default

        backend = self._clients.get(model_name)
        if backend is None:
            logger.warning("backend_resolution_failed", model=model_name)
            raise BackendResolutionError(model_name)
        return backend

    def names(self) -> list[str]:
        names = sorted(self._clients)
        if self._default is not None:
            names.insert(0, DEFAULT_CLIENT_NAME)
        return names


class TieredChatClientResolver(ChatClientResolver):
    """Routes tier names (e.g. ``fast``, ``accurate``) to concrete backend names.

    Names that are not tiers are passed through to the delegate unchanged.
    """

    def __init__(self, delegate: ChatClientResolver, tiers: Mapping[str, str]):
        self._delegate = delegate
        self._tiers = dict(tiers)

    def resolve(self, model_name: Optional[str]) -> ChatBackend:
        target = self._tiers.get(model_name or "", model_name)
        return self._delegate.resolve(target)

    def names(self) -> list[str]:
        return sorted(set(self._delegate.names()) | set(self._tiers))


class EnvironmentChatClientResolver(ChatClientResolver):
    """Looks up ``{prefix}{NAME}`` in the environment to pick the backend name.

    With ``LLM_VALIDATION_MODEL_FAST=gpt-4o-mini`` set, resolving ``"fast"``
    resolves ``"gpt-4o-mini"`` on the delegate. Unset names pass through.
    """

    def __init__(self, delegate: ChatClientResolver, prefix: str = "LLM_VALIDATION_MODEL_"):
        self._delegate = delegate
        self._prefix = prefix

    def _env_key(self, model_name: str) -> str:
        return self._prefix + model_name.upper().replace("-", "_").replace(".", "_")

    def resolve(self, model_name: Optional[str]) -> ChatBackend:
        if self._is_default(model_name):
            target = os.getenv(self._env_key(DEFAULT_CLIENT_NAME)) or model_name
        else:
            target = os.getenv(self._env_key(model_name)) or model_name
        return self._delegate.resolve(target)

    def names(self) -> list[str]:
        return self._delegate.names()
