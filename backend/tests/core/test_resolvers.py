import pytest

from llm_validation.core.errors import BackendResolutionError
from llm_validation.core.resolvers import (
    DefaultChatClientResolver,
    EnvironmentChatClientResolver,
    TieredChatClientResolver,
)
from tests.fakes import FakeBackend


@pytest.fixture
def backends():
    return {
        "default": FakeBackend(name="default"),
        "gpt-4o": FakeBackend(name="gpt-4o"),
        "gpt-4o-mini": FakeBackend(name="gpt-4o-mini"),
    }


@pytest.fixture
def resolver(backends):
    return DefaultChatClientResolver(
        clients={"gpt-4o": backends["gpt-4o"], "gpt-4o-mini": backends["gpt-4o-mini"]},
        default=backends["default"],
    )


@pytest.mark.parametrize("name", ["", None, "default", "   "])
def test_empty_or_default_name_resolves_unnamed_backend(resolver, backends, name):
    assert resolver.resolve(name) is backends["default"]


def test_named_backend_resolves(resolver, backends):
    assert resolver.resolve("gpt-4o") is backends["gpt-4o"]


def test_missing_named_backend_raises(resolver):
    with pytest.raises(BackendResolutionError) as exc_info:
        resolver.resolve("claude-3")
    assert exc_info.value.model_name == "claude-3"
    assert "claude-3" in str(exc_info.value)


def test_missing_default_backend_raises():
    resolver = DefaultChatClientResolver(clients={"gpt-4o": FakeBackend()})

    with pytest.raises(BackendResolutionError) as exc_info:
        resolver.resolve("")
    assert exc_info.value.model_name == "default"


def test_register_default_name_sets_default():
    backend = FakeBackend()
    resolver = DefaultChatClientResolver()
    resolver.register("default", backend)

    assert resolver.resolve(None) is backend
    assert resolver.names() == ["default"]


def test_names_list_default_first(resolver):
    assert resolver.names() == ["default", "gpt-4o", "gpt-4o-mini"]


def test_tiered_resolver_maps_tier_names(resolver, backends):
    tiered = TieredChatClientResolver(resolver, {"fast": "gpt-4o-mini", "accurate": "gpt-4o"})

    assert tiered.resolve("fast") is backends["gpt-4o-mini"]
    assert tiered.resolve("accurate") is backends["gpt-4o"]
    assert tiered.resolve("gpt-4o") is backends["gpt-4o"]
    assert tiered.resolve("") is backends["default"]
    assert "fast" in tiered.names()


def test_tiered_resolver_propagates_resolution_errors(resolver):
    tiered = TieredChatClientResolver(resolver, {"fast": "missing-model"})

    with pytest.raises(BackendResolutionError):
        tiered.resolve("fast")


def test_environment_resolver_reads_mapping(resolver, backends, monkeypatch):
    monkeypatch.setenv("LLM_VALIDATION_MODEL_FAST", "gpt-4o-mini")
    env_resolver = EnvironmentChatClientResolver(resolver)

    assert env_resolver.resolve("fast") is backends["gpt-4o-mini"]


def test_environment_resolver_normalizes_key(resolver, backends, monkeypatch):
    monkeypatch.setenv("LLM_VALIDATION_MODEL_GPT_4O_MINI", "gpt-4o")
    env_resolver = EnvironmentChatClientResolver(resolver)

    assert env_resolver.resolve("gpt-4o-mini") is backends["gpt-4o"]


def test_environment_resolver_passes_unset_names_through(resolver, backends, monkeypatch):
    monkeypatch.delenv("LLM_VALIDATION_MODEL_GPT_4O", raising=False)
    monkeypatch.delenv("LLM_VALIDATION_MODEL_DEFAULT", raising=False)
    env_resolver = EnvironmentChatClientResolver(resolver)

    assert env_resolver.resolve("gpt-4o") is backends["gpt-4o"]
    assert env_resolver.resolve("") is backends["default"]


def test_environment_resolver_can_redirect_default(resolver, backends, monkeypatch):
    monkeypatch.setenv("LLM_VALIDATION_MODEL_DEFAULT", "gpt-4o")
    env_resolver = EnvironmentChatClientResolver(resolver)

    assert env_resolver.resolve(None) is backends["gpt-4o"]
