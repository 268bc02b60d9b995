import pytest

from llm_validation.builder import LLMValidatorBuilder
from llm_validation.core.options import BackendDefaults, CallOptions
from tests.fakes import FakeBackend


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def builder(fake_backend) -> LLMValidatorBuilder:
    """Builder with the fake backend registered as default and as 'test-model'."""
    return (
        LLMValidatorBuilder()
        .add_default_client(fake_backend)
        .add_client("test-model", fake_backend)
    )


@pytest.fixture
def validator(builder):
    return builder.build()


@pytest.fixture
def defaults() -> BackendDefaults:
    return BackendDefaults(
        model_name="test-model",
        system_prompt="Default system prompt",
        max_tokens=200,
        temperature=0.7,
        metadata={"k2": "B", "k3": "C"},
    )


@pytest.fixture
def dog_options() -> CallOptions:
    return CallOptions(validation_prompt="must be about dogs", model_name="test-model")
