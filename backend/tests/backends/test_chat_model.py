from unittest.mock import AsyncMock

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from llm_validation.backends.base import CallableChatBackend, GenerationHints
from llm_validation.backends.chat_model import LangChainChatBackend, _content_text
from llm_validation.backends.openai_backend import create_openai_backend
from llm_validation.core.models import REPLY_JSON_SCHEMA

MESSAGES = [SystemMessage(content="preamble"), HumanMessage(content="rule"), HumanMessage(content="Text to validate: x")]


class RecordingModel:
    """Duck-typed chat model that records what was bound and sent."""

    model_name = "recording"

    def __init__(self, content='{"verdict": true}'):
        self.content = content
        self.bound = None
        self.sent = None

    def bind(self, **kwargs):
        self.bound = kwargs
        return self

    async def ainvoke(self, messages):
        self.sent = messages
        return AIMessage(content=self.content)


async def test_fake_chat_model_reply_is_returned():
    backend = LangChainChatBackend(FakeListChatModel(responses=['{"verdict": false, "reason": "nope"}']))

    reply = await backend.complete(MESSAGES, GenerationHints())

    assert reply == '{"verdict": false, "reason": "nope"}'


async def test_hints_are_bound_as_model_kwargs():
    model = RecordingModel()
    backend = LangChainChatBackend(model)
    hints = GenerationHints(max_tokens=80, temperature=0.2, response_schema=REPLY_JSON_SCHEMA, metadata={"user": "u1"})

    await backend.complete(MESSAGES, hints)

    assert model.bound == {
        "user": "u1",
        "max_tokens": 80,
        "temperature": 0.2,
        "response_format": {"type": "json_schema", "json_schema": REPLY_JSON_SCHEMA},
    }
    assert model.sent == MESSAGES
    assert backend.name == "recording"


def test_json_object_mode_sends_no_schema():
    backend = LangChainChatBackend(RecordingModel(), response_format="json_object")

    kwargs = backend._bind_kwargs(GenerationHints(response_schema=REPLY_JSON_SCHEMA))

    assert kwargs == {"response_format": {"type": "json_object"}}


def test_prompt_only_mode_sends_no_response_format():
    backend = LangChainChatBackend(RecordingModel(), response_format=None)

    assert backend._bind_kwargs(GenerationHints(response_schema=REPLY_JSON_SCHEMA, temperature=0.0)) == {"temperature": 0.0}


def test_content_text_flattens_parts():
    assert _content_text("plain") == "plain"
    assert _content_text([{"type": "text", "text": '{"verdict": '}, "true}", {"type": "image_url"}]) == '{"verdict": true}'
    assert _content_text([]) == ""


async def test_list_content_reply_is_flattened():
    model = RecordingModel(content=[{"type": "text", "text": '{"verdict": true}'}])

    assert await LangChainChatBackend(model).complete(MESSAGES, GenerationHints()) == '{"verdict": true}'


async def test_callable_backend_forwards_arguments():
    seen = {}

    async def answer(messages, hints):
        seen["messages"] = messages
        seen["hints"] = hints
        return '{"verdict": true}'

    backend = CallableChatBackend(answer, name="custom")
    hints = GenerationHints(max_tokens=10)

    assert await backend.complete(MESSAGES, hints) == '{"verdict": true}'
    assert seen == {"messages": MESSAGES, "hints": hints}
    assert backend.name == "custom"


def test_openai_backend_uses_given_model():
    backend = create_openai_backend("gpt-4o", api_key="sk-test")

    assert isinstance(backend, LangChainChatBackend)
    assert backend.name == "gpt-4o"
    assert backend.model.model_name == "gpt-4o"
    assert backend.response_format == "json_schema"


def test_openai_backend_accepts_local_base_url():
    backend = create_openai_backend("llama3", base_url="http://localhost:11434/v1", response_format="json_object")

    assert backend.model.openai_api_base == "http://localhost:11434/v1"
    assert backend.response_format == "json_object"


async def test_callable_backend_with_async_mock():
    func = AsyncMock(return_value='{"verdict": false, "reason": "no"}')
    backend = CallableChatBackend(func)

    reply = await backend.complete(MESSAGES, GenerationHints())

    assert reply == '{"verdict": false, "reason": "no"}'
    func.assert_awaited_once()
