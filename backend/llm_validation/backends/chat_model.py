"""Adapter that turns any langchain-core chat model into a ChatBackend."""

from typing import Literal, Optional, Sequence

import structlog
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage

from llm_validation.backends.base import ChatBackend, GenerationHints

logger = structlog.get_logger()

ResponseFormatStyle = Literal["json_schema", "json_object"]


class LangChainChatBackend(ChatBackend):
    """Invokes a langchain chat model with the request's generation hints bound.

    Args:
        model: Any ``BaseChatModel`` (ChatOpenAI, ChatOllama, fakes in tests).
        name: Label used in logs.
        response_format: How the structured-output request is expressed.
            ``"json_schema"`` sends the full reply schema, ``"json_object"``
            only asks for JSON mode, ``None`` sends nothing and relies on the
            prompt alone.
    """

    def __init__(
        self,
        model: BaseChatModel,
        name: Optional[str] = None,
        response_format: Optional[ResponseFormatStyle] = "json_schema",
    ):
        self.model = model
        self.name = name or getattr(model, "model_name", None) or type(model).__name__
        self.response_format = response_format

    def _bind_kwargs(self, hints: GenerationHints) -> dict:
        kwargs = dict(hints.metadata)
        if hints.max_tokens is not None:
            kwargs["max_tokens"] = hints.max_tokens
        if hints.temperature is not None:
            kwargs["temperature"] = hints.temperature
        if hints.response_schema is not None and self.response_format == "json_schema":
            kwargs["response_format"] = {"type": "json_schema", "json_schema": hints.response_schema}
        elif hints.response_schema is not None and self.response_format == "json_object":
            kwargs["response_format"] = {"type": "json_object"}
        return kwargs

    async def complete(self, messages: Sequence[BaseMessage], hints: GenerationHints) -> str:
        response = await self.model.bind(**self._bind_kwargs(hints)).ainvoke(list(messages))

        usage = getattr(response, "usage_metadata", None) or {}
        logger.debug(
            "backend_replied",
            backend=self.name,
            input_tokens=usage.get("input_tokens", 0),
            output_tokens=usage.get("output_tokens", 0),
        )
        return _content_text(response.content)


def _content_text(content) -> str:
    """Flatten message content, which may be a string or a list of content parts."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
