"""OpenAI-compatible chat backend built from application settings."""

from typing import Optional

from langchain_openai import ChatOpenAI

from llm_validation.backends.chat_model import LangChainChatBackend, ResponseFormatStyle
from llm_validation.config import get_settings


def create_openai_backend(
    model_name: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    response_format: Optional[ResponseFormatStyle] = "json_schema",
) -> LangChainChatBackend:
    """Create a ChatOpenAI-backed handle. Unset arguments come from settings.

    Per-call limits (max tokens, temperature) are bound at request time from
    the resolved options, so they are not fixed on the client here.
    """
    settings = get_settings()

    url = base_url or settings.OPENAI_BASE_URL
    kwargs = {
        "model": model_name or settings.DEFAULT_MODEL,
        # Local OpenAI-compatible servers accept any key
        "api_key": api_key or settings.OPENAI_API_KEY or ("local" if url else None),
    }
    if url:
        kwargs["base_url"] = url

    return LangChainChatBackend(ChatOpenAI(**kwargs), name=kwargs["model"], response_format=response_format)
