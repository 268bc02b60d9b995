"""Chat backends that answer validation requests."""

from llm_validation.backends.base import CallableChatBackend, ChatBackend, GenerationHints
from llm_validation.backends.chat_model import LangChainChatBackend
from llm_validation.backends.openai_backend import create_openai_backend

__all__ = [
    "ChatBackend",
    "CallableChatBackend",
    "GenerationHints",
    "LangChainChatBackend",
    "create_openai_backend",
]
