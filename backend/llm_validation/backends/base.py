"""Backend invocation capability shared by every chat backend."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Sequence

from langchain_core.messages import BaseMessage
from pydantic import BaseModel, ConfigDict, Field


class GenerationHints(BaseModel):
    """Generation settings passed alongside the message list."""

    model_config = ConfigDict(frozen=True)

    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    response_schema: Optional[dict[str, Any]] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class ChatBackend(ABC):
    """A chat model that answers one validation request.

    Contract:
        - complete() is called once per validation request
        - when ``hints.response_schema`` is set the returned text must parse as that schema
        - implementations keep no per-call state; a call may be cancelled at any await point
    """

    name: str = "chat_backend"

    @abstractmethod
    async def complete(self, messages: Sequence[BaseMessage], hints: GenerationHints) -> str:
        """Send the messages and return the reply text."""
        ...


class CallableChatBackend(ChatBackend):
    """Wraps an async callable so integrators can plug in any client."""

    def __init__(
        self,
        func: Callable[[Sequence[BaseMessage], GenerationHints], Awaitable[str]],
        name: str = "callable",
    ):
        self._func = func
        self.name = name

    async def complete(self, messages: Sequence[BaseMessage], hints: GenerationHints) -> str:
        return await self._func(messages, hints)
