"""Request Executor: builds the message list and invokes the backend under a deadline.

The backend call is the pipeline's only suspension point. It is raced against
the resolved timeout and, if given, the caller's cancel signal. Whichever
fires first wins and the backend task is cancelled.
"""

import asyncio
from typing import Optional

import structlog
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from llm_validation.backends.base import ChatBackend, GenerationHints
from llm_validation.core.errors import ValidationCancelledError, ValidationTimeoutError
from llm_validation.core.models import REPLY_JSON_SCHEMA
from llm_validation.core.options import ResolvedOptions

logger = structlog.get_logger()

SUBJECT_PREFIX = "Text to validate: "

# Upper bound on waiting for a cancelled backend call to unwind
DRAIN_GRACE_SECONDS = 0.1


def build_messages(options: ResolvedOptions, value: str) -> list[BaseMessage]:
    """Assemble preamble(s), instruction and subject text in that order."""
    messages: list[BaseMessage] = []

    default_prompt = options.default_system_prompt
    if default_prompt and default_prompt.strip():
        messages.append(SystemMessage(content=default_prompt))

    # Caller preamble only when it adds something beyond the backend default
    if options.system_prompt and options.system_prompt.strip() and options.system_prompt != default_prompt:
        messages.append(SystemMessage(content=options.system_prompt))

    messages.append(HumanMessage(content=options.validation_prompt))
    messages.append(HumanMessage(content=f"{SUBJECT_PREFIX}{value}"))
    return messages


def build_hints(options: ResolvedOptions) -> GenerationHints:
    return GenerationHints(
        max_tokens=options.max_tokens,
        temperature=options.temperature,
        response_schema=REPLY_JSON_SCHEMA,
        metadata=options.metadata,
    )


class RequestExecutor:
    """Invokes a resolved backend for one request."""

    async def execute(
        self,
        options: ResolvedOptions,
        value: str,
        backend: ChatBackend,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> str:
        """Run the backend call and return its raw reply text.

        Raises:
            ValidationTimeoutError: the resolved deadline passed first.
            ValidationCancelledError: ``cancel_event`` was set first.
            Exception: backend transport errors propagate unchanged.
        """
        messages = build_messages(options, value)
        hints = build_hints(options)
        timeout = options.timeout_seconds

        call = asyncio.ensure_future(backend.complete(messages, hints))
        waiters = {call}
        signal = None
        if cancel_event is not None:
            signal = asyncio.ensure_future(cancel_event.wait())
            waiters.add(signal)

        try:
            done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
        finally:
            # Also runs when the calling task itself is cancelled
            for task in waiters:
                if not task.done():
                    task.cancel()

        if call in done:
            return call.result()

        await _drain(call)
        if signal is not None and signal in done:
            logger.info("validation_cancelled", model=options.model_name)
            raise ValidationCancelledError(ValidationCancelledError.message)

        logger.warning("validation_timed_out", model=options.model_name, timeout_seconds=timeout)
        raise ValidationTimeoutError(timeout)


async def _drain(task: asyncio.Future) -> None:
    """Give a cancelled backend task a short grace period to unwind.

    The wait is bounded so slow cleanup in a backend cannot push the call past
    its deadline. A task still running afterwards has its outcome collected by
    a done callback.
    """
    task.add_done_callback(_collect_late_outcome)
    await asyncio.wait({task}, timeout=DRAIN_GRACE_SECONDS)


def _collect_late_outcome(task: asyncio.Future) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.debug("backend_error_after_cancel", error=str(task.exception()))
