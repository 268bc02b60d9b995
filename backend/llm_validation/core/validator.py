"""LLM Validator: runs the validation pipeline for one value.

Usage:
    validator = LLMValidator(registry, resolver)
    verdict = await validator.validate(
        "Golden Retrievers are friendly dogs",
        CallOptions(validation_prompt="Must be about dogs", model_name="gpt-4o-mini"),
    )
    if not verdict.is_valid:
        print(verdict.message)
"""

import asyncio
import time
from typing import Optional

import structlog

from llm_validation.core.errors import MalformedResponseError, ValidationInterruptedError
from llm_validation.core.executor import RequestExecutor
from llm_validation.core.models import ValidationVerdict
from llm_validation.core.options import CallOptions, normalize_model_name
from llm_validation.core.parser import evaluate_reply
from llm_validation.core.registry import DefaultOptionRegistry
from llm_validation.core.resolvers import ChatClientResolver

logger = structlog.get_logger()


class LLMValidator:
    """Validates text by asking a chat backend for a structured verdict.

    Pipeline order is fixed: merge options, resolve backend, execute, parse.
    The validator holds no per-call state, so one instance serves concurrent
    calls.
    """

    def __init__(
        self,
        registry: DefaultOptionRegistry,
        resolver: ChatClientResolver,
        executor: Optional[RequestExecutor] = None,
        raise_on_malformed: bool = True,
    ):
        """Initialize the validator.

        Args:
            registry: Per-backend default options.
            resolver: Strategy that maps model names to chat backends.
            executor: Request executor; a default one is created if omitted.
            raise_on_malformed: If False, unparsable replies become failed
                verdicts instead of raising MalformedResponseError.
        """
        self.registry = registry
        self.resolver = resolver
        self.executor = executor or RequestExecutor()
        self.raise_on_malformed = raise_on_malformed

    async def validate(
        self,
        value: str,
        options: CallOptions,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ValidationVerdict:
        """Validate ``value`` against ``options.validation_prompt``.

        Raises:
            InvalidRequestError: the validation prompt is empty.
            BackendResolutionError: no backend is registered for the model name.
            MalformedResponseError: the reply is not structured JSON (unless
                ``raise_on_malformed`` is False).
        """
        start_time = time.perf_counter()

        defaults = self.registry.lookup(options.model_name)
        resolved = options.with_defaults(defaults)
        backend = self.resolver.resolve(resolved.model_name)

        try:
            raw_response = await self.executor.execute(resolved, value, backend, cancel_event)
        except ValidationInterruptedError as e:
            return self._finish(ValidationVerdict.failure(e.message), resolved.model_name, start_time, outcome="interrupted")

        try:
            verdict = evaluate_reply(raw_response, resolved)
        except MalformedResponseError as e:
            if self.raise_on_malformed:
                raise
            verdict = ValidationVerdict.failure(
                f"Validation response could not be parsed: {e.detail}",
                raw_response,
            )
            return self._finish(verdict, resolved.model_name, start_time, outcome="malformed")

        return self._finish(verdict, resolved.model_name, start_time, outcome="answered")

    def _finish(self, verdict: ValidationVerdict, model_name: str, start_time: float, outcome: str) -> ValidationVerdict:
        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "validation_complete",
            model=normalize_model_name(model_name),
            outcome=outcome,
            is_valid=verdict.is_valid,
            duration_ms=round(duration, 2),
        )
        return verdict
