"""Error taxonomy for the validation pipeline.

Fatal categories (invalid request, resolution error) are raised before the
backend is contacted. Timeouts and cancel signals are recovered by the
validator into failed verdicts. Malformed responses are raised by default.
"""

from typing import Optional


class LLMValidationError(Exception):
    """Base class for all pipeline errors."""


class InvalidRequestError(LLMValidationError, ValueError):
    """Required call options are missing or empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"'{field}' is required and must not be empty.")


class BackendResolutionError(LLMValidationError, LookupError):
    """No backend handle is registered under the requested name."""

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f"No chat backend registered for model '{model_name}'.")


class ValidationInterruptedError(LLMValidationError):
    """The backend call was stopped before it produced a reply."""

    message = "Validation was interrupted."


class ValidationTimeoutError(ValidationInterruptedError):
    """The backend did not answer within the resolved deadline."""

    message = "Validation timed out."

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Backend did not respond within {timeout_seconds:g}s.")


class ValidationCancelledError(ValidationInterruptedError):
    """The caller's cancel signal fired before the backend answered."""

    message = "Validation was cancelled."


class MalformedResponseError(LLMValidationError):
    """The backend reply does not follow the structured reply contract."""

    def __init__(self, detail: str, raw_response: Optional[str] = None):
        self.detail = detail
        self.raw_response = raw_response
        super().__init__(f"Malformed validation response: {detail}")
