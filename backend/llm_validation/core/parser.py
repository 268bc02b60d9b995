"""Response Parser & Confidence Gate.

Turns the backend's raw reply into a StructuredReply and then into the final
ValidationVerdict. Unparsable text raises MalformedResponseError; it is never
read as a pass or a fail.
"""

import json
import re
from typing import Optional

import structlog
from pydantic import ValidationError

from llm_validation.core.errors import MalformedResponseError
from llm_validation.core.models import StructuredReply, ValidationVerdict
from llm_validation.core.options import ResolvedOptions

logger = structlog.get_logger()

GENERIC_FAILURE_MESSAGE = "Validation failed."


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fences from LLM output."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def _fix_llm_json(text: str) -> str:
    """Remove trailing commas before } or ]."""
    return re.sub(r",\s*([}\]])", r"\1", text)


def _extract_json_object(text: str) -> Optional[str]:
    """Find and extract the first complete JSON object from text."""
    match = re.search(r"\{", text)
    if not match:
        return None
    # Track brace depth outside of strings
    depth, in_string, escape_next = 0, False, False
    start = match.start()
    for i in range(start, len(text)):
        ch = text[i]
        if escape_next:
            escape_next = False
        elif ch == "\\":
            escape_next = True
        elif ch == '"':
            in_string = not in_string
        elif not in_string and ch == "{":
            depth += 1
        elif not in_string and ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def _lowercase_unique_keys(pairs: list) -> dict:
    """JSON object hook: lowercase keys and refuse keys that collide."""
    result = {}
    for key, value in pairs:
        lowered = key.lower()
        if lowered in result:
            raise ValueError(f"duplicate key '{lowered}'")
        result[lowered] = value
    return result


def _decode_object(text: str) -> dict:
    cleaned = _strip_code_fences(text)

    candidates = [cleaned, _fix_llm_json(cleaned)]
    extracted = _extract_json_object(cleaned)
    if extracted:
        candidates.append(_fix_llm_json(extracted))

    last_error = "empty reply"
    for candidate in candidates:
        try:
            payload = json.loads(candidate, object_pairs_hook=_lowercase_unique_keys)
        except ValueError as e:
            last_error = str(e)
            continue
        if isinstance(payload, dict):
            return payload
        # Valid JSON of the wrong shape; do not dig objects out of it
        last_error = f"expected a JSON object, got {type(payload).__name__}"
        break

    logger.error("reply_parse_failed", error=last_error, response_length=len(text))
    raise MalformedResponseError(last_error, raw_response=text)


def parse_reply(raw_response: Optional[str]) -> StructuredReply:
    """Decode raw reply text into a StructuredReply.

    Keys are matched case-insensitively; keys that differ only in case are
    rejected rather than merged.

    Raises:
        MalformedResponseError: no JSON object could be decoded, keys collide,
            the top-level value is not an object, the verdict is
            missing or not a boolean, or the confidence is outside [0, 1].
    """
    if raw_response is None or not raw_response.strip():
        raise MalformedResponseError("empty reply", raw_response=raw_response)

    payload = _decode_object(raw_response)
    try:
        return StructuredReply.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "reply" for err in e.errors())
        logger.error("reply_schema_mismatch", fields=fields)
        raise MalformedResponseError(f"reply does not match schema ({fields})", raw_response=raw_response) from e


def apply_confidence_gate(reply: StructuredReply, options: ResolvedOptions, raw_response: str) -> Optional[ValidationVerdict]:
    """Return a failed verdict when the reply's confidence is under the threshold, else None."""
    threshold = options.min_confidence
    if threshold is None or reply.confidence is None:
        return None
    if reply.confidence >= threshold:
        return None
    logger.info("confidence_below_threshold", confidence=reply.confidence, threshold=threshold)
    return ValidationVerdict.failure(
        f"Confidence {reply.confidence:.2f} is below the required threshold {threshold:.2f}.",
        raw_response,
    )


def evaluate_reply(raw_response: str, options: ResolvedOptions) -> ValidationVerdict:
    """Parse the reply, apply the confidence gate, and build the verdict."""
    reply = parse_reply(raw_response)

    gated = apply_confidence_gate(reply, options, raw_response)
    if gated is not None:
        return gated

    if reply.verdict:
        return ValidationVerdict.success(reply.reason, raw_response)

    message = options.error_message or reply.reason or GENERIC_FAILURE_MESSAGE
    return ValidationVerdict.failure(message, raw_response)
