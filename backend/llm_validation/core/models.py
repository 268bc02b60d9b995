"""Reply and verdict models: what the backend sends back and what callers receive."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool


class StructuredReply(BaseModel):
    """Decoded backend answer.

    Wire names are ``verdict``, ``reason`` and ``confidence``. The compact
    ``v``/``r``/``c`` names and the legacy ``is_valid`` key are accepted too.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    verdict: StrictBool = Field(validation_alias=AliasChoices("verdict", "v", "is_valid"))
    reason: Optional[str] = Field(default=None, validation_alias=AliasChoices("reason", "r"))
    confidence: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("confidence", "c"),
    )


# Structured-output request sent to backends. Every property is listed as
# required because strict JSON-schema modes demand it; nullability carries
# the optionality instead.
REPLY_JSON_SCHEMA = {
    "name": "validation_reply",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "verdict": {
                "type": "boolean",
                "description": "True if the text meets ALL criteria.",
            },
            "reason": {
                "type": ["string", "null"],
                "description": "Short reason, required when verdict is false.",
            },
            "confidence": {
                "type": ["number", "null"],
                "description": "Certainty of the verdict from 0.0 to 1.0.",
            },
        },
        "required": ["verdict", "reason", "confidence"],
        "additionalProperties": False,
    },
}


class ValidationVerdict(BaseModel):
    """Final pass/fail result returned to the caller."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: Optional[str] = None
    raw_response: Optional[str] = None

    @classmethod
    def success(cls, message: Optional[str] = None, raw_response: Optional[str] = None) -> "ValidationVerdict":
        return cls(is_valid=True, message=message, raw_response=raw_response)

    @classmethod
    def failure(cls, message: str, raw_response: Optional[str] = None) -> "ValidationVerdict":
        return cls(is_valid=False, message=message, raw_response=raw_response)
