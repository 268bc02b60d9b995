"""Validation API: custom-prompt and built-in prompt family validation."""

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request

import structlog

from llm_validation.core.options import CallOptions, normalize_model_name
from llm_validation.core.validator import LLMValidator
from llm_validation.models.requests import TemplateValidateRequest, ValidateRequest
from llm_validation.models.responses import PromptFamilyResponse, ValidationResponse
from llm_validation.prompts import PROMPT_TEMPLATES, PromptVariant, get_template

logger = structlog.get_logger()

router = APIRouter()


def get_validator(request: Request) -> LLMValidator:
    return request.app.state.validator


@router.post("/validate", response_model=ValidationResponse)
async def validate(body: ValidateRequest, validator: LLMValidator = Depends(get_validator)):
    """Validate text against a custom validation prompt."""
    verdict = await validator.validate(body.value, body.to_call_options())
    return ValidationResponse.from_verdict(verdict, normalize_model_name(body.model_name))


@router.get("/prompts", response_model=list[PromptFamilyResponse])
async def list_prompt_families():
    """List the built-in prompt families."""
    return [
        PromptFamilyResponse(
            tag=template.tag,
            description=template.description,
            argument=template.argument,
            arity=template.arity,
            variants=[variant.value for variant in PromptVariant],
        )
        for template in sorted(PROMPT_TEMPLATES.values(), key=lambda t: t.tag)
    ]


@router.post("/validate/{family}", response_model=ValidationResponse)
async def validate_with_family(
    family: str,
    body: TemplateValidateRequest,
    validator: LLMValidator = Depends(get_validator),
):
    """Validate text with a built-in prompt family at the requested variant."""
    try:
        template = get_template(family)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown prompt family '{family}'")

    if template.arity == 1 and not body.argument:
        raise HTTPException(status_code=422, detail=f"Prompt family '{family}' requires '{template.argument}'")

    prompt = template.render(body.variant, body.argument) if template.arity == 1 else template.render(body.variant)

    options = CallOptions(
        validation_prompt=prompt,
        model_name=body.model_name,
        error_message=body.error_message,
        min_confidence=body.min_confidence,
        timeout=timedelta(seconds=body.timeout_seconds) if body.timeout_seconds is not None else None,
    )
    logger.debug("family_validation_requested", family=family, variant=body.variant.value)

    verdict = await validator.validate(body.value, options)
    return ValidationResponse.from_verdict(verdict, normalize_model_name(body.model_name))
