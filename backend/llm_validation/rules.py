"""Rule helpers: one coroutine per common check.

Each helper builds CallOptions from a built-in prompt family and runs the
validator. A blank value fails without contacting the backend.

Usage:
    verdict = await must_be_about(validator, form.description, "dogs", PromptVariant.FAST)
"""

from typing import Optional, Union

from llm_validation.core.models import ValidationVerdict
from llm_validation.core.options import CallOptions
from llm_validation.core.parser import GENERIC_FAILURE_MESSAGE
from llm_validation.core.validator import LLMValidator
from llm_validation.prompts import PromptVariant, select_prompt

Variant = Union[PromptVariant, str]


async def must_pass_llm_validation(
    validator: LLMValidator,
    value: Optional[str],
    options: Union[CallOptions, str],
    model_name: Optional[str] = None,
) -> ValidationVerdict:
    """Validate with a custom prompt (string) or fully specified CallOptions."""
    if isinstance(options, str):
        options = CallOptions(validation_prompt=options, model_name=model_name or "")
    if value is None or not value.strip():
        return ValidationVerdict.failure(options.error_message or GENERIC_FAILURE_MESSAGE)
    return await validator.validate(value, options)


async def _check(
    validator: LLMValidator,
    value: Optional[str],
    prompt: str,
    model_name: Optional[str],
    error_message: Optional[str],
) -> ValidationVerdict:
    options = CallOptions(
        validation_prompt=prompt,
        model_name=model_name or "",
        error_message=error_message,
    )
    return await must_pass_llm_validation(validator, value, options)


async def must_have_valid_grammar(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("grammar", variant), model_name, error_message)


async def must_be_appropriate(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("appropriateness", variant), model_name, error_message)


async def must_be_about(
    validator: LLMValidator,
    value: Optional[str],
    topic: str,
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("topic", variant, topic), model_name, error_message)


async def must_contain_content(
    validator: LLMValidator,
    value: Optional[str],
    required_content: str,
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(
        validator, value, select_prompt("content_requirement", variant, required_content), model_name, error_message
    )


async def must_have_tone(
    validator: LLMValidator,
    value: Optional[str],
    expected_tone: str,
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("tone", variant, expected_tone), model_name, error_message)


async def must_be_professional_email(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("professional_email", variant), model_name, error_message)


async def must_be_business_proposal(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("business_proposal", variant), model_name, error_message)


async def must_be_code_documentation(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("code_documentation", variant), model_name, error_message)


async def must_be_api_documentation(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("api_documentation", variant), model_name, error_message)


async def must_be_educational_content(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("lesson_content", variant), model_name, error_message)


async def must_be_product_description(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("product_description", variant), model_name, error_message)


async def must_be_blog_post(
    validator: LLMValidator,
    value: Optional[str],
    variant: Variant = PromptVariant.BALANCED,
    model_name: Optional[str] = None,
    error_message: Optional[str] = None,
) -> ValidationVerdict:
    return await _check(validator, value, select_prompt("blog_post", variant), model_name, error_message)
