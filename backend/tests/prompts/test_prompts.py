import pytest

from llm_validation.prompts import (
    PROMPT_TEMPLATES,
    TONE,
    TOPIC,
    PromptTemplate,
    PromptVariant,
    get_template,
    select_prompt,
)
from llm_validation.prompts.general import GENERIC_TONE_EXAMPLES, tone_examples

ZERO_ARGUMENT_FAMILIES = [
    "system",
    "grammar",
    "appropriateness",
    "professional_email",
    "business_proposal",
    "code_documentation",
    "api_documentation",
    "lesson_content",
    "product_description",
    "blog_post",
]
SINGLE_ARGUMENT_FAMILIES = ["topic", "content_requirement", "tone"]


def test_all_families_are_registered():
    assert set(PROMPT_TEMPLATES) == set(ZERO_ARGUMENT_FAMILIES) | set(SINGLE_ARGUMENT_FAMILIES)


@pytest.mark.parametrize("tag", ZERO_ARGUMENT_FAMILIES)
def test_zero_argument_families_have_distinct_nonempty_variants(tag):
    texts = [select_prompt(tag, variant) for variant in PromptVariant]

    assert all(text.strip() for text in texts)
    assert len(set(texts)) == 3
    assert get_template(tag).arity == 0


@pytest.mark.parametrize("tag", SINGLE_ARGUMENT_FAMILIES)
def test_single_argument_families_embed_the_argument(tag):
    for variant in PromptVariant:
        assert "zeppelins" in select_prompt(tag, variant, "zeppelins")
    assert get_template(tag).arity == 1


def test_fast_variants_are_short():
    assert select_prompt("topic", PromptVariant.FAST, "dogs") == "Must be about dogs."
    assert select_prompt("content_requirement", "fast", "a price") == "Must contain a price."
    assert select_prompt("tone", "fast", "formal") == "Must have formal tone."


def test_variant_can_be_given_as_string():
    assert select_prompt("grammar", "accurate") == select_prompt("grammar", PromptVariant.ACCURATE)


def test_default_variant_is_balanced():
    assert select_prompt("grammar") == select_prompt("grammar", PromptVariant.BALANCED)


def test_template_object_is_accepted():
    assert select_prompt(TOPIC, PromptVariant.BALANCED, "dogs") == select_prompt("topic", "balanced", "dogs")


def test_unknown_variant_raises():
    with pytest.raises(ValueError):
        select_prompt("grammar", "ultra")


def test_unknown_family_raises():
    with pytest.raises(KeyError, match="Unknown prompt family"):
        select_prompt("limericks")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        select_prompt("topic", PromptVariant.FAST)


def test_unexpected_argument_raises():
    with pytest.raises(TypeError):
        select_prompt("grammar", PromptVariant.FAST, "dogs")


def test_selection_is_deterministic():
    assert select_prompt("tone", "accurate", "friendly") == select_prompt("tone", "accurate", "friendly")


def test_template_requires_every_variant():
    with pytest.raises(ValueError, match="missing variants"):
        PromptTemplate("partial", {PromptVariant.FAST: "x", PromptVariant.BALANCED: "y"})


def test_template_rejects_mixed_kinds():
    with pytest.raises(TypeError):
        PromptTemplate(
            "mixed",
            {PromptVariant.FAST: "x", PromptVariant.BALANCED: "y", PromptVariant.ACCURATE: lambda a: a},
        )


def test_accurate_tone_lists_known_examples():
    text = TONE.render(PromptVariant.ACCURATE, "professional")

    assert tone_examples("professional") in text
    assert tone_examples("Professional ") == tone_examples("professional")


def test_unknown_tone_uses_generic_examples():
    assert tone_examples("whimsical") == GENERIC_TONE_EXAMPLES
