"""Built-in prompt families with fast / balanced / accurate variants.

Usage:
    from llm_validation.prompts import PromptVariant, select_prompt

    prompt = select_prompt("topic", PromptVariant.ACCURATE, "dogs")
"""

from llm_validation.prompts.base import (
    PROMPT_TEMPLATES,
    PromptTemplate,
    PromptVariant,
    get_template,
    register_template,
    select_prompt,
)
from llm_validation.prompts.system import SYSTEM
from llm_validation.prompts.general import APPROPRIATENESS, CONTENT_REQUIREMENT, GRAMMAR, TONE, TOPIC
from llm_validation.prompts.documents import (
    API_DOCUMENTATION,
    BLOG_POST,
    BUSINESS_PROPOSAL,
    CODE_DOCUMENTATION,
    LESSON_CONTENT,
    PRODUCT_DESCRIPTION,
    PROFESSIONAL_EMAIL,
)

__all__ = [
    "PROMPT_TEMPLATES",
    "PromptTemplate",
    "PromptVariant",
    "get_template",
    "register_template",
    "select_prompt",
    "SYSTEM",
    "GRAMMAR",
    "APPROPRIATENESS",
    "TOPIC",
    "CONTENT_REQUIREMENT",
    "TONE",
    "PROFESSIONAL_EMAIL",
    "BUSINESS_PROPOSAL",
    "CODE_DOCUMENTATION",
    "API_DOCUMENTATION",
    "LESSON_CONTENT",
    "PRODUCT_DESCRIPTION",
    "BLOG_POST",
]
