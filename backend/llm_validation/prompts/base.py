"""Quality-variant selection for built-in prompt families.

A family maps each PromptVariant to either a literal string or a function of
one argument. Selection is a table lookup; there is no other logic.
"""

from enum import Enum
from typing import Callable, Mapping, Optional, Union

PromptText = Union[str, Callable[[str], str]]

_NO_ARGUMENT = object()


class PromptVariant(str, Enum):
    """Fidelity/cost level of a prompt. Ordered fast < balanced < accurate by convention."""

    FAST = "fast"          # Minimal tokens, high-throughput filtering
    BALANCED = "balanced"  # Recommended default
    ACCURATE = "accurate"  # Most detailed criteria, highest token cost


class PromptTemplate:
    """One prompt family with a text per quality variant.

    Args:
        tag: Registry key, e.g. ``"topic"``.
        variants: Text for every PromptVariant. Single-argument families
            provide callables instead of strings.
        description: Short human-readable summary.
        argument: Name of the argument for single-argument families.
    """

    def __init__(
        self,
        tag: str,
        variants: Mapping[PromptVariant, PromptText],
        description: str = "",
        argument: Optional[str] = None,
    ):
        missing = [v.value for v in PromptVariant if v not in variants]
        if missing:
            raise ValueError(f"Prompt family '{tag}' is missing variants: {', '.join(missing)}")
        expected_callable = argument is not None
        for variant, text in variants.items():
            if callable(text) != expected_callable:
                kind = "callables" if expected_callable else "strings"
                raise TypeError(f"Prompt family '{tag}' must provide {kind} (variant '{variant.value}')")

        self.tag = tag
        self.description = description
        self.argument = argument
        self._variants = dict(variants)

    @property
    def arity(self) -> int:
        return 0 if self.argument is None else 1

    def render(self, variant: Union[PromptVariant, str], argument=_NO_ARGUMENT) -> str:
        """Return the text for ``variant``.

        Raises:
            ValueError: ``variant`` is not a PromptVariant value.
            TypeError: the argument is missing for a single-argument family, or
                given to a zero-argument one.
        """
        key = PromptVariant(variant)
        text = self._variants[key]
        if self.argument is None:
            if argument is not _NO_ARGUMENT:
                raise TypeError(f"Prompt family '{self.tag}' takes no argument")
            return text
        if argument is _NO_ARGUMENT:
            raise TypeError(f"Prompt family '{self.tag}' requires the '{self.argument}' argument")
        return text(argument)

    def __repr__(self) -> str:
        return f"PromptTemplate(tag={self.tag!r}, arity={self.arity})"


PROMPT_TEMPLATES: dict[str, PromptTemplate] = {}


def register_template(template: PromptTemplate) -> PromptTemplate:
    PROMPT_TEMPLATES[template.tag] = template
    return template


def get_template(tag: str) -> PromptTemplate:
    try:
        return PROMPT_TEMPLATES[tag]
    except KeyError:
        raise KeyError(f"Unknown prompt family '{tag}'") from None


def select_prompt(
    family: Union[PromptTemplate, str],
    variant: Union[PromptVariant, str] = PromptVariant.BALANCED,
    argument=_NO_ARGUMENT,
) -> str:
    """Return the instruction text of ``family`` at the requested quality variant."""
    template = family if isinstance(family, PromptTemplate) else get_template(family)
    return template.render(variant, argument)
