"""General-purpose checks: grammar, appropriateness, topic, required content, tone."""

from llm_validation.prompts.base import PromptTemplate, PromptVariant, register_template

GRAMMAR = register_template(PromptTemplate(
    tag="grammar",
    description="Grammar and spelling correctness",
    variants={
        PromptVariant.FAST: "Check grammar and spelling quickly.",
        PromptVariant.BALANCED: """Check if the text has correct grammar and spelling.
Look for:
- Spelling errors
- Basic grammar mistakes
- Sentence structure issues""",
        PromptVariant.ACCURATE: """Thoroughly evaluate the text for grammar and spelling accuracy.

Check for:
- Spelling errors (including homophones)
- Grammar mistakes (subject-verb agreement, tense consistency)
- Punctuation errors
- Sentence structure and clarity
- Word usage and appropriateness

Consider context and intended meaning. Minor stylistic preferences are acceptable.""",
    },
))

APPROPRIATENESS = register_template(PromptTemplate(
    tag="appropriateness",
    description="Safe and appropriate for a general audience",
    variants={
        PromptVariant.FAST: "Must be appropriate and safe content.",
        PromptVariant.BALANCED: """Check if the content is appropriate and safe for general audiences.

Look for:
- Offensive, harmful, or inappropriate language
- Hate speech or discriminatory content
- Explicit or adult content
- Violence or threatening language
- Misinformation or harmful advice""",
        PromptVariant.ACCURATE: """Thoroughly evaluate the content for appropriateness and safety.

Reject content containing:
- Hate speech, discrimination, or harassment
- Explicit sexual content or graphic violence
- Personal attacks or bullying
- Harmful misinformation or dangerous advice
- Illegal activities or explicit instructions for harm
- Spam, scams, or fraudulent content

Accept content that:
- Discusses sensitive topics respectfully and constructively
- Contains educational or informational content
- Expresses opinions without attacking individuals or groups
- Uses appropriate language for the context

Context and intent matter: educational discussion of sensitive topics, news
reporting and factual information are generally acceptable. Judge creative
content on its overall appropriateness.""",
    },
))


def _topic_balanced(topic: str) -> str:
    return f"""Check if the text is relevant to and primarily about: {topic}

The text should:
- Focus on the specified topic
- Contain relevant information or discussion
- Not be off-topic or unrelated"""


def _topic_accurate(topic: str) -> str:
    return f"""Evaluate whether the text is genuinely about: {topic}

Validation criteria:
- Primary focus: the main subject should be {topic}
- Relevance: content should be directly related to {topic}
- Context: mentions should be substantial, not passing references
- Intent: the text should show knowledge or discussion of {topic}

Accept:
- Text that discusses, explains, or relates to {topic}
- Content that uses {topic} as a central theme
- Comparative discussions involving {topic}

Reject:
- Brief mentions without substantial discussion
- Off-topic content with tangential references
- Completely unrelated content"""


TOPIC = register_template(PromptTemplate(
    tag="topic",
    argument="topic",
    description="Primarily about the given topic",
    variants={
        PromptVariant.FAST: lambda topic: f"Must be about {topic}.",
        PromptVariant.BALANCED: _topic_balanced,
        PromptVariant.ACCURATE: _topic_accurate,
    },
))


def _content_balanced(required: str) -> str:
    return f"""Check if the text contains or discusses: {required}

The text should include:
- Direct mentions or references
- Related concepts or terminology
- Relevant information about the required content"""


def _content_accurate(required: str) -> str:
    return f"""Evaluate whether the text adequately contains or addresses: {required}

Validation criteria:
- Direct presence: explicit mentions or references
- Conceptual inclusion: related ideas, terminology, or concepts
- Contextual relevance: content should be meaningfully related
- Sufficiency: more than just passing mentions

Accept:
- Direct references to {required}
- Detailed discussions involving {required}
- Technical or specific terminology related to {required}
- Examples or cases involving {required}

Reject:
- Vague or tangential mentions
- Unrelated content
- Insufficient coverage of the required content"""


CONTENT_REQUIREMENT = register_template(PromptTemplate(
    tag="content_requirement",
    argument="required_content",
    description="Contains or discusses the given content",
    variants={
        PromptVariant.FAST: lambda required: f"Must contain {required}.",
        PromptVariant.BALANCED: _content_balanced,
        PromptVariant.ACCURATE: _content_accurate,
    },
))

TONE_EXAMPLES = {
    "professional": (
        "- Clear, respectful, business-appropriate language\n"
        "- Avoiding slang and overly casual expressions\n"
        "- Structured and well-organized presentation"
    ),
    "friendly": (
        "- Warm, welcoming language\n"
        "- Conversational but respectful\n"
        "- Positive and approachable expressions"
    ),
    "formal": (
        "- Academic or official language\n"
        "- Complete sentences and proper grammar\n"
        "- Avoiding contractions and casual expressions"
    ),
    "casual": (
        "- Relaxed, conversational language\n"
        "- May include contractions and informal expressions\n"
        "- Approachable and easy-going style"
    ),
}

GENERIC_TONE_EXAMPLES = (
    "- Language appropriate for the specified tone\n"
    "- Consistent style throughout the text\n"
    "- Context-appropriate expressions"
)


def tone_examples(tone: str) -> str:
    return TONE_EXAMPLES.get(tone.strip().lower(), GENERIC_TONE_EXAMPLES)


def _tone_balanced(tone: str) -> str:
    return f"""Check if the text has a {tone} tone.

Consider:
- Word choice and language style
- Formality level
- Emotional undertone
- Overall communication style"""


def _tone_accurate(tone: str) -> str:
    return f"""Evaluate whether the text maintains a {tone} tone throughout.

Analysis criteria:
- Language style: formal, informal, casual, technical, etc.
- Word choice: professional, friendly, authoritative, conversational
- Emotional quality: positive, neutral, serious, enthusiastic, etc.
- Consistency: the tone should hold for the whole text
- Appropriateness: the tone should match the expected style

Examples of {tone} tone:
{tone_examples(tone)}

Consider context and purpose. Minor variations are acceptable if the overall tone aligns."""


TONE = register_template(PromptTemplate(
    tag="tone",
    argument="expected_tone",
    description="Keeps the expected tone",
    variants={
        PromptVariant.FAST: lambda tone: f"Must have {tone} tone.",
        PromptVariant.BALANCED: _tone_balanced,
        PromptVariant.ACCURATE: _tone_accurate,
    },
))
