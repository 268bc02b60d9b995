"""Document-type checks: business, technical, educational and marketing content."""

from llm_validation.prompts.base import PromptTemplate, PromptVariant, register_template

PROFESSIONAL_EMAIL = register_template(PromptTemplate(
    tag="professional_email",
    description="Professional business email",
    variants={
        PromptVariant.FAST: "Must be professional business email.",
        PromptVariant.BALANCED: """Check if this is a professional business email.
Requirements:
- Professional tone and language
- Clear subject or purpose
- Appropriate greeting and closing
- Business-appropriate content""",
        PromptVariant.ACCURATE: """Evaluate whether this text represents a professional business email.

Professional email criteria:
- Structure: clear subject line, greeting, body, and closing
- Tone: professional, respectful, and business-appropriate
- Language: proper grammar, spelling, and punctuation
- Content: relevant business communication
- Clarity: clear purpose and actionable information

Accept internal communications, client or vendor correspondence, and
professional inquiries or responses.

Reject personal or casual messages, spam or promotional content,
unprofessional language, and unclear communications.""",
    },
))

BUSINESS_PROPOSAL = register_template(PromptTemplate(
    tag="business_proposal",
    description="Well-structured business proposal",
    variants={
        PromptVariant.FAST: "Must be business proposal format.",
        PromptVariant.BALANCED: """Check if this is a well-structured business proposal.
Should include:
- Clear problem statement or opportunity
- Proposed solution or approach
- Timeline or implementation plan
- Budget or cost considerations""",
        PromptVariant.ACCURATE: """Evaluate whether this text represents a comprehensive business proposal.

Essential components:
- Executive summary or introduction
- Problem statement or business need
- Proposed solution with clear benefits
- Implementation timeline and milestones
- Budget, costs, or resource requirements
- Risk assessment or mitigation strategies
- Clear next steps or call to action

Quality indicators:
- Professional presentation and structure
- Data-driven arguments and justifications
- Realistic timelines and budgets
- Clear value proposition
- Addresses potential concerns or objections""",
    },
))

CODE_DOCUMENTATION = register_template(PromptTemplate(
    tag="code_documentation",
    description="Clear, complete code documentation",
    variants={
        PromptVariant.FAST: "Must be clear code documentation.",
        PromptVariant.BALANCED: """Check if this is clear and helpful code documentation.
Should include:
- Clear explanation of what the code does
- Parameter descriptions (if applicable)
- Return value explanation (if applicable)
- Usage examples or important notes""",
        PromptVariant.ACCURATE: """Evaluate the quality and completeness of this code documentation.

Documentation criteria:
- Purpose: what the code or function does
- Parameters: every parameter, its type, and usage
- Return values: what is returned and when
- Examples: practical usage examples when helpful
- Edge cases: limitations, exceptions, or special cases
- Clarity: easy to understand for the target audience

Quality indicators:
- Accurate and up-to-date information
- Comprehensive coverage of functionality
- Clear, concise writing with proper technical terminology""",
    },
))

API_DOCUMENTATION = register_template(PromptTemplate(
    tag="api_documentation",
    description="Complete API endpoint documentation",
    variants={
        PromptVariant.FAST: "Must be API documentation.",
        PromptVariant.BALANCED: """Check if this is proper API documentation.
Should include:
- Endpoint or method description
- Request/response format
- Parameters and their requirements
- Error codes or status information""",
        PromptVariant.ACCURATE: """Evaluate the completeness and quality of this API documentation.

Required elements:
- Endpoint URL and HTTP method
- Clear description of functionality
- Request format (headers, body, parameters)
- Response format and structure
- Status codes and error handling
- Authentication requirements (if applicable)
- Rate limiting information (if applicable)

Quality criteria:
- Complete and accurate technical details
- Clear examples of requests and responses
- Error scenarios and troubleshooting
- Proper formatting and structure""",
    },
))

LESSON_CONTENT = register_template(PromptTemplate(
    tag="lesson_content",
    description="Structured educational lesson content",
    variants={
        PromptVariant.FAST: "Must be educational lesson content.",
        PromptVariant.BALANCED: """Check if this is structured educational content.
Should include:
- Clear learning objectives
- Organized presentation of information
- Examples or illustrations
- Appropriate level for target audience""",
        PromptVariant.ACCURATE: """Evaluate the quality and structure of this educational content.

Educational criteria:
- Learning objectives: clear goals and outcomes
- Content organization: logical flow and structure
- Clarity: appropriate language for the target audience
- Examples: relevant illustrations or case studies
- Engagement: interactive or thought-provoking elements
- Assessment: questions, exercises, or review materials
- Accuracy: factual correctness and current information

Quality indicators:
- Progressive difficulty and concept building
- Practical application opportunities
- Clear explanations of complex concepts""",
    },
))

PRODUCT_DESCRIPTION = register_template(PromptTemplate(
    tag="product_description",
    description="Engaging product description",
    variants={
        PromptVariant.FAST: "Must be engaging product description.",
        PromptVariant.BALANCED: """Check if this is an effective product description.
Should include:
- Key product features and benefits
- Clear and engaging language
- Target audience appeal
- Call to action or purchasing information""",
        PromptVariant.ACCURATE: """Evaluate the effectiveness of this product description for marketing purposes.

Marketing criteria:
- Product features: what the product is and does
- Benefits: how it solves problems or adds value
- Target audience: language and appeal suited to buyers
- Unique selling points: what makes the product special
- Technical details: relevant specifications when needed
- Call to action: clear next steps for interested customers

Quality indicators:
- Compelling and persuasive language
- Accurate product information
- Professional, brand-consistent presentation""",
    },
))

BLOG_POST = register_template(PromptTemplate(
    tag="blog_post",
    description="Well-written blog post",
    variants={
        PromptVariant.FAST: "Must be well-written blog post.",
        PromptVariant.BALANCED: """Check if this is a quality blog post.
Should include:
- Engaging title or headline
- Clear introduction and conclusion
- Organized main content
- Appropriate tone for the topic""",
        PromptVariant.ACCURATE: """Evaluate the quality and structure of this blog post content.

Blog post criteria:
- Headline: attention-grabbing and descriptive title
- Introduction: a hook that sets expectations
- Structure: clear organization with headers, paragraphs, lists
- Content quality: valuable, informative, or entertaining information
- Voice and tone: consistent and appropriate for the audience
- Conclusion: an ending that reinforces the main points

Quality indicators:
- Original, well-researched content
- Scannable formatting
- Clear value for readers""",
    },
))
