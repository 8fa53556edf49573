"""Meeting summary prompt templates.

One builder serves every provider: the prompt text does not depend on which
provider or model ends up answering.

Examples:
    >>> from summarizer.prompts.summary import build_prompts
    >>> system_prompt, user_prompt = build_prompts(request)

Tests:
    - tests/unit/test_prompts.py
"""

from summarizer.core.types import SummarizationRequest

DEFAULT_SECTIONS = (
    "Key Topics Discussed",
    "Action Items",
    "Decisions Made",
    "Next Steps",
)

SYSTEM_PROMPT = """You are an AI assistant specialized in creating clear, concise meeting summaries.
Your task is to analyze meeting transcripts and provide structured summaries that are easy to read and actionable.

Default format:
- **Key Topics Discussed**: Main subjects covered in the meeting
- **Action Items**: Specific tasks assigned with responsible parties
- **Decisions Made**: Important conclusions or resolutions
- **Next Steps**: Follow-up actions or future meetings planned

If the user provides custom instructions, follow those instead of the default format."""

DEFAULT_INSTRUCTION = (
    "Please summarize this meeting transcript using the default format "
    f"({', '.join(DEFAULT_SECTIONS)})"
)

DEFAULT_PROMPT_TEMPLATE = """{instruction}:
{transcript}"""

CUSTOM_PROMPT_TEMPLATE = """Custom instructions: {instruction}

Meeting transcript to summarize:
{transcript}"""


def get_system_prompt() -> str:
    """Get the system prompt for meeting summaries."""
    return SYSTEM_PROMPT


def get_prompt(transcript: str, custom_instruction: str = "") -> str:
    """Get the user prompt for a transcript.

    Args:
        transcript: The meeting transcript text
        custom_instruction: Caller's instruction; blank selects the default format

    Returns:
        Formatted user prompt
    """
    instruction = custom_instruction.strip()
    if instruction:
        return CUSTOM_PROMPT_TEMPLATE.format(
            instruction=instruction, transcript=transcript
        )
    return DEFAULT_PROMPT_TEMPLATE.format(
        instruction=DEFAULT_INSTRUCTION, transcript=transcript
    )


def build_prompts(request: SummarizationRequest) -> tuple[str, str]:
    """Build the (system, user) prompt pair for a request."""
    return get_system_prompt(), get_prompt(
        request.source_text, request.custom_instruction
    )
