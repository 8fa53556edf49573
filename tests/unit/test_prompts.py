"""Unit tests for meeting summary prompts.

Tests for summarizer/prompts/summary.py.
"""

import pytest

from summarizer.core.types import SummarizationRequest
from summarizer.prompts.summary import (
    DEFAULT_INSTRUCTION,
    DEFAULT_SECTIONS,
    build_prompts,
    get_prompt,
    get_system_prompt,
)


@pytest.mark.fast
class TestSystemPrompt:
    """Tests for the system prompt."""

    def test_lists_default_sections(self):
        prompt = get_system_prompt()
        for section in DEFAULT_SECTIONS:
            assert f"**{section}**" in prompt

    def test_mentions_custom_instructions(self):
        assert "custom instructions" in get_system_prompt()


@pytest.mark.fast
class TestUserPrompt:
    """Tests for user prompt construction."""

    def test_default_format(self):
        prompt = get_prompt("Alice: hi")
        assert prompt == f"{DEFAULT_INSTRUCTION}:\nAlice: hi"
        assert "Key Topics Discussed, Action Items, Decisions Made, Next Steps" in prompt

    @pytest.mark.parametrize("instruction", ["", "   ", "\n"])
    def test_blank_instruction_uses_default(self, instruction):
        assert get_prompt("text", instruction) == get_prompt("text")

    def test_custom_instruction(self):
        prompt = get_prompt("Alice: hi", "  Bullet points only  ")
        assert prompt == (
            "Custom instructions: Bullet points only\n\n"
            "Meeting transcript to summarize:\nAlice: hi"
        )

    def test_transcript_braces_are_not_formatted(self):
        assert "{not a field}" in get_prompt("{not a field}", "{also not}")


@pytest.mark.fast
class TestBuildPrompts:
    """Tests for the (system, user) pair."""

    def test_pair(self):
        request = SummarizationRequest(source_text="text", custom_instruction="Short")
        system_prompt, user_prompt = build_prompts(request)
        assert system_prompt == get_system_prompt()
        assert user_prompt == get_prompt("text", "Short")
