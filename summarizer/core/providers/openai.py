"""OpenAI API provider implementation.

OpenAI API docs: https://platform.openai.com/docs/api-reference/chat

Tests:
    - tests/unit/test_providers.py::TestChatCompletionsProvider
"""

from summarizer.config import ProviderType
from summarizer.core.providers.chat_completions import ChatCompletionsProvider

OPENAI_BASE_URL = "https://api.openai.com/v1"


class OpenAIProvider(ChatCompletionsProvider):
    """OpenAI chat completions provider."""

    provider_type = ProviderType.OPENAI
    default_base_url = OPENAI_BASE_URL
