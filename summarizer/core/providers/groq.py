"""Groq API provider implementation.

Groq serves open-weight models (Llama, Mixtral, Gemma) behind an
OpenAI-compatible endpoint.

Groq API docs: https://console.groq.com/docs

Tests:
    - tests/unit/test_providers.py::TestChatCompletionsProvider
"""

from summarizer.config import ProviderType
from summarizer.core.providers.chat_completions import ChatCompletionsProvider

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


class GroqProvider(ChatCompletionsProvider):
    """Groq chat completions provider."""

    provider_type = ProviderType.GROQ
    default_base_url = GROQ_BASE_URL
