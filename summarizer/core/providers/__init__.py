"""LLM Provider abstraction and implementations.

Re-exports base classes and provider implementations for convenient imports.
"""

# Base classes (import from base module)
from summarizer.core.providers.base import (
    AuthenticationError,
    LLMProvider,
    LLMResponse,
    ProviderDescriptor,
    ProviderError,
    ProviderType,
    RateLimitError,
)

# Provider implementations
from summarizer.core.providers.chat_completions import ChatCompletionsProvider
from summarizer.core.providers.groq import GroqProvider
from summarizer.core.providers.openai import OpenAIProvider

__all__ = [
    # Base classes
    "AuthenticationError",
    "LLMProvider",
    "LLMResponse",
    "ProviderDescriptor",
    "ProviderError",
    "ProviderType",
    "RateLimitError",
    # Implementations
    "ChatCompletionsProvider",
    "GroqProvider",
    "OpenAIProvider",
]
