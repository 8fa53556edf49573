"""Base LLM provider abstraction layer.

This module defines the abstract base class and types for LLM providers.
All provider implementations (Groq, OpenAI) inherit from LLMProvider.

Examples:
    >>> from summarizer.core.providers import ProviderDescriptor, ProviderType
    >>> descriptor = ProviderDescriptor(
    ...     name=ProviderType.GROQ,
    ...     is_available=True,
    ...     candidate_models=("llama3-8b-8192", "llama3-70b-8192"),
    ... )

Tests:
    - tests/unit/test_providers.py::TestProviderDescriptor
    - tests/unit/test_providers.py::TestLLMResponse
    - tests/unit/test_providers.py::TestProviderErrors
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Re-export ProviderType from config for convenience
from summarizer.config import ProviderType

__all__ = [
    "AuthenticationError",
    "LLMProvider",
    "LLMResponse",
    "ProviderDescriptor",
    "ProviderError",
    "ProviderType",
    "RateLimitError",
]


class ProviderDescriptor(BaseModel):
    """Static description of one configured provider.

    Built once at startup from settings and never mutated afterwards.

    Attributes:
        name: Provider identifier
        is_available: Whether credentials are configured
        candidate_models: Models to try, most preferred first
    """

    model_config = ConfigDict(frozen=True)

    name: ProviderType = Field(description="Provider identifier")
    is_available: bool = Field(description="Whether the provider may be selected")
    candidate_models: tuple[str, ...] = Field(
        default=(),
        description="Candidate models in priority order",
    )


class LLMResponse(BaseModel):
    """Standardized LLM response wrapper.

    Attributes:
        content: The completion text
        model: Model ID used for generation
        provider: Provider used for generation

    Examples:
        >>> response = LLMResponse(
        ...     content="**Key Topics Discussed** ...",
        ...     model="llama3-8b-8192",
        ...     provider=ProviderType.GROQ,
        ... )
    """

    content: str = Field(description="Completion text")
    model: str = Field(description="Model ID used")
    provider: ProviderType = Field(description="Provider used")


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implementations perform exactly one outbound call per ``complete`` and
    never retry; fallback is decided by the caller.

    Attributes:
        provider_type: The provider type identifier
        api_key: API key for authentication
    """

    provider_type: ProviderType

    def __init__(self, api_key: str) -> None:
        """Initialize provider with API key.

        Args:
            api_key: API key for authentication.
        """
        self.api_key = api_key

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str,
        **kwargs: Any,
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            system_prompt: The system message.
            user_prompt: The user message.
            model: Model ID to use.
            **kwargs: Additional provider-specific parameters.

        Returns:
            LLMResponse containing the completion text.

        Raises:
            ProviderError: If the API call fails.
        """

    async def close(self) -> None:
        """Release any network resources held by the provider."""


class ProviderError(Exception):
    """A single completion attempt failed.

    Attributes:
        provider: The provider that raised the error
        model: The model that was being called (if known)
        status_code: HTTP status code (if applicable)
    """

    def __init__(
        self,
        message: str,
        provider: ProviderType,
        model: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize provider error.

        Args:
            message: Error message.
            provider: Provider that raised the error.
            model: Model that was being called (optional).
            status_code: HTTP status code (optional).
        """
        super().__init__(message)
        self.provider = provider
        self.model = model
        self.status_code = status_code

    @property
    def message(self) -> str:
        """The upstream error message."""
        return self.args[0]

    def __str__(self) -> str:
        """String representation of the error."""
        label = self.provider.value
        if self.model:
            label = f"{label}/{self.model}"
        parts = [f"[{label}]", self.message]
        if self.status_code:
            parts.insert(1, f"({self.status_code})")
        return " ".join(parts)


class RateLimitError(ProviderError):
    """Rate limit or quota exceeded (HTTP 429)."""

    def __init__(
        self,
        provider: ProviderType,
        model: str | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize rate limit error.

        Args:
            provider: Provider that raised the error.
            model: Model that was being called (optional).
            message: Upstream message (optional).
        """
        text = message or "Rate limit exceeded"
        super().__init__(text, provider, model=model, status_code=429)


class AuthenticationError(ProviderError):
    """Authentication failed error."""

    def __init__(self, provider: ProviderType, model: str | None = None) -> None:
        """Initialize authentication error.

        Args:
            provider: Provider that raised the error.
            model: Model that was being called (optional).
        """
        super().__init__(
            "Authentication failed - check API key",
            provider,
            model=model,
            status_code=401,
        )
