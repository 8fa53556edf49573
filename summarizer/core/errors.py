"""Orchestration error taxonomy.

Per-attempt failures are ``ProviderError`` (see ``summarizer.core.providers``).
Everything a caller of the coordinator can receive derives from
``SummarizationError``; terminal errors carry the complete attempt trail.

Tests:
    - tests/unit/test_errors.py
"""

from summarizer.config import ProviderType
from summarizer.core.types import ModelAttempt, ProviderAttempts

__all__ = [
    "CompletionFailure",
    "ConfigurationError",
    "InvalidInput",
    "ModelsExhausted",
    "NoCandidateModels",
    "NoProviderAvailable",
    "ProviderNotConfigured",
    "SummarizationError",
]


class SummarizationError(Exception):
    """Base class for orchestration errors."""


class InvalidInput(SummarizationError):
    """The request cannot be summarized as given."""


class ConfigurationError(SummarizationError):
    """The service is configured in a way that prevents summarization."""


class NoProviderAvailable(ConfigurationError):
    """No provider has credentials configured."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "No AI service available. Please configure GROQ_API_KEY or OPENAI_API_KEY."
        )


class NoCandidateModels(ConfigurationError):
    """A provider was selected but has no candidate models."""

    def __init__(self, provider: ProviderType) -> None:
        super().__init__(f"No candidate models configured for provider {provider.value}")
        self.provider = provider


class ProviderNotConfigured(ConfigurationError):
    """An attempt was requested on a provider that is not available."""

    def __init__(self, provider: ProviderType) -> None:
        super().__init__(f"Provider {provider.value} is not configured")
        self.provider = provider


class ModelsExhausted(SummarizationError):
    """Every candidate model of one provider failed.

    Attributes:
        provider: The exhausted provider
        attempts: Every failed attempt, in the order tried
    """

    def __init__(self, provider: ProviderType, attempts: list[ModelAttempt]) -> None:
        self.provider = provider
        self.attempts = tuple(attempts)
        super().__init__(
            f"All models failed for {provider.value}: "
            + "; ".join(str(attempt) for attempt in self.attempts)
        )

    def to_provider_attempts(self) -> ProviderAttempts:
        """Express this failure as one provider's attempt trail."""
        return ProviderAttempts(provider=self.provider, models_tried=self.attempts)


class CompletionFailure(SummarizationError):
    """Every model of every attempted provider failed.

    Attributes:
        attempted_providers: Per-provider attempt trails, in the order tried
    """

    def __init__(self, attempted_providers: list[ProviderAttempts]) -> None:
        self.attempted_providers = tuple(attempted_providers)
        super().__init__(
            "Failed to generate summary with available AI services: "
            + ", ".join(str(trail) for trail in self.attempted_providers)
        )

    @property
    def attempt_count(self) -> int:
        """Total number of model attempts across providers."""
        return sum(len(trail.models_tried) for trail in self.attempted_providers)
