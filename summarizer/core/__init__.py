"""Core components: providers, orchestration types and errors."""

from summarizer.core.errors import (
    CompletionFailure,
    ConfigurationError,
    InvalidInput,
    ModelsExhausted,
    NoCandidateModels,
    NoProviderAvailable,
    ProviderNotConfigured,
    SummarizationError,
)
from summarizer.core.providers import (
    AuthenticationError,
    LLMProvider,
    LLMResponse,
    ProviderDescriptor,
    ProviderError,
    ProviderType,
    RateLimitError,
)
from summarizer.core.types import (
    CompletionOutcome,
    ModelAttempt,
    ModelSuccess,
    ProviderAttempts,
    SummarizationRequest,
)

__all__ = [
    "AuthenticationError",
    "CompletionFailure",
    "CompletionOutcome",
    "ConfigurationError",
    "InvalidInput",
    "LLMProvider",
    "LLMResponse",
    "ModelAttempt",
    "ModelSuccess",
    "ModelsExhausted",
    "NoCandidateModels",
    "NoProviderAvailable",
    "ProviderAttempts",
    "ProviderDescriptor",
    "ProviderError",
    "ProviderNotConfigured",
    "ProviderType",
    "RateLimitError",
    "SummarizationError",
    "SummarizationRequest",
]
