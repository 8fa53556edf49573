"""Provider registry.

Knows which providers are usable and exposes a single ``attempt`` call per
provider. Availability is fixed when the registry is built.

Examples:
    >>> from summarizer.core.registry import ProviderRegistry
    >>> registry = ProviderRegistry.from_settings(get_settings())
    >>> registry.is_available(ProviderType.GROQ)
    True
    >>> text = await registry.attempt(
    ...     ProviderType.GROQ, "llama3-8b-8192", system_prompt, user_prompt
    ... )

Tests:
    - tests/unit/test_registry.py
"""

import logging
from collections.abc import Mapping

from summarizer.config import ProviderType, Settings
from summarizer.core.errors import ProviderNotConfigured
from summarizer.core.providers import (
    GroqProvider,
    LLMProvider,
    OpenAIProvider,
    ProviderDescriptor,
    ProviderError,
)

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[ProviderType, type[LLMProvider]] = {
    ProviderType.GROQ: GroqProvider,
    ProviderType.OPENAI: OpenAIProvider,
}


def build_descriptors(settings: Settings) -> dict[ProviderType, ProviderDescriptor]:
    """Describe every known provider from settings.

    Args:
        settings: Application settings.

    Returns:
        Descriptor per provider type.
    """
    return {
        provider: ProviderDescriptor(
            name=provider,
            is_available=settings.has_provider(provider),
            candidate_models=tuple(settings.get_candidate_models(provider)),
        )
        for provider in ProviderType
    }


class ProviderRegistry:
    """Route completion attempts to configured providers.

    Attributes:
        descriptors: Descriptor per provider type
        providers: Provider instances for available providers only
    """

    def __init__(
        self,
        descriptors: Mapping[ProviderType, ProviderDescriptor],
        providers: Mapping[ProviderType, LLMProvider],
    ) -> None:
        """Initialize registry.

        Args:
            descriptors: Descriptor per provider type.
            providers: Provider instances. A descriptor marked available
                must have an instance here.
        """
        self.descriptors = dict(descriptors)
        self.providers = {
            name: provider
            for name, provider in providers.items()
            if name in self.descriptors and self.descriptors[name].is_available
        }

        missing = [
            name.value
            for name, descriptor in self.descriptors.items()
            if descriptor.is_available and name not in self.providers
        ]
        if missing:
            raise ValueError(f"Available providers without an instance: {missing}")

        for name, descriptor in self.descriptors.items():
            logger.info(
                f"- {name.value}: "
                f"{'Available' if descriptor.is_available else 'Not configured'}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderRegistry":
        """Build a registry with real providers for every configured key.

        Args:
            settings: Application settings with API keys.

        Returns:
            ProviderRegistry
        """
        descriptors = build_descriptors(settings)
        providers: dict[ProviderType, LLMProvider] = {}
        for name, descriptor in descriptors.items():
            if not descriptor.is_available:
                continue
            providers[name] = PROVIDER_CLASSES[name](
                api_key=settings.get_api_key(name),
                timeout=settings.REQUEST_TIMEOUT,
                max_tokens=settings.MAX_TOKENS,
                temperature=settings.TEMPERATURE,
            )
        return cls(descriptors, providers)

    def is_available(self, provider: ProviderType) -> bool:
        """Check whether a provider may be selected."""
        descriptor = self.descriptors.get(provider)
        return bool(descriptor and descriptor.is_available)

    def get_descriptor(self, provider: ProviderType) -> ProviderDescriptor:
        """Get a provider's descriptor.

        Raises:
            ProviderNotConfigured: If the provider is unknown to the registry.
        """
        if provider not in self.descriptors:
            raise ProviderNotConfigured(provider)
        return self.descriptors[provider]

    def availability(self) -> dict[str, bool]:
        """Availability keyed by provider name (for health reporting)."""
        return {
            name.value: descriptor.is_available
            for name, descriptor in self.descriptors.items()
        }

    async def attempt(
        self,
        provider: ProviderType,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Make one completion attempt.

        Args:
            provider: Provider to call.
            model: Model to call.
            system_prompt: The system message.
            user_prompt: The user message.

        Returns:
            Completion text.

        Raises:
            ProviderNotConfigured: If the provider is unavailable (no call made).
            ProviderError: If the call fails; always tagged with ``model``.
        """
        if not self.is_available(provider):
            raise ProviderNotConfigured(provider)

        client = self.providers[provider]
        try:
            response = await client.complete(
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                model=model,
            )
        except ProviderError as e:
            if e.model is None:
                e.model = model
            raise
        except Exception as e:
            raise ProviderError(
                message=str(e) or e.__class__.__name__,
                provider=provider,
                model=model,
            ) from e

        return response.content

    async def close(self) -> None:
        """Close all provider clients."""
        for provider in self.providers.values():
            await provider.close()
