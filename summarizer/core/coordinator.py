"""Provider fallback coordinator.

Top-level entry point of the completion orchestrator. Tries the preferred
available provider's models, then the other provider's, and returns the
first success with its provenance. When everything fails, the raised error
carries every (provider, model) attempt made for the request.

Flow:
    Start -> TryPreferred -> Done
                          -> Exhausted -> TrySecondary -> Done
                                                       -> Exhausted -> Failed

Examples:
    >>> from summarizer.core.coordinator import SummarizationCoordinator
    >>> coordinator = SummarizationCoordinator.from_settings(get_settings())
    >>> outcome = await coordinator.summarize(
    ...     SummarizationRequest(source_text="Alice: let's ship on Friday.")
    ... )
    >>> outcome.provider, outcome.model
    (<ProviderType.GROQ: 'groq'>, 'llama3-8b-8192')

Tests:
    - tests/unit/test_coordinator.py
"""

import logging
from collections.abc import Sequence

from summarizer.config import ProviderType, Settings, get_settings
from summarizer.core.errors import (
    CompletionFailure,
    InvalidInput,
    ModelsExhausted,
    NoProviderAvailable,
)
from summarizer.core.providers import ProviderDescriptor
from summarizer.core.registry import ProviderRegistry
from summarizer.core.sequencer import ModelFallbackSequencer
from summarizer.core.types import (
    CompletionOutcome,
    ProviderAttempts,
    SummarizationRequest,
)
from summarizer.prompts.summary import build_prompts

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_ORDER: tuple[ProviderType, ...] = (
    ProviderType.GROQ,
    ProviderType.OPENAI,
)


class SummarizationCoordinator:
    """Orchestrate provider and model fallback for one request at a time.

    Holds no per-request state, so one instance serves concurrent requests.

    Attributes:
        registry: Provider registry used for attempts
        provider_order: Preferred provider order
        sequencer: Model fallback sequencer over ``registry``
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        provider_order: Sequence[ProviderType] = DEFAULT_PROVIDER_ORDER,
    ) -> None:
        """Initialize coordinator.

        Args:
            registry: Provider registry.
            provider_order: Providers, most preferred first. Providers not
                listed are tried after the listed ones.
        """
        order = list(dict.fromkeys(provider_order))
        order.extend(p for p in ProviderType if p not in order)
        self.registry = registry
        self.provider_order: tuple[ProviderType, ...] = tuple(order)
        self.sequencer = ModelFallbackSequencer(registry)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SummarizationCoordinator":
        """Build a coordinator with real providers from settings."""
        return cls(
            registry=ProviderRegistry.from_settings(settings),
            provider_order=settings.get_provider_order(),
        )

    def available_providers(self) -> list[ProviderDescriptor]:
        """Available providers in preference order."""
        return [
            self.registry.get_descriptor(name)
            for name in self.provider_order
            if self.registry.is_available(name)
        ]

    async def summarize(self, request: SummarizationRequest) -> CompletionOutcome:
        """Produce one summary with provenance.

        Args:
            request: The transcript and optional custom instruction.

        Returns:
            CompletionOutcome from the first provider/model that succeeded.

        Raises:
            InvalidInput: If the transcript is blank (no call made).
            NoProviderAvailable: If no provider is configured (no call made).
            NoCandidateModels: If a selected provider has no models.
            ModelsExhausted: If the only available provider failed entirely.
            CompletionFailure: If every available provider failed entirely.
        """
        if not request.source_text or not request.source_text.strip():
            raise InvalidInput("Transcript text is empty")

        candidates = self.available_providers()
        if not candidates:
            logger.error("No AI service available")
            raise NoProviderAvailable()

        system_prompt, user_prompt = build_prompts(request)

        trails: list[ProviderAttempts] = []
        last_error: ModelsExhausted | None = None
        for index, descriptor in enumerate(candidates):
            if index > 0:
                logger.info(
                    f"{candidates[index - 1].name.value} failed, "
                    f"falling back to {descriptor.name.value}..."
                )
            else:
                logger.info(
                    f"Attempting to generate summary with {descriptor.name.value}..."
                )

            try:
                success = await self.sequencer.run(
                    descriptor, system_prompt, user_prompt
                )
            except ModelsExhausted as e:
                logger.warning(str(e))
                trails.append(e.to_provider_attempts())
                last_error = e
                continue

            logger.info(
                f"{descriptor.name.value} summary generated successfully "
                f"with {success.model}"
            )
            return CompletionOutcome(
                provider=descriptor.name,
                model=success.model,
                text=success.text,
            )

        if len(trails) == 1 and last_error is not None:
            logger.error(f"No alternative AI service available: {last_error}")
            raise last_error

        failure = CompletionFailure(trails)
        logger.error(str(failure))
        raise failure

    async def close(self) -> None:
        """Close provider clients."""
        await self.registry.close()


_coordinator: SummarizationCoordinator | None = None


def get_coordinator() -> SummarizationCoordinator:
    """Get the process-wide coordinator (built on first use).

    Provider availability is fixed at this point for the life of the process.
    """
    global _coordinator

    if _coordinator is None:
        logger.info("AI Services initialized:")
        _coordinator = SummarizationCoordinator.from_settings(get_settings())

    return _coordinator


async def close_coordinator() -> None:
    """Close the process-wide coordinator's provider clients."""
    global _coordinator

    if _coordinator is not None:
        await _coordinator.close()
        _coordinator = None
