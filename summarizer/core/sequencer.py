"""Model fallback sequencer.

Tries a provider's candidate models one at a time, in priority order, and
stops at the first success. Failures are accumulated so the caller can see
every model that was tried and why it failed.

Examples:
    >>> sequencer = ModelFallbackSequencer(registry)
    >>> success = await sequencer.run(descriptor, system_prompt, user_prompt)
    >>> success.model
    'llama3-70b-8192'

Tests:
    - tests/unit/test_sequencer.py
"""

import logging
from typing import Protocol

from summarizer.config import ProviderType
from summarizer.core.errors import ModelsExhausted, NoCandidateModels
from summarizer.core.providers import ProviderDescriptor, ProviderError
from summarizer.core.types import ModelAttempt, ModelSuccess

logger = logging.getLogger(__name__)


class CompletionAttempter(Protocol):
    """Anything exposing the registry's ``attempt`` call."""

    async def attempt(
        self,
        provider: ProviderType,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str: ...


class ModelFallbackSequencer:
    """Sequential first-success-wins over a provider's candidate models."""

    def __init__(self, registry: CompletionAttempter) -> None:
        self.registry = registry

    async def run(
        self,
        descriptor: ProviderDescriptor,
        system_prompt: str,
        user_prompt: str,
    ) -> ModelSuccess:
        """Try each candidate model until one succeeds.

        Args:
            descriptor: The provider and its candidate models.
            system_prompt: The system message.
            user_prompt: The user message.

        Returns:
            ModelSuccess with the winning model, its text and the failures
            that preceded it.

        Raises:
            NoCandidateModels: If the candidate list is empty (no call made).
            ModelsExhausted: If every candidate failed.
        """
        provider = descriptor.name
        if not descriptor.candidate_models:
            raise NoCandidateModels(provider)

        failures: list[ModelAttempt] = []
        for model in descriptor.candidate_models:
            logger.info(f"Trying {provider.value} model: {model}")
            try:
                text = await self.registry.attempt(
                    provider, model, system_prompt, user_prompt
                )
            except ProviderError as e:
                logger.warning(f"{provider.value} model {model} failed: {e.message}")
                failures.append(ModelAttempt(model=model, error_message=e.message))
                continue

            logger.info(f"Successfully used {provider.value} model: {model}")
            return ModelSuccess(model=model, text=text, failed_attempts=tuple(failures))

        raise ModelsExhausted(provider, failures)
