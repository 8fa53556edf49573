"""Unit tests for the provider registry.

Tests for summarizer/core/registry.py.
"""

import pytest

from summarizer.config import ProviderType, Settings
from summarizer.core.errors import ProviderNotConfigured
from summarizer.core.providers import (
    GroqProvider,
    OpenAIProvider,
    ProviderDescriptor,
    ProviderError,
)
from summarizer.core.registry import ProviderRegistry, build_descriptors
from tests.fixtures.mock_providers import FakeProvider, build_registry, fail


@pytest.mark.fast
class TestBuildDescriptors:
    """Tests for descriptors derived from settings."""

    def test_availability_follows_credentials(self):
        descriptors = build_descriptors(Settings(GROQ_API_KEY="gsk-test"))
        assert descriptors[ProviderType.GROQ].is_available is True
        assert descriptors[ProviderType.OPENAI].is_available is False

    def test_candidate_models_follow_settings(self):
        descriptors = build_descriptors(Settings(OPENAI_MODELS="gpt-4o-mini,gpt-3.5-turbo"))
        assert descriptors[ProviderType.OPENAI].candidate_models == (
            "gpt-4o-mini",
            "gpt-3.5-turbo",
        )


@pytest.mark.fast
class TestFromSettings:
    """Tests for registry construction from settings."""

    def test_only_configured_providers_are_instantiated(self):
        registry = ProviderRegistry.from_settings(Settings(OPENAI_API_KEY="sk-test"))
        assert set(registry.providers) == {ProviderType.OPENAI}
        assert isinstance(registry.providers[ProviderType.OPENAI], OpenAIProvider)

    def test_settings_flow_into_providers(self):
        registry = ProviderRegistry.from_settings(
            Settings(GROQ_API_KEY="gsk-test", REQUEST_TIMEOUT=5.0, MAX_TOKENS=512)
        )
        provider = registry.providers[ProviderType.GROQ]
        assert isinstance(provider, GroqProvider)
        assert provider.timeout == 5.0
        assert provider.max_tokens == 512

    def test_no_keys_means_no_providers(self):
        registry = ProviderRegistry.from_settings(Settings())
        assert registry.providers == {}
        assert registry.availability() == {"groq": False, "openai": False}


@pytest.mark.fast
class TestRegistry:
    """Tests for registry behavior."""

    def test_available_descriptor_requires_instance(self):
        descriptors = {
            ProviderType.GROQ: ProviderDescriptor(
                name=ProviderType.GROQ, is_available=True, candidate_models=("m",)
            )
        }
        with pytest.raises(ValueError, match="without an instance"):
            ProviderRegistry(descriptors, {})

    def test_unavailable_instance_is_ignored(self):
        descriptors = {
            ProviderType.OPENAI: ProviderDescriptor(
                name=ProviderType.OPENAI, is_available=False
            )
        }
        registry = ProviderRegistry(
            descriptors, {ProviderType.OPENAI: FakeProvider(ProviderType.OPENAI)}
        )
        assert registry.providers == {}
        assert registry.is_available(ProviderType.OPENAI) is False

    async def test_attempt_returns_text(self):
        registry, fakes = build_registry({ProviderType.GROQ: {"m1": "hello"}})
        text = await registry.attempt(ProviderType.GROQ, "m1", "sys", "user")
        assert text == "hello"
        assert fakes[ProviderType.GROQ].calls == [
            {"model": "m1", "system_prompt": "sys", "user_prompt": "user"}
        ]

    async def test_attempt_on_unavailable_provider(self):
        registry, fakes = build_registry({ProviderType.GROQ: {"m1": "hello"}})
        with pytest.raises(ProviderNotConfigured):
            await registry.attempt(ProviderType.OPENAI, "gpt-3.5-turbo", "sys", "user")
        assert fakes[ProviderType.OPENAI].calls == []

    async def test_attempt_tags_error_with_model(self):
        registry, _ = build_registry(
            {ProviderType.GROQ: {"m1": fail(ProviderType.GROQ, "overloaded")}}
        )
        with pytest.raises(ProviderError) as exc_info:
            await registry.attempt(ProviderType.GROQ, "m1", "sys", "user")
        assert exc_info.value.model == "m1"
        assert exc_info.value.message == "overloaded"

    async def test_attempt_wraps_untyped_errors(self):
        registry, _ = build_registry(
            {ProviderType.OPENAI: {"gpt-3.5-turbo": RuntimeError("socket closed")}}
        )
        with pytest.raises(ProviderError) as exc_info:
            await registry.attempt(ProviderType.OPENAI, "gpt-3.5-turbo", "sys", "user")
        error = exc_info.value
        assert error.provider == ProviderType.OPENAI
        assert error.model == "gpt-3.5-turbo"
        assert error.message == "socket closed"
        assert isinstance(error.__cause__, RuntimeError)

    async def test_close_closes_providers(self):
        registry, fakes = build_registry(
            {ProviderType.GROQ: {"m1": "x"}, ProviderType.OPENAI: {"m2": "y"}}
        )
        await registry.close()
        assert fakes[ProviderType.GROQ].closed
        assert fakes[ProviderType.OPENAI].closed
