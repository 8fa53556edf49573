"""OpenAI-compatible chat completions provider.

Groq and OpenAI expose the same ``POST /chat/completions`` contract, so both
concrete providers share this implementation and differ only in base URL
and provider type.

Examples:
    >>> from summarizer.core.providers.groq import GroqProvider
    >>> provider = GroqProvider(api_key="gsk_...")
    >>> response = await provider.complete(
    ...     system_prompt="You summarize meetings.",
    ...     user_prompt="Please summarize this meeting transcript: ...",
    ...     model="llama3-8b-8192",
    ... )

Tests:
    - tests/unit/test_providers.py::TestChatCompletionsProvider
"""

import logging
from typing import Any

import httpx

from summarizer.core.providers.base import (
    AuthenticationError,
    LLMProvider,
    LLMResponse,
    ProviderError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7


class ChatCompletionsProvider(LLMProvider):
    """Provider speaking the OpenAI chat/completions wire format.

    Subclasses set ``provider_type`` and ``default_base_url``.

    Attributes:
        api_key: Bearer token
        base_url: API base URL
        timeout: Request timeout in seconds
        max_tokens: Completion token cap
        temperature: Sampling temperature
    """

    default_base_url: str

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float = 60.0,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize provider.

        Args:
            api_key: API key.
            base_url: API base URL (defaults to the provider's public endpoint).
            timeout: Request timeout in seconds.
            max_tokens: Completion token cap.
            temperature: Sampling temperature.
            transport: Optional httpx transport (used by tests).
        """
        super().__init__(api_key)
        self.base_url = base_url or self.default_base_url
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get httpx async client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _handle_error(self, response: httpx.Response, model: str) -> None:
        """Convert HTTP errors to provider errors.

        Args:
            response: The HTTP response.
            model: The model that was called.

        Raises:
            AuthenticationError: For 401 errors.
            RateLimitError: For 429 errors.
            ProviderError: For other errors.
        """
        try:
            error = response.json().get("error")
        except (ValueError, AttributeError):
            error = None
        if isinstance(error, dict):
            message = error.get("message") or response.text
        else:
            message = error if isinstance(error, str) else response.text

        if response.status_code == 401:
            raise AuthenticationError(self.provider_type, model=model)
        elif response.status_code == 429:
            raise RateLimitError(self.provider_type, model=model, message=message or None)

        raise ProviderError(
            message=message or f"HTTP {response.status_code}",
            provider=self.provider_type,
            model=model,
            status_code=response.status_code,
        )

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
            model: Model ID (e.g., "llama3-8b-8192").
            **kwargs: Additional parameters:
                - temperature: Sampling temperature (0.0-2.0)
                - max_tokens: Maximum output tokens

        Returns:
            LLMResponse containing the completion text.

        Raises:
            ProviderError: If the API call fails or returns no content.
        """
        payload: dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": kwargs.get("max_tokens", self.max_tokens),
            "temperature": kwargs.get("temperature", self.temperature),
        }

        try:
            response = await self.client.post("/chat/completions", json=payload)
        except httpx.HTTPError as e:
            logger.error(f"{self.provider_type.value} HTTP error on {model}: {e}")
            raise ProviderError(
                message=str(e) or e.__class__.__name__,
                provider=self.provider_type,
                model=model,
            ) from e

        if response.status_code != 200:
            self._handle_error(response, model)

        try:
            raw_content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                message=f"Malformed completion response: {response.text[:200]}",
                provider=self.provider_type,
                model=model,
            ) from e

        if not isinstance(raw_content, str) or not raw_content.strip():
            raise ProviderError(
                message="Provider returned an empty completion",
                provider=self.provider_type,
                model=model,
            )

        return LLMResponse(
            content=raw_content,
            model=model,
            provider=self.provider_type,
        )
