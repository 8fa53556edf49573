"""Application configuration with Pydantic Settings.

This module provides centralized configuration management using pydantic-settings.
Settings are loaded from environment variables and .env files.

Provider availability is derived from credential presence: a provider whose
API key is unset is reported unavailable and is never attempted. Both the
provider preference order and each provider's candidate model order are
plain comma-separated settings so they can be changed without code edits.

Examples:
    >>> from summarizer.config import get_settings
    >>> settings = get_settings()
    >>> settings.get_provider_order()
    [<ProviderType.GROQ: 'groq'>, <ProviderType.OPENAI: 'openai'>]

    >>> settings.get_candidate_models(ProviderType.GROQ)
    ['llama3-8b-8192', 'llama3-70b-8192', 'mixtral-8x7b-32768', 'gemma-7b-it']

Tests:
    - tests/unit/test_config.py::TestSettings
    - tests/unit/test_config.py::TestProviderOrder
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderType(str, Enum):
    """Supported LLM providers."""

    GROQ = "groq"
    OPENAI = "openai"


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


# Groq models in order of preference (small and fast first)
DEFAULT_GROQ_MODELS = "llama3-8b-8192,llama3-70b-8192,mixtral-8x7b-32768,gemma-7b-it"
DEFAULT_OPENAI_MODELS = "gpt-3.5-turbo"

# Groq first: the OpenAI account is the one more likely to be out of quota
DEFAULT_PROVIDER_ORDER = "groq,openai"


def split_csv(value: str) -> list[str]:
    """Split a comma-separated setting into trimmed, non-empty items.

    Args:
        value: Raw setting value.

    Returns:
        List of items in their original order.

    Examples:
        >>> split_csv(" a, b ,,c ")
        ['a', 'b', 'c']
    """
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings with provider configuration.

    Settings are loaded from environment variables and .env file.
    No API key is strictly required: with none configured the service still
    starts, and every summarization request fails with NoProviderAvailable.

    Attributes:
        DATABASE_URL: Database connection string (SQLite or PostgreSQL)
        GROQ_API_KEY: Groq API key
        OPENAI_API_KEY: OpenAI API key
        PROVIDER_ORDER: Preferred provider order, comma-separated
        GROQ_MODELS: Groq candidate models in priority order
        OPENAI_MODELS: OpenAI candidate models in priority order
        MAX_TOKENS: Completion token cap per request
        TEMPERATURE: Sampling temperature
        REQUEST_TIMEOUT: Transport timeout for provider calls
        MAX_UPLOAD_BYTES: Maximum accepted transcript size
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./summarizer.db",
        description="Database connection string",
    )

    # Provider API Keys
    GROQ_API_KEY: str | None = Field(
        default=None,
        description="Groq API key",
    )
    OPENAI_API_KEY: str | None = Field(
        default=None,
        description="OpenAI API key",
    )

    # Provider and model selection
    PROVIDER_ORDER: str = Field(
        default=DEFAULT_PROVIDER_ORDER,
        description="Preferred provider order (comma-separated)",
    )
    GROQ_MODELS: str = Field(
        default=DEFAULT_GROQ_MODELS,
        description="Groq candidate models in priority order (comma-separated)",
    )
    OPENAI_MODELS: str = Field(
        default=DEFAULT_OPENAI_MODELS,
        description="OpenAI candidate models in priority order (comma-separated)",
    )

    # Completion parameters
    MAX_TOKENS: int = Field(
        default=2000,
        ge=1,
        description="Maximum completion tokens",
    )
    TEMPERATURE: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    REQUEST_TIMEOUT: float = Field(
        default=60.0,
        gt=0,
        description="Provider request timeout in seconds",
    )

    # Uploads
    MAX_UPLOAD_BYTES: int = Field(
        default=50 * 1024 * 1024,
        gt=0,
        description="Maximum transcript upload size in bytes",
    )

    # Application Settings
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    DEBUG: bool = Field(
        default=True,
        description="Enable debug mode",
    )
    FRONTEND_URL: str | None = Field(
        default=None,
        description="Additional allowed CORS origin",
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL format."""
        valid_prefixes = ("sqlite", "postgresql", "postgres")
        if not any(v.startswith(prefix) for prefix in valid_prefixes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {valid_prefixes}"
            )
        return v

    @field_validator("PROVIDER_ORDER")
    @classmethod
    def validate_provider_order(cls, v: str) -> str:
        """Reject unknown or repeated provider names."""
        names = [name.lower() for name in split_csv(v)]
        known = {p.value for p in ProviderType}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise ValueError(
                f"Unknown provider(s) in PROVIDER_ORDER: {unknown}. "
                f"Expected any of: {sorted(known)}"
            )
        if len(set(names)) != len(names):
            raise ValueError("PROVIDER_ORDER must not repeat a provider")
        return ",".join(names)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite database."""
        return self.DATABASE_URL.startswith("sqlite")

    def has_provider(self, provider: ProviderType) -> bool:
        """Check if a specific provider is configured.

        Args:
            provider: The provider to check.

        Returns:
            bool: True if the provider's API key is configured.
        """
        if provider == ProviderType.GROQ:
            return bool(self.GROQ_API_KEY)
        elif provider == ProviderType.OPENAI:
            return bool(self.OPENAI_API_KEY)
        return False

    def get_api_key(self, provider: ProviderType) -> str:
        """Get API key for a specific provider.

        Args:
            provider: The provider to get the key for.

        Returns:
            str: The API key.

        Raises:
            ValueError: If the provider's API key is not configured.
        """
        if provider == ProviderType.GROQ:
            if not self.GROQ_API_KEY:
                raise ValueError("GROQ_API_KEY not configured")
            return self.GROQ_API_KEY
        elif provider == ProviderType.OPENAI:
            if not self.OPENAI_API_KEY:
                raise ValueError("OPENAI_API_KEY not configured")
            return self.OPENAI_API_KEY
        raise ValueError(f"Unknown provider: {provider}")

    def get_candidate_models(self, provider: ProviderType) -> list[str]:
        """Get the candidate models for a provider, in priority order.

        Args:
            provider: The provider.

        Returns:
            list[str]: Model IDs, possibly empty if misconfigured.
        """
        if provider == ProviderType.GROQ:
            return split_csv(self.GROQ_MODELS)
        elif provider == ProviderType.OPENAI:
            return split_csv(self.OPENAI_MODELS)
        raise ValueError(f"Unknown provider: {provider}")

    def get_provider_order(self) -> list[ProviderType]:
        """Get the full provider preference order.

        Providers missing from PROVIDER_ORDER are appended in declaration
        order, so every provider has a position.

        Returns:
            list[ProviderType]: Providers, most preferred first.
        """
        order = [ProviderType(name) for name in split_csv(self.PROVIDER_ORDER)]
        order.extend(p for p in ProviderType if p not in order)
        return order

    def get_cors_origins(self) -> list[str]:
        """Get allowed CORS origins."""
        if self.DEBUG:
            return ["*"]
        origins = ["http://localhost:3000"]
        if self.FRONTEND_URL:
            origins.append(self.FRONTEND_URL)
        return origins


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings.

    Examples:
        >>> settings = get_settings()
        >>> settings.get_provider_order()[0]
        <ProviderType.GROQ: 'groq'>
    """
    return Settings()
