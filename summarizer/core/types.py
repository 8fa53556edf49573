"""Value types exchanged by the completion orchestrator.

All types are frozen: one request yields exactly one outcome (or one error)
and nothing is mutated after creation.

Tests:
    - tests/unit/test_coordinator.py
    - tests/unit/test_sequencer.py
"""

from pydantic import BaseModel, ConfigDict, Field

from summarizer.config import ProviderType


class SummarizationRequest(BaseModel):
    """Input to one orchestration call.

    Attributes:
        source_text: Extracted transcript text
        custom_instruction: Caller's instruction; empty selects the default format
    """

    model_config = ConfigDict(frozen=True)

    source_text: str
    custom_instruction: str = ""


class ModelAttempt(BaseModel):
    """One failed model attempt."""

    model_config = ConfigDict(frozen=True)

    model: str
    error_message: str

    def __str__(self) -> str:
        return f"{self.model}: {self.error_message}"


class ProviderAttempts(BaseModel):
    """Every model tried on one provider, in order."""

    model_config = ConfigDict(frozen=True)

    provider: ProviderType
    models_tried: tuple[ModelAttempt, ...] = ()

    def __str__(self) -> str:
        tried = "; ".join(str(attempt) for attempt in self.models_tried)
        return f"{self.provider.value} [{tried}]"


class ModelSuccess(BaseModel):
    """Result of a successful model sequence on one provider.

    Attributes:
        model: The model that produced the text
        text: Completion text
        failed_attempts: Earlier candidates that failed before ``model``
    """

    model_config = ConfigDict(frozen=True)

    model: str
    text: str
    failed_attempts: tuple[ModelAttempt, ...] = Field(default=())


class CompletionOutcome(BaseModel):
    """Successful orchestration result with provenance.

    Attributes:
        provider: Provider that produced the text
        model: Model that produced the text
        text: Completion text
    """

    model_config = ConfigDict(frozen=True)

    provider: ProviderType
    model: str | None
    text: str
