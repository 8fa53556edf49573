"""Summary API endpoints.

Endpoints:
    POST /api/v1/summaries - Generate a summary for a transcript
    GET /api/v1/summaries/{id} - Get summary by ID
    PUT /api/v1/summaries/{id} - Save an edited summary

Orchestration errors raised by the coordinator propagate to the handlers
registered in ``summarizer.main``.

Examples:
    >>> POST /api/v1/summaries
    >>> {"transcript_id": "...", "custom_prompt": "Bullet points only"}
    >>>
    >>> # Response
    >>> {"id": "...", "content": "...", "ai_provider": "groq", "ai_model": "llama3-8b-8192"}

Tests:
    - tests/integration/test_api_summaries.py
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from summarizer.config import ProviderType
from summarizer.core.coordinator import SummarizationCoordinator, get_coordinator
from summarizer.core.errors import InvalidInput
from summarizer.core.types import SummarizationRequest
from summarizer.database import get_db_session
from summarizer.models import Summary
from summarizer.services import recorder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])


# Request/Response Models


class SummarizeRequest(BaseModel):
    """Request to summarize an uploaded transcript."""

    transcript_id: str = Field(..., min_length=1, description="Transcript ID")
    custom_prompt: str = Field(
        default="",
        max_length=5000,
        description="Custom instructions; empty uses the default four-section format",
    )


class UpdateSummaryRequest(BaseModel):
    """Request to save an edited summary."""

    edited_summary: str = Field(..., description="Edited summary text")


class SummaryResponse(BaseModel):
    """Response containing a summary.

    Attributes:
        content: Edited text if present, else the generated text
        generated_summary: Text as returned by the provider
    """

    id: str
    transcript_id: str
    content: str
    generated_summary: str
    custom_prompt: str
    ai_provider: ProviderType
    ai_model: str | None = None
    created_at: datetime | None = None
    last_modified: datetime | None = None

    model_config = {"from_attributes": True}


# Endpoints


@router.post("", response_model=SummaryResponse)
async def create_summary(
    body: SummarizeRequest,
    session: AsyncSession = Depends(get_db_session),
    coordinator: SummarizationCoordinator = Depends(get_coordinator),
) -> Summary:
    """Generate and store a summary for a transcript.

    Raises:
        HTTPException: If the transcript does not exist.
        SummarizationError: Mapped to an HTTP status by the app.
    """
    try:
        transcript = await recorder.get_transcript(session, body.transcript_id)
    except recorder.TranscriptNotFound:
        raise HTTPException(status_code=404, detail="Transcript not found")

    request = SummarizationRequest(
        source_text=transcript.content,
        custom_instruction=body.custom_prompt,
    )
    outcome = await coordinator.summarize(request)

    return await recorder.record_summary(session, transcript, request, outcome)


@router.get("/{summary_id}", response_model=SummaryResponse)
async def get_summary(
    summary_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> Summary:
    """Get summary by ID.

    Raises:
        HTTPException: If summary not found
    """
    try:
        return await recorder.get_summary(session, summary_id)
    except recorder.SummaryNotFound:
        raise HTTPException(status_code=404, detail="Summary not found")


@router.put("/{summary_id}", response_model=SummaryResponse)
async def update_summary(
    summary_id: str,
    body: UpdateSummaryRequest,
    session: AsyncSession = Depends(get_db_session),
) -> Summary:
    """Save an edited summary.

    Raises:
        HTTPException: 400 for a blank edit, 404 if summary not found
    """
    try:
        return await recorder.update_summary(session, summary_id, body.edited_summary)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except recorder.SummaryNotFound:
        raise HTTPException(status_code=404, detail="Summary not found")
