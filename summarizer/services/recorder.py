"""Result recorder.

Persists transcripts and the summaries generated from them, and applies user
edits. All functions take an open ``AsyncSession`` and flush but do not
commit; the session owner commits.

Examples:
    >>> async with get_session() as session:
    ...     transcript = await save_transcript(session, "standup.txt", text, 1024, ".txt")
    ...     summary = await record_summary(session, transcript, request, outcome)

Tests:
    - tests/unit/test_recorder.py
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from summarizer.core.errors import InvalidInput
from summarizer.core.types import CompletionOutcome, SummarizationRequest
from summarizer.models import Summary, Transcript

logger = logging.getLogger(__name__)


class TranscriptNotFound(LookupError):
    """No transcript with the given ID."""


class SummaryNotFound(LookupError):
    """No summary with the given ID."""


async def save_transcript(
    session: AsyncSession,
    filename: str,
    content: str,
    file_size: int,
    file_type: str,
) -> Transcript:
    """Store an uploaded transcript.

    Raises:
        InvalidInput: If the content is blank.
    """
    content = content.strip()
    if not content:
        raise InvalidInput("File appears to be empty or unreadable")

    transcript = Transcript(
        filename=filename,
        content=content,
        file_size=file_size,
        file_type=file_type,
    )
    session.add(transcript)
    await session.flush()
    await session.refresh(transcript)

    logger.info(f"Saved transcript {transcript.id} ({filename}, {len(content)} chars)")
    return transcript


async def get_transcript(session: AsyncSession, transcript_id: str) -> Transcript:
    """Load a transcript by ID.

    Raises:
        TranscriptNotFound: If no such transcript exists.
    """
    result = await session.execute(
        select(Transcript).where(Transcript.id == transcript_id)
    )
    transcript = result.scalar_one_or_none()
    if transcript is None:
        raise TranscriptNotFound(transcript_id)
    return transcript


async def list_transcripts(session: AsyncSession) -> list[Transcript]:
    """All transcripts, newest first."""
    result = await session.execute(
        select(Transcript).order_by(Transcript.uploaded_at.desc())
    )
    return list(result.scalars().all())


async def record_summary(
    session: AsyncSession,
    transcript: Transcript,
    request: SummarizationRequest,
    outcome: CompletionOutcome,
) -> Summary:
    """Persist a generated summary with its provenance.

    Args:
        session: Database session.
        transcript: Source transcript.
        request: The request that was summarized.
        outcome: The orchestrator's result.

    Returns:
        The stored Summary.
    """
    summary = Summary(
        transcript_id=transcript.id,
        original_content=request.source_text,
        custom_prompt=request.custom_instruction,
        generated_summary=outcome.text,
        ai_provider=outcome.provider,
        ai_model=outcome.model,
    )
    session.add(summary)
    await session.flush()
    await session.refresh(summary)

    logger.info(
        f"Recorded summary {summary.id} for transcript {transcript.id} "
        f"({outcome.provider.value}/{outcome.model})"
    )
    return summary


async def get_summary(session: AsyncSession, summary_id: str) -> Summary:
    """Load a summary by ID.

    Raises:
        SummaryNotFound: If no such summary exists.
    """
    result = await session.execute(select(Summary).where(Summary.id == summary_id))
    summary = result.scalar_one_or_none()
    if summary is None:
        raise SummaryNotFound(summary_id)
    return summary


async def update_summary(
    session: AsyncSession,
    summary_id: str,
    edited_summary: str,
) -> Summary:
    """Store a user edit of a summary.

    Raises:
        InvalidInput: If the edit is blank.
        SummaryNotFound: If no such summary exists.
    """
    if not edited_summary or not edited_summary.strip():
        raise InvalidInput("Edited summary content is required")

    summary = await get_summary(session, summary_id)
    summary.edited_summary = edited_summary
    await session.flush()
    await session.refresh(summary)

    logger.info(f"Updated summary {summary_id}")
    return summary
