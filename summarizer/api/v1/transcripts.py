"""Transcript API endpoints.

Endpoints:
    POST /api/v1/transcripts - Upload a .txt transcript
    GET /api/v1/transcripts - List transcripts (newest first)
    GET /api/v1/transcripts/{id} - Get transcript by ID

Tests:
    - tests/integration/test_api_transcripts.py
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from summarizer.config import get_settings
from summarizer.core.errors import InvalidInput
from summarizer.database import get_db_session
from summarizer.models import Transcript
from summarizer.services import recorder
from summarizer.services.documents import UnsupportedFileType, extract_text, get_extension

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcripts", tags=["transcripts"])


# Response Models


class TranscriptInfo(BaseModel):
    """Transcript metadata without content."""

    id: str
    filename: str
    file_size: int
    file_type: str
    uploaded_at: datetime | None = None

    model_config = {"from_attributes": True}


class TranscriptResponse(TranscriptInfo):
    """Transcript with its text content."""

    content: str


class TranscriptListResponse(BaseModel):
    """Response containing list of transcripts."""

    transcripts: list[TranscriptInfo]
    total: int


# Endpoints


@router.post("", response_model=TranscriptResponse)
async def upload_transcript(
    file: UploadFile = File(..., description="Plain-text meeting transcript"),
    session: AsyncSession = Depends(get_db_session),
) -> Transcript:
    """Upload a transcript file.

    Raises:
        HTTPException: 415 for non-.txt files, 413 for oversize files,
            400 for empty or undecodable files.
    """
    settings = get_settings()
    filename = file.filename or "transcript.txt"

    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")

    logger.info(f"Processing upload {filename} ({len(data)} bytes)")

    try:
        content = extract_text(filename, data)
        transcript = await recorder.save_transcript(
            session,
            filename=filename,
            content=content,
            file_size=len(data),
            file_type=get_extension(filename),
        )
    except UnsupportedFileType as e:
        raise HTTPException(status_code=415, detail=str(e))
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    return transcript


@router.get("", response_model=TranscriptListResponse)
async def list_transcripts(
    session: AsyncSession = Depends(get_db_session),
) -> TranscriptListResponse:
    """List transcripts, newest first."""
    transcripts = await recorder.list_transcripts(session)
    return TranscriptListResponse(
        transcripts=[TranscriptInfo.model_validate(t) for t in transcripts],
        total=len(transcripts),
    )


@router.get("/{transcript_id}", response_model=TranscriptResponse)
async def get_transcript(
    transcript_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> Transcript:
    """Get transcript by ID.

    Raises:
        HTTPException: If transcript not found
    """
    try:
        return await recorder.get_transcript(session, transcript_id)
    except recorder.TranscriptNotFound:
        raise HTTPException(status_code=404, detail="Transcript not found")
