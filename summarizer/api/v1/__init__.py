"""API v1 module.

Contains all v1 API routes.
"""

from fastapi import APIRouter

from summarizer.api.v1.summaries import router as summaries_router
from summarizer.api.v1.transcripts import router as transcripts_router

router = APIRouter(prefix="/api/v1")
router.include_router(transcripts_router)
router.include_router(summaries_router)

__all__ = ["router"]
