"""FastAPI application for the meeting summarizer.

This module provides the main FastAPI application with health endpoints,
API routes, orchestration error mapping and lifecycle management.

Run with:
    uvicorn summarizer.main:app --reload

Tests:
    - tests/unit/test_main.py
    - tests/integration/test_api_summaries.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from summarizer import __version__
from summarizer.api.v1 import router as v1_router
from summarizer.config import get_settings
from summarizer.core.coordinator import (
    SummarizationCoordinator,
    close_coordinator,
    get_coordinator,
)
from summarizer.core.errors import (
    CompletionFailure,
    ConfigurationError,
    InvalidInput,
    ModelsExhausted,
)
from summarizer.database import check_db_connection, close_db, init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# Response models
class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    database: bool
    providers: dict[str, bool]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown tasks:
    - Initialize database and provider registry on startup
    - Close provider clients and database connections on shutdown
    """
    logger.info(f"Starting Meeting Summarizer v{__version__}")

    try:
        await init_db()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")

    get_coordinator()

    yield

    logger.info("Shutting down Meeting Summarizer")
    await close_coordinator()
    await close_db()


# Create FastAPI app
settings = get_settings()

app = FastAPI(
    title="Meeting Summarizer",
    description="AI meeting transcript summaries with multi-provider fallback",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)


# Exception handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "detail": None},
    )


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    """Reject requests that cannot be summarized."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc), "detail": None},
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """No usable provider configuration."""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": str(exc), "detail": None},
    )


@app.exception_handler(ModelsExhausted)
async def models_exhausted_handler(request: Request, exc: ModelsExhausted):
    """The only available provider failed on every model."""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "Failed to generate summary. No alternative AI service available.",
            "detail": [exc.to_provider_attempts().model_dump(mode="json")],
        },
    )


@app.exception_handler(CompletionFailure)
async def completion_failure_handler(request: Request, exc: CompletionFailure):
    """Every available provider failed on every model."""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "Failed to generate summary with available AI services",
            "detail": [
                trail.model_dump(mode="json") for trail in exc.attempted_providers
            ],
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")

    detail = str(exc) if settings.DEBUG else None

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "detail": detail},
    )


# Health endpoints
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(
    coordinator: SummarizationCoordinator = Depends(get_coordinator),
) -> HealthResponse:
    """Check application health.

    Returns status of:
    - Application
    - Database connection
    - LLM providers (configured or not)
    """
    db_healthy = await check_db_connection()
    providers = coordinator.registry.availability()

    return HealthResponse(
        status="healthy" if db_healthy and any(providers.values()) else "degraded",
        version=__version__,
        database=db_healthy,
        providers=providers,
    )


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint with basic info."""
    return {
        "name": "Meeting Summarizer",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# Entry point for development
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "summarizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
