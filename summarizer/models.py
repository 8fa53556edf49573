"""SQLAlchemy models for the meeting summarizer.

This module defines the database models for uploaded transcripts and the
summaries generated from them.

Examples:
    >>> from summarizer.models import Summary, Transcript
    >>> transcript = Transcript(
    ...     filename="standup.txt",
    ...     content="Alice: ...",
    ...     file_size=1024,
    ...     file_type=".txt",
    ... )

Tests:
    - tests/unit/test_models.py
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

from summarizer.config import ProviderType


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


class Transcript(Base):
    """An uploaded meeting transcript.

    Attributes:
        id: Unique identifier (UUID)
        filename: Original upload filename
        content: Extracted, trimmed text
        file_size: Upload size in bytes
        file_type: Lowercased file extension (e.g. ".txt")
        uploaded_at: Upload timestamp
    """

    __tablename__ = "transcripts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    file_type: Mapped[str] = mapped_column(String(16), nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    summaries: Mapped[list["Summary"]] = relationship(
        "Summary",
        back_populates="transcript",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Transcript(filename='{self.filename}', size={self.file_size})>"


class Summary(Base):
    """A generated (and optionally edited) summary of a transcript.

    Attributes:
        id: Unique identifier (UUID)
        transcript_id: Source transcript
        original_content: Transcript text the summary was generated from
        custom_prompt: Caller's custom instruction (empty for default format)
        generated_summary: Text returned by the provider
        edited_summary: User-edited text, if any
        ai_provider: Provider that produced the summary
        ai_model: Model that produced the summary
        created_at: Creation timestamp
        last_modified: Last update timestamp
    """

    __tablename__ = "summaries"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    transcript_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("transcripts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    original_content: Mapped[str] = mapped_column(Text, nullable=False)
    custom_prompt: Mapped[str] = mapped_column(Text, default="")
    generated_summary: Mapped[str] = mapped_column(Text, nullable=False)
    edited_summary: Mapped[str | None] = mapped_column(Text, default=None)
    ai_provider: Mapped[ProviderType] = mapped_column(
        SQLEnum(ProviderType),
        nullable=False,
    )
    ai_model: Mapped[str | None] = mapped_column(String(100), default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    last_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    transcript: Mapped[Transcript] = relationship(
        "Transcript",
        back_populates="summaries",
    )

    def __repr__(self) -> str:
        """String representation."""
        provider = self.ai_provider.value if self.ai_provider else "None"
        return f"<Summary(id='{self.id}', provider={provider})>"

    @property
    def content(self) -> str:
        """Current summary text: the edit if present, else the generated text."""
        return self.edited_summary or self.generated_summary

    @property
    def is_edited(self) -> bool:
        """Check whether the summary has been edited."""
        return bool(self.edited_summary)
