"""Database models for knowledge-base entries."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from heathen_index.db.session import Base

# Native text[] on PostgreSQL, JSON elsewhere
RelatedTermsType = JSON().with_variant(ARRAY(Text), "postgresql")


class EntryRecord(Base):
    """One knowledge-base entry."""

    __tablename__ = "entries"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    related_terms: Mapped[list[str] | None] = mapped_column(
        RelatedTermsType, nullable=True
    )
    sources: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (Index("ix_entries_category", "category"),)
