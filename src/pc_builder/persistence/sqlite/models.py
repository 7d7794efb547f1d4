"""SQLAlchemy ORM models for SQLite persistence."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class SavedConfigurationRecord(Base):
    __tablename__ = "saved_configurations"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    blob: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
