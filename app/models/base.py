"""Declarative base and shared column mixins."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.constants import ENTITY_CODE_MAX_LENGTH


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class IntegerPKMixin:
    """Auto-incrementing integer primary key."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Creation and last-update timestamps maintained by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class CodedEntityMixin(IntegerPKMixin, TimestampMixin):
    """Entity identified to users by a unique, immutable, generated code."""

    # Unique per entity type; assigned once at creation
    code: Mapped[str] = mapped_column(
        String(ENTITY_CODE_MAX_LENGTH), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
