"""
Color Picker API - Shared Timestamp Columns
=============================================

What:  `created_at` / `updated_at` columns shared by every table.
How:   Declarative mixin; both columns are filled with a UTC timestamp on the
       Python side as well as by the store, so a freshly flushed record can be
       serialized without reloading it from the database.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
