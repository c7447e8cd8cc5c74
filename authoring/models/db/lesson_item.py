"""
LessonItem model: a content card or question inside a lesson.
"""

from __future__ import annotations

from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from authoring.database import Base


class LessonItem(Base):
    """
    One authored item. ``type_id`` is the canonical identifier resolved by the
    type-selection wizard; ``data`` holds the JSON payload of the item's form.
    """

    __tablename__ = "lesson_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    lesson_id: Mapped[int] = mapped_column(nullable=False, index=True)
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)
    type_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    order_index: Mapped[int] = mapped_column(nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    hsk_level: Mapped[int | None] = mapped_column(nullable=True)
    data: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
