"""Lesson item Pydantic models."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel


class LessonItemResponse(BaseModel):
    """Response with a persisted lesson item."""

    id: int
    lesson_id: int
    item_type: str
    type_id: str
    order_index: int
    is_active: bool
    title: str | None = None
    description: str | None = None
    hsk_level: int | None = None
    data: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class LessonItemListResponse(BaseModel):
    """Response with the items of a lesson."""

    lesson_id: int
    items: list[LessonItemResponse]
    total: int
