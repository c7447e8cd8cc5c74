"""Lesson item endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session as DbSession

from authoring.database import get_db
from authoring.models.items import LessonItemListResponse, LessonItemResponse
from authoring.services import item_service

router = APIRouter(prefix="/api", tags=["items"])


@router.get("/lessons/{lesson_id}/items", response_model=LessonItemListResponse)
def list_lesson_items(
    lesson_id: int,
    db: Annotated[DbSession, Depends(get_db)],
    include_inactive: bool = Query(False),
) -> LessonItemListResponse:
    """List items of a lesson in display order."""
    items = item_service.list_lesson_items(db, lesson_id, include_inactive)
    return LessonItemListResponse(
        lesson_id=lesson_id,
        items=[LessonItemResponse(**item_service.item_to_dict(item)) for item in items],
        total=len(items),
    )


@router.get("/items/{item_id}", response_model=LessonItemResponse)
def get_item(
    item_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> LessonItemResponse:
    """Get a single item."""
    item = item_service.get_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return LessonItemResponse(**item_service.item_to_dict(item))


@router.delete("/items/{item_id}")
def delete_item(
    item_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Delete an item."""
    if not item_service.delete_item(db, item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    return {"status": "deleted", "id": item_id}
