"""Persistence of authored lesson items."""
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from authoring.models.db.lesson_item import LessonItem
from authoring.utils import json_dump_compact, json_load_dict
from authoring.wizard import SelectionState

logger = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """Item could not be written."""


def get_item(db: DbSession, item_id: int) -> LessonItem | None:
    """Get lesson item by ID."""
    return db.get(LessonItem, item_id)


def list_lesson_items(
    db: DbSession, lesson_id: int, include_inactive: bool = False
) -> list[LessonItem]:
    """List items of a lesson in display order."""
    stmt = select(LessonItem).where(LessonItem.lesson_id == lesson_id)
    if not include_inactive:
        stmt = stmt.where(LessonItem.is_active.is_(True))
    stmt = stmt.order_by(LessonItem.order_index, LessonItem.id)
    return list(db.execute(stmt).scalars().all())


def next_order_index(db: DbSession, lesson_id: int) -> int:
    """Position after the last item of the lesson."""
    stmt = select(func.max(LessonItem.order_index)).where(
        LessonItem.lesson_id == lesson_id
    )
    current = db.execute(stmt).scalar()
    return 0 if current is None else current + 1


def save_item(
    db: DbSession,
    selection: SelectionState,
    payload: dict[str, object],
    lesson_id: int,
    item_id: int | None = None,
    order_index: int | None = None,
    title: str | None = None,
    description: str | None = None,
    hsk_level: int | None = None,
    is_active: bool = True,
) -> LessonItem:
    """Create a new item, or update ``item_id`` with the resolved type and payload.

    Raises ``LookupError`` for an unknown ``item_id`` and ``PersistenceError``
    when the database rejects the write.
    """
    if selection.resolved_type_id is None or selection.category is None:
        raise ValueError("Item type is not resolved")

    if item_id is None:
        item = LessonItem(
            lesson_id=lesson_id,
            order_index=(
                order_index if order_index is not None else next_order_index(db, lesson_id)
            ),
        )
        db.add(item)
    else:
        item = get_item(db, item_id)
        if item is None:
            raise LookupError(f"Item {item_id} not found")
        item.lesson_id = lesson_id
        if order_index is not None:
            item.order_index = order_index

    item.item_type = selection.category.value
    item.type_id = selection.resolved_type_id
    item.data = json_dump_compact(payload)
    item.title = title
    item.description = description
    item.hsk_level = hsk_level
    item.is_active = is_active

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to save lesson item %s: %s", item_id, e)
        raise PersistenceError("Failed to save item") from e
    db.refresh(item)

    logger.info(
        "%s lesson item %s (%s) in lesson %s",
        "Created" if item_id is None else "Updated",
        item.id,
        item.type_id,
        item.lesson_id,
    )
    return item


def delete_item(db: DbSession, item_id: int) -> bool:
    """Delete item by ID."""
    item = get_item(db, item_id)
    if item is None:
        return False
    db.delete(item)
    db.commit()
    logger.info("Deleted lesson item %s", item_id)
    return True


def item_payload(item: LessonItem) -> dict[str, object]:
    """Stored payload of an item as a dict."""
    return json_load_dict(item.data)


def item_to_dict(item: LessonItem) -> dict[str, object]:
    return {
        "id": item.id,
        "lesson_id": item.lesson_id,
        "item_type": item.item_type,
        "type_id": item.type_id,
        "order_index": item.order_index,
        "is_active": item.is_active,
        "title": item.title,
        "description": item.description,
        "hsk_level": item.hsk_level,
        "data": item_payload(item),
        "created_at": item.created_at,
        "updated_at": item.updated_at,
    }
