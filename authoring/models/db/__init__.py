"""Database models."""
from authoring.models.db.lesson_item import LessonItem

__all__ = ["LessonItem"]
