"""Lesson item authoring service: type-selection wizard and item persistence."""
