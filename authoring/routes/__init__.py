"""API route modules."""
from authoring.routes import catalog, items, wizard

__all__ = ["catalog", "items", "wizard"]
