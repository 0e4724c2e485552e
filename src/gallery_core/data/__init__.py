"""Data models for the gallery."""

from gallery_core.data.models import (
    DataTable,
    GalleryResult,
    Record,
    Role,
    TableColumn,
    TextPosition,
    ValueColumn,
    ViewMode,
)

__all__ = [
    "DataTable",
    "GalleryResult",
    "Record",
    "Role",
    "TableColumn",
    "TextPosition",
    "ValueColumn",
    "ViewMode",
]
