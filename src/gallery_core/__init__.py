"""Gallery core: chronological ordering and navigation for image galleries."""

from gallery_core.config import GalleryCoreConfig, create_from_config, load_config
from gallery_core.data import (
    DataTable,
    GalleryResult,
    Record,
    Role,
    TableColumn,
    TextPosition,
    ValueColumn,
    ViewMode,
)
from gallery_core.dates import format_as_display_string, normalize_to_timestamp
from gallery_core.pipeline import GalleryPipeline, apply_date_display, prepare_gallery
from gallery_core.reader import read_categorical, read_table
from gallery_core.run_logger import RunLogger
from gallery_core.sorting import ChronologicalSorter, RecordSorter, select_key_field, sort_chronologically
from gallery_core.view import CardView, GalleryFrame, GalleryView

__all__ = [
    # Models
    "DataTable",
    "GalleryResult",
    "Record",
    "Role",
    "TableColumn",
    "TextPosition",
    "ValueColumn",
    "ViewMode",
    # Dates
    "format_as_display_string",
    "normalize_to_timestamp",
    # Sorting
    "ChronologicalSorter",
    "RecordSorter",
    "select_key_field",
    "sort_chronologically",
    # Reading
    "read_categorical",
    "read_table",
    # Pipeline
    "GalleryPipeline",
    "apply_date_display",
    "prepare_gallery",
    # View
    "CardView",
    "GalleryFrame",
    "GalleryView",
    # Logging
    "RunLogger",
    # Config
    "GalleryCoreConfig",
    "create_from_config",
    "load_config",
]
