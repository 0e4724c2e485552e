"""Pydantic configuration models for the gallery."""

from pydantic import BaseModel, Field

from gallery_core.data import TextPosition, ViewMode

# ============================================================
# Gallery Config
# ============================================================


class GalleryConfig(BaseModel):
    """Layout and style settings of the gallery panel.

    Grid dimensions are stored as given; the view clamps them to 1..10.
    """

    view_mode: ViewMode = ViewMode.CAROUSEL
    show_mode_toggle: bool = True
    text_position: TextPosition = TextPosition.TOP
    grid_rows: int = 2
    grid_cols: int = 3
    bg_color: str = "transparent"
    txt_color: str = "#333333"
    font_size: int = 14

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-run JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class GalleryCoreConfig(BaseModel):
    """Root configuration."""

    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
