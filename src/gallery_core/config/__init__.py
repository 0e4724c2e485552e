"""Configuration module for the gallery."""

from gallery_core.config.factory import create_from_config, create_pipeline, create_view
from gallery_core.config.loader import get_default_config_path, load_config
from gallery_core.config.models import GalleryConfig, GalleryCoreConfig, LoggingConfig

__all__ = [
    "GalleryConfig",
    "GalleryCoreConfig",
    "LoggingConfig",
    "create_from_config",
    "create_pipeline",
    "create_view",
    "get_default_config_path",
    "load_config",
]
