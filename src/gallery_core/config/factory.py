"""Factory functions to create components from configuration."""

from pathlib import Path

from gallery_core.config.models import GalleryConfig, GalleryCoreConfig
from gallery_core.pipeline import GalleryPipeline
from gallery_core.run_logger import RunLogger
from gallery_core.sorting import ChronologicalSorter
from gallery_core.view import GalleryView


def create_view(config: GalleryConfig) -> GalleryView:
    """Create a gallery view from config."""
    if isinstance(config, GalleryConfig):
        return GalleryView(
            config.view_mode,
            show_mode_toggle=config.show_mode_toggle,
            text_position=config.text_position,
            grid_rows=config.grid_rows,
            grid_cols=config.grid_cols,
        )
    msg = f"Unknown gallery config type: {type(config)}"
    raise ValueError(msg)


def create_pipeline(run_logger: RunLogger | None = None) -> GalleryPipeline:
    """Create the preparation pipeline."""
    return GalleryPipeline(sorter=ChronologicalSorter(), run_logger=run_logger)


def create_from_config(
    config: GalleryCoreConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[GalleryPipeline, GalleryView, RunLogger | None]:
    """Create the pipeline and view from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, view, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(run_logger=run_logger)
    view = create_view(config.gallery)
    return (pipeline, view, run_logger)
