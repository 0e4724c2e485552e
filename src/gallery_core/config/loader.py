"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from gallery_core.config.models import GalleryCoreConfig


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"


def load_config(path: Path | str | None = None) -> GalleryCoreConfig:
    """Load gallery settings from a YAML file.

    An empty file gives the built-in defaults (carousel, toggle shown, text
    on top, 2x3 grid, logging off).

    Args:
        path: Path to YAML config file (default: ``configs/default.yaml``).

    Returns:
        Validated GalleryCoreConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file holds something other than a mapping.
        pydantic.ValidationError: If a setting is invalid.
    """
    path = Path(path) if path is not None else get_default_config_path()
    with path.open() as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return GalleryCoreConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(raw).__name__}")
    return GalleryCoreConfig.model_validate(raw)
