"""
Configuration storage for the sidebar values.
Reads and writes the RenderConfig as a JSON document under the config dir.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from doc_sidebar.utils.errors import ConfigNotFoundError, ValidationError
from doc_sidebar.utils.io import config_dir, read_json, write_json
from doc_sidebar.utils.logging import logger
from doc_sidebar.utils.typing import RenderConfig

__all__ = ["DEFAULT_CONFIG", "config_dir", "config_path", "load_config", "save_config"]

DEFAULT_CONFIG = RenderConfig(
    base="CDF",
    host="example.com",
    path="dist",
    package="cdf",
    version="1.2.0",
)

def config_path() -> Path:
    return config_dir() / "sidebar.json"

def load_config(path: Optional[Path] = None) -> RenderConfig:
    """Load a RenderConfig, failing fast on a missing file or missing fields."""
    path = Path(path) if path else config_path()
    if not path.exists():
        raise ConfigNotFoundError(f"No sidebar configuration at {path}")
    data = read_json(path, default=None)
    if not isinstance(data, dict):
        raise ValidationError(f"Sidebar configuration in {path} must be a JSON object")
    config = RenderConfig.from_mapping(data)
    logger.info("config.load: %s", path)
    return config

def save_config(config: RenderConfig, path: Optional[Path] = None) -> Path:
    path = Path(path) if path else config_path()
    write_json(path, config.to_dict())
    logger.info("config.save: %s", path)
    return path
