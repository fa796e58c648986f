"""Configuration loader for the gridpath visualizer."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRIDPATH_CONFIG"


@dataclass
class AppConfig:
    """Settings for the grid, window, audio cues and logging."""

    grid_width: int = 20
    grid_height: int = 20
    cell_size: int = 30
    path_thickness: int = 3
    demo_wall: bool = True
    random_obstacle_density: float = 0.25
    place_sound: str = "sound1.wav"
    reset_sound: str = "easteregg.wav"
    log_level: str = "INFO"
    search_step_budget: Optional[int] = None

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.grid_width}x{self.grid_height}"
            )
        if self.cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {self.cell_size}")
        self.log_level = self.log_level.upper()


def _parse_config(data: Dict[str, Any]) -> AppConfig:
    """Convert raw ``data`` into :class:`AppConfig`."""
    known = {f.name for f in fields(AppConfig)}
    values = {}
    for key, value in data.items():
        if key in known:
            values[key] = value
        else:
            logger.warning("Ignoring unknown config key '%s'", key)
    return AppConfig(**values)


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load configuration from a YAML file.

    The path defaults to the GRIDPATH_CONFIG environment variable. A missing
    file gives the default configuration.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()

    path = Path(path)
    if not path.exists():
        logger.info("Config file %s not found, using defaults", path)
        return AppConfig()

    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return _parse_config(data)
