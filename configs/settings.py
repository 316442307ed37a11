"""Configuration loading for PixelArt Studio."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from configs.validator import validate_config
from exceptions import InvalidConfigError
from grid.store import SizeRange
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


@dataclass(frozen=True)
class CanvasConfig:
    default_size: int = 16
    min_size: int = 8
    max_size: int = 32
    size_step: int = 8
    canvas_px: int = 500  # Edge length of the drawable square
    default_color: str = "#000000"

    @property
    def size_range(self) -> SizeRange:
        return SizeRange(min_size=self.min_size, max_size=self.max_size, step=self.size_step)


@dataclass(frozen=True)
class ExportConfig:
    padding_px: int = 16
    show_cell_borders: bool = True
    default_filename: str = "pixel-art.png"


@dataclass(frozen=True)
class UiConfig:
    window_title: str = "PixelArt Studio"


@dataclass(frozen=True)
class AppConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    ui: UiConfig = field(default_factory=UiConfig)


def default_config() -> AppConfig:
    """Built-in configuration used when no file is given."""
    return AppConfig()


def load_config(path: Path) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    path = Path(path)
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text()) or {}

        # Fills in defaults for missing keys
        validate_config(data)

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    try:
        config = AppConfig(
            canvas=CanvasConfig(**data["canvas"]),
            export=ExportConfig(**data["export"]),
            ui=UiConfig(**data["ui"]),
        )
    except (KeyError, TypeError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}")

    _check_canvas(config.canvas)

    logger.info(
        f"Configuration loaded successfully: {config.canvas.default_size}x{config.canvas.default_size} grid, "
        f"sizes {config.canvas.min_size}..{config.canvas.max_size} step {config.canvas.size_step}"
    )
    return config


def _check_canvas(canvas: CanvasConfig) -> None:
    if canvas.min_size > canvas.max_size:
        raise InvalidConfigError(
            f"canvas.min_size ({canvas.min_size}) exceeds canvas.max_size ({canvas.max_size})"
        )
    if (canvas.max_size - canvas.min_size) % canvas.size_step != 0:
        raise InvalidConfigError(
            f"canvas.max_size ({canvas.max_size}) is not reachable from canvas.min_size "
            f"({canvas.min_size}) in steps of {canvas.size_step}"
        )
    if not canvas.size_range.contains(canvas.default_size):
        raise InvalidConfigError(
            f"canvas.default_size {canvas.default_size} is not one of {canvas.size_range.sizes()}"
        )
    if canvas.canvas_px < canvas.max_size:
        raise InvalidConfigError(
            f"canvas.canvas_px ({canvas.canvas_px}) must be at least canvas.max_size ({canvas.max_size})"
        )


__all__ = [
    "AppConfig",
    "CanvasConfig",
    "DEFAULT_CONFIG_PATH",
    "ExportConfig",
    "UiConfig",
    "default_config",
    "load_config",
]
