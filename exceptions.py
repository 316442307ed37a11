"""Custom exception classes for PixelArt Studio."""

from __future__ import annotations

from typing import Optional


class PixelStudioError(Exception):
    """Base exception for all PixelArt Studio errors."""

    pass


class GridError(PixelStudioError):
    """Base exception for grid state errors."""

    pass


class GridIndexError(GridError, IndexError):
    """Raised when a cell index falls outside the current grid."""

    def __init__(self, index: int, cell_count: int):
        self.index = index
        self.cell_count = cell_count
        super().__init__(f"Cell index {index} out of range for {cell_count} cells")


class InvalidGridSizeError(GridError, ValueError):
    """Raised when a grid size is outside the supported range."""

    pass


class InvalidColorError(PixelStudioError, ValueError):
    """Raised when a color value cannot be parsed."""

    pass


class ExportError(PixelStudioError):
    """Base exception for export-related errors."""

    pass


class RasterizationError(ExportError):
    """Raised when the rasterizer fails to produce an image."""

    pass


class ConfigError(PixelStudioError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)
