"""Export path: rasterizers, image handles and the preview flow."""

from export.flow import ExportFlow, ExportState
from export.rasterizer import PillowRasterizer, Rasterizer
from export.types import ExportResult, ImageHandle

__all__ = [
    "ExportFlow",
    "ExportResult",
    "ExportState",
    "ImageHandle",
    "PillowRasterizer",
    "Rasterizer",
]
