"""Rasterizers that turn a grid snapshot into an encoded image."""

from __future__ import annotations

import io
import time
from abc import ABC, abstractmethod

from PIL import Image, ImageDraw

from exceptions import RasterizationError
from export.types import PNG_MIME_TYPE, ImageHandle
from grid.colors import WHITE, Color
from grid.layout import cell_bounds
from grid.store import GridSnapshot
from log_config.logger import get_logger, log_performance

logger = get_logger(__name__)

FRAME_BORDER_COLOR = Color.from_hex("#d1d5db")
CELL_BORDER_COLOR = Color.from_hex("#f3f4f6")


class Rasterizer(ABC):
    @abstractmethod
    def rasterize(self, snapshot: GridSnapshot) -> ImageHandle:
        """Render the snapshot region to an encoded image.

        Raises:
            RasterizationError: If no image could be produced
        """


class PillowRasterizer(Rasterizer):
    """Render snapshots with Pillow the way the canvas widget shows them.

    The image is a white margin of ``padding_px`` around a ``canvas_px``
    square grid. Cells, separators and the one pixel frame land on the same
    pixels as in ``ui.drawing``.
    """

    def __init__(
        self,
        canvas_px: int = 500,
        padding_px: int = 16,
        show_cell_borders: bool = True,
    ) -> None:
        if canvas_px <= 0:
            raise ValueError(f"canvas_px must be positive, got {canvas_px}")
        if padding_px < 0:
            raise ValueError(f"padding_px must be non-negative, got {padding_px}")
        self._canvas_px = canvas_px
        self._padding_px = padding_px
        self._show_cell_borders = show_cell_borders

    @property
    def image_px(self) -> int:
        return self._canvas_px + 2 * self._padding_px

    def rasterize(self, snapshot: GridSnapshot) -> ImageHandle:
        started = time.perf_counter()
        try:
            image = self._render(snapshot)
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            raise RasterizationError(f"Failed to rasterize {snapshot.region_id}: {e}") from e

        duration_ms = (time.perf_counter() - started) * 1000.0
        log_performance(f"rasterize {snapshot.size}x{snapshot.size} grid", duration_ms)
        return ImageHandle(
            data=buffer.getvalue(),
            mime_type=PNG_MIME_TYPE,
            width=image.width,
            height=image.height,
        )

    def _render(self, snapshot: GridSnapshot) -> Image.Image:
        size = snapshot.size
        if size <= 0 or len(snapshot.cells) != size * size:
            raise ValueError(f"snapshot has {len(snapshot.cells)} cells for size {size}")

        image = Image.new("RGB", (self.image_px, self.image_px), WHITE.as_tuple())
        draw = ImageDraw.Draw(image)
        offset = self._padding_px
        last = offset + self._canvas_px - 1

        for row in range(size):
            y0, y1 = cell_bounds(row, size, self._canvas_px)
            for col in range(size):
                x0, x1 = cell_bounds(col, size, self._canvas_px)
                box = (offset + x0, offset + y0, offset + x1 - 1, offset + y1 - 1)
                draw.rectangle(box, fill=snapshot.cell_color(row, col).as_tuple())

        # Same single-pixel separators and inner frame as the canvas widget
        if self._show_cell_borders:
            for i in range(1, size):
                line = offset + cell_bounds(i, size, self._canvas_px)[0]
                draw.line((line, offset, line, last), fill=CELL_BORDER_COLOR.as_tuple())
                draw.line((offset, line, last, line), fill=CELL_BORDER_COLOR.as_tuple())
        draw.rectangle((offset, offset, last, last), outline=FRAME_BORDER_COLOR.as_tuple())
        return image


__all__ = ["Rasterizer", "PillowRasterizer"]
