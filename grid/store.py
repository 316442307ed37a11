"""Grid state store: grid size and per-cell colors.

The store is the only mutator of cell data. Cells are kept row-major, so
cell ``index`` sits at ``(index // size, index % size)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from exceptions import GridIndexError, InvalidGridSizeError
from grid.colors import WHITE, Color
from log_config.logger import get_logger

logger = get_logger(__name__)

# Receives the changed cell index, or None when the whole grid changed
GridListener = Callable[[Optional[int]], None]

CANVAS_REGION_ID = "pixel-canvas"


@dataclass(frozen=True)
class SizeRange:
    """Supported grid sizes: ``min_size..max_size`` in steps of ``step``."""

    min_size: int = 8
    max_size: int = 32
    step: int = 8

    def contains(self, size: int) -> bool:
        if isinstance(size, bool) or not isinstance(size, int):
            return False
        if size < self.min_size or size > self.max_size:
            return False
        return (size - self.min_size) % self.step == 0

    def sizes(self) -> List[int]:
        return list(range(self.min_size, self.max_size + 1, self.step))


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable copy of the rendered grid region, handed to rasterizers."""

    size: int
    cells: Tuple[Color, ...]
    region_id: str = CANVAS_REGION_ID

    def cell_color(self, row: int, col: int) -> Color:
        return self.cells[row * self.size + col]


class GridStore:
    """Holds the grid dimension and the color of every cell."""

    def __init__(self, size: int = 16, size_range: Optional[SizeRange] = None) -> None:
        self._size_range = size_range or SizeRange()
        self._require_supported(size)
        self._size = size
        self._cells: List[Color] = [WHITE] * (size * size)
        self._listeners: List[GridListener] = []

    @property
    def size(self) -> int:
        return self._size

    @property
    def size_range(self) -> SizeRange:
        return self._size_range

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def cell_color(self, index: int) -> Color:
        self._require_index(index)
        return self._cells[index]

    def cells(self) -> Tuple[Color, ...]:
        return tuple(self._cells)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(size=self._size, cells=tuple(self._cells))

    def set_cell_color(self, index: int, color: Color) -> None:
        """Replace the color of one cell.

        Raises:
            GridIndexError: If index is outside ``0..size*size-1``
        """
        self._require_index(index)
        if self._cells[index] == color:
            return
        self._cells[index] = color
        self._notify(index)

    def resize(self, new_size: int) -> None:
        """Reallocate an all-white grid of ``new_size`` cells per side.

        Prior cell contents are discarded, even when the size is unchanged.

        Raises:
            InvalidGridSizeError: If new_size is not a supported size
        """
        self._require_supported(new_size)
        logger.info(f"Resizing grid {self._size}x{self._size} -> {new_size}x{new_size}")
        self._size = new_size
        self._cells = [WHITE] * (new_size * new_size)
        self._notify(None)

    def clear(self) -> None:
        """Reset every cell to white, keeping the current size."""
        logger.debug(f"Clearing {self.cell_count} cells")
        self._cells = [WHITE] * (self._size * self._size)
        self._notify(None)

    def add_listener(self, listener: GridListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GridListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, index: Optional[int]) -> None:
        for listener in list(self._listeners):
            listener(index)

    def _require_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._cells):
            raise GridIndexError(index, len(self._cells))

    def _require_supported(self, size: int) -> None:
        if not self._size_range.contains(size):
            r = self._size_range
            raise InvalidGridSizeError(
                f"Unsupported grid size {size!r}; expected {r.min_size}..{r.max_size} step {r.step}"
            )


__all__ = ["CANVAS_REGION_ID", "GridListener", "GridSnapshot", "GridStore", "SizeRange"]
