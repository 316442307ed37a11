"""Integer pixel layout of a square grid drawn on a square canvas.

Row/column ``i`` of a ``size`` grid covers ``[i*px//size, (i+1)*px//size)``
so the cells tile the canvas exactly even when ``px`` is not a multiple of
``size``.
"""

from __future__ import annotations

from typing import Optional, Tuple


def cell_bounds(index: int, size: int, canvas_px: int) -> Tuple[int, int]:
    """Pixel span ``[start, end)`` of row or column ``index``."""
    return (index * canvas_px // size, (index + 1) * canvas_px // size)


def cell_index_at(offset: int, size: int, canvas_px: int) -> Optional[int]:
    """Row or column containing pixel ``offset``, or None outside the canvas."""
    if offset < 0 or offset >= canvas_px:
        return None
    return ((offset + 1) * size - 1) // canvas_px


def cell_at(x: int, y: int, size: int, canvas_px: int) -> Optional[int]:
    """Row-major cell index under pixel ``(x, y)``."""
    col = cell_index_at(x, size, canvas_px)
    row = cell_index_at(y, size, canvas_px)
    if col is None or row is None:
        return None
    return row * size + col


__all__ = ["cell_at", "cell_bounds", "cell_index_at"]
