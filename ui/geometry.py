"""Geometry helper functions mapping grid cells to Qt coordinates."""

from __future__ import annotations

from typing import Optional

from PySide6 import QtCore

from grid.layout import cell_at, cell_bounds


def cell_rect(index: int, size: int, canvas_px: int) -> QtCore.QRect:
    """Widget rectangle covered by cell ``index``.

    Args:
        index: Row-major cell index
        size: Cells per side
        canvas_px: Canvas edge length in pixels

    Returns:
        QRect of the cell
    """
    row, col = divmod(index, size)
    x0, x1 = cell_bounds(col, size, canvas_px)
    y0, y1 = cell_bounds(row, size, canvas_px)
    return QtCore.QRect(x0, y0, x1 - x0, y1 - y0)


def point_to_cell(point: QtCore.QPointF | QtCore.QPoint, size: int, canvas_px: int) -> Optional[int]:
    """Cell index under a widget position.

    Args:
        point: Position in widget coordinates
        size: Cells per side
        canvas_px: Canvas edge length in pixels

    Returns:
        Row-major cell index, or None if the point is off the canvas
    """
    x = int(point.x()) if point.x() >= 0 else -1
    y = int(point.y()) if point.y() >= 0 else -1
    return cell_at(x, y, size, canvas_px)


__all__ = ["cell_rect", "point_to_cell"]
