"""Drawing functions for rendering the pixel grid."""

from __future__ import annotations

from typing import Sequence

from PySide6 import QtCore, QtGui

from grid.colors import Color
from ui.geometry import cell_rect

GRID_LINE_COLOR = QtGui.QColor(243, 244, 246)
FRAME_COLOR = QtGui.QColor(209, 213, 219)


def to_qcolor(color: Color) -> QtGui.QColor:
    return QtGui.QColor(color.r, color.g, color.b)


def draw_cells(
    painter: QtGui.QPainter,
    cells: Sequence[Color],
    size: int,
    canvas_px: int,
    clip: QtCore.QRect | None = None,
) -> None:
    """Fill every cell with its color.

    Args:
        painter: QPainter instance
        cells: Row-major cell colors
        size: Cells per side
        canvas_px: Canvas edge length in pixels
        clip: Only cells intersecting this rectangle are drawn
    """
    for index, color in enumerate(cells):
        rect = cell_rect(index, size, canvas_px)
        if clip is not None and not clip.intersects(rect):
            continue
        painter.fillRect(rect, to_qcolor(color))


def draw_grid_lines(painter: QtGui.QPainter, size: int, canvas_px: int) -> None:
    """Draw thin separators between cells.

    Args:
        painter: QPainter instance
        size: Cells per side
        canvas_px: Canvas edge length in pixels
    """
    painter.setPen(QtGui.QPen(GRID_LINE_COLOR, 1))
    for i in range(1, size):
        offset = i * canvas_px // size
        painter.drawLine(offset, 0, offset, canvas_px - 1)  # Vertical line
        painter.drawLine(0, offset, canvas_px - 1, offset)  # Horizontal line


def draw_frame(painter: QtGui.QPainter, canvas_px: int) -> None:
    painter.setPen(QtGui.QPen(FRAME_COLOR, 1))
    painter.setBrush(QtCore.Qt.NoBrush)
    painter.drawRect(0, 0, canvas_px - 1, canvas_px - 1)


__all__ = [
    "to_qcolor",
    "draw_cells",
    "draw_grid_lines",
    "draw_frame",
]
