"""Canvas widget that shows the grid and forwards pointer events."""

from __future__ import annotations

from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from grid.interaction import InteractionController
from grid.store import CANVAS_REGION_ID, GridStore
from ui.drawing import draw_cells, draw_frame, draw_grid_lines
from ui.geometry import cell_rect, point_to_cell


class PixelCanvasWidget(QtWidgets.QWidget):
    """Fixed-size square view of a GridStore.

    Mouse presses, drags and releases are turned into InteractionController
    calls. Enter events are generated only when the pointer crosses into a
    different cell, and a drag that leaves the widget ends the drawing
    session (Qt keeps delivering moves to the widget while a button is held).
    """

    def __init__(
        self,
        store: GridStore,
        controller: InteractionController,
        canvas_px: int = 500,
        show_grid_lines: bool = True,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        """Initialize canvas.

        Args:
            store: Grid state to display
            controller: Receives pointer events as cell indices
            canvas_px: Edge length of the canvas in pixels
            show_grid_lines: Draw separators between cells
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._store = store
        self._controller = controller
        self._canvas_px = canvas_px
        self._show_grid_lines = show_grid_lines
        self._last_index: Optional[int] = None

        self.setObjectName(CANVAS_REGION_ID)
        self.setFixedSize(canvas_px, canvas_px)
        self.setMouseTracking(True)
        self.setCursor(QtCore.Qt.PointingHandCursor)
        self._store.add_listener(self._on_grid_changed)

    @property
    def canvas_px(self) -> int:
        return self._canvas_px

    def cell_at(self, point: QtCore.QPointF | QtCore.QPoint) -> Optional[int]:
        return point_to_cell(point, self._store.size, self._canvas_px)

    def cell_center(self, index: int) -> QtCore.QPoint:
        return cell_rect(index, self._store.size, self._canvas_px).center()

    def detach(self) -> None:
        """Stop listening to the store."""
        self._store.remove_listener(self._on_grid_changed)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        size = self._store.size
        draw_cells(painter, self._store.cells(), size, self._canvas_px, clip=event.rect())
        if self._show_grid_lines:
            draw_grid_lines(painter, size, self._canvas_px)
        draw_frame(painter, self._canvas_px)
        painter.end()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() != QtCore.Qt.LeftButton:
            return
        index = self.cell_at(event.position())
        if index is None:
            return
        self._last_index = index
        self._controller.on_pointer_down(index)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        index = self.cell_at(event.position())
        if index is None:
            # Dragged past the edge while the mouse is grabbed
            if self._controller.is_drawing:
                self._controller.on_pointer_leave_canvas()
            self._last_index = None
            return
        if index == self._last_index:
            return
        self._last_index = index
        self._controller.on_pointer_enter(index)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton:
            self._controller.on_pointer_up()

    def leaveEvent(self, event: QtCore.QEvent) -> None:
        self._last_index = None
        self._controller.on_pointer_leave_canvas()
        super().leaveEvent(event)

    def _on_grid_changed(self, index: Optional[int]) -> None:
        if index is None:
            self._last_index = None
            self.update()
        else:
            self.update(cell_rect(index, self._store.size, self._canvas_px))


__all__ = ["PixelCanvasWidget"]
