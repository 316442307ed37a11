"""Functional smoke tests for UI components.

These tests verify that widgets can be instantiated and forward user
input to the grid model correctly.
"""

from __future__ import annotations

import io
from unittest.mock import Mock

import pytest
from PIL import Image
from PySide6 import QtCore, QtGui, QtWidgets

from export.rasterizer import PillowRasterizer
from grid.colors import WHITE, Color
from grid.interaction import InteractionController
from grid.store import GridStore, SizeRange
from grid.tools import Tool, ToolState
from ui.geometry import cell_rect, point_to_cell

RED = Color(255, 0, 0)


def _drag_to(widget: QtWidgets.QWidget, pos: QtCore.QPoint) -> None:
    """Deliver a mouse move with the left button held."""
    local = QtCore.QPointF(pos)
    event = QtGui.QMouseEvent(
        QtCore.QEvent.MouseMove,
        local,
        QtCore.QPointF(widget.mapToGlobal(pos)),
        QtCore.Qt.NoButton,
        QtCore.Qt.LeftButton,
        QtCore.Qt.NoModifier,
    )
    QtWidgets.QApplication.sendEvent(widget, event)


class TestGeometryFunctions:
    """Test cell geometry helpers."""

    def test_cell_rect_first_cell(self):
        assert cell_rect(0, 16, 500) == QtCore.QRect(0, 0, 31, 31)

    def test_cell_rect_last_cell_reaches_edge(self):
        rect = cell_rect(255, 16, 500)
        assert rect.x() + rect.width() == 500
        assert rect.y() + rect.height() == 500

    def test_point_to_cell(self):
        assert point_to_cell(QtCore.QPointF(40.5, 5.0), 16, 500) == 1
        assert point_to_cell(QtCore.QPoint(5, 40), 16, 500) == 16

    def test_point_off_canvas(self):
        assert point_to_cell(QtCore.QPointF(-0.5, 10.0), 16, 500) is None
        assert point_to_cell(QtCore.QPointF(10.0, 500.0), 16, 500) is None


@pytest.fixture
def canvas(qtbot):
    from ui.widgets import PixelCanvasWidget

    store = GridStore(16)
    controller = InteractionController(store, ToolState(color=RED))
    widget = PixelCanvasWidget(store, controller, canvas_px=500)
    qtbot.addWidget(widget)
    widget.show()
    return widget, store, controller


class TestPixelCanvas:
    """Test PixelCanvasWidget pointer handling."""

    def test_canvas_identity_and_size(self, canvas):
        widget, _, _ = canvas
        assert widget.objectName() == "pixel-canvas"
        assert widget.size() == QtCore.QSize(500, 500)

    def test_click_paints_cell(self, canvas, qtbot):
        widget, store, controller = canvas

        qtbot.mousePress(widget, QtCore.Qt.LeftButton, pos=widget.cell_center(17))
        qtbot.mouseRelease(widget, QtCore.Qt.LeftButton, pos=widget.cell_center(17))

        assert store.cell_color(17) == RED
        assert not controller.is_drawing

    def test_hover_paints_nothing(self, canvas, qtbot):
        widget, store, _ = canvas

        for index in (0, 1, 2):
            qtbot.mouseMove(widget, widget.cell_center(index))

        assert all(color == WHITE for color in store.cells())

    def test_right_click_ignored(self, canvas, qtbot):
        widget, store, controller = canvas

        qtbot.mousePress(widget, QtCore.Qt.RightButton, pos=widget.cell_center(3))

        assert store.cell_color(3) == WHITE
        assert not controller.is_drawing

    def test_drag_paints_cells_in_order(self, canvas, qtbot):
        widget, store, controller = canvas
        painted = []
        store.add_listener(painted.append)

        qtbot.mousePress(widget, QtCore.Qt.LeftButton, pos=widget.cell_center(0))
        _drag_to(widget, widget.cell_center(1))
        _drag_to(widget, widget.cell_center(1) + QtCore.QPoint(3, 2))
        _drag_to(widget, widget.cell_center(17))
        qtbot.mouseRelease(widget, QtCore.Qt.LeftButton, pos=widget.cell_center(17))

        assert painted == [0, 1, 17]
        assert [store.cell_color(i) for i in (0, 1, 17)] == [RED, RED, RED]
        assert store.cell_color(2) == WHITE
        assert not controller.is_drawing

    def test_drag_past_edge_ends_drawing(self, canvas, qtbot):
        widget, store, controller = canvas

        qtbot.mousePress(widget, QtCore.Qt.LeftButton, pos=widget.cell_center(15))
        _drag_to(widget, QtCore.QPoint(widget.canvas_px + 10, widget.cell_center(15).y()))

        assert not controller.is_drawing

        _drag_to(widget, widget.cell_center(14))
        assert store.cell_color(15) == RED
        assert store.cell_color(14) == WHITE

    def test_leave_event_ends_drawing(self, canvas):
        widget, _, controller = canvas
        controller.on_pointer_down(0)

        QtWidgets.QApplication.sendEvent(widget, QtCore.QEvent(QtCore.QEvent.Leave))

        assert not controller.is_drawing

    def test_resize_repaints_without_error(self, canvas, qtbot):
        widget, store, _ = canvas
        store.resize(32)
        widget.repaint()
        assert widget.cell_at(widget.cell_center(1023)) == 1023

    def test_export_matches_canvas_pixels(self, canvas):
        widget, store, _ = canvas
        for index in (0, 1, 17, 255):
            store.set_cell_color(index, RED)

        shown = widget.grab().toImage()
        exported = Image.open(
            io.BytesIO(PillowRasterizer(canvas_px=500, padding_px=0).rasterize(store.snapshot()).data)
        ).convert("RGB")

        for x, y in [(0, 0), (15, 15), (31, 15), (30, 15), (32, 15), (46, 31), (250, 499), (499, 499)]:
            color = shown.pixelColor(x, y)
            assert (color.red(), color.green(), color.blue()) == exported.getpixel((x, y)), (x, y)

    def test_grab_renders_cell_color(self, canvas):
        widget, store, _ = canvas
        store.set_cell_color(0, RED)

        image = widget.grab().toImage()

        center = widget.cell_center(0)
        assert image.pixelColor(center) == QtGui.QColor(255, 0, 0)


@pytest.fixture
def tool_panel(qtbot):
    from ui.widgets import ToolPanel

    panel = ToolPanel(size_range=SizeRange(), grid_size=16, color=Color(0, 0, 0))
    qtbot.addWidget(panel)
    return panel


class TestToolPanel:
    """Test ToolPanel signals."""

    def test_initial_label(self, tool_panel):
        assert tool_panel._size_label.text() == "Grid Size: 16x16"
        assert tool_panel._color_button.text() == "#000000"

    def test_tool_buttons_emit(self, tool_panel, qtbot):
        with qtbot.waitSignal(tool_panel.tool_selected) as blocker:
            tool_panel._eraser_button.click()

        assert blocker.args == [Tool.ERASER]
        assert tool_panel._eraser_button.isChecked()
        assert not tool_panel._brush_button.isChecked()

    def test_size_slider_snaps_to_step(self, tool_panel):
        received = Mock()
        tool_panel.size_changed.connect(received)

        tool_panel.set_grid_size(21)

        received.assert_called_once_with(24)
        assert tool_panel.grid_size == 24
        assert tool_panel._size_label.text() == "Grid Size: 24x24"

    def test_slider_never_exceeds_largest_supported_size(self, qtbot):
        from ui.widgets import ToolPanel

        panel = ToolPanel(size_range=SizeRange(8, 30, 8), grid_size=16, color=Color(0, 0, 0))
        qtbot.addWidget(panel)
        received = Mock()
        panel.size_changed.connect(received)

        panel.set_grid_size(30)

        received.assert_called_once_with(24)
        assert panel.grid_size == 24

    def test_same_size_not_emitted(self, tool_panel):
        received = Mock()
        tool_panel.size_changed.connect(received)

        tool_panel.set_grid_size(16)

        received.assert_not_called()

    def test_set_color_emits_hex(self, tool_panel, qtbot):
        with qtbot.waitSignal(tool_panel.color_selected) as blocker:
            tool_panel.set_color(Color(255, 0, 0))

        assert blocker.args == ["#ff0000"]
        assert tool_panel._color_button.text() == "#ff0000"

    def test_export_and_clear_buttons(self, tool_panel, qtbot):
        with qtbot.waitSignal(tool_panel.export_requested):
            tool_panel._export_button.click()
        with qtbot.waitSignal(tool_panel.clear_requested):
            tool_panel._clear_button.click()

    def test_export_button_can_be_disabled(self, tool_panel):
        tool_panel.set_export_enabled(False)
        assert not tool_panel._export_button.isEnabled()


class TestPreviewDialog:
    """Test PreviewDialog."""

    def test_preview_shows_image_and_saves(self, qtbot):
        from ui.dialogs import PreviewDialog

        image = PillowRasterizer(canvas_px=100, padding_px=0).rasterize(GridStore(8).snapshot())
        on_save = Mock()
        dialog = PreviewDialog(None, image, on_save=on_save)
        qtbot.addWidget(dialog)

        assert dialog.windowTitle() == "Preview"
        assert not dialog.image_pixmap().isNull()

        dialog._save_button.click()
        on_save.assert_called_once_with()

    def test_close_button_accepts(self, qtbot):
        from ui.dialogs import PreviewDialog

        image = PillowRasterizer(canvas_px=100, padding_px=0).rasterize(GridStore(8).snapshot())
        dialog = PreviewDialog(None, image, on_save=Mock())
        qtbot.addWidget(dialog)

        with qtbot.waitSignal(dialog.finished):
            dialog.open()
            dialog._close_button.click()

        assert dialog.result() == QtWidgets.QDialog.Accepted


class TestSaveImage:
    """Test save_image file dialog handling."""

    def test_save_writes_file(self, qtbot, tmp_path, monkeypatch):
        from ui.export import save_image

        target = tmp_path / "art.png"
        monkeypatch.setattr(
            QtWidgets.QFileDialog,
            "getSaveFileName",
            staticmethod(lambda *args, **kwargs: (str(target), "PNG images (*.png)")),
        )
        image = PillowRasterizer(canvas_px=100, padding_px=0).rasterize(GridStore(8).snapshot())
        parent = QtWidgets.QWidget()
        qtbot.addWidget(parent)

        assert save_image(parent, image, "pixel-art.png") == target
        assert target.read_bytes() == image.data

    def test_cancelled_dialog(self, qtbot, monkeypatch):
        from ui.export import save_image

        monkeypatch.setattr(
            QtWidgets.QFileDialog,
            "getSaveFileName",
            staticmethod(lambda *args, **kwargs: ("", "")),
        )
        image = PillowRasterizer(canvas_px=100, padding_px=0).rasterize(GridStore(8).snapshot())
        parent = QtWidgets.QWidget()
        qtbot.addWidget(parent)

        assert save_image(parent, image, "pixel-art.png") is None
