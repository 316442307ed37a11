"""Tool palette: color picker, brush/eraser, grid size, export and clear."""

from __future__ import annotations

from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from grid.colors import Color
from grid.store import SizeRange
from grid.tools import Tool


class ToolPanel(QtWidgets.QWidget):
    """Side panel with the drawing controls.

    Signals:
        color_selected: New brush color as ``#rrggbb`` (str)
        tool_selected: Tool chosen by the user (Tool)
        size_changed: New grid size in cells per side (int)
        export_requested: Export PNG clicked
        clear_requested: Clear Canvas clicked
    """

    color_selected = QtCore.Signal(str)
    tool_selected = QtCore.Signal(object)
    size_changed = QtCore.Signal(int)
    export_requested = QtCore.Signal()
    clear_requested = QtCore.Signal()

    def __init__(
        self,
        size_range: SizeRange,
        grid_size: int,
        color: Color,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        """Initialize tool panel.

        Args:
            size_range: Supported grid sizes for the slider
            grid_size: Initial grid size
            color: Initial brush color
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._size_range = size_range
        self._grid_size = grid_size
        self._color = color
        self.setFixedWidth(200)
        self._build_ui()

    def _build_ui(self) -> None:
        title = QtWidgets.QLabel("Tools")
        title.setStyleSheet("font-weight: bold;")

        # Color picker
        self._color_button = QtWidgets.QPushButton()
        self._color_button.setMinimumHeight(36)
        self._color_button.setToolTip("Choose brush color")
        self._color_button.clicked.connect(self._pick_color)
        self._refresh_color_button()

        # Tool buttons
        self._brush_button = QtWidgets.QPushButton("Brush")
        self._eraser_button = QtWidgets.QPushButton("Eraser")
        self._tool_group = QtWidgets.QButtonGroup(self)
        self._tool_group.setExclusive(True)
        for button, tool in ((self._brush_button, Tool.BRUSH), (self._eraser_button, Tool.ERASER)):
            button.setCheckable(True)
            self._tool_group.addButton(button)
            button.clicked.connect(lambda _checked=False, t=tool: self.tool_selected.emit(t))
        self._brush_button.setChecked(True)

        # Grid size slider
        self._size_label = QtWidgets.QLabel()
        self._size_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self._size_slider.setRange(self._size_range.min_size, self._size_range.sizes()[-1])
        self._size_slider.setSingleStep(self._size_range.step)
        self._size_slider.setPageStep(self._size_range.step)
        self._size_slider.setTickInterval(self._size_range.step)
        self._size_slider.setTickPosition(QtWidgets.QSlider.TicksBelow)
        self._size_slider.setValue(self._grid_size)
        self._size_slider.valueChanged.connect(self._on_slider_changed)
        self._refresh_size_label()

        self._export_button = QtWidgets.QPushButton("Export PNG")
        self._export_button.clicked.connect(self.export_requested.emit)
        self._export_button.setStyleSheet("background-color: #4f46e5; color: white; padding: 6px;")

        self._clear_button = QtWidgets.QPushButton("Clear Canvas")
        self._clear_button.clicked.connect(self.clear_requested.emit)
        self._clear_button.setStyleSheet("background-color: #ef4444; color: white; padding: 6px;")

        tool_row = QtWidgets.QHBoxLayout()
        tool_row.addWidget(self._brush_button)
        tool_row.addWidget(self._eraser_button)

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(title)
        layout.addWidget(QtWidgets.QLabel("Color Picker"))
        layout.addWidget(self._color_button)
        layout.addLayout(tool_row)
        layout.addWidget(self._size_label)
        layout.addWidget(self._size_slider)
        layout.addSpacing(8)
        layout.addWidget(self._export_button)
        layout.addWidget(self._clear_button)
        layout.addStretch(1)
        self.setLayout(layout)

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        """Show ``color`` as the current brush color and announce it."""
        self._color = color
        self._refresh_color_button()
        self.color_selected.emit(color.to_hex())

    def set_grid_size(self, size: int) -> None:
        self._size_slider.setValue(size)

    def set_export_enabled(self, enabled: bool) -> None:
        self._export_button.setEnabled(enabled)

    def _pick_color(self) -> None:
        chosen = QtWidgets.QColorDialog.getColor(
            QtGui.QColor(self._color.to_hex()), self, "Select Color"
        )
        if not chosen.isValid():
            return
        self.set_color(Color(chosen.red(), chosen.green(), chosen.blue()))

    def _on_slider_changed(self, value: int) -> None:
        r = self._size_range
        snapped = r.min_size + round((value - r.min_size) / r.step) * r.step
        snapped = max(r.min_size, min(r.sizes()[-1], snapped))
        if snapped != value:
            # Re-enters this slot with the snapped value
            self._size_slider.setValue(snapped)
            return
        if snapped == self._grid_size:
            return
        self._grid_size = snapped
        self._refresh_size_label()
        self.size_changed.emit(snapped)

    def _refresh_color_button(self) -> None:
        hex_color = self._color.to_hex()
        text_color = "#ffffff" if _is_dark(self._color) else "#000000"
        self._color_button.setText(hex_color)
        self._color_button.setStyleSheet(f"background-color: {hex_color}; color: {text_color};")

    def _refresh_size_label(self) -> None:
        self._size_label.setText(f"Grid Size: {self._grid_size}x{self._grid_size}")


def _is_dark(color: Color) -> bool:
    luminance = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    return luminance < 128


__all__ = ["ToolPanel"]
