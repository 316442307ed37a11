"""Preview dialog showing the most recent export with Save/Close actions."""

from __future__ import annotations

from typing import Callable

from PySide6 import QtCore, QtGui, QtWidgets

from export.types import ImageHandle


class PreviewDialog(QtWidgets.QDialog):
    """Modal preview of an exported image."""

    def __init__(
        self,
        parent: QtWidgets.QWidget | None,
        image: ImageHandle,
        on_save: Callable[[], None],
    ) -> None:
        """Initialize preview dialog.

        Args:
            parent: Parent widget
            image: Exported image to display
            on_save: Callback for the Save button
        """
        super().__init__(parent)
        self.setWindowTitle("Preview")
        self.setModal(True)
        self._on_save = on_save

        header = QtWidgets.QLabel("Your Pixel Art")
        header.setStyleSheet("font-size: 16pt; font-weight: bold;")

        pixmap = QtGui.QPixmap()
        pixmap.loadFromData(image.data)
        self._image_label = QtWidgets.QLabel()
        self._image_label.setAlignment(QtCore.Qt.AlignCenter)
        self._image_label.setFrameShape(QtWidgets.QFrame.Box)
        self._image_label.setPixmap(
            pixmap.scaled(400, 400, QtCore.Qt.KeepAspectRatio, QtCore.Qt.FastTransformation)
        )

        self._save_button = QtWidgets.QPushButton("Save")
        self._save_button.clicked.connect(lambda: self._on_save())
        self._save_button.setStyleSheet("background-color: #4f46e5; color: white; padding: 6px;")

        self._close_button = QtWidgets.QPushButton("Close")
        self._close_button.clicked.connect(self.accept)
        self._close_button.setStyleSheet("background-color: #6b7280; color: white; padding: 6px;")

        button_row = QtWidgets.QHBoxLayout()
        button_row.addWidget(self._save_button)
        button_row.addWidget(self._close_button)

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(header)
        layout.addWidget(self._image_label)
        layout.addLayout(button_row)
        self.setLayout(layout)

    def image_pixmap(self) -> QtGui.QPixmap:
        return self._image_label.pixmap()


__all__ = ["PreviewDialog"]
