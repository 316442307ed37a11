"""Background export worker and image saving."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6 import QtCore, QtWidgets

from export.rasterizer import Rasterizer
from export.types import ImageHandle
from grid.store import GridSnapshot
from log_config.logger import get_logger

logger = get_logger(__name__)


class ExportWorker(QtCore.QThread):
    """Background thread rasterizing one grid snapshot."""

    completed = QtCore.Signal(object)  # ImageHandle
    failed = QtCore.Signal(object)  # Exception

    def __init__(
        self,
        rasterizer: Rasterizer,
        snapshot: GridSnapshot,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._rasterizer = rasterizer
        self._snapshot = snapshot

    def run(self) -> None:
        """Rasterize in background."""
        try:
            image = self._rasterizer.rasterize(self._snapshot)
        except Exception as e:  # noqa: BLE001
            self.failed.emit(e)
            return
        self.completed.emit(image)


def save_image(
    parent: QtWidgets.QWidget,
    image: ImageHandle,
    default_name: str,
) -> Optional[Path]:
    """Ask for a destination and write the exported image there.

    Args:
        parent: Parent widget for dialogs
        image: Exported image
        default_name: Suggested file name

    Returns:
        Written path, or None if cancelled or the write failed
    """
    path, _ = QtWidgets.QFileDialog.getSaveFileName(
        parent,
        "Save Pixel Art",
        default_name,
        "PNG images (*.png)",
    )
    if not path:
        return None
    try:
        written = image.save(Path(path))
    except OSError as exc:
        logger.error(f"Failed to save image to {path}: {exc}")
        QtWidgets.QMessageBox.warning(parent, "Save Pixel Art", str(exc))
        return None
    logger.info(f"Saved image to {written}")
    return written


__all__ = ["ExportWorker", "save_image"]
