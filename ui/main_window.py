"""Main window class for PixelArt Studio."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from app.events import ErrorCategory, ErrorEvent, get_error_bus
from configs.settings import DEFAULT_CONFIG_PATH, AppConfig, default_config, load_config
from exceptions import ConfigError
from export.flow import ExportFlow
from export.rasterizer import PillowRasterizer, Rasterizer
from export.types import ImageHandle
from grid.colors import Color
from grid.interaction import InteractionController
from grid.store import GridStore
from grid.tools import Tool, ToolState
from log_config.logger import DEFAULT_LOG_DIR, configure_logging, get_logger
from ui.dialogs import PreviewDialog
from ui.export import ExportWorker, save_image
from ui.widgets import PixelCanvasWidget, ToolPanel

logger = get_logger(__name__)

STATUS_TIMEOUT_MS = 5000


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        config_path: Optional[Path] = None,
        config: Optional[AppConfig] = None,
        rasterizer: Optional[Rasterizer] = None,
    ) -> None:
        super().__init__()
        if config is None:
            config = load_config(Path(config_path)) if config_path is not None else default_config()
        self._config = config
        self.setWindowTitle(config.ui.window_title)

        canvas_cfg = config.canvas
        self._store = GridStore(canvas_cfg.default_size, canvas_cfg.size_range)
        self._controller = InteractionController(
            self._store,
            ToolState(tool=Tool.BRUSH, color=Color.from_hex(canvas_cfg.default_color)),
        )
        if rasterizer is None:
            rasterizer = PillowRasterizer(
                canvas_px=canvas_cfg.canvas_px,
                padding_px=config.export.padding_px,
                show_cell_borders=config.export.show_cell_borders,
            )
        self._flow = ExportFlow(rasterizer)
        self._worker: Optional[ExportWorker] = None
        self._preview: Optional[PreviewDialog] = None

        self._build_ui()

        self._error_bus = get_error_bus()
        self._error_bus.subscribe(self._on_export_error, category=ErrorCategory.EXPORT)

        logger.info(f"Main window ready: {self._store.size}x{self._store.size} grid")

    def _build_ui(self) -> None:
        canvas_cfg = self._config.canvas

        title = QtWidgets.QLabel(self._config.ui.window_title)
        title.setAlignment(QtCore.Qt.AlignCenter)
        title.setStyleSheet("font-size: 20pt; font-weight: bold; color: #4f46e5;")

        self._tool_panel = ToolPanel(
            size_range=canvas_cfg.size_range,
            grid_size=self._store.size,
            color=self._controller.tool_state.color,
        )
        self._tool_panel.color_selected.connect(self._controller.select_color)
        self._tool_panel.tool_selected.connect(self._controller.select_tool)
        self._tool_panel.size_changed.connect(self._on_size_changed)
        self._tool_panel.export_requested.connect(self.export_image)
        self._tool_panel.clear_requested.connect(self._on_clear_requested)

        self._canvas = PixelCanvasWidget(self._store, self._controller, canvas_px=canvas_cfg.canvas_px)

        canvas_frame = QtWidgets.QFrame()
        canvas_frame.setStyleSheet("background-color: white;")
        frame_layout = QtWidgets.QVBoxLayout(canvas_frame)
        frame_layout.setContentsMargins(16, 16, 16, 16)
        frame_layout.addWidget(self._canvas)

        body = QtWidgets.QHBoxLayout()
        body.addStretch(1)
        body.addWidget(self._tool_panel, 0, QtCore.Qt.AlignTop)
        body.addSpacing(24)
        body.addWidget(canvas_frame, 0, QtCore.Qt.AlignTop)
        body.addStretch(1)

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(title)
        layout.addLayout(body)
        layout.addStretch(1)

        container = QtWidgets.QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)
        self.statusBar()

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def store(self) -> GridStore:
        return self._store

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def export_flow(self) -> ExportFlow:
        return self._flow

    @property
    def canvas(self) -> PixelCanvasWidget:
        return self._canvas

    @property
    def tool_panel(self) -> ToolPanel:
        return self._tool_panel

    @property
    def preview_dialog(self) -> Optional[PreviewDialog]:
        return self._preview

    def export_image(self) -> bool:
        """Start rasterizing the current grid in the background.

        Returns:
            False if another export is still pending or a preview is open
        """
        if not self._flow.request_export():
            return False
        self._tool_panel.set_export_enabled(False)
        worker = ExportWorker(self._flow.rasterizer, self._store.snapshot(), self)
        worker.completed.connect(self._on_export_completed)
        worker.failed.connect(self._on_export_failed)
        worker.finished.connect(worker.deleteLater)
        self._worker = worker
        worker.start()
        return True

    def _on_export_completed(self, image: ImageHandle) -> None:
        self._worker = None
        self._tool_panel.set_export_enabled(True)
        self._flow.complete_export(image)
        self._show_preview(image)

    def _on_export_failed(self, error: Exception) -> None:
        self._worker = None
        self._tool_panel.set_export_enabled(True)
        self._flow.fail_export(error)

    def _on_export_error(self, event: ErrorEvent) -> None:
        self.statusBar().showMessage(event.message, STATUS_TIMEOUT_MS)

    def _show_preview(self, image: ImageHandle) -> None:
        dialog = PreviewDialog(self, image, on_save=self._save_exported_image)
        dialog.finished.connect(self._on_preview_closed)
        self._preview = dialog
        dialog.open()

    def _on_preview_closed(self, _result: int) -> None:
        self._flow.dismiss_preview()
        if self._preview is not None:
            self._preview.deleteLater()
            self._preview = None

    def _save_exported_image(self) -> None:
        path = save_image(
            self._preview or self,
            self._flow.saveable_image(),
            self._config.export.default_filename,
        )
        if path is not None:
            self.statusBar().showMessage(f"Saved {path}", STATUS_TIMEOUT_MS)

    def _on_size_changed(self, size: int) -> None:
        self._store.resize(size)
        self._controller.on_pointer_up()

    def _on_clear_requested(self) -> None:
        self._store.clear()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._error_bus.unsubscribe(self._on_export_error, category=ErrorCategory.EXPORT)
        self._canvas.detach()
        if self._worker is not None:
            self._worker.wait()
        super().closeEvent(event)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PixelArt Studio pixel-art editor.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--log-dir", type=Path, default=DEFAULT_LOG_DIR, help="Directory for log files")
    parser.add_argument("--verbose", action="store_true", help="Show debug messages on the console")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_dir, console_level="DEBUG" if args.verbose else "INFO")
    app = QtWidgets.QApplication(sys.argv[:1])
    try:
        window = MainWindow(config_path=args.config)
    except ConfigError as exc:
        logger.error(f"Failed to start: {exc}")
        QtWidgets.QMessageBox.critical(
            None,
            "Configuration Error",
            f"Failed to load configuration:\n\n{exc}",
        )
        return 1
    window.show()
    return app.exec()


__all__ = ["MainWindow", "main"]


if __name__ == "__main__":
    sys.exit(main())
