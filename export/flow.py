"""Export/preview state machine.

States move ``IDLE -> EXPORTING -> PREVIEW_VISIBLE -> IDLE``. A failed
export goes back to ``IDLE`` without producing a result; the failure is
logged and published on the error bus so the window can flag it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from app.events import ErrorCategory, ErrorSeverity, publish_error
from exceptions import ExportError
from export.rasterizer import Rasterizer
from export.types import ExportResult, ImageHandle
from grid.store import GridSnapshot
from log_config.logger import get_logger

logger = get_logger(__name__)


class ExportState(Enum):
    IDLE = "idle"
    EXPORTING = "exporting"
    PREVIEW_VISIBLE = "preview_visible"


class ExportFlow:
    """Tracks one export at a time and the preview it produces."""

    def __init__(self, rasterizer: Rasterizer) -> None:
        self._rasterizer = rasterizer
        self._state = ExportState.IDLE
        self._result = ExportResult()

    @property
    def rasterizer(self) -> Rasterizer:
        return self._rasterizer

    @property
    def state(self) -> ExportState:
        return self._state

    @property
    def result(self) -> ExportResult:
        return self._result

    @property
    def preview_visible(self) -> bool:
        return self._result.preview_visible

    def request_export(self) -> bool:
        """Enter EXPORTING. Requests outside IDLE are rejected.

        Returns:
            True if the request was accepted
        """
        if self._state is not ExportState.IDLE:
            logger.warning(f"Export request ignored while {self._state.value}")
            return False
        self._state = ExportState.EXPORTING
        logger.info("Export started")
        return True

    def complete_export(self, image: ImageHandle) -> None:
        if self._state is not ExportState.EXPORTING:
            raise ExportError(f"No export in progress (state: {self._state.value})")
        self._result = ExportResult(image=image, preview_visible=True)
        self._state = ExportState.PREVIEW_VISIBLE
        logger.info(f"Export finished: {image.width}x{image.height} {image.mime_type}, {len(image.data)} bytes")

    def fail_export(self, error: Exception) -> None:
        if self._state is not ExportState.EXPORTING:
            raise ExportError(f"No export in progress (state: {self._state.value})")
        self._result = ExportResult()
        self._state = ExportState.IDLE
        publish_error(
            category=ErrorCategory.EXPORT,
            severity=ErrorSeverity.ERROR,
            message=f"Export failed: {error}",
            source="ExportFlow",
            exception=error,
        )

    def export_image(self, snapshot: GridSnapshot) -> bool:
        """Rasterize ``snapshot`` synchronously and apply the outcome.

        Returns:
            True if a preview is now visible
        """
        if not self.request_export():
            return False
        try:
            image = self._rasterizer.rasterize(snapshot)
        except Exception as e:  # noqa: BLE001
            self.fail_export(e)
            return False
        self.complete_export(image)
        return True

    def dismiss_preview(self) -> None:
        if self._state is not ExportState.PREVIEW_VISIBLE:
            return
        self._result = ExportResult()
        self._state = ExportState.IDLE
        logger.debug("Preview dismissed")

    def saveable_image(self) -> ImageHandle:
        """Image offered by the preview's Save action.

        Raises:
            ExportError: If there is no exported image
        """
        image: Optional[ImageHandle] = self._result.image
        if image is None:
            raise ExportError("Nothing to save; export the canvas first")
        return image


__all__ = ["ExportFlow", "ExportState"]
