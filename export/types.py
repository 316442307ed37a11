"""Value types produced by the export path."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PNG_MIME_TYPE = "image/png"


@dataclass(frozen=True)
class ImageHandle:
    """Self-contained encoded image, usable for preview and download.

    Attributes:
        data: Encoded image bytes
        mime_type: MIME type of ``data``
        width: Image width in pixels
        height: Image height in pixels
    """

    data: bytes
    mime_type: str = PNG_MIME_TYPE
    width: int = 0
    height: int = 0

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def save(self, path: Path) -> Path:
        """Write the encoded bytes to ``path`` and return it."""
        path = Path(path)
        path.write_bytes(self.data)
        return path


@dataclass(frozen=True)
class ExportResult:
    """Outcome visible to the UI: the last exported image and preview flag."""

    image: Optional[ImageHandle] = None
    preview_visible: bool = False

    @property
    def is_empty(self) -> bool:
        return self.image is None


__all__ = ["ExportResult", "ImageHandle", "PNG_MIME_TYPE"]
