"""UI dialogs module for PixelArt Studio."""

from ui.dialogs.preview_dialog import PreviewDialog

__all__ = ["PreviewDialog"]
