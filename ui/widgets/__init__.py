"""UI widgets module."""

from ui.widgets.pixel_canvas import PixelCanvasWidget
from ui.widgets.tool_panel import ToolPanel

__all__ = ["PixelCanvasWidget", "ToolPanel"]
