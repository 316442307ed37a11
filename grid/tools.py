"""Paint tools and the currently selected brush color."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from grid.colors import BLACK, WHITE, Color


class Tool(Enum):
    BRUSH = "brush"
    ERASER = "eraser"


@dataclass
class ToolState:
    """Active tool plus the brush color picked by the user."""

    tool: Tool = Tool.BRUSH
    color: Color = field(default=BLACK)

    def paint_color(self) -> Color:
        """Color deposited by the active tool (eraser is always white)."""
        if self.tool is Tool.ERASER:
            return WHITE
        return self.color


__all__ = ["Tool", "ToolState"]
