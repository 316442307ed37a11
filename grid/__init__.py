"""Grid state model: colors, tools, store and pointer interaction."""

from grid.colors import BLACK, WHITE, Color, to_color
from grid.interaction import InteractionController
from grid.store import GridSnapshot, GridStore, SizeRange
from grid.tools import Tool, ToolState

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "GridSnapshot",
    "GridStore",
    "InteractionController",
    "SizeRange",
    "Tool",
    "ToolState",
    "to_color",
]
