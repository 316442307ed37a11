"""Translate pointer events on grid cells into paint commands."""

from __future__ import annotations

from typing import Optional

from grid.colors import ColorLike, to_color
from grid.store import GridStore
from grid.tools import Tool, ToolState
from log_config.logger import get_logger

logger = get_logger(__name__)


class InteractionController:
    """Pointer-to-paint mapping with a held-button drawing flag.

    A press paints the cell under the pointer and starts a drawing session;
    entering further cells paints them only while the session is active, so
    a drag paints continuously and a plain hover paints nothing.
    """

    def __init__(self, store: GridStore, tool_state: Optional[ToolState] = None) -> None:
        self._store = store
        self._tool_state = tool_state or ToolState()
        self._drawing = False

    @property
    def tool_state(self) -> ToolState:
        return self._tool_state

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    def on_pointer_down(self, index: int) -> None:
        self._drawing = True
        self._paint(index)

    def on_pointer_enter(self, index: int) -> None:
        if self._drawing:
            self._paint(index)

    def on_pointer_up(self) -> None:
        self._drawing = False

    def on_pointer_leave_canvas(self) -> None:
        self._drawing = False

    def select_tool(self, tool: Tool) -> None:
        logger.debug(f"Tool selected: {tool.value}")
        self._tool_state.tool = tool

    def select_color(self, color: ColorLike) -> None:
        self._tool_state.color = to_color(color)
        logger.debug(f"Brush color selected: {self._tool_state.color}")

    def _paint(self, index: int) -> None:
        self._store.set_cell_color(index, self._tool_state.paint_color())


__all__ = ["InteractionController"]
