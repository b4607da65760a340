"""Tracks the tool bars at the top of main windows, which share the header colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .geometry import Rect


class ToolBarArea(IntEnum):
    """Where a tool bar is docked in its main window."""

    NONE = 0
    LEFT = 0x1
    RIGHT = 0x2
    TOP = 0x4
    BOTTOM = 0x8


@dataclass(eq=False)
class ToolBar:
    """A tool bar; geometry is relative to its main window."""

    area: ToolBarArea = ToolBarArea.TOP
    geometry: Rect = Rect()
    visible: bool = True
    palette: Any = None


@dataclass(eq=False)
class MainWindow:
    """A main window; menu_height is None when it has no menu widget."""

    width: int = 0
    menu_height: int | None = None
    palette: Any = None
    menu_palette: Any = None


@dataclass
class ToolsAreaManager:
    """Keeps the top tool bars and menu bars of main windows in the header palette."""

    palette: Any = None
    _header_colors: bool = False
    _windows: dict[MainWindow, list[ToolBar]] = field(default_factory=dict, repr=False)

    def _append_if_not_already_exists(self, window: MainWindow, toolbar: ToolBar) -> None:
        toolbars = self._windows.setdefault(window, [])
        if not any(existing is toolbar for existing in toolbars):
            toolbars.append(toolbar)

    def _remove_window_toolbar(self, window: MainWindow, toolbar: ToolBar) -> None:
        toolbars = self._windows.get(window)
        if toolbars is not None:
            toolbars[:] = [existing for existing in toolbars if existing is not toolbar]

    def toolbars(self, window: MainWindow) -> list[ToolBar]:
        """Tool bars registered for window, in registration order."""
        return list(self._windows.get(window, ()))

    def register_toolbar(self, window: MainWindow, toolbar: ToolBar) -> bool:
        """Track toolbar if it sits in the top area; True when it was taken."""
        if toolbar.area is not ToolBarArea.TOP:
            return False
        toolbar.palette = self.palette
        self._append_if_not_already_exists(window, toolbar)
        return True

    def unregister_toolbar(self, window: MainWindow, toolbar: ToolBar) -> bool:
        """Forget toolbar once it has left the top area; True when it was dropped.

        The tool bar gets the window's own palette back.
        """
        if toolbar.area is ToolBarArea.TOP:
            return False
        toolbar.palette = window.palette
        self._remove_window_toolbar(window, toolbar)
        return True

    def remove_window(self, window: MainWindow) -> None:
        """Forget window and all its tool bars."""
        self._windows.pop(window, None)

    def tools_area_rect(self, window: MainWindow) -> Rect:
        """Rectangle covering the menu and the visible top tool bars of window."""
        item_height = window.menu_height or 0
        for toolbar in self._windows.get(window, ()):
            if toolbar.visible and toolbar.area is ToolBarArea.TOP:
                item_height = max(toolbar.geometry.bottom, item_height)
        if item_height > 0:
            item_height += 1
        return Rect(0, 0, window.width, item_height)

    def update_palette(self, palette: Any, has_header_colors: bool) -> None:
        """Apply a new header palette to every tracked tool bar and menu bar."""
        self.palette = palette
        for window, toolbars in self._windows.items():
            for toolbar in toolbars:
                toolbar.palette = palette
            if window.menu_height is not None:
                window.menu_palette = palette
        self._header_colors = bool(has_header_colors)

    def has_header_colors(self) -> bool:
        """True when the colour scheme defines header colours."""
        return self._header_colors