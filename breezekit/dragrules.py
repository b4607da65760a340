"""Rules deciding from which widgets a window may be dragged."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .geometry import Point, Rect, Size

NO_WINDOW_GRAB = "_kde_no_window_grab"

_DEFAULT_WHITE_LIST = ("MplayerWindow", "ViewSliders@kmix", "Sidebar_Widget@konqueror")
_DEFAULT_BLACK_LIST = ("CustomTrackView@kdenlive", "MuseScore", "KGameCanvasWidget")


class DragMode(IntEnum):
    """How much of a window can start a drag."""

    NONE = 0
    MINIMAL = 1
    FULL = 2


@dataclass(eq=False)
class Widget:
    """A minimal widget description, enough to decide on window drags.

    Widgets compare by identity. ``items`` are the interactive sub-areas of a
    widget (menu actions, tabs, view items, group box check box and label),
    hit-tested by their geometry.
    """

    class_name: str
    bases: tuple[str, ...] = ()
    parent: Widget | None = field(default=None, repr=False)
    object_name: str = ""
    geometry: Rect = Rect()
    size_hint: Size = Size()
    minimum_size_hint: Size = Size()
    hover: bool = False
    is_window: bool = False
    enabled: bool = True
    arrow_cursor: bool = True
    auto_raise: bool = False
    text_selectable: bool = False
    checkable: bool = False
    has_frame: bool = False
    multi_selection: bool = False
    row_count: int = 0
    drag_enabled: bool = False
    is_separator: bool = False
    active: bool = False
    properties: dict[str, Any] = field(default_factory=dict)
    items: list[Widget] = field(default_factory=list, repr=False)
    viewport: Widget | None = field(default=None, repr=False)
    title_bar: Widget | None = field(default=None, repr=False)

    def inherits(self, class_name: str) -> bool:
        """True when the widget is of the given class or derives from it."""
        return class_name == self.class_name or class_name in self.bases

    def ancestors(self) -> Iterator[Widget]:
        """Parent widgets, nearest first."""
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent


def _item_at(widget: Widget, position: Point) -> Widget | None:
    return next((item for item in widget.items if item.geometry.contains(position)), None)


def _parent_inherits(widget: Widget, class_name: str) -> bool:
    return widget.parent is not None and widget.parent.inherits(class_name)


@dataclass(frozen=True)
class ExceptionId:
    """A class name, optionally restricted to one application."""

    class_name: str
    app_name: str = ""

    @classmethod
    def parse(cls, value: str) -> ExceptionId:
        """Read a ``ClassName@application`` specification."""
        parts = value.split("@")
        app_name = parts[1].strip() if len(parts) > 1 else ""
        return cls(parts[0].strip(), app_name)


def _exception_set(defaults: Iterable[str], extra: Iterable[str]) -> set[ExceptionId]:
    result = {ExceptionId.parse(value) for value in defaults}
    for value in extra:
        exception = ExceptionId.parse(value)
        if exception.class_name:
            result.add(exception)
    return result


class DragRules:
    """Window drag policy: drag mode plus per-application white and black lists."""

    def __init__(
        self,
        drag_mode: DragMode = DragMode.FULL,
        white_list: Iterable[str] = (),
        black_list: Iterable[str] = (),
    ) -> None:
        self.drag_mode = DragMode(drag_mode)
        self.enabled = self.drag_mode is not DragMode.NONE
        self.white_list = _exception_set(_DEFAULT_WHITE_LIST, white_list)
        self.black_list = _exception_set(_DEFAULT_BLACK_LIST, black_list)

    def is_black_listed(self, widget: Widget, app_name: str) -> bool:
        """True when dragging from the widget is forbidden.

        A ``*`` entry for the running application disables dragging entirely.
        """
        if widget.properties.get(NO_WINDOW_GRAB):
            return True
        for exception in self.black_list:
            if exception.app_name and exception.app_name != app_name:
                continue
            if exception.class_name == "*" and exception.app_name:
                self.enabled = False
                return True
            if widget.inherits(exception.class_name):
                return True
        return False

    def is_white_listed(self, widget: Widget, app_name: str) -> bool:
        """True when the widget is explicitly allowed to start drags."""
        return any(
            widget.inherits(exception.class_name)
            for exception in self.white_list
            if not exception.app_name or exception.app_name == app_name
        )

    @staticmethod
    def _is_dock_widget_title(widget: Widget) -> bool:
        parent = widget.parent
        return parent is not None and parent.inherits("QDockWidget") and parent.title_bar is widget

    def is_dragable(self, widget: Widget | None, app_name: str) -> bool:
        """True when the widget is of a kind from which windows can be dragged."""
        if widget is None:
            return False

        if (
            (widget.inherits("QDialog") and widget.is_window)
            or (widget.inherits("QMainWindow") and widget.is_window)
            or widget.inherits("QGroupBox")
        ):
            return True

        bars = ("QMenuBar", "QTabBar", "QStatusBar", "QToolBar")
        if any(widget.inherits(name) for name in bars) and not self._is_dock_widget_title(widget):
            return True

        if widget.inherits("KScreenSaver") and widget.inherits("KCModule"):
            return True

        if self.is_white_listed(widget, app_name):
            return True

        if widget.inherits("QToolButton") and widget.auto_raise:
            return True

        parent = widget.parent
        if parent is not None and (parent.inherits("QListView") or parent.inherits("QTreeView")):
            if parent.viewport is widget and not self.is_black_listed(parent, app_name):
                return True

        if widget.inherits("QLabel"):
            if widget.text_selectable:
                return False
            if any(ancestor.inherits("QStatusBar") for ancestor in widget.ancestors()):
                return True

        return False

    def can_drag_child(self, widget: Widget, child: Widget | None, position: Point) -> bool:
        """True when a drag may start from widget at position, child being under it."""
        if child is not None and not child.arrow_cursor:
            return False
        if child is not None and any(
            child.inherits(name) for name in ("QComboBox", "QProgressBar", "QScrollBar")
        ):
            return False

        if widget.inherits("QToolButton"):
            if self.drag_mode is DragMode.MINIMAL and not _parent_inherits(widget, "QToolBar"):
                return False
            return widget.auto_raise and not widget.enabled

        if widget.inherits("QMenuBar"):
            if any(ancestor.inherits("QMdiSubWindow") for ancestor in widget.ancestors()):
                return False
            if any(item.active and item.enabled for item in widget.items):
                return False
            action = _item_at(widget, position)
            if action is not None:
                if action.is_separator:
                    return True
                if action.enabled:
                    return False
            return True

        if self.drag_mode is DragMode.MINIMAL:
            return widget.inherits("QToolBar")

        if widget.inherits("QTabBar"):
            return _item_at(widget, position) is None

        if widget.inherits("QGroupBox"):
            if not widget.checkable:
                return True
            return _item_at(widget, position) is None

        if widget.inherits("QLabel") and widget.text_selectable:
            return False

        parent = widget.parent
        if parent is None or parent.viewport is not widget:
            return True

        if parent.inherits("QListView") or parent.inherits("QTreeView"):
            if parent.has_frame:
                return False
            if parent.multi_selection and parent.row_count:
                return False
            return _item_at(parent, position) is None

        if parent.inherits("QAbstractItemView"):
            if parent.has_frame:
                return False
            return _item_at(parent, position) is None

        if parent.inherits("QGraphicsView"):
            if parent.has_frame or parent.drag_enabled:
                return False
            return _item_at(parent, position) is None

        return True