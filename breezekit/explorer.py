"""Debug helper printing a widget and its parents on mouse clicks."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from .dragrules import Widget

LEFT_BUTTON = 0x1


class EventType(IntEnum):
    """Event kinds the explorer knows about."""

    MOUSE_BUTTON_PRESS = 2
    MOUSE_BUTTON_RELEASE = 3
    MOUSE_MOVE = 5
    FOCUS_IN = 8
    FOCUS_OUT = 9
    ENTER = 10
    LEAVE = 11
    PAINT = 12
    HOVER_ENTER = 127
    HOVER_LEAVE = 128
    HOVER_MOVE = 129


_EVENT_NAMES = {
    EventType.MOUSE_BUTTON_PRESS: "MouseButtonPress",
    EventType.MOUSE_BUTTON_RELEASE: "MouseButtonRelease",
    EventType.MOUSE_MOVE: "MouseMove",
}


def _describe(widget: Widget) -> str:
    if widget.object_name:
        return f'{widget.class_name}(0x{id(widget):x}, name = "{widget.object_name}")'
    return f"{widget.class_name}(0x{id(widget):x})"


class WidgetExplorer:
    """Reports widget geometry and ancestry when the left button is pressed."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.enabled = False
        self.draw_widget_rects = False
        self._stream = stream

    def event_type(self, event: EventType | int) -> str:
        """Name of a mouse event type, or ``Unknown``."""
        try:
            return _EVENT_NAMES.get(EventType(event), "Unknown")
        except ValueError:
            return "Unknown"

    def widget_information(self, widget: Widget) -> str:
        """One-line summary of a widget's geometry, hints and hover state."""
        rect = widget.geometry
        hint = widget.size_hint
        minimum = widget.minimum_size_hint
        return (
            f"{_describe(widget)} ({widget.class_name})"
            f" position: {rect.x},{rect.y}"
            f" size: {rect.width},{rect.height}"
            f" sizeHint: {hint.width},{hint.height}"
            f" minimumSizeHint: {minimum.width},{minimum.height}"
            f" hover: {int(widget.hover)}"
        )

    def handle_press(self, widget: Widget, button: int = LEFT_BUTTON) -> list[str]:
        """Report a mouse press on widget; returns the lines written.

        Nothing is reported when the explorer is disabled or the button is
        not the left one.
        """
        if not self.enabled or button != LEFT_BUTTON:
            return []
        lines = [
            f"WidgetExplorer - type: {self.event_type(EventType.MOUSE_BUTTON_PRESS)}"
            f" widget: {self.widget_information(widget)}"
        ]
        lines.extend(f"    parent: {self.widget_information(parent)}" for parent in widget.ancestors())
        lines.append("")
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write("".join(f"{line}\n" for line in lines))
        return lines