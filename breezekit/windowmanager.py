"""Start window moves from mouse presses on empty areas of dragable widgets."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .dragrules import DragMode, DragRules, Widget
from .geometry import Point

DEFAULT_DRAG_DISTANCE = 10
DEFAULT_DRAG_DELAY = 500


def _top_level(widget: Widget) -> Widget:
    """The window holding widget: itself or the nearest window ancestor, else the root."""
    if widget.is_window:
        return widget
    root = widget
    for ancestor in widget.ancestors():
        if ancestor.is_window:
            return ancestor
        root = ancestor
    return root


def _child_at(widget: Widget, position: Point) -> Widget | None:
    return next((item for item in widget.items if item.geometry.contains(position)), None)


class WindowManager:
    """Tracks mouse presses on registered widgets and turns them into window moves.

    A press on a dragable area records a target and waits for the probe move
    sent at the same position; that move arms a timer of ``drag_delay``
    milliseconds. Moving at least ``drag_distance`` pixels arms it at once.
    When the timer fires, ``start_system_move`` is asked to move the window.
    The pending timer is exposed as ``timer_delay`` (None when stopped).
    """

    def __init__(
        self,
        app_name: str = "",
        start_system_move: Callable[[Widget], bool] | None = None,
    ) -> None:
        self.app_name = app_name
        self.start_system_move = start_system_move or (lambda window: True)
        self.mouse_grabber: Widget | None = None
        self.rules = DragRules()
        self.drag_distance = DEFAULT_DRAG_DISTANCE
        self.drag_delay = DEFAULT_DRAG_DELAY
        self.locked = False
        self.timer_delay: int | None = None
        self.target: Widget | None = None
        self.drag_point = Point()
        self.global_drag_point = Point()
        self.drag_about_to_start = False
        self.drag_in_progress = False
        self._event_in_quick_widget = False
        self._registered: set[Widget] = set()

    @property
    def enabled(self) -> bool:
        return self.rules.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.rules.enabled = value

    @property
    def drag_mode(self) -> DragMode:
        return self.rules.drag_mode

    def initialize(
        self,
        drag_mode: DragMode = DragMode.FULL,
        drag_distance: int = DEFAULT_DRAG_DISTANCE,
        drag_delay: int = DEFAULT_DRAG_DELAY,
        white_list: Iterable[str] = (),
        black_list: Iterable[str] = (),
    ) -> None:
        """Apply the drag settings and rebuild the exception lists."""
        self.rules = DragRules(drag_mode, white_list, black_list)
        self.drag_distance = drag_distance
        self.drag_delay = drag_delay

    def register_widget(self, widget: Widget) -> bool:
        """Watch widget if it can start drags or must block them; True when watched."""
        if (
            self.rules.is_black_listed(widget, self.app_name)
            or self.rules.is_dragable(widget, self.app_name)
            or widget.inherits("QQuickWidget")
        ):
            self._registered.add(widget)
            return True
        return False

    def unregister_widget(self, widget: Widget | None) -> None:
        if widget is not None:
            self._registered.discard(widget)

    def is_registered(self, widget: Widget) -> bool:
        return widget in self._registered

    def can_drag(self, widget: Widget) -> bool:
        """True when nothing in progress prevents a drag from widget."""
        if not self.enabled:
            return False
        if self.mouse_grabber is not None:
            return False
        # a changed cursor means some other action is going on
        return widget.arrow_cursor

    def _stop_timer(self) -> None:
        self.timer_delay = None

    def _start_timer(self, delay: int) -> None:
        self.timer_delay = delay

    def mouse_press(self, widget: Widget, position: Point, global_position: Point) -> bool:
        """Handle a left-button press on widget; the event is never eaten.

        On success the target is recorded and the caller delivers the probe
        move at the same position through ``mouse_move``.
        """
        if self.drag_in_progress and self.target is not None and self.enabled:
            # counterbalance the press that started the finished drag
            self.mouse_release()

        if not self.enabled or widget not in self._registered:
            return False

        if widget.inherits("QQuickWidget"):
            self._event_in_quick_widget = True
            return False
        self._event_in_quick_widget = False

        if self.locked:
            return False
        self.locked = True

        if self.rules.is_black_listed(widget, self.app_name) or not self.can_drag(widget):
            return False

        child = _child_at(widget, position)
        if not self.rules.can_drag_child(widget, child, position):
            return False

        self.target = widget
        self.drag_point = position
        self.global_drag_point = global_position
        self.drag_about_to_start = True
        return False

    def mouse_move(self, position: Point, global_position: Point) -> bool:
        """Handle a move over the target; True when the event is consumed."""
        if not self.enabled or self.target is None:
            return False

        if self.drag_in_progress:
            self.mouse_release()
            return False

        self._stop_timer()

        if self.drag_about_to_start:
            if position == self.drag_point:
                self.drag_about_to_start = False
                self._start_timer(self.drag_delay)
            else:
                self.reset_drag()
        elif (global_position - self.global_drag_point).manhattan_length() >= self.drag_distance:
            self._start_timer(0)
        return True

    def mouse_release(self) -> bool:
        """Handle a button release anywhere; the event is never eaten."""
        if self.timer_delay is not None:
            self.reset_drag()
        if self.locked:
            self.locked = False
        if self.enabled and self.target is not None:
            self.reset_drag()
        return False

    def timer_fired(self) -> bool:
        """Run the pending timer: start the window move. True when a move began."""
        if self.timer_delay is None:
            return False
        self._stop_timer()
        self.locked = False
        started = False
        if self.target is not None:
            started = self._start_drag(_top_level(self.target))
        self.reset_drag()
        return started

    def _start_drag(self, window: Widget | None) -> bool:
        if not (self.enabled and window is not None):
            return False
        if self.mouse_grabber is not None:
            return False
        self.drag_in_progress = bool(self.start_system_move(window))
        return self.drag_in_progress

    def reset_drag(self) -> None:
        """Forget the target and stop any pending drag."""
        self.target = None
        self._stop_timer()
        self.drag_point = Point()
        self.global_drag_point = Point()
        self.drag_about_to_start = False
        self.drag_in_progress = False