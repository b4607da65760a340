"""Integer geometry primitives and the style's layout metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class Point:
    """A point on an integer grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(_round_half_away(self.x * factor), _round_half_away(self.y * factor))

    __rmul__ = __mul__

    def manhattan_length(self) -> int:
        """Sum of the absolute coordinates."""
        return abs(self.x) + abs(self.y)


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: int = 0
    height: int = 0

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __mul__(self, factor: float) -> Size:
        return Size(
            _round_half_away(self.width * factor),
            _round_half_away(self.height * factor),
        )

    __rmul__ = __mul__

    def is_valid(self) -> bool:
        """True when neither dimension is negative."""
        return self.width >= 0 and self.height >= 0

    def is_empty(self) -> bool:
        """True when either dimension is zero or negative."""
        return self.width <= 0 or self.height <= 0

    def expanded_to(self, other: Size) -> Size:
        """The larger of the two sizes in each dimension."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are inclusive edges."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_point_size(cls, top_left: Point, size: Size) -> Rect:
        return cls(top_left.x, top_left.y, size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def adjusted(self, dx1: int, dy1: int, dx2: int, dy2: int) -> Rect:
        """Move each edge by the given amounts."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )

    def center(self) -> Point:
        """Center point, rounded toward zero."""
        return Point(int((self.left + self.right) / 2), int((self.top + self.bottom) / 2))

    def contains(self, point: Point) -> bool:
        """True when the point lies inside or on the edge of the rectangle."""
        if self.width == 0 or self.height == 0:
            return False
        left, right = sorted((self.left, self.right))
        top, bottom = sorted((self.top, self.bottom))
        return left <= point.x <= right and top <= point.y <= bottom

    def is_valid(self) -> bool:
        """True when both dimensions are positive."""
        return self.width > 0 and self.height > 0

    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def size(self) -> Size:
        return Size(self.width, self.height)

    def translated(self, dx: int, dy: int) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


class PenWidth:
    """Standard pen stroke widths."""

    # Slightly over 1 so that thin strokes do not look skewed.
    SYMBOL = 1.001
    FRAME = 1.001
    SHADOW = 1.001
    NO_PEN = 0


class Metrics:
    """Layout metrics used by the style, in pixels."""

    ARROW_SIZE = 10
    SMALL_ARROW_SIZE = 5

    FRAME_FRAME_WIDTH = 2
    FRAME_FRAME_RADIUS = 5

    LAYOUT_TOP_LEVEL_MARGIN_WIDTH = 10
    LAYOUT_CHILD_MARGIN_WIDTH = 6
    LAYOUT_DEFAULT_SPACING = 6

    LINE_EDIT_FRAME_WIDTH = 6

    MENU_FRAME_WIDTH = 0
    MENU_ITEM_MARGIN_WIDTH = 5
    MENU_ITEM_HIGHLIGHT_GAP = 4
    MENU_ITEM_EXTRA_LEFT_MARGIN = 4
    MENU_ITEM_MARGIN_HEIGHT = 3
    MENU_ITEM_ITEM_SPACING = 4
    MENU_ITEM_ACCELERATOR_SPACE = 16

    COMBO_BOX_FRAME_WIDTH = 6

    SPIN_BOX_FRAME_WIDTH = LINE_EDIT_FRAME_WIDTH
    SPIN_BOX_ARROW_BUTTON_WIDTH = 20

    GROUP_BOX_TITLE_MARGIN_WIDTH = 4

    BUTTON_MIN_WIDTH = 80
    BUTTON_MARGIN_WIDTH = 6
    BUTTON_ITEM_SPACING = 4

    TOOL_BUTTON_MARGIN_WIDTH = 6
    TOOL_BUTTON_ITEM_SPACING = 4
    TOOL_BUTTON_INLINE_INDICATOR_WIDTH = 12

    MENU_BUTTON_INDICATOR_WIDTH = 20

    CHECK_BOX_SIZE = 20
    CHECK_BOX_FOCUS_MARGIN_WIDTH = 2
    CHECK_BOX_ITEM_SPACING = 4
    CHECK_BOX_RADIUS = FRAME_FRAME_RADIUS - 1

    MENU_BAR_ITEM_MARGIN_WIDTH = 10
    MENU_BAR_ITEM_MARGIN_HEIGHT = 6

    SCROLL_BAR_EXTEND = 21
    SCROLL_BAR_SLIDER_WIDTH = 8
    SCROLL_BAR_MIN_SLIDER_HEIGHT = 20
    SCROLL_BAR_NO_BUTTON_HEIGHT = 3
    SCROLL_BAR_SINGLE_BUTTON_HEIGHT = SCROLL_BAR_EXTEND
    SCROLL_BAR_DOUBLE_BUTTON_HEIGHT = 2 * SCROLL_BAR_EXTEND

    TOOL_BAR_FRAME_WIDTH = 0
    TOOL_BAR_HANDLE_EXTENT = 10
    TOOL_BAR_HANDLE_WIDTH = 6
    TOOL_BAR_SEPARATOR_WIDTH = 8
    TOOL_BAR_EXTENSION_WIDTH = 20
    TOOL_BAR_ITEM_MARGIN = 6
    TOOL_BAR_ITEM_SPACING = 0
    TOOL_BAR_SEPARATOR_VERTICAL_MARGIN = 2

    PROGRESS_BAR_BUSY_INDICATOR_SIZE = 14
    PROGRESS_BAR_THICKNESS = 6
    PROGRESS_BAR_ITEM_SPACING = 4

    TITLE_BAR_MARGIN_WIDTH = 4

    SLIDER_TICK_LENGTH = 8
    SLIDER_TICK_MARGIN_WIDTH = 2
    SLIDER_GROOVE_THICKNESS = 6
    SLIDER_CONTROL_THICKNESS = 20

    TAB_BAR_TAB_MARGIN_HEIGHT = 4
    TAB_BAR_TAB_MARGIN_WIDTH = 8
    TAB_BAR_TAB_MIN_WIDTH = 80
    TAB_BAR_TAB_MIN_HEIGHT = 30
    TAB_BAR_STATIC_TAB_MIN_HEIGHT = 34
    TAB_BAR_TAB_ITEM_SPACING = 8
    TAB_BAR_TAB_OVERLAP = 1
    TAB_BAR_BASE_OVERLAP = 2
    TAB_BAR_ACTIVE_EFFECT_SIZE = 3

    TAB_WIDGET_MARGIN_WIDTH = 3

    TOOL_BOX_TAB_MIN_WIDTH = 80
    TOOL_BOX_TAB_ITEM_SPACING = 4
    TOOL_BOX_TAB_MARGIN_WIDTH = 8

    TOOL_TIP_FRAME_WIDTH = 3

    HEADER_MARGIN_WIDTH = 6
    HEADER_ITEM_SPACING = 4
    HEADER_ARROW_SIZE = ARROW_SIZE

    ITEM_VIEW_ARROW_SIZE = ARROW_SIZE
    ITEM_VIEW_ITEM_MARGIN_WIDTH = 3
    SIDE_PANEL_ITEM_MARGIN_WIDTH = 4

    SPLITTER_SPLITTER_WIDTH = 1

    SHADOW_OVERLAP = 2

    # Frame contrast bias used when mixing colours.
    BIAS_DEFAULT = 0.20