"""Style settings stored in an INI file, and the editing session around them."""

from __future__ import annotations

import configparser
import os
from collections.abc import Callable
from dataclasses import dataclass, field, fields, replace
from enum import IntEnum
from pathlib import Path
from typing import Any

from .dragrules import DragMode

SECTION = "Style"
CONFIG_FILE_NAME = "breezerc"

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


class ScrollBarButtons(IntEnum):
    """Number of arrow buttons at one end of a scroll bar."""

    NO_BUTTON = 0
    SINGLE = 1
    DOUBLE = 2


def default_config_path() -> Path:
    """Location of the style configuration file in the user's config directory."""
    home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(home) / CONFIG_FILE_NAME


def _flag(default: bool, key: str) -> Any:
    return field(default=default, metadata={"key": key, "kind": bool})


def _number(default: int, key: str, low: int, high: int | None, kind: type = int) -> Any:
    return field(default=default, metadata={"key": key, "kind": kind, "low": low, "high": high})


def _check(name: str, value: Any, metadata: Any) -> Any:
    """Validate one setting and return it in its canonical type."""
    kind = metadata["kind"]
    if kind is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be a boolean, not {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, not {value!r}")
    low, high = metadata["low"], metadata["high"]
    if value < low or (high is not None and value > high):
        raise ValueError(f"{name} is out of range: {value}")
    return kind(value) if kind is not int else int(value)


def _parse(raw: str, metadata: Any) -> Any:
    text = raw.strip()
    if metadata["kind"] is bool:
        lowered = text.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    return int(text)


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(int(value))


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # keep key case as written
    return parser


@dataclass
class StyleSettings:
    """Every user-tunable option of the style, with its default."""

    tab_bar_draw_centered_tabs: bool = _flag(False, "TabBarDrawCenteredTabs")
    tool_bar_draw_item_separator: bool = _flag(True, "ToolBarDrawItemSeparator")
    view_draw_focus_indicator: bool = _flag(True, "ViewDrawFocusIndicator")
    dock_widget_draw_frame: bool = _flag(False, "DockWidgetDrawFrame")
    side_panel_draw_frame: bool = _flag(False, "SidePanelDrawFrame")
    menu_item_draw_strong_focus: bool = _flag(True, "MenuItemDrawStrongFocus")
    slider_draw_tick_marks: bool = _flag(True, "SliderDrawTickMarks")
    splitter_proxy_enabled: bool = _flag(True, "SplitterProxyEnabled")
    mnemonics_mode: int = _number(1, "MnemonicsMode", 0, None)
    scroll_bar_add_line_buttons: ScrollBarButtons = _number(
        ScrollBarButtons.SINGLE, "ScrollBarAddLineButtons", 0, 2, ScrollBarButtons
    )
    scroll_bar_sub_line_buttons: ScrollBarButtons = _number(
        ScrollBarButtons.SINGLE, "ScrollBarSubLineButtons", 0, 2, ScrollBarButtons
    )
    window_drag_mode: DragMode = _number(DragMode.FULL, "WindowDragMode", 0, 2, DragMode)
    menu_opacity: int = _number(100, "MenuOpacity", 0, 100)

    def __post_init__(self) -> None:
        for item in fields(self):
            setattr(self, item.name, _check(item.name, getattr(self, item.name), item.metadata))

    @classmethod
    def read(cls, path: str | os.PathLike | None = None) -> StyleSettings:
        """Load settings from path; missing or unreadable entries keep their defaults."""
        parser = _new_parser()
        parser.read(Path(path) if path is not None else default_config_path(), encoding="utf-8")
        if not parser.has_section(SECTION):
            return cls()
        section = parser[SECTION]
        values: dict[str, Any] = {}
        for item in fields(cls):
            raw = section.get(item.metadata["key"])
            if raw is None:
                continue
            try:
                values[item.name] = _check(item.name, _parse(raw, item.metadata), item.metadata)
            except ValueError:
                continue
        return cls(**values)

    def write(self, path: str | os.PathLike | None = None) -> None:
        """Store the settings in path, keeping any other sections of the file."""
        target = Path(path) if path is not None else default_config_path()
        parser = _new_parser()
        if target.is_file():
            parser.read(target, encoding="utf-8")
        if not parser.has_section(SECTION):
            parser.add_section(SECTION)
        for item in fields(self):
            parser.set(SECTION, item.metadata["key"], _format(getattr(self, item.name)))
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as stream:
            parser.write(stream, space_around_delimiters=False)


class StyleConfig:
    """An editing session over the stored style settings.

    ``current`` holds the values being edited and ``stored`` the values last
    loaded or saved. ``on_changed`` receives the modified state after every
    edit or load; ``on_saved`` is called after settings are written so that
    running styles can re-read them.
    """

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        on_changed: Callable[[bool], None] | None = None,
        on_saved: Callable[[], None] | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else default_config_path()
        self.on_changed = on_changed
        self.on_saved = on_saved
        self.stored = StyleSettings.read(self.path)
        self.current = replace(self.stored)
        self.needs_save = False

    def _update_changed(self) -> None:
        modified = self.is_modified()
        self.needs_save = modified
        if self.on_changed is not None:
            self.on_changed(modified)

    def edit(self, **values: Any) -> None:
        """Change some of the edited values; unknown names raise TypeError."""
        self.current = replace(self.current, **values)
        self._update_changed()

    def load(self) -> None:
        """Show the stored values for editing."""
        self.current = replace(self.stored)
        self._update_changed()

    def save(self) -> None:
        """Store the edited values and write them to the file."""
        self.stored = replace(self.current)
        self.stored.write(self.path)
        self.needs_save = False
        if self.on_saved is not None:
            self.on_saved()

    def defaults(self) -> None:
        """Reset the stored values to their defaults and show them."""
        self.stored = StyleSettings()
        self.load()

    def reset(self) -> None:
        """Re-read the file and show its values, dropping unsaved edits."""
        self.stored = StyleSettings.read(self.path)
        self.load()

    def is_modified(self) -> bool:
        """True when the edited values differ from the stored ones."""
        return self.current != self.stored