import pytest

from breezekit.dragrules import NO_WINDOW_GRAB, DragMode, DragRules, ExceptionId, Widget
from breezekit.geometry import Point, Rect


def test_exception_id_with_application():
    exception = ExceptionId.parse("ViewSliders@kmix")
    assert exception.class_name == "ViewSliders"
    assert exception.app_name == "kmix"


def test_exception_id_without_application_and_trimming():
    exception = ExceptionId.parse("  MuseScore ")
    assert exception == ExceptionId("MuseScore", "")


def test_exception_ids_hash_equal():
    assert {ExceptionId.parse("A@b"), ExceptionId.parse("A @ b")} == {ExceptionId("A", "b")}


def test_widget_inherits_and_ancestors():
    root = Widget("QMainWindow", bases=("QWidget",))
    middle = Widget("QFrame", parent=root)
    leaf = Widget("QLabel", bases=("QFrame", "QWidget"), parent=middle)
    assert leaf.inherits("QFrame")
    assert not leaf.inherits("QMainWindow")
    assert list(leaf.ancestors()) == [middle, root]


def test_default_lists_present():
    rules = DragRules()
    assert ExceptionId("Sidebar_Widget", "konqueror") in rules.white_list
    assert ExceptionId("CustomTrackView", "kdenlive") in rules.black_list


def test_empty_class_names_ignored():
    rules = DragRules(white_list=["@app", "Extra"])
    assert ExceptionId("", "app") not in rules.white_list
    assert ExceptionId("Extra") in rules.white_list


def test_drag_mode_none_disables():
    assert DragRules(DragMode.NONE).enabled is False
    assert DragRules(DragMode.FULL).enabled is True


def test_black_listed_by_property():
    rules = DragRules()
    widget = Widget("QWidget", properties={NO_WINDOW_GRAB: True})
    assert rules.is_black_listed(widget, "app")


def test_black_listed_per_application():
    rules = DragRules()
    widget = Widget("CustomTrackView")
    assert rules.is_black_listed(widget, "kdenlive")
    assert not rules.is_black_listed(widget, "other")
    assert rules.is_black_listed(Widget("MuseScore"), "anything")


def test_wildcard_black_list_disables_rules():
    rules = DragRules(black_list=["*@myapp"])
    assert not rules.is_black_listed(Widget("QWidget"), "other")
    assert rules.enabled
    assert rules.is_black_listed(Widget("QWidget"), "myapp")
    assert rules.enabled is False


def test_white_listed():
    rules = DragRules()
    assert rules.is_white_listed(Widget("ViewSliders"), "kmix")
    assert not rules.is_white_listed(Widget("ViewSliders"), "other")
    assert rules.is_white_listed(Widget("MplayerWindow"), "other")


@pytest.mark.parametrize(
    "widget, expected",
    [
        (Widget("QDialog", is_window=True), True),
        (Widget("QDialog"), False),
        (Widget("QMainWindow", is_window=True), True),
        (Widget("QGroupBox"), True),
        (Widget("QMenuBar"), True),
        (Widget("QStatusBar"), True),
        (Widget("QToolButton", auto_raise=True), True),
        (Widget("QToolButton"), False),
        (Widget("QPushButton"), False),
        (Widget("KScreenSaver", bases=("KCModule",)), True),
    ],
)
def test_is_dragable_kinds(widget, expected):
    assert DragRules().is_dragable(widget, "app") is expected


def test_is_dragable_none():
    assert DragRules().is_dragable(None, "app") is False


def test_dock_widget_title_not_dragable():
    dock = Widget("QDockWidget")
    title = Widget("QToolBar", parent=dock)
    dock.title_bar = title
    assert not DragRules().is_dragable(title, "app")
    other = Widget("QToolBar", parent=dock)
    assert DragRules().is_dragable(other, "app")


def test_list_view_viewport_dragable():
    view = Widget("QListView", bases=("QAbstractItemView",))
    viewport = Widget("QWidget", parent=view)
    view.viewport = viewport
    assert DragRules().is_dragable(viewport, "app")
    assert not DragRules().is_dragable(Widget("QWidget", parent=view), "app")


def test_label_in_status_bar():
    bar = Widget("QStatusBar")
    frame = Widget("QFrame", parent=bar)
    label = Widget("QLabel", parent=frame)
    assert DragRules().is_dragable(label, "app")
    selectable = Widget("QLabel", parent=frame, text_selectable=True)
    assert not DragRules().is_dragable(selectable, "app")
    assert not DragRules().is_dragable(Widget("QLabel"), "app")


def test_child_cursor_and_kinds_block_drag():
    rules = DragRules()
    parent = Widget("QWidget")
    assert not rules.can_drag_child(parent, Widget("QWidget", arrow_cursor=False), Point())
    assert not rules.can_drag_child(parent, Widget("QComboBox"), Point())
    assert not rules.can_drag_child(parent, Widget("QScrollBar"), Point())
    assert rules.can_drag_child(parent, Widget("QWidget"), Point())


def test_tool_button_rules():
    full = DragRules(DragMode.FULL)
    minimal = DragRules(DragMode.MINIMAL)
    button = Widget("QToolButton", auto_raise=True, enabled=False)
    assert full.can_drag_child(button, None, Point())
    assert not minimal.can_drag_child(button, None, Point())
    in_toolbar = Widget("QToolButton", auto_raise=True, enabled=False, parent=Widget("QToolBar"))
    assert minimal.can_drag_child(in_toolbar, None, Point())
    assert not full.can_drag_child(Widget("QToolButton", auto_raise=True), None, Point())


def test_menu_bar_rules():
    rules = DragRules()
    action = Widget("QAction", geometry=Rect(0, 0, 10, 10))
    separator = Widget("QAction", geometry=Rect(10, 0, 10, 10), is_separator=True)
    disabled = Widget("QAction", geometry=Rect(20, 0, 10, 10), enabled=False)
    bar = Widget("QMenuBar", items=[action, separator, disabled])
    assert not rules.can_drag_child(bar, None, Point(5, 5))
    assert rules.can_drag_child(bar, None, Point(15, 5))
    assert rules.can_drag_child(bar, None, Point(25, 5))
    assert rules.can_drag_child(bar, None, Point(50, 5))


def test_menu_bar_active_action_and_mdi():
    rules = DragRules()
    active = Widget("QAction", geometry=Rect(0, 0, 10, 10), active=True)
    bar = Widget("QMenuBar", items=[active])
    assert not rules.can_drag_child(bar, None, Point(50, 50))
    mdi_bar = Widget("QMenuBar", parent=Widget("QMdiSubWindow"))
    assert not rules.can_drag_child(mdi_bar, None, Point())


def test_minimal_mode_only_toolbars():
    rules = DragRules(DragMode.MINIMAL)
    assert rules.can_drag_child(Widget("QToolBar"), None, Point())
    assert not rules.can_drag_child(Widget("QWidget"), None, Point())


def test_tab_bar_only_outside_tabs():
    tab = Widget("QTab", geometry=Rect(0, 0, 20, 10))
    bar = Widget("QTabBar", items=[tab])
    rules = DragRules()
    assert not rules.can_drag_child(bar, None, Point(5, 5))
    assert rules.can_drag_child(bar, None, Point(40, 5))


def test_group_box_rules():
    rules = DragRules()
    assert rules.can_drag_child(Widget("QGroupBox"), None, Point(2, 2))
    checkbox = Widget("QCheckBox", geometry=Rect(0, 0, 5, 5))
    box = Widget("QGroupBox", checkable=True, items=[checkbox])
    assert not rules.can_drag_child(box, None, Point(2, 2))
    assert rules.can_drag_child(box, None, Point(30, 30))


def test_selectable_label_blocks():
    assert not DragRules().can_drag_child(Widget("QLabel", text_selectable=True), None, Point())


def _view(class_name, **kwargs):
    view = Widget(class_name, bases=("QAbstractItemView",), **kwargs)
    viewport = Widget("QWidget", parent=view)
    view.viewport = viewport
    return view, viewport


def test_list_view_viewport_rules():
    rules = DragRules()
    _, viewport = _view("QListView", has_frame=True)
    assert not rules.can_drag_child(viewport, None, Point())
    _, viewport = _view("QListView", multi_selection=True, row_count=3)
    assert not rules.can_drag_child(viewport, None, Point())
    item = Widget("Item", geometry=Rect(0, 0, 10, 10))
    view, viewport = _view("QTreeView", row_count=1, items=[item])
    assert not rules.can_drag_child(viewport, None, Point(1, 1))
    assert rules.can_drag_child(viewport, None, Point(50, 50))


def test_graphics_view_viewport_rules():
    rules = DragRules()
    view = Widget("QGraphicsView", drag_enabled=True)
    viewport = Widget("QWidget", parent=view)
    view.viewport = viewport
    assert not rules.can_drag_child(viewport, None, Point())
    view.drag_enabled = False
    assert rules.can_drag_child(viewport, None, Point())