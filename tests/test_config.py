import pytest

from breezekit.config import ScrollBarButtons, StyleConfig, StyleSettings
from breezekit.dragrules import DragMode


def test_missing_file_gives_defaults(tmp_path):
    settings = StyleSettings.read(tmp_path / "absent.rc")
    assert settings == StyleSettings()
    assert settings.window_drag_mode is DragMode.FULL
    assert settings.scroll_bar_add_line_buttons is ScrollBarButtons.SINGLE
    assert settings.scroll_bar_sub_line_buttons is ScrollBarButtons.SINGLE


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "breezerc"
    settings = StyleSettings(
        tab_bar_draw_centered_tabs=True,
        menu_item_draw_strong_focus=False,
        window_drag_mode=DragMode.MINIMAL,
        scroll_bar_add_line_buttons=ScrollBarButtons.DOUBLE,
        menu_opacity=70,
    )
    settings.write(path)
    assert StyleSettings.read(path) == settings


def test_written_file_uses_style_section_and_keys(tmp_path):
    path = tmp_path / "breezerc"
    StyleSettings(window_drag_mode=DragMode.NONE).write(path)
    text = path.read_text(encoding="utf-8")
    assert "[Style]" in text
    assert "WindowDragMode=0" in text
    assert "TabBarDrawCenteredTabs=false" in text


def test_write_keeps_other_sections(tmp_path):
    path = tmp_path / "breezerc"
    path.write_text("[Other]\nKey=value\n", encoding="utf-8")
    StyleSettings().write(path)
    text = path.read_text(encoding="utf-8")
    assert "[Other]" in text
    assert "Key=value" in text


def test_invalid_entries_fall_back_to_defaults(tmp_path):
    path = tmp_path / "breezerc"
    path.write_text(
        "[Style]\nMenuOpacity=500\nSliderDrawTickMarks=maybe\nTabBarDrawCenteredTabs=true\n",
        encoding="utf-8",
    )
    settings = StyleSettings.read(path)
    assert settings.menu_opacity == StyleSettings().menu_opacity
    assert settings.slider_draw_tick_marks == StyleSettings().slider_draw_tick_marks
    assert settings.tab_bar_draw_centered_tabs is True


@pytest.mark.parametrize(
    "values",
    [
        {"menu_opacity": 101},
        {"menu_opacity": -1},
        {"window_drag_mode": 3},
        {"scroll_bar_add_line_buttons": 5},
        {"tab_bar_draw_centered_tabs": 1},
    ],
)
def test_invalid_values_are_rejected(values):
    with pytest.raises(ValueError):
        StyleSettings(**values)


def test_edit_marks_modified_and_notifies(tmp_path):
    seen = []
    config = StyleConfig(tmp_path / "breezerc", on_changed=seen.append)
    assert config.is_modified() is False
    config.edit(splitter_proxy_enabled=False)
    assert config.is_modified() is True
    assert config.needs_save is True
    assert seen == [True]
    config.edit(splitter_proxy_enabled=True)
    assert config.is_modified() is False
    assert seen == [True, False]


def test_edit_unknown_name_raises(tmp_path):
    config = StyleConfig(tmp_path / "breezerc")
    with pytest.raises(TypeError):
        config.edit(no_such_option=True)


def test_save_writes_file_and_calls_hook(tmp_path):
    path = tmp_path / "breezerc"
    saved = []
    config = StyleConfig(path, on_saved=lambda: saved.append(True))
    config.edit(window_drag_mode=DragMode.MINIMAL)
    config.save()
    assert saved == [True]
    assert config.is_modified() is False
    assert config.needs_save is False
    assert StyleSettings.read(path).window_drag_mode is DragMode.MINIMAL


def test_reset_drops_unsaved_edits(tmp_path):
    path = tmp_path / "breezerc"
    StyleSettings(dock_widget_draw_frame=True).write(path)
    config = StyleConfig(path)
    config.edit(dock_widget_draw_frame=False)
    config.reset()
    assert config.current.dock_widget_draw_frame is True
    assert config.is_modified() is False


def test_load_restores_stored_values(tmp_path):
    config = StyleConfig(tmp_path / "breezerc")
    config.edit(menu_opacity=40)
    config.load()
    assert config.current == config.stored


def test_defaults_replace_stored_values(tmp_path):
    path = tmp_path / "breezerc"
    StyleSettings(menu_opacity=30, view_draw_focus_indicator=False).write(path)
    config = StyleConfig(path)
    assert config.current.menu_opacity == 30
    config.defaults()
    assert config.current == StyleSettings()
    assert config.stored == StyleSettings()
    assert StyleSettings.read(path).menu_opacity == 30