# breezekit

Building blocks of the Breeze widget style, for Python:

- `breezekit.geometry`: `Point`, `Size` and `Rect` on an integer grid, plus the
  style's `Metrics` and `PenWidth` constants.
- `breezekit.tileset`: `TileSet` cuts a Pillow image into nine chunks and
  renders them stretched over any rectangle. `Tile` flags choose which parts
  are drawn.
- `breezekit.shadow`: `BoxShadowRenderer` draws soft shadows of a rounded box
  with a three-pass box blur. The module also exposes the blur helpers
  (`compute_lobes`, `box_blur_row`, `box_blur_alpha`,
  `mirror_top_left_quadrant`) and the size helpers
  `calculate_minimum_box_size` and `calculate_minimum_shadow_texture_size`.
- `breezekit.dragrules`: `DragRules` decides whether a window may be dragged
  from a given `Widget`. It uses a `DragMode` and per-application white and
  black lists of `ExceptionId` entries written as `ClassName@application`.
- `breezekit.windowmanager`: `WindowManager` is the press, move, release and
  timer state machine that turns a press on an empty area into a window move.
- `breezekit.explorer`: `WidgetExplorer` prints a widget and its ancestors
  when the left button is pressed.
- `breezekit.toolsarea`: `ToolsAreaManager` tracks the top tool bars of each
  `MainWindow`, keeps them and the menu bar in the header palette, and
  computes the tools-area rectangle.
- `breezekit.config`: `StyleSettings` reads and writes the style options in
  the `[Style]` section of an INI file. `StyleConfig` is an editing session
  over those settings, with `load`, `save`, `defaults`, `reset` and
  `is_modified`.

## Install

```
pip install breezekit
```

## Rendering a shadow

```python
from breezekit.shadow import BoxShadowRenderer

renderer = BoxShadowRenderer(box_size=(64, 64), border_radius=5)
renderer.add_shadow((0, 4), 16, (0, 0, 0, 96))
image = renderer.render()          # a Pillow RGBA image, or None without shadows
image.save("shadow.png")
```

## Tile sets

```python
from PIL import Image
from breezekit.geometry import Rect
from breezekit.tileset import Tile, TileSet

source = Image.new("RGBA", (33, 33), (40, 40, 40, 255))
tiles = TileSet(source, 16, 16, 1, 1)
canvas = Image.new("RGBA", (200, 120))
tiles.render(Rect(0, 0, 200, 120), canvas, Tile.RING)
```

The canvas must be an RGBA image. Corners are never stretched, edges are
stretched in one direction, and the centre is drawn only with `Tile.CENTER`.

## Window dragging

```python
from breezekit.dragrules import DragMode, Widget
from breezekit.geometry import Point
from breezekit.windowmanager import WindowManager

manager = WindowManager(app_name="demo", start_system_move=lambda window: True)
manager.initialize(drag_mode=DragMode.FULL, drag_distance=10, drag_delay=500)

window = Widget("QMainWindow", is_window=True)
manager.register_widget(window)
manager.mouse_press(window, Point(5, 5), Point(105, 105))
manager.mouse_move(Point(5, 5), Point(105, 105))   # the probe move arms the timer
started = manager.timer_fired()                    # True: the move was asked for
```

## Style settings

```python
from breezekit.config import StyleConfig

session = StyleConfig("breezerc", on_changed=print)
session.edit(menu_opacity=80)      # prints True
session.save()                     # writes [Style] MenuOpacity=80
```

Without a path, settings live in `$XDG_CONFIG_HOME/breezerc` (by default
`~/.config/breezerc`).

## Switching Breeze to Breeze Light

If the `[General]` group of your `kdeglobals` sets `ColorScheme=Breeze`, this
command copies every group of `color-schemes/BreezeLight.colors` into it:

```
breeze-to-breezelight [--globals PATH] [--scheme PATH]
```

By default `kdeglobals` is looked up in `$XDG_CONFIG_HOME`, and the scheme
in `$XDG_DATA_HOME` and `$XDG_DATA_DIRS`. The same step is available as
`breezekit.schememigrate.migrate()`. The command always exits with status 0.

## What it does not do

breezekit does not paint widgets and does not plug into a GUI toolkit.
Widgets, windows and tool bars are plain descriptions that you fill in.
`WindowManager` does not move windows itself. It calls the
`start_system_move` callback you give it. `StyleConfig` reports saves
through `on_saved` and sends no message to running applications.

## Tests

```
pip install -e .[test]
pytest
```