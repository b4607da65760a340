"""Nine-patch pixmap sets stretched to fill a rectangle."""

from __future__ import annotations

from enum import IntFlag

from PIL import Image

from .geometry import Rect, Size


class Tile(IntFlag):
    """Which parts of a tile set to draw.

    Corners are drawn when both sides forming them are requested; the centre
    is drawn only when CENTER is requested.
    """

    TOP = 0x1
    LEFT = 0x2
    BOTTOM = 0x4
    RIGHT = 0x8
    CENTER = 0x10
    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT
    RING = TOP | LEFT | BOTTOM | RIGHT
    HORIZONTAL = LEFT | RIGHT | CENTER
    VERTICAL = TOP | BOTTOM | CENTER
    FULL = RING | CENTER


def _has_all(tiles: Tile, wanted: Tile) -> bool:
    return (tiles & wanted) == wanted


def _width(pixmap: Image.Image | None) -> int:
    return 0 if pixmap is None else pixmap.width


def _height(pixmap: Image.Image | None) -> int:
    return 0 if pixmap is None else pixmap.height


def _draw(canvas, x, y, w, h, pixmap, sx, sy, sw, sh) -> None:
    """Draw a source sub-rectangle of pixmap scaled onto a target rectangle."""
    if pixmap is None or w <= 0 or h <= 0 or sw <= 0 or sh <= 0:
        return
    piece = pixmap.crop((sx, sy, sx + sw, sy + sh))
    if piece.size != (w, h):
        piece = piece.resize((w, h), Image.Resampling.BILINEAR)
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(piece, (x, y))
    canvas.alpha_composite(layer)


class TileSet:
    """A source image cut into nine chunks that can fill any rectangle.

    w1 and h1 are the width of the left chunks and the height of the top
    chunks; w2 and h2 those of the middle chunks. The right and bottom chunks
    get whatever is left of the source.
    """

    def __init__(
        self,
        source: Image.Image | None = None,
        w1: int = 0,
        h1: int = 0,
        w2: int = 0,
        h2: int = 0,
        device_pixel_ratio: float = 1.0,
    ) -> None:
        if device_pixel_ratio <= 0:
            raise ValueError("device pixel ratio must be positive")
        self._w1 = w1
        self._h1 = h1
        self._w3 = 0
        self._h3 = 0
        self._dpr = device_pixel_ratio
        self._pixmaps: list[Image.Image | None] = []
        if source is None or source.width == 0 or source.height == 0:
            return

        source = source.convert("RGBA")
        self._w3 = int(source.width / device_pixel_ratio - (w1 + w2))
        self._h3 = int(source.height / device_pixel_ratio - (h1 + h2))

        columns = ((0, w1), (w1, w2), (w1 + w2, self._w3))
        rows = ((0, h1), (h1, h2), (h1 + h2, self._h3))
        self._pixmaps = [
            self._init_pixmap(source, width, height, Rect(left, top, width, height))
            for top, height in rows
            for left, width in columns
        ]

    def _init_pixmap(self, source: Image.Image, width: int, height: int, rect: Rect) -> Image.Image | None:
        size = Size(width, height)
        if not (size.is_valid() and rect.is_valid()):
            return None
        scaled = Rect.from_point_size(rect.top_left * self._dpr, rect.size() * self._dpr)
        tile = source.crop((scaled.x, scaled.y, scaled.x + scaled.width, scaled.y + scaled.height))
        if size == rect.size():
            return tile

        scaled_size = size * self._dpr
        pixmap = Image.new("RGBA", (scaled_size.width, scaled_size.height), (0, 0, 0, 0))
        for ty in range(0, scaled_size.height, max(1, tile.height)):
            for tx in range(0, scaled_size.width, max(1, tile.width)):
                pixmap.paste(tile, (tx, ty))
        return pixmap

    def render(self, rect: Rect, canvas: Image.Image, tiles: Tile = Tile.RING) -> None:
        """Fill rect on canvas with the requested chunks."""
        if len(self._pixmaps) < 9:
            return
        if canvas.mode != "RGBA":
            raise ValueError("canvas must be an RGBA image")

        tiles = Tile(tiles)
        dpr = self._dpr
        pm = self._pixmaps
        x0, y0, w, h = rect.x, rect.y, rect.width, rect.height

        w_left = w_right = 0
        if self._w1 + self._w3 > 0:
            ratio = self._w1 / (self._w1 + self._w3)
            w_left = min(self._w1, int(w * ratio)) if tiles & Tile.RIGHT else self._w1
            w_right = min(self._w3, int(w * (1.0 - ratio))) if tiles & Tile.LEFT else self._w3

        h_top = h_bottom = 0
        if self._h1 + self._h3 > 0:
            ratio = self._h1 / (self._h1 + self._h3)
            h_top = min(self._h1, int(h * ratio)) if tiles & Tile.BOTTOM else self._h1
            h_bottom = min(self._h3, int(h * (1.0 - ratio))) if tiles & Tile.TOP else self._h3

        w -= w_left + w_right
        h -= h_top + h_bottom
        x1 = x0 + w_left
        x2 = x1 + w
        y1 = y0 + h_top
        y2 = y1 + h

        w2 = int(_width(pm[7]) / dpr)
        h2 = int(_height(pm[5]) / dpr)

        def scaled(value: float) -> int:
            return int(value * dpr)

        # corners
        if _has_all(tiles, Tile.TOP_LEFT):
            _draw(canvas, x0, y0, w_left, h_top, pm[0], 0, 0, scaled(w_left), scaled(h_top))
        if _has_all(tiles, Tile.TOP_RIGHT):
            _draw(canvas, x2, y0, w_right, h_top, pm[2],
                  scaled(self._w3 - w_right), 0, scaled(w_right), scaled(h_top))
        if _has_all(tiles, Tile.BOTTOM_LEFT):
            _draw(canvas, x0, y2, w_left, h_bottom, pm[6],
                  0, scaled(self._h3 - h_bottom), scaled(w_left), scaled(h_bottom))
        if _has_all(tiles, Tile.BOTTOM_RIGHT):
            _draw(canvas, x2, y2, w_right, h_bottom, pm[8],
                  scaled(self._w3 - w_right), scaled(self._h3 - h_bottom),
                  scaled(w_right), scaled(h_bottom))

        # top and bottom edges
        if w > 0:
            if tiles & Tile.TOP:
                _draw(canvas, x1, y0, w, h_top, pm[1], 0, 0, scaled(w2), scaled(h_top))
            if tiles & Tile.BOTTOM:
                _draw(canvas, x1, y2, w, h_bottom, pm[7],
                      0, scaled(self._h3 - h_bottom), scaled(w2), scaled(h_bottom))

        # left and right edges
        if h > 0:
            if tiles & Tile.LEFT:
                _draw(canvas, x0, y1, w_left, h, pm[3], 0, 0, scaled(w_left), scaled(h2))
            if tiles & Tile.RIGHT:
                _draw(canvas, x2, y1, w_right, h, pm[5],
                      scaled(self._w3 - w_right), 0, scaled(w_right), scaled(h2))

        if tiles & Tile.CENTER and h > 0 and w > 0:
            center = pm[4]
            _draw(canvas, x1, y1, w, h, center, 0, 0, _width(center), _height(center))

    def size(self) -> Size:
        """Combined size of the corner chunks."""
        return Size(self._w1 + self._w3, self._h1 + self._h3)

    def is_valid(self) -> bool:
        return len(self._pixmaps) == 9

    def pixmap(self, index: int) -> Image.Image | None:
        """The chunk at index, row by row from the top left; None for an empty chunk."""
        return self._pixmaps[index]