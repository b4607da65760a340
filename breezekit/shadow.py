"""Soft drop shadows for rounded boxes, built from a three-pass box blur."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from PIL import Image, ImageDraw

from .geometry import Rect, Size

_GAUSSIAN_SCALE_FACTOR = (3.0 * math.sqrt(2.0 * math.pi) / 4.0) * 1.5
_SUPERSAMPLE = 4


def _round(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def calculate_blur_radius(std_dev: float) -> int:
    """Box blur radius approximating a gaussian of the given deviation."""
    return max(2, math.floor(std_dev * _GAUSSIAN_SCALE_FACTOR + 0.5))


def calculate_blur_std_dev(radius: int) -> float:
    """Standard deviation matching a shadow blur radius."""
    return radius * 0.5


def calculate_blur_extent(radius: int) -> Size:
    """How far a blur of the given radius spreads past the box."""
    blur_radius = calculate_blur_radius(calculate_blur_std_dev(radius))
    return Size(blur_radius, blur_radius)


@dataclass(frozen=True)
class BoxLobes:
    """How many samples a box filter takes on each side."""

    left: int
    right: int


def compute_lobes(radius: int) -> list[BoxLobes]:
    """Parameters of the three box filters that approximate the blur."""
    blur_radius = calculate_blur_radius(calculate_blur_std_dev(radius))
    z, remainder = divmod(blur_radius, 3)
    if remainder == 0:
        major = minor = final = z
    elif remainder == 1:
        major, minor, final = z + 1, z, z
    else:
        major, minor, final = z + 1, z, z + 1
    return [BoxLobes(major, minor), BoxLobes(minor, major), BoxLobes(final, final)]


def box_blur_row(values: Sequence[int], lobes: BoxLobes) -> list[int]:
    """Run one box filter over a row of 8-bit values, replicating the edges."""
    width = len(values)
    if width == 0:
        return []

    last_index = width - 1

    def sample(index: int) -> int:
        return values[min(index, last_index)]

    box_size = lobes.left + 1 + lobes.right
    reciprocal = (1 << 24) // box_size
    first = values[0]
    last = values[last_index]

    alpha_sum = (box_size + 1) // 2 + first * lobes.left
    right = 0
    while right < box_size - lobes.left:
        alpha_sum += sample(right)
        right += 1

    out: list[int] = []
    while right < box_size and len(out) < width:
        out.append(((alpha_sum * reciprocal) >> 24) & 0xFF)
        alpha_sum += sample(right) - first
        right += 1

    left = 0
    while right < width:
        out.append(((alpha_sum * reciprocal) >> 24) & 0xFF)
        alpha_sum += values[right] - values[left]
        left += 1
        right += 1

    while len(out) < width:
        out.append(((alpha_sum * reciprocal) >> 24) & 0xFF)
        alpha_sum += last - sample(left)
        left += 1

    return out[:width]


def _alpha_of(image: Image.Image) -> Image.Image:
    if image.mode == "L":
        return image.copy()
    if "A" in image.getbands():
        return image.getchannel("A")
    raise ValueError(f"image of mode {image.mode!r} has no alpha channel")


def _store_alpha(image: Image.Image, band: Image.Image) -> None:
    if image.mode == "L":
        image.paste(band)
    else:
        image.putalpha(band)


def box_blur_alpha(image: Image.Image, radius: int, rect: Rect | None = None) -> None:
    """Blur the alpha channel of image in place, within rect or everywhere.

    An "L" image is treated as a bare alpha channel.
    """
    if radius < 2:
        return
    band = _alpha_of(image)
    lobes = compute_lobes(radius)

    width, height = image.size
    blur_rect = Rect(0, 0, width, height) if rect is None or rect.is_null() else rect
    left = max(0, blur_rect.x)
    top = max(0, blur_rect.y)
    right = min(width, blur_rect.x + blur_rect.width)
    bottom = min(height, blur_rect.y + blur_rect.height)
    if right <= left or bottom <= top:
        return

    def blur(values: Sequence[int]) -> list[int]:
        result = list(values)
        for lobe in lobes:
            result = box_blur_row(result, lobe)
        return result

    data = list(band.getdata())
    for y in range(top, bottom):
        start = y * width
        data[start + left:start + right] = blur(data[start + left:start + right])
    for x in range(left, right):
        column = slice(top * width + x, (bottom - 1) * width + x + 1, width)
        data[column] = blur(data[column])

    band.putdata(data)
    _store_alpha(image, band)


def mirror_top_left_quadrant(image: Image.Image) -> None:
    """Copy the top-left quadrant's alpha over the other three, in place."""
    band = _alpha_of(image)
    width, height = image.size
    center_x = math.ceil(width * 0.5)
    center_y = math.ceil(height * 0.5)
    data = list(band.getdata())

    for y in range(center_y):
        start = y * width
        for x in range(center_x):
            data[start + width - 1 - x] = data[start + x]

    for y in range(center_y):
        source = y * width
        target = (height - 1 - y) * width
        data[target:target + width] = data[source:source + width]

    band.putdata(data)
    _store_alpha(image, band)


def _rounded_box_mask(size: tuple[int, int], box: tuple[float, float, float, float],
                      x_radius: float, y_radius: float) -> Image.Image:
    scale = _SUPERSAMPLE
    big = Image.new("L", (size[0] * scale, size[1] * scale), 0)
    left, top, right, bottom = (value * scale for value in box)
    if right > left and bottom > top:
        draw = ImageDraw.Draw(big)
        rx = min(x_radius * scale, (right - left) / 2)
        ry = min(y_radius * scale, (bottom - top) / 2)
        if rx <= 0 or ry <= 0:
            draw.rectangle((left, top, right - 1, bottom - 1), fill=255)
        else:
            draw.rectangle((left + rx, top, right - rx - 1, bottom - 1), fill=255)
            draw.rectangle((left, top + ry, right - 1, bottom - ry - 1), fill=255)
            for cx, cy in ((left, top), (right - 2 * rx, top),
                           (left, bottom - 2 * ry), (right - 2 * rx, bottom - 2 * ry)):
                draw.ellipse((cx, cy, cx + 2 * rx - 1, cy + 2 * ry - 1), fill=255)
    return big.resize(size, Image.Resampling.BOX)


def _render_shadow(canvas: Image.Image, rect: tuple[float, float, float, float],
                   border_radius: float, offset: tuple[float, float], radius: float,
                   color: tuple[int, int, int, int]) -> None:
    rect_left, rect_top, box_width, box_height = rect
    extent = calculate_blur_extent(int(radius))
    pixel_width = _round(box_width + 2 * extent.width)
    pixel_height = _round(box_height + 2 * extent.height)
    if pixel_width <= 0 or pixel_height <= 0:
        return

    box_left = (pixel_width - box_width) / 2
    box_top = (pixel_height - box_height) / 2
    x_radius = 2.0 * border_radius / box_width if box_width > 0 else 0.0
    y_radius = 2.0 * border_radius / box_height if box_height > 0 else 0.0
    mask = _rounded_box_mask(
        (pixel_width, pixel_height),
        (box_left, box_top, box_left + box_width, box_top + box_height),
        x_radius,
        y_radius,
    )

    # The texture is symmetrical: blur one quadrant and mirror it.
    blur_rect = Rect(0, 0, math.ceil(pixel_width * 0.5), math.ceil(pixel_height * 0.5))
    box_blur_alpha(mask, _round(radius), blur_rect)
    mirror_top_left_quadrant(mask)

    red, green, blue, alpha = color
    shadow = Image.new("RGBA", (pixel_width, pixel_height), (red, green, blue, 0))
    shadow.putalpha(mask.point(lambda value: (value * alpha + 127) // 255))

    center_x = rect_left + box_width / 2 + offset[0]
    center_y = rect_top + box_height / 2 + offset[1]
    position = (_round(center_x - pixel_width / 2), _round(center_y - pixel_height / 2))
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(shadow, position)
    canvas.alpha_composite(layer)


def _normalize_color(color: Sequence[int]) -> tuple[int, int, int, int]:
    components = tuple(int(value) for value in color)
    if len(components) == 3:
        components += (255,)
    if len(components) != 4:
        raise ValueError("color must have three or four components")
    if any(not 0 <= value <= 255 for value in components):
        raise ValueError("color components must lie between 0 and 255")
    return components  # type: ignore[return-value]


@dataclass(frozen=True)
class Shadow:
    """One shadow layer: its offset, blur radius and RGBA colour."""

    offset: tuple[float, float]
    radius: float
    color: tuple[int, int, int, int]


def calculate_minimum_box_size(radius: int) -> Size:
    """Smallest box whose shadow reaches its full strength."""
    extent = calculate_blur_extent(radius)
    return Size(2 * extent.width + 1, 2 * extent.height + 1)


def calculate_minimum_shadow_texture_size(box_size: tuple[float, float], radius: float,
                                          offset: tuple[float, float]) -> tuple[float, float]:
    """Smallest texture that holds the shadow of the box without clipping."""
    extent = calculate_blur_extent(int(radius))
    return (
        box_size[0] + 2 * extent.width + abs(offset[0]),
        box_size[1] + 2 * extent.height + abs(offset[1]),
    )


@dataclass
class BoxShadowRenderer:
    """Renders the layered shadows of a rounded box into one image."""

    box_size: tuple[float, float] = (0.0, 0.0)
    border_radius: float = 0.0
    shadows: list[Shadow] = field(default_factory=list)

    def add_shadow(self, offset: tuple[float, float], radius: float, color: Sequence[int]) -> None:
        """Add a shadow layer; color is an RGB or RGBA tuple."""
        self.shadows.append(
            Shadow((float(offset[0]), float(offset[1])), float(radius), _normalize_color(color))
        )

    def render(self) -> Image.Image | None:
        """Draw all shadows into an RGBA image; None when there are none."""
        if not self.shadows:
            return None

        canvas_width = canvas_height = 0.0
        for shadow in self.shadows:
            width, height = calculate_minimum_shadow_texture_size(
                self.box_size, shadow.radius, shadow.offset
            )
            canvas_width = max(canvas_width, width)
            canvas_height = max(canvas_height, height)

        width, height = _round(canvas_width), _round(canvas_height)
        canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))

        box_width, box_height = self.box_size
        center_x = int((width - 1) / 2)
        center_y = int((height - 1) / 2)
        box_rect = (center_x - box_width / 2, center_y - box_height / 2, box_width, box_height)

        for shadow in self.shadows:
            _render_shadow(canvas, box_rect, self.border_radius, shadow.offset,
                           shadow.radius, shadow.color)
        return canvas