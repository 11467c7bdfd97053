"""A software pixel canvas with clipping, alpha blending and shape drawing.

Pixels are 32-bit integers with red in the lowest byte, then green, blue
and alpha in the highest byte.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph
from .mathutil import mid

OPAQUE_BLACK = 0xFF000000
_MASK32 = 0xFFFFFFFF


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


def color_components(color: int) -> tuple[int, int, int]:
    """Split a colour into its (red, green, blue) bytes."""
    return color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF


def blend(current: int, color: int) -> int:
    """Blend color over current using color's alpha; the result is opaque."""
    norm_a = ((color >> 24) & 0xFF) / 255.0
    diff_a = 1.0 - norm_a
    old_r, old_g, old_b = color_components(current)
    new_r, new_g, new_b = color_components(color)
    r = int(diff_a * old_r + norm_a * new_r)
    g = int(diff_a * old_g + norm_a * new_g)
    b = int(diff_a * old_b + norm_a * new_b)
    return (0xFF << 24) | (b << 16) | (g << 8) | r


@dataclass
class _PixelBuffer:
    width: int = 0
    height: int = 0
    pixels: list[int] = field(default_factory=list)

    def resize(self, width: int, height: int) -> list[int]:
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)
        return self.pixels


def _put(dest: list[int], pitch: int, x: int, y: int, color: int) -> None:
    index = y * pitch + x
    if 0 <= index < len(dest):
        dest[index] = color


def _copy_line(dest: list[int], pitch: int, x: int, y: int, w: int, buf: list[int]) -> None:
    start = mid(0, x, pitch)
    stop = mid(0, x + w, pitch)
    src = -x if x < 0 else 0
    segment = buf[src:src + max(0, stop - start)]
    row = y * pitch + start
    dest[row:row + len(segment)] = segment


def _region(x: float, y: float, rx: int, ry: int) -> float:
    num = ry * ry * x
    den = rx * rx * y
    if den == 0:
        return math.nan if num == 0 else math.inf
    return num / den


def _div(a: float, b: float) -> float:
    return a / b if b else 0.0


def _line_points(x1: int, y1: int, x2: int, y2: int):
    if abs(y2 - y1) < abs(x2 - x1):
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        dx, dy = x2 - x1, y2 - y1
        yi = 1
        if dy < 0:
            yi, dy = -1, -dy
        p = 2 * dy - dx
        y = y1
        for x in range(x1, x2 + 1):
            yield x, y
            if p > 0:
                y += yi
                p -= 2 * dx
            p += 2 * dy
    else:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        dx, dy = x2 - x1, y2 - y1
        xi = 1
        if dx < 0:
            xi, dx = -1, -dx
        p = 2 * dx - dy
        x = x1
        for y in range(y1, y2 + 1):
            yield x, y
            if p > 0:
                x += xi
                p -= 2 * dy
            p += 2 * dx


class Canvas:
    """A width x height grid of pixels with an offset and a clip rectangle."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must be non-negative")
        self.width = width
        self.height = height
        self.pixels: list[int] = [0] * (width * height)
        self.offset_x = 0
        self.offset_y = 0
        self.clip = Rect(0, 0, width, height)
        self._mask = _PixelBuffer()

    def pget(self, x: int, y: int) -> int:
        """Return the pixel at (x, y), or opaque black outside the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.pixels[self.width * y + x]
        return OPAQUE_BLACK

    def pset(self, x: int, y: int, color: int) -> None:
        """Draw one pixel, honouring offset, clip and alpha."""
        x += self.offset_x
        y += self.offset_y
        alpha = (color >> 24) & 0xFF
        if alpha == 0:
            return
        if not self.clip.contains(x, y):
            return
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        index = self.width * y + x
        if alpha < 0xFF:
            color = blend(self.pixels[index], color)
        self.pixels[index] = color & _MASK32

    def unsafe_pset(self, x: int, y: int, color: int) -> None:
        """Blend one pixel in place, ignoring offset and clip."""
        index = self.width * y + x
        self.pixels[index] = blend(self.pixels[index], color)

    def blit_line(self, x: int, y: int, w: int, buf: list[int]) -> None:
        """Copy w pixels from buf to row y starting at x, clipped, without blending."""
        zone = self.clip
        y += self.offset_y
        if y < max(0, zone.y) or y >= min(self.height, zone.y + zone.h):
            return
        end = zone.x + zone.w
        screen_x = x + self.offset_x
        read_x = max(0, zone.x - screen_x)
        read_length = mid(0, w - read_x, w)
        write_x = mid(zone.x, screen_x, end)
        write_length = read_length
        if screen_x > end - read_length:
            write_length -= (screen_x + read_length) - end
        write_length = max(0, mid(0, write_length, zone.w))

        start = max(write_x, 0)
        skipped = start - write_x
        read_x += skipped
        write_length = min(write_length - skipped, self.width - start)
        if write_length <= 0:
            return
        segment = buf[read_x:read_x + write_length]
        row = y * self.width + start
        self.pixels[row:row + len(segment)] = segment

    def _blit_mask(self, x: int, y: int) -> None:
        mask = self._mask
        for j in range(mask.height):
            for i in range(mask.width):
                self.pset(x + i, y + j, mask.pixels[j * mask.width + i])

    def line(self, x1, y1, x2, y2, color: int, size: int = 1) -> None:
        """Draw a line with a square pen of the given size."""
        x1, y1, x2, y2, size = int(x1), int(y1), int(x2), int(y2), int(size)
        pixels = self._mask.resize(size, size)
        pixels[:] = [color] * len(pixels)
        half = size // 2
        for px, py in _line_points(x1, y1, x2, y2):
            self._blit_mask(px - half, py - half)

    def circle(self, x0: int, y0: int, r: int, color: int) -> None:
        """Draw a circle outline of radius r centred on (x0, y0)."""
        if r < 0:
            raise ValueError("radius must be non-negative")
        x, y = 0, r
        d = round(math.pi - 2 * r)
        pitch = r * 2 + 1
        buf = self._mask.resize(pitch, pitch)
        while x <= y:
            for px, py in (
                (r + x, r + y), (r - x, r - y), (r - x, r + y), (r + x, r - y),
                (r + y, r + x), (r - y, r - x), (r - y, r + x), (r + y, r - x),
            ):
                _put(buf, pitch, px, py, color)
            if d < 0:
                d = int(d + math.pi * x + math.pi * 2)
            else:
                d = int(d + math.pi * (x - y) + math.pi * 3)
                y -= 1
            x += 1
        self._blit_mask(x0 - r, y0 - r)

    def circle_filled(self, x0: int, y0: int, r: int, color: int) -> None:
        """Draw a filled circle of radius r centred on (x0, y0)."""
        if r < 0:
            raise ValueError("radius must be non-negative")
        x, y = 0, r
        d = round(math.pi - 2 * r)
        width = r * 2 + 1
        line = [color] * width
        opaque = (color >> 24) & 0xFF == 0xFF
        if not opaque:
            buf = self._mask.resize(width, width)
        while x <= y:
            wx = x * 2 + 1
            wy = y * 2 + 1
            if opaque:
                self.blit_line(x0 - x, y0 + y, wx, line)
                self.blit_line(x0 - x, y0 - y, wx, line)
                self.blit_line(x0 - y, y0 + x, wy, line)
                self.blit_line(x0 - y, y0 - x, wy, line)
            else:
                _copy_line(buf, width, r - x, r + y, wx, line)
                if y != 0:
                    _copy_line(buf, width, r - x, r - y, wx, line)
                _copy_line(buf, width, r - y, r + x, wy, line)
                if x != 0:
                    _copy_line(buf, width, r - y, r - x, wy, line)
            if d < 0:
                d = int(d + math.pi * x + math.pi * 2)
            else:
                d = int(d + math.pi * (x - y) + math.pi * 3)
                y -= 1
            x += 1
        if not opaque:
            self._blit_mask(x0 - r, y0 - r)

    def ellipse(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw an ellipse outline inside the box from (x0, y0) to (x1, y1)."""
        if x1 < x0:
            x0, x1 = x1, x0
        if y1 < y0:
            y0, y1 = y1, y0
        rx = (x1 - x0) // 2
        ry = (y1 - y0) // 2
        rx2, ry2 = rx * rx, ry * ry
        rx2ry2 = rx2 * ry2
        width = (rx + 1) * 2
        buf = self._mask.resize(width, (ry + 1) * 2)

        def plot4(px: int, py: int) -> None:
            _put(buf, width, rx + px, ry + py, color)
            _put(buf, width, rx - px, ry - py, color)
            _put(buf, width, rx - px, ry + py, color)
            _put(buf, width, rx + px, ry - py, color)

        x, y = 0, ry
        _put(buf, width, rx, ry + y, color)
        _put(buf, width, rx, ry - y, color)
        while abs(_region(x, y, rx, ry)) < 1:
            x += 1
            d = ry2 * x * x + rx2 * (y - 0.5) ** 2 - rx2ry2
            if d > 0:
                y -= 1
            plot4(x, y)
        while y > 0:
            y -= 1
            d = rx2 * y * y + ry2 * (x + 0.5) ** 2 - rx2ry2
            if d <= 0:
                x += 1
            plot4(x, y)
        self._blit_mask(x0, y0)

    def ellipse_filled(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a filled ellipse inside the box from (x0, y0) to (x1, y1)."""
        if x1 < x0:
            x0, x1 = x1, x0
        if y1 < y0:
            y0, y1 = y1, y0
        rx = (x1 - x0) // 2
        ry = (y1 - y0) // 2
        rx2, ry2 = rx * rx, ry * ry
        rx2ry2 = rx2 * ry2
        dx = (rx + 1) * 2
        dy = (ry + 1) * 2
        line = [color] * max(dx, dy)
        buf = self._mask.resize(dx, dy)

        x, y = 0, ry
        while abs(_region(x, y, rx, ry)) < 1:
            x += 1
            d = ry2 * x * x + rx2 * (y - 0.5) ** 2 - rx2ry2
            if d > 0:
                y -= 1
            _copy_line(buf, dx, rx - x, ry + y, x * 2 + 1, line)
            _copy_line(buf, dx, rx - x, ry - y, x * 2 + 1, line)
        while y > 0:
            y -= 1
            d = rx2 * y * y + ry2 * (x + 0.5) ** 2 - rx2ry2
            if d <= 0:
                x += 1
            _copy_line(buf, dx, rx - x, ry + y, x * 2 + 1, line)
            _copy_line(buf, dx, rx - x, ry - y, x * 2 + 1, line)
        self._blit_mask(x0, y0)

    def triangle(self, x0, y0, x1, y1, x2, y2, color: int) -> None:
        """Draw a triangle outline."""
        self.line(x0, y0, x1, y1, color, 1)
        self.line(x1, y1, x2, y2, color, 1)
        self.line(x2, y2, x0, y0, color, 1)

    def _fill_flat_bottom(self, x0, y0, x1, y1, x2, y2, color):
        slope0 = _div(x1 - x0, y1 - y0)
        slope1 = _div(x2 - x0, y2 - y0)
        cur0 = cur1 = x0
        scan = int(y0)
        while scan <= y1:
            self.line(cur0, scan, cur1, scan, color, 1)
            cur0 += slope0
            cur1 += slope1
            scan += 1

    def _fill_flat_top(self, x0, y0, x1, y1, x2, y2, color):
        slope0 = _div(x2 - x0, y2 - y0)
        slope1 = _div(x2 - x1, y2 - y1)
        cur0 = cur1 = x2
        scan = int(y2)
        while scan > y0:
            self.line(cur0, scan, cur1, scan, color, 1)
            cur0 -= slope0
            cur1 -= slope1
            scan -= 1

    def triangle_filled(self, x0, y0, x1, y1, x2, y2, color: int) -> None:
        """Draw a filled triangle by scanlines."""
        if y1 < y0:
            x0, y0, x1, y1 = x1, y1, x0, y0
        if y2 < y0:
            x0, y0, x2, y2 = x2, y2, x0, y0
        if y2 < y1:
            x1, y1, x2, y2 = x2, y2, x1, y1
        x0, y0, x1, y1, x2, y2 = (v + 0.5 for v in (x0, y0, x1, y1, x2, y2))
        if y1 == y2:
            self._fill_flat_bottom(x0, y0, x1, y1, x2, y2, color)
        elif y0 == y1:
            self._fill_flat_top(x0, y0, x1, y1, x2, y2, color)
        else:
            x3 = x0 + ((y1 - y0) / (y2 - y0)) * (x2 - x0)
            self._fill_flat_bottom(x0, y0, x1, y1, x3, y1, color)
            self._fill_flat_top(x1, y1, x3, y1, x2, y2, color)

    def rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Draw a rectangle outline w pixels wide and h pixels tall."""
        w -= 1
        h -= 1
        self.line(x, y, x, y + h, color, 1)
        self.line(x, y, x + w, y, color, 1)
        self.line(x, y + h, x + w, y + h, color, 1)
        self.line(x + w, y, x + w, y + h, color, 1)

    def rectfill(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle; opaque colours are copied, translucent ones blended."""
        alpha = (color >> 24) & 0xFF
        if alpha == 0 or w <= 0:
            return
        if alpha == 0xFF:
            line = [color] * (w + 1)
            for j in range(y, y + h):
                self.blit_line(x, j, w, line)
        else:
            for j in range(y, y + h):
                for i in range(x, x + w):
                    self.pset(i, j, color)

    def print_text(self, text: str, x: int, y: int, color: int) -> None:
        """Draw text in the built-in 8x8 font; newlines start a new line."""
        spacing = GLYPH_HEIGHT // 4
        cursor = 0
        for char in text:
            if char == "\n":
                cursor = 0
                y += GLYPH_HEIGHT + spacing
                continue
            for j, row in enumerate(glyph(ord(char))):
                for i in range(GLYPH_WIDTH):
                    if (row >> i) & 1:
                        self.pset(x + cursor + i, y + j, color)
            cursor += GLYPH_WIDTH

    def resize(self, width: int, height: int, color: int) -> None:
        """Change the canvas size and fill it with color."""
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must be non-negative")
        if width == self.width and height == self.height:
            return
        self.width = width
        self.height = height
        self.pixels = [color & _MASK32] * (width * height)