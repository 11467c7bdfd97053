"""8x8 bitmap glyphs for the box-drawing block U+2500 to U+257F.

Each glyph is eight bytes, one per row from top to bottom. Within a row,
bit 0 is the leftmost pixel.
"""

from __future__ import annotations

BOX_START = 0x2500


def _rows(*hex_rows: str) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in hex_rows)


_BOX: tuple[bytes, ...] = _rows(
    "00 00 00 00 FF 00 00 00",  # thin horizontal
    "00 00 00 FF FF 00 00 00",  # thick horizontal
    "08 08 08 08 08 08 08 08",  # thin vertical
    "18 18 18 18 18 18 18 18",  # thick vertical
    "00 00 00 00 BB 00 00 00",  # thin horizontal dashed
    "00 00 00 BB BB 00 00 00",  # thick horizontal dashed
    "08 00 08 08 08 00 08 08",  # thin vertical dashed
    "18 00 18 18 18 00 18 18",  # thick vertical dashed
    "00 00 00 00 55 00 00 00",  # thin horizontal dotted
    "00 00 00 55 55 00 00 00",  # thick horizontal dotted
    "00 08 00 08 00 08 00 08",  # thin vertical dotted
    "00 18 00 18 00 18 00 18",  # thick vertical dotted
    "00 00 00 00 F8 08 08 08",  # down L, right L
    "00 00 00 F8 F8 08 08 08",  # down L, right H
    "00 00 00 00 F8 18 18 18",  # down H, right L
    "00 00 00 F8 F8 18 18 18",  # down H, right H
    "00 00 00 00 0F 08 08 08",  # down L, left L
    "00 00 00 0F 0F 08 08 08",  # down L, left H
    "00 00 00 00 1F 18 18 18",  # down H, left L
    "00 00 00 1F 1F 18 18 18",  # down H, left H
    "08 08 08 08 F8 00 00 00",  # up L, right L
    "08 08 08 F8 F8 00 00 00",  # up L, right H
    "18 18 18 18 F8 00 00 00",  # up H, right L
    "18 18 18 F8 F8 00 00 00",  # up H, right H
    "08 08 08 08 0F 00 00 00",  # up L, left L
    "08 08 08 0F 0F 00 00 00",  # up L, left H
    "18 18 18 18 1F 00 00 00",  # up H, left L
    "18 18 18 1F 1F 00 00 00",  # up H, left H
    "08 08 08 08 F8 08 08 08",  # down L, right L, up L
    "08 08 08 F8 F8 08 08 08",  # down L, right H, up L
    "18 18 18 18 F8 08 08 08",  # down L, right L, up H
    "08 08 08 08 F8 18 18 18",  # down H, right L, up L
    "18 18 18 18 F8 18 18 18",  # down H, right L, up H
    "18 18 18 F8 F8 08 08 08",  # down L, right H, up H
    "08 08 08 F8 F8 18 18 18",  # down H, right H, up L
    "18 18 18 F8 F8 18 18 18",  # down H, right H, up H
    "08 08 08 08 0F 08 08 08",  # down L, left L, up L
    "08 08 08 0F 0F 08 08 08",  # down L, left H, up L
    "18 18 18 18 1F 08 08 08",  # down L, left L, up H
    "08 08 08 08 1F 18 18 18",  # down H, left L, up L
    "18 18 18 18 1F 18 18 18",  # down H, left L, up H
    "18 18 18 1F 1F 08 08 08",  # down L, left H, up H
    "08 08 08 1F 1F 18 18 18",  # down H, left H, up L
    "18 18 18 1F 1F 18 18 18",  # down H, left H, up H
    "00 00 00 00 FF 08 08 08",  # down L, right L, left L
    "00 00 00 0F FF 08 08 08",  # down L, right L, left H
    "00 00 00 F8 FF 08 08 08",  # down L, right H, left L
    "00 00 00 FF FF 08 08 08",  # down L, right H, left H
    "00 00 00 00 FF 18 18 18",  # down H, right L, left L
    "00 00 00 1F FF 18 18 18",  # down H, right L, left H
    "00 00 00 F8 FF 18 18 18",  # down H, right H, left L
    "00 00 00 FF FF 18 18 18",  # down H, right H, left H
    "08 08 08 08 FF 00 00 00",  # up L, right L, left L
    "08 08 08 0F FF 00 00 00",  # up L, right L, left H
    "08 08 08 F8 FF 00 00 00",  # up L, right H, left L
    "08 08 08 FF FF 00 00 00",  # up L, right H, left H
    "18 18 18 18 FF 00 00 00",  # up H, right L, left L
    "18 18 18 1F FF 00 00 00",  # up H, right L, left H
    "18 18 18 F8 FF 00 00 00",  # up H, right H, left L
    "18 18 18 FF FF 00 00 00",  # up H, right H, left H
    "08 08 08 08 FF 08 08 08",  # up L, right L, left L, down L
    "08 08 08 0F FF 08 08 08",  # up L, right L, left H, down L
    "08 08 08 F8 FF 08 08 08",  # up L, right H, left L, down L
    "08 08 08 FF FF 08 08 08",  # up L, right H, left H, down L
    "18 18 18 18 FF 08 08 08",  # up H, right L, left L, down L
    "08 08 08 08 FF 18 18 18",  # up L, right L, left L, down H
    "18 18 18 18 FF 18 18 18",  # up H, right L, left L, down H
    "18 18 18 1F FF 08 08 08",  # up H, right L, left H, down L
    "18 18 18 F8 FF 08 08 08",  # up H, right H, left L, down L
    "08 08 08 1F FF 18 18 18",  # up L, right L, left H, down H
    "08 08 08 F8 FF 18 18 18",  # up L, right H, left L, down H
    "08 08 08 FF FF 18 18 18",  # up L, right H, left H, down H
    "18 18 18 FF FF 08 08 08",  # up H, right H, left H, down L
    "18 18 18 F8 FF 18 18 18",  # up H, right H, left L, down H
    "18 18 18 1F FF 18 18 18",  # up H, right L, left H, down H
    "18 18 18 FF FF 18 18 18",  # up H, right H, left H, down H
    "00 00 00 00 E7 00 00 00",  # thin horizontal broken
    "00 00 00 E7 E7 00 00 00",  # thick horizontal broken
    "08 08 08 00 00 08 08 08",  # thin vertical broken
    "18 18 18 00 00 18 18 18",  # thick vertical broken
    "00 00 00 FF 00 FF 00 00",  # double horizontal
    "14 14 14 14 14 14 14 14",  # double vertical
    "00 00 00 F8 08 F8 08 08",  # down L, right D
    "00 00 00 00 FC 14 14 14",  # down D, right L
    "00 00 00 FC 04 F4 14 14",  # down D, right D
    "00 00 00 0F 08 0F 08 08",  # down L, left D
    "00 00 00 00 1F 14 14 14",  # down D, left L
    "00 00 00 1F 10 17 14 14",  # down D, left D
    "08 08 08 F8 08 F8 00 00",  # up L, right D
    "14 14 14 14 FC 00 00 00",  # up D, right L
    "14 14 14 F4 04 FC 00 00",  # up D, right D
    "08 08 08 0F 08 0F 00 00",  # up L, left D
    "14 14 14 14 1F 00 00 00",  # up D, left L
    "14 14 14 17 10 1F 00 00",  # up D, left D
    "08 08 08 F8 08 F8 08 08",  # up L, down L, right D
    "14 14 14 14 F4 14 14 14",  # up D, down D, right L
    "14 14 14 F4 04 F4 14 14",  # up D, down D, right D
    "08 08 08 0F 08 0F 08 08",  # up L, down L, left D
    "14 14 14 14 17 14 14 14",  # up D, down D, left L
    "14 14 14 17 10 17 14 14",  # up D, down D, left D
    "00 00 00 FF 00 FF 08 08",  # left D, right D, down L
    "00 00 00 00 FF 14 14 14",  # left L, right L, down D
    "00 00 00 FF 00 F7 14 14",  # left D, right D, down D
    "08 08 08 FF 00 FF 00 00",  # left D, right D, up L
    "14 14 14 14 FF 00 00 00",  # left L, right L, up D
    "14 14 14 F7 00 FF 00 00",  # left D, right D, up D
    "08 08 08 FF 08 FF 08 08",  # left D, right D, down L, up L
    "14 14 14 14 FF 14 14 14",  # left L, right L, down D, up D
    "14 14 14 F7 00 F7 14 14",  # left D, right D, down D, up D
    "00 00 00 00 E0 10 08 08",  # curve down-right
    "00 00 00 00 03 04 08 08",  # curve down-left
    "08 08 08 04 03 00 00 00",  # curve up-left
    "08 08 08 10 E0 00 00 00",  # curve up-right
    "80 40 20 10 08 04 02 01",  # diagonal bottom-left to top-right
    "01 02 04 08 10 20 40 80",  # diagonal top-left to bottom-right
    "81 42 24 18 18 24 42 81",  # diagonal cross
    "00 00 00 00 0F 00 00 00",  # left L
    "08 08 08 08 00 00 00 00",  # up L
    "00 00 00 00 F8 00 00 00",  # right L
    "00 00 00 00 08 08 08 08",  # down L
    "00 00 00 0F 0F 00 00 00",  # left H
    "18 18 18 18 00 00 00 00",  # up H
    "00 00 00 F8 F8 00 00 00",  # right H
    "00 00 00 00 18 18 18 18",  # down H
    "00 00 00 F8 FF 00 00 00",  # right H, left L
    "08 08 08 08 18 18 18 18",  # up L, down H
    "00 00 00 0F FF 00 00 00",  # right L, left H
    "18 18 18 18 08 08 08 08",  # up H, down L
)


def box_glyph(codepoint: int) -> bytes:
    """Return the 8-row bitmap for a codepoint in U+2500..U+257F.

    Raises KeyError for codepoints outside that range.
    """
    if not BOX_START <= codepoint < BOX_START + len(_BOX):
        raise KeyError(codepoint)
    return _BOX[codepoint - BOX_START]