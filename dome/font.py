"""Lookup of the built-in 8x8 bitmap font used for canvas text."""

from __future__ import annotations

from .glyphs_box import box_glyph
from .glyphs_extra import extra_glyph
from .glyphs_latin import latin_glyph

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8

# Shown for any codepoint the font does not cover.
MISSING_GLYPH = bytes([0x7F] * GLYPH_HEIGHT)

_DELETE = 0x7F

_LOOKUPS = (latin_glyph, box_glyph, extra_glyph)


def glyph(codepoint: int) -> bytes:
    """Return the 8-row bitmap for a codepoint.

    Each byte is one row from top to bottom; bit 0 is the leftmost pixel.
    Codepoints outside the covered blocks, and U+007F, map to MISSING_GLYPH.
    """
    if codepoint < 0 or codepoint == _DELETE:
        return MISSING_GLYPH
    for lookup in _LOOKUPS:
        try:
            return lookup(codepoint)
        except KeyError:
            continue
    return MISSING_GLYPH


def glyph_pixels(codepoint: int) -> list[tuple[int, int]]:
    """Return the (x, y) offsets of the lit pixels of a codepoint's glyph."""
    return [
        (i, j)
        for j, row in enumerate(glyph(codepoint))
        for i in range(GLYPH_WIDTH)
        if (row >> i) & 1
    ]