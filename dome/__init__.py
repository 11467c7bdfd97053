"""Pixel canvas, 8x8 bitmap font, maths helpers, file handling and engine state for a minimalist game engine."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "engine",
    "font",
    "glyphs_box",
    "glyphs_extra",
    "glyphs_latin",
    "mathutil",
    "paths",
]