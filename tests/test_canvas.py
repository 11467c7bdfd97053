import pytest

from dome.canvas import Canvas, Rect, blend, color_components
from dome.font import glyph_pixels

WHITE = 0xFFFFFFFF
RED = 0xFF0000FF


def lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.pixels[y * canvas.width + x] != 0
    }


def test_new_canvas_is_blank():
    c = Canvas(8, 6)
    assert c.pixels == [0] * 48
    assert c.clip == Rect(0, 0, 8, 6)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 4)


def test_pget_outside_is_opaque_black():
    c = Canvas(4, 4)
    assert c.pget(-1, 0) == 0xFF000000
    assert c.pget(4, 0) == 0xFF000000
    assert c.pget(0, 0) == 0


def test_pset_opaque_roundtrip():
    c = Canvas(4, 4)
    c.pset(2, 3, RED)
    assert c.pget(2, 3) == RED


def test_pset_transparent_is_ignored():
    c = Canvas(4, 4)
    c.pset(1, 1, 0x00FFFFFF)
    assert c.pget(1, 1) == 0


def test_pset_respects_clip_and_offset():
    c = Canvas(10, 10)
    c.clip = Rect(2, 2, 3, 3)
    c.pset(0, 0, RED)
    c.pset(3, 3, RED)
    assert lit(c) == {(3, 3)}
    c.offset_x = 1
    c.pset(3, 3, WHITE)
    assert c.pget(4, 3) == WHITE


def test_color_components():
    assert color_components(0x00332211) == (0x11, 0x22, 0x33)


def test_blend_invariants():
    assert blend(0xFF102030, 0xFFABCDEF) == 0xFFABCDEF
    assert blend(0xFF102030, 0x00ABCDEF) == 0xFF102030
    mixed = blend(0xFF000000, 0x80FFFFFF)
    assert mixed >> 24 == 0xFF
    r, g, b = color_components(mixed)
    assert 0 < r < 255 and r == g == b


def test_translucent_pset_blends():
    c = Canvas(2, 2)
    c.pset(0, 0, 0xFF000000)
    c.pset(0, 0, 0x80FFFFFF)
    assert c.pget(0, 0) == blend(0xFF000000, 0x80FFFFFF)


def test_unsafe_pset_ignores_clip():
    c = Canvas(4, 4)
    c.clip = Rect(0, 0, 1, 1)
    c.unsafe_pset(3, 3, RED)
    assert c.pget(3, 3) == RED


def test_blit_line_clips_left_edge():
    c = Canvas(6, 2)
    c.blit_line(-2, 1, 5, [11, 12, 13, 14, 15])
    assert c.pixels[6:12] == [13, 14, 15, 0, 0, 0]


def test_blit_line_clips_right_edge_and_rows():
    c = Canvas(4, 2)
    c.blit_line(2, 0, 4, [1, 2, 3, 4])
    c.blit_line(0, 5, 4, [9, 9, 9, 9])
    assert c.pixels == [0, 0, 1, 2, 0, 0, 0, 0]


def test_rectfill_opaque_fills_exactly():
    c = Canvas(20, 20)
    c.rectfill(3, 4, 5, 6, RED)
    assert lit(c) == {(x, y) for x in range(3, 8) for y in range(4, 10)}
    assert all(c.pget(x, y) == RED for x, y in lit(c))


def test_rectfill_is_clipped_to_canvas():
    c = Canvas(5, 5)
    c.rectfill(-3, -3, 10, 10, RED)
    assert c.pixels == [RED] * 25


def test_rectfill_translucent_blends_each_pixel():
    c = Canvas(4, 4)
    c.rectfill(0, 0, 4, 4, 0xFF000000)
    c.rectfill(1, 1, 2, 2, 0x80FFFFFF)
    expected = blend(0xFF000000, 0x80FFFFFF)
    assert c.pget(1, 1) == expected and c.pget(2, 2) == expected
    assert c.pget(0, 0) == 0xFF000000


def test_line_horizontal_and_diagonal():
    c = Canvas(10, 10)
    c.line(1, 2, 6, 2, RED, 1)
    assert lit(c) == {(x, 2) for x in range(1, 7)}
    d = Canvas(10, 10)
    d.line(3, 3, 0, 0, RED, 1)
    assert lit(d) == {(i, i) for i in range(4)}


def test_line_is_symmetric_and_hits_endpoints():
    a = Canvas(20, 20)
    a.line(2, 3, 15, 9, RED, 1)
    b = Canvas(20, 20)
    b.line(15, 9, 2, 3, RED, 1)
    assert lit(a) == lit(b)
    assert {(2, 3), (15, 9)} <= lit(a)


def test_thick_line_covers_square_pen():
    c = Canvas(10, 10)
    c.line(5, 5, 5, 5, RED, 3)
    assert lit(c) == {(x, y) for x in range(4, 7) for y in range(4, 7)}


def test_circle_outline():
    c = Canvas(20, 20)
    c.circle(10, 10, 3, RED)
    pixels = lit(c)
    assert {(13, 10), (7, 10), (10, 13), (10, 7)} <= pixels
    assert (10, 10) not in pixels
    assert all(p[0] - 10 == -(q[0] - 10) for p in pixels for q in [(20 - p[0], p[1])])


def test_circle_negative_radius():
    with pytest.raises(ValueError):
        Canvas(5, 5).circle(2, 2, -1, RED)


def test_circle_filled_coverage():
    c = Canvas(20, 20)
    c.circle_filled(10, 10, 5, RED)
    pixels = lit(c)
    assert {(10, 10), (15, 10), (5, 10), (10, 5), (10, 15)} <= pixels
    assert (5, 5) not in pixels
    assert {(20 - x, y) for x, y in pixels} == pixels


def test_circle_filled_translucent_same_shape():
    a = Canvas(20, 20)
    a.circle_filled(9, 9, 6, RED)
    b = Canvas(20, 20)
    b.circle_filled(9, 9, 6, 0x80FFFFFF)
    assert lit(a) == lit(b)


def test_ellipse_outline_extremes():
    c = Canvas(30, 30)
    c.ellipse(10, 10, 20, 16, RED)
    pixels = lit(c)
    assert {(15, 10), (15, 16)} <= pixels
    assert (15, 13) not in pixels


def test_ellipse_filled_and_swapped_corners():
    a = Canvas(30, 30)
    a.ellipse_filled(10, 10, 20, 16, RED)
    b = Canvas(30, 30)
    b.ellipse_filled(20, 16, 10, 10, RED)
    assert lit(a) == lit(b)
    assert (15, 13) in lit(a)
    assert (10, 10) not in lit(a)


def test_triangle_outline_vertices():
    c = Canvas(20, 20)
    c.triangle(0, 0, 10, 0, 0, 10, RED)
    assert {(0, 0), (10, 0), (0, 10)} <= lit(c)
    assert (5, 3) not in lit(c)


def test_triangle_filled_interior_and_order():
    a = Canvas(20, 20)
    a.triangle_filled(2, 1, 15, 4, 6, 17, RED)
    b = Canvas(20, 20)
    b.triangle_filled(6, 17, 2, 1, 15, 4, RED)
    assert lit(a) == lit(b)
    assert (7, 7) in lit(a)
    assert (18, 18) not in lit(a)


def test_rect_outline():
    c = Canvas(10, 10)
    c.rect(1, 1, 4, 3, RED)
    border = {(x, y) for x in range(1, 5) for y in (1, 3)} | {(x, 2) for x in (1, 4)}
    assert lit(c) == border


def test_print_text_matches_glyph():
    c = Canvas(32, 32)
    c.print_text("A", 1, 2, WHITE)
    assert lit(c) == {(1 + x, 2 + y) for x, y in glyph_pixels(ord("A"))}


def test_print_text_newline_and_advance():
    c = Canvas(32, 32)
    c.print_text("A\nB", 0, 0, WHITE)
    expected = {(x, y) for x, y in glyph_pixels(ord("A"))}
    expected |= {(x, y + 10) for x, y in glyph_pixels(ord("B"))}
    assert lit(c) == expected
    d = Canvas(32, 32)
    d.print_text("AB", 0, 0, WHITE)
    assert (8 + glyph_pixels(ord("B"))[0][0], glyph_pixels(ord("B"))[0][1]) in lit(d)


def test_resize_fills_with_color():
    c = Canvas(4, 4)
    c.resize(6, 3, RED)
    assert (c.width, c.height) == (6, 3)
    assert c.pixels == [RED] * 18


def test_resize_same_size_keeps_pixels():
    c = Canvas(4, 4)
    c.pset(1, 1, RED)
    c.resize(4, 4, WHITE)
    assert c.pget(1, 1) == RED and c.pget(0, 0) == 0