import pytest

from dome.glyphs_extra import MISC_GLYPHS, extra_glyph
from dome.glyphs_latin import latin_glyph

RANGES = [
    (0x0390, 0x03C9),
    (0x2580, 0x259F),
    (0x3040, 0x309F),
    (0xE541, 0xE55A),
]


@pytest.mark.parametrize("first,last", RANGES)
def test_every_glyph_in_range_has_eight_rows(first, last):
    glyphs = [extra_glyph(cp) for cp in range(first, last + 1)]
    assert all(len(g) == 8 for g in glyphs)


@pytest.mark.parametrize(
    "codepoint",
    [0x038F, 0x03CA, 0x257F, 0x25A0, 0x303F, 0x30A0, 0xE540, 0xE55B, 0x41, -1],
)
def test_outside_ranges_raises_key_error(codepoint):
    with pytest.raises(KeyError):
        extra_glyph(codepoint)


@pytest.mark.parametrize(
    "greek,latin",
    [
        (0x0391, ord("A")),
        (0x0392, ord("B")),
        (0x0395, ord("E")),
        (0x0397, ord("H")),
        (0x039F, ord("O")),
        (0x03BF, ord("o")),
        (0x03BC, 0x00B5),
        (0x03B2, 0x00DF),
    ],
)
def test_greek_shares_shapes_with_latin(greek, latin):
    assert extra_glyph(greek) == latin_glyph(latin)


def test_full_block_is_solid():
    assert extra_glyph(0x2588) == bytes([0xFF] * 8)


def test_half_blocks_combine_to_full_block():
    top = extra_glyph(0x2580)
    bottom = extra_glyph(0x2584)
    assert bytes(a | b for a, b in zip(top, bottom)) == extra_glyph(0x2588)
    assert all(a & b == 0 for a, b in zip(top, bottom))


def test_left_and_right_halves_combine_to_full_block():
    left = extra_glyph(0x258C)
    right = extra_glyph(0x2590)
    assert bytes(a | b for a, b in zip(left, right)) == extra_glyph(0x2588)


def test_block_eighths_grow_monotonically():
    counts = [
        sum(bin(b).count("1") for b in extra_glyph(cp))
        for cp in range(0x2581, 0x2589)
    ]
    assert counts == sorted(counts)
    assert counts[-1] == 64


def test_hiragana_unassigned_are_blank():
    for cp in (0x3040, 0x3095, 0x3096, 0x3097, 0x3098, 0x309F):
        assert extra_glyph(cp) == bytes(8)


def test_hiragana_small_and_large_a_match():
    assert extra_glyph(0x3041) == extra_glyph(0x3042)


def test_hiragana_pinned_glyph():
    assert extra_glyph(0x3042) == bytes.fromhex("04 3F 04 3C 56 4D 26 00")


def test_sga_glyphs_have_blank_top_rows():
    for cp in range(0xE541, 0xE55B):
        glyph = extra_glyph(cp)
        assert glyph[0] == 0 and glyph[1] == 0
        assert any(glyph)


def test_misc_glyphs_are_not_mapped():
    assert len(MISC_GLYPHS) == 10
    assert all(len(g) == 8 for g in MISC_GLYPHS)
    with pytest.raises(KeyError):
        extra_glyph(0x20A7)