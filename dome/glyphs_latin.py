"""8x8 bitmap glyphs for the Latin blocks U+0000 to U+00FF.

Each glyph is eight bytes, one per row from top to bottom. Within a row,
bit 0 is the leftmost pixel.
"""

from __future__ import annotations

GLYPH_HEIGHT = 8

_BLANK = bytes(GLYPH_HEIGHT)


def _rows(*hex_rows: str) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in hex_rows)


# U+0000 - U+007F (basic latin); U+0000 - U+0020 and U+007F are blank.
_BASIC: tuple[bytes, ...] = (
    (_BLANK,) * 0x21
    + _rows(
        "18 3C 3C 18 18 00 18 00",  # !
        "36 36 00 00 00 00 00 00",  # "
        "36 36 7F 36 7F 36 36 00",  # #
        "0C 3E 03 1E 30 1F 0C 00",  # $
        "00 63 33 18 0C 66 63 00",  # %
        "1C 36 1C 6E 3B 33 6E 00",  # &
        "06 06 03 00 00 00 00 00",  # '
        "18 0C 06 06 06 0C 18 00",  # (
        "06 0C 18 18 18 0C 06 00",  # )
        "00 66 3C FF 3C 66 00 00",  # *
        "00 0C 0C 3F 0C 0C 00 00",  # +
        "00 00 00 00 00 0C 0C 06",  # ,
        "00 00 00 3F 00 00 00 00",  # -
        "00 00 00 00 00 0C 0C 00",  # .
        "60 30 18 0C 06 03 01 00",  # /
        "3E 63 73 7B 6F 67 3E 00",  # 0
        "0C 0E 0C 0C 0C 0C 3F 00",  # 1
        "1E 33 30 1C 06 33 3F 00",  # 2
        "1E 33 30 1C 30 33 1E 00",  # 3
        "38 3C 36 33 7F 30 78 00",  # 4
        "3F 03 1F 30 30 33 1E 00",  # 5
        "1C 06 03 1F 33 33 1E 00",  # 6
        "3F 33 30 18 0C 0C 0C 00",  # 7
        "1E 33 33 1E 33 33 1E 00",  # 8
        "1E 33 33 3E 30 18 0E 00",  # 9
        "00 0C 0C 00 00 0C 0C 00",  # :
        "00 0C 0C 00 00 0C 0C 06",  # ;
        "18 0C 06 03 06 0C 18 00",  # <
        "00 00 3F 00 00 3F 00 00",  # =
        "06 0C 18 30 18 0C 06 00",  # >
        "1E 33 30 18 0C 00 0C 00",  # ?
        "3E 63 7B 7B 7B 03 1E 00",  # @
        "0C 1E 33 33 3F 33 33 00",  # A
        "3F 66 66 3E 66 66 3F 00",  # B
        "3C 66 03 03 03 66 3C 00",  # C
        "1F 36 66 66 66 36 1F 00",  # D
        "7F 46 16 1E 16 46 7F 00",  # E
        "7F 46 16 1E 16 06 0F 00",  # F
        "3C 66 03 03 73 66 7C 00",  # G
        "33 33 33 3F 33 33 33 00",  # H
        "1E 0C 0C 0C 0C 0C 1E 00",  # I
        "78 30 30 30 33 33 1E 00",  # J
        "67 66 36 1E 36 66 67 00",  # K
        "0F 06 06 06 46 66 7F 00",  # L
        "63 77 7F 7F 6B 63 63 00",  # M
        "63 67 6F 7B 73 63 63 00",  # N
        "1C 36 63 63 63 36 1C 00",  # O
        "3F 66 66 3E 06 06 0F 00",  # P
        "1E 33 33 33 3B 1E 38 00",  # Q
        "3F 66 66 3E 36 66 67 00",  # R
        "1E 33 07 0E 38 33 1E 00",  # S
        "3F 2D 0C 0C 0C 0C 1E 00",  # T
        "33 33 33 33 33 33 3F 00",  # U
        "33 33 33 33 33 1E 0C 00",  # V
        "63 63 63 6B 7F 77 63 00",  # W
        "63 63 36 1C 1C 36 63 00",  # X
        "33 33 33 1E 0C 0C 1E 00",  # Y
        "7F 63 31 18 4C 66 7F 00",  # Z
        "1E 06 06 06 06 06 1E 00",  # [
        "03 06 0C 18 30 60 40 00",  # backslash
        "1E 18 18 18 18 18 1E 00",  # ]
        "08 1C 36 63 00 00 00 00",  # ^
        "00 00 00 00 00 00 00 FF",  # _
        "0C 0C 18 00 00 00 00 00",  # `
        "00 00 1E 30 3E 33 6E 00",  # a
        "07 06 06 3E 66 66 3B 00",  # b
        "00 00 1E 33 03 33 1E 00",  # c
        "38 30 30 3E 33 33 6E 00",  # d
        "00 00 1E 33 3F 03 1E 00",  # e
        "1C 36 06 0F 06 06 0F 00",  # f
        "00 00 6E 33 33 3E 30 1F",  # g
        "07 06 36 6E 66 66 67 00",  # h
        "0C 00 0E 0C 0C 0C 1E 00",  # i
        "30 00 30 30 30 33 33 1E",  # j
        "07 06 66 36 1E 36 67 00",  # k
        "0E 0C 0C 0C 0C 0C 1E 00",  # l
        "00 00 33 7F 7F 6B 63 00",  # m
        "00 00 1F 33 33 33 33 00",  # n
        "00 00 1E 33 33 33 1E 00",  # o
        "00 00 3B 66 66 3E 06 0F",  # p
        "00 00 6E 33 33 3E 30 78",  # q
        "00 00 3B 6E 66 06 0F 00",  # r
        "00 00 3E 03 1E 30 1F 00",  # s
        "08 0C 3E 0C 0C 2C 18 00",  # t
        "00 00 33 33 33 33 6E 00",  # u
        "00 00 33 33 33 1E 0C 00",  # v
        "00 00 63 6B 7F 7F 36 00",  # w
        "00 00 63 36 1C 36 63 00",  # x
        "00 00 33 33 33 3E 30 1F",  # y
        "00 00 3F 19 0C 26 3F 00",  # z
        "38 0C 0C 07 0C 0C 38 00",  # {
        "18 18 18 00 18 18 18 00",  # |
        "07 0C 0C 38 0C 0C 07 00",  # }
        "6E 3B 00 00 00 00 00 00",  # ~
    )
    + (_BLANK,)
)

# U+0080 - U+009F (C1 control characters): all blank.
_CONTROL: tuple[bytes, ...] = (_BLANK,) * 32

# U+00A0 - U+00FF (extended latin).
_EXT_LATIN: tuple[bytes, ...] = _rows(
    "00 00 00 00 00 00 00 00",  # no-break space
    "18 18 00 18 18 18 18 00",  # inverted !
    "18 18 7E 03 03 7E 18 18",  # cent
    "1C 36 26 0F 06 67 3F 00",  # pound sterling
    "00 00 63 3E 36 3E 63 00",  # currency mark
    "33 33 1E 3F 0C 3F 0C 0C",  # yen
    "18 18 18 00 18 18 18 00",  # broken bar
    "7C C6 1C 36 36 1C 33 1E",  # section
    "33 00 00 00 00 00 00 00",  # diaeresis
    "3C 42 99 85 85 99 42 3C",  # copyright
    "3C 36 36 7C 00 00 00 00",  # feminine ordinal
    "00 CC 66 33 66 CC 00 00",  # <<
    "00 00 00 3F 30 30 00 00",  # not sign
    "00 00 00 00 00 00 00 00",  # soft hyphen
    "3C 42 9D A5 9D A5 42 3C",  # registered
    "7E 00 00 00 00 00 00 00",  # macron
    "1C 36 36 1C 00 00 00 00",  # degree
    "18 18 7E 18 18 00 7E 00",  # plus-minus
    "1C 30 18 0C 3C 00 00 00",  # superscript 2
    "1C 30 18 30 1C 00 00 00",  # superscript 3
    "18 0C 00 00 00 00 00 00",  # acute
    "00 00 66 66 66 3E 06 03",  # micro
    "FE DB DB DE D8 D8 D8 00",  # pilcrow
    "00 00 00 18 18 00 00 00",  # middle dot
    "00 00 00 00 00 18 30 1E",  # cedilla
    "08 0C 08 1C 00 00 00 00",  # superscript 1
    "1C 36 36 1C 00 00 00 00",  # masculine ordinal
    "00 33 66 CC 66 33 00 00",  # >>
    "C3 63 33 BD EC F6 F3 03",  # 1/4
    "C3 63 33 7B CC 66 33 F0",  # 1/2
    "03 C4 63 B4 DB AC E6 80",  # 3/4
    "0C 00 0C 06 03 33 1E 00",  # inverted ?
    "07 00 1C 36 63 7F 63 00",  # A grave
    "70 00 1C 36 63 7F 63 00",  # A acute
    "1C 36 00 3E 63 7F 63 00",  # A circumflex
    "6E 3B 00 3E 63 7F 63 00",  # A tilde
    "63 1C 36 63 7F 63 63 00",  # A diaeresis
    "0C 0C 00 1E 33 3F 33 00",  # A ring
    "7C 36 33 7F 33 33 73 00",  # AE
    "1E 33 03 33 1E 18 30 1E",  # C cedilla
    "07 00 3F 06 1E 06 3F 00",  # E grave
    "38 00 3F 06 1E 06 3F 00",  # E acute
    "0C 12 3F 06 1E 06 3F 00",  # E circumflex
    "36 00 3F 06 1E 06 3F 00",  # E diaeresis
    "07 00 1E 0C 0C 0C 1E 00",  # I grave
    "38 00 1E 0C 0C 0C 1E 00",  # I acute
    "0C 12 00 1E 0C 0C 1E 00",  # I circumflex
    "33 00 1E 0C 0C 0C 1E 00",  # I diaeresis
    "3F 66 6F 6F 66 66 3F 00",  # Eth
    "3F 00 33 37 3F 3B 33 00",  # N tilde
    "0E 00 18 3C 66 3C 18 00",  # O grave
    "70 00 18 3C 66 3C 18 00",  # O acute
    "3C 66 18 3C 66 3C 18 00",  # O circumflex
    "6E 3B 00 3E 63 63 3E 00",  # O tilde
    "C3 18 3C 66 66 3C 18 00",  # O diaeresis
    "00 36 1C 08 1C 36 00 00",  # multiplication
    "5C 36 73 7B 6F 36 1D 00",  # O stroke
    "0E 00 66 66 66 66 3C 00",  # U grave
    "70 00 66 66 66 66 3C 00",  # U acute
    "3C 66 00 66 66 66 3C 00",  # U circumflex
    "33 00 33 33 33 33 1E 00",  # U diaeresis
    "70 00 66 66 3C 18 18 00",  # Y acute
    "0F 06 3E 66 66 3E 06 0F",  # Thorn
    "00 1E 33 1F 33 1F 03 03",  # sharp s
    "07 00 1E 30 3E 33 7E 00",  # a grave
    "38 00 1E 30 3E 33 7E 00",  # a acute
    "7E C3 3C 60 7C 66 FC 00",  # a circumflex
    "6E 3B 1E 30 3E 33 7E 00",  # a tilde
    "33 00 1E 30 3E 33 7E 00",  # a diaeresis
    "0C 0C 1E 30 3E 33 7E 00",  # a ring
    "00 00 FE 30 FE 33 FE 00",  # ae
    "00 00 1E 03 03 1E 30 1C",  # c cedilla
    "07 00 1E 33 3F 03 1E 00",  # e grave
    "38 00 1E 33 3F 03 1E 00",  # e acute
    "7E C3 3C 66 7E 06 3C 00",  # e circumflex
    "33 00 1E 33 3F 03 1E 00",  # e diaeresis
    "07 00 0E 0C 0C 0C 1E 00",  # i grave
    "1C 00 0E 0C 0C 0C 1E 00",  # i acute
    "3E 63 1C 18 18 18 3C 00",  # i circumflex
    "33 00 0E 0C 0C 0C 1E 00",  # i diaeresis
    "1B 0E 1B 30 3E 33 1E 00",  # eth
    "00 1F 00 1F 33 33 33 00",  # n tilde
    "00 07 00 1E 33 33 1E 00",  # o grave
    "00 38 00 1E 33 33 1E 00",  # o acute
    "1E 33 00 1E 33 33 1E 00",  # o circumflex
    "6E 3B 00 1E 33 33 1E 00",  # o tilde
    "00 33 00 1E 33 33 1E 00",  # o diaeresis
    "18 18 00 7E 00 18 18 00",  # division
    "00 60 3C 76 7E 6E 3C 06",  # o stroke
    "00 07 00 33 33 33 7E 00",  # u grave
    "00 38 00 33 33 33 7E 00",  # u acute
    "1E 33 00 33 33 33 7E 00",  # u circumflex
    "00 33 00 33 33 33 7E 00",  # u diaeresis
    "00 38 00 33 33 3E 30 1F",  # y acute
    "00 00 06 3E 66 3E 06 00",  # thorn
    "00 33 00 33 33 3E 30 1F",  # y diaeresis
)

_LATIN: tuple[bytes, ...] = _BASIC + _CONTROL + _EXT_LATIN


def latin_glyph(codepoint: int) -> bytes:
    """Return the 8-row bitmap for a codepoint in U+0000..U+00FF.

    Raises KeyError for codepoints outside that range.
    """
    if not 0 <= codepoint < len(_LATIN):
        raise KeyError(codepoint)
    return _LATIN[codepoint]