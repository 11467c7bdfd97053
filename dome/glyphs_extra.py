"""8x8 bitmap glyphs for the Greek, block-element, Hiragana and SGA blocks.

Each glyph is eight bytes, one per row from top to bottom. Within a row,
bit 0 is the leftmost pixel.
"""

from __future__ import annotations

GLYPH_HEIGHT = 8

_BLANK = bytes(GLYPH_HEIGHT)


def _rows(*hex_rows: str) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in hex_rows)


# U+0390 - U+03C9 (greek).
_GREEK: tuple[bytes, ...] = _rows(
    "2D 00 0C 0C 0C 2C 18 00",  # iota with tonos and diaeresis
    "0C 1E 33 33 3F 33 33 00",  # Alpha
    "3F 66 66 3E 66 66 3F 00",  # Beta
    "3F 33 03 03 03 03 03 00",  # Gamma
    "08 1C 1C 36 36 63 7F 00",  # Delta
    "7F 46 16 1E 16 46 7F 00",  # Epsilon
    "7F 63 31 18 4C 66 7F 00",  # Zeta
    "33 33 33 3F 33 33 33 00",  # Eta
    "1C 36 63 7F 63 36 1C 00",  # Theta
    "1E 0C 0C 0C 0C 0C 1E 00",  # Iota
    "67 66 36 1E 36 66 67 00",  # Kappa
    "08 1C 1C 36 36 63 63 00",  # Lambda
    "63 77 7F 7F 6B 63 63 00",  # Mu
    "63 67 6F 7B 73 63 63 00",  # Nu
    "7F 63 00 3E 00 63 7F 00",  # Xi
    "1C 36 63 63 63 36 1C 00",  # Omikron
    "7F 36 36 36 36 36 36 00",  # Pi
    "3F 66 66 3E 06 06 0F 00",  # Rho
    "00 01 02 04 4F 90 A0 40",  # U+03A2
    "7F 63 06 0C 06 63 7F 00",  # Sigma
    "3F 2D 0C 0C 0C 0C 1E 00",  # Tau
    "33 33 33 1E 0C 0C 1E 00",  # Upsilon
    "18 7E DB DB DB 7E 18 00",  # Phi
    "63 63 36 1C 36 63 63 00",  # Chi
    "DB DB DB 7E 18 18 3C 00",  # Psi
    "3E 63 63 63 36 36 77 00",  # Omega
    "33 00 1E 0C 0C 0C 1E 00",  # Iota with diaeresis
    "33 00 33 33 1E 0C 1E 00",  # Upsilon with diaeresis
    "70 00 6E 3B 13 3B 6E 00",  # alpha with tonos
    "38 00 1E 03 0E 03 1E 00",  # epsilon with tonos
    "38 00 1F 33 33 33 33 30",  # eta with tonos
    "38 00 0C 0C 0C 2C 18 00",  # iota with tonos
    "2D 00 33 33 33 33 1E 00",  # upsilon with tonos and diaeresis
    "00 00 6E 3B 13 3B 6E 00",  # alpha
    "00 1E 33 1F 33 1F 03 03",  # beta
    "00 00 33 33 1E 0C 0C 00",  # gamma
    "38 0C 18 3E 33 33 1E 00",  # delta
    "00 00 1E 03 0E 03 1E 00",  # epsilon
    "00 3F 06 03 03 1E 30 1C",  # zeta
    "00 00 1F 33 33 33 33 30",  # eta
    "00 00 1E 33 3F 33 1E 00",  # theta
    "00 00 0C 0C 0C 2C 18 00",  # iota
    "00 00 33 1B 0F 1B 33 00",  # kappa
    "00 03 06 0C 1C 36 63 00",  # lambda
    "00 00 66 66 66 3E 06 03",  # mu
    "00 00 33 33 33 1E 0C 00",  # nu
    "1E 03 0E 03 03 1E 30 1C",  # xi
    "00 00 1E 33 33 33 1E 00",  # omikron
    "00 00 7F 36 36 36 36 00",  # pi
    "00 00 3C 66 66 36 06 06",  # rho
    "00 00 3E 03 03 1E 30 1C",  # final sigma
    "00 00 7E 1B 1B 1B 0E 00",  # sigma
    "00 00 7E 18 18 58 30 00",  # tau
    "00 00 33 33 33 33 1E 00",  # upsilon
    "00 00 76 DB DB 7E 18 00",  # phi
    "00 63 36 1C 1C 36 63 00",  # chi
    "00 00 DB DB DB 7E 18 00",  # psi
    "00 00 36 63 6B 7F 36 00",  # omega
)

# U+2580 - U+259F (block elements).
_BLOCK: tuple[bytes, ...] = _rows(
    "FF FF FF FF 00 00 00 00",  # upper half
    "00 00 00 00 00 00 00 FF",  # lower 1/8
    "00 00 00 00 00 00 FF FF",  # lower 2/8
    "00 00 00 00 00 FF FF FF",  # lower 3/8
    "00 00 00 00 FF FF FF FF",  # lower half
    "00 00 00 FF FF FF FF FF",  # lower 5/8
    "00 00 FF FF FF FF FF FF",  # lower 6/8
    "00 FF FF FF FF FF FF FF",  # lower 7/8
    "FF FF FF FF FF FF FF FF",  # full block
    "7F 7F 7F 7F 7F 7F 7F 7F",  # left 7/8
    "3F 3F 3F 3F 3F 3F 3F 3F",  # left 6/8
    "1F 1F 1F 1F 1F 1F 1F 1F",  # left 5/8
    "0F 0F 0F 0F 0F 0F 0F 0F",  # left half
    "07 07 07 07 07 07 07 07",  # left 3/8
    "03 03 03 03 03 03 03 03",  # left 2/8
    "01 01 01 01 01 01 01 01",  # left 1/8
    "F0 F0 F0 F0 F0 F0 F0 F0",  # right half
    "55 00 AA 00 55 00 AA 00",  # light shade
    "55 AA 55 AA 55 AA 55 AA",  # medium shade
    "FF AA FF 55 FF AA FF 55",  # dark shade
    "FF 00 00 00 00 00 00 00",  # upper 1/8
    "80 80 80 80 80 80 80 80",  # right 1/8
    "00 00 00 00 0F 0F 0F 0F",  # quadrant lower left
    "00 00 00 00 F0 F0 F0 F0",  # quadrant lower right
    "0F 0F 0F 0F 00 00 00 00",  # quadrant upper left
    "0F 0F 0F 0F FF FF FF FF",  # upper left, lower left and lower right
    "0F 0F 0F 0F F0 F0 F0 F0",  # upper left and lower right
    "FF FF FF FF 0F 0F 0F 0F",  # upper left, upper right and lower left
    "FF FF FF FF F0 F0 F0 F0",  # upper left, upper right and lower right
    "F0 F0 F0 F0 00 00 00 00",  # quadrant upper right
    "F0 F0 F0 F0 0F 0F 0F 0F",  # upper right and lower left
    "F0 F0 F0 F0 FF FF FF FF",  # upper right, lower left and lower right
)

# U+3040 - U+309F (hiragana).
_HIRAGANA: tuple[bytes, ...] = (
    (_BLANK,)
    + _rows(
        "04 3F 04 3C 56 4D 26 00",  # a
        "04 3F 04 3C 56 4D 26 00",  # A
        "00 00 00 11 21 25 02 00",  # i
        "00 01 11 21 21 25 02 00",  # I
        "00 1C 00 1C 22 20 18 00",  # u
        "3C 00 3C 42 40 20 18 00",  # U
        "1C 00 3E 10 38 24 62 00",  # e
        "1C 00 3E 10 38 24 62 00",  # E
        "24 4F 04 3C 46 45 22 00",  # o
        "24 4F 04 3C 46 45 22 00",  # O
        "04 24 4F 54 52 12 09 00",  # KA
        "44 24 0F 54 52 52 09 00",  # GA
        "08 1F 08 3F 1C 02 3C 00",  # KI
        "44 2F 04 1F 0E 01 1E 00",  # GI
        "10 08 04 02 04 08 10 00",  # KU
        "28 44 12 21 02 04 08 00",  # GU
        "00 22 79 21 21 22 10 00",  # KE
        "40 22 11 3D 11 12 08 00",  # GE
        "00 00 3C 00 02 02 3C 00",  # KO
        "20 40 16 20 01 01 0E 00",  # GO
        "10 7E 10 3C 02 02 1C 00",  # SA
        "24 4F 14 2E 01 01 0E 00",  # ZA
        "00 02 02 02 42 22 1C 00",  # SI
        "20 42 12 22 02 22 1C 00",  # ZI
        "10 7E 18 14 18 10 0C 00",  # SU
        "44 2F 06 05 06 04 03 00",  # ZU
        "20 72 2F 22 1A 02 1C 00",  # SE
        "80 50 3A 17 1A 02 1C 00",  # ZE
        "1E 08 04 7F 08 04 38 00",  # SO
        "4F 24 02 7F 08 04 38 00",  # ZO
        "02 0F 02 72 02 09 71 00",  # TA
        "42 2F 02 72 02 09 71 00",  # DA
        "08 7E 08 3C 40 40 38 00",  # TI
        "44 2F 04 1E 20 20 1C 00",  # DI
        "00 00 00 1C 22 20 1C 00",  # tu
        "00 1C 22 41 40 20 1C 00",  # TU
        "40 20 1E 21 20 20 1C 00",  # DU
        "00 3E 08 04 04 04 38 00",  # TE
        "00 3E 48 24 04 04 38 00",  # DE
        "04 04 08 3C 02 02 3C 00",  # TO
        "44 24 08 3C 02 02 3C 00",  # DO
        "32 02 27 22 72 29 11 00",  # NA
        "00 02 7A 02 0A 72 02 00",  # NI
        "08 09 3E 4B 65 55 22 00",  # NU
        "04 07 34 4C 66 54 24 00",  # NE
        "00 00 3C 4A 49 45 22 00",  # NO
        "00 22 7A 22 72 2A 12 00",  # HA
        "80 51 1D 11 39 15 09 00",  # BA
        "40 B1 5D 11 39 15 09 00",  # PA
        "00 00 13 32 51 11 0E 00",  # HI
        "40 20 03 32 51 11 0E 00",  # BI
        "40 A0 43 32 51 11 0E 00",  # PI
        "1C 00 08 2A 49 10 0C 00",  # HU
        "4C 20 08 2A 49 10 0C 00",  # BU
        "4C A0 48 0A 29 48 0C 00",  # PU
        "00 00 04 0A 11 20 40 00",  # HE
        "20 40 14 2A 11 20 40 00",  # BE
        "20 50 24 0A 11 20 40 00",  # PE
        "7D 11 7D 11 39 55 09 00",  # HO
        "9D 51 1D 11 39 55 09 00",  # BO
        "5D B1 5D 11 39 55 09 00",  # PO
        "7E 08 3E 08 1C 2A 04 00",  # MA
        "00 07 24 24 7E 25 12 00",  # MI
        "04 0F 64 06 05 26 3C 00",  # MU
        "00 09 3D 4A 4B 45 2A 00",  # ME
        "02 0F 02 0F 62 42 3C 00",  # MO
        "00 00 12 1F 22 12 04 00",  # ya
        "00 12 3F 42 42 34 04 00",  # YA
        "00 00 11 3D 53 39 11 00",  # yu
        "00 11 3D 53 51 39 11 00",  # YU
        "00 08 38 08 1C 2A 04 00",  # yo
        "08 08 38 08 1C 2A 04 00",  # YO
        "1E 00 02 3A 46 42 30 00",  # RA
        "00 20 22 22 2A 24 10 00",  # RI
        "1F 08 3C 42 49 54 38 00",  # RU
        "04 07 04 0C 16 55 24 00",  # RE
        "3F 10 08 3C 42 41 30 00",  # RO
        "00 00 08 0E 38 4C 2A 00",  # wa
        "04 07 04 3C 46 45 24 00",  # WA
        "0E 08 3C 4A 69 55 32 00",  # WI
        "06 3C 42 39 04 36 49 00",  # WE
        "04 0F 04 6E 11 08 70 00",  # WO
        "08 08 04 0C 56 52 21 00",  # N
        "40 2E 00 3C 42 40 38 00",  # VU
    )
    # U+3095 - U+309A: unassigned and combining marks, all blank.
    + (_BLANK,) * 6
    + _rows(
        "40 80 20 40 00 00 00 00",  # voiced sound mark
        "40 A0 40 00 00 00 00 00",  # semi-voiced sound mark
        "00 00 08 08 10 30 0C 00",  # iteration mark
        "20 40 14 24 08 18 06 00",  # voiced iteration mark
    )
    + (_BLANK,)
)

# U+E541 - U+E55A (Standard Galactic Alphabet, private use area).
_SGA: tuple[bytes, ...] = _rows(
    "00 00 38 66 06 06 07 00",  # A
    "00 00 0C 0C 18 30 7F 00",  # B
    "00 00 0C 00 0C 30 30 00",  # C
    "00 00 7F 00 03 1C 60 00",  # D
    "00 00 63 03 03 03 7F 00",  # E
    "00 00 00 FF 00 DB 00 00",  # F
    "00 00 30 30 3E 30 30 00",  # G
    "00 00 7E 00 7E 18 18 00",  # H
    "00 00 18 18 00 18 18 00",  # I
    "00 00 18 00 18 00 18 00",  # J
    "00 00 18 18 5A 18 18 00",  # K
    "00 00 03 33 03 33 03 00",  # L
    "00 00 63 60 60 60 7F 00",  # M
    "00 00 66 60 30 18 0C 00",  # N
    "00 00 3C 60 30 18 0C 00",  # O
    "00 00 66 60 66 06 66 00",  # P
    "00 00 18 00 7E 60 7E 00",  # Q
    "00 00 00 66 00 66 00 00",  # R
    "00 00 0C 0C 3C 30 30 00",  # S
    "00 00 3C 30 30 00 30 00",  # T
    "00 00 00 36 00 7F 00 00",  # U
    "00 00 18 18 7E 00 7E 00",  # V
    "00 00 00 18 00 66 00 00",  # W
    "00 00 66 30 18 0C 06 00",  # X
    "00 00 36 36 36 36 36 00",  # Y
    "00 00 18 3C 66 66 66 00",  # Z
)

# Extra glyphs that are not mapped to any codepoint by the lookup.
MISC_GLYPHS: tuple[bytes, ...] = _rows(
    "1F 33 33 5F 63 F3 63 E3",  # peseta sign
    "70 D8 18 3C 18 18 1B 0E",  # florin
    "3C 36 36 7C 00 7E 00 00",  # underlined superscript a
    "1C 36 36 1C 00 3E 00 00",  # underlined superscript 0
    "00 00 00 3F 03 03 00 00",  # reversed not sign
    "30 18 0C 18 30 00 7E 00",  # less than or equal
    "0C 18 30 18 0C 00 7E 00",  # greater than or equal
    "0C 18 00 00 00 00 00 00",  # grave
    "0E 00 66 66 3C 18 18 00",  # Y grave
    "00 07 00 33 33 3E 30 1F",  # y grave
)

_RANGES: tuple[tuple[int, tuple[bytes, ...]], ...] = (
    (0x0390, _GREEK),
    (0x2580, _BLOCK),
    (0x3040, _HIRAGANA),
    (0xE541, _SGA),
)


def extra_glyph(codepoint: int) -> bytes:
    """Return the 8-row bitmap for a Greek, block, Hiragana or SGA codepoint.

    Raises KeyError for codepoints outside those blocks.
    """
    for start, table in _RANGES:
        if start <= codepoint < start + len(table):
            return table[codepoint - start]
    raise KeyError(codepoint)