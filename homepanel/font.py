"""Bitmap fonts for the SSD1306 display.

Each glyph is eight bytes, one per column, least significant bit at the top.
"""

GLYPH_SIZE = 8

_ASCII_ROWS = (
    "0000000000000000",  # space
    "0000005f5f000000",  # !
    "0007070007070000",  # "
    "147f7f147f7f1400",  # #
    "242e2a6b6b3a1200",  # $
    "466630180c666200",  # %
    "307a4f5d377a4800",  # &
    "0004070300000000",  # '
    "00001c3e63410000",  # (
    "000041633e1c0000",  # )
    "082a3e1c1c3e2a08",  # *
    "0008083e3e080800",  # +
    "000080e060000000",  # ,
    "0008080808080800",  # -
    "0000006060000000",  # .
    "6030180c06030100",  # /
    "3e7f594d477f3e00",  # 0
    "0040427f7f404000",  # 1
    "727b4949494f4600",  # 2
    "41414949497f3600",  # 3
    "1e1e10107f7f1000",  # 4
    "27674545457d3900",  # 5
    "3e7f494949793000",  # 6
    "01016171190f0700",  # 7
    "367f4949497f3600",  # 8
    "064f4949497f3e00",  # 9
    "0000006666000000",  # :
    "000080e666000000",  # ;
    "00081c3663410000",  # <
    "0014141414141400",  # =
    "00004163361c0800",  # >
    "000203595d070200",  # ?
    "3e7f415d5d5f5e00",  # @
    "7c7e1311137e7c00",  # A
    "7f7f4949497f3600",  # B
    "3e7f414141632200",  # C
    "7f7f4141633e1c00",  # D
    "7f7f494949414100",  # E
    "7f7f090909010100",  # F
    "3e7f414151733200",  # G
    "7f7f0808087f7f00",  # H
    "0041417f7f414100",  # I
    "20604040407f3f00",  # J
    "7f7f081c36634100",  # K
    "7f7f404040404000",  # L
    "7f7f0e1c0e7f7f00",  # M
    "7f7f060c187f7f00",  # N
    "3e7f4141417f3e00",  # O
    "7f7f0909090f0600",  # P
    "3e7f417161ffbe00",  # Q
    "7f7f0919396f4600",  # R
    "266f4949497b3200",  # S
    "0101017f7f010101",  # T
    "7f7f4040407f7f00",  # U
    "1f3f6060603f1f00",  # V
    "3f7f6030607f3f00",  # W
    "63771c081c776300",  # X
    "474f6838180f0700",  # Y
    "416171594d474300",  # Z
    "00007f7f41410000",  # [
    "0103060c18306000",  # backslash
    "000041417f7f0000",  # ]
    "080c0603060c0800",  # ^
    "8080808080808080",  # _
    "0000000307040000",  # `
    "20745454547c7800",  # a
    "7f7f484848783000",  # b
    "387c4444446c2800",  # c
    "30784848487f7f00",  # d
    "387c5454545c1800",  # e
    "00487e7f49030200",  # f
    "98bca4a4a4fc7c00",  # g
    "7f7f0404047c7800",  # h
    "0000447d7d400000",  # i
    "40c0808080fd7d00",  # j
    "7f7f10183c644000",  # k
    "0000417f7f400000",  # l
    "7c7c18781c7c7800",  # m
    "7c7c0404047c7800",  # n
    "387c4444447c3800",  # o
    "fcfc2424243c1800",  # p
    "183c242424fcfc00",  # q
    "7c7c0404040c0800",  # r
    "485c545454742400",  # s
    "0004043f7f444400",  # t
    "3c7c4040407c7c00",  # u
    "1c3c6060603c1c00",  # v
    "3c7c6030607c3c00",  # w
    "446c3810386c4400",  # x
    "9cbca0a0a0fc7c00",  # y
    "446474545c4c4400",  # z
    "0008083e77414100",  # {
    "0000007777000000",  # |
    "004141773e080800",  # }
    "0203010302030100",  # ~
)

_COMPACT_ROWS = (
    "0000000000000000",  # blank
    "3e41414941413e00",  # 0
    "0000427f40000000",  # 1
    "3049494949460000",  # 2
    "4949494949493600",  # 3
    "3f20207820200000",  # 4
    "4f49494949300000",  # 5
    "3f48484848483000",  # 6
    "01010161310d0300",  # 7
    "3649494949493600",  # 8
    "0609090909097f00",  # 9
    "7814121112147800",  # A
    "7f49494949497f00",  # B
    "7e41414141414100",  # C
    "7f41414141417e00",  # D
    "7f49494949494900",  # E
    "7f09090909010100",  # F
    "7f41414151517300",  # G
    "7f08080808087f00",  # H
    "0000007f00000000",  # I
    "2141413f01010100",  # J
    "007f080814224100",  # K
    "7f40404040404000",  # L
    "7f02040804027f00",  # M
    "7f02040810207f00",  # N
    "3e41414141413e00",  # O
    "7f11111111110e00",  # P
    "3e41414951617e00",  # Q
    "7f11111131510e00",  # R
    "4649494949300000",  # S
    "0101017f01010100",  # T
    "3f40404040403f00",  # U
    "0f10204020100f00",  # V
    "7f20100810207f00",  # W
    "0041221414224100",  # X
    "0102047804020100",  # Y
    "4161594543410000",  # Z
)

ASCII_FONT = bytes.fromhex("".join(_ASCII_ROWS))

# The compact font shares its lower-case letters and "{|}~" with the ASCII font.
COMPACT_FONT = bytes.fromhex("".join(_COMPACT_ROWS)) + ASCII_FONT[(ord("a") - ord(" ")) * GLYPH_SIZE:]


def _check_char(char):
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _slice(table, slot):
    start = slot * GLYPH_SIZE
    return table[start:start + GLYPH_SIZE]


def ascii_glyph(char):
    """Return the glyph for a printable ASCII character; others map to blank."""
    _check_char(char)
    slot = ord(char) - ord(" ") if " " <= char <= "~" else 0
    return _slice(ASCII_FONT, slot)


def compact_glyph(char):
    """Return the compact glyph for a digit or letter; others map to blank."""
    _check_char(char)
    if "A" <= char <= "Z":
        slot = ord(char) - ord("A") + 11
    elif "0" <= char <= "9":
        slot = ord(char) - ord("0") + 1
    elif "a" <= char <= "z":
        slot = ord(char) - ord("a") + 37
    else:
        slot = 0
    return _slice(COMPACT_FONT, slot)