#
# PROJECT: contribution-city
# MODULE: contribution_city/glyphs.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#
# 5x7 dot-matrix font used by the voxel text rasterizer.  Row 0 is the top
# of the character.  Glyphs may be narrower than five columns; the text
# cursor advances by each glyph's own width.
#

GLYPH_ROWS = 7
BLANK_COLUMNS = 5

_FONT = {
    '0': ('01110', '10001', '10011', '10101', '11001', '10001', '01110'),
    '1': ('00100', '01100', '00100', '00100', '00100', '00100', '01110'),
    '2': ('01110', '10001', '00001', '00010', '00100', '01000', '11111'),
    '3': ('11111', '00010', '00100', '00010', '00001', '10001', '01110'),
    '4': ('00010', '00110', '01010', '10010', '11111', '00010', '00010'),
    '5': ('11111', '10000', '11110', '00001', '00001', '10001', '01110'),
    '6': ('00110', '01000', '10000', '11110', '10001', '10001', '01110'),
    '7': ('11111', '00001', '00010', '00100', '01000', '01000', '01000'),
    '8': ('01110', '10001', '10001', '01110', '10001', '10001', '01110'),
    '9': ('01110', '10001', '10001', '01111', '00001', '00010', '01100'),
    'A': ('01110', '10001', '10001', '11111', '10001', '10001', '10001'),
    'B': ('11110', '10001', '10001', '11110', '10001', '10001', '11110'),
    'C': ('01110', '10001', '10000', '10000', '10000', '10001', '01110'),
    'D': ('11100', '10010', '10001', '10001', '10001', '10010', '11100'),
    'E': ('11111', '10000', '10000', '11110', '10000', '10000', '11111'),
    'F': ('11111', '10000', '10000', '11110', '10000', '10000', '10000'),
    'G': ('01110', '10001', '10000', '10111', '10001', '10001', '01111'),
    'H': ('10001', '10001', '10001', '11111', '10001', '10001', '10001'),
    'I': ('01110', '00100', '00100', '00100', '00100', '00100', '01110'),
    'J': ('00111', '00010', '00010', '00010', '00010', '10010', '01100'),
    'K': ('10001', '10010', '10100', '11000', '10100', '10010', '10001'),
    'L': ('10000', '10000', '10000', '10000', '10000', '10000', '11111'),
    'M': ('10001', '11011', '10101', '10101', '10001', '10001', '10001'),
    'N': ('10001', '10001', '11001', '10101', '10011', '10001', '10001'),
    'O': ('01110', '10001', '10001', '10001', '10001', '10001', '01110'),
    'P': ('11110', '10001', '10001', '11110', '10000', '10000', '10000'),
    'Q': ('01110', '10001', '10001', '10001', '10101', '10010', '01101'),
    'R': ('11110', '10001', '10001', '11110', '10100', '10010', '10001'),
    'S': ('01111', '10000', '10000', '01110', '00001', '00001', '11110'),
    'T': ('11111', '00100', '00100', '00100', '00100', '00100', '00100'),
    'U': ('10001', '10001', '10001', '10001', '10001', '10001', '01110'),
    'V': ('10001', '10001', '10001', '10001', '10001', '01010', '00100'),
    'W': ('10001', '10001', '10001', '10101', '10101', '10101', '01010'),
    'X': ('10001', '10001', '01010', '00100', '01010', '10001', '10001'),
    'Y': ('10001', '10001', '01010', '00100', '00100', '00100', '00100'),
    'Z': ('11111', '00001', '00010', '00100', '01000', '10000', '11111'),
    '-': ('00000', '00000', '00000', '11111', '00000', '00000', '00000'),
    '+': ('00000', '00100', '00100', '11111', '00100', '00100', '00000'),
    '/': ('00001', '00001', '00010', '00100', '01000', '10000', '10000'),
    '!': ('1', '1', '1', '1', '1', '0', '1'),
    '.': ('00', '00', '00', '00', '00', '11', '11'),
    ':': ('00', '11', '11', '00', '11', '11', '00'),
    "'": ('1', '1', '0', '0', '0', '0', '0'),
    ' ': ('000', '000', '000', '000', '000', '000', '000'),
}


def _to_matrix(rows):
    return tuple(tuple(int(bit) for bit in row) for row in rows)


# Built once at import; never mutated afterwards.
GLYPHS = {ch: _to_matrix(rows) for ch, rows in _FONT.items()}

BLANK = _to_matrix(('0' * BLANK_COLUMNS,) * GLYPH_ROWS)


def get_glyph(ch: str):
    """Return the dot matrix for ``ch``; unknown characters map to BLANK."""
    return GLYPHS.get(ch.upper(), BLANK)


def glyph_width(glyph) -> int:
    return len(glyph[0]) if glyph else 0


def lit_cells(glyph) -> int:
    """Number of "on" cells in a glyph."""
    return sum(sum(row) for row in glyph)
