#
# PROJECT: contribution-city
# MODULE: contribution_city/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

# Face fill that is never emitted.  Matches the SVG keyword so a FaceColors
# value can be written straight into markup when it is not skipped.
NONE = 'none'


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def to_hex(rgb):
    r, g, b = (max(0, min(255, int(round(c)))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def shade(hex_color, factor):
    """Darken (factor < 1) or brighten (factor > 1) a hex color."""
    rgb = parse_hex_color(hex_color)
    if rgb is None:
        raise ValueError(f"not a hex color: {hex_color!r}")
    return to_hex(c * factor for c in rgb)


class FaceColors:
    """Fill colors for the three visible faces of a block."""
    __slots__ = ('top', 'right', 'left')

    def __init__(self, top: str, right: str, left: str):
        self.top = top
        self.right = right
        self.left = left

    def __repr__(self):
        return f"FaceColors(top={self.top!r}, right={self.right!r}, left={self.left!r})"

    def __eq__(self, other):
        if isinstance(other, FaceColors):
            return (self.top, self.right, self.left) == (other.top, other.right, other.left)
        return NotImplemented

    @classmethod
    def uniform(cls, color: str) -> 'FaceColors':
        return cls(color, color, color)

    @classmethod
    def top_only(cls, color: str) -> 'FaceColors':
        """Speckle colors: only the top face is drawn."""
        return cls(color, NONE, NONE)

    @classmethod
    def shaded(cls, base: str, right: float = 0.8, left: float = 0.62) -> 'FaceColors':
        """Derive side faces from one base color by darkening."""
        return cls(base, shade(base, right), shade(base, left))


# --- Palettes ---

# Facade colors per contribution level (1..4)
BUILDING_PALETTES = {
    1: FaceColors(top='#7a6a5a', right='#6a5a4a', left='#4a3a2a'),  # house
    2: FaceColors(top='#6a8aaa', right='#5a7a9a', left='#3a5a7a'),  # office
    3: FaceColors(top='#8a7aaa', right='#7a6a9a', left='#5a4a7a'),  # high-rise
    4: FaceColors(top='#aa8a6a', right='#9a7a5a', left='#7a5a3a'),  # tower
}
ROOF_COLORS = FaceColors.shaded('#3d4556')
WINDOW_GLOW_TOP = '#ffee88'
WINDOW_GLOW_BOTTOM = '#ffaa33'
# Fill reference to the gradient the document declares in <defs>
WINDOW_GLOW = 'url(#windowGlow)'
WINDOW_LIT = FaceColors(top='#ffee88', right='#ffcc55', left='#ffaa33')
# Front facade windows: the large +gy face glows top to bottom
WINDOW_LIT_FRONT = FaceColors(top='#ffee88', right='#ffcc55', left=WINDOW_GLOW)
WINDOW_DARK = FaceColors(top='#2a3040', right='#222838', left='#1c2230')
BEACON = FaceColors(top='#ff3333', right='#dd2222', left='#bb1111')
ANTENNA = FaceColors.shaded('#9aa0aa')

PARK_GRASS = FaceColors(top='#2a4a2a', right='#1f451f', left='#153015')
TREE_LEAVES = FaceColors(top='#3a6a3a', right='#2a5a2a', left='#1f4a1f')
TREE_TRUNK = FaceColors.shaded('#5a3a2a')
LAMP_POLE = FaceColors.shaded('#6e7681')
LAMP_HEAD = FaceColors(top='#fff4c2', right='#ffe08a', left='#f5c451')

TERRAIN = FaceColors(top='#1f3325', right='#17261c', left='#111b14')
GRASS_SPECKLE = FaceColors.top_only('#2e4d36')
ROAD = FaceColors(top='#2b2d3a', right='#22242f', left='#1a1b24')
ROAD_MARKING = FaceColors.top_only('#c9b458')

VEHICLE_BODY = FaceColors.shaded('#d9534f')
VEHICLE_CABIN = FaceColors(top='#9fc3e0', right='#7fa3c0', left='#5f83a0')
HEADLIGHT = FaceColors.uniform('#fff3b0')

# Label text colors; the right face of every voxel uses TEXT_SHADOW
WEEKDAY_TEXT = '#8b949e'
COUNT_TEXT = '#58a6ff'
TEXT_SHADOW = '#0d1117'
