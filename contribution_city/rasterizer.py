#
# PROJECT: contribution-city
# MODULE: contribution_city/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .color import NONE, FaceColors, TEXT_SHADOW
from .errors import RenderError
from .glyphs import GLYPH_ROWS, get_glyph, glyph_width
from .math_utils import GridPoint
from .projection import Projector

# Height of one glyph dot relative to its width
TEXT_ROW_HEIGHT = 1.0
# Letter spacing in glyph columns
LETTER_SPACING = 1


class Polygon:
    """A filled, already projected polygon."""
    __slots__ = ('points', 'fill', 'css_class')

    def __init__(self, points, fill: str, css_class: str = None):
        self.points = tuple(points)
        self.fill = fill
        self.css_class = css_class

    def __repr__(self):
        return f"Polygon({len(self.points)} pts, fill={self.fill!r})"

    def to_svg(self) -> str:
        pts = " ".join(f"{p.x:.2f},{p.y:.2f}" for p in self.points)
        cls = f' class="{self.css_class}"' if self.css_class else ''
        return f'<polygon{cls} points="{pts}" fill="{self.fill}"/>'


def draw_block(projector: Projector, gx, gy, gz, w, d, h,
               colors: FaceColors, css_class: str = None):
    """
    Rasterize an axis-aligned box into its visible faces.

    The box spans [gx, gx+w] x [gy, gy+d] x [gz, gz+h].  Under the fixed
    view only the top, the +gx side (right) and the +gy side (left/front)
    are visible, so the bottom-back corner (gx, gy, gz) is never projected.
    Faces are returned top, right, left; a face whose color is NONE is
    skipped.  Zero extents give zero-area polygons.
    """
    if w < 0 or d < 0 or h < 0:
        raise RenderError(f"negative block extent: w={w} d={d} h={h}")

    x0, x1 = gx, gx + w
    y0, y1 = gy, gy + d
    z0, z1 = gz, gz + h
    corners = (
        GridPoint(x0, y0, z1), GridPoint(x1, y0, z1),
        GridPoint(x1, y1, z1), GridPoint(x0, y1, z1),
        GridPoint(x1, y0, z0), GridPoint(x1, y1, z0), GridPoint(x0, y1, z0),
    )
    (t_back, t_right, t_front, t_left,
     b_right, b_front, b_left) = (projector.project_point(c) for c in corners)

    polys = []
    if colors.top != NONE:
        polys.append(Polygon((t_back, t_right, t_front, t_left), colors.top, css_class))
    if colors.right != NONE:
        polys.append(Polygon((t_right, b_right, b_front, t_front), colors.right, css_class))
    if colors.left != NONE:
        polys.append(Polygon((t_left, t_front, b_front, b_left), colors.left, css_class))
    return polys


def measure_voxel_text(text: str, scale: float) -> float:
    """Grid-space width of ``text`` at ``scale``, without trailing spacing."""
    cols = 0
    for ch in text:
        cols += glyph_width(get_glyph(ch)) + LETTER_SPACING
    if cols:
        cols -= LETTER_SPACING
    return cols * scale


def voxel_text_height(scale: float, rows: int = GLYPH_ROWS) -> float:
    """gz span covered by one line of voxel text above its anchor."""
    return (rows + 1) * scale * TEXT_ROW_HEIGHT


def draw_voxel_text(projector: Projector, text: str, start_gx, start_gy, start_gz,
                    color: str, scale: float = 1.0):
    """
    Render ``text`` as a row of small blocks running along +gx.

    Glyph row 0 (the top of the letter) lands at the highest gz so the
    label reads upright after projection.  Each dot is a scale-sized cube
    with its top and front in ``color`` and its right side in TEXT_SHADOW.
    """
    colors = FaceColors(color, TEXT_SHADOW, color)
    dot_h = scale * TEXT_ROW_HEIGHT
    polys = []
    cursor = 0
    for ch in text:
        glyph = get_glyph(ch)
        rows = len(glyph)
        for r, row in enumerate(glyph):
            gz = start_gz + (rows - r) * dot_h
            for c, bit in enumerate(row):
                if not bit:
                    continue
                gx = start_gx + (cursor + c) * scale
                polys.extend(draw_block(projector, gx, start_gy, gz,
                                        scale, scale, dot_h, colors))
        cursor += glyph_width(glyph) + LETTER_SPACING
    return polys
