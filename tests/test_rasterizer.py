# tests/test_rasterizer.py

import pytest

from contribution_city.color import NONE, FaceColors, TEXT_SHADOW
from contribution_city.errors import RenderError
from contribution_city.glyphs import GLYPHS, lit_cells
from contribution_city.rasterizer import (draw_block, draw_voxel_text, measure_voxel_text,
                                          voxel_text_height)

COLORS = FaceColors('#111111', '#222222', '#333333')


def signed_area(poly):
    pts = poly.points
    total = 0.0
    for i, a in enumerate(pts):
        b = pts[(i + 1) % len(pts)]
        total += a.x * b.y - b.x * a.y
    return total / 2


def test_block_emits_three_quads(projector):
    polys = draw_block(projector, 1, 2, 3, 4, 5, 6, COLORS)
    assert len(polys) == 3
    assert all(len(p.points) == 4 for p in polys)
    assert [p.fill for p in polys] == ['#111111', '#222222', '#333333']


def test_block_top_face_corners(projector):
    top = draw_block(projector, 1, 2, 3, 4, 5, 6, COLORS)[0]
    assert top.points[0] == projector.project(1, 2, 9)
    assert top.points[2] == projector.project(5, 7, 9)


def test_block_faces_share_winding(projector):
    polys = draw_block(projector, 0, 0, 0, 1, 1, 1, COLORS)
    assert all(signed_area(p) > 0 for p in polys)


def test_none_face_is_skipped(projector):
    polys = draw_block(projector, 0, 0, 0, 1, 1, 1, FaceColors('#111111', NONE, '#333333'))
    assert len(polys) == 2
    assert NONE not in [p.fill for p in polys]


def test_top_only_speckle(projector):
    polys = draw_block(projector, 0, 0, 0, 1, 1, 1, FaceColors.top_only('#00ff00'))
    assert len(polys) == 1


def test_zero_extent_block_is_degenerate(projector):
    polys = draw_block(projector, 5, 5, 5, 0, 0, 0, COLORS)
    assert len(polys) == 3
    assert all(signed_area(p) == 0 for p in polys)


def test_negative_extent_is_render_error(projector):
    with pytest.raises(RenderError):
        draw_block(projector, 0, 0, 0, 1, -1, 1, COLORS)


def test_polygon_svg(projector):
    poly = draw_block(projector, 0, 0, 0, 1, 1, 1, COLORS, 'window')[0]
    svg = poly.to_svg()
    assert svg.startswith('<polygon class="window" points="')
    assert 'fill="#111111"' in svg


def test_voxel_zero_polygon_count(projector):
    polys = draw_voxel_text(projector, "0", 0, 0, 0, '#58a6ff', 2)
    assert len(polys) == 3 * lit_cells(GLYPHS['0'])
    assert len(polys) == 57


def test_voxel_space_is_empty(projector):
    assert draw_voxel_text(projector, " ", 0, 0, 0, '#58a6ff', 2) == []


def test_voxel_text_is_case_folded(projector):
    upper = draw_voxel_text(projector, "SUN", 0, 0, 0, '#fff', 1)
    lower = draw_voxel_text(projector, "sun", 0, 0, 0, '#fff', 1)
    assert [p.points for p in upper] == [p.points for p in lower]


def test_unknown_character_advances_cursor(projector):
    scale = 2
    shifted = draw_voxel_text(projector, "#0", 0, 0, 0, '#fff', scale)
    direct = draw_voxel_text(projector, "0", 6 * scale, 0, 0, '#fff', scale)
    assert len(shifted) == len(direct)
    assert shifted[0].points == direct[0].points


def test_first_glyph_row_is_highest(projector):
    # 'T' lights the whole top row; its first dot sits at the top of the text
    polys = draw_voxel_text(projector, "T", 0, 0, 10, '#fff', 1)
    top = polys[0]
    assert top.points[0] == projector.project(0, 0, 10 + 7 + 1)
    lowest = polys[-3]
    assert lowest.points[0] == projector.project(2, 0, 10 + 1 + 1)


def test_voxel_faces_use_text_color_and_shadow(projector):
    top, right, left = draw_voxel_text(projector, "1", 0, 0, 0, '#abcdef', 1)[:3]
    assert top.fill == '#abcdef'
    assert left.fill == '#abcdef'
    assert right.fill == TEXT_SHADOW


def test_measure_voxel_text():
    assert measure_voxel_text("SUN", 2) == 34
    assert measure_voxel_text("", 2) == 0
    assert voxel_text_height(2) == 16
