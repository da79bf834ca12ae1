# tests/test_projection.py

import pytest

from contribution_city.color import FaceColors
from contribution_city.config import RenderConfig
from contribution_city.math_utils import GridPoint, ScreenPoint
from contribution_city.projection import Projector
from contribution_city.rasterizer import draw_block


def test_project_formula():
    p = Projector(tile_width=10, tile_height=5, origin_x=100, origin_y=50)
    assert p.project(2, 1, 3) == ScreenPoint(110, 62)


def test_height_only_moves_point_up():
    p = RenderConfig().projector
    ys = [p.project(12.5, -3.0, gz).y for gz in (-10, 0, 0.5, 7, 120)]
    assert all(a > b for a, b in zip(ys, ys[1:]))
    xs = {p.project(12.5, -3.0, gz).x for gz in (-10, 0, 7)}
    assert len(xs) == 1


def test_same_diagonal_differs_only_vertically(projector):
    a = projector.project(4, 2, 0)
    b = projector.project(2, 4, 0)
    assert a.y == b.y
    assert a.x == pytest.approx(b.x + 4)


def test_project_point_matches_project(projector):
    pt = GridPoint(3, 4, 5)
    assert projector.project_point(pt) == projector.project(3, 4, 5)


def test_config_rebuilds_projector():
    cfg = RenderConfig()
    cfg.origin_x = 0.0
    cfg.origin_y = 0.0
    cfg.init_projector()
    assert cfg.projector.project(0, 0, 0) == ScreenPoint(0, 0)


def test_grid_point_is_a_value():
    a = GridPoint(1, 2, 3)
    assert a == GridPoint(1.0, 2.0, 3.0)
    assert a != GridPoint(1, 2)
    assert list(a) == [1.0, 2.0, 3.0]
    assert len({a, GridPoint(1, 2, 3)}) == 1


def test_block_corners_go_through_project_point(projector):
    top = draw_block(projector, 2, 3, 4, 5, 6, 7, FaceColors.uniform("#123456"))[0]
    assert top.points[0] == projector.project_point(GridPoint(2, 3, 11))
    assert top.points[2] == projector.project_point(GridPoint(7, 9, 11))
