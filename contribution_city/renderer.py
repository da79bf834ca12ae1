#
# PROJECT: contribution-city
# MODULE: contribution_city/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from . import color as palette
from .projection import Projector
from .rasterizer import draw_block, draw_voxel_text
from .scene import (Scene, SceneObject, TerrainStrip, Road, Building, Streetlamp, Vehicle,
                    ROOF_CAP_HEIGHT, ANTENNA_HEIGHT, BEACON_SIZE)

SPECKLE_SIZE = 1.5
SPECKLE_HEIGHT = 1.2
DASH_LENGTH = 8.0
DASH_WIDTH = 1.5

WINDOW_COLUMNS = 3
WINDOW_WIDTH = 6.0
WINDOW_HEIGHT = 7.0
WINDOW_DEPTH = 0.8
WINDOW_MARGIN = 5.0
# gz of the bottom edge of the first window row
WINDOW_BASE = 5.0

PARK_PLATE = 2.0
LAMP_POLE = 2.0
LAMP_HEAD = 6.0
LAMP_HEAD_HEIGHT = 4.0


def window_offsets(span: float):
    """Offsets of the window columns along a facade of length ``span``."""
    inner = span - 2 * WINDOW_MARGIN - WINDOW_WIDTH
    if WINDOW_COLUMNS < 2 or inner <= 0:
        return [max(0.0, (span - WINDOW_WIDTH) / 2)]
    step = inner / (WINDOW_COLUMNS - 1)
    return [WINDOW_MARGIN + c * step for c in range(WINDOW_COLUMNS)]


def window_rows(height: float, spacing: float) -> int:
    """Number of window rows a building of ``height`` gets."""
    if spacing <= 0:
        return 0
    return int(height // spacing)


def _draw_labels(labels, projector):
    polys = []
    for label in labels:
        a = label.anchor
        polys.extend(draw_voxel_text(projector, label.text, a.gx, a.gy, a.gz,
                                     label.color, label.scale))
    return polys


def _draw_terrain(obj: TerrainStrip, projector: Projector):
    polys = draw_block(projector, obj.gx, obj.gy, -obj.thickness,
                       obj.width, obj.length, obj.thickness, obj.colors)
    for sx, sy in obj.speckles:
        polys.extend(draw_block(projector, sx, sy, 0.0,
                                SPECKLE_SIZE, SPECKLE_SIZE, SPECKLE_HEIGHT,
                                palette.GRASS_SPECKLE))
    return polys


def _draw_road(obj: Road, projector: Projector):
    polys = draw_block(projector, obj.gx, obj.gy, -obj.thickness,
                       obj.width, obj.length, obj.thickness, palette.ROAD)
    center = obj.gy + (obj.length - DASH_WIDTH) / 2
    for dx in obj.dashes:
        polys.extend(draw_block(projector, obj.gx + dx, center, 0.0,
                                DASH_LENGTH, DASH_WIDTH, 0.0, palette.ROAD_MARKING))
    return polys


def _draw_building(obj: Building, projector: Projector):
    colors = palette.BUILDING_PALETTES[obj.level]
    polys = draw_block(projector, obj.gx, obj.gy, 0.0,
                       obj.width, obj.length, obj.height, colors)

    front_y = obj.gy + obj.length
    right_x = obj.gx + obj.width
    for row, lit in enumerate(obj.lit_rows):
        wz = WINDOW_BASE + row * obj.row_spacing
        if lit:
            front, side, css = palette.WINDOW_LIT_FRONT, palette.WINDOW_LIT, 'window'
        else:
            front = side = palette.WINDOW_DARK
            css = None
        for off in window_offsets(obj.width):
            polys.extend(draw_block(projector, obj.gx + off, front_y, wz,
                                    WINDOW_WIDTH, WINDOW_DEPTH, WINDOW_HEIGHT,
                                    front, css))
        for off in window_offsets(obj.length):
            polys.extend(draw_block(projector, right_x, obj.gy + off, wz,
                                    WINDOW_DEPTH, WINDOW_WIDTH, WINDOW_HEIGHT,
                                    side, css))

    inset = ROOF_CAP_HEIGHT
    polys.extend(draw_block(projector, obj.gx + inset, obj.gy + inset, obj.height,
                            obj.width - 2 * inset, obj.length - 2 * inset, ROOF_CAP_HEIGHT,
                            palette.ROOF_COLORS))

    if obj.has_beacon:
        cx = obj.gx + obj.width / 2
        cy = obj.gy + obj.length / 2
        base = obj.height + ROOF_CAP_HEIGHT
        polys.extend(draw_block(projector, cx - 1, cy - 1, base,
                                2.0, 2.0, ANTENNA_HEIGHT, palette.ANTENNA))
        half = BEACON_SIZE / 2
        polys.extend(draw_block(projector, cx - half, cy - half, base + ANTENNA_HEIGHT,
                                BEACON_SIZE, BEACON_SIZE, BEACON_SIZE,
                                palette.BEACON, 'beacon'))

    polys.extend(_draw_labels(obj.labels, projector))
    return polys


def _draw_streetlamp(obj: Streetlamp, projector: Projector):
    # Park plate, then a tree at the back corner, then the lamp in front of it
    polys = draw_block(projector, obj.gx, obj.gy, 0.0,
                       obj.width, obj.length, PARK_PLATE, palette.PARK_GRASS)

    tx, ty = obj.gx + 4, obj.gy + 4
    polys.extend(draw_block(projector, tx + 3, ty + 3, PARK_PLATE, 3.0, 3.0, 8.0,
                            palette.TREE_TRUNK))
    polys.extend(draw_block(projector, tx, ty, PARK_PLATE + 8, 9.0, 9.0, 10.0,
                            palette.TREE_LEAVES))
    polys.extend(draw_block(projector, tx + 2, ty + 2, PARK_PLATE + 18, 5.0, 5.0, 5.0,
                            palette.TREE_LEAVES))

    px = obj.gx + obj.width / 2 + 4
    py = obj.gy + obj.length / 2 + 4
    head_z = obj.height - LAMP_HEAD_HEIGHT
    polys.extend(draw_block(projector, px, py, PARK_PLATE,
                            LAMP_POLE, LAMP_POLE, head_z - PARK_PLATE, palette.LAMP_POLE))
    off = (LAMP_HEAD - LAMP_POLE) / 2
    polys.extend(draw_block(projector, px - off, py - off, head_z,
                            LAMP_HEAD, LAMP_HEAD, LAMP_HEAD_HEIGHT, palette.LAMP_HEAD, 'lamp'))

    polys.extend(_draw_labels(obj.labels, projector))
    return polys


def _draw_vehicle(obj: Vehicle, projector: Projector):
    polys = draw_block(projector, obj.gx, obj.gy, 1.5, 26.0, 12.0, 7.0, palette.VEHICLE_BODY)
    polys.extend(draw_block(projector, obj.gx + 5, obj.gy + 1, 8.5, 13.0, 10.0, 5.0,
                            palette.VEHICLE_CABIN))
    for hy in (obj.gy + 1.5, obj.gy + 8.0):
        polys.extend(draw_block(projector, obj.gx + 26, hy, 4.0, 0.6, 2.5, 2.0,
                                palette.HEADLIGHT, 'headlight'))
    return polys


_DRAW = {
    TerrainStrip: _draw_terrain,
    Road: _draw_road,
    Building: _draw_building,
    Streetlamp: _draw_streetlamp,
    Vehicle: _draw_vehicle,
}


def draw_object(obj: SceneObject, projector: Projector):
    """Rasterize one scene object into polygons."""
    try:
        draw = _DRAW[type(obj)]
    except KeyError:
        raise TypeError(f"no drawer for {type(obj).__name__}") from None
    return draw(obj, projector)


class Renderer:
    """
    Painter's-algorithm compositor.

    render(scene) sorts the scene's objects by depth and concatenates their
    polygons back to front.  No hidden-surface removal happens beyond the
    draw order.
    """

    def __init__(self, projector: Projector):
        self.projector = projector

    def render(self, scene: Scene):
        polys = []
        for obj in scene.sorted_objects():
            polys.extend(draw_object(obj, self.projector))
        return polys
