#
# PROJECT: contribution-city
# MODULE: contribution_city/composer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import random
from dataclasses import replace

from . import color as palette
from .config import RenderConfig
from .math_utils import GridPoint
from .rasterizer import measure_voxel_text, voxel_text_height
from .records import DayRecord, validate_week
from .renderer import window_rows, DASH_LENGTH, SPECKLE_SIZE
from .scene import Scene, Label, TerrainStrip, Road, Building, Streetlamp, Vehicle

# Out-of-band layer keys.  Per-day structures sort on gx + gy, which is
# never below zero, so everything here except the vehicle lands behind them.
UPPER_TERRAIN_DEPTH = -3000.0
ROAD_DEPTH = -2000.0
LOWER_TERRAIN_DEPTH = -1000.0
VEHICLE_DEPTH = 10000.0

GROUND_MARGIN = 40.0
BACKLOT = 60.0
SIDEWALK = 14.0
ROAD_WIDTH = 30.0
LOWER_TERRAIN_WIDTH = 30.0
SLAB = 6.0
DASH_STEP = 20.0


def level_for(count: int) -> int:
    """Contribution level 0..4; 0 means no contributions."""
    if count == 0:
        return 0
    if count <= 3:
        return 1
    if count <= 6:
        return 2
    if count <= 9:
        return 3
    return 4


class SceneComposer:
    """
    Lays out one week of day records as a city block.

    Ground strips and the road get fixed layer depths.  Day i sits on plot
    gx = stride * i on a shared row, and sorts on gx + gy.  All randomness
    (window litness, grass tufts) comes from ``rng`` so tests can pin it.
    """

    def __init__(self, config: RenderConfig = None, rng=None):
        self.config = config if config is not None else RenderConfig()
        self.rng = rng if rng is not None else random.Random()

    # ── Layout policy ───────────────────────────────────────────────────
    def building_height(self, count: int) -> float:
        cfg = self.config
        height = cfg.building_base_height + count * cfg.building_unit_height
        return min(height, cfg.building_max_height)

    def plot_origin(self, index: int) -> GridPoint:
        """Ground-level corner of the i-th day's plot."""
        return GridPoint(self.config.structure_stride * index, self.config.structure_row)

    def ground_extent(self):
        """(left, right) gx bounds of the terrain strips."""
        cfg = self.config
        right = cfg.structure_stride * (cfg.days - 1) + cfg.footprint + GROUND_MARGIN
        return -GROUND_MARGIN, right

    def road_row(self) -> float:
        return self.config.structure_row + self.config.footprint + SIDEWALK

    # ── Scene construction ──────────────────────────────────────────────
    def compose(self, records) -> Scene:
        """Build the scene for exactly ``config.days`` records, oldest first."""
        records = validate_week(records, self.config.days)

        scene = Scene()
        for strip in self.ground_layers():
            scene.add(strip)
        for i, record in enumerate(records):
            scene.add(self.structure_for(i, record))
        scene.add(self.vehicle())
        return scene

    def ground_layers(self):
        cfg = self.config
        left, right = self.ground_extent()
        width = right - left
        road_y = self.road_row()
        back_y = cfg.structure_row - BACKLOT
        lower_y = road_y + ROAD_WIDTH

        upper_len = road_y - back_y
        n_upper = cfg.grass_speckles * 2 // 3
        upper = TerrainStrip(
            depth=UPPER_TERRAIN_DEPTH,
            gx=left, gy=back_y, width=width, length=upper_len, thickness=SLAB,
            colors=palette.TERRAIN,
            speckles=self._speckles(left, back_y, width, upper_len, n_upper)
        )
        road = Road(
            depth=ROAD_DEPTH,
            gx=left, gy=road_y, width=width, length=ROAD_WIDTH, thickness=SLAB,
            dashes=tuple(float(d) for d in
                         _frange(6.0, width - DASH_LENGTH, DASH_STEP))
        )
        lower = TerrainStrip(
            depth=LOWER_TERRAIN_DEPTH,
            gx=left, gy=lower_y, width=width, length=LOWER_TERRAIN_WIDTH, thickness=SLAB,
            colors=palette.TERRAIN,
            speckles=self._speckles(left, lower_y, width, LOWER_TERRAIN_WIDTH,
                                    cfg.grass_speckles - n_upper)
        )
        return [upper, road, lower]

    def _speckles(self, gx, gy, width, length, count):
        rng = self.rng
        return tuple(
            (rng.uniform(gx, gx + width - SPECKLE_SIZE),
             rng.uniform(gy, gy + length - SPECKLE_SIZE))
            for _ in range(count)
        )

    def structure_for(self, index: int, record: DayRecord):
        """Building for a day with contributions, streetlamp park otherwise."""
        cfg = self.config
        origin = self.plot_origin(index)
        gx, gy = origin.gx, origin.gy
        depth = gx + gy
        count = record.contribution_count

        if count == 0:
            lamp = Streetlamp(depth=depth, gx=gx, gy=gy,
                              width=cfg.footprint, length=cfg.footprint,
                              height=cfg.streetlamp_height)
            return replace(lamp, labels=self.labels_for(record, origin, lamp.peak))

        height = self.building_height(count)
        rows = window_rows(height, cfg.window_row_spacing)
        lit = tuple(self.rng.random() < cfg.window_lit_probability for _ in range(rows))
        building = Building(depth=depth, gx=gx, gy=gy,
                            width=cfg.footprint, length=cfg.footprint,
                            height=height, level=level_for(count),
                            lit_rows=lit, row_spacing=cfg.window_row_spacing)
        return replace(building, labels=self.labels_for(record, origin, building.peak))

    def labels_for(self, record: DayRecord, origin: GridPoint, peak):
        """
        Count label just above the structure's peak, weekday label above that.
        Both are centred over the plot.
        """
        cfg = self.config
        scale = cfg.label_scale
        center_x = origin.gx + cfg.footprint / 2
        label_y = origin.gy + (cfg.footprint - scale) / 2

        count_text = str(record.contribution_count)
        count_gz = peak + cfg.label_gap
        weekday_gz = count_gz + voxel_text_height(scale) + cfg.label_gap

        def centred(text, gz, color):
            anchor = GridPoint(center_x - measure_voxel_text(text, scale) / 2, label_y, gz)
            return Label(text=text, anchor=anchor, color=color, scale=scale)

        return (
            centred(record.weekday_name, weekday_gz, palette.WEEKDAY_TEXT),
            centred(count_text, count_gz, palette.COUNT_TEXT),
        )

    def vehicle(self) -> Vehicle:
        left, right = self.ground_extent()
        return Vehicle(depth=VEHICLE_DEPTH,
                       gx=left + (right - left) * 0.6,
                       gy=self.road_row() + 2.0)


def _frange(start, stop, step):
    v = start
    while v <= stop:
        yield v
        v += step
