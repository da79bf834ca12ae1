#
# PROJECT: contribution-city
# MODULE: contribution_city/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import GridPoint, ScreenPoint


class Projector:
    """
    Fixed isometric projection from city-grid space to document pixels.

        x = origin_x + (gx - gy) * tile_width
        y = origin_y + (gx + gy) * tile_height - gz

    Height translates straight up with no foreshortening, so two points with
    the same gx + gy only differ vertically on screen.  There is no camera
    state: everything the projection needs is held on the instance.
    """
    __slots__ = ('tile_width', 'tile_height', 'origin_x', 'origin_y')

    def __init__(self, tile_width: float = 0.866, tile_height: float = 0.5,
                 origin_x: float = 0.0, origin_y: float = 0.0):
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.origin_x = origin_x
        self.origin_y = origin_y

    def project(self, gx: float, gy: float, gz: float = 0.0) -> ScreenPoint:
        """Map a grid coordinate to a screen point."""
        x = self.origin_x + (gx - gy) * self.tile_width
        y = self.origin_y + (gx + gy) * self.tile_height - gz
        return ScreenPoint(x, y)

    def project_point(self, point: GridPoint) -> ScreenPoint:
        return self.project(point.gx, point.gy, point.gz)
