#
# PROJECT: contribution-city
# MODULE: contribution_city/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass
from typing import Tuple

from .color import FaceColors
from .math_utils import GridPoint

ROOF_CAP_HEIGHT = 3.0
ANTENNA_HEIGHT = 12.0
BEACON_SIZE = 3.0
# Buildings at this level and above carry an antenna with a beacon
TOWER_LEVEL = 4


@dataclass(frozen=True)
class Label:
    """A voxel-text label anchored in grid space."""
    text: str
    anchor: GridPoint
    color: str
    scale: float


@dataclass(frozen=True)
class SceneObject:
    """
    Base of the closed set of drawable kinds.

    ``depth`` is only a painter's-algorithm sort key.  Ground layers use
    fixed out-of-band keys; per-day structures use gx + gy of their plot.
    """
    depth: float


@dataclass(frozen=True)
class TerrainStrip(SceneObject):
    gx: float
    gy: float
    width: float
    length: float
    thickness: float
    colors: FaceColors
    # Grass tufts as (gx, gy) positions on the strip's top face
    speckles: Tuple[Tuple[float, float], ...] = ()


@dataclass(frozen=True)
class Road(SceneObject):
    gx: float
    gy: float
    width: float
    length: float
    thickness: float
    # Lane marking dashes as gx offsets along the centre line
    dashes: Tuple[float, ...] = ()


@dataclass(frozen=True)
class Building(SceneObject):
    gx: float
    gy: float
    width: float
    length: float
    height: float
    level: int
    # One litness flag per window row, bottom row first
    lit_rows: Tuple[bool, ...]
    row_spacing: float
    labels: Tuple[Label, ...] = ()

    @property
    def has_beacon(self) -> bool:
        return self.level >= TOWER_LEVEL

    @property
    def peak(self) -> float:
        """Highest gz of the building including roof fixtures."""
        top = self.height + ROOF_CAP_HEIGHT
        if self.has_beacon:
            top += ANTENNA_HEIGHT + BEACON_SIZE
        return top


@dataclass(frozen=True)
class Streetlamp(SceneObject):
    gx: float
    gy: float
    width: float
    length: float
    height: float
    labels: Tuple[Label, ...] = ()

    @property
    def peak(self) -> float:
        return self.height


@dataclass(frozen=True)
class Vehicle(SceneObject):
    gx: float
    gy: float


class Scene:
    """
    Container for the scene objects of one render.

    Objects are collected in any order and drawn in ascending depth;
    ties keep insertion order.
    """

    def __init__(self):
        self.objects = []  # list of SceneObject

    def add(self, obj: SceneObject):
        """Add an object to the scene."""
        if not isinstance(obj, SceneObject):
            raise TypeError(f"not a scene object: {obj!r}")
        self.objects.append(obj)

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def sorted_objects(self):
        """Objects in back-to-front draw order (stable sort on depth)."""
        return sorted(self.objects, key=lambda o: o.depth)

    def structures(self):
        """Per-day structures in insertion (chronological) order."""
        return [o for o in self.objects if isinstance(o, (Building, Streetlamp))]
