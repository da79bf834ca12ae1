#
# PROJECT: contribution-city
# MODULE: contribution_city/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigError
from .projection import Projector


@dataclass
class RenderConfig:
    """Layout and projection constants for one render."""
    canvas_width: int = 800
    canvas_height: int = 520

    # Isometric tile (cos 30 / sin 30) and screen origin of grid (0, 0, 0)
    tile_width: float = 0.866
    tile_height: float = 0.5
    origin_x: float = 257.0
    origin_y: float = 220.0

    # Per-day structure placement
    days: int = 7
    structure_stride: float = 56.0
    structure_row: float = 0.0
    footprint: float = 36.0

    # Level mapping
    building_base_height: float = 20.0
    building_unit_height: float = 8.0
    building_max_height: float = 120.0
    streetlamp_height: float = 40.0

    window_row_spacing: float = 14.0
    window_lit_probability: float = 0.72

    label_scale: float = 2.0
    label_gap: float = 6.0

    star_count: int = 50
    grass_speckles: int = 90

    # Projector built from the tile/origin settings above
    projector: Optional[Projector] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        self.init_projector()

    def init_projector(self):
        """Rebuild the projector after tile or origin settings change."""
        self.projector = Projector(
            tile_width=self.tile_width,
            tile_height=self.tile_height,
            origin_x=self.origin_x,
            origin_y=self.origin_y
        )


@dataclass
class Settings:
    """Process settings: which account to draw and where to write it."""
    username: str
    token: str
    output_dir: str = 'profile-3d-contrib'
    filename: str = 'contribution-city.svg'

    @property
    def output_path(self) -> str:
        return os.path.join(self.output_dir, self.filename)

    @classmethod
    def from_env(cls, environ=None, username=None) -> 'Settings':
        """
        Read USERNAME and GITHUB_TOKEN (and optionally OUTPUT_DIR).
        An explicit ``username`` overrides the environment.
        Raises ConfigError when either required value is missing.
        """
        env = os.environ if environ is None else environ

        username = (username or env.get('USERNAME', '')).strip()
        token = env.get('GITHUB_TOKEN', '').strip()

        missing = []
        if not username:
            missing.append('USERNAME')
        if not token:
            missing.append('GITHUB_TOKEN')
        if missing:
            raise ConfigError(f"missing required setting(s): {', '.join(missing)}")

        kwargs = {}
        if env.get('OUTPUT_DIR'):
            kwargs['output_dir'] = env['OUTPUT_DIR']
        return cls(username=username, token=token, **kwargs)
