#
# PROJECT: contribution-city
# MODULE: contribution_city/document.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import html
import random

from . import color as palette
from .composer import SceneComposer
from .config import RenderConfig
from .records import validate_week
from .renderer import Renderer

SKY_TOP = '#0a0a20'
SKY_BOTTOM = '#1a1a40'
MOON = '#ffffee'
TITLE_COLOR = 'white'
STATS_COLOR = '#8b949e'

# Stars stay in the band above the skyline
STAR_BAND = 150.0

STYLE = """\
    <style>
      @keyframes twinkle {
        0%, 100% { opacity: 0.3; }
        50% { opacity: 1; }
      }
      @keyframes windowFlicker {
        0%, 90%, 100% { opacity: 1; }
        95% { opacity: 0.5; }
      }
      @keyframes blink {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.3; }
      }
      .star { animation: twinkle 2s ease-in-out infinite; }
      .window { animation: windowFlicker 5s ease-in-out infinite; }
      .beacon { animation: blink 1.5s ease-in-out infinite; }
      .lamp { animation: blink 3s ease-in-out infinite; }
    </style>"""


class Star:
    __slots__ = ('x', 'y', 'r', 'delay')

    def __init__(self, x: float, y: float, r: float, delay: float):
        self.x = x
        self.y = y
        self.r = r
        self.delay = delay

    def to_svg(self) -> str:
        return (f'<circle class="star" cx="{self.x:.1f}" cy="{self.y:.1f}" r="{self.r:.2f}" '
                f'fill="white" style="animation-delay: {self.delay:.1f}s"/>')


class DocumentAssembler:
    """
    Wraps a composited polygon stream into a self-contained SVG document:
    sky gradient, star field, moon, the scene, a title and the statistics.
    """

    def __init__(self, config: RenderConfig = None, rng=None):
        self.config = config if config is not None else RenderConfig()
        self.rng = rng if rng is not None else random.Random()

    def stars(self):
        """Screen-space star field; drawn behind everything else."""
        cfg = self.config
        rng = self.rng
        return [Star(x=rng.random() * cfg.canvas_width,
                     y=rng.random() * STAR_BAND,
                     r=rng.random() * 1.5 + 0.5,
                     delay=rng.random() * 3)
                for _ in range(cfg.star_count)]

    def assemble(self, polygons, records, total_contributions: int, username: str = None) -> str:
        cfg = self.config
        w, h = cfg.canvas_width, cfg.canvas_height

        week_total = sum(r.contribution_count for r in records)
        latest = records[-1].contribution_count if records else 0

        title = "Contribution City"
        if username:
            title = f"{html.escape(username)}'s Contribution City"

        stars = "\n  ".join(s.to_svg() for s in self.stars())
        scene = "\n  ".join(p.to_svg() for p in polygons)
        moon_x = w - 100

        return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">
  <defs>
    <linearGradient id="skyGradient" x1="0%" y1="0%" x2="0%" y2="100%">
      <stop offset="0%" style="stop-color:{SKY_TOP}"/>
      <stop offset="100%" style="stop-color:{SKY_BOTTOM}"/>
    </linearGradient>
    <linearGradient id="windowGlow" x1="0%" y1="0%" x2="0%" y2="100%">
      <stop offset="0%" style="stop-color:{palette.WINDOW_GLOW_TOP}"/>
      <stop offset="100%" style="stop-color:{palette.WINDOW_GLOW_BOTTOM}"/>
    </linearGradient>
{STYLE}
  </defs>
  <rect width="{w}" height="{h}" fill="url(#skyGradient)"/>
  {stars}
  <circle cx="{moon_x}" cy="50" r="20" fill="{MOON}" opacity="0.9"/>
  <circle cx="{moon_x + 7}" cy="46" r="20" fill="url(#skyGradient)"/>
  {scene}
  <text x="{w / 2:g}" y="30" text-anchor="middle" fill="{TITLE_COLOR}" font-family="Arial, sans-serif" font-size="18" font-weight="bold">{title}</text>
  <text x="{w / 2:g}" y="{h - 12}" text-anchor="middle" fill="{STATS_COLOR}" font-family="Arial, sans-serif" font-size="12">This Week: {week_total} | Today: {latest} | Total: {total_contributions} contributions</text>
</svg>
"""


def render_city(records, total_contributions: int, username: str = None,
                config: RenderConfig = None, rng=None) -> str:
    """
    Render seven day records (oldest first) into an SVG document.

    ``rng`` drives window litness, grass tufts and the star field; pass a
    seeded ``random.Random`` for reproducible output.
    """
    config = config if config is not None else RenderConfig()
    rng = rng if rng is not None else random.Random()
    records = validate_week(records, config.days)

    scene = SceneComposer(config, rng).compose(records)
    polygons = Renderer(config.projector).render(scene)
    return DocumentAssembler(config, rng).assemble(
        polygons, records, total_contributions, username)
