#
# PROJECT: contribution-city
# MODULE: contribution_city/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import GridPoint, ScreenPoint
from .config import RenderConfig, Settings
from .errors import CityError, InputShapeError, RenderError, ConfigError, FetchError
from .color import NONE, FaceColors, parse_hex_color
from .projection import Projector
from .rasterizer import Polygon, draw_block, draw_voxel_text
from .records import DayRecord, ContributionCalendar
from .scene import Scene
from .composer import SceneComposer
from .renderer import Renderer
from .document import DocumentAssembler, render_city
