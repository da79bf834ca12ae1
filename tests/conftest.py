# tests/conftest.py

import pytest

from contribution_city.config import RenderConfig
from contribution_city.projection import Projector
from contribution_city.records import DayRecord

SCENARIO_COUNTS = [0, 3, 0, 9, 15, 1, 0]


class FixedRandom:
    """Random source stub: random() is constant, uniform() is the midpoint."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return (a + b) / 2


def make_week(counts, start_day=1):
    return [DayRecord(date=f"2026-10-{start_day + i:02d}", contribution_count=c, weekday=i % 7)
            for i, c in enumerate(counts)]


@pytest.fixture
def config():
    return RenderConfig()


@pytest.fixture
def projector():
    return Projector(tile_width=1.0, tile_height=0.5, origin_x=0.0, origin_y=0.0)


@pytest.fixture
def scenario_week():
    return make_week(SCENARIO_COUNTS)


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)
