# tests/test_document.py

import random

import pytest

from conftest import FixedRandom, make_week
from contribution_city.document import DocumentAssembler, render_city
from contribution_city.errors import InputShapeError


def test_scenario_document(config, scenario_week):
    svg = render_city(scenario_week, 1234, username="octocat",
                      config=config, rng=random.Random(3))

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert svg.rstrip().endswith('</svg>')
    assert f'viewBox="0 0 {config.canvas_width} {config.canvas_height}"' in svg
    assert "octocat's Contribution City" in svg
    assert "Total: 1234 contributions" in svg
    assert "Today: 0 " in svg
    assert "This Week: 28 " in svg
    assert svg.count('class="star"') == config.star_count


def test_document_is_self_contained(config, scenario_week):
    svg = render_city(scenario_week, 10, config=config, rng=random.Random(1))
    assert 'href' not in svg
    assert '@keyframes twinkle' in svg
    assert 'url(#skyGradient)' in svg


def test_today_is_latest_record(config):
    week = make_week([0, 3, 0, 9, 15, 0, 1])
    svg = render_city(week, 50, config=config, rng=random.Random(3))
    assert "Today: 1 " in svg
    assert "This Week: 28 " in svg


def test_lit_windows_reference_declared_glow(config, scenario_week):
    svg = render_city(scenario_week, 10, config=config, rng=FixedRandom(0.0))
    defs = svg[svg.index("<defs>"):svg.index("</defs>")]
    assert '<linearGradient id="windowGlow"' in defs
    assert 'stop-color:#ffee88' in defs and 'stop-color:#ffaa33' in defs
    assert svg.count('fill="url(#windowGlow)"') > 0


def test_background_precedes_scene(config, scenario_week):
    svg = render_city(scenario_week, 10, config=config, rng=random.Random(1))
    last_star = svg.rindex('class="star"')
    moon = svg.index(' r="20"')
    first_poly = svg.index('<polygon')
    assert last_star < moon < first_poly


def test_same_seed_same_document(config, scenario_week):
    a = render_city(scenario_week, 10, config=config, rng=random.Random(5))
    b = render_city(scenario_week, 10, config=config, rng=random.Random(5))
    assert a == b


def test_username_is_escaped(config, scenario_week):
    svg = render_city(scenario_week, 0, username="<bob&co>", config=config,
                      rng=random.Random(0))
    assert "&lt;bob&amp;co&gt;'s Contribution City" in svg
    assert "<bob" not in svg


def test_untitled_without_username(config, scenario_week):
    svg = render_city(scenario_week, 0, config=config, rng=random.Random(0))
    assert ">Contribution City<" in svg


def test_stars_stay_in_sky(config):
    stars = DocumentAssembler(config, random.Random(9)).stars()
    assert len(stars) == config.star_count
    for s in stars:
        assert 0 <= s.x <= config.canvas_width
        assert 0 <= s.y <= 150
        assert 0.5 <= s.r <= 2.0
        assert 0 <= s.delay < 3


def test_fixed_stars(config):
    star = DocumentAssembler(config, FixedRandom(0.5)).stars()[0]
    assert 'cx="400.0" cy="75.0" r="1.25"' in star.to_svg()
    assert 'animation-delay: 1.5s' in star.to_svg()


def test_short_week_aborts_render(config):
    with pytest.raises(InputShapeError):
        render_city(make_week([1, 2, 3]), 6, config=config, rng=random.Random(0))
