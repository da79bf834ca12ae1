#
# PROJECT: contribution-city
# MODULE: contribution_city/app.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import random

from .config import RenderConfig, Settings
from .document import render_city
from .github import fetch_calendar


class CityApp:
    """
    One-shot generator: fetch the calendar, render the last week, write
    the SVG.  Any CityError propagates to the caller; nothing is written
    unless the whole render succeeds.
    """

    def __init__(self, settings: Settings, config: RenderConfig = None,
                 seed=None, session=None):
        self.settings = settings
        self.config = config if config is not None else RenderConfig()
        self.rng = random.Random(seed)
        self.session = session

    def run(self) -> str:
        settings = self.settings

        print(f"Fetching contributions for {settings.username}...")
        calendar = fetch_calendar(settings.username, settings.token, session=self.session)
        print(f"Total contributions: {calendar.total_contributions}")

        week = calendar.last_week()
        print("Last 7 days: " + ", ".join(
            f"{d.date}: {d.contribution_count}" for d in week))

        svg = render_city(week, calendar.total_contributions,
                          username=settings.username, config=self.config, rng=self.rng)

        os.makedirs(settings.output_dir, exist_ok=True)
        path = settings.output_path
        with open(path, 'w', encoding='utf-8') as f:
            f.write(svg)
        print(f"Generated: {path}")
        return path


def main(args, environ=None):
    """Entry point used by the command-line script."""
    settings = Settings.from_env(environ, username=args.username)
    if args.output_dir:
        settings.output_dir = args.output_dir
    if args.filename:
        settings.filename = args.filename
    app = CityApp(settings, seed=args.seed)
    return app.run()
