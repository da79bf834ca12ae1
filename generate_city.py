#!/usr/bin/env python3
#
# PROJECT: contribution-city
# MODULE: generate_city.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from contribution_city.app import main
from contribution_city.errors import CityError


def parse_args(argv=None):
    """CLI argument parser.  Account and token default to the environment."""
    epilog = """\
environment:
  USERNAME        GitHub account to draw (required unless --username is given)
  GITHUB_TOKEN    token used for the GraphQL API (required)
  OUTPUT_DIR      output directory (default: profile-3d-contrib)

examples:
  %(prog)s                                  Draw $USERNAME's last week
  %(prog)s --username octocat --seed 7      Reproducible windows and stars
  %(prog)s --output-dir dist --filename city.svg
"""
    parser = argparse.ArgumentParser(
        description="Isometric contribution city generator",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--username", help="GitHub account (overrides $USERNAME)")
    parser.add_argument("--output-dir", help="Directory for the SVG file")
    parser.add_argument("--filename", help="SVG file name (default: contribution-city.svg)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for window lights, grass and stars")
    return parser.parse_args(argv)


def cli(argv=None):
    args = parse_args(argv)
    try:
        main(args)
    except (CityError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
