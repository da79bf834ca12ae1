#
# PROJECT: contribution-city
# MODULE: contribution_city/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class CityError(Exception):
    """Base class for every error raised by the city generator."""


class InputShapeError(CityError):
    """The day-record window is short, oversized, or a record is malformed."""


class RenderError(CityError):
    """An internal layout invariant was violated while rasterizing."""


class ConfigError(CityError):
    """Required settings (account name, access token) are missing."""


class FetchError(CityError):
    """The contribution calendar could not be retrieved."""
