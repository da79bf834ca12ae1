#
# PROJECT: contribution-city
# MODULE: contribution_city/records.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass
from typing import Tuple

from .errors import InputShapeError

WEEKDAY_NAMES = ('SUN', 'MON', 'TUE', 'WED', 'THU', 'FRI', 'SAT')
WEEK_LENGTH = 7


@dataclass(frozen=True)
class DayRecord:
    """One calendar day: contributions made and the day of the week (0 = Sunday)."""
    date: str
    contribution_count: int
    weekday: int

    def __post_init__(self):
        if isinstance(self.contribution_count, bool) or not isinstance(self.contribution_count, int):
            raise InputShapeError(f"{self.date}: contribution count must be an int, "
                                  f"got {self.contribution_count!r}")
        if self.contribution_count < 0:
            raise InputShapeError(f"{self.date}: negative contribution count")
        if isinstance(self.weekday, bool) or not isinstance(self.weekday, int) \
                or not 0 <= self.weekday <= 6:
            raise InputShapeError(f"{self.date}: weekday {self.weekday!r} not in 0..6")

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    @classmethod
    def from_json(cls, data) -> 'DayRecord':
        """Build a record from a GraphQL ``contributionDays`` entry."""
        try:
            return cls(
                date=str(data['date']),
                contribution_count=data['contributionCount'],
                weekday=data['weekday']
            )
        except (KeyError, TypeError) as e:
            raise InputShapeError(f"malformed contribution day {data!r}: missing {e}") from e


@dataclass(frozen=True)
class ContributionCalendar:
    """Every day of the fetched calendar plus the all-time aggregate."""
    total_contributions: int
    days: Tuple[DayRecord, ...]

    @classmethod
    def from_json(cls, data) -> 'ContributionCalendar':
        """Flatten ``weeks[].contributionDays[]`` in chronological order."""
        try:
            total = data['totalContributions']
            weeks = data['weeks']
            days = tuple(DayRecord.from_json(day)
                         for week in weeks
                         for day in week['contributionDays'])
        except (KeyError, TypeError) as e:
            raise InputShapeError(f"malformed contribution calendar: missing {e}") from e
        if not isinstance(total, int) or total < 0:
            raise InputShapeError(f"invalid totalContributions {total!r}")
        return cls(total_contributions=total, days=days)

    def last_week(self) -> Tuple[DayRecord, ...]:
        """The most recent seven days, oldest first."""
        return validate_week(self.days[-WEEK_LENGTH:])


def validate_week(records, expected: int = WEEK_LENGTH) -> Tuple[DayRecord, ...]:
    """Fail fast unless ``records`` is exactly ``expected`` DayRecords."""
    records = tuple(records)
    if len(records) != expected:
        raise InputShapeError(f"expected {expected} day records, got {len(records)}")
    for i, rec in enumerate(records):
        if not isinstance(rec, DayRecord):
            raise InputShapeError(f"record {i} is {type(rec).__name__}, not DayRecord")
    return records
