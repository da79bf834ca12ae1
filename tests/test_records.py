# tests/test_records.py

import pytest

from contribution_city.errors import InputShapeError
from contribution_city.records import ContributionCalendar, DayRecord, validate_week


def calendar_json(counts, total=500):
    days = [{'contributionCount': c, 'date': f"2026-09-{i + 1:02d}", 'weekday': i % 7}
            for i, c in enumerate(counts)]
    weeks = [{'contributionDays': days[i:i + 7]} for i in range(0, len(days), 7)]
    return {'totalContributions': total, 'weeks': weeks}


def test_day_record_from_json():
    rec = DayRecord.from_json({'contributionCount': 4, 'date': '2026-10-18', 'weekday': 0})
    assert rec == DayRecord(date='2026-10-18', contribution_count=4, weekday=0)
    assert rec.weekday_name == 'SUN'


@pytest.mark.parametrize("data", [
    {'date': '2026-10-18', 'weekday': 0},
    {'contributionCount': 1, 'date': '2026-10-18'},
    {'contributionCount': -1, 'date': '2026-10-18', 'weekday': 0},
    {'contributionCount': '3', 'date': '2026-10-18', 'weekday': 0},
    {'contributionCount': 3, 'date': '2026-10-18', 'weekday': 9},
    None,
])
def test_malformed_day(data):
    with pytest.raises(InputShapeError):
        DayRecord.from_json(data)


def test_calendar_last_week_is_chronological():
    counts = list(range(16))
    cal = ContributionCalendar.from_json(calendar_json(counts, total=1234))
    assert cal.total_contributions == 1234
    assert len(cal.days) == 16
    week = cal.last_week()
    assert [d.contribution_count for d in week] == counts[-7:]
    assert week[-1].date == '2026-09-16'


def test_calendar_with_too_few_days():
    cal = ContributionCalendar.from_json(calendar_json([1, 2, 3]))
    with pytest.raises(InputShapeError):
        cal.last_week()


def test_calendar_missing_weeks():
    with pytest.raises(InputShapeError):
        ContributionCalendar.from_json({'totalContributions': 3})


def test_validate_week_passes_exact_week():
    week = [DayRecord(date=str(i), contribution_count=0, weekday=i) for i in range(7)]
    assert validate_week(week) == tuple(week)
