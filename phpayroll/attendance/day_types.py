# phpayroll/attendance/day_types.py

from dataclasses import dataclass
from datetime import date
from enum import Enum


class HolidayKind(str, Enum):
    REGULAR = 'regular'
    NON_WORKING = 'non-working'


class DayType(str, Enum):
    REGULAR = 'regular'
    REST_DAY = 'rest-day'
    REGULAR_HOLIDAY = 'regular-holiday'
    NON_WORKING_HOLIDAY = 'non-working-holiday'
    REST_DAY_REGULAR_HOLIDAY = 'rest-day-regular-holiday'
    REST_DAY_NON_WORKING_HOLIDAY = 'rest-day-non-working-holiday'


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    kind: HolidayKind

    @classmethod
    def from_row(cls, row):
        """Builds a holiday from a stored row (holiday_date, name, holiday_type)."""
        return cls(
            date=row.holiday_date,
            name=row.name or '',
            kind=HolidayKind(row.holiday_type),
        )


def index_holidays(holidays):
    """Maps each date to its holiday. The first record for a date wins."""
    by_date = {}
    for holiday in holidays:
        by_date.setdefault(holiday.date, holiday)
    return by_date


def build_rest_day_schedule(schedule_rows):
    """Per-date rest-day flags from schedule rows carrying a day_off column."""
    return {row.schedule_date: bool(row.day_off) for row in schedule_rows}


def classify_day(target_date, holidays, is_rest_day=None):
    """
    Determines the pay category of a calendar day.

    Args:
        target_date (date): The day to classify.
        holidays: Iterable of Holiday records, or a date-to-Holiday mapping
            as returned by index_holidays().
        is_rest_day (bool): Whether the employee's schedule marks the day
            as a rest day. Defaults to "the day is a Sunday".

    Returns:
        DayType
    """
    if is_rest_day is None:
        is_rest_day = target_date.weekday() == 6

    if not isinstance(holidays, dict):
        holidays = index_holidays(holidays)
    holiday = holidays.get(target_date)
    kind = holiday.kind if holiday else None

    if is_rest_day and kind == HolidayKind.REGULAR:
        return DayType.REST_DAY_REGULAR_HOLIDAY
    if is_rest_day and kind == HolidayKind.NON_WORKING:
        return DayType.REST_DAY_NON_WORKING_HOLIDAY
    if kind == HolidayKind.REGULAR:
        return DayType.REGULAR_HOLIDAY
    if kind == HolidayKind.NON_WORKING:
        return DayType.NON_WORKING_HOLIDAY
    if is_rest_day:
        return DayType.REST_DAY
    return DayType.REGULAR
