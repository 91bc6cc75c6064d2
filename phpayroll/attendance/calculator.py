# phpayroll/attendance/calculator.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_FLOOR
from typing import Optional

import pytz

from phpayroll.utils import ZERO, date_range, to_decimal
from .day_types import DayType, classify_day, index_holidays

logger = logging.getLogger(__name__)

BUSINESS_TIMEZONE = 'Asia/Manila'

# Clock entry statuses that count toward paid hours
COUNTED_STATUSES = frozenset({'approved', 'auto_approved', 'clocked_out'})

PAID_DAY_HOURS = Decimal('8')
HOLIDAY_LOOKBACK_DAYS = 7
SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class ClockEntry:
    employee_id: object
    clock_in: datetime
    clock_out: Optional[datetime] = None
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    night_diff_hours: Decimal = ZERO
    status: str = 'pending'

    @classmethod
    def from_row(cls, row):
        return cls(
            employee_id=row.employee_id,
            clock_in=row.clock_in_time,
            clock_out=row.clock_out_time,
            regular_hours=to_decimal(row.regular_hours),
            overtime_hours=to_decimal(row.overtime_hours),
            night_diff_hours=to_decimal(row.night_diff_hours),
            status=row.status,
        )

    @property
    def is_complete(self):
        return self.clock_out is not None

    @property
    def is_counted(self):
        return self.is_complete and self.status in COUNTED_STATUSES


@dataclass(frozen=True)
class DailyAttendance:
    date: object
    day_type: DayType
    regular_hours: int = 0
    overtime_hours: int = 0
    night_diff_hours: int = 0

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'day_type': self.day_type.value,
            'regular_hours': self.regular_hours,
            'overtime_hours': self.overtime_hours,
            'night_diff_hours': self.night_diff_hours,
        }


# --- HELPER: BUSINESS DATE ---
def business_date(timestamp, tz_name=BUSINESS_TIMEZONE):
    """Calendar date of a timestamp in the business timezone. Naive values are UTC."""
    if timestamp.tzinfo is None:
        timestamp = pytz.UTC.localize(timestamp)
    return timestamp.astimezone(pytz.timezone(tz_name)).date()


def floor_hours(value):
    hours = to_decimal(value).to_integral_value(rounding=ROUND_FLOOR)
    return max(int(hours), 0)


def group_entries_by_date(clock_entries, tz_name=BUSINESS_TIMEZONE):
    entries_by_date = {}
    for entry in clock_entries:
        entries_by_date.setdefault(business_date(entry.clock_in, tz_name), []).append(entry)
    return entries_by_date


def sum_counted_hours(entries, eligible_for_ot=True, eligible_for_night_diff=True):
    """Sums regular/OT/ND hours of completed, approved entries."""
    regular = overtime = night_diff = ZERO
    for entry in entries:
        if not entry.is_counted:
            continue
        regular += to_decimal(entry.regular_hours)
        if eligible_for_ot:
            overtime += to_decimal(entry.overtime_hours)
        if eligible_for_night_diff:
            night_diff += to_decimal(entry.night_diff_hours)
    return regular, overtime, night_diff


class _Calendar:
    """Day-type lookup for one employee's holidays and rest-day schedule."""

    def __init__(self, holidays, rest_days=None):
        self.holidays = index_holidays(holidays)
        self.rest_days = rest_days or {}

    def scheduled_rest_day(self, day):
        return self.rest_days.get(day)

    def is_rest_day(self, day):
        flag = self.scheduled_rest_day(day)
        return flag if flag is not None else day.weekday() == SUNDAY

    def day_type(self, day):
        return classify_day(day, self.holidays, self.scheduled_rest_day(day))


def _worked_preceding_regular_day(holiday_date, calendar, entries_by_date):
    """
    Holiday pay eligibility: looks back up to a week for any plain regular
    day with at least 8 approved regular hours. Holidays and rest days are
    skipped, and so are regular days that fall short (an unworked Saturday,
    a half day), so a chain of holidays still finds the last full day worked
    before it. Seeded Saturday hours do not count.
    """
    for offset in range(1, HOLIDAY_LOOKBACK_DAYS + 1):
        prior = holiday_date - timedelta(days=offset)
        if calendar.day_type(prior) != DayType.REGULAR:
            continue
        regular, _, _ = sum_counted_hours(entries_by_date.get(prior, ()))
        if regular >= PAID_DAY_HOURS:
            return True
    return False


# --- CORE LOGIC: TIMESHEET GENERATION ---
def generate_timesheet(clock_entries, period_start, period_end, holidays,
                       rest_days=None, eligible_for_ot=True, eligible_for_night_diff=True,
                       special_rest_day_policy=False, tz_name=BUSINESS_TIMEZONE):
    """
    Builds one attendance record per calendar day of a pay period from
    time clock entries.

    Args:
        clock_entries: ClockEntry records of one employee. Include the week
            before period_start so holiday eligibility can look back.
        period_start, period_end (date): Inclusive period bounds.
        holidays: Holiday records.
        rest_days (dict): Optional date -> bool rest-day schedule. Dates
            missing from it fall back to Sunday.
        eligible_for_ot, eligible_for_night_diff (bool): Whether OT and
            night differential hours are counted at all.
        special_rest_day_policy (bool): The employee's first rest day of the
            period is paid even when not worked.

    Returns:
        dict with 'attendance' (list of DailyAttendance) and 'totals'.
    """
    calendar = _Calendar(holidays, rest_days)
    entries_by_date = group_entries_by_date(clock_entries, tz_name)

    first_rest_day = None
    if special_rest_day_policy:
        first_rest_day = next(
            (day for day in date_range(period_start, period_end) if calendar.is_rest_day(day)),
            None
        )

    attendance = []
    for day in date_range(period_start, period_end):
        regular, overtime, night_diff = sum_counted_hours(
            entries_by_date.get(day, ()), eligible_for_ot, eligible_for_night_diff
        )
        day_type = calendar.day_type(day)

        if day_type == DayType.REGULAR and regular == 0 and day.weekday() == SATURDAY:
            regular = PAID_DAY_HOURS
            logger.debug('Seeded paid Saturday %s', day)

        elif day_type == DayType.REST_DAY and day == first_rest_day and regular == 0:
            regular = PAID_DAY_HOURS
            logger.debug('Seeded first rest day %s', day)

        elif day_type in (DayType.REGULAR_HOLIDAY, DayType.NON_WORKING_HOLIDAY) and regular == 0:
            if _worked_preceding_regular_day(day, calendar, entries_by_date):
                regular = PAID_DAY_HOURS
            else:
                logger.debug('Holiday pay forfeited on %s: no qualifying regular day', day)

        attendance.append(DailyAttendance(
            date=day,
            day_type=day_type,
            regular_hours=floor_hours(regular),
            overtime_hours=floor_hours(overtime),
            night_diff_hours=floor_hours(night_diff),
        ))

    totals = {
        'regular_hours': sum(day.regular_hours for day in attendance),
        'overtime_hours': sum(day.overtime_hours for day in attendance),
        'night_diff_hours': sum(day.night_diff_hours for day in attendance),
        'days': len(attendance),
    }
    return {'attendance': attendance, 'totals': totals}


def validate_clock_entries(clock_entries, period_start, period_end, expected_working_days,
                           tz_name=BUSINESS_TIMEZONE):
    """
    Reports expected working days with no clock entry at all (missing) and
    days whose entries are all open or unapproved (incomplete).

    expected_working_days uses date.weekday() numbering: Monday is 0.
    """
    expected = set(expected_working_days)
    entries_by_date = group_entries_by_date(clock_entries, tz_name)

    missing_days = []
    incomplete_entries = []
    for day in date_range(period_start, period_end):
        if day.weekday() not in expected:
            continue
        day_entries = entries_by_date.get(day, [])
        if any(entry.is_counted for entry in day_entries):
            continue
        if day_entries:
            incomplete_entries.append(day)
        else:
            missing_days.append(day)

    return {
        'is_valid': not missing_days and not incomplete_entries,
        'missing_days': missing_days,
        'incomplete_entries': incomplete_entries,
    }
