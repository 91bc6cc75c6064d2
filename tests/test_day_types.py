from datetime import date, timedelta
from types import SimpleNamespace

from phpayroll.attendance.day_types import (
    DayType,
    Holiday,
    HolidayKind,
    build_rest_day_schedule,
    classify_day,
    index_holidays,
)

MONDAY = date(2025, 6, 2)
SUNDAY = date(2025, 6, 8)
INDEPENDENCE_DAY = date(2025, 6, 12)


def regular(day, name='Holiday'):
    return Holiday(day, name, HolidayKind.REGULAR)


def non_working(day, name='Special Day'):
    return Holiday(day, name, HolidayKind.NON_WORKING)


def test_plain_weekday_is_regular():
    assert classify_day(MONDAY, []) == DayType.REGULAR


def test_sunday_defaults_to_rest_day():
    assert classify_day(SUNDAY, []) == DayType.REST_DAY


def test_explicit_schedule_overrides_sunday_default():
    assert classify_day(SUNDAY, [], is_rest_day=False) == DayType.REGULAR
    assert classify_day(MONDAY, [], is_rest_day=True) == DayType.REST_DAY


def test_holidays_on_working_days():
    assert classify_day(INDEPENDENCE_DAY, [regular(INDEPENDENCE_DAY)]) == DayType.REGULAR_HOLIDAY
    assert classify_day(MONDAY, [non_working(MONDAY)]) == DayType.NON_WORKING_HOLIDAY


def test_holidays_on_rest_days_are_combined_categories():
    assert classify_day(SUNDAY, [regular(SUNDAY)]) == DayType.REST_DAY_REGULAR_HOLIDAY
    assert classify_day(SUNDAY, [non_working(SUNDAY)]) == DayType.REST_DAY_NON_WORKING_HOLIDAY
    assert classify_day(INDEPENDENCE_DAY, [regular(INDEPENDENCE_DAY)], is_rest_day=True) \
        == DayType.REST_DAY_REGULAR_HOLIDAY


def test_regular_iff_no_holiday_when_not_rest_day():
    holidays = [regular(date(2025, 6, 12)), non_working(date(2025, 6, 20))]
    holiday_dates = {h.date for h in holidays}
    day = date(2025, 6, 1)
    while day <= date(2025, 6, 30):
        result = classify_day(day, holidays, is_rest_day=False)
        assert (result == DayType.REGULAR) == (day not in holiday_dates)
        day += timedelta(days=1)


def test_first_holiday_for_a_date_wins():
    holidays = [non_working(MONDAY, 'First'), regular(MONDAY, 'Second')]
    assert classify_day(MONDAY, holidays) == DayType.NON_WORKING_HOLIDAY
    assert index_holidays(holidays)[MONDAY].name == 'First'


def test_accepts_prebuilt_index():
    index = index_holidays([regular(INDEPENDENCE_DAY)])
    assert classify_day(INDEPENDENCE_DAY, index) == DayType.REGULAR_HOLIDAY


def test_holiday_from_row():
    row = SimpleNamespace(holiday_date=INDEPENDENCE_DAY, name='Independence Day', holiday_type='non-working')
    holiday = Holiday.from_row(row)
    assert holiday.kind == HolidayKind.NON_WORKING
    assert holiday.date == INDEPENDENCE_DAY


def test_rest_day_schedule_from_rows():
    rows = [
        SimpleNamespace(schedule_date=MONDAY, day_off=False),
        SimpleNamespace(schedule_date=SUNDAY, day_off=True),
    ]
    assert build_rest_day_schedule(rows) == {MONDAY: False, SUNDAY: True}
