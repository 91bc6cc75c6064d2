# phpayroll/payroll/premiums.py

from collections import namedtuple
from decimal import Decimal
from enum import Enum

from phpayroll.attendance.day_types import DayType
from phpayroll.utils import money, non_negative


class HourKind(str, Enum):
    REGULAR = 'regular'
    OVERTIME = 'overtime'
    NIGHT_DIFF = 'night_diff'


# Earnings breakdown buckets, in payslip order
BASIC = 'basic'
REGULAR_OVERTIME = 'regular_overtime'
NIGHT_DIFFERENTIAL = 'night_differential'
LEGAL_HOLIDAY = 'legal_holiday'
LEGAL_HOLIDAY_OT = 'legal_holiday_ot'
LEGAL_HOLIDAY_ND = 'legal_holiday_nd'
SPECIAL_HOLIDAY = 'special_holiday'
SPECIAL_HOLIDAY_OT = 'special_holiday_ot'
SPECIAL_HOLIDAY_ND = 'special_holiday_nd'
SPECIAL_HOLIDAY_ON_REST_DAY_OT = 'special_holiday_on_rest_day_ot'
LEGAL_HOLIDAY_ON_REST_DAY_OT = 'legal_holiday_on_rest_day_ot'
REST_DAY = 'rest_day'
REST_DAY_OT = 'rest_day_ot'
REST_DAY_ND = 'rest_day_nd'
WORKING_DAY_OFF = 'working_day_off'
REGULAR_NIGHT_DIFF_OT = 'regular_night_diff_ot'

EARNING_COMPONENTS = (
    BASIC,
    REGULAR_OVERTIME,
    NIGHT_DIFFERENTIAL,
    LEGAL_HOLIDAY,
    LEGAL_HOLIDAY_OT,
    LEGAL_HOLIDAY_ND,
    SPECIAL_HOLIDAY,
    SPECIAL_HOLIDAY_OT,
    SPECIAL_HOLIDAY_ND,
    SPECIAL_HOLIDAY_ON_REST_DAY_OT,
    LEGAL_HOLIDAY_ON_REST_DAY_OT,
    REST_DAY,
    REST_DAY_OT,
    REST_DAY_ND,
    WORKING_DAY_OFF,
    REGULAR_NIGHT_DIFF_OT,
)

NIGHT_DIFF_COMPONENTS = frozenset({
    NIGHT_DIFFERENTIAL,
    LEGAL_HOLIDAY_ND,
    SPECIAL_HOLIDAY_ND,
    REST_DAY_ND,
    REGULAR_NIGHT_DIFF_OT,
})

# Night-differential, holiday and rest-day regular-hour multipliers are
# premium-only: the base pay for those hours is counted elsewhere
PremiumRate = namedtuple('PremiumRate', ['component', 'multiplier'])

NIGHT_DIFF_RATE = Decimal('0.10')
WORKING_DAY_OFF_RATE = Decimal('1.30')

PREMIUM_TABLE = {
    (DayType.REGULAR, HourKind.REGULAR): PremiumRate(BASIC, Decimal('1.00')),
    (DayType.REGULAR, HourKind.OVERTIME): PremiumRate(REGULAR_OVERTIME, Decimal('1.25')),
    (DayType.REGULAR, HourKind.NIGHT_DIFF): PremiumRate(NIGHT_DIFFERENTIAL, NIGHT_DIFF_RATE),

    (DayType.REGULAR_HOLIDAY, HourKind.REGULAR): PremiumRate(LEGAL_HOLIDAY, Decimal('1.00')),
    (DayType.REGULAR_HOLIDAY, HourKind.OVERTIME): PremiumRate(LEGAL_HOLIDAY_OT, Decimal('2.60')),
    (DayType.REGULAR_HOLIDAY, HourKind.NIGHT_DIFF): PremiumRate(LEGAL_HOLIDAY_ND, NIGHT_DIFF_RATE),

    (DayType.NON_WORKING_HOLIDAY, HourKind.REGULAR): PremiumRate(SPECIAL_HOLIDAY, Decimal('0.30')),
    (DayType.NON_WORKING_HOLIDAY, HourKind.OVERTIME): PremiumRate(SPECIAL_HOLIDAY_OT, Decimal('1.69')),
    (DayType.NON_WORKING_HOLIDAY, HourKind.NIGHT_DIFF): PremiumRate(SPECIAL_HOLIDAY_ND, NIGHT_DIFF_RATE),

    (DayType.REST_DAY, HourKind.REGULAR): PremiumRate(REST_DAY, Decimal('0.30')),
    (DayType.REST_DAY, HourKind.OVERTIME): PremiumRate(REST_DAY_OT, Decimal('1.69')),
    (DayType.REST_DAY, HourKind.NIGHT_DIFF): PremiumRate(REST_DAY_ND, NIGHT_DIFF_RATE),

    # 150% of the daily rate, premium portion only
    (DayType.REST_DAY_NON_WORKING_HOLIDAY, HourKind.REGULAR): PremiumRate(SPECIAL_HOLIDAY, Decimal('0.50')),
    (DayType.REST_DAY_NON_WORKING_HOLIDAY, HourKind.OVERTIME): PremiumRate(SPECIAL_HOLIDAY_ON_REST_DAY_OT, Decimal('1.95')),
    (DayType.REST_DAY_NON_WORKING_HOLIDAY, HourKind.NIGHT_DIFF): PremiumRate(SPECIAL_HOLIDAY_ND, NIGHT_DIFF_RATE),

    # 260% of the daily rate, premium portion only
    (DayType.REST_DAY_REGULAR_HOLIDAY, HourKind.REGULAR): PremiumRate(LEGAL_HOLIDAY, Decimal('1.60')),
    (DayType.REST_DAY_REGULAR_HOLIDAY, HourKind.OVERTIME): PremiumRate(LEGAL_HOLIDAY_ON_REST_DAY_OT, Decimal('3.38')),
    (DayType.REST_DAY_REGULAR_HOLIDAY, HourKind.NIGHT_DIFF): PremiumRate(LEGAL_HOLIDAY_ND, NIGHT_DIFF_RATE),
}


def premium_amount(hours, hourly_rate, multiplier):
    """hours x rate x multiplier, rounded to centavos. Never negative."""
    return money(non_negative(hours) * non_negative(hourly_rate) * multiplier)


def premium_rate(day_type, hour_kind):
    return PREMIUM_TABLE[(DayType(day_type), HourKind(hour_kind))]


def premium_pay(day_type, hour_kind, hours, hourly_rate):
    """Returns (component, amount) for hours of one kind worked on a day type."""
    rate = premium_rate(day_type, hour_kind)
    return rate.component, premium_amount(hours, hourly_rate, rate.multiplier)


def regular_night_diff_ot_pay(overtime_hours, night_diff_hours, hourly_rate):
    """Night premium on overtime hours that also fall in the night window."""
    hours = min(non_negative(overtime_hours), non_negative(night_diff_hours))
    return hours, premium_amount(hours, hourly_rate, NIGHT_DIFF_RATE)


def working_day_off_pay(hours, hourly_rate):
    return premium_amount(hours, hourly_rate, WORKING_DAY_OFF_RATE)
