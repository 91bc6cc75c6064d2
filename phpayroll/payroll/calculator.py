# phpayroll/payroll/calculator.py

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal

from phpayroll.attendance.day_types import DayType
from phpayroll.utils import ZERO, money, non_negative, to_decimal
from . import premiums
from .deductions import (
    DEFAULT_WORKING_DAYS_PER_MONTH,
    calculate_all_contributions,
    calculate_withholding_tax,
)

logger = logging.getLogger(__name__)

FULL_DAY_HOURS = Decimal('8')

# Account Supervisors work flexible hours and never earn night differential
NIGHT_DIFF_EXEMPT_POSITION = 'ACCOUNT SUPERVISOR'

# Day types counted in "days worked"; holiday-only days are paid but not counted
DAYS_WORKED_TYPES = frozenset({
    DayType.REGULAR,
    DayType.REST_DAY,
    DayType.REST_DAY_NON_WORKING_HOLIDAY,
    DayType.REST_DAY_REGULAR_HOLIDAY,
})

OTHER_DEDUCTION_TYPES = (
    'vale',
    'uniform_ppe',
    'sss_loan',
    'sss_calamity_loan',
    'pagibig_loan',
    'pagibig_calamity_loan',
)


@dataclass(frozen=True)
class PayProfile:
    hourly_rate: Decimal
    daily_rate: Decimal
    position: str = ''

    @classmethod
    def from_employee(cls, employee):
        return cls(
            hourly_rate=to_decimal(employee.rate_per_hour),
            daily_rate=to_decimal(employee.rate_per_day),
            position=employee.position or '',
        )


def is_night_diff_exempt(position):
    return NIGHT_DIFF_EXEMPT_POSITION in (position or '').upper()


class EarningLine:
    def __init__(self):
        self.hours = ZERO
        self.amount = ZERO

    def add(self, hours, amount):
        self.hours += to_decimal(hours)
        self.amount += amount

    def to_dict(self):
        return {'hours': self.hours, 'amount': money(self.amount)}


class EarningsBreakdown:
    """Earnings per payslip component for one pay period."""

    def __init__(self):
        self.lines = OrderedDict((component, EarningLine()) for component in premiums.EARNING_COMPONENTS)
        self.days_worked = 0
        self.total_hours = ZERO
        self.total_regular_hours = ZERO

    def __getitem__(self, component):
        return self.lines[component]

    def add(self, component, hours, amount):
        self.lines[component].add(hours, amount)

    @property
    def basic_salary(self):
        return money(self.lines[premiums.BASIC].amount)

    @property
    def total_gross_pay(self):
        return money(sum((line.amount for line in self.lines.values()), ZERO))

    @property
    def total_premiums(self):
        """Everything except basic pay: overtime, night differential, holiday and rest-day pay."""
        return self.total_gross_pay - self.basic_salary

    def to_dict(self):
        return {
            'components': OrderedDict((name, line.to_dict()) for name, line in self.lines.items()),
            'days_worked': self.days_worked,
            'total_hours': self.total_hours,
            'total_regular_hours': self.total_regular_hours,
            'basic_salary': self.basic_salary,
            'total_premiums': self.total_premiums,
            'total_gross_pay': self.total_gross_pay,
        }


# --- MAIN EARNINGS AGGREGATOR ---
def aggregate_earnings(employee, attendance, working_day_off_hours=0):
    """
    Routes each day's hours into payslip components by day type.

    Args:
        employee (PayProfile): hourly_rate, daily_rate and position.
        attendance: DailyAttendance records of the period.
        working_day_off_hours: Approved day-off work paid at 130%.

    Returns:
        EarningsBreakdown
    """
    breakdown = EarningsBreakdown()
    hourly_rate = non_negative(employee.hourly_rate)
    night_diff_exempt = is_night_diff_exempt(employee.position)

    for day in attendance:
        day_type = DayType(day.day_type)
        regular = non_negative(day.regular_hours)
        overtime = non_negative(day.overtime_hours)
        night_diff = non_negative(day.night_diff_hours)

        breakdown.total_hours += regular + overtime
        if regular >= FULL_DAY_HOURS:
            breakdown.total_regular_hours += regular
            if day_type in DAYS_WORKED_TYPES:
                breakdown.days_worked += 1
        elif day_type == DayType.REGULAR:
            breakdown.total_regular_hours += regular

        for hour_kind, hours in ((premiums.HourKind.REGULAR, regular),
                                 (premiums.HourKind.OVERTIME, overtime),
                                 (premiums.HourKind.NIGHT_DIFF, night_diff)):
            if hours <= 0:
                continue
            component, amount = premiums.premium_pay(day_type, hour_kind, hours, hourly_rate)
            if night_diff_exempt and component in premiums.NIGHT_DIFF_COMPONENTS:
                continue
            breakdown.add(component, hours, amount)

        if (day_type == DayType.REGULAR and overtime > 0 and night_diff > 0
                and not night_diff_exempt):
            hours, amount = premiums.regular_night_diff_ot_pay(overtime, night_diff, hourly_rate)
            breakdown.add(premiums.REGULAR_NIGHT_DIFF_OT, hours, amount)

    day_off_hours = non_negative(working_day_off_hours)
    if day_off_hours > 0:
        breakdown.add(premiums.WORKING_DAY_OFF, day_off_hours,
                      premiums.working_day_off_pay(day_off_hours, hourly_rate))

    return breakdown


# --- PAYSLIP CALCULATOR ---
def compute_payslip(employee, attendance, other_deductions=None, adjustment=0,
                    working_days_per_month=DEFAULT_WORKING_DAYS_PER_MONTH, working_day_off_hours=0):
    """
    Runs the earnings breakdown and all deductions for one bi-monthly payslip.

    Government shares are half of the monthly employee share. Withholding tax
    is computed on the period's own taxable income.
    """
    breakdown = aggregate_earnings(employee, attendance, working_day_off_hours)
    gross_pay = breakdown.total_gross_pay

    contributions = calculate_all_contributions(employee.daily_rate, working_days_per_month)
    sss = contributions['bi_monthly']['sss']
    philhealth = contributions['bi_monthly']['philhealth']
    pagibig = contributions['bi_monthly']['pagibig']
    total_contributions = sss + philhealth + pagibig

    taxable_income = gross_pay - total_contributions
    withholding_tax = calculate_withholding_tax(taxable_income)

    other_deductions = other_deductions or {}
    others = OrderedDict(
        (name, money(non_negative(other_deductions.get(name)))) for name in OTHER_DEDUCTION_TYPES
    )

    total_deductions = total_contributions + withholding_tax + sum(others.values(), ZERO)
    adjustment = money(adjustment)
    net_pay = gross_pay + adjustment - total_deductions
    if net_pay < 0:
        logger.warning('Deductions exceed gross pay (%s > %s); net pay set to zero',
                       total_deductions, gross_pay + adjustment)
        net_pay = Decimal('0.00')

    return {
        'earnings': breakdown,
        'gross_pay': gross_pay,
        'sss_contribution': sss,
        'philhealth_contribution': philhealth,
        'pagibig_contribution': pagibig,
        'taxable_income': money(taxable_income),
        'withholding_tax': withholding_tax,
        'other_deductions': others,
        'total_deductions': money(total_deductions),
        'adjustment': adjustment,
        'net_pay': money(net_pay),
    }
