from datetime import date, timedelta
from decimal import Decimal

from phpayroll.attendance.calculator import DailyAttendance
from phpayroll.attendance.day_types import DayType
from phpayroll.payroll import premiums
from phpayroll.payroll.calculator import PayProfile, aggregate_earnings, compute_payslip

START = date(2025, 6, 2)
STAFF = PayProfile(hourly_rate=Decimal('100'), daily_rate=Decimal('800'), position='Room Attendant')


def day(offset=0, day_type=DayType.REGULAR, regular=8, overtime=0, night_diff=0):
    return DailyAttendance(START + timedelta(days=offset), day_type, regular, overtime, night_diff)


def test_regular_day_with_overtime_and_night_hours():
    breakdown = aggregate_earnings(STAFF, [day(overtime=2, night_diff=1)])
    assert breakdown[premiums.BASIC].amount == Decimal('800.00')
    assert breakdown[premiums.REGULAR_OVERTIME].amount == Decimal('250.00')
    assert breakdown[premiums.NIGHT_DIFFERENTIAL].amount == Decimal('10.00')
    assert breakdown[premiums.REGULAR_NIGHT_DIFF_OT].amount == Decimal('10.00')
    assert breakdown.total_gross_pay == Decimal('1070.00')
    assert breakdown.basic_salary == Decimal('800.00')
    assert breakdown.total_premiums == Decimal('270.00')


def test_account_supervisor_earns_no_night_differential():
    for position in ('Account Supervisor', 'senior account supervisor'):
        profile = PayProfile(Decimal('100'), Decimal('800'), position)
        breakdown = aggregate_earnings(profile, [
            day(0, overtime=2, night_diff=1),
            day(1, DayType.REST_DAY, night_diff=2),
        ])
        for component in premiums.NIGHT_DIFF_COMPONENTS:
            assert breakdown[component].amount == 0
        assert breakdown[premiums.REGULAR_OVERTIME].amount == Decimal('250.00')


def test_holiday_and_rest_day_premiums():
    breakdown = aggregate_earnings(STAFF, [
        day(0, DayType.REGULAR_HOLIDAY),
        day(1, DayType.NON_WORKING_HOLIDAY),
        day(2, DayType.REST_DAY, overtime=1),
    ])
    assert breakdown[premiums.LEGAL_HOLIDAY].amount == Decimal('800.00')
    assert breakdown[premiums.SPECIAL_HOLIDAY].amount == Decimal('240.00')
    assert breakdown[premiums.REST_DAY].amount == Decimal('240.00')
    assert breakdown[premiums.REST_DAY_OT].amount == Decimal('169.00')
    assert breakdown[premiums.BASIC].amount == 0


def test_days_worked_and_hour_totals():
    breakdown = aggregate_earnings(STAFF, [
        day(0),
        day(1, regular=4, overtime=1),
        day(2, DayType.REGULAR_HOLIDAY),
        day(3, DayType.REST_DAY),
        day(4, DayType.NON_WORKING_HOLIDAY, regular=3),
    ])
    assert breakdown.days_worked == 2
    assert breakdown.total_regular_hours == 28
    assert breakdown.total_hours == 32


def test_working_day_off_hours():
    breakdown = aggregate_earnings(STAFF, [], working_day_off_hours=4)
    assert breakdown[premiums.WORKING_DAY_OFF].hours == 4
    assert breakdown[premiums.WORKING_DAY_OFF].amount == Decimal('520.00')


def test_breakdown_lists_every_component_in_order():
    data = aggregate_earnings(STAFF, [day()]).to_dict()
    assert list(data['components']) == list(premiums.EARNING_COMPONENTS)
    assert data['components'][premiums.BASIC] == {'hours': Decimal('8'), 'amount': Decimal('800.00')}


def test_payslip_deductions_and_adjustment():
    attendance = [day(offset) for offset in range(10)]
    payslip = compute_payslip(STAFF, attendance, other_deductions={'vale': '500'}, adjustment='100')

    assert payslip['gross_pay'] == Decimal('8000.00')
    assert payslip['sss_contribution'] == Decimal('437.50')
    assert payslip['philhealth_contribution'] == Decimal('220.00')
    assert payslip['pagibig_contribution'] == Decimal('50.00')
    assert payslip['taxable_income'] == Decimal('7292.50')
    assert payslip['withholding_tax'] == Decimal('0.00')
    assert payslip['other_deductions']['vale'] == Decimal('500.00')
    assert payslip['other_deductions']['sss_loan'] == Decimal('0.00')
    assert payslip['total_deductions'] == Decimal('1207.50')
    assert payslip['net_pay'] == Decimal('6892.50')


def test_withholding_tax_on_high_earner():
    profile = PayProfile(hourly_rate=Decimal('1000'), daily_rate=Decimal('8000'), position='Manager')
    payslip = compute_payslip(profile, [day(offset) for offset in range(10)])

    assert payslip['gross_pay'] == Decimal('80000.00')
    # SSS capped at 35000 MSC
    assert payslip['sss_contribution'] == Decimal('875.00')
    assert payslip['philhealth_contribution'] == Decimal('2200.00')
    assert payslip['taxable_income'] == Decimal('76875.00')
    assert payslip['withholding_tax'] == Decimal('11093.80')


def test_net_pay_never_negative(caplog):
    payslip = compute_payslip(STAFF, [day()], other_deductions={'uniform_ppe': 2000})
    assert payslip['net_pay'] == Decimal('0.00')
    assert 'net pay set to zero' in caplog.text


def test_negative_other_deductions_are_ignored():
    payslip = compute_payslip(STAFF, [day()], other_deductions={'vale': -300})
    assert payslip['other_deductions']['vale'] == Decimal('0.00')


def test_rest_day_holidays_count_as_days_worked():
    attendance = [
        day(0, DayType.REST_DAY_REGULAR_HOLIDAY, overtime=1, night_diff=2),
        day(1, DayType.REST_DAY_NON_WORKING_HOLIDAY, overtime=1, night_diff=2),
    ]
    breakdown = aggregate_earnings(STAFF, attendance)
    assert breakdown.days_worked == 2
    assert breakdown[premiums.LEGAL_HOLIDAY].amount == Decimal('1280.00')
    assert breakdown[premiums.LEGAL_HOLIDAY_ON_REST_DAY_OT].amount == Decimal('338.00')
    assert breakdown[premiums.LEGAL_HOLIDAY_ND].amount == Decimal('20.00')
    assert breakdown[premiums.SPECIAL_HOLIDAY].amount == Decimal('400.00')
    assert breakdown[premiums.SPECIAL_HOLIDAY_ON_REST_DAY_OT].amount == Decimal('195.00')
    assert breakdown[premiums.SPECIAL_HOLIDAY_ND].amount == Decimal('20.00')
    assert breakdown[premiums.REGULAR_NIGHT_DIFF_OT].amount == 0

    supervisor = PayProfile(Decimal('100'), Decimal('800'), 'Account Supervisor')
    breakdown = aggregate_earnings(supervisor, attendance)
    assert breakdown.days_worked == 2
    assert breakdown[premiums.LEGAL_HOLIDAY].amount == Decimal('1280.00')
    assert breakdown[premiums.SPECIAL_HOLIDAY].amount == Decimal('400.00')
    for component in premiums.NIGHT_DIFF_COMPONENTS:
        assert breakdown[component].amount == 0
