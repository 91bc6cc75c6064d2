# phpayroll/attendance/routes.py

from datetime import datetime, time, timedelta
from flask import current_app, jsonify, request, abort
from phpayroll.attendance import bp
from phpayroll import db
from phpayroll.auth.access import role_required, HR, ACCOUNT_MANAGER
from phpayroll.models.user import Employee
from phpayroll.models.timekeeping import TimeClockEntry, Holiday as HolidayRow, EmployeeSchedule
from .calculator import ClockEntry, HOLIDAY_LOOKBACK_DAYS, generate_timesheet, validate_clock_entries
from .day_types import Holiday, build_rest_day_schedule
from .forms import PayPeriodForm, ClockValidationForm


def get_employee_or_404(employee_id):
    employee = db.session.get(Employee, employee_id)
    if employee is None:
        abort(404)
    return employee


def load_clock_entries(employee, start, end):
    """Clock entries whose UTC clock-in can fall on a business date in [start, end]."""
    lower = datetime.combine(start - timedelta(days=1), time.min)
    upper = datetime.combine(end + timedelta(days=1), time.max)
    rows = TimeClockEntry.query.filter(
        TimeClockEntry.employee_id == employee.id,
        TimeClockEntry.clock_in_time >= lower,
        TimeClockEntry.clock_in_time <= upper
    ).order_by(TimeClockEntry.clock_in_time).all()
    return [ClockEntry.from_row(row) for row in rows]


def load_timesheet(employee, period_start, period_end):
    """Fetches the period's rows and runs the timesheet generator over them."""
    lookback_start = period_start - timedelta(days=HOLIDAY_LOOKBACK_DAYS)

    holidays = [Holiday.from_row(row) for row in HolidayRow.query.filter(
        HolidayRow.holiday_date >= lookback_start,
        HolidayRow.holiday_date <= period_end
    ).order_by(HolidayRow.id).all()]

    schedules = employee.schedules.filter(
        EmployeeSchedule.schedule_date >= lookback_start,
        EmployeeSchedule.schedule_date <= period_end
    ).all()

    return generate_timesheet(
        load_clock_entries(employee, lookback_start, period_end),
        period_start,
        period_end,
        holidays,
        rest_days=build_rest_day_schedule(schedules) or None,
        eligible_for_ot=employee.eligible_for_ot,
        eligible_for_night_diff=employee.eligible_for_night_diff,
        special_rest_day_policy=employee.special_rest_day_policy,
        tz_name=current_app.config['TIMEZONE'],
    )


@bp.route('/timesheet/<int:employee_id>')
@role_required(HR, ACCOUNT_MANAGER)
def timesheet(employee_id):
    employee = get_employee_or_404(employee_id)
    form = PayPeriodForm(formdata=request.args)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    result = load_timesheet(employee, form.period_start.data, form.period_end.data)
    return jsonify({
        'employee_id': employee.employee_id_number,
        'period_start': form.period_start.data.isoformat(),
        'period_end': form.period_end.data.isoformat(),
        'attendance': [day.to_dict() for day in result['attendance']],
        'totals': result['totals'],
    })


@bp.route('/validate/<int:employee_id>')
@role_required(HR, ACCOUNT_MANAGER)
def validate_entries(employee_id):
    employee = get_employee_or_404(employee_id)
    form = ClockValidationForm(formdata=request.args)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    start, end = form.period_start.data, form.period_end.data
    report = validate_clock_entries(
        load_clock_entries(employee, start, end),
        start,
        end,
        form.weekdays,
        tz_name=current_app.config['TIMEZONE'],
    )
    if not report['is_valid']:
        current_app.logger.info(
            'Clock entries for %s: %d missing, %d incomplete',
            employee.employee_id_number, len(report['missing_days']), len(report['incomplete_entries'])
        )
    return jsonify({
        'employee_id': employee.employee_id_number,
        'is_valid': report['is_valid'],
        'missing_days': [day.isoformat() for day in report['missing_days']],
        'incomplete_entries': [day.isoformat() for day in report['incomplete_entries']],
    })
