# phpayroll/payroll/routes.py

from flask import current_app, jsonify, request
from phpayroll.payroll import bp
from phpayroll.auth.access import salary_access_required
from phpayroll.attendance.routes import get_employee_or_404, load_timesheet
from .calculator import PayProfile, aggregate_earnings, compute_payslip
from .deductions import calculate_all_contributions
from .forms import PayslipForm
from phpayroll.attendance.forms import PayPeriodForm


def _period(form):
    return {
        'period_start': form.period_start.data.isoformat(),
        'period_end': form.period_end.data.isoformat(),
    }


# --- Screen view: detailed earnings breakdown ---
@bp.route('/breakdown/<int:employee_id>')
@salary_access_required
def earnings_breakdown(employee_id):
    employee = get_employee_or_404(employee_id)
    form = PayPeriodForm(formdata=request.args)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    timesheet = load_timesheet(employee, form.period_start.data, form.period_end.data)
    profile = PayProfile.from_employee(employee)
    breakdown = aggregate_earnings(profile, timesheet['attendance'])

    return jsonify({
        'employee_id': employee.employee_id_number,
        'full_name': employee.full_name,
        'rate_per_day': profile.daily_rate,
        'rate_per_hour': profile.hourly_rate,
        **_period(form),
        **breakdown.to_dict(),
    })


# --- Print view: full payslip with deductions and net pay ---
@bp.route('/payslip/<int:employee_id>')
@salary_access_required
def payslip(employee_id):
    employee = get_employee_or_404(employee_id)
    form = PayslipForm(formdata=request.args)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    timesheet = load_timesheet(employee, form.period_start.data, form.period_end.data)
    result = compute_payslip(
        PayProfile.from_employee(employee),
        timesheet['attendance'],
        other_deductions=form.other_deductions(),
        adjustment=form.adjustment.data or 0,
        working_days_per_month=current_app.config['WORKING_DAYS_PER_MONTH'],
        working_day_off_hours=form.working_day_off_hours.data or 0,
    )
    current_app.logger.info('Payslip computed for %s (%s to %s): net %s',
                            employee.employee_id_number, form.period_start.data,
                            form.period_end.data, result['net_pay'])

    result['earnings'] = result['earnings'].to_dict()
    return jsonify({
        'employee_id': employee.employee_id_number,
        'full_name': employee.full_name,
        'position': employee.position,
        **_period(form),
        **result,
    })


@bp.route('/contributions/<int:employee_id>')
@salary_access_required
def contributions(employee_id):
    employee = get_employee_or_404(employee_id)
    return jsonify({
        'employee_id': employee.employee_id_number,
        **calculate_all_contributions(
            employee.rate_per_day,
            current_app.config['WORKING_DAYS_PER_MONTH']
        ),
    })
