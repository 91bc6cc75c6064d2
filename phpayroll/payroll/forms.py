# phpayroll/payroll/forms.py

from wtforms import DecimalField
from wtforms.validators import Optional, NumberRange
from phpayroll.attendance.forms import PayPeriodForm
from .calculator import OTHER_DEDUCTION_TYPES


class PayslipForm(PayPeriodForm):
    """Pay period plus the deductions and adjustment entered on the payslip."""
    vale = DecimalField('Vale', places=2, validators=[Optional(), NumberRange(min=0)])
    uniform_ppe = DecimalField('Uniform/PPE', places=2, validators=[Optional(), NumberRange(min=0)])
    sss_loan = DecimalField('SSS Loan', places=2, validators=[Optional(), NumberRange(min=0)])
    sss_calamity_loan = DecimalField('SSS Calamity Loan', places=2, validators=[Optional(), NumberRange(min=0)])
    pagibig_loan = DecimalField('Pag-IBIG Loan', places=2, validators=[Optional(), NumberRange(min=0)])
    pagibig_calamity_loan = DecimalField('Pag-IBIG Calamity Loan', places=2, validators=[Optional(), NumberRange(min=0)])
    adjustment = DecimalField('Adjustment', places=2, validators=[Optional()])
    working_day_off_hours = DecimalField('Working Day Off Hours', places=2, validators=[Optional(), NumberRange(min=0)])

    def other_deductions(self):
        return {name: getattr(self, name).data for name in OTHER_DEDUCTION_TYPES}
