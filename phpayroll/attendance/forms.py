# phpayroll/attendance/forms.py

from flask_wtf import FlaskForm
from wtforms import DateField, StringField
from wtforms.validators import DataRequired, Optional, Regexp, ValidationError


class PayPeriodForm(FlaskForm):
    """Pay period bounds, read from the query string."""
    period_start = DateField('Period Start', format='%Y-%m-%d', validators=[DataRequired()])
    period_end = DateField('Period End', format='%Y-%m-%d', validators=[DataRequired()])

    def validate_period_end(self, field):
        if self.period_start.data and field.data and field.data < self.period_start.data:
            raise ValidationError('Period end must be on or after period start.')


class ClockValidationForm(PayPeriodForm):
    # Comma-separated weekday numbers, Monday = 0
    working_days = StringField('Working Days', default='0,1,2,3,4',
                               validators=[Optional(), Regexp(r'^[0-6](,[0-6])*$')])

    @property
    def weekdays(self):
        return sorted({int(day) for day in (self.working_days.data or '0,1,2,3,4').split(',')})
