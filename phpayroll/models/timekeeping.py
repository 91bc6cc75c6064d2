# phpayroll/models/timekeeping.py

from phpayroll import db
from datetime import datetime, time
from decimal import Decimal


class TimeClockEntry(db.Model):
    __tablename__ = 'time_clock_entry'

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey('employee.id'), nullable=False, index=True)
    # Stored in UTC
    clock_in_time = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    clock_out_time = db.Column(db.DateTime, nullable=True)
    regular_hours = db.Column(db.Numeric(5, 2), nullable=True)
    overtime_hours = db.Column(db.Numeric(5, 2), nullable=True)
    night_diff_hours = db.Column(db.Numeric(5, 2), nullable=True)
    # pending, approved, auto_approved, clocked_out
    status = db.Column(db.String(20), nullable=False, default='pending')

    employee = db.relationship('Employee', back_populates='clock_entries')

    def __repr__(self):
        return f'<ClockEntry {self.status} at {self.clock_in_time} by {self.employee_id}>'


class Holiday(db.Model):
    __tablename__ = 'holiday'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    holiday_date = db.Column(db.Date, nullable=False, index=True)
    # regular, non-working
    holiday_type = db.Column(db.String(20), default='regular')

    def __repr__(self):
        return f'<Holiday {self.name} on {self.holiday_date}>'


class EmployeeSchedule(db.Model):
    __tablename__ = 'employee_schedule'

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey('employee.id'), nullable=False)
    schedule_date = db.Column(db.Date, nullable=False)
    start_time = db.Column(db.Time, nullable=False, default=time(8, 0, 0))
    end_time = db.Column(db.Time, nullable=False, default=time(17, 0, 0))
    work_hours_per_day = db.Column(db.Numeric(4, 2), nullable=False, default=Decimal('8.00'))
    day_off = db.Column(db.Boolean, nullable=False, default=False)

    employee = db.relationship('Employee', back_populates='schedules')

    __table_args__ = (db.UniqueConstraint('employee_id', 'schedule_date', name='_employee_schedule_date_uc'),)

    def __repr__(self):
        return f'<Schedule {self.schedule_date} for {self.employee_id}>'
