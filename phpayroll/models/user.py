# phpayroll/models/user.py

from phpayroll import db
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin

class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), index=True, unique=True)
    password_hash = db.Column(db.String(256))
    # admin, hr, account_manager, employee
    role = db.Column(db.String(20), default='employee')
    full_name = db.Column(db.String(128))
    is_active_account = db.Column(db.Boolean, nullable=False, default=True)

    employee = db.relationship('Employee', back_populates='user', uselist=False)

    @property
    def is_active(self):
        return self.is_active_account

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)
    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
    def __repr__(self):
        return f'<User {self.username}>'


class Employee(db.Model):
    __tablename__ = 'employee'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True)
    employee_id_number = db.Column(db.String(20), index=True, unique=True)
    full_name = db.Column(db.String(128), nullable=False)
    position = db.Column(db.String(64))
    rate_per_day = db.Column(db.Numeric(10, 2), nullable=False)
    rate_per_hour = db.Column(db.Numeric(10, 3), nullable=False)
    status = db.Column(db.String(20), default='Active')

    # Employment classification
    eligible_for_ot = db.Column(db.Boolean, nullable=False, default=True)
    eligible_for_night_diff = db.Column(db.Boolean, nullable=False, default=True)
    special_rest_day_policy = db.Column(db.Boolean, nullable=False, default=False)

    user = db.relationship('User', back_populates='employee')
    clock_entries = db.relationship('TimeClockEntry', back_populates='employee', lazy='dynamic')
    schedules = db.relationship('EmployeeSchedule', back_populates='employee', lazy='dynamic')

    def __repr__(self):
        return f'<Employee {self.employee_id_number}>'
