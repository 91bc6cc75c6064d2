from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from phpayroll import create_app, db
from phpayroll.models.user import User, Employee
from phpayroll.models.timekeeping import TimeClockEntry, Holiday


# June 2025: the 1st is a Sunday, the 12th (Independence Day) a Thursday
WEEK_ONE = [date(2025, 6, day) for day in range(2, 7)]
INDEPENDENCE_DAY = date(2025, 6, 12)


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _add_user(username, role):
    user = User(username=username, role=role, full_name=username.split('@')[0])
    user.set_password('secret123')
    db.session.add(user)
    return user


@pytest.fixture
def users(app):
    users = {
        'hr': _add_user('hr@payroll.ph', 'hr'),
        'account_manager': _add_user('manager@payroll.ph', 'account_manager'),
        'employee': _add_user('juan@payroll.ph', 'employee'),
    }
    db.session.commit()
    return users


@pytest.fixture
def employee(app, users):
    emp = Employee(
        user_id=users['employee'].id,
        employee_id_number='GP-0001',
        full_name='Juan Dela Cruz',
        position='Room Attendant',
        rate_per_day=Decimal('800.00'),
        rate_per_hour=Decimal('100.000'),
    )
    db.session.add(emp)
    db.session.flush()

    # 08:00-17:00 Manila time is 00:00-09:00 UTC
    for day in WEEK_ONE:
        clock_in = datetime.combine(day, datetime.min.time())
        db.session.add(TimeClockEntry(
            employee_id=emp.id,
            clock_in_time=clock_in,
            clock_out_time=clock_in + timedelta(hours=9),
            regular_hours=Decimal('8.00'),
            overtime_hours=Decimal('0.00'),
            night_diff_hours=Decimal('0.00'),
            status='approved',
        ))
    db.session.add(Holiday(name='Independence Day', holiday_date=INDEPENDENCE_DAY, holiday_type='regular'))
    db.session.commit()
    return emp


@pytest.fixture
def sign_in(client):
    def _sign_in(username, password='secret123'):
        return client.post('/auth/signin', json={'email': username, 'password': password})
    return _sign_in
