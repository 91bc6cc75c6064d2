# run.py

import os
from phpayroll import create_app, db
from phpayroll.models.user import User, Employee
from phpayroll.models.timekeeping import TimeClockEntry, Holiday, EmployeeSchedule


app = create_app(os.environ.get('FLASK_ENV', 'default'))

@app.shell_context_processor
def make_shell_context():
    """Adds database instance and models to the Flask shell."""
    return dict(db=db, User=User, Employee=Employee, TimeClockEntry=TimeClockEntry, Holiday=Holiday, EmployeeSchedule=EmployeeSchedule)

if __name__ == '__main__':
    app.run()
