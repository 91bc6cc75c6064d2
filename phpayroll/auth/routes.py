# phpayroll/auth/routes.py

from flask import jsonify
from flask_login import current_user, login_user, logout_user, login_required
from phpayroll.auth import bp
from phpayroll.models.user import User
from .access import current_role
from .forms import LoginForm


@bp.route('/signin', methods=['POST'])
def signin():
    if current_user.is_authenticated:
        return jsonify({'username': current_user.username, 'role': current_role()})

    form = LoginForm()
    if not form.validate_on_submit():
        return jsonify({'errors': form.errors}), 400

    user = User.query.filter_by(username=form.email.data).first()
    if user is None or not user.check_password(form.password.data):
        return jsonify({'error': 'Invalid email or password.'}), 401
    if not login_user(user, remember=False):
        return jsonify({'error': 'This account is inactive.'}), 403

    return jsonify({'username': user.username, 'role': current_role()})


@bp.route('/signout', methods=['POST'])
@login_required
def signout():
    logout_user()
    return jsonify({'signed_out': True})
