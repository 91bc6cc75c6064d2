# phpayroll/auth/access.py

from functools import wraps
from flask import current_app, jsonify
from flask_login import login_required, current_user

ADMIN = 'admin'
HR = 'hr'
ACCOUNT_MANAGER = 'account_manager'


def current_role():
    """Role of the signed-in user, served from the application's role cache."""
    cache = current_app.extensions['role_cache']
    role = cache.get(current_user.id)
    if role is None:
        role = current_user.role
        cache.set(current_user.id, role)
    return role


# --- DECORATORS ---
def role_required(*roles):
    def decorator(f):
        @login_required
        @wraps(f)
        def wrapper(*args, **kwargs):
            role = current_role()
            if role == ADMIN or role in roles:
                return f(*args, **kwargs)
            current_app.logger.info('Access denied to %s for user %s (%s)', f.__name__, current_user.id, role)
            return jsonify({'error': 'Access denied: You do not have permission to view this resource.'}), 403
        return wrapper
    return decorator


def salary_access_required(f):
    """Payslip and earnings data: HR and admins only, never account managers."""
    return role_required(HR)(f)
