from functools import wraps
from flask import jsonify
from hospital_dashboard.exceptions import PermissionDenied
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.session_service import SessionService
from hospital_dashboard.utils.permissions import Action, can_perform, DENIAL_MESSAGES


def get_current_session():
    """Returns the logged-in Session, or None."""
    return SessionService(get_store()).current_session()


def login_required(f):
    """
    Decorator to require an authenticated session.
    Usage: @login_required
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if get_current_session() is None:
            return jsonify({
                'success': False,
                'error': 'Authentication required'
            }), 401
        return f(*args, **kwargs)
    return decorated_function


def require_permission(action):
    """
    Decorator to consult the authorization policy before the view runs.
    Usage: @require_permission(Action.DELETE_PATIENT)
    Denied requests never reach the repositories.
    """
    action = Action(action)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session = get_current_session()
            if session is None:
                return jsonify({
                    'success': False,
                    'error': 'Authentication required'
                }), 401

            if not can_perform(session.role, action):
                return jsonify({
                    'success': False,
                    'error': PermissionDenied.default_message,
                    'message': DENIAL_MESSAGES[action]
                }), PermissionDenied.status_code

            return f(*args, **kwargs)
        return decorated_function
    return decorator
