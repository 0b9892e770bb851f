from flask import Blueprint, jsonify
from hospital_dashboard.utils.http import json_body
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.session_service import SessionService
from hospital_dashboard.services.repositories import UserRepository
from hospital_dashboard.utils.decorators import login_required, get_current_session

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login endpoint - checks the stored users and opens the local session"""
    data = json_body()

    username = str(data.get('username') or '').strip()
    password = str(data.get('password') or '').strip()

    if not username or not password:
        return jsonify({
            'success': False,
            'error': 'Username and password required'
        }), 400

    session = SessionService(get_store()).login(username, password)

    return jsonify({
        'success': True,
        'data': session.to_dict(),
        'message': 'Login successful! Redirecting...'
    }), 200


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout endpoint - clears the session unconditionally"""
    SessionService(get_store()).logout()
    return jsonify({
        'success': True,
        'message': 'Logged out successfully'
    }), 200


@auth_bp.route('/register', methods=['POST'])
def register():
    """
    Register a new user.
    Body: { "username": "first.last", "password": "...", "role": "Doctor" }
    """
    data = json_body()

    # Step 1: Validate required fields
    for field in ('username', 'password', 'role'):
        if not str(data.get(field) or '').strip():
            return jsonify({
                'success': False,
                'error': f'Field "{field}" is required'
            }), 400

    # Step 2: Create the user (format and uniqueness checked by the repository)
    user = UserRepository(get_store()).register(data['username'], data['password'], data['role'])

    return jsonify({
        'success': True,
        'data': {
            'username': user.username,
            'role': user.role,
            'fullName': user.full_name
        },
        'message': 'Registration successful! You can now log in.'
    }), 201


@auth_bp.route('/forgot-password', methods=['POST'])
def forgot_password():
    """
    Demo-grade password recovery.
    Body: { "username": "first.last" }
    """
    data = json_body()
    username = str(data.get('username') or '').strip()
    if not username:
        return jsonify({
            'success': False,
            'error': 'Field "username" is required'
        }), 400

    password = SessionService(get_store()).recover_password(username)

    return jsonify({
        'success': True,
        'title': 'Password Recovery',
        'message': f'Your password for {username} is: "{password}". Please log in.'
    }), 200


@auth_bp.route('/me', methods=['GET'])
@login_required
def get_current_user():
    """Get the logged-in user's session record"""
    session = get_current_session()
    return jsonify({
        'success': True,
        'data': session.to_dict()
    }), 200


@auth_bp.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    """
    Update full name and/or password; an omitted fullName is left unchanged.
    Body: { "fullName": "...", "newPassword": "...", "confirmPassword": "..." }
    """
    data = json_body()
    session = SessionService(get_store()).update_profile(
        data.get('fullName'),
        data.get('newPassword', ''),
        data.get('confirmPassword', ''),
    )
    return jsonify({
        'success': True,
        'data': session.to_dict(),
        'message': 'Profile updated successfully!'
    }), 200
