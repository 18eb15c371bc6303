"""
Auth Routes

POST /api/admin/auth/login   - verify PIN, issue the admin cookie
POST /api/admin/auth/logout  - clear the admin cookie
"""

import logging

from flask import request

from clinic.auth import auth_bp
from clinic.auth.pin import verify_admin_pin
from clinic.auth.session import set_session_cookie, clear_session_cookie
from clinic.responses import success, error

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login with a PIN."""
    try:
        body = request.get_json(silent=True, force=True)
        pin = body.get('pin') if isinstance(body, dict) else None

        if not pin or not isinstance(pin, str):
            return error('PIN is required', 400)

        if not verify_admin_pin(pin):
            logger.info('Rejected admin login from %s', request.remote_addr)
            return error('Invalid PIN', 401)

        response, status = success(message='Logged in')
        set_session_cookie(response)
        logger.info('Admin logged in from %s', request.remote_addr)
        return response, status
    except Exception:
        logger.exception('Admin login failed')
        return error('An error occurred during login', 500)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Admin logout. Succeeds whether or not a session exists."""
    response, status = success(message='Logged out')
    clear_session_cookie(response)
    return response, status
