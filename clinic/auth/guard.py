"""
Admin Session Guard

Runs before every request. Pages under /admin need the admin cookie;
the login page itself is the one exception, and is skipped for
sessions that are already logged in.
"""

from functools import wraps
from urllib.parse import quote

from flask import current_app, redirect, request

from clinic.auth.session import is_authenticated
from clinic.responses import error


def is_protected_path(path, prefix='/admin'):
    return path == prefix or path.startswith(prefix + '/')


def resolve_redirect(path, authenticated, prefix='/admin', login_path='/admin/login'):
    """Return the location to redirect to, or None to let the request through."""
    if not is_protected_path(path, prefix):
        return None

    if path == login_path:
        return prefix if authenticated else None

    if not authenticated:
        return f"{login_path}?redirect={quote(path, safe='/')}"
    return None


def admin_session_guard():
    """`before_request` hook enforcing the admin cookie on /admin pages."""
    config = current_app.config
    location = resolve_redirect(
        request.path,
        is_authenticated(request),
        prefix=config['ADMIN_PREFIX'],
        login_path=config['ADMIN_LOGIN_PATH'],
    )
    if location is not None:
        return redirect(location)
    return None


def admin_api_required(f):
    """Decorator for admin JSON endpoints: 401 envelope instead of a redirect."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not is_authenticated(request):
            return error('Unauthorized', 401)
        return f(*args, **kwargs)
    return wrapper
