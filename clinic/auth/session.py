"""
Admin Session Cookie

The admin session is a single cookie whose value is a fixed sentinel.
Any other value, or no cookie at all, means "not logged in".
"""

from flask import current_app, request as current_request


def cookie_name(config=None):
    config = config or current_app.config
    return config['ADMIN_COOKIE_NAME']


def cookie_options(config=None):
    """Attributes used when issuing the session cookie."""
    config = config or current_app.config
    return {
        'httponly': True,
        'secure': bool(config.get('IS_PRODUCTION')),
        'samesite': 'Lax',
        'max_age': config['ADMIN_COOKIE_MAX_AGE'],
        'path': '/',
    }


def set_session_cookie(response, config=None):
    config = config or current_app.config
    response.set_cookie(
        cookie_name(config),
        config['ADMIN_COOKIE_VALUE'],
        **cookie_options(config)
    )
    return response


def clear_session_cookie(response, config=None):
    """Overwrite the cookie with an empty value that expires immediately."""
    config = config or current_app.config
    options = cookie_options(config)
    options['max_age'] = 0
    response.set_cookie(cookie_name(config), '', **options)
    return response


def is_authenticated(request=None, config=None):
    config = config or current_app.config
    request = request or current_request
    return request.cookies.get(cookie_name(config)) == config['ADMIN_COOKIE_VALUE']
