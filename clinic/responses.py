"""
JSON Envelope

Every API endpoint answers with `{success, data|error}`.
"""

from flask import jsonify, request


def success(data=None, status=200, **extra):
    """Build a success envelope. Extra keyword arguments (message, total)
    are added at the top level next to `data`."""
    payload = {'success': True}
    if data is not None:
        payload['data'] = data
    payload.update(extra)
    return jsonify(payload), status


def error(message, status=400):
    return jsonify({'success': False, 'error': message}), status


def register_error_handlers(app):
    """Answer unhandled API errors with the envelope instead of HTML."""

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith('/api/'):
            return error('Not found', 404)
        return e

    @app.errorhandler(405)
    def method_not_allowed(e):
        if request.path.startswith('/api/'):
            return error('Method not allowed', 405)
        return e

    @app.errorhandler(500)
    def internal_error(e):
        # Original exception is logged by Flask before this handler runs
        if request.path.startswith('/api/'):
            return error('Internal server error', 500)
        return e
