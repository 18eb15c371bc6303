"""
Admin Blueprints

Admin pages live under /admin and are protected by the session guard
registered in the app factory. The JSON API under /api/admin checks the
same cookie per endpoint.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)
admin_api_bp = Blueprint('admin_api', __name__)

from clinic.admin import routes, api  # noqa: E402, F401
