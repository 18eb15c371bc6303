"""
Site Blueprint

Public pages and the public booking API.
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__)

from clinic.site import routes  # noqa: E402, F401
