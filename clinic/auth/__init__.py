"""
Admin Auth Blueprint

PIN login and logout for the admin panel. The session is a single
sentinel cookie; see clinic.auth.session.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from clinic.auth import routes  # noqa: E402, F401
