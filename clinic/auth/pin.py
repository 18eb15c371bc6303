"""
Admin PIN verification
"""

import logging

from flask import current_app

logger = logging.getLogger(__name__)


def verify_admin_pin(pin, admin_pin=None):
    """Return True if `pin` matches the configured admin PIN.

    The configured PIN comes from `ADMIN_PIN` in the app config unless
    passed explicitly. An unset PIN is a server configuration problem:
    it is logged and every attempt fails.
    """
    if admin_pin is None:
        admin_pin = current_app.config.get('ADMIN_PIN')

    if not admin_pin:
        logger.error('ADMIN_PIN is not configured; admin login is disabled')
        return False

    if not isinstance(pin, str) or not pin:
        return False

    return pin == admin_pin
